"""Use cases Attentive: um módulo por resource + ciclo de vida do trigger."""

from app.use_cases.attentive.base import ResourceHandler
from app.use_cases.attentive.custom_attribute import CustomAttributeHandler
from app.use_cases.attentive.custom_event import CustomEventHandler
from app.use_cases.attentive.ecommerce import EcommerceHandler
from app.use_cases.attentive.journey import JourneyHandler
from app.use_cases.attentive.keyword import KeywordHandler
from app.use_cases.attentive.message import MessageHandler
from app.use_cases.attentive.segment import SegmentHandler
from app.use_cases.attentive.sign_up_unit import SignUpUnitHandler
from app.use_cases.attentive.subscriber import SubscriberHandler
from app.use_cases.attentive.webhook import WebhookHandler
from app.use_cases.attentive.webhook_subscription import WebhookSubscriptionManager

RESOURCE_HANDLER_CLASSES: tuple[type[ResourceHandler], ...] = (
    SubscriberHandler,
    MessageHandler,
    CustomEventHandler,
    CustomAttributeHandler,
    EcommerceHandler,
    SegmentHandler,
    JourneyHandler,
    SignUpUnitHandler,
    KeywordHandler,
    WebhookHandler,
)

__all__ = [
    "RESOURCE_HANDLER_CLASSES",
    "CustomAttributeHandler",
    "CustomEventHandler",
    "EcommerceHandler",
    "JourneyHandler",
    "KeywordHandler",
    "MessageHandler",
    "ResourceHandler",
    "SegmentHandler",
    "SignUpUnitHandler",
    "SubscriberHandler",
    "WebhookHandler",
    "WebhookSubscriptionManager",
]
