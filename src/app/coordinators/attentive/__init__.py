"""Coordinator Attentive: dispatcher de lotes de ações."""

from app.coordinators.attentive.dispatcher import ActionBatch, ActionDispatcher

__all__ = ["ActionBatch", "ActionDispatcher"]
