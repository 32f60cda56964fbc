"""API: camada de borda e adapter da Attentive.

Responsabilidades:
- Receber requests do host (ações) e da Attentive (webhooks)
- Validar assinaturas e payloads
- Normalizar respostas para registros de saída
- Construir payloads para a API Attentive
- Aplicar validações e limites de API

Subpastas:
- connectors/: adapter HTTP da Attentive
- normalizers/: conversão de respostas e eventos externos
- payload_builders/: construção de bodies para a API
- validators/: validação de telefones, identificadores e limites
- routes/: endpoints HTTP (ações, webhook, health)

NÃO PODE conter: regras de resource, orquestração de lotes.
"""
