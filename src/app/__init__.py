"""App: orquestração e casos de uso do conector.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- coordinators/: dispatcher de lotes (resource + operation por item)
- use_cases/: um módulo por resource da Attentive
- domain/: contexto de operação e registros de resultado
- protocols/: contratos/interfaces
- observability/: correlation_id para logs estruturados
- constants/: enums e tabela de parâmetros

Padrão: app executa; api adapta; config configura; utils apoia.
"""
