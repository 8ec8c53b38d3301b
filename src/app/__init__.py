"""App — orquestração, casos de uso e infraestrutura do conector.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: handlers por (resource, operation) e execução de itens
- infra/: implementações concretas de IO (download de arquivos)
- protocols/: contratos/interfaces
- observability/: correlation id, contexto de item, métricas
- constants/: enums de resource, operation e valores da API

Padrão: app executa; api adapta; utils apoia.
"""
