"""Connectors — adapters de borda para APIs externas.

Estrutura:
- zapsign/: API de assinatura eletrônica ZapSign

Cada serviço externo tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
