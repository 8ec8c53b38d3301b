"""Payload builders — construção de payloads para APIs externas.

Estrutura:
- zapsign/: API de assinatura eletrônica ZapSign

Cada serviço tem seus próprios builders, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
