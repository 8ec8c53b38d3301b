"""Validators — validação de parâmetros antes das chamadas externas.

Estrutura:
- zapsign/: pré-condições das operações ZapSign

Cada serviço tem seus próprios validators, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
