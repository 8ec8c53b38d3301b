"""API — camada de borda do conector ZapSign.

Responsabilidades:
- Expor o endpoint HTTP de execução de itens
- Validar parâmetros antes de qualquer chamada de rede
- Construir payloads para a API ZapSign
- Falar HTTP com a ZapSign e classificar erros

Subpastas:
- connectors/: cliente HTTP da ZapSign
- payload_builders/: construção de bodies a partir dos parâmetros
- validators/: validação de parâmetros e limites
- routes/: endpoints HTTP (execute, health)

NÃO PODE conter: despacho de operações, remediação, orquestração de itens.
"""
