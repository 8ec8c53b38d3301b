"""Validadores de pré-condição para operações ZapSign.

Falham localmente, antes de qualquer chamada de rede, com mensagens
escritas para o usuário final.

Uso:
    from api.validators.zapsign import validate_signer_entries

    validate_signer_entries(signers)
"""

from api.validators.zapsign.common import (
    is_uuid_like,
    is_valid_base64,
    is_valid_email,
    is_valid_iso_date,
    is_valid_phone,
    is_valid_url,
    require_choice,
    require_text,
    require_url,
)
from api.validators.zapsign.signers import validate_signer, validate_signer_entries
from utils.errors import ValidationError

__all__ = [
    "ValidationError",
    "is_uuid_like",
    "is_valid_base64",
    "is_valid_email",
    "is_valid_iso_date",
    "is_valid_phone",
    "is_valid_url",
    "require_choice",
    "require_text",
    "require_url",
    "validate_signer",
    "validate_signer_entries",
]
