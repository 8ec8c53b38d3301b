"""Agregador de settings do conector ZapSign.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.zapsign import (
    ZAPSIGN_API_BASE_URL,
    ZAPSIGN_SANDBOX_API_BASE_URL,
    ZapSignEnvironment,
    ZapSignSettings,
    get_zapsign_settings,
)

__all__ = [
    # Constants
    "DEFAULT_SERVICE_NAME",
    "ZAPSIGN_API_BASE_URL",
    "ZAPSIGN_SANDBOX_API_BASE_URL",
    # Base
    "BaseSettings",
    "Environment",
    # ZapSign
    "ZapSignEnvironment",
    "ZapSignSettings",
    "get_base_settings",
    "get_zapsign_settings",
]
