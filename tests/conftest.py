"""Configuração do pytest para o conector ZapSign."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import (  # noqa: E402
    ZapSignSettings,
    get_base_settings,
    get_zapsign_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings são cacheadas; cada teste começa do ambiente atual."""
    get_base_settings.cache_clear()
    get_zapsign_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_zapsign_settings.cache_clear()


@pytest.fixture
def zapsign_settings() -> ZapSignSettings:
    """Settings explícitas apontando para o sandbox."""
    return ZapSignSettings(
        api_token="test-token",
        environment="sandbox",
        sandbox_api_base_url="https://sandbox.api.zapsign.com.br/",
    )
