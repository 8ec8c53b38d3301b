"""Testes da tabela de orientações e da leitura de parâmetros."""

from __future__ import annotations

import pytest

from api.connectors.zapsign.api_errors import ApiError, ZapSignApiError
from app.use_cases.zapsign import Parameters
from app.use_cases.zapsign.params import path_token
from app.use_cases.zapsign.remediation import apply_remediation, find_remediation
from utils.errors import ValidationError


class TestRemediation:
    """Testes para find_remediation e apply_remediation."""

    def test_lookup_by_resource_operation_status(self) -> None:
        assert "402 Payment Required" in find_remediation("timestamp", "add", 402)
        assert find_remediation("timestamp", "add", 500) is None
        assert find_remediation("document", "get", 404) is None
        assert find_remediation("document", "refuse", None) is None

    def test_enriched_error_keeps_details_and_api_error(self) -> None:
        api_error = ApiError(status=400, vendor_message="Documento finalizado")
        error = ZapSignApiError("Bad Request (400): Documento finalizado", api_error)

        enriched = apply_remediation("document", "cancel", error)

        assert str(enriched).startswith("Document cannot be refused")
        assert str(enriched).endswith("Details: Bad Request (400): Documento finalizado")
        assert enriched.api_error is api_error

    def test_error_without_remediation_is_returned_as_is(self) -> None:
        error = ZapSignApiError("Not Found (404)", ApiError(status=404))
        assert apply_remediation("signer", "get", error) is error

    def test_fixed_vendor_message_is_not_enriched(self) -> None:
        error = ZapSignApiError(
            "Forbidden (403): ...",
            ApiError(status=403, vendor_code="insufficient_permissions"),
        )
        assert apply_remediation("partnership", "createAccount", error) is error


class TestParameters:
    """Testes para Parameters."""

    def test_get_str_trims_and_defaults(self) -> None:
        params = Parameters({"name": "  Ana ", "blank": "  "})
        assert params.get_str("name") == "Ana"
        assert params.get_str("blank", "x") == "x"
        assert params.get_str("missing") == ""

    def test_get_bool_preserves_absence(self) -> None:
        params = Parameters({"on": "true", "off": False})
        assert params.get_bool("on") is True
        assert params.get_bool("off") is False
        assert params.get_bool("missing") is None
        assert params.get_bool("missing", True) is True

    def test_get_collection_shapes(self) -> None:
        entry = {"name": "Ana"}
        assert Parameters({"s": [entry, "x"]}).get_collection("s") == [entry]
        assert Parameters({"s": {"signer": [entry]}}).get_collection("s", "signer") == [entry]
        assert Parameters({"s": entry}).get_collection("s", "signer") == [entry]
        assert Parameters({}).get_collection("s") == []

    def test_get_collection_rejects_scalar(self) -> None:
        with pytest.raises(ValidationError, match="must be a list"):
            Parameters({"s": "Ana"}).get_collection("s")

    def test_get_mapping_parses_json_string(self) -> None:
        assert Parameters({"f": '{"lang": "en"}'}).get_mapping("f") == {"lang": "en"}
        assert Parameters({"f": ""}).get_mapping("f") == {}
        with pytest.raises(ValidationError, match="valid JSON object"):
            Parameters({"f": "{"}).get_mapping("f")
        with pytest.raises(ValidationError, match="must be an object"):
            Parameters({"f": "[1]"}).get_mapping("f")

    def test_path_token(self) -> None:
        assert path_token(" abc/def ") == "abc%2Fdef"
