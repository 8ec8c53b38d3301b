"""Orientações de correção por operação para erros da API.

Tabela única (resource, operation, status) -> texto de orientação,
aplicada pelo dispatcher a qualquer ZapSignApiError. Erros com mensagem
fixa por código do fornecedor (403 conhecidos) não recebem orientação.
"""

from __future__ import annotations

from api.connectors.zapsign.api_errors import ZapSignApiError
from app.constants.zapsign import (
    BackgroundCheckOperation,
    DocumentOperation,
    PartnershipOperation,
    Resource,
    TemplateOperation,
    TimestampOperation,
)

_REFUSE_400 = (
    "Document cannot be refused (400 Bad Request). The document must still be "
    "in progress and must have been created with allow_refuse_signature enabled. "
    "Completed or expired documents cannot be refused."
)

_CREATE_DOCUMENT_400 = (
    "Document creation failed (400 Bad Request). Check that every signer has a "
    "valid email address (unless blank_email is enabled), that the file content "
    "and format are valid and that all required fields are filled."
)

_TEMPLATE_DOCUMENT_400 = (
    "Document creation from template failed (400 Bad Request). Check that the "
    "template token is valid, that the signer name is filled and that the "
    "template variables match the fields defined in the template."
)

_EXTRA_DOCUMENT_TEMPLATE_400 = (
    "Extra document creation from template failed (400 Bad Request). Check that "
    "the template token is valid and that the template variables have valid "
    "names and values."
)

_CHECK_UNAVAILABLE_404 = (
    "Background check feature not available (404). Background checks may not be "
    "included in your ZapSign plan or may require additional permissions. "
    "Contact ZapSign support to enable them for your account."
)

_CHECK_NOT_FOUND_404 = (
    "Background check not found (404). Verify that the check token is correct "
    '(it starts with "CHK"), that the check was created successfully and that '
    "it has finished processing."
)

_PARTNER_FORBIDDEN_403 = (
    "Partner operation failed (403 Forbidden). Your account may not have partner "
    "permissions, or the client account is not part of your partner network. "
    "Contact ZapSign support to enable partner features."
)

_PARTNER_ACCOUNT_400 = (
    "Partner account creation failed (400 Bad Request). Check the country and "
    "language codes, the email format and the phone number format."
)

_PAYMENT_STATUS_400 = (
    "Payment status update failed (400 Bad Request). Check that the client API "
    'token is valid and that the payment status is "adimplente" or "inadimplente".'
)

_TIMESTAMP_402 = (
    "Timestamp addition failed (402 Payment Required). Your plan does not include "
    "timestamps. Contact ZapSign support to add this feature."
)

_TIMESTAMP_400 = (
    "Timestamp addition failed (400 Bad Request). The document URL must be "
    "publicly accessible and point to a PDF or DOCX file under 10MB."
)

REMEDIATIONS: dict[tuple[str, str, int], str] = {
    (Resource.DOCUMENT, DocumentOperation.CANCEL, 400): _REFUSE_400,
    (Resource.DOCUMENT, DocumentOperation.REFUSE, 400): _REFUSE_400,
    (Resource.DOCUMENT, DocumentOperation.CREATE, 400): _CREATE_DOCUMENT_400,
    (Resource.DOCUMENT, DocumentOperation.CREATE_ONE_CLICK, 400): _CREATE_DOCUMENT_400,
    (
        Resource.DOCUMENT,
        DocumentOperation.ADD_EXTRA_DOCUMENT_FROM_TEMPLATE,
        400,
    ): _EXTRA_DOCUMENT_TEMPLATE_400,
    (Resource.TEMPLATE, TemplateOperation.CREATE_DOCUMENT, 400): _TEMPLATE_DOCUMENT_400,
    (
        Resource.BACKGROUND_CHECK,
        BackgroundCheckOperation.CREATE_PERSON,
        404,
    ): _CHECK_UNAVAILABLE_404,
    (
        Resource.BACKGROUND_CHECK,
        BackgroundCheckOperation.CREATE_COMPANY,
        404,
    ): _CHECK_UNAVAILABLE_404,
    (Resource.BACKGROUND_CHECK, BackgroundCheckOperation.GET, 404): _CHECK_NOT_FOUND_404,
    (Resource.BACKGROUND_CHECK, BackgroundCheckOperation.DETAILS, 404): _CHECK_NOT_FOUND_404,
    (Resource.PARTNERSHIP, PartnershipOperation.CREATE_ACCOUNT, 400): _PARTNER_ACCOUNT_400,
    (Resource.PARTNERSHIP, PartnershipOperation.CREATE_ACCOUNT, 403): _PARTNER_FORBIDDEN_403,
    (
        Resource.PARTNERSHIP,
        PartnershipOperation.UPDATE_PAYMENT_STATUS,
        400,
    ): _PAYMENT_STATUS_400,
    (
        Resource.PARTNERSHIP,
        PartnershipOperation.UPDATE_PAYMENT_STATUS,
        403,
    ): _PARTNER_FORBIDDEN_403,
    (Resource.TIMESTAMP, TimestampOperation.ADD, 402): _TIMESTAMP_402,
    (Resource.TIMESTAMP, TimestampOperation.ADD, 400): _TIMESTAMP_400,
}


def find_remediation(resource: str, operation: str, status: int | None) -> str | None:
    """Retorna a orientação cadastrada, se houver."""
    if status is None:
        return None
    return REMEDIATIONS.get((resource, operation, status))


def apply_remediation(
    resource: str,
    operation: str,
    error: ZapSignApiError,
) -> ZapSignApiError:
    """Enriquece o erro com a orientação da operação.

    Returns:
        Novo ZapSignApiError com orientação + detalhes, ou o próprio erro
        quando não há orientação aplicável.
    """
    if error.api_error.has_fixed_message:
        return error
    remediation = find_remediation(resource, operation, error.status)
    if remediation is None:
        return error
    return ZapSignApiError(f"{remediation}\n\nDetails: {error}", error.api_error)
