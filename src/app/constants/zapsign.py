"""Enums de domínio para recursos e operações da ZapSign."""

from __future__ import annotations

from enum import StrEnum


class Resource(StrEnum):
    """Recursos expostos pela API ZapSign."""

    DOCUMENT = "document"
    SIGNER = "signer"
    TEMPLATE = "template"
    BACKGROUND_CHECK = "backgroundCheck"
    PARTNERSHIP = "partnership"
    TIMESTAMP = "timestamp"
    WEBHOOK = "webhook"


class DocumentOperation(StrEnum):
    """Operações sobre documentos."""

    CREATE = "create"
    CREATE_ONE_CLICK = "createOneClick"
    GET = "get"
    GET_ALL = "getAll"
    UPDATE = "update"
    DELETE = "delete"
    CANCEL = "cancel"
    REFUSE = "refuse"
    ACTIVITY_HISTORY = "activityHistory"
    GET_ACTIVITY_HISTORY = "getActivityHistory"
    PLACE_SIGNATURES = "placeSignatures"
    VALIDATE_SIGNATURES = "validateSignatures"
    ADD_EXTRA_DOCUMENT = "addExtraDocument"
    ADD_EXTRA_DOCUMENT_FROM_TEMPLATE = "addExtraDocumentFromTemplate"
    REORDER_ENVELOPE = "reorderEnvelope"


class SignerOperation(StrEnum):
    """Operações sobre signatários."""

    ADD = "add"
    UPDATE = "update"
    GET = "get"
    REMOVE = "remove"
    RESET_ATTEMPTS = "resetAttempts"


class TemplateOperation(StrEnum):
    """Operações sobre modelos."""

    GET_ALL = "getAll"
    GET = "get"
    CREATE_DOCUMENT = "createDocument"
    CREATE_TEMPLATE_DOCX = "createTemplateDocx"
    UPDATE = "update"
    DELETE = "delete"
    UPDATE_TEMPLATE_FORM = "updateTemplateForm"


class BackgroundCheckOperation(StrEnum):
    """Operações de background check."""

    CREATE_PERSON = "createPerson"
    CREATE_COMPANY = "createCompany"
    GET = "get"
    DETAILS = "details"


class PartnershipOperation(StrEnum):
    """Operações de parceria."""

    CREATE_ACCOUNT = "createAccount"
    UPDATE_PAYMENT_STATUS = "updatePaymentStatus"


class TimestampOperation(StrEnum):
    """Operações de carimbo do tempo."""

    ADD = "add"


class WebhookOperation(StrEnum):
    """Operações de webhook."""

    CREATE = "create"
    DELETE = "delete"


class FileInputType(StrEnum):
    """Origem do arquivo de um documento."""

    FILE = "file"
    BASE64 = "base64"
    URL = "url"
    MARKDOWN = "markdown"


class PaymentStatus(StrEnum):
    """Situação de pagamento de conta parceira."""

    ADIMPLENTE = "adimplente"
    INADIMPLENTE = "inadimplente"


class WebhookEventType(StrEnum):
    """Eventos de webhook; vazio assina todos."""

    ALL = ""
    DOC_SIGNED = "doc_signed"
    DOC_CREATED = "doc_created"
    DOC_DELETED = "doc_deleted"
    DOC_REFUSED = "doc_refused"
    EMAIL_BOUNCE = "email_bounce"
