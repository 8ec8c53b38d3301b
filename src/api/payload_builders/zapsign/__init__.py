"""Builders de payload para a API ZapSign.

Funções puras que convertem parâmetros de formulário no formato
esperado por cada endpoint. Nunca alteram a entrada.
"""

from api.payload_builders.zapsign.document import (
    build_display_order,
    build_document_update,
    build_extra_document,
    build_rubricas,
)
from api.payload_builders.zapsign.file_input import (
    FileSource,
    build_file_fields,
    document_kind,
    mime_type_from_extension,
    mime_type_from_url,
)
from api.payload_builders.zapsign.signers import (
    map_one_click_signer_entries,
    map_signer,
    map_signer_entries,
)
from api.payload_builders.zapsign.template import (
    TemplateDocumentBuilder,
    build_form_inputs,
    build_metadata_entries,
    build_template_variables,
)

__all__ = [
    "FileSource",
    "TemplateDocumentBuilder",
    "build_display_order",
    "build_document_update",
    "build_extra_document",
    "build_file_fields",
    "build_form_inputs",
    "build_metadata_entries",
    "build_rubricas",
    "build_template_variables",
    "document_kind",
    "map_one_click_signer_entries",
    "map_signer",
    "map_signer_entries",
    "mime_type_from_extension",
    "mime_type_from_url",
]
