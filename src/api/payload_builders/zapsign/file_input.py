"""Builder dos campos de arquivo de um documento.

Uma única origem por documento:
- file/base64 -> base64_pdf | base64_docx
- url         -> url_pdf | url_docx
- markdown    -> markdown_text

PDF quando o MIME é exatamente application/pdf; DOCX quando o MIME
contém "word" ou "document"; PDF nos demais casos.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Any
from urllib.parse import unquote, urlparse

from app.constants.zapsign import FileInputType
from utils.errors import ValidationError

DEFAULT_MIME_TYPE = "application/octet-stream"
PDF_MIME_TYPE = "application/pdf"

MIME_TYPES_BY_EXTENSION: dict[str, str] = {
    "pdf": PDF_MIME_TYPE,
    "doc": "application/msword",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "xls": "application/vnd.ms-excel",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "ppt": "application/vnd.ms-powerpoint",
    "pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    "txt": "text/plain",
    "rtf": "application/rtf",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "bmp": "image/bmp",
    "tiff": "image/tiff",
    "html": "text/html",
    "htm": "text/html",
    "xml": "application/xml",
    "json": "application/json",
}


@dataclass(frozen=True)
class FileSource:
    """Origem do arquivo já resolvida a partir dos parâmetros do item.

    Attributes:
        input_type: Tipo de origem (file, base64, url, markdown)
        content: Base64 (file/base64), URL (url) ou texto (markdown)
        mime_type: MIME informado ou inferido; vazio para markdown
        file_name: Nome do arquivo, quando conhecido
    """

    input_type: FileInputType
    content: str
    mime_type: str = PDF_MIME_TYPE
    file_name: str | None = None


def mime_type_from_extension(extension: str | None) -> str:
    """Retorna o MIME da extensão (sem ponto); desconhecida -> octet-stream."""
    if not extension:
        return DEFAULT_MIME_TYPE
    key = extension.strip().lower().lstrip(".")
    return MIME_TYPES_BY_EXTENSION.get(key, DEFAULT_MIME_TYPE)


def file_name_from_url(url: str) -> str | None:
    """Último segmento do path da URL, sem query string nem fragmento."""
    name = PurePosixPath(unquote(urlparse(url).path)).name
    return name or None


def mime_type_from_url(url: str) -> str:
    """Infere o MIME pela extensão do arquivo apontado pela URL."""
    name = file_name_from_url(url)
    if not name or "." not in name:
        return DEFAULT_MIME_TYPE
    return mime_type_from_extension(name.rsplit(".", 1)[1])


def document_kind(mime_type: str) -> str:
    """Retorna "pdf" ou "docx" conforme o MIME."""
    if mime_type == PDF_MIME_TYPE:
        return "pdf"
    if "word" in mime_type or "document" in mime_type:
        return "docx"
    return "pdf"


def build_file_fields(source: FileSource) -> dict[str, Any]:
    """Constrói os campos de arquivo do corpo de criação de documento.

    Raises:
        ValidationError: Se o conteúdo da origem estiver vazio.
    """
    content = source.content.strip() if source.content else ""
    if not content:
        raise ValidationError(
            f'No content was provided for the "{source.input_type}" file input.',
            field="file_input_type",
        )

    if source.input_type == FileInputType.MARKDOWN:
        return {"markdown_text": source.content}

    kind = document_kind(source.mime_type)
    if source.input_type == FileInputType.URL:
        return {f"url_{kind}": content}
    return {f"base64_{kind}": content}
