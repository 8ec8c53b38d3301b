"""Infra de IO auxiliar da integração ZapSign."""

from app.infra.zapsign.file_downloader import FileDownloadResult, HttpFileDownloader

__all__ = ["FileDownloadResult", "HttpFileDownloader"]
