import asyncio
import base64
import binascii

from file_uploader.backend.base import BaseEvaluationService
from file_uploader.delivery.base import BaseBlobDelivery, Blob
from file_uploader.logging.logger import Log
from file_uploader.widget.exceptions import RemoteCallError, ReportDecodeError
from file_uploader.widget.models import EvaluationDetails, ReportKind
from file_uploader.widget.presentation import candidate_id, candidate_name, slugify


def report_filename(details: EvaluationDetails | None, kind: ReportKind) -> str:
    """Download filename: slug of the candidate display name plus the report suffix."""
    return f"{slugify(candidate_name(details))}{kind.suffix}"


class ReportDownloader:
    """Fetches generated reports for a candidate and delivers them as files."""

    def __init__(self, service: BaseEvaluationService, delivery: BaseBlobDelivery) -> None:
        self._service = service
        self._delivery = delivery

    async def download(self, kind: ReportKind, details: EvaluationDetails | None) -> str | None:
        """Fetch, decode and deliver one report.

        Returns:
            The delivered location, or None when there is no candidate id
            (nothing is requested in that case).

        Raises:
            RemoteCallError: if the backend call fails.
            ReportDecodeError: if the payload is not valid base64.
            ReportDeliveryError: if the report cannot be saved.
        """
        cid = candidate_id(details)
        if cid is None:
            Log.debug(f"No candidate id, skipping {kind.label} report download")
            return None

        Log.info(f"Downloading {kind.label} report for candidate {cid}")
        try:
            if kind is ReportKind.PDF:
                payload = await self._service.download_pdf_report(cid)
            else:
                payload = await self._service.download_excel_report(cid)
        except RemoteCallError as exc:
            Log.error(f"{kind.label} report download failed for candidate {cid}: {exc}")
            raise

        try:
            content = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ReportDecodeError(f"{kind.label} report is not valid base64") from exc

        blob = Blob(
            filename=report_filename(details, kind),
            content=content,
            mime_type=kind.mime_type,
        )
        return await asyncio.to_thread(self._delivery.deliver, blob)

    async def download_pdf(self, details: EvaluationDetails | None) -> str | None:
        return await self.download(ReportKind.PDF, details)

    async def download_excel(self, details: EvaluationDetails | None) -> str | None:
        return await self.download(ReportKind.EXCEL, details)
