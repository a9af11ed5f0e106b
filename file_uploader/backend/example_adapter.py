"""Example in-memory evaluation service.

Use this module as a reference when implementing new backend adapters.
Implement BaseEvaluationService and register the provider in
EvaluationServiceFactory.
"""

import base64
import copy
from typing import Any, ClassVar

from file_uploader.backend.base import BaseEvaluationService
from file_uploader.widget.exceptions import RemoteCallError
from file_uploader.widget.models import EvaluationDetails
from file_uploader.widget.parsing import parse_evaluation_details


class ExampleEvaluationService(BaseEvaluationService):
    """Backend stand-in with a fixed demo candidate and recorded calls.

    No network calls. Failures can be scripted per procedure through
    ``failures``, keyed by the procedure name (``upload_document``,
    ``fetch_eval_details``, ``download_pdf_report``, ``download_excel_report``).
    """

    DEFAULT_DETAILS: ClassVar[dict[str, Any]] = {
        "candidateDoc": {
            "id": "cand-001",
            "info": {
                "names": [{"value": "Jane Doe"}],
                "dateOfBirth": "1990-04-12",
            },
        },
        "documentList": [
            {
                "name": "Passport.pdf",
                "url": "https://files.example.com/passport.pdf",
                "type": "identity",
                "uploadedAt": "2024-01-15T10:00:00Z",
            },
        ],
        "reportReady": True,
    }
    PDF_REPORT: ClassVar[bytes] = b"%PDF-1.4 example report"
    EXCEL_REPORT: ClassVar[bytes] = b"PK\x03\x04 example workbook"

    def __init__(
        self,
        details: dict[str, Any] | None = None,
        failures: dict[str, RemoteCallError] | None = None,
    ) -> None:
        self._details = copy.deepcopy(self.DEFAULT_DETAILS) if details is None else details
        self.failures: dict[str, RemoteCallError] = dict(failures or {})
        self.uploads: list[dict[str, str]] = []
        self.calls: list[str] = []

    async def upload_document(
        self,
        file_name: str,
        file_base64: str,
        content_type: str,
        record_id: str,
    ) -> str:
        self._record("upload_document")
        self.uploads.append(
            {
                "file_name": file_name,
                "file_base64": file_base64,
                "content_type": content_type,
                "record_id": record_id,
            }
        )
        return f"uploaded {file_name}"

    async def fetch_eval_details(self, record_id: str) -> EvaluationDetails | None:
        _ = record_id
        self._record("fetch_eval_details")
        return parse_evaluation_details(self._details)

    async def download_pdf_report(self, candidate_doc_id: str) -> str:
        _ = candidate_doc_id
        self._record("download_pdf_report")
        return base64.b64encode(self.PDF_REPORT).decode("ascii")

    async def download_excel_report(self, candidate_doc_id: str) -> str:
        _ = candidate_doc_id
        self._record("download_excel_report")
        return base64.b64encode(self.EXCEL_REPORT).decode("ascii")

    def _record(self, procedure: str) -> None:
        self.calls.append(procedure)
        failure = self.failures.get(procedure)
        if failure is not None:
            raise failure
