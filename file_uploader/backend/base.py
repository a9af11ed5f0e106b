from abc import ABC, abstractmethod

from file_uploader.widget.models import EvaluationDetails


class BaseEvaluationService(ABC):
    """Contract for the remote procedures the uploader widget consumes.

    Every method is a single round trip. Failures raise RemoteCallError
    carrying the backend's message when it supplied one.
    """

    @abstractmethod
    async def upload_document(
        self,
        file_name: str,
        file_base64: str,
        content_type: str,
        record_id: str,
    ) -> str:
        """Upload a base64-encoded document and return the backend's confirmation."""

    @abstractmethod
    async def fetch_eval_details(self, record_id: str) -> EvaluationDetails | None:
        """Fetch the evaluation details for a record, or None when there are none."""

    @abstractmethod
    async def download_pdf_report(self, candidate_doc_id: str) -> str:
        """Return the PDF report for a candidate as a base64 string."""

    @abstractmethod
    async def download_excel_report(self, candidate_doc_id: str) -> str:
        """Return the Excel report for a candidate as a base64 string."""
