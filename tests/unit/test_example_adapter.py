import base64

import pytest

from file_uploader.backend.example_adapter import ExampleEvaluationService
from file_uploader.widget.exceptions import RemoteCallError


class TestExampleEvaluationService:
    @pytest.mark.asyncio
    async def test_records_uploads(self) -> None:
        service = ExampleEvaluationService()

        result = await service.upload_document("cv.pdf", "Zm9v", "application/pdf", "rec-1")

        assert result == "uploaded cv.pdf"
        assert service.uploads[0]["record_id"] == "rec-1"

    @pytest.mark.asyncio
    async def test_returns_demo_candidate(self) -> None:
        details = await ExampleEvaluationService().fetch_eval_details("rec-1")

        assert details is not None
        assert details.candidate_doc is not None
        assert details.candidate_doc.id == "cand-001"
        assert details.report_ready is True

    @pytest.mark.asyncio
    async def test_reports_are_base64(self) -> None:
        service = ExampleEvaluationService()

        pdf = await service.download_pdf_report("cand-001")
        excel = await service.download_excel_report("cand-001")

        assert base64.b64decode(pdf) == ExampleEvaluationService.PDF_REPORT
        assert base64.b64decode(excel) == ExampleEvaluationService.EXCEL_REPORT

    @pytest.mark.asyncio
    async def test_scripted_failure(self) -> None:
        service = ExampleEvaluationService(
            failures={"fetch_eval_details": RemoteCallError("x", server_message="down")}
        )

        with pytest.raises(RemoteCallError, match="x"):
            await service.fetch_eval_details("rec-1")

        assert service.calls == ["fetch_eval_details"]

    @pytest.mark.asyncio
    async def test_custom_details_without_candidate(self) -> None:
        service = ExampleEvaluationService(details={"documentList": []})

        details = await service.fetch_eval_details("rec-1")

        assert details is not None
        assert details.candidate_doc is None
