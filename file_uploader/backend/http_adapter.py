from typing import Any

import httpx

from file_uploader.backend.base import BaseEvaluationService
from file_uploader.logging.logger import Log
from file_uploader.widget.exceptions import RemoteCallError
from file_uploader.widget.models import EvaluationDetails
from file_uploader.widget.parsing import parse_evaluation_details


class HttpEvaluationService(BaseEvaluationService):
    """Evaluation service adapter calling the backend's JSON procedure endpoints.

    Each procedure is ``POST {base_url}/{procedure}`` with its named
    arguments as the JSON body.
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: int,
        api_token: str = "",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._headers = {"Accept": "application/json"}
        if api_token:
            self._headers["Authorization"] = f"Bearer {api_token}"
        self._transport = transport

    async def upload_document(
        self,
        file_name: str,
        file_base64: str,
        content_type: str,
        record_id: str,
    ) -> str:
        result = await self._call(
            "uploadDocument",
            {
                "fileName": file_name,
                "fileBase64": file_base64,
                "contentType": content_type,
                "recordId": record_id,
            },
        )
        return "" if result is None else str(result)

    async def fetch_eval_details(self, record_id: str) -> EvaluationDetails | None:
        result = await self._call("fetchEvalDetails", {"recordId": record_id})
        return parse_evaluation_details(result)

    async def download_pdf_report(self, candidate_doc_id: str) -> str:
        return await self._call_for_report("downloadPDFReport", candidate_doc_id)

    async def download_excel_report(self, candidate_doc_id: str) -> str:
        return await self._call_for_report("downloadExcelReport", candidate_doc_id)

    async def _call_for_report(self, procedure: str, candidate_doc_id: str) -> str:
        result = await self._call(procedure, {"candidateDocId": candidate_doc_id})
        if not isinstance(result, str):
            raise RemoteCallError(f"{procedure} returned no report content")
        return result

    async def _call(self, procedure: str, arguments: dict[str, Any]) -> Any:
        url = f"{self._base_url}/{procedure}"
        Log.debug(f"Calling backend procedure {procedure}")
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds,
                headers=self._headers,
                transport=self._transport,
            ) as client:
                response = await client.post(url, json=arguments)
        except httpx.HTTPError as exc:
            raise RemoteCallError(
                f"Backend network error calling {procedure}: {exc}"
            ) from exc

        if response.is_error:
            raise RemoteCallError(
                f"Backend call {procedure} failed with HTTP {response.status_code}",
                server_message=_extract_error_message(response),
            )
        if not response.content:
            return None
        try:
            body = response.json()
        except ValueError as exc:
            raise RemoteCallError(
                f"Backend call {procedure} returned invalid JSON"
            ) from exc
        if isinstance(body, dict) and "result" in body:
            return body["result"]
        return body


def _extract_error_message(response: httpx.Response) -> str | None:
    """Pull ``message`` out of an error body shaped as an object or a list of objects."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, list) and body:
        body = body[0]
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return None
