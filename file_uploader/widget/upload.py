from file_uploader.backend.base import BaseEvaluationService
from file_uploader.logging.logger import Log
from file_uploader.widget.exceptions import (
    NoFileSelectedError,
    RemoteCallError,
    UploadInProgressError,
)
from file_uploader.widget.models import SelectedFile, UploadState, UploadStatus

UPLOAD_FALLBACK_MESSAGE = "Error uploading file"


class UploadWorkflow:
    """Upload state machine: idle -> uploading -> succeeded | failed.

    Only one upload may be in flight at a time.
    """

    def __init__(self, service: BaseEvaluationService) -> None:
        self._service = service
        self.status = UploadStatus.idle()

    @property
    def is_uploading(self) -> bool:
        return self.status.state is UploadState.UPLOADING

    def can_upload(self, selected: SelectedFile | None) -> bool:
        return selected is not None and not self.is_uploading

    async def upload(self, selected: SelectedFile | None, record_id: str) -> UploadStatus:
        """Upload the selected file against a record.

        Raises:
            NoFileSelectedError: if nothing is selected. State becomes failed.
            UploadInProgressError: if an upload is already in flight. State is kept.
        """
        if self.is_uploading:
            raise UploadInProgressError("An upload is already in progress")
        if selected is None:
            self.status = UploadStatus.failed("Please select a file first")
            raise NoFileSelectedError(self.status.message)

        self.status = UploadStatus.uploading()
        Log.info(f"Uploading {selected.name} ({selected.size_bytes} bytes) to record {record_id}")
        try:
            result = await self._service.upload_document(
                selected.name,
                selected.encoded_content,
                selected.mime_type,
                record_id,
            )
        except RemoteCallError as exc:
            Log.error(f"Upload of {selected.name} failed: {exc}")
            self.status = UploadStatus.failed(exc.server_message or UPLOAD_FALLBACK_MESSAGE)
            return self.status

        Log.info(f"Upload of {selected.name} succeeded: {result}")
        self.status = UploadStatus.succeeded(
            f"File uploaded successfully! Response: {result}"
        )
        return self.status

    def reset(self) -> None:
        if not self.is_uploading:
            self.status = UploadStatus.idle()
