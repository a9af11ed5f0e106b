from file_uploader.backend.base import BaseEvaluationService
from file_uploader.delivery.base import BaseBlobDelivery
from file_uploader.logging.logger import Log
from file_uploader.widget import presentation
from file_uploader.widget.details import DetailsLoader
from file_uploader.widget.exceptions import (
    FileReadError,
    FileTooLargeError,
    NoFileSelectedError,
    RemoteCallError,
    ReportDecodeError,
    ReportDeliveryError,
    UploadInProgressError,
)
from file_uploader.widget.file_selection import MAX_UPLOAD_BYTES, FileSelector, format_file_size
from file_uploader.widget.models import (
    DetailsState,
    Document,
    EvaluationDetails,
    LocalFile,
    ReportKind,
    SelectedFile,
    UploadState,
    UploadStatus,
)
from file_uploader.widget.observable import Observable
from file_uploader.widget.reports import ReportDownloader
from file_uploader.widget.upload import UploadWorkflow


class FileInput:
    """Stand-in for the file picker control; holds the picked filename."""

    def __init__(self) -> None:
        self.value = ""

    def reset(self) -> None:
        self.value = ""


class FileUploaderComponent:
    """Headless uploader widget for one record.

    Exposes the same flags a renderer binds to: upload fields and messages,
    the details load state and the derived candidate fields. Handlers never
    raise; failures end up in ``error_message``, ``details_error`` or
    ``report_error``.

    Passing the record id as an Observable switches details loading to the
    reactive strategy: every identifier change triggers a fresh fetch.
    """

    def __init__(
        self,
        service: BaseEvaluationService,
        delivery: BaseBlobDelivery,
        record_id: str | Observable[str | None] | None,
        *,
        max_upload_bytes: int = MAX_UPLOAD_BYTES,
        eval_url_template: str = presentation.DEFAULT_EVAL_URL_TEMPLATE,
        file_input: FileInput | None = None,
    ) -> None:
        self._record_id = record_id
        self._delivery = delivery
        self._selector = FileSelector(max_upload_bytes)
        self._upload = UploadWorkflow(service)
        self._details = DetailsLoader(service)
        self._reports = ReportDownloader(service, delivery)
        self._eval_url_template = eval_url_template
        self.file_input = file_input if file_input is not None else FileInput()

        self.file_data: SelectedFile | None = None
        self.file_name = ""
        self.file_size = ""
        self.success_message = ""
        self.error_message = ""
        self.report_error = ""

    @property
    def reactive(self) -> bool:
        return isinstance(self._record_id, Observable)

    @property
    def record_id(self) -> str | None:
        if isinstance(self._record_id, Observable):
            return self._record_id.value
        return self._record_id

    # Lifecycle

    async def connect(self) -> None:
        """Mount: start loading details with the configured strategy.

        Safe to call again after disconnect; the component resumes publishing.
        """
        self._details.activate()
        if isinstance(self._record_id, Observable):
            self._details.bind(self._record_id)
        else:
            await self.load_eval_details()

    def disconnect(self) -> None:
        self._details.dispose()

    async def wait_for_details(self) -> None:
        await self._details.wait_idle()

    # Upload

    @property
    def upload_status(self) -> UploadStatus:
        return self._upload.status

    @property
    def is_uploading(self) -> bool:
        return self._upload.is_uploading

    @property
    def disable_upload(self) -> bool:
        return not self._upload.can_upload(self.file_data)

    async def handle_file_change(self, local_file: LocalFile | None) -> None:
        if local_file is None:
            return
        try:
            selected = await self._selector.select(local_file)
        except FileTooLargeError as exc:
            Log.warning(f"Rejected {local_file.name}: {exc}")
            self.error_message = str(exc)
            self._clear_selection()
            return
        except FileReadError as exc:
            self.error_message = str(exc)
            self._clear_selection()
            return

        self.file_data = selected
        self.file_name = selected.name
        self.file_size = format_file_size(selected.size_bytes)
        self.file_input.value = selected.name
        self.error_message = ""
        self.success_message = ""

    async def handle_upload(self) -> None:
        self.error_message = ""
        self.success_message = ""
        try:
            status = await self._upload.upload(self.file_data, self.record_id or "")
        except NoFileSelectedError as exc:
            self.error_message = str(exc)
            self._upload.reset()
            return
        except UploadInProgressError as exc:
            Log.warning(str(exc))
            return

        if status.state is UploadState.SUCCEEDED:
            self.success_message = status.message
            self._clear_selection()
            self.file_input.reset()
        else:
            self.error_message = status.message
        self._upload.reset()

    # Details

    async def load_eval_details(self) -> None:
        await self._details.load(self.record_id)

    async def handle_reload(self) -> None:
        await self.load_eval_details()

    @property
    def eval_details(self) -> EvaluationDetails | None:
        return self._details.state.details

    @property
    def is_loading_details(self) -> bool:
        return self._details.state.state is DetailsState.LOADING

    @property
    def has_no_details(self) -> bool:
        return self._details.state.state is DetailsState.EMPTY

    @property
    def details_error(self) -> str:
        if self._details.state.state is DetailsState.FAILED:
            return self._details.state.message
        return ""

    @property
    def candidate_name(self) -> str:
        return presentation.candidate_name(self.eval_details)

    @property
    def candidate_dob(self) -> str:
        return presentation.candidate_dob(self.eval_details)

    @property
    def candidate_eval_url(self) -> str:
        return presentation.candidate_eval_url(self.eval_details, self._eval_url_template)

    @property
    def document_list(self) -> list[Document]:
        return presentation.document_list(self.eval_details)

    @property
    def has_documents(self) -> bool:
        return presentation.has_documents(self.eval_details)

    @property
    def document_count(self) -> int:
        return presentation.document_count(self.eval_details)

    @property
    def reports_ready(self) -> bool:
        return presentation.reports_ready(self.eval_details)

    def handle_view_file(self, url: str | None) -> None:
        if url:
            self._delivery.open_url(url)

    # Reports

    async def handle_download_pdf(self) -> str | None:
        return await self._download(ReportKind.PDF)

    async def handle_download_excel(self) -> str | None:
        return await self._download(ReportKind.EXCEL)

    async def _download(self, kind: ReportKind) -> str | None:
        self.report_error = ""
        try:
            return await self._reports.download(kind, self.eval_details)
        except ReportDecodeError as exc:
            self.report_error = str(exc)
        except RemoteCallError as exc:
            self.report_error = exc.server_message or f"Error downloading {kind.label} report"
        except ReportDeliveryError as exc:
            Log.warning(str(exc))
            self.report_error = f"Error saving {kind.label} report"
        return None

    def _clear_selection(self) -> None:
        self.file_data = None
        self.file_name = ""
        self.file_size = ""
