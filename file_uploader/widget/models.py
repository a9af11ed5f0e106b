import mimetypes
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class LocalFile:
    """A file picked by the user on the local filesystem."""

    name: str
    size_bytes: int
    mime_type: str
    path: Path

    @classmethod
    def from_path(cls, path: Path) -> "LocalFile":
        """Describe a file on disk. Size comes from stat, MIME type from the extension."""
        mime_type, _ = mimetypes.guess_type(path.name)
        return cls(
            name=path.name,
            size_bytes=path.stat().st_size,
            mime_type=mime_type or "application/octet-stream",
            path=path,
        )


@dataclass(frozen=True)
class SelectedFile:
    """A validated, base64-encoded file ready for upload."""

    name: str
    size_bytes: int
    encoded_content: str
    mime_type: str


class UploadState(Enum):
    IDLE = "idle"
    UPLOADING = "uploading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class UploadStatus:
    """Current upload state plus the message shown for terminal states."""

    state: UploadState
    message: str = ""

    @classmethod
    def idle(cls) -> "UploadStatus":
        return cls(UploadState.IDLE)

    @classmethod
    def uploading(cls) -> "UploadStatus":
        return cls(UploadState.UPLOADING)

    @classmethod
    def succeeded(cls, message: str) -> "UploadStatus":
        return cls(UploadState.SUCCEEDED, message)

    @classmethod
    def failed(cls, message: str) -> "UploadStatus":
        return cls(UploadState.FAILED, message)


@dataclass(frozen=True)
class NameEntry:
    value: str


@dataclass(frozen=True)
class CandidateInfo:
    """Identity fields of a candidate."""

    names: list[NameEntry] = field(default_factory=list)
    date_of_birth: str | None = None


@dataclass(frozen=True)
class CandidateDocument:
    id: str | None
    info: CandidateInfo | None = None


@dataclass(frozen=True)
class Document:
    """A document attached to the evaluation."""

    name: str
    url: str | None = None
    document_type: str | None = None
    uploaded_at: str | None = None


@dataclass(frozen=True)
class EvaluationDetails:
    """Read-only evaluation record fetched from the backend."""

    candidate_doc: CandidateDocument | None = None
    document_list: list[Document] = field(default_factory=list)
    report_ready: bool = False


class DetailsState(Enum):
    LOADING = "loading"
    LOADED = "loaded"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass(frozen=True)
class DetailsLoadState:
    """Three-state loading contract for evaluation details (plus Empty)."""

    state: DetailsState
    details: EvaluationDetails | None = None
    message: str = ""

    @classmethod
    def loading(cls) -> "DetailsLoadState":
        return cls(DetailsState.LOADING)

    @classmethod
    def loaded(cls, details: EvaluationDetails) -> "DetailsLoadState":
        return cls(DetailsState.LOADED, details=details)

    @classmethod
    def empty(cls) -> "DetailsLoadState":
        return cls(DetailsState.EMPTY)

    @classmethod
    def failed(cls, message: str) -> "DetailsLoadState":
        return cls(DetailsState.FAILED, message=message)


class ReportKind(Enum):
    """Downloadable report formats with their blob type and filename suffix."""

    PDF = ("PDF", "application/pdf", "_report.pdf")
    EXCEL = ("Excel", "application/octet-stream", "_report.xlsx")

    def __init__(self, label: str, mime_type: str, suffix: str) -> None:
        self.label = label
        self.mime_type = mime_type
        self.suffix = suffix
