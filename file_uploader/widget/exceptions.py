class UploaderError(Exception):
    """Base exception for all uploader widget errors."""


class UploadValidationError(UploaderError):
    """Raised when a user action is rejected before any remote call."""


class FileTooLargeError(UploadValidationError):
    """Raised when the selected file exceeds the upload size ceiling."""


class NoFileSelectedError(UploadValidationError):
    """Raised when an upload is requested with no file selected."""


class UploadInProgressError(UploadValidationError):
    """Raised when an upload is requested while another one is in flight."""


class FileReadError(UploaderError):
    """Raised when a selected file cannot be read from disk."""


class RemoteCallError(UploaderError):
    """Raised when a backend procedure call fails.

    ``server_message`` holds the human-readable message supplied by the
    backend, or None when the failure carried none (network errors, empty
    error bodies).
    """

    def __init__(self, message: str, server_message: str | None = None) -> None:
        super().__init__(message)
        self.server_message = server_message


class DetailsParseError(RemoteCallError):
    """Raised when the evaluation details payload has an unexpected shape."""


class ReportDecodeError(RemoteCallError):
    """Raised when a report payload is not valid base64."""


class ReportDeliveryError(UploaderError):
    """Raised when a downloaded report cannot be saved for the user."""
