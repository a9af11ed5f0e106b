import asyncio
import base64

from file_uploader.logging.logger import Log
from file_uploader.widget.exceptions import FileReadError, FileTooLargeError
from file_uploader.widget.models import LocalFile, SelectedFile

MAX_UPLOAD_BYTES = 6 * 1024 * 1024

_SIZE_UNITS = ("Bytes", "KB", "MB")


def format_file_size(size_bytes: int) -> str:
    """Human-readable size, e.g. ``"1.5 KB"``. Capped at MB."""
    if size_bytes == 0:
        return "0 Bytes"
    value = float(size_bytes)
    unit = 0
    while value >= 1024 and unit < len(_SIZE_UNITS) - 1:
        value /= 1024
        unit += 1
    return f"{round(value, 2):g} {_SIZE_UNITS[unit]}"


class FileSelector:
    """Validates a picked file and encodes its content for upload."""

    def __init__(self, max_size_bytes: int = MAX_UPLOAD_BYTES) -> None:
        self._max_size_bytes = max_size_bytes

    async def select(self, local_file: LocalFile) -> SelectedFile:
        """Check the size ceiling, then read and base64-encode the file.

        Raises:
            FileTooLargeError: if the file exceeds the size ceiling. Nothing is read.
            FileReadError: if the file cannot be read.
        """
        if local_file.size_bytes > self._max_size_bytes:
            raise FileTooLargeError(
                f"File size must be less than {format_file_size(self._max_size_bytes)}"
            )
        try:
            content = await asyncio.to_thread(local_file.path.read_bytes)
        except OSError as exc:
            Log.error(f"Failed to read {local_file.path}: {exc}")
            raise FileReadError("Error reading file") from exc

        Log.debug(f"Encoded {len(content)} bytes from {local_file.name}")
        return SelectedFile(
            name=local_file.name,
            size_bytes=local_file.size_bytes,
            encoded_content=base64.b64encode(content).decode("ascii"),
            mime_type=local_file.mime_type,
        )
