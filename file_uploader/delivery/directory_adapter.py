import os
import tempfile
import webbrowser
from pathlib import Path

from file_uploader.delivery.base import BaseBlobDelivery, Blob
from file_uploader.logging.logger import Log
from file_uploader.widget.exceptions import ReportDeliveryError


class DirectoryDelivery(BaseBlobDelivery):
    """Writes blobs into a download directory and opens links in the browser.

    Bytes are staged in a temporary file beside the target and renamed into
    place, so a partial write never leaves a truncated report behind. The
    staging file is always released.
    """

    def __init__(self, download_dir: Path) -> None:
        self._download_dir = download_dir

    def deliver(self, blob: Blob) -> str:
        """Save a blob under the download directory.

        Raises:
            ReportDeliveryError: if the directory or file cannot be written.
        """
        target = self._download_dir / blob.filename
        try:
            self._download_dir.mkdir(parents=True, exist_ok=True)
            self._write(blob, target)
        except OSError as exc:
            Log.error(f"Failed to save {blob.filename} to {self._download_dir}: {exc}")
            raise ReportDeliveryError(f"Cannot save {blob.filename}: {exc}") from exc
        Log.info(f"Saved {len(blob.content)} bytes ({blob.mime_type}) to {target}")
        return str(target)

    def open_url(self, url: str) -> None:
        Log.info(f"Opening {url}")
        webbrowser.open(url, new=2)

    def _write(self, blob: Blob, target: Path) -> None:
        fd, staging = tempfile.mkstemp(dir=self._download_dir, suffix=".part")
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(blob.content)
            os.replace(staging, target)
        finally:
            if os.path.exists(staging):
                os.unlink(staging)
