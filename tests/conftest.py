from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from file_uploader.widget.models import LocalFile


@pytest.fixture()
def make_local_file(tmp_path: Path) -> Callable[..., LocalFile]:
    """Write a file under tmp_path and describe it as a picked LocalFile."""

    def _make(
        name: str = "resume.pdf",
        content: bytes = b"%PDF-1.4 resume",
        mime_type: str = "application/pdf",
    ) -> LocalFile:
        path = tmp_path / name
        path.write_bytes(content)
        return LocalFile(name=name, size_bytes=len(content), mime_type=mime_type, path=path)

    return _make


@pytest.fixture()
def details_payload() -> dict[str, Any]:
    """A backend evaluation details payload with a candidate and two documents."""
    return {
        "candidateDoc": {
            "id": "cand-42",
            "info": {
                "names": [{"value": "Jane Doe"}, {"value": "J. Doe"}],
                "dateOfBirth": "1991-02-03",
            },
        },
        "documentList": [
            {"name": "Passport.pdf", "url": "https://files.example.com/p.pdf", "type": "identity"},
            {"name": "Degree.pdf", "url": "https://files.example.com/d.pdf"},
        ],
        "reportReady": True,
    }
