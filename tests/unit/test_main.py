from pathlib import Path

import pytest

from file_uploader.main import build_parser, main


@pytest.fixture()
def example_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    download_dir = tmp_path / "downloads"
    monkeypatch.setenv("BACKEND_PROVIDER", "example")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("DELIVERY_TARGET", "directory")
    monkeypatch.setenv("DOWNLOAD_DIR", str(download_dir))
    return download_dir


class TestParser:
    def test_requires_record_id(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["details"])

    def test_report_kind_choices(self) -> None:
        args = build_parser().parse_args(["--record-id", "r", "report", "excel"])
        assert args.kind == "excel"


class TestMain:
    def test_upload(
        self, example_env: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "cv.pdf"
        path.write_bytes(b"%PDF")

        code = main(["--record-id", "rec-1", "upload", str(path)])

        assert code == 0
        assert "File uploaded successfully! Response: uploaded cv.pdf" in capsys.readouterr().out

    def test_upload_missing_file(self, example_env: Path, tmp_path: Path) -> None:
        assert main(["--record-id", "rec-1", "upload", str(tmp_path / "nope.pdf")]) == 1

    def test_details(self, example_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["--record-id", "rec-1", "details"])

        out = capsys.readouterr().out
        assert code == 0
        assert "Candidate: Jane Doe" in out
        assert "Documents (1):" in out

    def test_pdf_report_written_to_download_dir(self, example_env: Path) -> None:
        code = main(["--record-id", "rec-1", "report", "pdf"])

        assert code == 0
        assert (example_env / "jane_doe_report.pdf").read_bytes().startswith(b"%PDF")
