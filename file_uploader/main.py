import argparse
import asyncio
import sys
from pathlib import Path

from file_uploader.backend.factory import EvaluationServiceFactory
from file_uploader.config.settings import Settings
from file_uploader.delivery.factory import DeliveryFactory
from file_uploader.logging.logger import Log
from file_uploader.widget.component import FileUploaderComponent
from file_uploader.widget.models import LocalFile


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="file-uploader",
        description="Upload candidate documents and fetch evaluation reports for a record.",
    )
    parser.add_argument("--record-id", required=True, help="Record the widget is attached to")
    commands = parser.add_subparsers(dest="command", required=True)

    upload = commands.add_parser("upload", help="Upload a document to the record")
    upload.add_argument("path", type=Path)

    commands.add_parser("details", help="Show the record's evaluation details")

    report = commands.add_parser("report", help="Download a generated report")
    report.add_argument("kind", choices=["pdf", "excel"])
    return parser


def build_component(settings: Settings, record_id: str) -> FileUploaderComponent:
    """Build a component with the configured service and delivery adapters."""
    return FileUploaderComponent(
        service=EvaluationServiceFactory.create(settings),
        delivery=DeliveryFactory.create(settings),
        record_id=record_id,
        max_upload_bytes=settings.max_upload_bytes,
        eval_url_template=settings.candidate_eval_url_template,
    )


async def run_command(args: argparse.Namespace, component: FileUploaderComponent) -> int:
    if args.command == "upload":
        path: Path = args.path
        if not path.is_file():
            print(f"File not found: {path}", file=sys.stderr)
            return 1
        await component.handle_file_change(LocalFile.from_path(path))
        if component.error_message:
            print(component.error_message, file=sys.stderr)
            return 1
        await component.handle_upload()
        if component.error_message:
            print(component.error_message, file=sys.stderr)
            return 1
        print(component.success_message)
        return 0

    await component.connect()
    if component.details_error:
        print(component.details_error, file=sys.stderr)
        return 1

    if args.command == "details":
        if component.has_no_details:
            print("No evaluation details for this record")
            return 0
        print(f"Candidate: {component.candidate_name}")
        print(f"Date of birth: {component.candidate_dob}")
        print(f"Review link: {component.candidate_eval_url}")
        print(f"Reports ready: {'yes' if component.reports_ready else 'no'}")
        print(f"Documents ({component.document_count}):")
        for document in component.document_list:
            print(f"  - {document.name} {document.url or ''}".rstrip())
        return 0

    if args.kind == "pdf":
        location = await component.handle_download_pdf()
    else:
        location = await component.handle_download_excel()
    if component.report_error:
        print(component.report_error, file=sys.stderr)
        return 1
    if location is None:
        print("No candidate on this record; nothing to download", file=sys.stderr)
        return 1
    print(location)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point: parse args -> settings -> logging -> component -> command."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    component = build_component(settings, args.record_id)
    try:
        return asyncio.run(run_command(args, component))
    finally:
        component.disconnect()


if __name__ == "__main__":
    sys.exit(main())
