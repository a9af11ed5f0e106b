"""Builds EvaluationDetails from the backend's JSON payload."""

from typing import Any

from file_uploader.widget.exceptions import DetailsParseError
from file_uploader.widget.models import (
    CandidateDocument,
    CandidateInfo,
    Document,
    EvaluationDetails,
    NameEntry,
)


def parse_evaluation_details(payload: Any) -> EvaluationDetails | None:
    """Build EvaluationDetails from a decoded JSON payload.

    A null payload means the record has no evaluation yet and yields None.

    Raises:
        DetailsParseError: if the payload does not have the expected shape.
    """
    if payload is None:
        return None
    if not isinstance(payload, dict):
        raise DetailsParseError("Evaluation details must be an object")
    return EvaluationDetails(
        candidate_doc=_build_candidate_doc(payload.get("candidateDoc")),
        document_list=_build_documents(payload.get("documentList")),
        report_ready=bool(payload.get("reportReady", False)),
    )


def _build_candidate_doc(raw: Any) -> CandidateDocument | None:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise DetailsParseError("'candidateDoc' must be an object or null")
    candidate_id = raw.get("id")
    return CandidateDocument(
        id=str(candidate_id) if candidate_id is not None else None,
        info=_build_info(raw.get("info")),
    )


def _build_info(raw: Any) -> CandidateInfo | None:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise DetailsParseError("'candidateDoc.info' must be an object or null")
    names_raw = raw.get("names") or []
    if not isinstance(names_raw, list):
        raise DetailsParseError("'candidateDoc.info.names' must be a list")
    names = [
        NameEntry(value=str(item.get("value", "")))
        for item in names_raw
        if isinstance(item, dict)
    ]
    dob = raw.get("dateOfBirth")
    return CandidateInfo(names=names, date_of_birth=str(dob) if dob else None)


def _build_documents(raw: Any) -> list[Document]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise DetailsParseError("'documentList' must be a list")
    documents: list[Document] = []
    for i, item in enumerate(raw):
        if not isinstance(item, dict):
            raise DetailsParseError(f"documentList[{i}] must be an object")
        documents.append(
            Document(
                name=str(item.get("name", "")),
                url=item.get("url"),
                document_type=item.get("type"),
                uploaded_at=item.get("uploadedAt"),
            )
        )
    return documents
