"""Read-only projections of EvaluationDetails for display."""

import re

from file_uploader.widget.models import CandidateDocument, Document, EvaluationDetails

PLACEHOLDER = "N/A"
INERT_LINK = "#"
DEFAULT_EVAL_URL_TEMPLATE = "https://eval.trential.dev/candidate/{candidate_id}"

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]", re.IGNORECASE)


def candidate_doc(details: EvaluationDetails | None) -> CandidateDocument | None:
    return details.candidate_doc if details is not None else None


def candidate_id(details: EvaluationDetails | None) -> str | None:
    doc = candidate_doc(details)
    return doc.id if doc is not None and doc.id else None


def candidate_name(details: EvaluationDetails | None) -> str:
    doc = candidate_doc(details)
    if doc is not None and doc.info is not None and doc.info.names:
        return doc.info.names[0].value
    return PLACEHOLDER


def candidate_dob(details: EvaluationDetails | None) -> str:
    doc = candidate_doc(details)
    if doc is not None and doc.info is not None and doc.info.date_of_birth:
        return doc.info.date_of_birth
    return PLACEHOLDER


def candidate_eval_url(
    details: EvaluationDetails | None,
    template: str = DEFAULT_EVAL_URL_TEMPLATE,
) -> str:
    """External review link for the candidate, or ``"#"`` when there is no id."""
    cid = candidate_id(details)
    return template.format(candidate_id=cid) if cid else INERT_LINK


def document_list(details: EvaluationDetails | None) -> list[Document]:
    return list(details.document_list) if details is not None else []


def document_count(details: EvaluationDetails | None) -> int:
    return len(document_list(details))


def has_documents(details: EvaluationDetails | None) -> bool:
    return document_count(details) > 0


def reports_ready(details: EvaluationDetails | None) -> bool:
    return details is not None and details.report_ready


def slugify(display_name: str) -> str:
    """Filename-safe slug: every non-alphanumeric character becomes ``_``, lowercased."""
    return _NON_ALPHANUMERIC.sub("_", display_name).lower()
