from typing import Any

import pytest

from file_uploader.widget.exceptions import DetailsParseError, RemoteCallError
from file_uploader.widget.models import CandidateDocument, Document, NameEntry
from file_uploader.widget.parsing import parse_evaluation_details


class TestParseEvaluationDetails:
    def test_null_payload_is_none(self) -> None:
        assert parse_evaluation_details(None) is None

    def test_builds_candidate(self, details_payload: dict[str, Any]) -> None:
        details = parse_evaluation_details(details_payload)

        assert details is not None
        assert details.candidate_doc is not None
        assert details.candidate_doc.id == "cand-42"
        assert details.candidate_doc.info is not None
        assert details.candidate_doc.info.names[0] == NameEntry(value="Jane Doe")
        assert details.candidate_doc.info.date_of_birth == "1991-02-03"

    def test_builds_documents(self, details_payload: dict[str, Any]) -> None:
        details = parse_evaluation_details(details_payload)

        assert details is not None
        assert details.document_list[0] == Document(
            name="Passport.pdf",
            url="https://files.example.com/p.pdf",
            document_type="identity",
        )
        assert len(details.document_list) == 2
        assert details.report_ready is True

    def test_missing_candidate_doc(self) -> None:
        details = parse_evaluation_details({"documentList": []})

        assert details is not None
        assert details.candidate_doc is None
        assert details.report_ready is False

    def test_numeric_candidate_id_becomes_string(self) -> None:
        details = parse_evaluation_details({"candidateDoc": {"id": 17}})

        assert details is not None
        assert details.candidate_doc == CandidateDocument(id="17")


class TestParseRejects:
    def test_non_object_payload(self) -> None:
        with pytest.raises(DetailsParseError, match="must be an object"):
            parse_evaluation_details(["nope"])

    def test_document_list_not_a_list(self) -> None:
        with pytest.raises(DetailsParseError, match="documentList"):
            parse_evaluation_details({"documentList": "x"})

    def test_document_entry_not_an_object(self) -> None:
        with pytest.raises(DetailsParseError, match=r"documentList\[0\]"):
            parse_evaluation_details({"documentList": [1]})

    def test_parse_error_is_a_remote_error(self) -> None:
        assert issubclass(DetailsParseError, RemoteCallError)
