from datetime import UTC, datetime

from welfare.storage.paths import clean_segment, document_path

UPLOADED_AT = datetime(2025, 3, 1, 10, 30, tzinfo=UTC)


class TestDocumentPath:
    def test_layout_is_owner_millis_unique_name(self) -> None:
        path = document_path("user-1", "aadhaar.pdf", UPLOADED_AT, unique="abc123")

        assert path == "user-1/1740825000000_abc123_aadhaar.pdf"

    def test_same_inputs_get_distinct_paths(self) -> None:
        first = document_path("user-1", "ID Proof", UPLOADED_AT)
        second = document_path("user-1", "ID Proof", UPLOADED_AT)

        assert first != second
        assert first.startswith("user-1/1740825000000_")
        assert first.endswith("_ID_Proof")


class TestCleanSegment:
    def test_replaces_unsafe_characters(self) -> None:
        assert clean_segment("Income Cert (2024).pdf") == "Income_Cert_2024_.pdf"

    def test_strips_traversal(self) -> None:
        assert "/" not in clean_segment("../../etc/passwd")
        assert not clean_segment("../../etc/passwd").startswith(".")

    def test_empty_name_falls_back(self) -> None:
        assert clean_segment("   ") == "document"
