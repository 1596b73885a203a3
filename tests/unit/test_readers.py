from unittest.mock import MagicMock

import pytest

from plagcheck.docx.base import BaseDocxExtractor
from plagcheck.extraction.exceptions import MalformedJsonError, MissingExtractorError
from plagcheck.extraction.readers import DocxReader, JsonReader, PdfReader, PlainTextReader
from plagcheck.pdf.base import BasePdfExtractor


class TestPlainTextReader:
    def test_decodes_utf8(self) -> None:
        assert PlainTextReader().read("naïve café".encode()) == "naïve café"

    def test_replaces_undecodable_bytes(self) -> None:
        assert PlainTextReader().read(b"ok \xff end") == "ok � end"

    def test_covers_text_like_extensions(self) -> None:
        assert PlainTextReader.extensions == {".txt", ".md", ".markdown", ".csv", ".tsv"}


class TestJsonReader:
    def test_object_is_reserialized_compactly(self) -> None:
        assert JsonReader().read(b'{"a": 1}') == '{"a":1}'

    def test_string_value_is_returned_as_is(self) -> None:
        assert JsonReader().read(b'"my essay"') == "my essay"

    def test_list_keeps_non_ascii(self) -> None:
        assert JsonReader().read('["é", 2]'.encode()) == '["é",2]'

    def test_malformed_json_raises(self) -> None:
        with pytest.raises(MalformedJsonError):
            JsonReader().read(b"{not json")

    def test_invalid_utf8_raises(self) -> None:
        with pytest.raises(MalformedJsonError):
            JsonReader().read(b'"\xff"')

    def test_integer_past_digit_limit_raises(self) -> None:
        with pytest.raises(MalformedJsonError):
            JsonReader().read(b"[" + b"9" * 5000 + b"]")

    def test_excessive_nesting_raises(self) -> None:
        with pytest.raises(MalformedJsonError):
            JsonReader().read(b"[" * 100_000 + b"]" * 100_000)


class TestPdfReader:
    def test_delegates_to_extractor(self) -> None:
        extractor = MagicMock(spec=BasePdfExtractor)
        extractor.extract.return_value = "pdf text"
        assert PdfReader(extractor).read(b"%PDF") == "pdf text"
        extractor.extract.assert_called_once_with(b"%PDF")

    def test_missing_extractor_raises(self) -> None:
        with pytest.raises(MissingExtractorError, match="PDF"):
            PdfReader(None).read(b"%PDF")


class TestDocxReader:
    def test_delegates_to_extractor(self) -> None:
        extractor = MagicMock(spec=BaseDocxExtractor)
        extractor.extract.return_value = "docx text"
        assert DocxReader(extractor).read(b"PK") == "docx text"

    def test_missing_extractor_raises(self) -> None:
        with pytest.raises(MissingExtractorError, match="DOCX"):
            DocxReader(None).read(b"PK")
