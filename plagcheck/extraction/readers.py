import json
from abc import ABC, abstractmethod
from typing import ClassVar

from plagcheck.docx.base import BaseDocxExtractor
from plagcheck.extraction.exceptions import MalformedJsonError, MissingExtractorError
from plagcheck.pdf.base import BasePdfExtractor


class BaseFileReader(ABC):
    """Turns the bytes of one submitted file into text."""

    extensions: ClassVar[frozenset[str]] = frozenset()

    @abstractmethod
    def read(self, data: bytes) -> str:
        raise NotImplementedError


class PlainTextReader(BaseFileReader):
    extensions = frozenset({".txt", ".md", ".markdown", ".csv", ".tsv"})

    def read(self, data: bytes) -> str:
        return data.decode("utf-8", errors="replace")


class JsonReader(BaseFileReader):
    """Structured JSON is re-serialized so its keys and values stay searchable."""

    extensions = frozenset({".json"})

    def read(self, data: bytes) -> str:
        # ValueError covers JSONDecodeError and the int digit limit.
        try:
            parsed = json.loads(data.decode("utf-8"))
            if isinstance(parsed, str):
                return parsed
            return json.dumps(parsed, ensure_ascii=False, separators=(",", ":"))
        except (UnicodeDecodeError, ValueError, RecursionError) as exc:
            raise MalformedJsonError(f"Invalid JSON: {exc}") from exc


class PdfReader(BaseFileReader):
    extensions = frozenset({".pdf"})

    def __init__(self, pdf_extractor: BasePdfExtractor | None) -> None:
        self._pdf_extractor = pdf_extractor

    def read(self, data: bytes) -> str:
        if self._pdf_extractor is None:
            raise MissingExtractorError("No PDF extractor configured")
        return self._pdf_extractor.extract(data)


class DocxReader(BaseFileReader):
    extensions = frozenset({".docx"})

    def __init__(self, docx_extractor: BaseDocxExtractor | None) -> None:
        self._docx_extractor = docx_extractor

    def read(self, data: bytes) -> str:
        if self._docx_extractor is None:
            raise MissingExtractorError("No DOCX extractor configured")
        return self._docx_extractor.extract(data)
