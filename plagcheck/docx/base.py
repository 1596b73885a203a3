from abc import ABC, abstractmethod


class BaseDocxExtractor(ABC):
    """Contract for DOCX text extraction adapters."""

    @abstractmethod
    def extract(self, docx_bytes: bytes) -> str:
        """Extract raw text from a Word document.

        Raises:
            DocxExtractionError: if the document cannot be opened or the
                extraction library is not installed.
        """
