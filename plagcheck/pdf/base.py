from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract plain text from the pages of a submitted PDF.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            Page texts joined by newlines, stripped. Empty for a PDF with no text layer.

        Raises:
            PdfExtractionError: if the bytes cannot be parsed as a PDF.
        """
