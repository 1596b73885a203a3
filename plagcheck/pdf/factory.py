from typing import ClassVar

from plagcheck.config.settings import Settings
from plagcheck.pdf.base import BasePdfExtractor
from plagcheck.pdf.pdfplumber_adapter import PdfPlumberAdapter
from plagcheck.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Picks the PDF text extractor named by ``Settings.pdf_engine``."""

    ADAPTERS: ClassVar[dict[str, type[BasePdfExtractor]]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.strip().lower()
        try:
            adapter_cls = cls.ADAPTERS[engine]
        except KeyError:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {sorted(cls.ADAPTERS)}"
            ) from None
        return adapter_cls()
