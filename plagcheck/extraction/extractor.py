from collections.abc import Sequence
from pathlib import PurePath

from plagcheck.docx.exceptions import DocxExtractionError
from plagcheck.extraction.exceptions import ExtractionError
from plagcheck.extraction.file_loader import FileLoader
from plagcheck.extraction.readers import BaseFileReader
from plagcheck.logging.logger import Log, WarningSink
from plagcheck.pdf.exceptions import PdfExtractionError

RECOVERABLE_ERRORS: tuple[type[Exception], ...] = (
    ExtractionError,
    PdfExtractionError,
    DocxExtractionError,
    OSError,
)


class TextExtractor:
    """Combines literal submission text and the text of its files into one blob.

    Files are dispatched to a reader by extension (case-insensitive). Files with
    an unknown extension are skipped. A file that fails to load or parse is
    reported to ``warn`` and contributes nothing; the remaining files are still
    processed. Chunks keep the order the caller supplied.
    """

    def __init__(
        self,
        file_loader: FileLoader,
        readers: Sequence[BaseFileReader],
        warn: WarningSink = Log.warning,
    ) -> None:
        self._file_loader = file_loader
        self._warn = warn
        self._readers: dict[str, BaseFileReader] = {}
        for reader in readers:
            for extension in reader.extensions:
                self._readers[extension] = reader

    @property
    def supported_extensions(self) -> frozenset[str]:
        return frozenset(self._readers)

    def extract(self, files: Sequence[str], provided_text: str | None = None) -> str | None:
        """Return the combined, trimmed text, or None when nothing usable was found."""
        chunks: list[str] = []
        if provided_text:
            chunks.append(provided_text)

        for reference in files:
            content = self._extract_file(reference)
            if content:
                chunks.append(content)

        combined = "\n".join(chunks).strip()
        return combined or None

    def _extract_file(self, reference: str) -> str | None:
        extension = PurePath(reference).suffix.lower()
        reader = self._readers.get(extension)
        if reader is None:
            Log.debug(f"Skipping {reference}: unsupported extension '{extension}'")
            return None
        try:
            return reader.read(self._file_loader.load(reference))
        except RECOVERABLE_ERRORS as exc:
            self._warn(f"Failed to extract text from {reference}: {exc}")
            return None
