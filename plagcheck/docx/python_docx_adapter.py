"""DOCX text extraction using python-docx.

Body paragraphs and tables are emitted in document order; a table becomes one
tab-separated line per non-empty row. Formatting, headers, footers and images
are ignored.
"""

import io
from typing import TYPE_CHECKING

from plagcheck.docx.base import BaseDocxExtractor
from plagcheck.docx.exceptions import DocxExtractionError

if TYPE_CHECKING:
    from docx.table import Table


class PythonDocxAdapter(BaseDocxExtractor):
    """Extracts raw text from DOCX bytes with python-docx."""

    def extract(self, docx_bytes: bytes) -> str:
        try:
            import docx
            from docx.table import Table
        except ImportError as exc:
            raise DocxExtractionError(
                "python-docx package required for DOCX extraction: pip install python-docx"
            ) from exc

        try:
            document = docx.Document(io.BytesIO(docx_bytes))
            lines: list[str] = []
            for block in document.iter_inner_content():
                if isinstance(block, Table):
                    lines.extend(self._table_lines(block))
                else:
                    lines.append(block.text)
        except Exception as exc:
            raise DocxExtractionError(f"python-docx could not read DOCX: {exc}") from exc
        return "\n".join(lines).strip()

    @staticmethod
    def _table_lines(table: "Table") -> list[str]:
        lines = []
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells]
            if any(cells):
                lines.append("\t".join(cells))
        return lines
