from pathlib import Path

from plagcheck.extraction.exceptions import FileReadError


class FileLoader:
    """Resolves a submitted file reference to a path and reads its bytes."""

    def __init__(self, files_root: Path | None = None) -> None:
        self._files_root = files_root

    def resolve(self, reference: str) -> Path:
        """Relative references are anchored at ``files_root`` when one is configured."""
        path = Path(reference)
        if self._files_root is not None and not path.is_absolute():
            return self._files_root / path
        return path

    def load(self, reference: str) -> bytes:
        """Read file bytes from disk.

        Raises:
            FileNotFoundError: if no file exists at the resolved path.
            FileReadError: if the file exists but cannot be read.
        """
        path = self.resolve(reference)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        try:
            return path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Cannot read {path}: {exc}") from exc
