import hashlib


def content_hash(normalized_text: str | None) -> str | None:
    """SHA-256 hex digest of normalized text, used only as an exact-duplicate shortcut."""
    if not normalized_text:
        return None
    return hashlib.sha256(normalized_text.encode("utf-8")).hexdigest()
