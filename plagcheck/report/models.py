from dataclasses import dataclass, field
from typing import Literal

Category = Literal["none", "low", "medium", "high"]


@dataclass(frozen=True)
class PeerSubmission:
    """Prior submission to compare against (subset of its stored fields)."""

    identifier: str
    normalized_text: str | None = None
    content_hash: str | None = None


@dataclass(frozen=True)
class MatchResult:
    """Similarity with one peer; score is in [0, 1], rounded to 4 decimals."""

    peer_identifier: str
    score: float


@dataclass(frozen=True)
class SimilarityReport:
    """Outcome of comparing one submission with its peers.

    ``matches`` is sorted by descending score, ``score`` is the top match score
    (0 without matches) and ``category`` is the bucket of ``score``.
    """

    score: float = 0.0
    category: Category = "none"
    matches: list[MatchResult] = field(default_factory=list)
    content_hash: str | None = None
    normalized_text: str | None = None

    @property
    def top_match(self) -> MatchResult | None:
        return self.matches[0] if self.matches else None
