from dataclasses import dataclass, field

from plagcheck.report.models import SimilarityReport


@dataclass(frozen=True)
class SubmissionDocument:
    """Raw inputs of one submission: file references and optional literal text."""

    files: list[str] = field(default_factory=list)
    text: str | None = None


@dataclass(frozen=True)
class SubmissionAnalysis:
    """What the caller persists alongside the submission."""

    extracted_text: str | None
    report: SimilarityReport
