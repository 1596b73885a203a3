from plagcheck.report.models import Category, SimilarityReport

LOW_THRESHOLD = 0.4
MEDIUM_THRESHOLD = 0.6
HIGH_THRESHOLD = 0.8

HIGH_SIMILARITY_ALERT_THRESHOLD = 0.8


def bucket_score(score: float) -> Category:
    """Map a similarity score to its severity bucket (lower edges inclusive)."""
    if score >= HIGH_THRESHOLD:
        return "high"
    if score >= MEDIUM_THRESHOLD:
        return "medium"
    if score >= LOW_THRESHOLD:
        return "low"
    return "none"


def should_alert(report: SimilarityReport) -> bool:
    """Whether the caller should raise a high-similarity notification."""
    return report.score >= HIGH_SIMILARITY_ALERT_THRESHOLD
