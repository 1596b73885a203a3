from plagcheck.report.builder import build_report
from plagcheck.report.categories import bucket_score, should_alert
from plagcheck.report.models import MatchResult, PeerSubmission, SimilarityReport
from plagcheck.report.reciprocal import merge_reciprocal_match, reciprocal_updates

__all__ = [
    "MatchResult",
    "PeerSubmission",
    "SimilarityReport",
    "bucket_score",
    "build_report",
    "merge_reciprocal_match",
    "reciprocal_updates",
    "should_alert",
]
