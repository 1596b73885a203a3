"""Pure helpers for recording a new match on the matched peers' own reports.

Persisting the results, and serializing concurrent updates of the same peer,
is left to the caller.
"""

from collections.abc import Mapping
from dataclasses import replace

from plagcheck.report.categories import bucket_score
from plagcheck.report.models import MatchResult, SimilarityReport


def merge_reciprocal_match(
    peer_report: SimilarityReport | None,
    submission_id: str,
    score: float,
) -> SimilarityReport:
    """Return the peer's report with ``submission_id`` recorded at ``score``.

    An existing entry for the submission is overwritten. The peer's top score
    only ever grows: it becomes the max of its previous score and ``score``.
    """
    current = peer_report or SimilarityReport()
    matches = [m for m in current.matches if m.peer_identifier != submission_id]
    matches.append(MatchResult(submission_id, score))
    matches.sort(key=lambda match: match.score, reverse=True)

    top_score = max(current.score, score)
    return replace(current, score=top_score, category=bucket_score(top_score), matches=matches)


def reciprocal_updates(
    report: SimilarityReport,
    submission_id: str,
    peer_reports: Mapping[str, SimilarityReport | None],
) -> dict[str, SimilarityReport]:
    """Merged reports for every matched peer, keyed by peer identifier.

    Matches whose peer is missing from ``peer_reports`` are skipped.
    """
    updates: dict[str, SimilarityReport] = {}
    for match in report.matches:
        if match.peer_identifier not in peer_reports:
            continue
        updates[match.peer_identifier] = merge_reciprocal_match(
            peer_reports[match.peer_identifier], submission_id, match.score
        )
    return updates
