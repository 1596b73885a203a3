from collections.abc import Iterable

from plagcheck.report.categories import bucket_score
from plagcheck.report.models import MatchResult, PeerSubmission, SimilarityReport
from plagcheck.similarity.vectorizer import TermVector, build_vector, cosine_similarity

SCORE_PRECISION = 4


def build_report(
    normalized_text: str | None,
    content_hash: str | None,
    peers: Iterable[PeerSubmission],
) -> SimilarityReport:
    """Score a submission against a snapshot of its peers.

    Peers sharing the submission's content hash score 1 without vector work.
    Peers with no comparable content score 0 and are left out of ``matches``.
    Tied scores keep the order in which peers were supplied.
    """
    if not normalized_text:
        return SimilarityReport(content_hash=content_hash, normalized_text=normalized_text)

    vector = build_vector(normalized_text)
    matches: list[MatchResult] = []
    for peer in peers:
        score = _score_peer(vector, content_hash, peer)
        if score > 0:
            matches.append(MatchResult(peer.identifier, round(score, SCORE_PRECISION)))

    matches.sort(key=lambda match: match.score, reverse=True)
    top_score = matches[0].score if matches else 0.0
    return SimilarityReport(
        score=top_score,
        category=bucket_score(top_score),
        matches=matches,
        content_hash=content_hash,
        normalized_text=normalized_text,
    )


def _score_peer(vector: TermVector, content_hash: str | None, peer: PeerSubmission) -> float:
    if content_hash and peer.content_hash and content_hash == peer.content_hash:
        return 1.0
    if peer.normalized_text:
        return cosine_similarity(vector, build_vector(peer.normalized_text))
    return 0.0
