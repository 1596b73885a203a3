"""Raw term-frequency vectors and their cosine similarity.

No IDF weighting, stemming or stop-word removal: documents that share many
short common words score higher than a semantic measure would.
"""

import math
from collections import Counter

TermVector = dict[str, int]


def build_vector(normalized_text: str | None) -> TermVector:
    if not normalized_text:
        return {}
    return dict(Counter(token for token in normalized_text.split(" ") if token))


def cosine_similarity(a: TermVector, b: TermVector) -> float:
    """Cosine of the angle between two term vectors, clamped to [0, 1].

    An empty vector on either side scores 0.
    """
    if not a or not b:
        return 0.0

    smaller, larger = (a, b) if len(a) < len(b) else (b, a)
    dot = sum(weight * larger.get(token, 0) for token, weight in smaller.items())

    norm_a = math.sqrt(sum(value * value for value in a.values()))
    norm_b = math.sqrt(sum(value * value for value in b.values()))
    if norm_a == 0 or norm_b == 0:
        return 0.0

    return min(1.0, max(0.0, dot / (norm_a * norm_b)))
