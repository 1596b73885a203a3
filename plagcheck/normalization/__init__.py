from plagcheck.normalization.normalizer import normalize_text

__all__ = ["normalize_text"]
