import logging
from typing import Optional

logger = logging.getLogger(__name__)

MIN_MATCH_SCORE = 0.0
MAX_MATCH_SCORE = 100.0


def clamp_match_score(score: Optional[float]) -> Optional[float]:
    """Clamp a service-assigned match score to [0, 100].

    The LLM is asked for scores in range but nothing enforces it, so out of
    range values are logged and clipped. None passes through unchanged.

    Args:
        score: Score as returned by the service

    Returns:
        Score in range [0, 100], or None
    """
    if score is None:
        return None
    score = float(score)
    if not (MIN_MATCH_SCORE <= score <= MAX_MATCH_SCORE):
        logger.warning(f"Match score out of range: {score}, clipping to [0, 100]")
        return max(MIN_MATCH_SCORE, min(MAX_MATCH_SCORE, score))
    return score


def contains_ci(haystack: Optional[str], needle: str) -> bool:
    """Case-insensitive substring test. A None haystack never matches."""
    return needle.lower() in (haystack or "").lower()
