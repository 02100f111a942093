"""
In-memory per-category score history and percentile comparison.
"""
import logging
import threading
from typing import Dict, Iterable, List, Tuple

from quizwizard.core.errors import InvalidScore, UnknownCategory

logger = logging.getLogger(__name__)

RANDOM_CATEGORY = "random"


def normalize_category(category: str) -> str:
    """Trim surrounding whitespace and lowercase a category key."""
    return (category or "").strip().lower()


def comparison_percentage(scores: Iterable[float], new_score: float) -> float:
    """Percentage of ``scores`` strictly below ``new_score``; 0 when empty."""
    scores = list(scores)
    if not scores:
        return 0.0
    better_than = sum(1 for score in scores if new_score > score)
    return better_than / len(scores) * 100


class ScoreLedger:
    """Append-only score history per category.

    Categories are fixed at construction. Every read and write goes through
    a single lock so a submission's compare and append cannot interleave
    with another submission to the same category.
    """

    def __init__(self, categories: Iterable[str] = ()):
        self._scores: Dict[str, List[float]] = {}
        self._lock = threading.Lock()
        for category in categories:
            self._scores.setdefault(normalize_category(category), [])

    def __len__(self) -> int:
        return len(self._scores)

    def __contains__(self, category: str) -> bool:
        return normalize_category(category) in self._scores

    def categories(self) -> List[str]:
        return list(self._scores)

    def history(self, category: str) -> Tuple[float, ...]:
        key = self._resolve(category)
        with self._lock:
            return tuple(self._scores[key])

    def compare(self, category: str, new_score: float) -> float:
        """Percentage of previously recorded scores strictly below ``new_score``."""
        key = self._resolve(category)
        _check_score(new_score)
        with self._lock:
            return comparison_percentage(self._scores[key], new_score)

    def append(self, category: str, new_score: float) -> None:
        key = self._resolve(category)
        _check_score(new_score)
        with self._lock:
            self._scores[key].append(new_score)

    def compare_and_append(self, category: str, new_score: float) -> Tuple[float, int]:
        """Compare against the existing history, then record the score.

        Returns the comparison percentage and the number of scores that
        existed before the append.
        """
        key = self._resolve(category)
        _check_score(new_score)
        with self._lock:
            scores = self._scores[key]
            prior_count = len(scores)
            comparison = comparison_percentage(scores, new_score)
            scores.append(new_score)
        logger.debug(f"Recorded score {new_score} for {key} ({prior_count} prior)")
        return comparison, prior_count

    def _resolve(self, category: str) -> str:
        key = normalize_category(category)
        if not key:
            raise UnknownCategory("a category must be provided")
        if key not in self._scores:
            raise UnknownCategory(f"category '{key}' does not exist")
        return key


def _check_score(score: float) -> None:
    if not 0.0 <= score <= 100.0:
        raise InvalidScore("score must be a value between 0 and 100")
