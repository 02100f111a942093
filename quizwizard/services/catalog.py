"""
Read-only question catalog and the JSON loader that builds it at startup.
"""
import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from pydantic import ValidationError

from quizwizard.core.errors import CatalogLoadError
from quizwizard.models.quiz import Question
from quizwizard.services.ledger import RANDOM_CATEGORY, ScoreLedger, normalize_category

logger = logging.getLogger(__name__)


class QuestionCatalog(Mapping[str, Tuple[Question, ...]]):
    """Category-partitioned questions. Never mutated after construction."""

    def __init__(self, questions: Optional[Mapping[str, Iterable[Question]]] = None):
        buckets: Dict[str, Tuple[Question, ...]] = {}
        for category, qs in (questions or {}).items():
            key = normalize_category(category)
            buckets[key] = buckets.get(key, ()) + tuple(qs)
        self._questions = MappingProxyType(buckets)

    def __getitem__(self, category: str) -> Tuple[Question, ...]:
        return self._questions[category]

    def __iter__(self) -> Iterator[str]:
        return iter(self._questions)

    def __len__(self) -> int:
        return len(self._questions)

    def question_count(self) -> int:
        return sum(len(qs) for qs in self._questions.values())


def parse_catalog(raw: Mapping[str, Sequence[dict]]) -> QuestionCatalog:
    """Validate a ``{category: [question, ...]}`` mapping into a catalog."""
    if not isinstance(raw, Mapping):
        raise CatalogLoadError("question data must be an object keyed by category")
    questions: Dict[str, List[Question]] = {}
    for category, items in raw.items():
        key = normalize_category(category)
        if not key:
            raise CatalogLoadError("question data contains an empty category name")
        if not isinstance(items, list):
            raise CatalogLoadError(f"questions for category '{key}' must be a list")
        try:
            questions[key] = [Question.model_validate(item) for item in items]
        except ValidationError as e:
            raise CatalogLoadError(f"invalid question in category '{key}': {e}") from e
    return QuestionCatalog(questions)


def load_catalog(path: Union[str, Path]) -> QuestionCatalog:
    """Load the question catalog from a JSON file."""
    path = Path(path)
    logger.info(f"Loading questions from {path}")
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise CatalogLoadError(f"failed to read file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"failed to parse JSON within file {path}: {e}") from e

    catalog = parse_catalog(raw)
    logger.info(f"Loaded {catalog.question_count()} questions across {len(catalog)} categories")
    return catalog


def build_ledger(catalog: Mapping[str, Sequence[Question]]) -> ScoreLedger:
    """Create an empty score history for each catalog category plus ``random``."""
    return ScoreLedger([RANDOM_CATEGORY, *catalog.keys()])
