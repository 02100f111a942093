"""Question shuffling and random-category selection."""
import random
from typing import Iterable, List, Mapping, Optional, Sequence, TypeVar

from quizwizard.models.quiz import Question

T = TypeVar("T")

RANDOM_QUIZ_SIZE = 5


class Shuffler:
    """Produces shuffled copies of question sequences.

    The random source is injectable so a seeded ``random.Random`` gives
    reproducible orderings.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    @classmethod
    def seeded(cls, seed: Optional[int]) -> "Shuffler":
        return cls(random.Random(seed))

    def shuffled_copy(self, items: Iterable[T]) -> List[T]:
        """Return a shuffled copy; the input is left untouched."""
        cpy = list(items)
        for i in range(len(cpy)):
            j = self.rng.randint(0, i)
            cpy[i], cpy[j] = cpy[j], cpy[i]
        return cpy

    def randomise(
        self,
        questions: Mapping[str, Sequence[Question]],
        limit: int = RANDOM_QUIZ_SIZE,
    ) -> List[Question]:
        """Pool every category, shuffle, and keep at most ``limit`` questions."""
        pooled: List[Question] = []
        for qs in questions.values():
            pooled.extend(qs)
        return self.shuffled_copy(pooled)[:limit]
