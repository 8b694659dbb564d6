from dataclasses import dataclass
from typing import Generic, Iterable, List, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, eq=False)
class Scored(Generic[T]):
    item: T                                  # contour / ellipse being ranked
    score: float                             # product of subscores, higher is better

    # inverted order: the higher score sorts first
    def __lt__(self, other: "Scored") -> bool:
        return self.score > other.score

    def __gt__(self, other: "Scored") -> bool:
        return self.score < other.score


def rank(scored: Iterable[Scored[T]]) -> List[Scored[T]]:
    """Return a new list ordered best-first. The input is left untouched."""
    return sorted(scored, key=lambda s: s.score, reverse=True)


def unwrap(scored: Iterable[Scored[T]]) -> List[T]:
    return [s.item for s in scored]
