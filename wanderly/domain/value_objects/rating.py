"""Rating value object - immutable and validated."""
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Rating:
    """Aggregate rating of an attraction: mean score and number of reviews."""
    value: float
    review_count: int = 0
    scale_max: float = 5.0

    def __post_init__(self):
        """Validate rating."""
        if self.value < 0:
            raise ValueError(f"Rating cannot be negative, got {self.value}")
        if self.value > self.scale_max:
            raise ValueError(f"Rating cannot exceed scale_max ({self.scale_max}), got {self.value}")
        if self.review_count < 0:
            raise ValueError(f"Review count cannot be negative, got {self.review_count}")

    @classmethod
    def from_scores(cls, scores: Iterable[float]) -> "Rating":
        """Arithmetic mean of the given scores; 0 when there are none."""
        scores = list(scores)
        if not scores:
            return cls(value=0.0, review_count=0)
        # float summation can overshoot the scale by an ulp
        mean = min(sum(scores) / len(scores), cls.scale_max)
        return cls(value=mean, review_count=len(scores))
