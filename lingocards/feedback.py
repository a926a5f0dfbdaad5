"""
Feedback tiers layered on top of the similarity score.

The score itself is policy-free; this module decides what a score means
for the learner (correct and reveal the answer, close, or incorrect).
"""

from dataclasses import dataclass
from typing import Optional

from .env import DEFAULT_CORRECT_THRESHOLD, DEFAULT_CLOSE_THRESHOLD, Settings
from .similarity import score

CORRECT = "correct"
CLOSE = "close"
INCORRECT = "incorrect"

TIERS = (CORRECT, CLOSE, INCORRECT)


@dataclass(frozen=True)
class Thresholds:
    correct: int = DEFAULT_CORRECT_THRESHOLD
    close: int = DEFAULT_CLOSE_THRESHOLD

    def __post_init__(self):
        if not 0 <= self.close <= self.correct <= 100:
            raise ValueError(
                f"Thresholds must satisfy 0 <= close <= correct <= 100 "
                f"(got close={self.close}, correct={self.correct})"
            )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Thresholds":
        return cls(correct=settings.correct_threshold, close=settings.close_threshold)


DEFAULT_THRESHOLDS = Thresholds()


@dataclass(frozen=True)
class Feedback:
    score: int
    tier: str
    transcript: str
    reference: str

    @property
    def should_reveal(self) -> bool:
        return self.tier == CORRECT

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "tier": self.tier,
            "transcript": self.transcript,
            "reference": self.reference,
            "reveal": self.should_reveal,
        }


def classify(value: int, thresholds: Optional[Thresholds] = None) -> str:
    """Map a 0-100 score onto a feedback tier."""
    thresholds = thresholds or DEFAULT_THRESHOLDS
    if value >= thresholds.correct:
        return CORRECT
    if value >= thresholds.close:
        return CLOSE
    return INCORRECT


def evaluate(transcript: str, reference: str, thresholds: Optional[Thresholds] = None) -> Feedback:
    """Score a transcript against its reference and classify the result."""
    value = score(transcript, reference)
    return Feedback(
        score=value,
        tier=classify(value, thresholds),
        transcript=transcript or "",
        reference=reference or "",
    )
