"""
Pronunciation practice over a single word card.

The speech recognizer delivers interim transcripts while the learner is
speaking and a final one when they stop. Every transcript is scored on its
own; the session keeps the best result and whether the answer was revealed.
"""

from typing import Optional

from .feedback import Feedback, Thresholds, evaluate
from .logger import StructuredLogger
from .schema import WordItem


def reference_for(item: WordItem) -> str:
    """Sentence the learner should say: the example, else the word itself."""
    return item.example or item.word


class PracticeSession:
    def __init__(
        self,
        item: WordItem,
        thresholds: Optional[Thresholds] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        self.item = item
        self.reference = reference_for(item)
        self.thresholds = thresholds
        self.logger = logger

        self.attempts = 0
        self.revealed = False
        self.transcript = ""
        self.latest: Optional[Feedback] = None
        self.best: Optional[Feedback] = None
        self.finished = False

    def update(self, transcript: str, final: bool = False) -> Feedback:
        """
        Score the current transcript.

        Args:
            transcript: Full transcript so far (not a delta)
            final: True when the recognizer has stopped listening

        Returns:
            Feedback for this transcript
        """
        if self.finished:
            # A new utterance after a final result starts a new attempt
            self.reset()

        self.transcript = transcript or ""
        feedback = evaluate(self.transcript, self.reference, self.thresholds)
        self.latest = feedback
        if self.best is None or feedback.score > self.best.score:
            self.best = feedback
        if feedback.should_reveal:
            self.revealed = True

        if self.logger:
            self.logger.record_score(feedback.score, feedback.tier)
            self.logger.debug(
                "Scored transcript",
                word_id=self.item.id,
                score=feedback.score,
                tier=feedback.tier,
                final=final,
            )

        if final:
            self.finished = True
            self.attempts += 1
            if self.logger:
                self.logger.record_attempt(self.revealed)
                self.logger.info(
                    "Practice attempt finished",
                    word_id=self.item.id,
                    score=feedback.score,
                    best=self.best.score,
                    revealed=self.revealed,
                )
        return feedback

    def reset(self):
        """Clear transcript state for a new attempt; reveal state is kept."""
        self.transcript = ""
        self.latest = None
        self.best = None
        self.finished = False

    def hide(self):
        """Hide the answer again, e.g. when moving back to this card."""
        self.revealed = False
