"""
Quiz evaluator for trained classifiers.

This module holds back labeled records from training, asks the model to
classify each of them, and reports per-record whether the prediction matched
the known label.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple

from .model import MLModel
from .types import ClassLabel


class QuizResult(Enum):
    """Result of quizzing the model on one record."""
    CORRECT = "CORRECT"
    WRONG = "WRONG"


@dataclass(frozen=True)
class QuizOutcome:
    features: Tuple[float, ...]
    expected: ClassLabel
    predicted: ClassLabel

    @property
    def result(self) -> QuizResult:
        return QuizResult.CORRECT if self.predicted == self.expected else QuizResult.WRONG


class QuizReport:
    """Report from a quiz run."""

    def __init__(self):
        self.outcomes: List[QuizOutcome] = []

    @property
    def num_correct(self) -> int:
        return sum(1 for o in self.outcomes if o.result == QuizResult.CORRECT)

    @property
    def num_wrong(self) -> int:
        return len(self.outcomes) - self.num_correct

    @property
    def accuracy(self) -> float:
        if not self.outcomes:
            return 0.0
        return self.num_correct / len(self.outcomes)

    def __len__(self):
        return len(self.outcomes)

    def summary(self) -> str:
        return (f"Correct: {self.num_correct}, Wrong: {self.num_wrong}, "
                f"Accuracy: {self.accuracy:.3f}")

    def __str__(self):
        lines = [o.result.value for o in self.outcomes]
        lines.append(self.summary())
        return "\n".join(lines)


class Evaluator:
    """
    Quizzes a model on held-out records with known labels.

    Records are anything exposing `features` and `label`, such as the
    `Record` objects produced by the CSV loader.
    """

    def __init__(self, model: MLModel, verbose: bool = False):
        """
        Initialize evaluator.

        Args:
            model: Trained model to quiz
            verbose: Print each CORRECT/WRONG line as it is produced
        """
        self.model = model
        self.verbose = verbose

    def evaluate(self, records: Iterable) -> QuizReport:
        """
        Classify every record and compare against its expected label.

        Args:
            records: Held-out records with `features` and `label`

        Returns:
            QuizReport with one outcome per record, in input order
        """
        report = QuizReport()

        for record in records:
            predicted = self.model.predict(record.features)
            outcome = QuizOutcome(tuple(record.features), record.label, predicted)
            report.outcomes.append(outcome)

            if self.verbose:
                print(outcome.result.value)

        return report
