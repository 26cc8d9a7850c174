"""
Exceptions raised by the classifier and its data collaborators.

Every error is a caller contract violation detected before any computation
starts; none of them is retryable.
"""


class NaiveBayesError(Exception):
    """Base class for all GNBayes errors."""


class InvalidTrainingData(NaiveBayesError, ValueError):
    """Construction input is empty or malformed."""


class UnknownClass(NaiveBayesError, KeyError):
    """A query referenced a class label absent from the training data."""

    def __init__(self, label):
        super().__init__(label)
        self.label = label

    def __str__(self):
        return f"unknown class label: {self.label!r}"


class IndexOutOfRange(NaiveBayesError, IndexError):
    """A feature index fell outside [0, D)."""

    def __init__(self, index, dimensionality: int):
        super().__init__(
            f"feature index {index} out of range for dimensionality {dimensionality}"
        )
        self.index = index
        self.dimensionality = dimensionality


class DimensionMismatch(NaiveBayesError, ValueError):
    """A query vector's length differs from the model's dimensionality."""

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"expected a feature vector of length {expected}, got {actual}"
        )
        self.expected = expected
        self.actual = actual


class DatasetError(NaiveBayesError, ValueError):
    """A data file could not be turned into training records."""
