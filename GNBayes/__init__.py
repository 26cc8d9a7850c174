"""
GNBayes: Gaussian Naive Bayes classification over continuous features.
"""

from .classifier import (
    NaiveBayes,
    MLModel,
    Evaluator,
    QuizResult,
    QuizOutcome,
    QuizReport,
    NaiveBayesError,
    InvalidTrainingData,
    UnknownClass,
    IndexOutOfRange,
    DimensionMismatch,
    DatasetError,
    ClassLabel,
    FeatureVector,
    TrainingData,
)

from .adapters import Record, load_records, group_by_class, split_records

__all__ = [
    "NaiveBayes",
    "MLModel",
    "Evaluator",
    "QuizResult",
    "QuizOutcome",
    "QuizReport",
    "NaiveBayesError",
    "InvalidTrainingData",
    "UnknownClass",
    "IndexOutOfRange",
    "DimensionMismatch",
    "DatasetError",
    "ClassLabel",
    "FeatureVector",
    "TrainingData",
    "Record",
    "load_records",
    "group_by_class",
    "split_records",
]
