"""
Gaussian Naive Bayes classification

This package provides the classifier, its model interface and error types,
and an evaluator that quizzes a trained model on held-out records.
"""

from .bayes import NaiveBayes

from .model import MLModel

from .evaluator import Evaluator, QuizResult, QuizOutcome, QuizReport

from .errors import (
    NaiveBayesError,
    InvalidTrainingData,
    UnknownClass,
    IndexOutOfRange,
    DimensionMismatch,
    DatasetError
)

from .types import (
    ClassLabel,
    FeatureVector,
    TrainingData
)

__all__ = [
    'NaiveBayes',
    'MLModel',
    'Evaluator',
    'QuizResult',
    'QuizOutcome',
    'QuizReport',
    'NaiveBayesError',
    'InvalidTrainingData',
    'UnknownClass',
    'IndexOutOfRange',
    'DimensionMismatch',
    'DatasetError',
    'ClassLabel',
    'FeatureVector',
    'TrainingData'
]
