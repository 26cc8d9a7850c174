"""
Gaussian Naive Bayes classifier.

Each feature of each class is modelled as an independent normal distribution
fitted to the training values observed for that (feature, class) pair. A class
is scored by multiplying its per-feature densities with a uniform class prior,
and the best-scoring class is the prediction.

Statistics are recomputed from the training arrays on every query; nothing is
cached, so a score always reflects the data the model was built from.
"""

from collections.abc import Mapping
from numbers import Integral
from typing import Dict, Optional, Tuple

import numpy as np

from .errors import (
    DimensionMismatch,
    IndexOutOfRange,
    InvalidTrainingData,
    UnknownClass,
)
from .model import MLModel
from .types import ClassLabel, FeatureVector, TrainingData


class NaiveBayes(MLModel):
    """
    Gaussian Naive Bayes over continuous features.

    Training data format:
        {class_name: [[feature1, feature2, feature3, ...],
                      [feature1, feature2, feature3, ...]]}

    The model is immutable: training arrays are copied at construction and
    flagged read-only, so any number of threads may query one instance.
    """

    def __init__(self,
                 training_data: TrainingData,
                 dimensionality: int,
                 log_space: bool = False):
        """
        Build the classifier from a complete training set.

        Args:
            training_data: Mapping from class label to its training vectors
            dimensionality: Number of features D in every vector
            log_space: Compare classes by summed log-densities instead of
                       products of densities when classifying

        Raises:
            InvalidTrainingData: if the mapping is empty, a class has no
                vectors, a label is not a string, or a vector is not D finite
                real numbers long
        """
        if isinstance(dimensionality, bool) or not isinstance(dimensionality, Integral) \
                or dimensionality < 1:
            raise InvalidTrainingData(
                f"dimensionality must be a positive integer, got {dimensionality!r}"
            )
        if not isinstance(training_data, Mapping) or len(training_data) == 0:
            raise InvalidTrainingData("training data must contain at least one class")

        self._dimension = int(dimensionality)
        self._training_data: Dict[ClassLabel, np.ndarray] = {}
        for class_name, vectors in training_data.items():
            self._training_data[class_name] = self._build_class_array(class_name, vectors)
        self._classes: Tuple[ClassLabel, ...] = tuple(self._training_data)
        self.log_space = log_space

    def _build_class_array(self, class_name, vectors) -> np.ndarray:
        if not isinstance(class_name, str):
            raise InvalidTrainingData(f"class labels must be strings, got {class_name!r}")
        try:
            n_vectors = len(vectors)
        except TypeError:
            raise InvalidTrainingData(
                f"class {class_name!r} must map to a sequence of vectors"
            ) from None
        if n_vectors == 0:
            raise InvalidTrainingData(f"class {class_name!r} has no training vectors")

        for i, vector in enumerate(vectors):
            try:
                n_features = len(vector)
            except TypeError:
                raise InvalidTrainingData(
                    f"vector {i} of class {class_name!r} is not a sequence: {vector!r}"
                ) from None
            if n_features != self._dimension:
                raise InvalidTrainingData(
                    f"vector {i} of class {class_name!r} has {n_features} "
                    f"features, expected {self._dimension}"
                )

        try:
            array = np.array(vectors, dtype=np.float64)
        except (TypeError, ValueError) as exc:
            raise InvalidTrainingData(
                f"class {class_name!r} contains non-numeric feature values"
            ) from exc

        if array.ndim != 2 or array.shape[1] != self._dimension:
            raise InvalidTrainingData(
                f"class {class_name!r} must hold flat vectors of {self._dimension} "
                f"numbers, got an array of shape {array.shape}"
            )

        if not np.all(np.isfinite(array)):
            raise InvalidTrainingData(
                f"class {class_name!r} contains non-finite feature values"
            )

        array.setflags(write=False)
        return array

    @property
    def num_classes(self) -> int:
        return len(self._classes)

    @property
    def classes(self) -> Tuple[ClassLabel, ...]:
        """Class labels in the order of the training mapping."""
        return self._classes

    @property
    def dimensionality(self) -> int:
        return self._dimension

    def nfeatures(self) -> int:
        return self._dimension

    def nclasses(self) -> int:
        return self.num_classes

    def feature_column(self, index: int, class_name: ClassLabel) -> Tuple[float, ...]:
        """
        Values that one feature takes on across the training vectors of a class.

        Args:
            index: Position of the feature in the training vectors
            class_name: Class whose vectors are read

        Returns:
            Tuple of floats, in the original order of the training vectors
        """
        return tuple(self._column(index, class_name).tolist())

    def feature_likelihood(self, index: int, value: float, class_name: ClassLabel) -> float:
        """
        Density of `value` under the normal distribution fitted to a feature
        column. This is a density, so it may exceed 1.

        A column with zero variance collapses to a point mass: the likelihood
        is 1.0 for that exact value and 0.0 for anything else.
        """
        fs = self._column(index, class_name)
        value = float(value)

        fs_mean, fs_var, constant = self._gaussian_parameters(fs)
        if constant is not None:
            return 1.0 if value == constant else 0.0

        exponent = -((value - fs_mean) ** 2) / (2 * fs_var)
        return float(np.exp(exponent) / np.sqrt(2 * np.pi * fs_var))

    def feature_log_likelihood(self, index: int, value: float, class_name: ClassLabel) -> float:
        """
        Natural log of `feature_likelihood`, computed directly in log space.

        The point-mass case maps to 0.0 for the constant and -inf otherwise.
        """
        fs = self._column(index, class_name)
        value = float(value)

        fs_mean, fs_var, constant = self._gaussian_parameters(fs)
        if constant is not None:
            return 0.0 if value == constant else -np.inf

        return float(
            -0.5 * np.log(2 * np.pi * fs_var) - ((value - fs_mean) ** 2) / (2 * fs_var)
        )

    def class_likelihood(self, feature_values: FeatureVector, class_name: ClassLabel) -> float:
        """
        Unnormalized naive Bayes score of a feature vector for one class.

        The per-feature densities are multiplied together (independence
        assumption) and weighted by a uniform prior. The evidence term is
        omitted since it is the same for every class, so the result is only
        meaningful relative to other classes' scores.

        Raises:
            DimensionMismatch: if the vector does not have D features
            UnknownClass: if `class_name` is not a trained class
        """
        feature_values = self._check_vector(feature_values)
        self._class_array(class_name)

        res = 1.0
        for i, value in enumerate(feature_values):
            res *= self.feature_likelihood(i, value, class_name)
            if res == 0.0:
                # a single zero density vetoes the class
                break

        return res * (1.0 / self.num_classes)

    def class_log_likelihood(self, feature_values: FeatureVector, class_name: ClassLabel) -> float:
        """Log-space counterpart of `class_likelihood`; a vetoed class scores -inf."""
        feature_values = self._check_vector(feature_values)
        self._class_array(class_name)

        res = -np.log(self.num_classes)
        for i, value in enumerate(feature_values):
            res += self.feature_log_likelihood(i, value, class_name)
            if res == -np.inf:
                break

        return float(res)

    def scores(self, feature_values: FeatureVector) -> Dict[ClassLabel, float]:
        """Score of every class, in `classes` order, on the configured scale."""
        feature_values = self._check_vector(feature_values)
        score = self.class_log_likelihood if self.log_space else self.class_likelihood
        return {class_name: score(feature_values, class_name) for class_name in self._classes}

    def classify(self, feature_values: FeatureVector) -> ClassLabel:
        """
        Decide which class a feature vector belongs to.

        Ties on the best score, including every class scoring zero, go to the
        tied class that comes last in `classes`.
        """
        best_class, best_score = None, None
        for class_name, score in self.scores(feature_values).items():
            if best_score is None or score >= best_score:
                best_class, best_score = class_name, score

        return best_class

    def predict(self, instance: FeatureVector) -> ClassLabel:
        return self.classify(instance)

    @staticmethod
    def _gaussian_parameters(fs: np.ndarray) -> Tuple[float, float, Optional[float]]:
        """
        Mean and population variance of a column, plus the value it collapses
        to when the variance is zero (None otherwise).

        Distinct values so close together that their variance underflows to
        0.0 collapse to their mean.
        """
        fs_mean = fs.mean()
        fs_var = fs.var()

        if np.ptp(fs) == 0:
            return fs_mean, 0.0, float(fs[0])
        if fs_var == 0:
            return fs_mean, 0.0, float(fs_mean)
        return fs_mean, fs_var, None

    def _column(self, index, class_name: ClassLabel) -> np.ndarray:
        training_set = self._class_array(class_name)
        self._check_index(index)
        return training_set[:, int(index)]

    def _class_array(self, class_name: ClassLabel) -> np.ndarray:
        try:
            return self._training_data[class_name]
        except (KeyError, TypeError):
            raise UnknownClass(class_name) from None

    def _check_index(self, index) -> None:
        if isinstance(index, bool) or not isinstance(index, Integral) \
                or not 0 <= index < self._dimension:
            raise IndexOutOfRange(index, self._dimension)

    def _check_vector(self, feature_values) -> np.ndarray:
        feature_values = np.asarray(feature_values, dtype=np.float64)
        if feature_values.ndim != 1 or feature_values.shape[0] != self._dimension:
            actual = feature_values.shape[0] if feature_values.ndim == 1 else feature_values.size
            raise DimensionMismatch(self._dimension, actual)
        return feature_values

    def __repr__(self):
        return (f"NaiveBayes(classes={list(self._classes)!r}, "
                f"dimensionality={self._dimension}, log_space={self.log_space})")
