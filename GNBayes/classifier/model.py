from abc import ABC, abstractmethod

from .types import ClassLabel, FeatureVector


class MLModel(ABC):
    """
    Interface for a trained classifier that the evaluator can quiz.

    A model is built once from its training data and then only queried, so
    none of these methods may change its state.
    """

    @abstractmethod
    def predict(self, instance: FeatureVector) -> ClassLabel:
        """
        Predict the class label of one feature vector.

        Args:
            instance: Feature vector with `nfeatures()` values (sequence or
                      numpy array)

        Returns:
            One of the class labels the model was trained on
        """
        pass

    @abstractmethod
    def nfeatures(self) -> int:
        """Return the dimensionality D every query vector must have."""
        pass

    @abstractmethod
    def nclasses(self) -> int:
        """Return the number of class labels the model can predict."""
        pass
