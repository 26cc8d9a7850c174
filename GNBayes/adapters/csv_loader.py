"""
Delimited-text loader for labeled feature vectors.

Rows look like `5.1,3.5,1.4,0.2,Iris-setosa`: every column but the last is a
continuous feature and the last column is the class label. This module turns
such files into records, groups records into the training mapping expected by
`NaiveBayes`, and splits a dataset into training and quiz sets.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from ..classifier.errors import DatasetError
from ..classifier.types import ClassLabel, TrainingData


@dataclass(frozen=True)
class Record:
    features: Tuple[float, ...]
    label: ClassLabel


def load_records(path, dimensionality: Optional[int] = None,
                 delimiter: str = ',') -> List[Record]:
    """
    Read a headerless delimited file into records.

    Args:
        path: File path or buffer accepted by pandas
        dimensionality: Expected number of feature columns, checked if given
        delimiter: Field separator

    Returns:
        Records in file order; blank lines are skipped

    Raises:
        DatasetError: if the file is empty, ragged, has missing or
            non-numeric feature cells, or the wrong number of features
    """
    try:
        df = pd.read_csv(path, header=None, sep=delimiter, dtype=str,
                         skipinitialspace=True, skip_blank_lines=True)
    except ValueError as exc:
        raise DatasetError(f"could not parse {path}: {exc}") from exc

    if df.shape[1] < 2:
        raise DatasetError(f"{path}: expected at least one feature column and a label column")

    n_features = df.shape[1] - 1
    if dimensionality is not None and n_features != dimensionality:
        raise DatasetError(
            f"{path}: found {n_features} feature columns, expected {dimensionality}"
        )

    if df.isna().any().any():
        row = int(df.isna().any(axis=1).to_numpy().nonzero()[0][0])
        raise DatasetError(f"{path}: row {row} has missing values")

    try:
        features = df.iloc[:, :-1].apply(pd.to_numeric).to_numpy(dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise DatasetError(f"{path}: non-numeric feature value ({exc})") from exc

    labels = df.iloc[:, -1].str.strip()

    return [Record(tuple(float(v) for v in row), label)
            for row, label in zip(features, labels)]


def group_by_class(records: Iterable[Record],
                   labels: Optional[Sequence[ClassLabel]] = None) -> TrainingData:
    """
    Assemble the class label -> vectors mapping used to build a classifier.

    Args:
        records: Labeled records
        labels: Optional fixed set of class labels. When given, the mapping
                is seeded with these labels in this order and any other label
                is rejected. Otherwise labels appear in first-seen order.

    Returns:
        Mapping from class label to a list of feature vectors
    """
    training_data: Dict[ClassLabel, List[List[float]]] = {}
    if labels is not None:
        training_data = {label: [] for label in labels}

    for record in records:
        if record.label not in training_data:
            if labels is not None:
                raise DatasetError(f"unexpected class label: {record.label!r}")
            training_data[record.label] = []
        training_data[record.label].append(list(record.features))

    return training_data


def split_records(records: Sequence[Record], quiz_fraction: float = 0.1,
                  seed: Optional[int] = None) -> Tuple[List[Record], List[Record]]:
    """
    Randomly hold out a share of the records as a quiz set.

    At least one record is held out when `quiz_fraction` is positive, and at
    least one is always kept for training. Both halves keep file order.

    Returns:
        (training records, quiz records)
    """
    if not 0.0 <= quiz_fraction < 1.0:
        raise ValueError(f"quiz_fraction must be in [0, 1), got {quiz_fraction}")

    n = len(records)
    n_quiz = int(round(n * quiz_fraction))
    if quiz_fraction > 0 and n > 1:
        n_quiz = min(max(1, n_quiz), n - 1)

    rng = np.random.default_rng(seed)
    quiz_idx = set(rng.permutation(n)[:n_quiz].tolist())

    train = [r for i, r in enumerate(records) if i not in quiz_idx]
    quiz = [r for i, r in enumerate(records) if i in quiz_idx]
    return train, quiz
