import numpy as np
import pytest

from GNBayes import (
    NaiveBayes,
    Evaluator,
    DatasetError,
    Record,
    load_records,
    group_by_class,
    split_records,
)

IRIS_ROWS = """5.1,3.5,1.4,0.2,Iris-setosa

4.9,3.0,1.4,0.2,Iris-setosa
7.0,3.2,4.7,1.4,Iris-versicolor
6.3,3.3,6.0,2.5,Iris-virginica
"""


@pytest.fixture
def iris_file(tmp_path):
    path = tmp_path / "iris-partial.csv"
    path.write_text(IRIS_ROWS)
    return path


def test_load_records(iris_file):
    records = load_records(iris_file)
    assert len(records) == 4
    assert records[0] == Record((5.1, 3.5, 1.4, 0.2), "Iris-setosa")
    assert records[-1].label == "Iris-virginica"


def test_load_records_checks_dimensionality(iris_file):
    assert len(load_records(iris_file, dimensionality=4)) == 4
    with pytest.raises(DatasetError):
        load_records(iris_file, dimensionality=3)


@pytest.mark.parametrize("content", [
    "",
    "Iris-setosa\nIris-setosa\n",
    "5.1,abc,1.4,0.2,Iris-setosa\n",
    "5.1,,1.4,0.2,Iris-setosa\n",
])
def test_load_records_rejects_bad_files(tmp_path, content):
    path = tmp_path / "bad.csv"
    path.write_text(content)
    with pytest.raises(DatasetError):
        load_records(path)


def test_load_records_strips_labels(tmp_path):
    path = tmp_path / "spaced.csv"
    path.write_text("1.0, 2.0, a \n3.0, 4.0, b\n")
    assert [r.label for r in load_records(path)] == ["a", "b"]


def test_group_by_class_first_seen_order(iris_file):
    training_data = group_by_class(load_records(iris_file))
    assert list(training_data) == ["Iris-setosa", "Iris-versicolor", "Iris-virginica"]
    assert training_data["Iris-setosa"] == [[5.1, 3.5, 1.4, 0.2], [4.9, 3.0, 1.4, 0.2]]


def test_group_by_class_seeded_labels():
    records = [Record((1.0,), "b"), Record((2.0,), "a")]
    training_data = group_by_class(records, labels=["a", "b", "c"])
    assert list(training_data) == ["a", "b", "c"]
    assert training_data["c"] == []

    with pytest.raises(DatasetError):
        group_by_class([Record((1.0,), "z")], labels=["a"])


def _records(n):
    return [Record((float(i),), "even" if i % 2 == 0 else "odd") for i in range(n)]


def test_split_records():
    records = _records(20)
    train, quiz = split_records(records, quiz_fraction=0.1, seed=7)
    assert len(train) == 18
    assert len(quiz) == 2
    assert sorted(train + quiz, key=lambda r: r.features) == records
    assert train == sorted(train, key=lambda r: r.features)


def test_split_records_is_deterministic_with_seed():
    records = _records(30)
    assert split_records(records, seed=3) == split_records(records, seed=3)


def test_split_records_bounds():
    assert split_records(_records(5), quiz_fraction=0.0) == (_records(5), [])

    train, quiz = split_records(_records(2), quiz_fraction=0.1, seed=0)
    assert len(train) == 1 and len(quiz) == 1

    with pytest.raises(ValueError):
        split_records(_records(5), quiz_fraction=1.0)


def test_load_train_and_quiz(tmp_path):
    rng = np.random.default_rng(0)
    centers = {"Iris-setosa": 0.0, "Iris-versicolor": 10.0, "Iris-virginica": 20.0}

    lines = []
    for label, center in centers.items():
        for row in rng.normal(center, 1.0, size=(30, 4)):
            lines.append(",".join(f"{v:.4f}" for v in row) + f",{label}")
    path = tmp_path / "iris.csv"
    path.write_text("\n".join(lines) + "\n")

    quiz_path = tmp_path / "omitted.csv"
    quiz_path.write_text("".join(f"{c},{c},{c},{c},{label}\n" for label, c in centers.items()))

    training_data = group_by_class(load_records(path, dimensionality=4))
    classifier = NaiveBayes(training_data, 4)
    report = Evaluator(classifier).evaluate(load_records(quiz_path, dimensionality=4))

    assert report.num_correct == 3
    assert report.accuracy == 1.0
