"""
Quiz a Gaussian Naive Bayes classifier on the Iris dataset.

Usage:
    python experiments/iris_quiz.py <training_csv> <quiz_csv>
    python experiments/iris_quiz.py <dataset_csv>

With two files, the classifier is trained on the first and quizzed on the
second. With one file, a tenth of the rows are held out as the quiz set.
Each quiz row prints CORRECT or WRONG, followed by a summary line.
"""

import sys

from GNBayes import (
    NaiveBayes,
    Evaluator,
    NaiveBayesError,
    load_records,
    group_by_class,
    split_records,
)

IRIS_CLASSES = ["Iris-setosa", "Iris-versicolor", "Iris-virginica"]


def run_quiz(training_path, quiz_path=None, seed=0):
    records = load_records(training_path)
    if quiz_path is None:
        train_records, quiz_records = split_records(records, quiz_fraction=0.1, seed=seed)
    else:
        train_records = records
        quiz_records = load_records(quiz_path, dimensionality=len(records[0].features))

    # seed the known Iris classes, fall back to first-seen order for other data
    labels = {r.label for r in train_records}
    if labels <= set(IRIS_CLASSES):
        training_data = group_by_class(train_records, labels=[c for c in IRIS_CLASSES if c in labels])
    else:
        training_data = group_by_class(train_records)

    # the dimensionality is the number of feature columns in the file
    classifier = NaiveBayes(training_data, len(train_records[0].features))

    evaluator = Evaluator(classifier, verbose=True)
    report = evaluator.evaluate(quiz_records)
    print(report.summary())
    return report


if __name__ == '__main__':
    if len(sys.argv) not in (2, 3):
        print("Usage: python iris_quiz.py <training_csv> [<quiz_csv>]")
        sys.exit(1)

    try:
        run_quiz(*sys.argv[1:3])
    except NaiveBayesError as exc:
        print(f"Error: {exc}")
        sys.exit(1)
