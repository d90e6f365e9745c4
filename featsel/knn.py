"""Nearest-neighbour helpers: data loading, normalisation, distances and validation."""

from __future__ import annotations

import math
import os
import sys
from collections.abc import Sequence

Matrix = list[list[float]]


def _leading_numbers(line: str) -> list[float]:
    """Return the numbers at the start of a line, stopping at the first token that is not one."""
    numbers: list[float] = []
    for token in line.split():
        try:
            numbers.append(float(token))
        except ValueError:
            break
    return numbers


def load_data(path: str | os.PathLike[str]) -> tuple[Matrix, list[int]]:
    """Read a whitespace-separated file whose first column is the class label.

    Every line gives one sample. The label is truncated to an integer, and the
    remaining numbers become the sample's features. A line with no numbers gives
    an empty feature row with label 0.
    """
    X: Matrix = []
    y: list[int] = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            values = _leading_numbers(line)
            label = int(values[0]) if values else 0
            X.append(values[1:])
            y.append(label)
    return X, y


def z_normalize(data: Sequence[float]) -> list[float]:
    """Scale values to zero mean and unit population standard deviation.

    A constant sequence maps to zeros; an empty one to an empty list.
    """
    if not data:
        return []
    n = len(data)
    mean = sum(data) / n
    variance = sum(d * d for d in data) / n - mean * mean
    stdev = math.sqrt(max(variance, 0.0))
    if stdev == 0:
        return [0.0] * n
    return [(d - mean) / stdev for d in data]


def euclidean_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance over the coordinates the two vectors share."""
    return math.sqrt(sum((p - q) * (p - q) for p, q in zip(a, b)))


def project(X: Sequence[Sequence[float]], features: Sequence[int]) -> Matrix:
    """Keep only the given feature columns of every row, in the given order."""
    return [[row[index] for index in features] for row in X]


def nn_leave_one_out_accuracy(X: Sequence[Sequence[float]], y: Sequence[int]) -> float:
    """Leave-one-out accuracy of a 1-nearest-neighbour classifier.

    Returns 0.0 when there are no samples or the label count does not match.
    Samples with no features are never used as neighbours.
    """
    if not X or len(X) != len(y):
        return 0.0
    correct = 0
    for i, sample in enumerate(X):
        best_distance = sys.float_info.max
        predicted = -1
        for j, other in enumerate(X):
            if i == j or not sample or not other:
                continue
            distance = euclidean_distance(sample, other)
            if distance < best_distance:
                best_distance = distance
                predicted = y[j]
        if predicted == y[i]:
            correct += 1
    return correct / len(X)