"""Original-style greedy searches with 0-based feature numbering in the trace."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

from featsel.knn import nn_leave_one_out_accuracy, project


@dataclass(frozen=True)
class SearchOutcome:
    """Best feature subset found (0-based indices) and its accuracy as a fraction."""

    features: tuple[int, ...]
    accuracy: float


def _percent(fraction: float) -> str:
    return f"{fraction * 100:g}"


def _joined(features: Sequence[int]) -> str:
    return "".join(f" {f}" for f in features)


def _accuracy(X: Sequence[Sequence[float]], y: Sequence[int], features: Sequence[int]) -> float:
    """Leave-one-out 1-NN accuracy on the given columns.

    With no columns every sample is at distance zero from every other, so the
    first other sample is taken as the nearest neighbour.
    """
    if features:
        return nn_leave_one_out_accuracy(project(X, features), y)
    if not X:
        return 0.0
    correct = 0
    for i, label in enumerate(y):
        predicted = next((y[j] for j in range(len(y)) if j != i), -1)
        if predicted == label:
            correct += 1
    return correct / len(X)


def _num_features(X: Sequence[Sequence[float]]) -> int:
    if not X or not X[0]:
        raise ValueError("Input data X is empty or has no features.")
    return len(X[0])


def forward_selection(
    X: Sequence[Sequence[float]], y: Sequence[int], out: TextIO | None = None
) -> SearchOutcome:
    """Add the best remaining feature until none are left; keep the best subset seen."""
    num_features = _num_features(X)
    stream = out if out is not None else sys.stdout

    def emit(text: str = "") -> None:
        print(text, file=stream)

    remaining = list(range(num_features))
    selected: list[int] = []
    global_best = -1.0
    best_features: list[int] = []

    emit("Beginning forward selection.")
    while remaining:
        emit(f"\nEvaluating features with current selected set:{_joined(selected)}")
        best_local = -1.0
        best_feature = remaining[0]
        for feature in remaining:
            acc = _accuracy(X, y, [*selected, feature])
            emit(f"    Trying feature {feature} results in accuracy {_percent(acc)}%")
            if acc > best_local:
                best_local = acc
                best_feature = feature
        selected.append(best_feature)
        remaining.remove(best_feature)
        emit(
            f"Selected feature {best_feature} with local best accuracy: "
            f"{_percent(best_local)}%"
        )
        if best_local > global_best:
            global_best = best_local
            best_features = list(selected)

    emit(
        f"\nFinished search!! The best feature subset is:{_joined(best_features)}, "
        f"which has accuracy of {_percent(global_best)}%"
    )
    return SearchOutcome(tuple(best_features), global_best)


def backward_elimination(
    X: Sequence[Sequence[float]], y: Sequence[int], out: TextIO | None = None
) -> SearchOutcome:
    """Drop the least useful feature until none are left; keep the best subset seen."""
    num_features = _num_features(X)
    stream = out if out is not None else sys.stdout

    def emit(text: str = "") -> None:
        print(text, file=stream)

    candidates = list(range(num_features))
    emit("Calculating initial global best accuracy")
    global_best = _accuracy(X, y, candidates)
    best_features = list(candidates)
    emit(
        f"Global best accuracy using all {num_features} features is "
        f"{_percent(global_best)}%"
    )
    emit("Beginning search.")

    while candidates:
        emit()
        best_local = -math.inf
        local_features: list[int] = []
        for feature in candidates:
            trial = [f for f in candidates if f != feature]
            acc = _accuracy(X, y, trial)
            emit(f"    Using feature(s){_joined(trial)} accuracy is {_percent(acc)}%")
            if acc > best_local:
                best_local = acc
                local_features = trial
        emit()
        if best_local < global_best:
            emit(
                "(WARNING, Accuracy has decreased! "
                "Continuing search in case of local maximum)"
            )
        else:
            global_best = best_local
            best_features = list(local_features)
        emit(
            f"Feature set{_joined(local_features)} was best, accuracy is "
            f"{_percent(best_local)}%"
        )
        candidates = local_features

    emit(
        f"\nFinished search!! The best feature subset is{_joined(best_features)}, "
        f"which has accuracy of {_percent(global_best)}%"
    )
    return SearchOutcome(tuple(best_features), global_best)