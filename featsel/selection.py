"""Greedy wrapper feature selection driven by nearest-neighbour accuracy."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TextIO

from featsel.knn import nn_leave_one_out_accuracy, project


@dataclass(frozen=True)
class SelectionResult:
    """Best feature subset found (0-based indices) and its accuracy as a fraction."""

    features: tuple[int, ...]
    accuracy: float


def format_feature_set(features: Iterable[int]) -> str:
    """Render 0-based feature indices as a 1-based set such as ``{1, 3}``."""
    return "{" + ", ".join(str(f + 1) for f in features) + "}"


def _percent(fraction: float) -> str:
    return f"{fraction * 100:g}"


def _check_input(X: Sequence[Sequence[float]], what: str) -> int:
    if not X or not X[0]:
        raise ValueError(f"Input data X is empty or has no features. Aborting {what}.")
    return len(X[0])


def forward_selection(
    X: Sequence[Sequence[float]], y: Sequence[int], out: TextIO | None = None
) -> SelectionResult:
    """Add features one at a time, keeping the subset with the best accuracy.

    A trace of the search is written to ``out`` (standard output by default).
    """
    num_features = _check_input(X, "forward selection")
    stream = out if out is not None else sys.stdout

    def emit(text: str = "") -> None:
        print(text, file=stream)

    remaining = list(range(num_features))
    selected: list[int] = []
    global_best = -1.0
    best_overall: list[int] = []

    emit("Beginning forward selection.")
    for level in range(1, num_features + 1):
        emit(f"\nOn level {level} of the search tree")
        emit(f"Current selected feature set: {format_feature_set(selected)}")

        best_local = -1.0
        to_add: int | None = None
        for feature in remaining:
            trial = sorted([*selected, feature])
            acc = nn_leave_one_out_accuracy(project(X, trial), y)
            emit(
                f"    Considering adding feature {feature + 1} with current set "
                f"{format_feature_set(trial)} accuracy is {_percent(acc)}%"
            )
            if acc > best_local:
                best_local = acc
                to_add = feature

        if to_add is None:
            emit("\nNo feature improved accuracy at this level. Halting forward selection.")
            break

        selected = sorted([*selected, to_add])
        remaining.remove(to_add)
        emit(
            f"\nOn level {level}, added feature {to_add + 1} to current set. "
            f"Accuracy: {_percent(best_local)}%"
        )
        emit(
            f"Current best feature set: {format_feature_set(selected)} "
            f"with accuracy {_percent(best_local)}%"
        )
        if best_local > global_best:
            global_best = best_local
            best_overall = list(selected)
        else:
            emit(
                "(Warning, accuracy has decreased or stayed the same. "
                "Global best is still better.)"
            )

    emit(
        f"\nFinished forward selection!! The best feature subset is: "
        f"{format_feature_set(best_overall)}, which has an accuracy of {_percent(global_best)}%"
    )
    return SelectionResult(tuple(best_overall), global_best)


def backward_elimination(
    X: Sequence[Sequence[float]], y: Sequence[int], out: TextIO | None = None
) -> SelectionResult:
    """Remove features one at a time, preferring smaller subsets on ties.

    A trace of the search is written to ``out`` (standard output by default).
    """
    num_features = _check_input(X, "backward elimination")
    stream = out if out is not None else sys.stdout

    def emit(text: str = "") -> None:
        print(text, file=stream)

    current = list(range(num_features))
    emit("Calculating initial accuracy with all features.")
    global_best = nn_leave_one_out_accuracy(X, y)
    best_overall = list(current)
    emit(f"Initial feature set: {format_feature_set(current)} with accuracy {_percent(global_best)}%")
    emit("Beginning backward elimination.")

    for level in range(1, num_features):
        if len(current) <= 1:
            emit("\nOnly one feature remaining. Halting backward elimination.")
            break
        emit(f"\nOn level {level} of the search tree")
        emit(f"Current feature set to evaluate for removal: {format_feature_set(current)}")

        best_local = -1.0
        to_remove: int | None = None
        for feature in current:
            trial = [f for f in current if f != feature]
            if not trial:
                continue
            acc = nn_leave_one_out_accuracy(project(X, trial), y)
            emit(
                f"    Considering removing feature {feature + 1}. Remaining set "
                f"{format_feature_set(trial)} accuracy is {_percent(acc)}%"
            )
            if acc >= best_local:
                best_local = acc
                to_remove = feature

        if to_remove is None:
            emit(
                "\nCould not determine a feature to remove or no feature removal "
                "improved/maintained accuracy. Halting backward elimination."
            )
            break

        current = sorted(f for f in current if f != to_remove)
        emit(
            f"\nOn level {level}, removed feature {to_remove + 1}. "
            f"Accuracy with remaining features: {_percent(best_local)}%"
        )
        emit(
            f"Current best feature set: {format_feature_set(current)} "
            f"with accuracy {_percent(best_local)}%"
        )
        if best_local >= global_best:
            global_best = best_local
            best_overall = list(current)
        else:
            emit("(Warning, accuracy has decreased. Global best is still better.)")

    emit(
        f"\nFinished backward elimination!! The best feature subset is: "
        f"{format_feature_set(best_overall)}, which has an accuracy of {_percent(global_best)}%"
    )
    return SelectionResult(tuple(best_overall), global_best)