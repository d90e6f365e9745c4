import io

import pytest

from featsel.knn import nn_leave_one_out_accuracy, project
from featsel.selection import (
    SelectionResult,
    backward_elimination,
    format_feature_set,
    forward_selection,
)

# Feature 0 separates the classes; feature 1 is misleading noise.
X = [
    [0.0, 5.0],
    [0.1, -3.0],
    [0.2, 7.0],
    [10.0, 4.9],
    [10.1, -3.1],
    [10.2, 7.1],
]
Y = [1, 1, 1, 2, 2, 2]


def test_format_feature_set_is_one_based():
    assert format_feature_set([0, 2]) == "{1, 3}"
    assert format_feature_set([]) == "{}"


def test_forward_result_matches_its_accuracy():
    result = forward_selection(X, Y, io.StringIO())
    assert isinstance(result, SelectionResult)
    assert result.accuracy == nn_leave_one_out_accuracy(project(X, result.features), Y)
    assert list(result.features) == sorted(result.features)


def test_forward_picks_informative_feature():
    result = forward_selection(X, Y, io.StringIO())
    assert result.features == (0,)
    assert result.accuracy == 1.0


def test_backward_agrees_with_forward_on_clear_data():
    forward = forward_selection(X, Y, io.StringIO())
    backward = backward_elimination(X, Y, io.StringIO())
    assert backward == forward


def test_backward_result_matches_its_accuracy():
    result = backward_elimination(X, Y, io.StringIO())
    assert result.accuracy == nn_leave_one_out_accuracy(project(X, result.features), Y)
    assert set(result.features) <= {0, 1}


def test_forward_trace():
    out = io.StringIO()
    result = forward_selection(X, Y, out)
    text = out.getvalue()
    assert text.startswith("Beginning forward selection.\n")
    assert "\nOn level 1 of the search tree\n" in text
    assert "Current selected feature set: {}\n" in text
    assert "Global best is still better." in text
    assert text.endswith(
        "Finished forward selection!! The best feature subset is: "
        f"{format_feature_set(result.features)}, which has an accuracy of 100%\n"
    )


def test_backward_trace():
    out = io.StringIO()
    backward_elimination(X, Y, out)
    text = out.getvalue()
    assert text.startswith("Calculating initial accuracy with all features.\n")
    assert "Initial feature set: {1, 2} with accuracy 100%\n" in text
    assert "Beginning backward elimination.\n" in text
    assert "Finished backward elimination!!" in text


def test_single_feature_backward_keeps_it():
    data = [[0.0], [0.1], [5.0], [5.1]]
    labels = [1, 1, 2, 2]
    out = io.StringIO()
    result = backward_elimination(data, labels, out)
    assert result.features == (0,)
    assert "On level" not in out.getvalue()


def test_writes_to_stdout_by_default(capsys):
    forward_selection(X, Y)
    assert "Finished forward selection!!" in capsys.readouterr().out


@pytest.mark.parametrize("search", [forward_selection, backward_elimination])
@pytest.mark.parametrize("data", [[], [[]]])
def test_empty_input_rejected(search, data):
    with pytest.raises(ValueError):
        search(data, [1] * len(data), io.StringIO())