import io

import pytest

from featsel import classic, selection
from featsel.knn import nn_leave_one_out_accuracy, project

X = [[0.0, 5.0], [0.1, -3.0], [10.0, 4.0], [10.2, -2.0]]
Y = [1, 1, 2, 2]


def test_forward_selection_finds_separating_feature():
    out = io.StringIO()
    result = classic.forward_selection(X, Y, out)
    assert result.features == (0,)
    assert result.accuracy == nn_leave_one_out_accuracy(project(X, result.features), Y)


def test_forward_trace_uses_zero_based_numbers():
    out = io.StringIO()
    classic.forward_selection(X, Y, out)
    text = out.getvalue()
    assert text.startswith("Beginning forward selection.\n")
    assert "    Trying feature 0 results in accuracy" in text
    assert "    Trying feature 1 results in accuracy" in text
    assert "Finished search!! The best feature subset is: 0," in text


def test_forward_matches_selection_module_on_clear_data():
    classic_result = classic.forward_selection(X, Y, io.StringIO())
    modern_result = selection.forward_selection(X, Y, io.StringIO())
    assert classic_result.features == modern_result.features
    assert classic_result.accuracy == modern_result.accuracy


def test_backward_elimination_keeps_best_subset():
    out = io.StringIO()
    result = classic.backward_elimination(X, Y, out)
    assert 0 in result.features
    assert result.accuracy == nn_leave_one_out_accuracy(project(X, result.features), Y)


def test_backward_trace_warns_when_accuracy_drops():
    out = io.StringIO()
    classic.backward_elimination(X, Y, out)
    text = out.getvalue()
    assert text.startswith("Calculating initial global best accuracy\n")
    assert "Global best accuracy using all 2 features is" in text
    assert "(WARNING, Accuracy has decreased! Continuing search in case of local maximum)" in text
    assert "Finished search!! The best feature subset is 0," in text


def test_backward_accuracy_never_below_all_features():
    result = classic.backward_elimination(X, Y, io.StringIO())
    assert result.accuracy >= nn_leave_one_out_accuracy(X, Y)


def test_writes_to_stdout_by_default(capsys):
    classic.forward_selection(X, Y)
    assert "Beginning forward selection." in capsys.readouterr().out


@pytest.mark.parametrize("func", [classic.forward_selection, classic.backward_elimination])
def test_empty_input_raises(func):
    with pytest.raises(ValueError):
        func([], [], io.StringIO())


@pytest.mark.parametrize("func", [classic.forward_selection, classic.backward_elimination])
def test_rows_without_features_raise(func):
    with pytest.raises(ValueError):
        func([[], []], [1, 2], io.StringIO())