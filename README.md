# featsel

Pick the most useful features of a labelled data set by greedy search.
Each candidate feature subset is scored by the accuracy of a
1-nearest-neighbour classifier under leave-one-out cross-validation,
using Euclidean distance.

Two searches are provided:

- **Forward selection** starts from the empty set and adds, level by level,
  the feature that gives the highest accuracy. It keeps the subset with the
  best accuracy seen.
- **Backward elimination** starts from all features and removes, level by
  level, the feature whose removal gives the highest accuracy, stopping when
  one feature is left. On ties it prefers the smaller subset.

Both searches print every subset they try and finish with the best subset
they found.

## Installation

```
pip install .
```

## Data format

A plain text file with one sample per line, values separated by
whitespace. The first value is the class label (truncated to an integer),
and the values after it are the features:

```
1 0.5 1.2 0.8
2 1.1 0.7 1.5
1 0.3 1.0 0.9
```

## Command line

```
featsel [DATA] [--classic]
```

- `DATA` is the data file to read; it defaults to `data.txt` in the current
  directory.
- `--classic` runs the searches from `featsel.classic` instead of
  `featsel.selection` (see below).

The command runs forward selection and then backward elimination and prints
the progress of each search. In the default mode features are numbered
from 1 in the output. It prints an error to standard error and exits with
status 1 if the file cannot be read or is empty, or if any row has no
features; otherwise it exits with status 0.

## Library use

```python
from featsel.knn import load_data, nn_leave_one_out_accuracy, project
from featsel.selection import backward_elimination, forward_selection

X, y = load_data("data.txt")

print(nn_leave_one_out_accuracy(project(X, [0, 2]), y))

result = forward_selection(X, y)
print(result.features, result.accuracy)

result = backward_elimination(X, y)
print(result.features, result.accuracy)
```

Both searches write their trace to the text stream given as `out`
(standard output by default) and return a `SelectionResult` whose
`features` is a tuple of zero-based feature indices and whose `accuracy`
is a fraction between 0 and 1. They raise `ValueError` if `X` is empty or
its first row has no features.

`featsel.knn` provides:

- `load_data(path)` – read a data file into `(X, y)`.
- `z_normalize(data)` – scale values to zero mean and unit population
  standard deviation; a constant sequence becomes zeros.
- `euclidean_distance(a, b)` – distance over the coordinates the two
  vectors share.
- `project(X, features)` – keep only the given columns of each row.
- `nn_leave_one_out_accuracy(X, y)` – leave-one-out 1-NN accuracy; 0.0 when
  there are no samples or the label count does not match.

`featsel.selection.format_feature_set` renders zero-based feature indices
the way the searches print them, for example `{1, 3}` for `[0, 2]`.

`featsel.classic` holds an earlier variant of the two searches. Its
`forward_selection` and `backward_elimination` number features from 0 in
their trace, run until every feature has been added or removed, and return
a `SearchOutcome` with the same `features` and `accuracy` fields.

## Limitations

The classifier is always 1-nearest-neighbour with Euclidean distance; there
is no choice of `k` or of metric. Features are not normalised
automatically, neither by the command nor by the searches; apply
`z_normalize` to the columns yourself if they differ in scale.

## Running the tests

```
pip install ".[test]"
pytest
```