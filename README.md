# dendritic

A small machine-learning toolkit built on NumPy. It provides decision trees, random forests, iterative solvers for square linear systems and a linear regression container. It is meant for learning and experimentation. It is not meant as a production library.

## Installation

```
pip install dendritic
```

To run the tests:

```
pip install "dendritic[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dendritic.node` | `Node` (decision, regression and leaf nodes) and `NodeSerialized`, its JSON-ready form |
| `dendritic.tree_utils` | `split`, `save_tree`, `load_tree`, `load_root`, `format_tree`, `print_tree` |
| `dendritic.bootstrap` | `Bootstrap`, which draws row samples and feature subsets |
| `dendritic.decision_tree` | `DecisionTreeClassifier` |
| `dendritic.decision_tree_regressor` | `DecisionTreeRegressor` |
| `dendritic.random_forest` | `RandomForestClassifier`, `RandomForestRegressor` |
| `dendritic.linear_solver` | `LinearSolver` with Gauss–Seidel and SOR iteration |
| `dendritic.linear_regression` | `LinearRegression` |

## Data layout for trees

The tree models take one 2-D array in which the **last column is the target** and every other column is a feature. The `target` argument of `fit` is accepted but not used. Training reads the labels from the last column.

`split(features, threshold, feature_idx)` returns two arrays. The first holds the rows whose value in `feature_idx` is at most `threshold`. The second holds the rest.

## Decision tree classifier

The classifier takes a metric function that maps a 1-D array of labels to an impurity value. At each node it picks the split with the highest information gain. A leaf predicts the largest label among its rows.

```python
import numpy as np
from dendritic.decision_tree import DecisionTreeClassifier

def entropy(labels):
    _, counts = np.unique(labels, return_counts=True)
    p = counts / counts.sum()
    return float(-(p * np.log2(p)).sum())

data = np.array([
    [69.0, 4.39, 0.0],
    [69.0, 4.21, 0.0],
    [65.0, 4.09, 0.0],
    [72.0, 5.85, 1.0],
    [73.0, 5.68, 1.0],
    [70.0, 5.56, 1.0],
    [73.0, 5.79, 1.0],
    [65.0, 4.27, 0.0],
    [72.0, 6.60, 2.0],
    [74.0, 6.75, 2.0],
    [71.0, 6.69, 2.0],
    [73.0, 6.71, 2.0],
])
target = data[:, -1:]

model = DecisionTreeClassifier(max_depth=3, samples_split=3, metric_function=entropy)
model.fit(data, target)
print(model.predict(data).ravel())

model.save("models/tree")  # writes models/tree/tree.json
restored = DecisionTreeClassifier.load("models/tree", 3, 3, entropy)
```

`predict` returns an array of shape `(rows, 1)`. To show a tree as indented text, use `tree_utils.format_tree(model.root)`. To print it, use `print_tree`.

## Decision tree regressor and random forests

`DecisionTreeRegressor` and `RandomForestRegressor` take a loss function `loss(y_true, y_pred) -> float`, such as mean squared error. The regressor picks the split with the lowest summed loss of both halves, each measured against its own mean. A leaf predicts the mean target of its rows. `RandomForestClassifier` takes the same metric function as the classifier.

```python
import numpy as np
from dendritic.random_forest import RandomForestRegressor

def mse(y_true, y_pred):
    return float(np.mean((np.asarray(y_true) - np.asarray(y_pred)) ** 2))

data = np.array([
    [1.0, 1.1],
    [2.0, 1.9],
    [3.0, 3.2],
    [4.0, 3.9],
    [5.0, 5.1],
    [6.0, 6.2],
])

forest = RandomForestRegressor(max_depth=3, samples_split=3, n_trees=50, num_features=1, loss_function=mse)
forest.fit(data, data[:, -1:])
print(forest.predict(data).ravel())
forest.save("models/forest")  # one tree_<n> directory per tree
```

How the forests behave:

- Each tree is grown on a bootstrap sample of the rows. The rows are drawn with replacement, and the sample has as many rows as the input. Every tree sees all feature columns.
- `bootstrap_trees` and `fit` raise `ValueError` if `num_features` is larger than the number of columns.
- `RandomForestClassifier.predict` takes a majority vote. Votes are truncated to non-negative integer classes, and a tie goes to the largest class. It raises `ValueError` if the forest has no trees.
- `RandomForestRegressor.predict` averages the trees' predictions.
- `load(max_depth, samples_split, fn)` creates an empty forest. `fit_loaded(features, target, path)` then reads every `tree_<n>` directory under `path` and refits each loaded tree on the given data. It sets `n_trees` to the number of trees found.
- `Bootstrap` and both forests accept an optional `rng` (`numpy.random.Generator`), which makes the sampling reproducible.

## Linear solvers

```python
import numpy as np
from dendritic.linear_solver import LinearSolver

X = np.array([[10.0, -1.0, 2.0, 0.0],
              [-1.0, 11.0, -1.0, 3.0],
              [2.0, -1.0, 10.0, -1.0],
              [0.0, 3.0, -1.0, 8.0]])
b = np.array([[6.0], [25.0], [-11.0], [15.0]])

solver = LinearSolver(X, b, threshold=0.0)
solver.gauss_seidel()
print(solver.parameters.ravel())  # [ 1.  2. -1.  1.]
```

The two methods stop on different conditions:

- `gauss_seidel()` sweeps until the summed change of the parameters in one sweep equals `threshold` exactly.
- `sor(w)` runs successive over-relaxation with factor `w`. It stops once the summed change is at most `threshold`.

`solver.iterations` counts the sweeps that did not stop the loop. The loops have no iteration limit, so a system that never meets the stopping condition does not return.

The constructor raises `ValueError` in three cases: the matrix is not square, `b` has more than one column, or the row counts differ.

## Linear regression

`LinearRegression(X, y)` checks that `X` and `y` are 2-D and have the same number of rows. Otherwise it raises `ValueError`. It stores both arrays and a zero `coefficients` column with one entry per feature.

`fit()` returns the inverse of `X @ X.T`, or `None` when that matrix is singular.

## What the package does not do

- It ships no impurity or loss functions. You supply entropy, Gini, mean squared error and the like yourself.
- `LinearRegression.fit` does not estimate or update `coefficients`, and the class has no prediction method.
- It has no command-line interface. Apart from the tree JSON files, it has no loaders for datasets or for saved data.