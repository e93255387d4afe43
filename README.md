# learnkit

A small machine-learning library built on NumPy and the standard library.

## What it provides

- `learnkit.pca`: `PCA`, principal component analysis through a thin SVD.
  `PCA(0)` keeps every component; a negative count raises `ValueError` on
  `fit`, and `transform` before `fit` raises `RuntimeError`.
  `subtract_row_vector` subtracts a row vector from every row of a matrix.
- `learnkit.perceptron`: `AveragePerceptron`, an averaged perceptron for
  classes that take exactly two values, and `process_data`, which pairs
  feature rows with their classes. It trains for a fixed `MAX_EPOCHS` (10).
- `learnkit.cart_classifier`: `CARTDecisionTreeClassifier`, a binary CART
  tree for integer labels using the `"gini"` or `"entropy"` criterion, plus
  the impurity and splitting helpers it is built from
  (`gini_impurity_and_mode`, `entropy_and_mode`, `classification_loss`,
  `classifier_create_split`, `classifier_reorder_data`,
  `classifier_update_split`).
- `learnkit.cart_regressor`: `CARTDecisionTreeRegressor`, a binary CART tree
  for numeric targets using `"mae"` or `"mse"`, with the matching helpers
  (`mae_impurity_and_average`, `mse_impurity_and_average`,
  `regression_loss`, `regressor_create_split`, `regressor_reorder_data`,
  `regressor_update_split`).
- `learnkit.cart_utils`: `find_unique`, `get_feature`, `validate_split` and
  `sorted_indices`, shared by both trees.
- `learnkit.split_rules`: split-quality measures — `split_entropy`,
  `base_entropy`, `numeric_attribute_entropy` (best threshold on a numeric
  column), `gini` and `average_gini_index`.
- `learnkit.isolation`: `IsolationForest` for unsupervised outlier scoring,
  with a `seed` for reproducible forests, and its building blocks
  (`select_feature`, `min_max`, `select_value`, `split_data`, `check_data`,
  `get_random_data`, `c_factor`, `path_length`).
- `learnkit.activations`: `sigmoid` and `softplus`, the `NeuralFunction`
  pair of a forward function and its derivative, and the ready-made pairs
  `SIGMOID`, `LINEAR` and `SOFTPLUS_RECTIFIER`.
- `learnkit.utilities`: `sort_int_map`, `floats_to_matrix` and
  `vector_to_matrix`.

In both CART trees a `max_depth` of `-1` grows the tree until its leaves are
pure. Printing a fitted tree shows its splits and leaf predictions.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

PCA:

```python
import numpy as np
from learnkit.pca import PCA

X = np.array([[6, 5, 4], [3, 8, 2], [9, 5, 1]], dtype=float)
reduced = PCA(2).fit_transform(X)
print(reduced.shape)  # (3, 2)
```

A CART classifier:

```python
from learnkit.cart_classifier import CARTDecisionTreeClassifier

X = [[1.0, 3.0], [1.0, 2.0], [1.0, 9.0], [1.0, 11.0]]
y = [0, 0, 1, 1]
tree = CARTDecisionTreeClassifier("gini", -1, [0, 1])
tree.fit(X, y)
print(tree.predict(X))      # [0, 0, 1, 1]
print(tree.evaluate(X, y))  # 1.0
print(tree)
```

A CART regressor:

```python
from learnkit.cart_regressor import CARTDecisionTreeRegressor

tree = CARTDecisionTreeRegressor("mse", 3)
tree.fit([[1.0], [2.0], [10.0], [11.0]], [1.0, 1.5, 8.0, 9.0])
print(tree.predict([[1.5], [10.5]]))
```

Split entropy:

```python
from learnkit.split_rules import split_entropy

outlook = {
    "sunny": {"play": 2, "noplay": 3},
    "overcast": {"play": 4},
    "rain": {"play": 3, "noplay": 2},
}
print(round(split_entropy(outlook), 3))  # 0.694
```

An isolation forest:

```python
from learnkit.isolation import IsolationForest

data = [[8, 9, 8, 3], [4, 2, 5, 3], [3, 2, 5, 9], [2, 1, 5, 9]]
forest = IsolationForest(100, 10, 4, seed=1)
forest.fit(data)
print(forest.predict(data))  # scores near 1 suggest outliers
```

## What it does not do

The package has no neural network model: `learnkit.activations` supplies
activation functions and their derivatives only, with nothing that builds,
trains or runs a network. It has no command-line tool and does not save or
load fitted models.