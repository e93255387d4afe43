import pytest

from learnkit.cart_regressor import (
    CARTDecisionTreeRegressor,
    RegressorNode,
    mae_impurity_and_average,
    mse_impurity_and_average,
    regression_loss,
    regressor_create_split,
    regressor_reorder_data,
    regressor_update_split,
)
from learnkit.cart_utils import get_feature

DATA = [[1, 3, 6], [1, 2, 3], [1, 9, 6], [1, 11, 1]]
Y = [1, 2, 3, 4]


def test_mae_impurity():
    mae, avg = mae_impurity_and_average([1, 3, 5])
    assert mae == 4.0 / 3.0
    assert avg == 3.0


def test_mse_impurity():
    mse, avg = mse_impurity_and_average([1, 3, 5])
    assert mse == 8.0 / 3.0
    assert avg == 3.0


def test_regression_loss_dispatch():
    assert regression_loss([1, 3, 5], "mae") == (4.0 / 3.0, 3.0)
    assert regression_loss([1, 3, 5], "mse") == (8.0 / 3.0, 3.0)


def test_regression_loss_invalid_criterion():
    with pytest.raises(ValueError):
        regression_loss([1.0], "gini")


def test_regression_loss_empty():
    with pytest.raises(ValueError):
        regression_loss([], "mse")


def test_create_split():
    left, right, left_y, right_y = regressor_create_split(DATA, 1, Y, 5.0)
    assert len(left) == 2
    assert len(left_y) == 2
    assert len(right) == 2
    assert len(right_y) == 2
    assert left_y == [1, 2]
    assert right_y == [3, 4]


def test_reorder_data():
    ordered, ordered_y = regressor_reorder_data(get_feature(DATA, 1), DATA, Y)
    assert ordered[1][1] == 3.0
    assert ordered_y[0] == 2
    assert ordered_y == [2, 1, 3, 4]


def test_update_split():
    left, right, left_y, right_y = regressor_create_split(DATA, 1, Y, 5.0)
    left, left_y, right, right_y = regressor_update_split(
        left, left_y, right, right_y, 1, 9.5
    )
    assert len(left) == 3
    assert len(right) == 1
    assert left_y == [1, 2, 3]
    assert right_y == [4]


def test_new_tree_is_untrained():
    tree = CARTDecisionTreeRegressor("MAE", -1)
    assert tree.root_node is None
    assert tree.tried_splits == []
    assert tree.criterion == "mae"


def test_fit_single_split_and_string():
    tree = CARTDecisionTreeRegressor("mse", -1).fit([[1], [2], [10], [11]], [1, 1, 5, 5])
    assert tree.root_node == RegressorNode(
        threshold=6.0, feature=0, left_pred=1.0, right_pred=5.0, is_node_needed=True
    )
    assert tree.predict([[0], [20]]) == [1.0, 5.0]
    assert str(tree) == (
        "Feature 0 < 6.000\n"
        "---> True\n  PREDICT    1.000\n"
        "---> False\n  PREDICT    5.000\n"
    )


def test_fit_recurses_until_pure():
    tree = CARTDecisionTreeRegressor("mse", -1).fit([[1], [2], [3]], [0, 1, 10])
    assert tree.root_node.threshold == 2.5
    assert tree.root_node.left is not None
    assert tree.predict([[1], [2], [3]]) == [0.0, 1.0, 10.0]


def test_max_depth_limits_tree():
    tree = CARTDecisionTreeRegressor("mse", 1).fit([[1], [2], [3]], [0, 1, 10])
    assert tree.root_node.left is None
    assert tree.root_node.right is None
    assert tree.predict([[1], [3]]) == [0.5, 10.0]


def test_fit_invalid_criterion():
    with pytest.raises(ValueError):
        CARTDecisionTreeRegressor("gini", -1).fit([[1], [2]], [1, 2])


def test_predict_before_fit():
    with pytest.raises(RuntimeError):
        CARTDecisionTreeRegressor("mae", -1).predict([[1]])


def test_mismatched_rows():
    with pytest.raises(ValueError):
        CARTDecisionTreeRegressor("mae", -1).fit([[1], [2]], [1])