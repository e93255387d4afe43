import numpy as np
import pytest

from learnkit.perceptron import MAX_EPOCHS, AveragePerceptron, process_data

X = np.array(
    [
        [1.0, 0.0, 2.0],
        [0.0, 1.0, 1.0],
        [2.0, 1.0, 0.0],
        [1.0, 1.0, 1.0],
    ]
)
Y = ["a", "b", "a", "b"]


def test_process_data_one_entry_per_row():
    result = process_data(X, Y)
    assert len(result) == len(Y)
    assert [label for label, _ in result] == Y
    for (_, features), row in zip(result, X):
        assert np.array_equal(features, row)


def test_process_data_rejects_three_classes():
    with pytest.raises(ValueError):
        process_data(X, ["a", "b", "c", "a"])


def test_process_data_rejects_single_class():
    with pytest.raises(ValueError):
        process_data(X, ["a", "a", "a", "a"])


def test_process_data_rejects_row_mismatch():
    with pytest.raises(ValueError):
        process_data(X, ["a", "b"])


def test_fit_marks_trained_and_counts_updates():
    p = AveragePerceptron(3, 1.2, 0.5, 0.3)
    p.fit(X, Y)
    assert p.trained is True
    assert np.array_equal(p.edges, np.full(3, MAX_EPOCHS * len(Y)))
    assert p.train_error == pytest.approx(0.1 + MAX_EPOCHS * len(Y))
    assert np.all(np.isfinite(p.weights))


def test_fit_is_deterministic():
    first = AveragePerceptron(3, 1.2, 0.5, 0.3).fit(X, Y)
    second = AveragePerceptron(3, 1.2, 0.5, 0.3).fit(X, Y)
    assert np.array_equal(first.weights, second.weights)


def test_predict_before_fit_raises():
    with pytest.raises(RuntimeError):
        AveragePerceptron(3, 1.2, 0.5, 0.3).predict(X)


def test_predict_with_wrong_width_raises():
    p = AveragePerceptron(3, 1.2, 0.5, 0.3).fit(X, Y)
    with pytest.raises(ValueError):
        p.predict(np.zeros((2, 4)))


def test_predictions_are_training_classes():
    p = AveragePerceptron(3, 1.2, 0.5, 0.3).fit(X, Y)
    predictions = p.predict(X)
    assert len(predictions) == len(X)
    assert set(predictions) <= {"a", "b"}


def test_low_threshold_predicts_second_class_for_zero_rows():
    p = AveragePerceptron(3, 1.2, -1.0, 0.3).fit(X, Y)
    assert p.predict(np.zeros((3, 3))) == ["b", "b", "b"]


def test_high_threshold_predicts_first_class_for_zero_rows():
    p = AveragePerceptron(3, 1.2, 0.5, 0.3).fit(X, Y)
    assert p.predict(np.zeros((2, 3))) == ["a", "a"]


def test_fewer_features_than_weights_raises():
    with pytest.raises(ValueError):
        AveragePerceptron(5, 1.2, 0.5, 0.3).fit(X, Y)