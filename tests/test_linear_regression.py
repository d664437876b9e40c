import numpy as np
import pytest

from dendritic.linear_regression import LinearRegression


@pytest.fixture
def design():
    X = np.array(
        [
            [1.0, 2.0, 3.0],
            [2.0, 3.0, 4.0],
            [3.0, 4.0, 5.0],
            [4.0, 5.0, 6.0],
            [5.0, 6.0, 7.0],
        ]
    )
    y = np.array([[10.0], [12.0], [14.0], [16.0], [18.0]])
    return X, y


def test_linear_model(design):
    X, y = design
    model = LinearRegression(X, y)
    assert model.X.shape == (5, 3)
    assert model.y.shape == (5, 1)
    assert model.coefficients.shape == (3, 1)
    assert np.array_equal(model.coefficients, np.zeros((3, 1)))


def test_row_mismatch_rejected():
    X_bad = np.array([[1.0, 2.0], [1.0, 2.0]])
    y_bad = np.array([[1.0], [2.0], [3.0]])
    with pytest.raises(ValueError) as err:
        LinearRegression(X_bad, y_bad)
    assert str(err.value) == "Rows of X and y must be equal: 2 != 3"


def test_linear_model_fit(design):
    X, y = design
    model = LinearRegression(X, y)
    result = model.fit()
    assert result is None or result.shape == (5, 5)
    assert np.array_equal(model.coefficients, np.zeros((3, 1)))


def test_fit_returns_gram_inverse():
    model = LinearRegression(np.array([[2.0, 0.0], [0.0, 1.0]]), np.array([[1.0], [2.0]]))
    result = model.fit()
    assert np.allclose(result, np.array([[0.25, 0.0], [0.0, 1.0]]))


def test_fit_singular_gram_returns_none():
    model = LinearRegression(np.array([[1.0, 1.0], [1.0, 1.0]]), np.array([[1.0], [2.0]]))
    assert model.fit() is None