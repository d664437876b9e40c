import numpy as np
import pytest

from dendritic.linear_solver import LinearSolver


def test_linear_solver_create():
    X = np.array([[2.0, 1.0], [5.0, 7.0]])
    b = np.array([[11.0], [13.0]])

    solver = LinearSolver(X, b, 0.01)
    assert solver.X.shape == (2, 2)
    assert solver.b.shape == (2, 1)
    assert solver.parameters.shape == (2, 1)
    assert np.array_equal(solver.parameters, np.zeros((2, 1)))
    assert solver.iterations == 0


def test_non_square_input_rejected():
    X_bad = np.array([[2.0, 1.0], [5.0, 7.0], [1.0, 1.0]])
    b = np.array([[11.0], [13.0]])
    with pytest.raises(ValueError) as err:
        LinearSolver(X_bad, b, 0.01)
    assert str(err.value) == "Input must be a square matrix 3 != 2"


def test_target_with_many_columns_rejected():
    X = np.array([[2.0, 1.0], [5.0, 7.0]])
    b_bad = np.array([[11.0, 11.0], [13.0, 12.0]])
    with pytest.raises(ValueError) as err:
        LinearSolver(X, b_bad, 0.01)
    assert str(err.value) == "Target vector can't have more than 1 column: 2"


def test_target_row_mismatch_rejected():
    X = np.array([[2.0, 1.0], [5.0, 7.0]])
    b_bad_two = np.array([[11.0], [13.0], [12.0]])
    with pytest.raises(ValueError) as err:
        LinearSolver(X, b_bad_two, 0.01)
    assert str(err.value) == "Solution set rows not equal 2 != 3"


def test_gauss_solver():
    X = np.array(
        [
            [10.0, -1.0, 2.0, 0.0],
            [-1.0, 11.0, -1.0, 3.0],
            [2.0, -1.0, 10.0, -1.0],
            [0.0, 3.0, -1.0, 8.0],
        ]
    )
    b = np.array([[6.0], [25.0], [-11.0], [15.0]])

    solver = LinearSolver(X, b, 0.0)
    solver.gauss_seidel()

    assert np.array_equal(solver.parameters, np.array([[1.0], [2.0], [-1.0], [1.0]]))
    assert solver.iterations > 0


def test_sor_solver():
    X = np.array(
        [
            [4.0, -1.0, -6.0, 0.0],
            [-5.0, -4.0, 10.0, 8.0],
            [0.0, 9.0, 4.0, -2.0],
            [1.0, 0.0, -7.0, 5.0],
        ]
    )
    b = np.array([[2.0], [21.0], [-12.0], [-6.0]])

    solver = LinearSolver(X, b, 1e-6)
    solver.sor(0.5)

    expected = np.array(
        [
            [1.2490234375],
            [-2.2448974609375],
            [1.9687713623046879],
            [0.9108547973632815],
        ]
    )
    assert np.array_equal(solver.parameters, expected)


def test_gauss_on_diagonal_system_counts_iterations():
    solver = LinearSolver(np.array([[2.0, 0.0], [0.0, 4.0]]), np.array([[2.0], [8.0]]), 0.0)
    solver.gauss_seidel()
    assert np.array_equal(solver.parameters, np.array([[1.0], [2.0]]))
    assert solver.iterations == 1


def test_sor_stops_when_change_below_threshold():
    solver = LinearSolver(np.array([[2.0, 0.0], [0.0, 4.0]]), np.array([[2.0], [8.0]]), 0.0)
    solver.sor(1.0)
    assert np.array_equal(solver.parameters, np.array([[1.0], [2.0]]))
    assert solver.iterations == 0