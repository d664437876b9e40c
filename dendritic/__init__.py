"""Decision trees, random forests, iterative linear solvers and linear regression."""

__version__ = "1.1.1"
__all__ = [
    "node",
    "tree_utils",
    "bootstrap",
    "decision_tree",
    "decision_tree_regressor",
    "random_forest",
    "linear_solver",
    "linear_regression",
]