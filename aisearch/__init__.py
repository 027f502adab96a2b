"""Classic AI search algorithms: 8-puzzle solvers, CSP graph colouring and genetic N-queens."""

__version__ = "0.1.0"
__all__ = ["puzzle", "astar", "ids", "coloring", "nqueen"]