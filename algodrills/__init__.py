"""Classic algorithm drills: puzzles, recursion, dynamic programming and graph searches."""

__version__ = "0.1.0"

__all__ = [
    "combinatorics",
    "decompositions",
    "graphs",
    "introductory",
    "recursion",
    "sequences",
    "sums",
    "words",
]