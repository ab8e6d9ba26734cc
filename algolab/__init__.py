"""Classic algorithms and data structures, CPU scheduling simulation and BMP edge filters."""

__version__ = "0.1.0"

__all__ = [
    "search",
    "number_theory",
    "combinatorics",
    "sorting",
    "strings",
    "geometry",
    "bst",
    "binary_tree",
    "doubly_linked_list",
    "linked_list",
    "circular_queue",
    "sparse_matrix",
    "scheduling",
    "bmp",
    "filters",
]