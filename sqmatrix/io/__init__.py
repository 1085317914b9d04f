"""
Input files for the matrix shell.
"""

from sqmatrix.io.matrix_file import (
    MatrixFileError,
    MatrixPair,
    load_matrix_pair,
    matrix_pair_from_document,
    matrix_pair_to_document,
    parse_matrix_pair,
)

__all__ = [
    "MatrixFileError",
    "MatrixPair",
    "load_matrix_pair",
    "matrix_pair_from_document",
    "matrix_pair_to_document",
    "parse_matrix_pair",
]
