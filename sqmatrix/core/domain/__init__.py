"""
Domain models.

Contains the SquareMatrix value type, its fill/arithmetic result types
and the grid text formatting.
"""

from sqmatrix.core.domain.formatting import (
    EMPTY_MATRIX_MARKER,
    MIN_ELEMENT_WIDTH,
    element_width,
    render_lines,
    render_matrix,
    write_matrix,
)
from sqmatrix.core.domain.square_matrix import (
    DimensionMismatch,
    FillResult,
    FillStatus,
    SquareMatrix,
)

__all__ = [
    "SquareMatrix",
    # Errors / results
    "DimensionMismatch",
    "FillResult",
    "FillStatus",
    # Formatting
    "EMPTY_MATRIX_MARKER",
    "MIN_ELEMENT_WIDTH",
    "element_width",
    "render_lines",
    "render_matrix",
    "write_matrix",
]
