"""
Core math modules для sqmatrix

Copy-producing преобразования матриц (swap rows/columns, update element).
"""

from sqmatrix.core.math.transforms import (
    DEFAULT_SWAP_COLUMNS,
    DEFAULT_SWAP_ROWS,
    DEFAULT_UPDATE_ELEMENT,
    SwapColumnsParams,
    SwapRowsParams,
    UpdateElementParams,
    apply_swap_columns,
    apply_swap_rows,
    apply_update_element,
    swap_columns,
    swap_rows,
    update_element,
)

__all__ = [
    # Defaults
    "DEFAULT_SWAP_COLUMNS",
    "DEFAULT_SWAP_ROWS",
    "DEFAULT_UPDATE_ELEMENT",
    # Types
    "SwapColumnsParams",
    "SwapRowsParams",
    "UpdateElementParams",
    # Functions
    "apply_swap_columns",
    "apply_swap_rows",
    "apply_update_element",
    "swap_columns",
    "swap_rows",
    "update_element",
]
