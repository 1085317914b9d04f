"""
Contract Validation Module

Модуль для валидации JSON документов с входными матрицами.
"""

from .validators import (
    ContractValidator,
    MatrixPairValidator,
    SchemaLoader,
    validate_matrix_pair,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MatrixPairValidator",
    # Functions
    "validate_matrix_pair",
]
