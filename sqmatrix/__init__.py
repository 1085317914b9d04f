"""
sqmatrix — dense square integer matrices

Core type SquareMatrix with arithmetic, diagonal sums and copy-producing
transforms, plus an input-file loader and an interactive shell.
"""

__version__ = "0.1.0"
