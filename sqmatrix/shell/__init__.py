"""
Interactive console shell.
"""

from sqmatrix.shell.prompts import PromptResult, prompt_filename, prompt_params
from sqmatrix.shell.session import MatrixSession, SessionConfig, build_parser, main

__all__ = [
    "MatrixSession",
    "PromptResult",
    "SessionConfig",
    "build_parser",
    "main",
    "prompt_filename",
    "prompt_params",
]
