"""
Test suite for sqmatrix

Contains:
- tests/unit/          : Unit tests for the core type, transforms, loader and shell
"""
