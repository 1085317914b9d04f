"""
Core domain model and matrix operations.

Independent of any I/O: the loader and the shell pass already-obtained
integers in and hand text sinks for output.
"""
