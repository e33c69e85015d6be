"""
Core primitives: exact rational arithmetic, base decoding, Newton interpolation,
share domain models and JSON contracts.

This module contains the foundational building blocks that are independent
of I/O (files, console, argument parsing).
"""
