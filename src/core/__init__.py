"""
Core index arithmetic and accessors for packed triangular matrices.

This module contains the building blocks that map (row, col) coordinates of
an upper or lower triangular matrix onto a flat, caller-owned storage
collection. It performs no I/O and owns no storage.
"""
