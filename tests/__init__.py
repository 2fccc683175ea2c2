"""
Test suite for packed triangle indexing

Contains:
- tests/unit/          : Unit tests for index arithmetic, guards and accessors
"""
