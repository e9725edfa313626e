"""
Test suite for arbitrary-precision integers

Contains:
- tests/unit/          : Unit tests for individual modules
"""
