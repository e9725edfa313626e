"""
Core value types and digit-level arithmetic for arbitrary-precision integers.

This package has no I/O and no external state: every operation is a pure
function of its operands.
"""
