"""
Math primitives: checked uint256 арифметика.
"""

from nspoints.core.math.uint256 import (
    MAX_UINT256,
    UINT256_MIN,
    checked_add,
    checked_sub,
    is_uint256,
    validate_uint256,
)

__all__ = [
    "MAX_UINT256",
    "UINT256_MIN",
    "checked_add",
    "checked_sub",
    "is_uint256",
    "validate_uint256",
]
