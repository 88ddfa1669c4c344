"""
NSPOINTS: allowlist-gated fungible points ledger.

Lightweight facade import:
    from nspoints import NSPoints, TokenConfig
"""

from nspoints.core.domain.config import TokenConfig
from nspoints.core.errors import (
    AlreadyInitialized,
    ArithmeticOverflow,
    InsufficientAllowance,
    InsufficientBalance,
    InvalidAddress,
    InvalidAmount,
    TokenError,
    TransferNotAllowed,
    Unauthorized,
)
from nspoints.token.facade import NSPoints

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "NSPoints",
    "TokenConfig",
    # Errors
    "TokenError",
    "Unauthorized",
    "TransferNotAllowed",
    "InsufficientBalance",
    "InsufficientAllowance",
    "AlreadyInitialized",
    "InvalidAddress",
    "InvalidAmount",
    "ArithmeticOverflow",
]
