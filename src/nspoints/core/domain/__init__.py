"""
Domain models and value objects.

Contains addresses, token configuration, events and the state snapshot.
"""

from nspoints.core.domain.address import (
    ADDRESS_PATTERN,
    ZERO_ADDRESS,
    is_address,
    is_zero_address,
    require_nonzero_address,
    to_address,
)
from nspoints.core.domain.config import (
    DEFAULT_DECIMALS,
    DEFAULT_NAME,
    DEFAULT_SYMBOL,
    INITIALIZER_VERSION,
    TokenConfig,
)
from nspoints.core.domain.events import (
    AllowedTransferAddressAdded,
    AllowedTransferAddressRemoved,
    AnyTokenEvent,
    Approval,
    Initialized,
    OwnershipTransferred,
    TokenEvent,
    Transfer,
)
from nspoints.core.domain.token_state import AllowanceEntry, InitState, TokenSnapshot

__all__ = [
    # Address module
    "ADDRESS_PATTERN",
    "ZERO_ADDRESS",
    "is_address",
    "is_zero_address",
    "require_nonzero_address",
    "to_address",
    # Config
    "DEFAULT_NAME",
    "DEFAULT_SYMBOL",
    "DEFAULT_DECIMALS",
    "INITIALIZER_VERSION",
    "TokenConfig",
    # Events
    "TokenEvent",
    "AnyTokenEvent",
    "Transfer",
    "Approval",
    "AllowedTransferAddressAdded",
    "AllowedTransferAddressRemoved",
    "OwnershipTransferred",
    "Initialized",
    # Snapshot
    "InitState",
    "AllowanceEntry",
    "TokenSnapshot",
]
