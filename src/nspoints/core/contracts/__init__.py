"""
Contract Validation Module

Модуль для валидации JSON контрактов токена NSPOINTS.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    TokenEventValidator,
    TokenSnapshotValidator,
    event_validator,
    snapshot_validator,
    validate_token_event,
    validate_token_events,
    validate_token_snapshot,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TokenEventValidator",
    "TokenSnapshotValidator",
    # Functions
    "event_validator",
    "snapshot_validator",
    "validate_token_event",
    "validate_token_events",
    "validate_token_snapshot",
]
