"""Access: owner gate и allowlist инициаторов переводов."""

from .allowlist import AllowlistRegistry
from .ownable import AccessControl

__all__ = [
    "AccessControl",
    "AllowlistRegistry",
]
