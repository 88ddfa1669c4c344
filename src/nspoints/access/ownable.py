"""
AccessControl: Single-owner gate

Один owner на экземпляр. До инициализации owner == ZERO_ADDRESS, поэтому
любая owner-only операция отклоняется (ни один caller не равен нулевому
адресу: нулевой адрес не может быть caller).

После инициализации owner никогда не становится нулевым: renounce нет,
transfer_ownership требует реальный адрес.
"""

import logging

from nspoints.core.domain.address import ZERO_ADDRESS, is_address, require_nonzero_address
from nspoints.core.domain.events import OwnershipTransferred
from nspoints.core.errors import AlreadyInitialized, Unauthorized

logger = logging.getLogger(__name__)


class AccessControl:
    """Owner identity и проверка owner-only операций."""

    def __init__(self):
        self._owner: str = ZERO_ADDRESS

    @property
    def owner(self) -> str:
        return self._owner

    def is_owner(self, caller: str) -> bool:
        if self._owner == ZERO_ADDRESS or not is_address(caller):
            return False
        return caller.lower() == self._owner

    def require_owner(self, caller: str) -> None:
        """
        Raises:
            Unauthorized: если caller != owner (в т.ч. некорректный caller)
        """
        if not self.is_owner(caller):
            logger.warning("owner check failed for %s", caller)
            raise Unauthorized(caller)

    def initialize_owner(self, owner: str) -> OwnershipTransferred:
        """
        Первичная установка owner (вызывается только Initializer).

        Raises:
            InvalidAddress: owner нулевой или некорректный
            AlreadyInitialized: owner уже установлен
        """
        new_owner = require_nonzero_address(owner)
        if self._owner != ZERO_ADDRESS:
            raise AlreadyInitialized("Owner is already set")
        event = OwnershipTransferred(previous_owner=ZERO_ADDRESS, new_owner=new_owner)
        self._owner = new_owner
        return event

    def transfer_ownership(self, caller: str, new_owner: str) -> OwnershipTransferred:
        """
        Атомарная замена owner.

        Raises:
            Unauthorized: caller не owner
            InvalidAddress: new_owner нулевой или некорректный
        """
        self.require_owner(caller)
        target = require_nonzero_address(new_owner)
        event = OwnershipTransferred(previous_owner=self._owner, new_owner=target)
        self._owner = target
        logger.info("ownership transferred %s -> %s", event.previous_owner, target)
        return event

    def restore(self, owner: str) -> None:
        self._owner = owner
