"""
AllowlistRegistry: Owner-managed множество инициаторов переводов

Членство булево (без счётчиков). add/remove идемпотентны, но каждое
обращение возвращает событие, даже если членство не изменилось.
Owner добавляется при инициализации и может быть удалён как любой другой
участник.
"""

import logging
from typing import Set, Tuple

from nspoints.access.ownable import AccessControl
from nspoints.core.domain.address import is_address, require_nonzero_address
from nspoints.core.domain.events import (
    AllowedTransferAddressAdded,
    AllowedTransferAddressRemoved,
)

logger = logging.getLogger(__name__)


class AllowlistRegistry:
    """Множество адресов, которым разрешено инициировать переводы."""

    def __init__(self, access: AccessControl):
        self._access = access
        self._members: Set[str] = set()

    def is_allowed(self, address: object) -> bool:
        """Чистый запрос членства. Никогда не падает."""
        if not is_address(address):
            return False
        return address.lower() in self._members  # type: ignore[union-attr]

    def members(self) -> Tuple[str, ...]:
        return tuple(sorted(self._members))

    def add(self, caller: str, address: str) -> AllowedTransferAddressAdded:
        """
        Raises:
            Unauthorized: caller не owner
            InvalidAddress: address нулевой или некорректный
        """
        self._access.require_owner(caller)
        return self._add(address)

    def remove(self, caller: str, address: str) -> AllowedTransferAddressRemoved:
        """
        Raises:
            Unauthorized: caller не owner
            InvalidAddress: address нулевой или некорректный
        """
        self._access.require_owner(caller)
        member = require_nonzero_address(address)
        if member not in self._members:
            logger.debug("remove of non-member %s is a no-op", member)
        event = AllowedTransferAddressRemoved(address=member)
        self._members.discard(member)
        return event

    def add_initial_member(self, address: str) -> AllowedTransferAddressAdded:
        """Добавление без owner-проверки: только для Initializer."""
        return self._add(address)

    def _add(self, address: str) -> AllowedTransferAddressAdded:
        member = require_nonzero_address(address)
        if member in self._members:
            logger.debug("add of existing member %s is a no-op", member)
        event = AllowedTransferAddressAdded(address=member)
        self._members.add(member)
        return event

    def restore(self, members: Tuple[str, ...]) -> None:
        self._members = set(members)
