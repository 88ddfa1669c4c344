"""
Address: Нормализация и валидация адресов

Адрес: строка "0x" + 40 hex-символов (20 байт). Храним в нижнем регистре,
чтобы одинаковые адреса в разном регистре (checksum-форма) совпадали как
ключи balances/allowances/allowlist.

ZERO_ADDRESS: нулевая identity: источник Transfer при mint и owner
неинициализированного экземпляра. Реальной identity он быть не может.
"""

import re
from typing import Final

from nspoints.core.errors import InvalidAddress

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ADDRESS_HEX_LENGTH: Final[int] = 40

ADDRESS_PATTERN: Final[str] = r"^0x[0-9a-f]{40}$"

ZERO_ADDRESS: Final[str] = "0x" + "0" * ADDRESS_HEX_LENGTH

_ADDRESS_RE = re.compile(r"0x[0-9a-fA-F]{40}")


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def is_address(value: object) -> bool:
    """Проверка формата адреса (без учёта регистра). Никогда не падает."""
    return isinstance(value, str) and _ADDRESS_RE.fullmatch(value) is not None


def to_address(value: object) -> str:
    """
    Нормализация адреса к нижнему регистру.

    Args:
        value: Адрес в любом регистре

    Returns:
        Адрес в нижнем регистре

    Raises:
        InvalidAddress: если формат некорректен

    Examples:
        >>> to_address("0xAbC0000000000000000000000000000000000001")
        '0xabc0000000000000000000000000000000000001'
    """
    if not is_address(value):
        raise InvalidAddress(value)
    return value.lower()  # type: ignore[union-attr]


def is_zero_address(value: str) -> bool:
    return to_address(value) == ZERO_ADDRESS


def require_nonzero_address(value: object) -> str:
    """
    Нормализация адреса, который должен быть реальной identity.

    Raises:
        InvalidAddress: если формат некорректен или адрес нулевой
    """
    address = to_address(value)
    if address == ZERO_ADDRESS:
        raise InvalidAddress(value)
    return address
