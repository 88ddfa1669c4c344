"""
Events: Модели нотификаций токена

Immutable Pydantic модели событий. Поля перечислены в порядке аргументов
события (как в ABI), args() возвращает их позиционно.

События:
- Transfer(from, to, value)
- Approval(owner, spender, value)
- AllowedTransferAddressAdded(address)
- AllowedTransferAddressRemoved(address)
- OwnershipTransferred(previous_owner, new_owner)
- Initialized(version)

Полная совместимость с JSON Schema (contracts/schema/token_event.json)
через to_contract().
"""

from typing import Any, ClassVar, Dict, Tuple, Union

from pydantic import BaseModel, Field, field_validator

from nspoints.core.domain.address import ADDRESS_PATTERN
from nspoints.core.math.uint256 import MAX_UINT256


def _check_uint256(v: int) -> int:
    if v > MAX_UINT256:
        raise ValueError(f"value {v} exceeds uint256 range")
    return v


# =============================================================================
# BASE
# =============================================================================


class TokenEvent(BaseModel):
    """Базовая модель события."""

    event_name: ClassVar[str] = ""

    model_config = {"frozen": True, "populate_by_name": True}

    def args(self) -> Tuple[Any, ...]:
        """Аргументы события в порядке объявления."""
        return tuple(getattr(self, name) for name in type(self).model_fields)

    def to_contract(self) -> Dict[str, Any]:
        """Представление события для валидации по token_event.json."""
        return {
            "event": self.event_name,
            "args": self.model_dump(mode="json", by_alias=True),
        }


# =============================================================================
# ERC-20 EVENTS
# =============================================================================


class Transfer(TokenEvent):
    event_name: ClassVar[str] = "Transfer"

    from_: str = Field(..., alias="from", pattern=ADDRESS_PATTERN, description="Отправитель")
    to: str = Field(..., pattern=ADDRESS_PATTERN, description="Получатель")
    value: int = Field(..., ge=0, description="Сумма")

    @field_validator("value")
    @classmethod
    def validate_value_range(cls, v: int) -> int:
        return _check_uint256(v)


class Approval(TokenEvent):
    event_name: ClassVar[str] = "Approval"

    owner: str = Field(..., pattern=ADDRESS_PATTERN, description="Владелец средств")
    spender: str = Field(..., pattern=ADDRESS_PATTERN, description="Делегат")
    value: int = Field(..., ge=0, description="Новый allowance")

    @field_validator("value")
    @classmethod
    def validate_value_range(cls, v: int) -> int:
        return _check_uint256(v)


# =============================================================================
# ALLOWLIST / OWNERSHIP / LIFECYCLE EVENTS
# =============================================================================


class AllowedTransferAddressAdded(TokenEvent):
    event_name: ClassVar[str] = "AllowedTransferAddressAdded"

    address: str = Field(..., pattern=ADDRESS_PATTERN)


class AllowedTransferAddressRemoved(TokenEvent):
    event_name: ClassVar[str] = "AllowedTransferAddressRemoved"

    address: str = Field(..., pattern=ADDRESS_PATTERN)


class OwnershipTransferred(TokenEvent):
    event_name: ClassVar[str] = "OwnershipTransferred"

    previous_owner: str = Field(..., pattern=ADDRESS_PATTERN)
    new_owner: str = Field(..., pattern=ADDRESS_PATTERN)


class Initialized(TokenEvent):
    event_name: ClassVar[str] = "Initialized"

    version: int = Field(..., ge=1, description="Версия инициализатора")


AnyTokenEvent = Union[
    Transfer,
    Approval,
    AllowedTransferAddressAdded,
    AllowedTransferAddressRemoved,
    OwnershipTransferred,
    Initialized,
]
