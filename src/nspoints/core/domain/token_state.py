"""
TokenSnapshot: Модель состояния токена

Immutable Pydantic модель, представляющая снапшот всего состояния экземпляра:
- Identity (name, symbol, decimals)
- Owner и lifecycle состояние
- Ledger (total_supply, balances, allowances)
- Allowlist

Полная совместимость с JSON Schema (contracts/schema/token_snapshot.json).
"""

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field, field_validator, model_validator

from nspoints.core.domain.address import ADDRESS_PATTERN
from nspoints.core.math.uint256 import MAX_UINT256


# =============================================================================
# ENUMS
# =============================================================================


class InitState(str, Enum):
    """
    Lifecycle состояние экземпляра.

    UNINITIALIZED → INITIALIZED (ровно один раз через initialize)
    UNINITIALIZED → DISABLED (заблокированный implementation-экземпляр)
    """

    UNINITIALIZED = "UNINITIALIZED"
    INITIALIZED = "INITIALIZED"
    DISABLED = "DISABLED"


# =============================================================================
# NESTED MODELS
# =============================================================================


class AllowanceEntry(BaseModel):
    """Одна запись allowance: (owner, spender) → amount."""

    owner: str = Field(..., pattern=ADDRESS_PATTERN)
    spender: str = Field(..., pattern=ADDRESS_PATTERN)
    amount: int = Field(..., ge=0)

    model_config = {"frozen": True}

    @field_validator("amount")
    @classmethod
    def validate_amount_range(cls, v: int) -> int:
        if v > MAX_UINT256:
            raise ValueError(f"amount {v} exceeds uint256 range")
        return v


# =============================================================================
# SNAPSHOT MODEL
# =============================================================================


class TokenSnapshot(BaseModel):
    """
    Снапшот состояния токена.

    Нулевые balances и allowances в снапшот не попадают (отсутствие ≡ ноль).
    Инвариант сохранения проверяется при создании: sum(balances) == total_supply.
    """

    schema_version: str = Field("1", pattern="^1$", description="Версия схемы")

    # Identity
    name: str = Field(..., description="Имя токена (пусто до initialize)")
    symbol: str = Field(..., description="Тикер (пусто до initialize)")
    decimals: int = Field(..., ge=0, le=255)

    # Ownership / lifecycle
    owner: str = Field(..., pattern=ADDRESS_PATTERN, description="Текущий owner")
    init_state: InitState = Field(..., description="Lifecycle состояние")

    # Ledger
    total_supply: int = Field(..., ge=0)
    balances: Dict[str, int] = Field(default_factory=dict)
    allowances: List[AllowanceEntry] = Field(default_factory=list)

    # Allowlist
    allowlist: List[str] = Field(default_factory=list)

    model_config = {"frozen": True}

    @field_validator("total_supply")
    @classmethod
    def validate_supply_range(cls, v: int) -> int:
        if v > MAX_UINT256:
            raise ValueError(f"total_supply {v} exceeds uint256 range")
        return v

    @model_validator(mode="after")
    def validate_conservation(self) -> "TokenSnapshot":
        """
        Проверка инварианта сохранения supply.
        """
        total = sum(self.balances.values())
        if total != self.total_supply:
            raise ValueError(
                f"sum(balances)={total} does not match total_supply={self.total_supply}"
            )
        if any(amount < 0 for amount in self.balances.values()):
            raise ValueError("balances must be non-negative")
        return self
