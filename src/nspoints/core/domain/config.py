"""
TokenConfig: Параметры identity токена

Передаются в initialize(); после инициализации неизменяемы.
Значения по умолчанию соответствуют reference deployment.
"""

from typing import Final

from pydantic import BaseModel, Field

# =============================================================================
# REFERENCE DEPLOYMENT
# =============================================================================

DEFAULT_NAME: Final[str] = "NSDEVPOINTS"
DEFAULT_SYMBOL: Final[str] = "NSDEV"
DEFAULT_DECIMALS: Final[int] = 18

# Версия, которую фиксирует Initialized(version)
INITIALIZER_VERSION: Final[int] = 1


class TokenConfig(BaseModel):
    """
    Конфигурация identity токена.

    Immutable модель (frozen=True).
    """

    name: str = Field(default=DEFAULT_NAME, min_length=1, description="Имя токена")
    symbol: str = Field(
        default=DEFAULT_SYMBOL, min_length=1, description="Тикер токена"
    )
    decimals: int = Field(
        default=DEFAULT_DECIMALS, ge=0, le=255, description="Десятичные знаки (uint8)"
    )

    model_config = {"frozen": True}
