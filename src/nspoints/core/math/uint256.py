"""
Uint256: Checked arithmetic для целочисленного домена токена

Все суммы (balances, allowances, totalSupply) живут в домене uint256:
целые числа в замкнутом интервале [0, 2**256 - 1].

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значения никогда не становятся отрицательными (underflow → ошибка)
2. Значения никогда не "заворачиваются" (overflow → ArithmeticOverflow)
3. bool не считается amount, хотя в Python это подкласс int
"""

from typing import Final

from nspoints.core.errors import ArithmeticOverflow, InvalidAmount

# =============================================================================
# ГРАНИЦЫ ДОМЕНА
# =============================================================================

UINT256_MIN: Final[int] = 0
MAX_UINT256: Final[int] = 2**256 - 1


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_uint256(value: object) -> bool:
    """
    Проверка принадлежности значения домену uint256.

    Examples:
        >>> is_uint256(0)
        True
        >>> is_uint256(-1)
        False
        >>> is_uint256(True)
        False
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return UINT256_MIN <= value <= MAX_UINT256


def validate_uint256(value: object) -> int:
    """
    Валидация amount.

    Args:
        value: Проверяемое значение

    Returns:
        value (как int) если оно в домене uint256

    Raises:
        InvalidAmount: если value не int, bool, отрицательное или > MAX_UINT256
    """
    if not is_uint256(value):
        raise InvalidAmount(value)
    return value  # type: ignore[return-value]


# =============================================================================
# CHECKED ОПЕРАЦИИ
# =============================================================================


def checked_add(a: int, b: int) -> int:
    """
    Сложение с защитой от overflow.

    Raises:
        ArithmeticOverflow: если a + b > MAX_UINT256
    """
    result = a + b
    if result > MAX_UINT256:
        raise ArithmeticOverflow(f"uint256 overflow: {a} + {b}")
    return result


def checked_sub(a: int, b: int) -> int:
    """
    Вычитание с защитой от underflow.

    Вызывающий код обязан проверить достаточность заранее и поднять
    доменную ошибку (InsufficientBalance/InsufficientAllowance); здесь
    underflow означает нарушение инварианта.

    Raises:
        ArithmeticOverflow: если a - b < 0
    """
    if b > a:
        raise ArithmeticOverflow(f"uint256 underflow: {a} - {b}")
    return a - b
