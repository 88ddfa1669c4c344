"""
Errors: Таксономия отказов NSPOINTS

Каждый отказ прерывает вызов целиком: никаких частичных мутаций и событий.
Тип исключения однозначно определяет причину отказа, поэтому вызывающий код
и тесты проверяют конкретный вид ошибки, а не только факт неуспеха.

Виды:
- Unauthorized: caller не прошёл проверку owner
- TransferNotAllowed: caller не в allowlist на value-moving пути
- InsufficientBalance / InsufficientAllowance: недостаточно средств / allowance
- AlreadyInitialized: повторная инициализация
- InvalidAddress / InvalidAmount: некорректный вход
- ArithmeticOverflow: выход за пределы uint256
"""

from typing import Final

# Текст отказа allowlist-проверки (совпадает с revert reason контракта)
TRANSFER_NOT_ALLOWED_MESSAGE: Final[str] = "NSPOINTS: sender not allowed to transfer"


# =============================================================================
# BASE
# =============================================================================


class TokenError(Exception):
    """
    Базовое исключение всех отказов токена.

    Attributes:
        reason: стабильный машиночитаемый код причины
    """

    reason: str = "TokenError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# =============================================================================
# ACCESS
# =============================================================================


class Unauthorized(TokenError):
    """Caller не является owner (OwnableUnauthorizedAccount)."""

    reason = "Unauthorized"

    def __init__(self, account: str):
        super().__init__(f"Unauthorized account: {account}")
        self.account = account


class TransferNotAllowed(TokenError):
    """Инициатор перевода отсутствует в allowlist."""

    reason = "TransferNotAllowed"

    def __init__(self, account: str):
        super().__init__(TRANSFER_NOT_ALLOWED_MESSAGE)
        self.account = account


# =============================================================================
# LEDGER
# =============================================================================


class InsufficientBalance(TokenError):
    reason = "InsufficientBalance"

    def __init__(self, sender: str, balance: int, needed: int):
        super().__init__(
            f"Insufficient balance: {sender} has {balance}, needs {needed}"
        )
        self.sender = sender
        self.balance = balance
        self.needed = needed


class InsufficientAllowance(TokenError):
    reason = "InsufficientAllowance"

    def __init__(self, spender: str, allowance: int, needed: int):
        super().__init__(
            f"Insufficient allowance: {spender} has {allowance}, needs {needed}"
        )
        self.spender = spender
        self.allowance = allowance
        self.needed = needed


class ArithmeticOverflow(TokenError):
    """Результат операции вышел за пределы uint256."""

    reason = "ArithmeticOverflow"


# =============================================================================
# LIFECYCLE / INPUT
# =============================================================================


class AlreadyInitialized(TokenError):
    reason = "AlreadyInitialized"

    def __init__(self, message: str = "Instance is already initialized"):
        super().__init__(message)


class InvalidAddress(TokenError):
    """Нулевой или некорректный адрес там, где требуется реальная identity."""

    reason = "InvalidAddress"

    def __init__(self, address: object):
        super().__init__(f"Invalid address: {address!r}")
        self.address = address


class InvalidAmount(TokenError):
    """Значение вне домена uint256 (отрицательное, не int, слишком большое)."""

    reason = "InvalidAmount"

    def __init__(self, amount: object):
        super().__init__(f"Invalid amount: {amount!r}")
        self.amount = amount
