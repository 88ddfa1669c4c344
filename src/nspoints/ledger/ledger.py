"""
Ledger: Balances, allowances и total supply

Единственный владелец денежного состояния токена. Ledger не знает ни про
owner, ни про allowlist: авторизацию выполняет фасад до вызова мутаций.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. sum(balances) == total_supply во всех достижимых состояниях
2. balances[*] >= 0 и allowances[*] >= 0 (uint256, underflow → ошибка)
3. Любая операция либо применяется полностью, либо не меняет состояние
4. Allowance никогда не увеличивается неявно (только через approve)

Отсутствие записи эквивалентно нулю; записи не удаляются, только обнуляются.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Tuple

from nspoints.core.errors import InsufficientAllowance, InsufficientBalance
from nspoints.core.math.uint256 import (
    MAX_UINT256,
    checked_add,
    checked_sub,
    validate_uint256,
)


@dataclass(frozen=True)
class LedgerCheckpoint:
    """Копия денежного состояния для отката вызова."""

    balances: Dict[str, int]
    allowances: Dict[Tuple[str, str], int]
    total_supply: int


class Ledger:
    """
    Денежное состояние токена.

    Адреса принимаются уже нормализованными (nspoints.core.domain.address).
    Amount валидируется здесь: всё, что попадает в хранилище, лежит в uint256.
    """

    def __init__(self):
        self._balances: Dict[str, int] = {}
        self._allowances: Dict[Tuple[str, str], int] = {}
        self._total_supply: int = 0

    # =========================================================================
    # READS
    # =========================================================================

    @property
    def total_supply(self) -> int:
        return self._total_supply

    def balance_of(self, address: str) -> int:
        return self._balances.get(address, 0)

    def allowance(self, owner: str, spender: str) -> int:
        return self._allowances.get((owner, spender), 0)

    def holders(self) -> Iterator[Tuple[str, int]]:
        """Адреса с ненулевым балансом."""
        for address, amount in self._balances.items():
            if amount > 0:
                yield address, amount

    def allowance_entries(self) -> Iterator[Tuple[str, str, int]]:
        """Ненулевые allowances как (owner, spender, amount)."""
        for (owner, spender), amount in self._allowances.items():
            if amount > 0:
                yield owner, spender, amount

    def check_conservation(self) -> bool:
        """Инвариант сохранения supply."""
        return sum(self._balances.values()) == self._total_supply

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def mint(self, to: str, amount: int) -> None:
        """
        Создание value: balances[to] += amount, total_supply += amount.

        Raises:
            InvalidAmount: amount вне uint256
            ArithmeticOverflow: total_supply вышел бы за MAX_UINT256
        """
        validate_uint256(amount)
        # Проверяем supply первым: balance <= supply, значит balance не переполнится
        new_supply = checked_add(self._total_supply, amount)
        self._balances[to] = checked_add(self.balance_of(to), amount)
        self._total_supply = new_supply

    def move(self, sender: str, recipient: str, amount: int) -> None:
        """
        Атомарное перемещение value между адресами.

        Raises:
            InvalidAmount: amount вне uint256
            InsufficientBalance: balances[sender] < amount
        """
        validate_uint256(amount)
        sender_balance = self.balance_of(sender)
        if sender_balance < amount:
            raise InsufficientBalance(sender, sender_balance, amount)

        if sender == recipient:
            return

        new_sender_balance = checked_sub(sender_balance, amount)
        new_recipient_balance = checked_add(self.balance_of(recipient), amount)
        self._balances[sender] = new_sender_balance
        self._balances[recipient] = new_recipient_balance

    def approve(self, owner: str, spender: str, amount: int) -> None:
        """Установка allowance (перезапись, не сложение)."""
        validate_uint256(amount)
        self._allowances[(owner, spender)] = amount

    def spend_allowance(self, owner: str, spender: str, amount: int) -> None:
        """
        Списание allowance ровно на amount.

        Allowance, равный MAX_UINT256, считается бесконечным и не уменьшается.

        Raises:
            InvalidAmount: amount вне uint256
            InsufficientAllowance: allowance < amount
        """
        validate_uint256(amount)
        current = self.allowance(owner, spender)
        if current == MAX_UINT256:
            return
        if current < amount:
            raise InsufficientAllowance(spender, current, amount)
        self._allowances[(owner, spender)] = checked_sub(current, amount)

    # =========================================================================
    # CHECKPOINTS
    # =========================================================================

    def checkpoint(self) -> LedgerCheckpoint:
        return LedgerCheckpoint(
            balances=dict(self._balances),
            allowances=dict(self._allowances),
            total_supply=self._total_supply,
        )

    def restore(self, checkpoint: LedgerCheckpoint) -> None:
        self._balances = dict(checkpoint.balances)
        self._allowances = dict(checkpoint.allowances)
        self._total_supply = checkpoint.total_supply
