"""NSPoints: внешний fungible-token интерфейс с allowlist-гейтом переводов.

Композиция Ledger + AccessControl + AllowlistRegistry + Initializer за
стандартным набором ERC-20 операций.

Порядок проверок (фиксированный):
1. Авторизация: allowlist для value-moving путей, owner для mint/allowlist
2. Валидация адресов и amount
3. Мутация Ledger
4. Фиксация событий

Ключевое свойство: allowlist проверяется у ИНИЦИАТОРА вызова (caller),
а не у владельца средств. Делегат по approve обязан сам быть в allowlist,
иначе approvals стали бы обходным каналом перевода.

Атомарность: каждый мутирующий вызов выполняется под RLock внутри
_atomic(). При любом исключении состояние откатывается к checkpoint,
а накопленные события отбрасываются.
"""

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from nspoints.access.allowlist import AllowlistRegistry
from nspoints.access.ownable import AccessControl
from nspoints.core.contracts.validators import validate_token_events, validate_token_snapshot
from nspoints.core.domain.address import (
    ZERO_ADDRESS,
    is_address,
    require_nonzero_address,
    to_address,
)
from nspoints.core.domain.config import DEFAULT_DECIMALS, TokenConfig
from nspoints.core.domain.events import (
    Approval,
    TokenEvent,
    Transfer,
)
from nspoints.core.domain.token_state import AllowanceEntry, InitState, TokenSnapshot
from nspoints.core.errors import TransferNotAllowed
from nspoints.ledger.ledger import Ledger, LedgerCheckpoint
from nspoints.lifecycle.initializer import Initializer, InitTransitionResult
from nspoints.token.event_log import EventLog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Checkpoint:
    ledger: LedgerCheckpoint
    owner: str
    allowlist: Tuple[str, ...]
    init_state: InitState
    config: Optional[TokenConfig]


class NSPoints:
    """Allowlist-gated fungible token.

    Все мутирующие операции принимают caller явно (аналог msg.sender).
    Экземпляр создаётся неинициализированным: до initialize() owner равен
    ZERO_ADDRESS, allowlist пуст, поэтому любые переводы и owner-only
    операции отклоняются.
    """

    def __init__(self, validate_contracts: bool = False):
        """
        Args:
            validate_contracts: проверять каждое фиксируемое событие и каждый
                snapshot() по JSON Schema контрактам. Нарушение схемы
                откатывает вызов так же, как любая другая ошибка.
        """
        self._access = AccessControl()
        self._allowlist = AllowlistRegistry(self._access)
        self._ledger = Ledger()
        self._initializer = Initializer(self._access, self._allowlist)
        self._events = EventLog()
        self._lock = threading.RLock()
        self._pending: Optional[List[TokenEvent]] = None
        self._validate_contracts = validate_contracts

    @classmethod
    def implementation(cls, validate_contracts: bool = False) -> "NSPoints":
        """Implementation-экземпляр: initialize() на нём заблокирован навсегда.

        Блокировка доступна только при создании, поэтому уже созданный
        пользовательский экземпляр нельзя запереть снаружи.
        """
        instance = cls(validate_contracts=validate_contracts)
        with instance._atomic():
            instance._initializer.disable()
        return instance

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def initialize(
        self,
        caller: str,
        config: Optional[TokenConfig] = None
    ) -> InitTransitionResult:
        """Одноразовая инициализация: identity, owner := caller, owner в allowlist.

        Raises:
            AlreadyInitialized: повторный вызов (любым caller)
            InvalidAddress: caller нулевой или некорректный
        """
        with self._atomic() as pending:
            result = self._initializer.initialize(caller, config)
            pending.extend(result.events)
        return result

    # =========================================================================
    # VALUE-MOVING OPERATIONS (allowlist-gated)
    # =========================================================================

    def transfer(self, caller: str, to: str, amount: int) -> bool:
        """Перевод value от caller к to.

        Raises:
            TransferNotAllowed: caller не в allowlist (для любого amount, включая 0)
            InvalidAddress: to нулевой или некорректный
            InvalidAmount: amount вне uint256
            InsufficientBalance: balance(caller) < amount
        """
        with self._atomic() as pending:
            sender = self._require_allowed(caller)
            recipient = require_nonzero_address(to)
            self._ledger.move(sender, recipient, amount)
            pending.append(Transfer(from_=sender, to=recipient, value=amount))
        logger.debug("transfer %s -> %s: %d", sender, recipient, amount)
        return True

    def transfer_from(self, caller: str, sender: str, to: str, amount: int) -> bool:
        """Делегированный перевод value от sender к to за счёт allowance caller.

        Allowlist проверяется у caller (spender), не у sender.
        Списание allowance откатывается, если перемещение value не удалось.

        Raises:
            TransferNotAllowed: caller не в allowlist
            InvalidAddress: sender/to некорректны или to нулевой
            InsufficientAllowance: allowance(sender, caller) < amount
            InsufficientBalance: balance(sender) < amount
        """
        with self._atomic() as pending:
            spender = self._require_allowed(caller)
            source = require_nonzero_address(sender)
            recipient = require_nonzero_address(to)
            self._ledger.spend_allowance(source, spender, amount)
            self._ledger.move(source, recipient, amount)
            pending.append(Transfer(from_=source, to=recipient, value=amount))
        logger.debug(
            "transfer_from %s -> %s by %s: %d", source, recipient, spender, amount
        )
        return True

    # =========================================================================
    # APPROVALS (без allowlist-проверки: approve не перемещает value)
    # =========================================================================

    def approve(self, caller: str, spender: str, amount: int) -> bool:
        """Установка allowance (перезапись).

        Raises:
            InvalidAddress: caller или spender нулевой/некорректный
            InvalidAmount: amount вне uint256
        """
        with self._atomic() as pending:
            owner = require_nonzero_address(caller)
            delegate = require_nonzero_address(spender)
            self._ledger.approve(owner, delegate, amount)
            pending.append(Approval(owner=owner, spender=delegate, value=amount))
        return True

    # =========================================================================
    # OWNER-ONLY OPERATIONS
    # =========================================================================

    def mint(self, caller: str, to: str, amount: int) -> bool:
        """Создание value (owner-only). Emits Transfer(ZERO_ADDRESS, to, amount).

        Raises:
            Unauthorized: caller не owner
            InvalidAddress: to нулевой или некорректный
            ArithmeticOverflow: total_supply вышел бы за uint256
        """
        with self._atomic() as pending:
            self._access.require_owner(caller)
            recipient = require_nonzero_address(to)
            self._ledger.mint(recipient, amount)
            pending.append(Transfer(from_=ZERO_ADDRESS, to=recipient, value=amount))
        logger.debug("mint %d to %s", amount, recipient)
        return True

    def add_allowed_transfer_address(self, caller: str, address: str) -> bool:
        """Raises: Unauthorized, InvalidAddress."""
        with self._atomic() as pending:
            pending.append(self._allowlist.add(caller, address))
        logger.info("allowed transfer address added: %s", address)
        return True

    def remove_allowed_transfer_address(self, caller: str, address: str) -> bool:
        """Raises: Unauthorized, InvalidAddress."""
        with self._atomic() as pending:
            pending.append(self._allowlist.remove(caller, address))
        logger.info("allowed transfer address removed: %s", address)
        return True

    def transfer_ownership(self, caller: str, new_owner: str) -> bool:
        """Raises: Unauthorized, InvalidAddress."""
        with self._atomic() as pending:
            pending.append(self._access.transfer_ownership(caller, new_owner))
        return True

    # =========================================================================
    # READS
    # =========================================================================

    def name(self) -> str:
        cfg = self._initializer.config
        return cfg.name if cfg else ""

    def symbol(self) -> str:
        cfg = self._initializer.config
        return cfg.symbol if cfg else ""

    def decimals(self) -> int:
        cfg = self._initializer.config
        return cfg.decimals if cfg else DEFAULT_DECIMALS

    def owner(self) -> str:
        return self._access.owner

    def total_supply(self) -> int:
        return self._ledger.total_supply

    # Read-пути не бросают исключений: некорректный адрес не может иметь
    # ни баланса, ни allowance, ни членства в allowlist.

    def balance_of(self, address: str) -> int:
        if not is_address(address):
            return 0
        return self._ledger.balance_of(to_address(address))

    def allowance(self, owner: str, spender: str) -> int:
        if not (is_address(owner) and is_address(spender)):
            return 0
        return self._ledger.allowance(to_address(owner), to_address(spender))

    def is_allowed_transfer_address(self, address: str) -> bool:
        return self._allowlist.is_allowed(address)

    def is_initialized(self) -> bool:
        return self._initializer.is_initialized

    @property
    def init_state(self) -> InitState:
        return self._initializer.state

    @property
    def events(self) -> EventLog:
        return self._events

    def snapshot(self) -> TokenSnapshot:
        """Снапшот полного состояния (для аудита и JSON Schema контракта)."""
        with self._lock:
            snapshot = TokenSnapshot(
                name=self.name(),
                symbol=self.symbol(),
                decimals=self.decimals(),
                owner=self.owner(),
                init_state=self._initializer.state,
                total_supply=self._ledger.total_supply,
                balances=dict(sorted(self._ledger.holders())),
                allowances=[
                    AllowanceEntry(owner=owner, spender=spender, amount=amount)
                    for owner, spender, amount in sorted(self._ledger.allowance_entries())
                ],
                allowlist=list(self._allowlist.members()),
            )
        if self._validate_contracts:
            validate_token_snapshot(snapshot)
        return snapshot

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _require_allowed(self, caller: str) -> str:
        if not self._allowlist.is_allowed(caller):
            logger.warning("transfer rejected: %s is not an allowed transfer address", caller)
            raise TransferNotAllowed(caller)
        return to_address(caller)

    @contextmanager
    def _atomic(self) -> Iterator[List[TokenEvent]]:
        """Атомарная секция вызова: commit событий или полный откат."""
        with self._lock:
            if self._pending is not None:
                # Вложенный вызов присоединяется к внешней секции
                yield self._pending
                return

            checkpoint = self._checkpoint()
            self._pending = []
            try:
                yield self._pending
                if self._validate_contracts:
                    validate_token_events(self._pending)
            except Exception:
                self._restore(checkpoint)
                raise
            else:
                self._events.record(self._pending)
            finally:
                self._pending = None

    def _checkpoint(self) -> _Checkpoint:
        return _Checkpoint(
            ledger=self._ledger.checkpoint(),
            owner=self._access.owner,
            allowlist=self._allowlist.members(),
            init_state=self._initializer.state,
            config=self._initializer.config,
        )

    def _restore(self, checkpoint: _Checkpoint) -> None:
        self._ledger.restore(checkpoint.ledger)
        self._access.restore(checkpoint.owner)
        self._allowlist.restore(checkpoint.allowlist)
        self._initializer.restore(checkpoint.init_state, checkpoint.config)
