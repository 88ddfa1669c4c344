"""Initializer: одноразовая (upgrade-safe) инициализация экземпляра.

Deferred construction: экземпляр создаётся пустым (как storage за proxy),
а логическое конструирование выполняет initialize() ровно один раз.

States:
- UNINITIALIZED: экземпляр развёрнут, identity/owner не заданы
- INITIALIZED: identity, owner и членство owner в allowlist заданы
- DISABLED: инициализация заблокирована (implementation за proxy)

Переходы:
- UNINITIALIZED → INITIALIZED через initialize()
- UNINITIALIZED → DISABLED через disable()
- любой повторный initialize() → AlreadyInitialized, независимо от caller
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from nspoints.access.allowlist import AllowlistRegistry
from nspoints.access.ownable import AccessControl
from nspoints.core.domain.address import require_nonzero_address
from nspoints.core.domain.config import INITIALIZER_VERSION, TokenConfig
from nspoints.core.domain.events import Initialized, TokenEvent
from nspoints.core.domain.token_state import InitState
from nspoints.core.errors import AlreadyInitialized

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InitTransitionResult:
    """Результат перехода lifecycle состояния."""

    new_state: InitState
    previous_state: InitState
    transition_occurred: bool
    transition_reason: str

    # События перехода в порядке эмиссии
    events: Tuple[TokenEvent, ...]

    # Для отладки
    details: str


class Initializer:
    """Lifecycle state machine: Uninitialized → Initialized ровно один раз.

    Помимо флага состояния хранит identity (TokenConfig), так как identity
    задаётся только при инициализации и после неизменяема.
    """

    def __init__(self, access: AccessControl, allowlist: AllowlistRegistry):
        self._access = access
        self._allowlist = allowlist
        self._state = InitState.UNINITIALIZED
        self._initializing = False
        self._config: Optional[TokenConfig] = None

    @property
    def state(self) -> InitState:
        return self._state

    @property
    def is_initialized(self) -> bool:
        return self._state == InitState.INITIALIZED

    @property
    def config(self) -> Optional[TokenConfig]:
        return self._config

    def initialize(
        self,
        caller: str,
        config: Optional[TokenConfig] = None
    ) -> InitTransitionResult:
        """Инициализация экземпляра.

        Args:
            caller: инициатор; становится owner
            config: identity токена (default: reference deployment)

        Returns:
            InitTransitionResult с событиями:
            OwnershipTransferred, AllowedTransferAddressAdded, Initialized

        Raises:
            AlreadyInitialized: состояние не UNINITIALIZED или инициализация
                уже выполняется (re-entrant вызов)
            InvalidAddress: caller нулевой или некорректный
        """
        if self._initializing:
            raise AlreadyInitialized("Re-entrant initialization is not allowed")
        if self._state != InitState.UNINITIALIZED:
            logger.warning("initialize rejected: state=%s caller=%s", self._state.value, caller)
            raise AlreadyInitialized(
                f"Cannot initialize from state {self._state.value}"
            )

        owner = require_nonzero_address(caller)
        cfg = config or TokenConfig()

        previous_owner = self._access.owner
        previous_members = self._allowlist.members()

        self._initializing = True
        try:
            ownership_event = self._access.initialize_owner(owner)
            allowlist_event = self._allowlist.add_initial_member(owner)
            self._config = cfg
            self._state = InitState.INITIALIZED
        except Exception:
            # Неудачная инициализация оставляет экземпляр UNINITIALIZED
            self._access.restore(previous_owner)
            self._allowlist.restore(previous_members)
            self._config = None
            self._state = InitState.UNINITIALIZED
            raise
        finally:
            self._initializing = False

        logger.info(
            "initialized %s (%s), owner=%s", cfg.name, cfg.symbol, owner
        )
        return InitTransitionResult(
            new_state=InitState.INITIALIZED,
            previous_state=InitState.UNINITIALIZED,
            transition_occurred=True,
            transition_reason="initialize",
            events=(
                ownership_event,
                allowlist_event,
                Initialized(version=INITIALIZER_VERSION),
            ),
            details=f"Initialized {cfg.name}/{cfg.symbol}, owner={owner}"
        )

    def disable(self) -> InitTransitionResult:
        """Блокировка инициализации (implementation-экземпляр за proxy).

        Повторный вызов на DISABLED: no-op.

        Raises:
            AlreadyInitialized: экземпляр уже инициализирован
        """
        previous = self._state
        if previous == InitState.INITIALIZED:
            raise AlreadyInitialized("Cannot disable an initialized instance")
        if previous == InitState.DISABLED:
            return InitTransitionResult(
                new_state=previous,
                previous_state=previous,
                transition_occurred=False,
                transition_reason="already_disabled",
                events=(),
                details="Initializers already disabled"
            )

        self._state = InitState.DISABLED
        logger.info("initializers disabled")
        return InitTransitionResult(
            new_state=InitState.DISABLED,
            previous_state=previous,
            transition_occurred=True,
            transition_reason="disable",
            events=(),
            details="Initializers disabled"
        )

    def restore(self, state: InitState, config: Optional[TokenConfig]) -> None:
        self._state = state
        self._config = config
