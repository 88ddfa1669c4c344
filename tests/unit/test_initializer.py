"""Тесты для Initializer (lifecycle state machine).

Coverage:
- UNINITIALIZED → INITIALIZED (identity, owner, allowlist)
- Повторный initialize → AlreadyInitialized для любого caller
- DISABLED (implementation-экземпляр)
- Re-entrant initialize
"""

import pytest

from nspoints.access import AccessControl, AllowlistRegistry
from nspoints.core.domain import (
    ZERO_ADDRESS,
    AllowedTransferAddressAdded,
    Initialized,
    InitState,
    OwnershipTransferred,
    TokenConfig,
)
from nspoints.core.errors import AlreadyInitialized, InvalidAddress
from nspoints.lifecycle import Initializer


DEPLOYER = "0x" + "d" * 40
OTHER = "0x" + "e" * 40


@pytest.fixture
def parts():
    access = AccessControl()
    allowlist = AllowlistRegistry(access)
    return access, allowlist, Initializer(access, allowlist)


class TestInitializer:
    """Тесты lifecycle state machine."""

    def test_initial_state(self, parts):
        _, _, init = parts
        assert init.state == InitState.UNINITIALIZED
        assert init.is_initialized is False
        assert init.config is None

    def test_initialize_sets_identity_owner_allowlist(self, parts):
        access, allowlist, init = parts

        result = init.initialize(DEPLOYER)

        assert result.transition_occurred
        assert result.previous_state == InitState.UNINITIALIZED
        assert result.new_state == InitState.INITIALIZED
        assert init.config == TokenConfig()
        assert access.owner == DEPLOYER
        assert allowlist.is_allowed(DEPLOYER) is True

    def test_initialize_events_order(self, parts):
        _, _, init = parts

        result = init.initialize(DEPLOYER)

        assert result.events == (
            OwnershipTransferred(previous_owner=ZERO_ADDRESS, new_owner=DEPLOYER),
            AllowedTransferAddressAdded(address=DEPLOYER),
            Initialized(version=1),
        )

    def test_custom_config(self, parts):
        _, _, init = parts
        cfg = TokenConfig(name="POINTS", symbol="PTS", decimals=0)

        init.initialize(DEPLOYER, cfg)

        assert init.config is cfg

    @pytest.mark.parametrize("caller", [DEPLOYER, OTHER])
    def test_second_initialize_rejected_for_any_caller(self, parts, caller):
        access, _, init = parts
        init.initialize(DEPLOYER)

        with pytest.raises(AlreadyInitialized):
            init.initialize(caller, TokenConfig(name="X", symbol="Y"))

        assert access.owner == DEPLOYER
        assert init.config == TokenConfig()

    def test_zero_caller_rejected_state_unchanged(self, parts):
        access, _, init = parts

        with pytest.raises(InvalidAddress):
            init.initialize(ZERO_ADDRESS)

        assert init.state == InitState.UNINITIALIZED
        assert access.owner == ZERO_ADDRESS

    def test_disable_blocks_initialize(self, parts):
        _, _, init = parts

        result = init.disable()
        assert result.new_state == InitState.DISABLED
        assert result.transition_reason == "disable"

        with pytest.raises(AlreadyInitialized):
            init.initialize(DEPLOYER)

    def test_disable_twice_is_noop(self, parts):
        _, _, init = parts
        init.disable()

        result = init.disable()

        assert result.transition_occurred is False
        assert result.transition_reason == "already_disabled"

    def test_disable_after_initialize_rejected(self, parts):
        _, _, init = parts
        init.initialize(DEPLOYER)

        with pytest.raises(AlreadyInitialized):
            init.disable()
        assert init.state == InitState.INITIALIZED

    def test_reentrant_initialize_rejected(self, parts):
        access, allowlist, init = parts
        reentrant_errors = []
        original = allowlist.add_initial_member

        def hook(address):
            try:
                init.initialize(OTHER)
            except AlreadyInitialized as exc:
                reentrant_errors.append(exc)
            return original(address)

        allowlist.add_initial_member = hook

        init.initialize(DEPLOYER)

        assert len(reentrant_errors) == 1
        assert access.owner == DEPLOYER
        assert init.state == InitState.INITIALIZED

    @pytest.mark.parametrize("caller", [DEPLOYER + "\n", DEPLOYER + " ", "0x" + "d" * 39])
    def test_malformed_caller_leaves_instance_initializable(self, parts, caller):
        access, allowlist, init = parts

        with pytest.raises(InvalidAddress):
            init.initialize(caller)

        assert init.state == InitState.UNINITIALIZED
        assert access.owner == ZERO_ADDRESS
        assert allowlist.members() == ()

        init.initialize(DEPLOYER)
        assert init.state == InitState.INITIALIZED
        assert access.owner == DEPLOYER

    def test_failure_midway_rolls_back_owner(self, parts):
        access, allowlist, init = parts

        def broken(address):
            raise RuntimeError("allowlist unavailable")

        allowlist.add_initial_member = broken

        with pytest.raises(RuntimeError):
            init.initialize(DEPLOYER)

        assert access.owner == ZERO_ADDRESS
        assert init.state == InitState.UNINITIALIZED
        assert init.config is None

        del allowlist.add_initial_member
        init.initialize(DEPLOYER)
        assert access.owner == DEPLOYER
