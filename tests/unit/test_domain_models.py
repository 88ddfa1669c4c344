"""
Tests for Domain Models

Покрывает:
- Address нормализация и валидация
- TokenConfig defaults и constraints
- Event модели (порядок args, alias "from", immutability)
- TokenSnapshot (инвариант сохранения supply)
"""

import pytest
from pydantic import ValidationError

from nspoints.core.domain import (
    ZERO_ADDRESS,
    AllowanceEntry,
    AllowedTransferAddressAdded,
    AllowedTransferAddressRemoved,
    Approval,
    DEFAULT_DECIMALS,
    Initialized,
    InitState,
    OwnershipTransferred,
    TokenConfig,
    TokenSnapshot,
    Transfer,
    is_address,
    is_zero_address,
    require_nonzero_address,
    to_address,
)
from nspoints.core.errors import InvalidAddress


ALICE = "0x" + "a" * 40
BOB = "0x" + "b" * 40
MIXED_CASE = "0xAbCdEf0000000000000000000000000000000001"


# =============================================================================
# ADDRESS
# =============================================================================


def test_to_address_normalizes_case():
    assert to_address(MIXED_CASE) == MIXED_CASE.lower()


@pytest.mark.parametrize(
    "value",
    ["", "0x", "0x123", "a" * 42, "0x" + "g" * 40, "0x" + "a" * 41, "0x" + "a" * 40 + "\n",
     " 0x" + "a" * 40, None, 123],
)
def test_invalid_address_rejected(value):
    assert is_address(value) is False
    with pytest.raises(InvalidAddress):
        to_address(value)


def test_zero_address_helpers():
    assert is_zero_address(ZERO_ADDRESS) is True
    assert is_zero_address(ALICE) is False
    with pytest.raises(InvalidAddress):
        require_nonzero_address(ZERO_ADDRESS)
    assert require_nonzero_address(ALICE.upper().replace("0X", "0x")) == ALICE


# =============================================================================
# TOKEN CONFIG
# =============================================================================


def test_token_config_defaults():
    cfg = TokenConfig()
    assert cfg.name == "NSDEVPOINTS"
    assert cfg.symbol == "NSDEV"
    assert cfg.decimals == DEFAULT_DECIMALS == 18


def test_token_config_rejects_empty_name():
    with pytest.raises(ValidationError):
        TokenConfig(name="")


def test_token_config_rejects_out_of_range_decimals():
    with pytest.raises(ValidationError):
        TokenConfig(decimals=256)


def test_token_config_is_frozen():
    cfg = TokenConfig()
    with pytest.raises(ValidationError):
        cfg.name = "OTHER"


# =============================================================================
# EVENTS
# =============================================================================


def test_transfer_args_in_declared_order():
    event = Transfer(from_=ALICE, to=BOB, value=100)
    assert event.args() == (ALICE, BOB, 100)
    assert event.event_name == "Transfer"


def test_transfer_accepts_from_alias():
    event = Transfer.model_validate({"from": ALICE, "to": BOB, "value": 1})
    assert event.from_ == ALICE


def test_transfer_contract_uses_abi_field_names():
    contract = Transfer(from_=ZERO_ADDRESS, to=BOB, value=5).to_contract()
    assert contract == {
        "event": "Transfer",
        "args": {"from": ZERO_ADDRESS, "to": BOB, "value": 5},
    }


def test_approval_args():
    assert Approval(owner=ALICE, spender=BOB, value=7).args() == (ALICE, BOB, 7)


def test_allowlist_events_carry_single_address():
    assert AllowedTransferAddressAdded(address=ALICE).args() == (ALICE,)
    assert AllowedTransferAddressRemoved(address=BOB).args() == (BOB,)


def test_ownership_and_initialized_events():
    event = OwnershipTransferred(previous_owner=ZERO_ADDRESS, new_owner=ALICE)
    assert event.args() == (ZERO_ADDRESS, ALICE)
    assert Initialized(version=1).args() == (1,)


def test_event_rejects_negative_value():
    with pytest.raises(ValidationError):
        Transfer(from_=ALICE, to=BOB, value=-1)


def test_event_rejects_non_normalized_address():
    with pytest.raises(ValidationError):
        AllowedTransferAddressAdded(address=MIXED_CASE)


def test_event_is_frozen():
    event = Transfer(from_=ALICE, to=BOB, value=1)
    with pytest.raises(ValidationError):
        event.value = 2


# =============================================================================
# SNAPSHOT
# =============================================================================


def _snapshot(**overrides):
    data = {
        "name": "NSDEVPOINTS",
        "symbol": "NSDEV",
        "decimals": 18,
        "owner": ALICE,
        "init_state": InitState.INITIALIZED,
        "total_supply": 1000,
        "balances": {ALICE: 900, BOB: 100},
        "allowances": [AllowanceEntry(owner=ALICE, spender=BOB, amount=50)],
        "allowlist": [ALICE],
    }
    data.update(overrides)
    return TokenSnapshot(**data)


def test_snapshot_valid():
    snap = _snapshot()
    assert snap.schema_version == "1"
    assert snap.init_state == InitState.INITIALIZED


def test_snapshot_rejects_broken_conservation():
    with pytest.raises(ValidationError, match="total_supply"):
        _snapshot(total_supply=999)


def test_snapshot_json_roundtrip():
    snap = _snapshot()
    restored = TokenSnapshot.model_validate_json(snap.model_dump_json())
    assert restored == snap
