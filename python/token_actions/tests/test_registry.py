"""Tests for the action registry and its administrative operations."""

import copy
import dataclasses

import pytest

from token_actions.errors import ActionError, ActionErrorCode
from token_actions.registry import Registry, RegistryStore
from token_actions.svm.utils import derive_registry_address
from token_actions.types import ActionPolicy

from .helpers import AUTHORITY, FEE_WALLET, MINT, OTHER_MINT, PLATFORM_WALLET, default_actions

INTRUDER = "intruder-wallet"


class TestRegistryCreate:
    """Tests for Registry.create."""

    def test_records_authority_and_collectors(self, registry):
        assert registry.authority == AUTHORITY
        assert registry.fee_collector == FEE_WALLET
        assert registry.platform_collector == PLATFORM_WALLET
        assert registry.asset == MINT
        assert registry.action_names() == ["boost", "tip", "buy_song", "upgrade"]

    def test_address_is_derived_from_namespace(self, registry):
        address, bump = derive_registry_address()
        assert registry.address == address
        assert registry.bump == bump

    def test_same_namespace_same_address(self):
        a = Registry.create("a", FEE_WALLET, PLATFORM_WALLET, MINT, [])
        b = Registry.create("b", FEE_WALLET, PLATFORM_WALLET, MINT, [])
        assert a.address == b.address

    def test_invalid_fee_percent(self):
        actions = [ActionPolicy("boost", price=1000, fee_percent=101)]
        with pytest.raises(ActionError) as exc:
            Registry.create(AUTHORITY, FEE_WALLET, PLATFORM_WALLET, MINT, actions)
        assert exc.value.code == ActionErrorCode.INVALID_FEE_PERCENT

    def test_empty_name(self):
        actions = [ActionPolicy("", price=1000, fee_percent=10)]
        with pytest.raises(ActionError) as exc:
            Registry.create(AUTHORITY, FEE_WALLET, PLATFORM_WALLET, MINT, actions)
        assert exc.value.code == ActionErrorCode.INVALID_ACTION

    def test_duplicate_names_accepted(self):
        """Creation does not check uniqueness; only add_action does."""
        actions = [
            ActionPolicy("tip", price=0, fee_percent=5, is_variable=True),
            ActionPolicy("tip", price=10, fee_percent=1),
        ]
        registry = Registry.create(AUTHORITY, FEE_WALLET, PLATFORM_WALLET, MINT, actions)
        assert registry.action_names() == ["tip", "tip"]
        # Lookups resolve to the first entry
        assert registry.find_action("tip").fee_percent == 5

    def test_actions_list_is_copied(self):
        actions = default_actions()
        registry = Registry.create(AUTHORITY, FEE_WALLET, PLATFORM_WALLET, MINT, actions)
        actions.clear()
        assert len(registry.actions) == 4

    def test_policies_cannot_be_changed_after_create(self):
        actions = default_actions()
        registry = Registry.create(AUTHORITY, FEE_WALLET, PLATFORM_WALLET, MINT, actions)
        with pytest.raises(dataclasses.FrozenInstanceError):
            actions[0].fee_percent = 150
        with pytest.raises(dataclasses.FrozenInstanceError):
            registry.actions[1].name = ""
        assert registry.find_action("boost").fee_percent == 10
        assert registry.action_names() == ["boost", "tip", "buy_song", "upgrade"]


class TestRegistryStore:
    """Tests for one-registry-per-namespace storage."""

    def test_init_and_get(self):
        store = RegistryStore()
        registry = store.init_config(AUTHORITY, FEE_WALLET, PLATFORM_WALLET, MINT, [])
        assert registry.address in store
        assert store.get(registry.address) is registry

    def test_second_init_rejected(self):
        store = RegistryStore()
        store.init_config(AUTHORITY, FEE_WALLET, PLATFORM_WALLET, MINT, [])
        with pytest.raises(ActionError) as exc:
            store.init_config(INTRUDER, FEE_WALLET, PLATFORM_WALLET, MINT, [])
        assert exc.value.code == ActionErrorCode.ALREADY_INITIALIZED

    def test_get_unknown(self):
        with pytest.raises(ActionError) as exc:
            RegistryStore().get("missing")
        assert exc.value.code == ActionErrorCode.REGISTRY_NOT_FOUND


class TestRegistryReplace:
    """Tests for full replacement."""

    def test_replaces_everything_but_authority(self, registry):
        new_actions = [ActionPolicy("gift", price=5, fee_percent=20)]
        registry.replace(AUTHORITY, "new-fee", "new-platform", OTHER_MINT, new_actions)

        assert registry.authority == AUTHORITY
        assert registry.fee_collector == "new-fee"
        assert registry.platform_collector == "new-platform"
        assert registry.asset == OTHER_MINT
        assert registry.action_names() == ["gift"]

    def test_unauthorized(self, registry):
        before = copy.deepcopy(registry)
        with pytest.raises(ActionError, match="Unauthorized") as exc:
            registry.replace(INTRUDER, "x", "y", OTHER_MINT, [])
        assert exc.value.code == ActionErrorCode.UNAUTHORIZED
        assert registry == before

    def test_invalid_fee_leaves_registry_unchanged(self, registry):
        before = copy.deepcopy(registry)
        bad = [
            ActionPolicy("ok", price=1, fee_percent=1),
            ActionPolicy("bad", price=1, fee_percent=101),
        ]
        with pytest.raises(ActionError) as exc:
            registry.replace(AUTHORITY, "x", "y", OTHER_MINT, bad)
        assert exc.value.code == ActionErrorCode.INVALID_FEE_PERCENT
        assert registry == before

    def test_empty_name_leaves_registry_unchanged(self, registry):
        before = copy.deepcopy(registry)
        bad = [
            ActionPolicy("ok", price=1, fee_percent=1),
            ActionPolicy("", price=1, fee_percent=1),
        ]
        with pytest.raises(ActionError) as exc:
            registry.replace(AUTHORITY, "x", "y", OTHER_MINT, bad)
        assert exc.value.code == ActionErrorCode.INVALID_ACTION
        assert registry == before


class TestAddAction:
    """Tests for add_action."""

    def test_appends(self, registry):
        registry.add_action(AUTHORITY, ActionPolicy("gift", price=5, fee_percent=20))
        assert registry.action_names()[-1] == "gift"

    def test_duplicate_name_rejected(self, registry):
        with pytest.raises(ActionError) as exc:
            registry.add_action(AUTHORITY, ActionPolicy("tip", price=1, fee_percent=1))
        assert exc.value.code == ActionErrorCode.INVALID_ACTION
        assert registry.action_names().count("tip") == 1

    def test_invalid_fee_percent(self, registry):
        with pytest.raises(ActionError) as exc:
            registry.add_action(AUTHORITY, ActionPolicy("gift", price=5, fee_percent=101))
        assert exc.value.code == ActionErrorCode.INVALID_FEE_PERCENT
        assert "gift" not in registry.action_names()

    def test_empty_name(self, registry):
        with pytest.raises(ActionError) as exc:
            registry.add_action(AUTHORITY, ActionPolicy("", price=5, fee_percent=1))
        assert exc.value.code == ActionErrorCode.INVALID_ACTION

    def test_unauthorized(self, registry):
        with pytest.raises(ActionError) as exc:
            registry.add_action(INTRUDER, ActionPolicy("gift", price=5, fee_percent=1))
        assert exc.value.code == ActionErrorCode.UNAUTHORIZED
        assert "gift" not in registry.action_names()

    def test_added_policy_cannot_be_changed(self, registry):
        gift = ActionPolicy("gift", price=5, fee_percent=20)
        registry.add_action(AUTHORITY, gift)
        with pytest.raises(dataclasses.FrozenInstanceError):
            gift.fee_percent = 150
        with pytest.raises(dataclasses.FrozenInstanceError):
            gift.name = "tip"
        assert registry.find_action("gift").fee_percent == 20
        assert registry.action_names().count("tip") == 1


class TestUpdateAction:
    """Tests for update_action's upsert behavior."""

    def test_replaces_in_place(self, registry):
        registry.update_action(AUTHORITY, "tip", ActionPolicy("tip", price=0, fee_percent=7))
        assert registry.action_names() == ["boost", "tip", "buy_song", "upgrade"]
        assert registry.actions[1].fee_percent == 7

    def test_rename_keeps_position(self, registry):
        registry.update_action(AUTHORITY, "tip", ActionPolicy("donate", price=0, fee_percent=5))
        assert registry.action_names() == ["boost", "donate", "buy_song", "upgrade"]

    def test_absent_name_appends(self, registry):
        registry.update_action(AUTHORITY, "missing", ActionPolicy("gift", price=5, fee_percent=3))
        assert registry.action_names() == ["boost", "tip", "buy_song", "upgrade", "gift"]

    def test_invalid_fee_leaves_registry_unchanged(self, registry):
        before = copy.deepcopy(registry)
        with pytest.raises(ActionError) as exc:
            registry.update_action(AUTHORITY, "tip", ActionPolicy("tip", price=0, fee_percent=200))
        assert exc.value.code == ActionErrorCode.INVALID_FEE_PERCENT
        assert registry == before

    def test_empty_target_name(self, registry):
        with pytest.raises(ActionError) as exc:
            registry.update_action(AUTHORITY, "", ActionPolicy("tip", price=0, fee_percent=5))
        assert exc.value.code == ActionErrorCode.INVALID_ACTION

    def test_unauthorized(self, registry):
        before = copy.deepcopy(registry)
        with pytest.raises(ActionError) as exc:
            registry.update_action(INTRUDER, "tip", ActionPolicy("tip", price=0, fee_percent=50))
        assert exc.value.code == ActionErrorCode.UNAUTHORIZED
        assert registry == before


class TestRemoveAction:
    """Tests for remove_action."""

    def test_removes_one_and_keeps_order(self, registry):
        registry.remove_action(AUTHORITY, "tip")
        assert registry.action_names() == ["boost", "buy_song", "upgrade"]

    def test_absent_name_fails_without_mutation(self, registry):
        before = copy.deepcopy(registry)
        with pytest.raises(ActionError) as exc:
            registry.remove_action(AUTHORITY, "missing")
        assert exc.value.code == ActionErrorCode.INVALID_ACTION
        assert registry == before

    def test_removes_only_first_duplicate(self):
        actions = [
            ActionPolicy("tip", price=0, fee_percent=5),
            ActionPolicy("tip", price=0, fee_percent=6),
        ]
        registry = Registry.create(AUTHORITY, FEE_WALLET, PLATFORM_WALLET, MINT, actions)
        registry.remove_action(AUTHORITY, "tip")
        assert len(registry.actions) == 1
        assert registry.actions[0].fee_percent == 6

    def test_empty_name(self, registry):
        with pytest.raises(ActionError) as exc:
            registry.remove_action(AUTHORITY, "")
        assert exc.value.code == ActionErrorCode.INVALID_ACTION

    def test_unauthorized(self, registry):
        with pytest.raises(ActionError) as exc:
            registry.remove_action(INTRUDER, "tip")
        assert exc.value.code == ActionErrorCode.UNAUTHORIZED
        assert "tip" in registry.action_names()


class TestFindAction:
    def test_missing(self, registry):
        with pytest.raises(ActionError) as exc:
            registry.find_action("missing")
        assert exc.value.code == ActionErrorCode.INVALID_ACTION

    def test_to_dict(self, registry):
        d = registry.to_dict()
        assert d["authority"] == AUTHORITY
        assert d["actions"][0]["name"] == "boost"
