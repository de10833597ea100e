"""Action registry.

The registry is the single configuration record of a deployment: who may
change it, where fees and platform revenue go, which asset it accepts and
the ordered list of named action policies. Every mutation is gated on the
stored authority and validates its input before touching any state.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from .constants import DEFAULT_PROGRAM_ID
from .errors import ActionError, ActionErrorCode
from .svm.utils import derive_registry_address
from .types import ActionPolicy

logger = logging.getLogger(__name__)


def validate_actions(actions: list[ActionPolicy]) -> None:
    """Validate fee and name of every action, in order.

    Duplicate names are not rejected here; only ``add_action`` checks them.
    """
    for action in actions:
        action.validate()


@dataclass
class Registry:
    """Configuration record holding the named action policies.

    Attributes:
        address: Deterministic registry address.
        authority: Identity allowed to mutate the registry.
        fee_collector: Destination of skimmed fees.
        platform_collector: Destination of platform action proceeds.
        asset: Token mint every dispatch must use.
        actions: Ordered action policies.
        bump: PDA bump seed for the address.
    """

    address: str
    authority: str
    fee_collector: str
    platform_collector: str
    asset: str
    actions: list[ActionPolicy] = field(default_factory=list)
    bump: int = 0

    @classmethod
    def create(
        cls,
        authority: str,
        fee_collector: str,
        platform_collector: str,
        asset: str,
        actions: list[ActionPolicy],
        program_id: str = DEFAULT_PROGRAM_ID,
    ) -> "Registry":
        """Create a registry owned by ``authority``.

        Raises:
            ActionError: INVALID_FEE_PERCENT or INVALID_ACTION.
        """
        validate_actions(actions)
        address, bump = derive_registry_address(program_id)
        return cls(
            address=address,
            authority=authority,
            fee_collector=fee_collector,
            platform_collector=platform_collector,
            asset=asset,
            actions=list(actions),
            bump=bump,
        )

    def _require_authority(self, caller: str) -> None:
        if caller != self.authority:
            logger.warning("Rejected registry change from %s on %s", caller, self.address)
            raise ActionError(ActionErrorCode.UNAUTHORIZED)

    def replace(
        self,
        caller: str,
        fee_collector: str,
        platform_collector: str,
        asset: str,
        actions: list[ActionPolicy],
    ) -> None:
        """Overwrite everything except the authority."""
        validate_actions(actions)
        self._require_authority(caller)

        self.fee_collector = fee_collector
        self.platform_collector = platform_collector
        self.asset = asset
        self.actions = list(actions)
        logger.info("Registry %s replaced with %d actions", self.address, len(self.actions))

    def add_action(self, caller: str, action: ActionPolicy) -> None:
        """Append a new action; its name must not already be registered."""
        action.validate()
        self._require_authority(caller)

        if any(existing.name == action.name for existing in self.actions):
            raise ActionError(ActionErrorCode.INVALID_ACTION, f"duplicate name {action.name!r}")

        self.actions.append(action)
        logger.info("Added action %r to registry %s", action.name, self.address)

    def update_action(self, caller: str, name: str, action: ActionPolicy) -> None:
        """Replace the action called ``name`` in place, or append if absent.

        ``action`` may carry a different name, which renames the entry.
        """
        action.validate()
        if not name:
            raise ActionError(ActionErrorCode.INVALID_ACTION, "name cannot be empty")
        self._require_authority(caller)

        index = self._index_of(name)
        if index is None:
            self.actions.append(action)
            logger.info("Action %r not found, appended as %r", name, action.name)
        else:
            self.actions[index] = action
            logger.info("Updated action %r in registry %s", name, self.address)

    def remove_action(self, caller: str, name: str) -> None:
        """Remove the first action called ``name``."""
        if not name:
            raise ActionError(ActionErrorCode.INVALID_ACTION, "name cannot be empty")
        self._require_authority(caller)

        index = self._index_of(name)
        if index is None:
            raise ActionError(ActionErrorCode.INVALID_ACTION, f"no action named {name!r}")

        del self.actions[index]
        logger.info("Removed action %r from registry %s", name, self.address)

    def find_action(self, name: str) -> ActionPolicy:
        index = self._index_of(name)
        if index is None:
            raise ActionError(ActionErrorCode.INVALID_ACTION, f"no action named {name!r}")
        return self.actions[index]

    def action_names(self) -> list[str]:
        return [action.name for action in self.actions]

    def _index_of(self, name: str) -> int | None:
        for i, action in enumerate(self.actions):
            if action.name == name:
                return i
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "address": self.address,
            "authority": self.authority,
            "feeCollector": self.fee_collector,
            "platformCollector": self.platform_collector,
            "asset": self.asset,
            "actions": [action.to_dict() for action in self.actions],
        }


class RegistryStore:
    """Keeps registries by address, one per program namespace."""

    def __init__(self):
        self._registries: dict[str, Registry] = {}

    def init_config(
        self,
        authority: str,
        fee_collector: str,
        platform_collector: str,
        asset: str,
        actions: list[ActionPolicy],
        program_id: str = DEFAULT_PROGRAM_ID,
    ) -> Registry:
        """Create and store a registry.

        Raises:
            ActionError: ALREADY_INITIALIZED if the namespace already has one,
                or any validation error from ``Registry.create``.
        """
        registry = Registry.create(
            authority, fee_collector, platform_collector, asset, actions, program_id
        )
        if registry.address in self._registries:
            raise ActionError(ActionErrorCode.ALREADY_INITIALIZED, registry.address)

        self._registries[registry.address] = registry
        logger.info("Initialized registry %s for authority %s", registry.address, authority)
        return registry

    def get(self, address: str) -> Registry:
        try:
            return self._registries[address]
        except KeyError:
            raise ActionError(ActionErrorCode.REGISTRY_NOT_FOUND, address) from None

    def __contains__(self, address: str) -> bool:
        return address in self._registries
