"""Action dispatcher.

Resolves a named action against a registry, splits the amount into net
and fee portions and issues the transfers to the ledger:

    resolve -> validate -> split -> transfer(net) -> transfer(fee, if > 0) -> emit

Rollback of an already-issued transfer is the ledger's concern; the
dispatcher runs both transfers inside ``ledger.atomic()`` and stops at the
first failure.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from .errors import ActionError, ActionErrorCode, TransferError
from .ledger import TransferLedger
from .registry import Registry
from .split import calculate_fee_split
from .types import ActionPolicy, TransferRecord

logger = logging.getLogger(__name__)

EventCallback = Callable[[TransferRecord], None]


@dataclass
class DispatcherConfig:
    """Configuration for ActionDispatcher.

    Attributes:
        event_callbacks: Called with each TransferRecord after a successful
            dispatch. Exceptions they raise are logged and ignored.
    """

    event_callbacks: list[EventCallback] = field(default_factory=list)


class ActionDispatcher:
    """Dispatches platform and user actions to a ledger."""

    def __init__(self, ledger: TransferLedger, config: DispatcherConfig | None = None):
        self._ledger = ledger
        config = config or DispatcherConfig()
        # Own copy; callbacks added later do not leak into the caller's config
        self._callbacks = list(config.event_callbacks)

    def add_event_callback(self, callback: EventCallback) -> None:
        self._callbacks.append(callback)

    def platform_dispatch(
        self,
        registry: Registry,
        action_name: str,
        asset: str,
        payer: str,
        platform_collector_account: str,
        fee_collector_account: str,
        authority: str,
    ) -> TransferRecord:
        """Charge a platform action's fixed price.

        The net amount goes to the platform collector account and the fee to
        the fee collector account, both taken from ``payer``.

        Args:
            registry: Registry holding the action.
            action_name: Name of a platform action.
            asset: Mint presented by the caller; must match the registry.
            payer: Payer token account.
            platform_collector_account: Receives the net amount.
            fee_collector_account: Receives the fee.
            authority: Identity authorizing transfers out of ``payer``.

        Returns:
            The emitted TransferRecord.

        Raises:
            ActionError: WRONG_ASSET_TYPE, INVALID_ACTION,
                INVALID_PLATFORM_ACTION or INCORRECT_AMOUNT.
            TransferError: Propagated unchanged from the ledger.
        """
        policy = self._resolve(registry, action_name, asset)
        if not policy.is_platform_action:
            raise ActionError(ActionErrorCode.INVALID_PLATFORM_ACTION, action_name)

        # Platform actions always charge the fixed price
        return self._transfer_with_fee(
            policy,
            policy.price,
            asset,
            payer,
            platform_collector_account,
            fee_collector_account,
            authority,
        )

    def user_dispatch(
        self,
        registry: Registry,
        action_name: str,
        asset: str,
        requested_amount: int,
        payer: str,
        receiver_account: str,
        fee_collector_account: str,
        authority: str,
    ) -> TransferRecord:
        """Pay another user through a user action.

        ``requested_amount`` is used only when the policy is variable;
        otherwise the policy's fixed price is charged.

        Raises:
            ActionError: WRONG_ASSET_TYPE, INVALID_ACTION,
                INVALID_USER_ACTION or INCORRECT_AMOUNT.
            TransferError: Propagated unchanged from the ledger.
        """
        policy = self._resolve(registry, action_name, asset)
        if policy.is_platform_action:
            raise ActionError(ActionErrorCode.INVALID_USER_ACTION, action_name)

        amount = requested_amount if policy.is_variable else policy.price
        return self._transfer_with_fee(
            policy,
            amount,
            asset,
            payer,
            receiver_account,
            fee_collector_account,
            authority,
        )

    def _resolve(self, registry: Registry, action_name: str, asset: str) -> ActionPolicy:
        if asset != registry.asset:
            logger.warning(
                "Rejected %r: asset %s is not registry asset %s",
                action_name,
                asset,
                registry.asset,
            )
            raise ActionError(ActionErrorCode.WRONG_ASSET_TYPE, asset)
        return registry.find_action(action_name)

    def _transfer_with_fee(
        self,
        policy: ActionPolicy,
        amount: int,
        asset: str,
        payer: str,
        destination: str,
        fee_collector_account: str,
        authority: str,
    ) -> TransferRecord:
        split = calculate_fee_split(amount, policy.fee_percent)
        decimals = self._ledger.get_decimals(asset)

        try:
            with self._ledger.atomic():
                self._ledger.transfer_checked(
                    payer, destination, authority, asset, split.net, decimals
                )
                if split.fee > 0:
                    self._ledger.transfer_checked(
                        payer, fee_collector_account, authority, asset, split.fee, decimals
                    )
        except TransferError as e:
            logger.warning("Transfer failed for %r: %s (%s)", policy.name, e, e.reason)
            raise

        record = TransferRecord(
            action=policy.name,
            amount=amount,
            fee_percent=policy.fee_percent,
            source=payer,
            destination=destination,
            net_amount=split.net,
            fee_amount=split.fee,
        )
        logger.info(
            "Dispatched %r: %d from %s (net %d to %s, fee %d)",
            policy.name,
            amount,
            payer,
            split.net,
            destination,
            split.fee,
        )
        self._emit(record)
        return record

    def _emit(self, record: TransferRecord) -> None:
        for callback in self._callbacks:
            try:
                callback(record)
            except Exception:
                logger.exception("Event callback failed for action %r", record.action)
