"""Domain service: Shipment Processor.

Broadcasts a state transition over shipments and their items.  The
optional ``state_from`` is a pure filter: entities in another state are
left alone, not queued or retried.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from stockkeeper.domain.exceptions import InvalidArgumentError, UnexpectedTypeError
from stockkeeper.domain.model.shipment import Shipment, ShipmentItem, ShipmentState

logger = logging.getLogger(__name__)


class ShipmentProcessor:

    def update_shipment_states(
        self,
        shipments: Sequence[Shipment],
        state_to: ShipmentState | str,
        state_from: ShipmentState | str | None = None,
    ) -> None:
        """Move matching shipments, and their matching items, to ``state_to``.

        Every element is type-checked before any state changes, so a bad
        element aborts the whole batch untouched.
        """
        _check_sequence(shipments, "Shipments")
        for shipment in shipments:
            if not isinstance(shipment, Shipment):
                raise UnexpectedTypeError(shipment, Shipment)
        target, guard = _parse_states(state_to, state_from)

        for shipment in shipments:
            if guard is None or guard == shipment.state:
                logger.debug(
                    "Shipment %s: %s -> %s", shipment.id, shipment.state.value, target.value
                )
                shipment.state = target
                self.update_item_states(shipment.items, target, guard)

    def update_item_states(
        self,
        items: Sequence[ShipmentItem],
        state_to: ShipmentState | str,
        state_from: ShipmentState | str | None = None,
    ) -> None:
        """Move items currently in ``state_from`` (or all items) to ``state_to``."""
        _check_sequence(items, "Shipment items")
        for item in items:
            if not isinstance(item, ShipmentItem):
                raise UnexpectedTypeError(item, ShipmentItem)
        target, guard = _parse_states(state_to, state_from)

        for item in items:
            if guard is None or guard == item.shipping_state:
                item.shipping_state = target


def _check_sequence(value: object, label: str) -> None:
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes)):
        raise InvalidArgumentError(
            f"{label} value must be a sequence, got {type(value).__name__}"
        )


def _parse_states(
    state_to: ShipmentState | str,
    state_from: ShipmentState | str | None,
) -> tuple[ShipmentState, ShipmentState | None]:
    target = ShipmentState.parse(state_to)
    guard = None if state_from is None else ShipmentState.parse(state_from)
    return target, guard
