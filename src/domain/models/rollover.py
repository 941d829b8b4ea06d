"""Rollover policies deciding where a category's leftover money goes."""

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar

from src.domain.constants import (
    ROLLOVER_TYPE_CONDITIONAL,
    ROLLOVER_TYPE_ROLLOVER,
    ROLLOVER_TYPE_TRANSFER,
)
from src.domain.errors import ConfigError
from src.utils.decimal_utils import coerce_decimal


@dataclass(frozen=True)
class RolloverToSelf:
    """Leftover stays with the same category."""

    type: ClassVar[str] = ROLLOVER_TYPE_ROLLOVER


@dataclass(frozen=True)
class TransferRollover:
    """All leftover moves to another category.

    Attributes:
        target_category_id: Category receiving the whole net amount.
    """

    target_category_id: str

    type: ClassVar[str] = ROLLOVER_TYPE_TRANSFER


@dataclass(frozen=True)
class ConditionalRollover:
    """Up to a cap stays with the category, the remainder moves.

    Attributes:
        target_category_id: Category receiving the amount above the cap.
        max_rollover_amount: Largest amount kept by the category.
    """

    target_category_id: str
    max_rollover_amount: Decimal

    type: ClassVar[str] = ROLLOVER_TYPE_CONDITIONAL


RolloverConfig = RolloverToSelf | TransferRollover | ConditionalRollover


@dataclass(frozen=True)
class RolloverForNextMonth:
    """Money directed to a category for the following month."""

    category_id: str
    amount: Decimal

    def to_dict(self) -> dict:
        """Return a plain dict representation."""
        return {"category_id": self.category_id, "amount": self.amount}


def rollover_config_from_record(
    rollover_type: str | None,
    target_category_id: str | None = None,
    max_rollover_amount=None,
) -> RolloverConfig | None:
    """Build a rollover policy from stored column values.

    Args:
        rollover_type: Stored policy tag, or None for the default policy.
        target_category_id: Destination category for transfer policies.
        max_rollover_amount: Cap kept by the category (conditional only).

    Returns:
        RolloverConfig | None: Matching policy, None when no tag is stored.

    Raises:
        ConfigError: If the tag is unknown or required values are missing.
    """
    if rollover_type is None:
        return None
    if rollover_type == ROLLOVER_TYPE_ROLLOVER:
        return RolloverToSelf()
    if not target_category_id:
        raise ConfigError(
            f"Rollover policy '{rollover_type}' requires a target category"
        )
    if rollover_type == ROLLOVER_TYPE_TRANSFER:
        return TransferRollover(target_category_id=target_category_id)
    if rollover_type == ROLLOVER_TYPE_CONDITIONAL:
        if max_rollover_amount is None:
            raise ConfigError(
                "Conditional rollover requires a max rollover amount"
            )
        return ConditionalRollover(
            target_category_id=target_category_id,
            max_rollover_amount=coerce_decimal(max_rollover_amount),
        )
    raise ConfigError(f"Unknown rollover policy: {rollover_type}")


__all__ = [
    "RolloverToSelf",
    "TransferRollover",
    "ConditionalRollover",
    "RolloverConfig",
    "RolloverForNextMonth",
    "rollover_config_from_record",
]
