"""Domain constants for budget computations."""

ROLLOVER_TYPE_ROLLOVER = "rollover"
ROLLOVER_TYPE_TRANSFER = "transfer"
ROLLOVER_TYPE_CONDITIONAL = "conditional"

ROLLOVER_TYPES = (
    ROLLOVER_TYPE_ROLLOVER,
    ROLLOVER_TYPE_TRANSFER,
    ROLLOVER_TYPE_CONDITIONAL,
)

SPLIT_ID_SEPARATOR = ":"


__all__ = [
    "ROLLOVER_TYPE_ROLLOVER",
    "ROLLOVER_TYPE_TRANSFER",
    "ROLLOVER_TYPE_CONDITIONAL",
    "ROLLOVER_TYPES",
    "SPLIT_ID_SEPARATOR",
]
