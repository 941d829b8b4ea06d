"""Domain exceptions raised by the budget engine."""


class BudgetError(Exception):
    """Base class for budget engine failures."""


class ValidationError(BudgetError):
    """Input records do not belong to the category or month they claim."""


class StateError(BudgetError):
    """An active category has no resolvable budget for its month."""


class ConfigError(BudgetError):
    """A rollover policy is unknown or incomplete."""


class MissingDataError(BudgetError):
    """Required source data is absent, e.g. no income records."""


__all__ = [
    "BudgetError",
    "ValidationError",
    "StateError",
    "ConfigError",
    "MissingDataError",
]
