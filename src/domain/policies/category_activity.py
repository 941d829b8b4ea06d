"""Policy deciding whether a category takes part in a month."""

from src.domain.models.budget import Category


def is_category_active_for_month(category: Category, month: str) -> bool:
    """Return True when the category is active for the month.

    Args:
        category: Category to check.
        month: Month key ("YYYY-MM").

    Returns:
        bool: True when start_month <= month <= end_month (open-ended end).
    """
    if category.start_month > month:
        return False
    return category.end_month is None or category.end_month >= month


__all__ = ["is_category_active_for_month"]
