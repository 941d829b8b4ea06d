"""Domain policies package."""

from .category_activity import is_category_active_for_month

__all__ = ["is_category_active_for_month"]
