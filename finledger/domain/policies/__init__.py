"""Domain policies package."""

from .visibility import is_visible, visible_only

__all__ = ["is_visible", "visible_only"]
