"""Utility helpers."""

from brand_weaver.utils.fallback import first_present, first_text, get_path, is_present

__all__ = ["first_present", "first_text", "get_path", "is_present"]
