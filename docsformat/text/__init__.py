"""Text formatting helpers for documentation titles and labels."""

from .formatters import ELLIPSIS, capitalize_first, to_kebab_case, truncate

__all__ = ["ELLIPSIS", "capitalize_first", "to_kebab_case", "truncate"]
