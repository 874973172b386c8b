"""Top-level package for docsformat.

Pure text formatters used by documentation-site templates: capitalize the
first character of a title, derive kebab-case slugs, and truncate labels to a
fixed display width.
"""

from .errors import FormatterInputError
from .text.formatters import capitalize_first, to_kebab_case, truncate

__all__ = [
    "FormatterInputError",
    "capitalize_first",
    "to_kebab_case",
    "truncate",
    "__version__",
]

__version__ = "0.1.0"
