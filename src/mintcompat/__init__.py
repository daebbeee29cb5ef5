"""mintcompat — make Mintlify-flavored markdown compile under VitePress/Vue."""

from mintcompat.domain.transform import MarkdownCompat, transform

__version__ = "0.1.0"

__all__ = ["MarkdownCompat", "__version__", "transform"]
