"""Page dump input for developer tooling."""

from .loader import load_text_page

__all__ = ["load_text_page"]
