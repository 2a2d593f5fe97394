"""Application layer: variant dispatch for classified card field bags."""

from .convert import build_content_cardable

__all__ = ["build_content_cardable"]
