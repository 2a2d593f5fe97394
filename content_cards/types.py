"""Shared type aliases for the content card package."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Mapping, Union

if TYPE_CHECKING:
    from .domain.keys import ContentCardKey

FieldValue = Union[str, int, float, bool, Mapping[str, Any], None]
Fields = Mapping["ContentCardKey", FieldValue]
FieldBag = dict["ContentCardKey", FieldValue]
Extras = Mapping[str, Any]

RefreshObserver = Callable[[bool], None]
