"""Editor navigation IDs.

Keeps nav-id building/parsing in one place so selection and routing logic
never depends on ad-hoc string checks. IDs look like ``artboard``,
``image:<imageId>`` and ``filter:<imageId>:<filterId>``; each id segment is
percent-encoded so ids containing ``:`` still round-trip.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union
from urllib.parse import quote, unquote

NavId = str

ARTBOARD_NAV_ID: NavId = "artboard"
_IMAGE_TAG = "image"
_FILTER_TAG = "filter"
_SEP = ":"


@dataclass(frozen=True)
class ArtboardSelection:
    kind: str = "artboard"


@dataclass(frozen=True)
class ImageSelection:
    image_id: str
    kind: str = "image"


@dataclass(frozen=True)
class FilterSelection:
    image_id: str
    filter_id: str
    kind: str = "filter"


NavSelection = Union[ArtboardSelection, ImageSelection, FilterSelection]


def _enc(segment: str) -> str:
    return quote(segment, safe="")


def build_nav_id(selection: NavSelection) -> NavId:
    if isinstance(selection, ImageSelection):
        return _SEP.join((_IMAGE_TAG, _enc(selection.image_id)))
    if isinstance(selection, FilterSelection):
        return _SEP.join((_FILTER_TAG, _enc(selection.image_id), _enc(selection.filter_id)))
    return ARTBOARD_NAV_ID


def parse_nav_id(nav_id: NavId) -> NavSelection:
    """Decompose a nav id. Unknown or malformed ids fall back to the artboard."""
    tag, _, rest = nav_id.partition(_SEP)
    parts = rest.split(_SEP) if rest else []

    if tag == _IMAGE_TAG and len(parts) == 1 and parts[0]:
        return ImageSelection(image_id=unquote(parts[0]))
    if tag == _FILTER_TAG and len(parts) == 2 and all(parts):
        return FilterSelection(image_id=unquote(parts[0]), filter_id=unquote(parts[1]))
    return ArtboardSelection()


def selected_image_id(selection: NavSelection) -> str | None:
    """Image the selection points at (directly or via a filter), if any."""
    if isinstance(selection, (ImageSelection, FilterSelection)):
        return selection.image_id
    return None
