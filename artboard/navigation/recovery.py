"""Recover a stale selection after the image list changes (delete/refresh)."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from artboard.navigation.nav_id import (
    ArtboardSelection,
    ImageSelection,
    NavId,
    build_nav_id,
    parse_nav_id,
    selected_image_id,
)

logger = logging.getLogger(__name__)


def _image_id(image: Any) -> str:
    if isinstance(image, str):
        return image
    if isinstance(image, Mapping):
        return image["id"]
    return image.id


def recover_selection(
    current_id: NavId | None,
    known_images: Iterable[Any],
    active_master_image_id: str | None = None,
) -> NavId | None:
    """Return a nav id that is valid for the current image list.

    ``known_images`` may hold image ids or image records with an ``id``.
    Non-image selections pass through; a stale image/filter selection falls
    back to the active master image, then to the artboard.
    """
    if current_id is None:
        return None

    image_id = selected_image_id(parse_nav_id(current_id))
    if image_id is None:
        return current_id

    known = {_image_id(img) for img in known_images}
    if image_id in known:
        return current_id

    if active_master_image_id and active_master_image_id in known:
        recovered = build_nav_id(ImageSelection(image_id=active_master_image_id))
    else:
        recovered = build_nav_id(ArtboardSelection())
    logger.info("Selection %r is stale, recovered to %r", current_id, recovered)
    return recovered
