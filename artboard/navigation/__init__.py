"""Editor navigation: selection ids, stale-selection recovery, layer tree."""

from artboard.navigation.nav_id import (
    ARTBOARD_NAV_ID,
    ArtboardSelection,
    FilterSelection,
    ImageSelection,
    NavId,
    NavSelection,
    build_nav_id,
    parse_nav_id,
)
from artboard.navigation.recovery import recover_selection

__all__ = [
    "ARTBOARD_NAV_ID",
    "ArtboardSelection",
    "FilterSelection",
    "ImageSelection",
    "NavId",
    "NavSelection",
    "build_nav_id",
    "parse_nav_id",
    "recover_selection",
]
