"""Tests for stale-selection recovery."""

from __future__ import annotations

from types import SimpleNamespace

from artboard.navigation.nav_id import ArtboardSelection, FilterSelection, ImageSelection, build_nav_id
from artboard.navigation.recovery import recover_selection

ARTBOARD = build_nav_id(ArtboardSelection())


def test_falls_back_to_active_master_when_image_is_stale():
    out = recover_selection(build_nav_id(ImageSelection("stale")), ["img-1", "img-2"], "img-2")
    assert out == build_nav_id(ImageSelection("img-2"))


def test_falls_back_to_artboard_without_active_image():
    out = recover_selection(build_nav_id(ImageSelection("stale")), [], None)
    assert out == ARTBOARD


def test_keeps_non_image_selections():
    assert recover_selection(ARTBOARD, ["img-1"], "img-1") == ARTBOARD


def test_no_selection_passes_through():
    assert recover_selection(None, ["img-1"], "img-1") is None


def test_keeps_valid_image_selection(images):
    nav_id = build_nav_id(ImageSelection("img-1"))
    assert recover_selection(nav_id, images, "img-2") == nav_id


def test_keeps_filter_under_known_image(images):
    nav_id = build_nav_id(FilterSelection("img-2", "blur"))
    assert recover_selection(nav_id, images, "img-1") == nav_id


def test_filter_under_deleted_image_is_recovered(images):
    nav_id = build_nav_id(FilterSelection("gone", "blur"))
    assert recover_selection(nav_id, images, "img-1") == build_nav_id(ImageSelection("img-1"))


def test_unknown_active_master_falls_back_to_artboard(images):
    out = recover_selection(build_nav_id(ImageSelection("stale")), images, "also-gone")
    assert out == ARTBOARD


def test_accepts_image_records():
    records = [SimpleNamespace(id="img-1"), SimpleNamespace(id="img-2")]
    nav_id = build_nav_id(ImageSelection("img-2"))
    assert recover_selection(nav_id, records, None) == nav_id


def test_recovery_is_a_fixed_point(images):
    once = recover_selection(build_nav_id(ImageSelection("stale")), images, "img-2")
    assert recover_selection(once, images, "img-2") == once
