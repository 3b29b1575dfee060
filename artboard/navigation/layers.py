"""Layer tree for the editor layers menu.

Node ids are navigation ids, so selecting a row and recovering a stale
selection speak the same language.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Literal

from artboard.navigation.nav_id import (
    ArtboardSelection,
    FilterSelection,
    ImageSelection,
    NavId,
    build_nav_id,
)

LayerKind = Literal["artboard", "image", "filter"]


@dataclass
class FilterLayerInput:
    filter_id: str
    label: str


@dataclass
class ImageLayerInput:
    # Stable identifier for an image within the project (db id / role / filename).
    image_id: str
    label: str
    filters: list[FilterLayerInput] = field(default_factory=list)


@dataclass
class LayerNode:
    id: NavId
    kind: LayerKind
    label: str
    children: list[LayerNode] = field(default_factory=list)
    parent_id: NavId | None = None


@dataclass
class FlatLayerRow:
    node: LayerNode
    depth: int
    has_children: bool
    is_expanded: bool


def build_layers_tree(images: Iterable[ImageLayerInput]) -> LayerNode:
    root_id = build_nav_id(ArtboardSelection())
    root = LayerNode(id=root_id, kind="artboard", label="Artboard")

    for img in images:
        image_node_id = build_nav_id(ImageSelection(image_id=img.image_id))
        image_node = LayerNode(id=image_node_id, kind="image", label=img.label, parent_id=root_id)
        for f in img.filters:
            image_node.children.append(
                LayerNode(
                    id=build_nav_id(FilterSelection(image_id=img.image_id, filter_id=f.filter_id)),
                    kind="filter",
                    label=f.label,
                    parent_id=image_node_id,
                )
            )
        root.children.append(image_node)

    return root


def flatten_layer_tree(root: LayerNode, expanded: set[NavId]) -> list[FlatLayerRow]:
    """Depth-first rows; children appear only under expanded nodes."""
    rows: list[FlatLayerRow] = []

    def walk(node: LayerNode, depth: int) -> None:
        has_children = bool(node.children)
        is_expanded = has_children and node.id in expanded
        rows.append(FlatLayerRow(node=node, depth=depth, has_children=has_children, is_expanded=is_expanded))
        if is_expanded:
            for child in node.children:
                walk(child, depth + 1)

    walk(root, 0)
    return rows
