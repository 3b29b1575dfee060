"""Keyboard navigation over the flattened layers menu.

Pure decision logic: given a key and the current rows, say how selection
and expansion should change. The UI applies the result.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from artboard.navigation.layers import FlatLayerRow
from artboard.navigation.nav_id import NavId

ARROW_UP = "ArrowUp"
ARROW_DOWN = "ArrowDown"
ARROW_LEFT = "ArrowLeft"
ARROW_RIGHT = "ArrowRight"
ENTER = "Enter"
SPACE = " "


@dataclass(frozen=True)
class LayerTreeKeyResult:
    prevent_default: bool
    next_selected_index: int | None = None
    select_id: NavId | None = None
    toggle_expand_id: NavId | None = None
    # (node id, expanded)
    set_expanded: tuple[NavId, bool] | None = None


_IGNORED = LayerTreeKeyResult(prevent_default=False)


def _row_at(rows: Sequence[FlatLayerRow], index: int) -> FlatLayerRow | None:
    if 0 <= index < len(rows):
        return rows[index]
    return None


def next_layer_tree_state_from_key(key: str, selected_index: int, rows: Sequence[FlatLayerRow]) -> LayerTreeKeyResult:
    """Map a key press on the layers menu to a selection/expansion change.

    Up/Down move the selection and stop at the first/last row. Right/Left
    expand/collapse the selected row and Space toggles it; all three are
    ignored on rows without children. Enter re-selects the current row.
    """
    if not rows:
        return _IGNORED
    index = max(0, selected_index)

    if key in (ARROW_UP, ARROW_DOWN):
        step = 1 if key == ARROW_DOWN else -1
        nxt = min(len(rows) - 1, max(0, index + step))
        return LayerTreeKeyResult(prevent_default=True, next_selected_index=nxt, select_id=rows[nxt].node.id)

    row = _row_at(rows, index)
    if key == ENTER:
        return LayerTreeKeyResult(prevent_default=True, select_id=row.node.id if row else None)
    if key not in (ARROW_LEFT, ARROW_RIGHT, SPACE):
        return _IGNORED
    if row is None or not row.has_children:
        return _IGNORED
    if key == SPACE:
        return LayerTreeKeyResult(prevent_default=True, toggle_expand_id=row.node.id)
    return LayerTreeKeyResult(prevent_default=True, set_expanded=(row.node.id, key == ARROW_RIGHT))
