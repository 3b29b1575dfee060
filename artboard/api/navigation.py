"""POST /api/navigation/*: selection recovery and the layers menu."""

from __future__ import annotations

from fastapi import APIRouter

from artboard.models.requests import LayersRequest, RecoverSelectionRequest
from artboard.models.responses import LayerRowModel, LayersResponse, RecoverSelectionResponse
from artboard.navigation.layers import (
    FilterLayerInput,
    ImageLayerInput,
    build_layers_tree,
    flatten_layer_tree,
)
from artboard.navigation.recovery import recover_selection

router = APIRouter(prefix="/navigation")


@router.post("/recover", response_model=RecoverSelectionResponse)
async def recover(req: RecoverSelectionRequest) -> RecoverSelectionResponse:
    nav_id = recover_selection(req.nav_id, [img.id for img in req.images], req.active_master_image_id)
    return RecoverSelectionResponse(nav_id=nav_id)


@router.post("/layers", response_model=LayersResponse)
async def layers(req: LayersRequest) -> LayersResponse:
    root = build_layers_tree(
        ImageLayerInput(
            image_id=img.image_id,
            label=img.label,
            filters=[FilterLayerInput(filter_id=f.filter_id, label=f.label) for f in img.filters],
        )
        for img in req.images
    )
    rows = flatten_layer_tree(root, set(req.expanded))
    return LayersResponse(
        rows=[
            LayerRowModel(
                id=row.node.id,
                kind=row.node.kind,
                label=row.node.label,
                parent_id=row.node.parent_id,
                depth=row.depth,
                has_children=row.has_children,
                is_expanded=row.is_expanded,
            )
            for row in rows
        ]
    )
