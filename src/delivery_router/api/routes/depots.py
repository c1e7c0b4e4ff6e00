"""Depot preset endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, status

from ...data.depot_repository import get_depots
from ...schemas.routing import DepotModel

router = APIRouter(prefix="/depots", tags=["depots"])


@router.get("", response_model=List[DepotModel], status_code=status.HTTP_200_OK)
def list_depots() -> List[DepotModel]:
    try:
        depots = get_depots()
    except (FileNotFoundError, ValueError) as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to load depot presets: {exc}",
        ) from exc
    return [
        DepotModel(
            code=depot.code,
            name=depot.name,
            latitude=depot.location.latitude,
            longitude=depot.location.longitude,
        )
        for depot in depots
    ]
