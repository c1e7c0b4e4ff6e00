"""Routing endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import PlainTextResponse, Response

from ...schemas.routing import RoutingRequest, RoutingResponse
from ...services.outputs.routing_formatter import routing_plan_to_csv, routing_plan_to_itinerary
from ...services.routing.errors import RoutePlanningError
from ...services.routing.service import build_plan, optimize_route

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/routes", tags=["routes"])


@router.post("/optimize", response_model=RoutingResponse, status_code=status.HTTP_200_OK)
def optimize(payload: RoutingRequest) -> RoutingResponse:
    try:
        return optimize_route(payload)
    except RoutePlanningError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception(f"Error optimizing route: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to optimize route: {str(exc)}"
        ) from exc


@router.post("/itinerary", response_class=PlainTextResponse, status_code=status.HTTP_200_OK)
def itinerary(payload: RoutingRequest) -> PlainTextResponse:
    """Plain-text itinerary for the driver."""
    try:
        plan, depot = build_plan(payload)
    except RoutePlanningError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception(f"Error building itinerary: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to build itinerary: {str(exc)}"
        ) from exc
    title = f"Delivery route for {payload.delivery_date.strftime('%d/%m/%Y')}" if payload.delivery_date else None
    return PlainTextResponse(routing_plan_to_itinerary(plan, depot, title=title))


@router.post("/export.csv", status_code=status.HTTP_200_OK)
def export_csv(payload: RoutingRequest) -> Response:
    try:
        plan, _ = build_plan(payload)
    except RoutePlanningError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception(f"Error exporting route CSV: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to export route: {str(exc)}"
        ) from exc
    return Response(
        content=routing_plan_to_csv(plan),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="route.csv"'},
    )
