import pytest

from delivery_router.models.domain import GeoPoint, Stop
from delivery_router.services.geospatial import distance
from delivery_router.services.routing.metrics import evaluate, format_duration

DEPOT = GeoPoint(32.7940, 34.9896)


def _stop(sid: str, lat: float, lon: float) -> Stop:
    return Stop(stop_id=sid, location=GeoPoint(lat, lon), payload={"city": "Haifa"})


def test_evaluate_walks_route_from_depot():
    order = [_stop("S1", 32.80, 35.00), _stop("S2", 32.83, 35.07), _stop("S3", 32.92, 35.08)]

    metrics = evaluate(DEPOT, order, average_speed_kmh=40, dwell_minutes_per_stop=5)

    assert [route_stop.position for route_stop in metrics.stops] == [1, 2, 3]
    assert [route_stop.stop for route_stop in metrics.stops] == order
    assert metrics.stops[0].leg_distance_km == pytest.approx(distance(DEPOT, order[0].location))
    assert metrics.stops[1].leg_distance_km == pytest.approx(distance(order[0].location, order[1].location))
    assert metrics.return_leg_km == pytest.approx(distance(order[2].location, DEPOT))

    legs = sum(route_stop.leg_distance_km for route_stop in metrics.stops)
    assert metrics.stops[-1].cumulative_distance_km == pytest.approx(legs)
    assert metrics.total_distance_km == pytest.approx(legs + metrics.return_leg_km)


def test_duration_combines_driving_and_dwell_time():
    order = [_stop("S1", 32.80, 35.00), _stop("S2", 32.83, 35.07)]

    metrics = evaluate(DEPOT, order, average_speed_kmh=40, dwell_minutes_per_stop=5)

    assert metrics.driving_hours == pytest.approx(metrics.total_distance_km / 40)
    assert metrics.dwell_hours == pytest.approx(2 * 5 / 60)
    assert metrics.estimated_duration_hours == pytest.approx(metrics.total_distance_km / 40 + 10 / 60)


def test_speed_and_dwell_are_tunable():
    order = [_stop("S1", 32.80, 35.00)]

    slow = evaluate(DEPOT, order, average_speed_kmh=20, dwell_minutes_per_stop=0)
    fast = evaluate(DEPOT, order, average_speed_kmh=80, dwell_minutes_per_stop=0)

    assert slow.estimated_duration_hours == pytest.approx(4 * fast.estimated_duration_hours)


def test_defaults_come_from_settings(monkeypatch):
    from delivery_router.config import settings

    monkeypatch.setattr(settings, "average_speed_kmh", 60.0)
    monkeypatch.setattr(settings, "dwell_minutes_per_stop", 10.0)
    order = [_stop("S1", 32.80, 35.00)]

    metrics = evaluate(DEPOT, order)

    assert metrics.estimated_duration_hours == pytest.approx(metrics.total_distance_km / 60 + 10 / 60)


def test_empty_route_has_zero_metrics():
    metrics = evaluate(DEPOT, [])

    assert metrics.stops == ()
    assert metrics.stop_count == 0
    assert metrics.total_distance_km == 0.0
    assert metrics.return_leg_km == 0.0
    assert metrics.estimated_duration_hours == 0.0


@pytest.mark.parametrize(
    ("hours", "expected"),
    [(0.0, "0:00"), (1.5, "1:30"), (2.25, "2:15"), (1.9999, "2:00")],
)
def test_format_duration(hours: float, expected: str):
    assert format_duration(hours) == expected
