from delivery_router.models.domain import GeoPoint, Stop
from delivery_router.services.routing.construction import nearest_neighbor

DEPOT = GeoPoint(0.0, 0.0)


def _stop(sid: str, lat: float, lon: float) -> Stop:
    return Stop(stop_id=sid, location=GeoPoint(lat, lon), payload={"customer_name": f"Customer {sid}"})


def test_nearest_neighbor_visits_closest_first():
    east_1 = _stop("E1", 0.0, 1.0)
    east_2 = _stop("E2", 0.0, 2.0)
    north = _stop("N", 0.9, 0.0)

    order = nearest_neighbor(DEPOT, [east_1, east_2, north])

    # (0.9, 0) is closest to the depot, then (0, 1) is closer to it than (0, 2)
    assert [stop.stop_id for stop in order] == ["N", "E1", "E2"]


def test_equidistant_candidates_break_ties_by_stop_id():
    # (0, 1) and (1, 0) are exactly the same distance from the depot
    stops = [_stop("C", 1.0, 0.0), _stop("B", 0.0, 2.0), _stop("A", 0.0, 1.0)]

    order = nearest_neighbor(DEPOT, stops)
    reversed_order = nearest_neighbor(DEPOT, list(reversed(stops)))

    assert [stop.stop_id for stop in order] == ["A", "B", "C"]
    assert order == reversed_order


def test_nearest_neighbor_returns_permutation():
    stops = [_stop(f"S{i}", (i * 37 % 11) / 10, (i * 53 % 13) / 10) for i in range(15)]

    order = nearest_neighbor(DEPOT, stops)

    assert len(order) == len(stops)
    assert {stop.stop_id for stop in order} == {stop.stop_id for stop in stops}


def test_degenerate_inputs():
    single = _stop("ONLY", 1.0, 1.0)

    assert nearest_neighbor(DEPOT, []) == ()
    assert nearest_neighbor(DEPOT, [single]) == (single,)


def test_payload_passes_through_unchanged():
    payload = {"customer_name": "Dana", "items": ["2x bread"], "total": 42.5}
    stop = Stop(stop_id="P", location=GeoPoint(0.1, 0.1), payload=payload)

    (result,) = nearest_neighbor(DEPOT, [stop, _stop("Q", 0.5, 0.5)])[:1]

    assert result.payload is payload
