"""Tests for the ProximitySearch policy."""

import math
import random

import pytest

from app.domain.entities.listing import ServiceListing
from app.domain.exceptions import InvalidSearchParameters
from app.domain.policies.proximity_search import (
    ProximityCandidate,
    category_matches,
    listing_candidates,
    search,
)
from app.domain.value_objects.distance import distance_km
from app.domain.value_objects.geo_point import GeoPoint

ORIGIN = GeoPoint(latitude=28.6448, longitude=77.2167)
KM_PER_DEGREE = 6371.0 * math.pi / 180


def _north_of(origin: GeoPoint, km: float) -> GeoPoint:
    """A point *km* due north; along a meridian haversine distance is exact."""
    return GeoPoint(latitude=origin.latitude + km / KM_PER_DEGREE, longitude=origin.longitude)


def _candidate(name: str, km: float | None) -> ProximityCandidate[str]:
    location = _north_of(ORIGIN, km) if km is not None else None
    return ProximityCandidate(payload=name, location=location)


def _listing(lid: int, category: str | None, km: float | None) -> ServiceListing:
    return ServiceListing(
        id=lid, title=f"Listing {lid}", category=category,
        provider_id=100 + lid, provider_name=f"Provider {lid}",
        location=_north_of(ORIGIN, km) if km is not None else None,
    )


# ─── Radius filtering ───────────────────────────────────────────────


def test_includes_candidate_exactly_at_radius():
    at_edge = _candidate("edge", 5.0)
    radius = distance_km(ORIGIN, at_edge.location)
    results = search(ORIGIN, radius, [at_edge])
    assert [r.candidate.payload for r in results] == ["edge"]


def test_excludes_candidate_just_outside_radius():
    outside = _candidate("outside", 5.01)
    results = search(ORIGIN, 5.0, [outside, _candidate("inside", 4.0)])
    assert [r.candidate.payload for r in results] == ["inside"]


def test_results_sorted_nearest_first_for_shuffled_input():
    distances = [7.5, 0.3, 4.2, 9.9, 1.1, 2.8, 6.0]
    candidates = [_candidate(f"c{d}", d) for d in distances]
    random.Random(42).shuffle(candidates)

    results = search(ORIGIN, 10.0, candidates)

    got = [r.distance_km for r in results]
    assert got == sorted(got)
    assert len(results) == len(distances)
    assert [r.candidate.payload for r in results] == [f"c{d}" for d in sorted(distances)]


def test_ties_keep_input_order():
    a = _candidate("a", 3.0)
    b = _candidate("b", 3.0)
    c = _candidate("c", 1.0)
    results = search(ORIGIN, 10.0, [a, b, c])
    assert [r.candidate.payload for r in results] == ["c", "a", "b"]


def test_distance_attached_to_each_result():
    results = search(ORIGIN, 10.0, [_candidate("x", 2.0)])
    assert results[0].distance_km == pytest.approx(2.0, abs=1e-6)


# ─── Missing coordinates / empty results ────────────────────────────


def test_candidates_without_location_return_empty_list():
    results = search(ORIGIN, 50.0, [_candidate("a", None), _candidate("b", None)])
    assert results == []


def test_candidates_without_location_are_skipped():
    results = search(ORIGIN, 50.0, [_candidate("none", None), _candidate("near", 1.0)])
    assert [r.candidate.payload for r in results] == ["near"]


def test_nothing_in_range_is_not_an_error():
    assert search(ORIGIN, 1.0, [_candidate("far", 500.0)]) == []


def test_empty_candidate_list():
    assert search(ORIGIN, 1.0, []) == []


# ─── Predicate ──────────────────────────────────────────────────────


def test_predicate_applied_before_distance():
    seen = []

    def only_b(payload):
        seen.append(payload)
        return payload == "b"

    results = search(
        ORIGIN, 10.0, [_candidate("a", 1.0), _candidate("b", 2.0), _candidate("c", None)],
        predicate=only_b,
    )
    assert [r.candidate.payload for r in results] == ["b"]
    # Predicate sees location-less candidates too: it runs first
    assert seen == ["a", "b", "c"]


def test_category_filter_is_case_insensitive_exact():
    listings = [
        _listing(1, "Plumbing", 1.0),
        _listing(2, "plumbing", 2.0),
        _listing(3, "Electrical", 0.5),
        _listing(4, "Plumbing Repair", 0.2),
        _listing(5, None, 0.1),
    ]
    results = search(ORIGIN, 10.0, listing_candidates(listings), category_matches("PLUMBING"))
    assert [r.candidate.payload.id for r in results] == [1, 2]


@pytest.mark.parametrize("category", [None, "", "   "])
def test_blank_category_means_no_filter(category):
    assert category_matches(category) is None


# ─── Validation ─────────────────────────────────────────────────────


@pytest.mark.parametrize("radius", [0, -1.0, math.nan, math.inf])
def test_invalid_radius_raises(radius):
    with pytest.raises(InvalidSearchParameters):
        search(ORIGIN, radius, [])


@pytest.mark.parametrize(
    "lat, lon", [(91.0, 0.0), (-90.5, 0.0), (0.0, 181.0), (0.0, -180.1), (math.nan, 0.0)]
)
def test_invalid_reference_raises(lat, lon):
    with pytest.raises(InvalidSearchParameters):
        search(GeoPoint(latitude=lat, longitude=lon), 10.0, [_candidate("a", 1.0)])


def test_invalid_search_parameters_is_value_error():
    with pytest.raises(ValueError):
        search(ORIGIN, -5, [])
