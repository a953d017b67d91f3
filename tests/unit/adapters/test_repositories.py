"""Tests for the ORM-to-domain mappers used by the SQL repositories."""

from decimal import Decimal

from app.adapters.persistence.models import (
    ServiceCategoryModel,
    ServiceListingModel,
    UserModel,
)
from app.adapters.persistence.repositories import _listing_to_domain, _provider_to_domain
from app.domain.value_objects.enums import Role
from app.domain.value_objects.geo_point import GeoPoint


def _user(latitude=28.6315, longitude=77.2167, role="PROVIDER") -> UserModel:
    return UserModel(
        id=11,
        name="Ravi Electricals",
        email="ravi@example.com",
        role=role,
        city="New Delhi",
        pincode=110001,
        latitude=latitude,
        longitude=longitude,
    )


def _listing(provider: UserModel, category=None, price=Decimal("499.00")) -> ServiceListingModel:
    listing = ServiceListingModel(
        id=1,
        title="Fan repair",
        price=price,
        active=True,
        provider_id=provider.id,
    )
    listing.provider = provider
    listing.category = category
    return listing


# ─── Provider mapping ────────────────────────────────────────────────


def test_provider_with_both_coordinates():
    provider = _provider_to_domain(_user())
    assert provider.location == GeoPoint(latitude=28.6315, longitude=77.2167)
    assert provider.role == Role.PROVIDER


def test_provider_with_latitude_only_has_no_location():
    assert _provider_to_domain(_user(longitude=None)).location is None


def test_provider_with_longitude_only_has_no_location():
    assert _provider_to_domain(_user(latitude=None)).location is None


def test_unknown_role_maps_to_customer():
    assert _provider_to_domain(_user(role="SUPERUSER")).role == Role.CUSTOMER


# ─── Listing mapping ─────────────────────────────────────────────────


def test_listing_takes_location_from_provider():
    listing = _listing_to_domain(_listing(_user()))
    assert listing.location == GeoPoint(latitude=28.6315, longitude=77.2167)
    assert listing.provider_id == 11
    assert listing.provider_name == "Ravi Electricals"


def test_listing_of_unlocated_provider_has_no_location():
    assert _listing_to_domain(_listing(_user(latitude=None))).location is None


def test_listing_without_category():
    assert _listing_to_domain(_listing(_user())).category is None


def test_listing_with_category():
    category = ServiceCategoryModel(id=3, name="Electrician")
    assert _listing_to_domain(_listing(_user(), category=category)).category == "Electrician"


def test_numeric_price_maps_to_float():
    listing = _listing_to_domain(_listing(_user()))
    assert isinstance(listing.price, float)
    assert listing.price == 499.0


def test_missing_price_stays_none():
    assert _listing_to_domain(_listing(_user(), price=None)).price is None
