"""Shared pytest fixtures for the parcel KML test suite."""

from pathlib import Path

import pytest

from parcel_kml.models.geometry import Point
from parcel_kml.models.parcel import LandParcel, OwnerRef

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"
EDGE_CASES_DIR = DATA_DIR / "edge_cases"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


@pytest.fixture()
def edge_cases_dir() -> Path:
    """Return the path to the edge-cases test data directory."""
    return EDGE_CASES_DIR


# ---------------------------------------------------------------------------
# Sample KML file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def portal_export_kml(data_dir: Path) -> Path:
    """Path to a two-parcel export in the portal's own format."""
    return data_dir / "01_portal_export_two_parcels.kml"


@pytest.fixture()
def google_earth_kml(data_dir: Path) -> Path:
    """Path to a Google Earth style file: prefixed namespace, folders, closed rings."""
    return data_dir / "02_google_earth_folders.kml"


@pytest.fixture()
def malformed_xml_kml(edge_cases_dir: Path) -> Path:
    """Path to a hand-edited file with an unclosed tag but readable Placemarks."""
    return edge_cases_dir / "11_malformed_unclosed_tag.kml"


@pytest.fixture()
def no_placemarks_kml(edge_cases_dir: Path) -> Path:
    """Path to a valid KML document with no Placemark."""
    return edge_cases_dir / "12_no_placemarks.kml"


@pytest.fixture()
def bad_coordinates_kml(edge_cases_dir: Path) -> Path:
    """Path to a KML mixing valid and unusable Placemarks."""
    return edge_cases_dir / "13_bad_coordinates.kml"


# ---------------------------------------------------------------------------
# Geometry fixtures
# ---------------------------------------------------------------------------

# Roughly 450 m x 450 m near Relizane-latitude farmland (36.0N, 3.0E)
SQUARE_RING_36N = (
    Point(lat=36.0, lng=3.0),
    Point(lat=36.0, lng=3.005002),
    Point(lat=36.004047, lng=3.005002),
    Point(lat=36.004047, lng=3.0),
)


@pytest.fixture()
def square_ring() -> tuple[Point, ...]:
    """Square-ish parcel of about 20 ha near 36.0N, 3.0E."""
    return SQUARE_RING_36N


@pytest.fixture()
def owner() -> OwnerRef:
    return OwnerRef(
        first_name="Ahmed",
        last_name="Benali",
        phone="0550123456",
        region="Relizane",
    )


@pytest.fixture()
def parcel(square_ring: tuple[Point, ...], owner: OwnerRef) -> LandParcel:
    return LandParcel.create(
        id="land-001",
        name="Ferme El Hamadna",
        location="Oued Rhiou",
        soil_type="Clay loam",
        ring=square_ring,
        owner=owner,
    )
