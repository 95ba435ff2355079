"""
Unit tests for Pydantic models.
"""
import pytest
from pydantic import ValidationError
from hexgeogrids.config import MAX_BATCH_SIZE
from hexgeogrids.models import BatchIndexRequest, Point, SystemSpec


@pytest.mark.unit
class TestPointModel:
    """Test suite for Point model."""

    def test_point_valid_data(self):
        """Test creating Point with valid data."""
        point = Point(lon=-74.0060, lat=40.7128)

        assert point.lon == -74.0060
        assert point.lat == 40.7128

    def test_point_missing_lat(self):
        """Test that lat is required."""
        with pytest.raises(ValidationError) as exc_info:
            Point(lon=-74.0060)

        errors = exc_info.value.errors()
        assert any(error["loc"] == ("lat",) for error in errors)

    def test_point_invalid_lon_type(self):
        """Test that lon must be a number."""
        with pytest.raises(ValidationError) as exc_info:
            Point(lon="invalid", lat=40.7128)

        errors = exc_info.value.errors()
        assert any(error["loc"] == ("lon",) for error in errors)

    def test_point_out_of_range(self):
        """Test that lon/lat outside the globe are rejected."""
        with pytest.raises(ValidationError):
            Point(lon=180.5, lat=0)
        with pytest.raises(ValidationError):
            Point(lon=0, lat=-90.5)

    def test_point_extremes(self):
        """Test that the edges of the globe are accepted."""
        assert Point(lon=-180, lat=90).lat == 90.0


@pytest.mark.unit
class TestSystemSpecModel:
    """Test suite for SystemSpec model."""

    def test_system_spec_valid(self):
        """Test creating SystemSpec with valid data."""
        spec = SystemSpec(center_lon=-74, center_lat=41, size=500)
        assert spec.size == 500

    def test_system_spec_size_bounds(self):
        """Test that size must fit HexSystem's 16-bit range."""
        with pytest.raises(ValidationError) as exc_info:
            SystemSpec(center_lon=0, center_lat=0, size=0)

        errors = exc_info.value.errors()
        assert any(error["loc"] == ("size",) for error in errors)

        with pytest.raises(ValidationError):
            SystemSpec(center_lon=0, center_lat=0, size=65536)


@pytest.mark.unit
class TestBatchIndexRequestModel:
    """Test suite for BatchIndexRequest model."""

    def test_batch_defaults_system_to_none(self):
        """Test that the system is optional."""
        batch = BatchIndexRequest(points=[{"lon": 0, "lat": 0}])
        assert batch.system is None
        assert len(batch.points) == 1

    def test_batch_requires_points(self):
        """Test that an empty batch is rejected."""
        with pytest.raises(ValidationError):
            BatchIndexRequest(points=[])

    def test_batch_max_size(self):
        """Test that batches above the configured maximum are rejected."""
        with pytest.raises(ValidationError):
            BatchIndexRequest(points=[{"lon": 0, "lat": 0}] * (MAX_BATCH_SIZE + 1))

    def test_batch_from_dict(self):
        """Test creating a batch with a system from a dictionary."""
        data = {
            "system": {"center_lon": 2.35, "center_lat": 48.86, "size": 100},
            "points": [{"lon": 2.35, "lat": 48.86}, {"lon": 2.36, "lat": 48.87}],
        }
        batch = BatchIndexRequest(**data)

        assert batch.system.center_lat == 48.86
        assert batch.points[1].lon == 2.36
