from pydantic import BaseModel, Field
from typing import Optional, List, Tuple

from .config import MAX_BATCH_SIZE


class Point(BaseModel):
    """A lon-lat point in degrees."""
    lon: float = Field(..., ge=-180, le=180)
    lat: float = Field(..., ge=-90, le=90)


class SystemSpec(BaseModel):
    """HexSystem parameters. Real values are rounded the way HexSystem rounds them."""
    center_lon: float = Field(..., ge=-180, le=180)
    center_lat: float = Field(..., ge=-90, le=90)
    size: float = Field(..., ge=1, le=0xFFFF, description="Hexagon size in meters")


class SystemInfo(BaseModel):
    lon: int
    lat: int
    size: int
    utm_zone: int
    isnorth: bool
    prefix: str


class IndexResponse(BaseModel):
    index: str
    q: int
    r: int
    center: Tuple[float, float]


class CellResponse(BaseModel):
    index: str
    system: SystemInfo
    q: int
    r: int
    center: Tuple[float, float]
    vertices: List[Tuple[float, float]]


class BatchIndexRequest(BaseModel):
    """Batch of points to index in one HexSystem."""
    system: Optional[SystemSpec] = Field(default=None, description="Defaults to the configured system")
    points: List[Point] = Field(..., min_length=1, max_length=MAX_BATCH_SIZE,
                                description=f"List of points (max {MAX_BATCH_SIZE})")


class BatchIndexResponse(BaseModel):
    prefix: str
    indices: List[str]
    total_points: int
    unique_cells: int
    processing_time_ms: float
