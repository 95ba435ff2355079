"""
HexGeoGrids API
FastAPI application for snapping lon-lat points to hexagonal cells and
decoding cell indices.
"""
from fastapi import FastAPI, Response, HTTPException, Query
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
import logging
import time
from typing import Optional

from hexgeogrids import config
from hexgeogrids import metrics
from hexgeogrids.cell import HexCell
from hexgeogrids.errors import HexGridError
from hexgeogrids.grid import center, vertices, index, polygon_geojson
from hexgeogrids.hashing import system_to_prefix
from hexgeogrids.models import (
    BatchIndexRequest,
    BatchIndexResponse,
    CellResponse,
    IndexResponse,
    SystemInfo,
)
from hexgeogrids.system import HexSystem

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)


def bad_request(endpoint: str, exc: HexGridError) -> HTTPException:
    """
    Record a rejected request and build the 400 response for it.

    Args:
        endpoint: Endpoint name used as a metrics label
        exc: The hex grid error raised while handling the request

    Returns:
        HTTPException with the error class name and message as detail
    """
    error = type(exc).__name__
    logger.info("%s rejected: %s: %s", endpoint, error, exc)
    metrics.index_requests_total.labels(endpoint=endpoint, status="rejected").inc()
    metrics.decode_errors_total.labels(error=error).inc()
    return HTTPException(status_code=400, detail={"error": error, "message": str(exc)})


def resolve_system(center_lon: Optional[float], center_lat: Optional[float],
                   size: Optional[float]) -> HexSystem:
    """Build the requested HexSystem, filling missing parameters from config."""
    if center_lon is None and center_lat is None and size is None:
        return config.default_system()
    return HexSystem(
        config.DEFAULT_CENTER_LON if center_lon is None else center_lon,
        config.DEFAULT_CENTER_LAT if center_lat is None else center_lat,
        config.DEFAULT_SIZE if size is None else size,
    )


def system_info(hs: HexSystem) -> SystemInfo:
    return SystemInfo(
        lon=hs.lon,
        lat=hs.lat,
        size=hs.size,
        utm_zone=hs.zone.zone,
        isnorth=hs.zone.isnorth,
        prefix=system_to_prefix(hs),
    )


# Initialize FastAPI application
app = FastAPI(
    title="HexGeoGrids",
    description="Lon-lat to hexagonal cell indexing on locally flat UTM planes",
    version="1.0.0"
)


@app.get("/metrics")
def get_metrics():
    """
    Prometheus metrics endpoint.

    Returns:
        Response: Prometheus-formatted metrics
    """
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


@app.get("/health")
def health():
    """
    Health check endpoint.

    Returns:
        dict: API status and the prefix of the configured default system
    """
    return {"status": "healthy", "default_system": system_to_prefix(config.default_system())}


@app.get("/v1/index", response_model=IndexResponse)
def index_point(
    lon: float = Query(..., ge=-180, le=180),
    lat: float = Query(..., ge=-90, le=90),
    center_lon: Optional[float] = None,
    center_lat: Optional[float] = None,
    size: Optional[float] = None,
):
    """
    Index the cell containing a lon-lat point.

    The HexSystem is given by center_lon, center_lat and size; any that are
    omitted come from the service configuration.

    Returns:
        IndexResponse: index, axial q and r, and the (lon, lat) cell center

    Raises:
        HTTPException 400: If the HexSystem parameters are invalid
    """
    start_time = time.time()

    try:
        hs = resolve_system(center_lon, center_lat, size)
        cell = HexCell.from_lonlat(lon, lat, hs)
        ind = index(cell)
    except HexGridError as exc:
        raise bad_request("index", exc)

    metrics.cells_indexed_total.inc()
    metrics.index_requests_total.labels(endpoint="index", status="success").inc()
    metrics.request_duration_seconds.labels(endpoint="index").observe(time.time() - start_time)

    return IndexResponse(index=ind, q=cell.q, r=cell.r, center=center(cell))


@app.post("/v1/index/batch", response_model=BatchIndexResponse)
def index_batch(batch: BatchIndexRequest):
    """
    Index many points in a single HexSystem.

    Args:
        batch: BatchIndexRequest with an optional system and up to
            HEXGRID_MAX_BATCH points

    Returns:
        BatchIndexResponse: indices in input order plus summary counts
    """
    start_time = time.time()

    try:
        if batch.system is None:
            hs = config.default_system()
        else:
            hs = HexSystem(batch.system.center_lon, batch.system.center_lat, batch.system.size)
        indices = [index(p.lon, p.lat, hs) for p in batch.points]
    except HexGridError as exc:
        raise bad_request("index_batch", exc)

    metrics.cells_indexed_total.inc(len(indices))
    metrics.index_requests_total.labels(endpoint="index_batch", status="success").inc()
    metrics.request_duration_seconds.labels(endpoint="index_batch").observe(time.time() - start_time)

    return BatchIndexResponse(
        prefix=system_to_prefix(hs),
        indices=indices,
        total_points=len(indices),
        unique_cells=len(set(indices)),
        processing_time_ms=round((time.time() - start_time) * 1000, 2),
    )


@app.get("/v1/cells/{cell_index}", response_model=CellResponse)
def get_cell(cell_index: str):
    """
    Decode an index into its HexSystem, axial coordinates and geometry.

    Raises:
        HTTPException 400: If the index is malformed
    """
    start_time = time.time()

    try:
        cell = HexCell.from_index(cell_index)
    except HexGridError as exc:
        raise bad_request("cell", exc)

    metrics.index_requests_total.labels(endpoint="cell", status="success").inc()
    metrics.request_duration_seconds.labels(endpoint="cell").observe(time.time() - start_time)

    return CellResponse(
        index=index(cell),
        system=system_info(cell.system),
        q=cell.q,
        r=cell.r,
        center=center(cell),
        vertices=vertices(cell),
    )


@app.get("/v1/cells/{cell_index}/polygon")
def get_cell_polygon(cell_index: str):
    """
    Cell outline as a GeoJSON Feature.

    Raises:
        HTTPException 400: If the index is malformed
    """
    start_time = time.time()

    try:
        cell = HexCell.from_index(cell_index)
    except HexGridError as exc:
        raise bad_request("polygon", exc)

    geometry = polygon_geojson(cell)

    metrics.index_requests_total.labels(endpoint="polygon", status="success").inc()
    metrics.request_duration_seconds.labels(endpoint="polygon").observe(time.time() - start_time)

    return {
        "type": "Feature",
        "geometry": {
            "type": geometry["type"],
            "coordinates": [[list(p) for p in ring] for ring in geometry["coordinates"]],
        },
        "properties": {
            "index": index(cell),
            "q": cell.q,
            "r": cell.r,
            "size": cell.system.size,
        },
    }
