"""
Service configuration, read from the environment (or a .env file).

HEXGRID_CENTER_LON / HEXGRID_CENTER_LAT / HEXGRID_SIZE define the HexSystem
used when a request does not name one.
"""
import os

from dotenv import load_dotenv

from .system import HexSystem

# Load environment variables from .env file
load_dotenv()

DEFAULT_CENTER_LON = float(os.getenv("HEXGRID_CENTER_LON", "0"))
DEFAULT_CENTER_LAT = float(os.getenv("HEXGRID_CENTER_LAT", "0"))
DEFAULT_SIZE = float(os.getenv("HEXGRID_SIZE", "500"))  # meters

MAX_BATCH_SIZE = int(os.getenv("HEXGRID_MAX_BATCH", "1000"))

LOG_LEVEL = os.getenv("HEXGRID_LOG_LEVEL", "INFO")


def default_system() -> HexSystem:
    """HexSystem configured for requests that don't specify one."""
    return HexSystem(DEFAULT_CENTER_LON, DEFAULT_CENTER_LAT, DEFAULT_SIZE)
