"""
Demo script for the HexGeoGrids API.

Indexes a handful of points around a location, decodes the indices back and
prints each cell's center and vertices.

Start the API first:
    uvicorn hexgeogrids.main:app --reload

Usage:
    python scripts/demo_index.py
    python scripts/demo_index.py --size 50          # Smaller hexagons
    python scripts/demo_index.py --lon 2.35 --lat 48.86
"""
import argparse
import random

import requests

API_URL = "http://localhost:8000"

# Times Square, NYC
DEMO_LOCATION = {
    "lon": -73.9855,
    "lat": 40.758
}


def main():
    parser = argparse.ArgumentParser(description="Demo hex cell indexing")
    parser.add_argument("--lon", type=float, default=DEMO_LOCATION["lon"], help="Longitude of the demo location")
    parser.add_argument("--lat", type=float, default=DEMO_LOCATION["lat"], help="Latitude of the demo location")
    parser.add_argument("--size", type=float, default=500, help="Hexagon size in meters (default: 500)")
    parser.add_argument("--count", type=int, default=10, help="Number of points to index (default: 10)")
    args = parser.parse_args()

    system = {"center_lon": args.lon, "center_lat": args.lat, "size": args.size}

    print("=" * 60)
    print("HEXGEOGRIDS DEMO")
    print("=" * 60)
    print()
    print(f"Location: ({args.lon}, {args.lat})")
    print(f"Size:     {args.size} m")
    print(f"Points:   {args.count}")
    print()
    print("-" * 60)

    # Check API is running
    try:
        response = requests.get(f"{API_URL}/health", timeout=5)
        if response.status_code != 200:
            print("ERROR: API not healthy")
            return
        print("API is running")
    except requests.ConnectionError:
        print("ERROR: Cannot connect to API at", API_URL)
        print("Make sure to run: uvicorn hexgeogrids.main:app --reload")
        return

    # Scatter points within ~5 km of the location
    points = [
        {
            "lon": args.lon + random.uniform(-0.05, 0.05),
            "lat": args.lat + random.uniform(-0.05, 0.05),
        }
        for _ in range(args.count)
    ]

    response = requests.post(f"{API_URL}/v1/index/batch", json={"system": system, "points": points})
    data = response.json()
    if response.status_code != 200:
        print("ERROR:", data.get("detail"))
        return

    print()
    print(f"System prefix: {data['prefix']}")
    print(f"Unique cells:  {data['unique_cells']} of {data['total_points']} points")
    print()

    for point, ind in zip(points, data["indices"]):
        print(f"  ({point['lon']:.5f}, {point['lat']:.5f}) -> {ind}")

    print()
    print("-" * 60)
    print("DECODED CELLS:")

    for ind in sorted(set(data["indices"])):
        cell = requests.get(f"{API_URL}/v1/cells/{ind}").json()
        lon, lat = cell["center"]
        print()
        print(f"  {ind}  q={cell['q']:4d} r={cell['r']:4d}")
        print(f"    center:   ({lon:.6f}, {lat:.6f})")
        for vlon, vlat in cell["vertices"]:
            print(f"    vertex:   ({vlon:.6f}, {vlat:.6f})")

    print("=" * 60)


if __name__ == "__main__":
    main()
