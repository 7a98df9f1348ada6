import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import polyslice
from shapely.geometry import Polygon, LineString

from plot_geometry import plot_slice

square = Polygon([(0, 0), (0, 10), (10, 10), (10, 0), (0, 0)])
u_shape = Polygon([(0, 0), (10, 0), (10, 10), (7, 10), (7, 3), (3, 3), (3, 10), (0, 10)])

cases = {
    'straight': (square, LineString([(5, 15), (5, -15)])),
    'diagonal': (square, LineString([(-1, -2), (12, 11)])),
    'polyline': (square, LineString([(-2, 4), (4, 6), (6, 3), (12, 5)])),
    'u-shape': (u_shape, LineString([(-1, 6), (11, 6)])),
    'miss': (square, LineString([(20, 0), (20, 10)])),
}

for name, (polygon, splitter) in cases.items():
    print(f"Case: {name}")
    result = polyslice.slice_polygon_detailed(polygon, splitter, verbose=True)
    print(result)
    plot_slice(polygon, splitter, result.polygons, title=f"Slicing: {name}")
