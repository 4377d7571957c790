""" Distance functions defined by the TSPLIB format.

Each function takes two coordinate sequences (node positions) and uses only the
components its formula needs: 2-D formulas read x and y, 3-D formulas also read z
(a missing z is treated as 0). cost() selects the formula from a WeightKind; kinds
without a formula (EXPLICIT, SPECIAL, UNDEFINED) cost 0. """

from __future__ import annotations
from typing import Callable, Dict, Sequence
import math

from .models.enums import WeightKind

EARTH_RADIUS = 6378.388

Coords = Sequence[float]


def _xyz(p: Coords):
    return p[0], p[1], (p[2] if len(p) > 2 else 0.0)


def euc_2d(a: Coords, b: Coords) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def euc_3d(a: Coords, b: Coords) -> float:
    x1, y1, z1 = _xyz(a)
    x2, y2, z2 = _xyz(b)
    return math.hypot(x1 - x2, y1 - y2, z1 - z2)


def man_2d(a: Coords, b: Coords) -> float:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def man_3d(a: Coords, b: Coords) -> float:
    x1, y1, z1 = _xyz(a)
    x2, y2, z2 = _xyz(b)
    return abs(x1 - x2) + abs(y1 - y2) + abs(z1 - z2)


def max_2d(a: Coords, b: Coords) -> float:
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


def max_3d(a: Coords, b: Coords) -> float:
    x1, y1, z1 = _xyz(a)
    x2, y2, z2 = _xyz(b)
    return max(abs(x1 - x2), abs(y1 - y2), abs(z1 - z2))


def ceil_2d(a: Coords, b: Coords) -> float:
    """Euclidean distance rounded to the nearest integer (halves round up)."""
    d = euc_2d(a, b)
    if not math.isfinite(d):
        return d
    return float(math.floor(d + 0.5))


def _to_geo_coord(x: float) -> float:
    # DDD.MM: integer part is degrees, fractional part is minutes
    deg = math.trunc(x)
    minutes = x - deg
    return math.pi * (deg + 5.0 * minutes / 3.0) / 180.0


def geo(a: Coords, b: Coords) -> float:
    if not all(math.isfinite(v) for v in (a[0], a[1], b[0], b[1])):
        return math.inf
    lat_a, lon_a = _to_geo_coord(a[0]), _to_geo_coord(a[1])
    lat_b, lon_b = _to_geo_coord(b[0]), _to_geo_coord(b[1])
    # degrees near the float limit overflow once converted to radians
    if not all(math.isfinite(v) for v in (lat_a - lat_b, lat_a + lat_b, lon_a - lon_b)):
        return math.inf

    q1 = math.cos(lon_a - lon_b)
    q2 = math.cos(lat_a - lat_b)
    q3 = math.cos(lat_a + lat_b)
    arg = 0.5 * ((1.0 + q1) * q2 - (1.0 - q1) * q3)
    # rounding noise can push identical points slightly above 1
    arg = max(-1.0, min(1.0, arg))
    return EARTH_RADIUS * math.acos(arg) + 1.0


def att(a: Coords, b: Coords) -> float:
    """Pseudo-Euclidean distance used by att48 and att532."""
    return math.hypot(a[0] - b[0], a[1] - b[1]) / math.sqrt(10.0)


def _xray_deltas(a: Coords, b: Coords):
    x1, y1, z1 = _xyz(a)
    x2, y2, z2 = _xyz(b)
    dx = abs(x1 - x2)
    return min(dx, abs(dx - 360.0)), abs(y1 - y2), abs(z1 - z2)


def xray1(a: Coords, b: Coords) -> float:
    p, c, t = _xray_deltas(a, b)
    return 100.0 * max(p, c, t)


def xray2(a: Coords, b: Coords) -> float:
    p, c, t = _xray_deltas(a, b)
    return 100.0 * max(p / 1.25, c / 1.5, t / 1.15)


METRICS: Dict[WeightKind, Callable[[Coords, Coords], float]] = {
    WeightKind.EUC_2D: euc_2d,
    WeightKind.EUC_3D: euc_3d,
    WeightKind.MAX_2D: max_2d,
    WeightKind.MAX_3D: max_3d,
    WeightKind.MAN_2D: man_2d,
    WeightKind.MAN_3D: man_3d,
    WeightKind.CEIL_2D: ceil_2d,
    WeightKind.GEO: geo,
    WeightKind.ATT: att,
    WeightKind.XRAY1: xray1,
    WeightKind.XRAY2: xray2,
}


def cost(kind: WeightKind, a: Coords, b: Coords) -> float:
    """Distance between two positions under `kind`; 0 for kinds without a formula."""
    func = METRICS.get(kind)
    if func is None:
        return 0.0
    return func(a, b)
