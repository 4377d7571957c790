""" Parsers for the data part of a TSPLIB file, one per section.

Each parser receives the builder and the shared line cursor, consumes the lines that
belong to its section and stores the result on exactly one builder field. Sections
bounded by the dimension read exactly `dimension` records; the others stop at the -1
sentinel. Sections that depend on the dimension or the coordinate kind validate the
specification part first, so a missing prerequisite is reported as a typed error. """

from __future__ import annotations
from typing import TYPE_CHECKING, Callable, Dict, List, Set, Tuple
import logging

from ..cursor import LineCursor, parse_float, parse_count
from ..errors import InvalidEntryError, MissingEntryError, OtherError
from ..models.enums import CoordKind, EdgeFormat, WeightFormat, WeightKind
from ..models.point import Point
from .. import weights
from . import keys as K
from .validator import validate_spec

if TYPE_CHECKING:                                   # pragma: no cover
    from .builder import TspBuilder

logger = logging.getLogger(__name__)

SENTINEL = "-1"


def _require_line(cursor: LineCursor, section: str) -> str:
    line = cursor.next_line()
    if line is None:
        raise InvalidEntryError(section, f"Invalid entry: {section} ended unexpectedly")
    return line


def _fields(line: str, count: int, section: str) -> List[str]:
    parts = line.split()
    if len(parts) < count:
        raise InvalidEntryError(section, f"Invalid entry: {section} expects {count} values "
                                         f"per line, got '{line}'")
    return parts


# ---------- coordinates ----------
def _point_2d(parts: List[str], section: str) -> Point:
    return Point(id=parse_count(parts[0], section),
                 pos=[parse_float(parts[1], section), parse_float(parts[2], section)])


def _point_3d(parts: List[str], section: str) -> Point:
    return Point(id=parse_count(parts[0], section),
                 pos=[parse_float(p, section) for p in parts[1:4]])


_POINT_PARSERS: Dict[CoordKind, Callable[[List[str], str], Point]] = {
    CoordKind.COORD_2D: _point_2d,
    CoordKind.COORD_3D: _point_3d,
}


def parse_node_coord_section(builder: "TspBuilder", cursor: LineCursor) -> None:
    validate_spec(builder)
    section = K.NODE_COORD_SECTION

    kind = builder.coord_kind or CoordKind.UNDEFINED
    parse_point = _POINT_PARSERS.get(kind)
    if parse_point is None:
        raise InvalidEntryError(K.NODE_COORD_TYPE)

    coords: Dict[int, Point] = {}
    for _ in range(builder.dimension or 0):
        parts = _fields(_require_line(cursor, section), 1 + kind.components, section)
        pt = parse_point(parts, section)
        coords[pt.id] = pt

    builder.coords = coords
    logger.debug("%s: %d points (%s)", section, len(coords), kind.value)


# ---------- routing data ----------
def parse_depot_section(builder: "TspBuilder", cursor: LineCursor) -> None:
    validate_spec(builder)
    section = K.DEPOT_SECTION

    depots: Set[int] = set()
    while True:
        line = _require_line(cursor, section)
        if line.startswith(SENTINEL):
            break
        depots.add(parse_count(line.split()[0], section))

    builder.depots = depots
    logger.debug("%s: %d depots", section, len(depots))


def parse_demand_section(builder: "TspBuilder", cursor: LineCursor) -> None:
    validate_spec(builder)
    section = K.DEMAND_SECTION

    demands: Dict[int, float] = {}
    for _ in range(builder.dimension or 0):
        parts = _fields(_require_line(cursor, section), 2, section)
        demands[parse_count(parts[0], section)] = parse_float(parts[1], section)

    builder.demands = demands
    logger.debug("%s: %d demands", section, len(demands))


# ---------- edges ----------
def _read_edge_list(cursor: LineCursor, section: str) -> List[Tuple[int, int]]:
    edges: List[Tuple[int, int]] = []
    while True:
        line = _require_line(cursor, section)
        if line.startswith(SENTINEL):
            break
        parts = _fields(line, 2, section)
        edges.append((parse_count(parts[0], section), parse_count(parts[1], section)))
    return edges


def parse_edge_data_section(builder: "TspBuilder", cursor: LineCursor) -> None:
    section = K.EDGE_DATA_SECTION
    fmt = builder.edge_format or EdgeFormat.UNDEFINED

    if fmt is EdgeFormat.ADJ_LIST:
        raise OtherError(f"{section}: {fmt.value} is not supported")
    if fmt is not EdgeFormat.EDGE_LIST:
        raise InvalidEntryError(K.EDGE_DATA_FORMAT)

    edges = _read_edge_list(cursor, section)
    builder.edges = (builder.edges or []) + edges
    logger.debug("%s: %d edges", section, len(edges))


def parse_fixed_edges_section(builder: "TspBuilder", cursor: LineCursor) -> None:
    section = K.FIXED_EDGES_SECTION
    builder.fixed_edges = _read_edge_list(cursor, section)
    logger.debug("%s: %d edges", section, len(builder.fixed_edges))


# ---------- display ----------
def parse_display_data_section(builder: "TspBuilder", cursor: LineCursor) -> None:
    validate_spec(builder)
    section = K.DISPLAY_DATA_SECTION

    points: List[Point] = []
    for _ in range(builder.dimension or 0):
        parts = _fields(_require_line(cursor, section), 3, section)
        points.append(_point_2d(parts, section))

    builder.disp_coords = points
    logger.debug("%s: %d points", section, len(points))


# ---------- tours ----------
def parse_tour_section(builder: "TspBuilder", cursor: LineCursor) -> None:
    """
    Tours are runs of node ids, each closed by -1. After a closing -1 the next line
    decides: another -1 ends the section (and is consumed), a line starting with a digit
    opens the next tour, anything else (EOF, a keyword) ends the section untouched.
    """
    validate_spec(builder)
    section = K.TOUR_SECTION

    tours: List[List[int]] = []
    current: List[int] = []
    closed = False                                  # last token read was a closing -1

    while True:
        line = cursor.next_line()
        if line is None:
            break

        finished = False
        for tok in line.split():
            if tok == SENTINEL:
                if closed:
                    finished = True
                    break
                if current:
                    tours.append(current)
                current, closed = [], True
            else:
                current.append(parse_count(tok, section))
                closed = False
        if finished:
            break

        if closed:
            nxt = cursor.peek()
            if nxt is None:
                break
            if nxt.startswith(SENTINEL):
                cursor.next_line()
                break
            if not nxt[0].isdigit():
                break

    if current:
        tours.append(current)

    builder.tours = tours
    logger.debug("%s: %d tours", section, len(tours))


# ---------- explicit weights ----------
def parse_edge_weight_section(builder: "TspBuilder", cursor: LineCursor) -> None:
    validate_spec(builder)
    section = K.EDGE_WEIGHT_SECTION

    fmt = builder.weight_format
    if fmt is None:
        if builder.weight_kind is WeightKind.EXPLICIT:
            raise MissingEntryError(K.EDGE_WEIGHT_FORMAT)
        fmt = WeightFormat.UNDEFINED

    rows = weights.read_rows(cursor, fmt, builder.dimension or 0)
    builder.edge_weights = rows
    logger.debug("%s: %d rows (%s)", section, len(rows), fmt.value)
