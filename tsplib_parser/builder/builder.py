""" TspBuilder drives the line-by-line scan of a TSPLIB source and assembles a Tsp.

The scan recognises each line by its leading keyword: a specification keyword sets one
scalar field, a section header hands the shared cursor to the matching section parser,
EOF stops the scan, and anything else is an invalid entry. build() validates both parts,
fills every unset field with its default and returns the immutable instance. A builder
is used for one parse only and is discarded on the first error. """

from __future__ import annotations
from pathlib import Path
from typing import IO, Callable, Dict, Iterable, List, Optional, Set, Tuple, TypeVar, Union
import logging
import os

from pydantic import ValidationError

from ..config import ParserConfig
from ..cursor import LineCursor, parse_count
from ..errors import InvalidEntryError, OtherError, TspIOError
from ..models.enums import CoordKind, DisplayKind, EdgeFormat, TspKind, WeightFormat, WeightKind
from ..models.instance import Tsp, TspHeader
from ..models.point import Point
from . import keys as K
from . import sections
from .validator import validate_data, validate_spec

logger = logging.getLogger(__name__)

Source = Union[str, os.PathLike]
T = TypeVar("T")


def split_entry(line: str) -> Tuple[str, Optional[str]]:
    """Split 'KEY: value' / 'KEY : value' into (KEY, value); value is None without a colon."""
    if ":" in line:
        key, value = line.split(":", 1)
        return key.strip(), value.strip()
    return line.split(None, 1)[0], None


def _read_path(path: Source, config: ParserConfig, read: Callable[[IO[str]], T]) -> T:
    """Open `path` with the configured encoding and hand the file to `read`."""
    path = Path(path)
    if path.is_dir():
        raise OtherError("Path is a directory")
    try:
        with path.open("r", encoding=config.encoding) as fh:
            return read(fh)
    except OSError as e:
        raise TspIOError(e) from e
    except UnicodeDecodeError as e:
        raise OtherError(f"Cannot decode {path} as {config.encoding}: {e.reason}") from e


# Tsp fields reported under the keyword/section they come from
_FIELD_ENTRIES = {
    "name": K.NAME, "kind": K.TYPE, "dimension": K.DIMENSION, "capacity": K.CAPACITY,
    "node_coords": K.NODE_COORD_SECTION, "depots": K.DEPOT_SECTION,
    "demands": K.DEMAND_SECTION, "edges": K.EDGE_DATA_SECTION,
    "fixed_edges": K.FIXED_EDGES_SECTION, "disp_coords": K.DISPLAY_DATA_SECTION,
    "edge_weights": K.EDGE_WEIGHT_SECTION, "tours": K.TOUR_SECTION,
}


class TspBuilder:
    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or ParserConfig()

        # Specification part
        self.name: Optional[str] = None
        self.kind: Optional[TspKind] = None
        self.comment: Optional[str] = None
        self.dimension: Optional[int] = None
        self.capacity: Optional[int] = None
        self.weight_kind: Optional[WeightKind] = None
        self.weight_format: Optional[WeightFormat] = None
        self.edge_format: Optional[EdgeFormat] = None
        self.coord_kind: Optional[CoordKind] = None
        self.disp_kind: Optional[DisplayKind] = None
        self._coord_kind_given = False      # NODE_COORD_TYPE seen; EDGE_WEIGHT_TYPE must not override

        # Data part
        self.coords: Optional[Dict[int, Point]] = None
        self.depots: Optional[Set[int]] = None
        self.demands: Optional[Dict[int, float]] = None
        self.edges: Optional[List[Tuple[int, int]]] = None
        self.fixed_edges: Optional[List[Tuple[int, int]]] = None
        self.disp_coords: Optional[List[Point]] = None
        self.edge_weights: Optional[List[List[float]]] = None
        self.tours: Optional[List[List[int]]] = None

    # ---------- specification keywords ----------
    def _set_name(self, value: str) -> None:
        self.name = value

    def _set_kind(self, value: str) -> None:
        self.kind = TspKind.from_token(value)

    def _set_comment(self, value: str) -> None:
        # repeated COMMENT lines are joined; continuation lines without the keyword are not
        self.comment = value if self.comment is None else f"{self.comment}\n{value}"

    def _set_dimension(self, value: str) -> None:
        self.dimension = parse_count(value, K.DIMENSION)

    def _set_capacity(self, value: str) -> None:
        self.capacity = parse_count(value, K.CAPACITY)

    def _set_weight_kind(self, value: str) -> None:
        self.weight_kind = WeightKind.from_token(value)
        if not self._coord_kind_given:
            self.coord_kind = CoordKind.from_weight_kind(self.weight_kind)

    def _set_weight_format(self, value: str) -> None:
        self.weight_format = WeightFormat.from_token(value)

    def _set_edge_format(self, value: str) -> None:
        self.edge_format = EdgeFormat.from_token(value)

    def _set_coord_kind(self, value: str) -> None:
        self.coord_kind = CoordKind.from_token(value)
        self._coord_kind_given = True

    def _set_disp_kind(self, value: str) -> None:
        self.disp_kind = DisplayKind.from_token(value)

    _SPEC_HANDLERS: Dict[str, Callable[["TspBuilder", str], None]] = {
        K.NAME: _set_name,
        K.TYPE: _set_kind,
        K.COMMENT: _set_comment,
        K.DIMENSION: _set_dimension,
        K.CAPACITY: _set_capacity,
        K.EDGE_WEIGHT_TYPE: _set_weight_kind,
        K.EDGE_WEIGHT_FORMAT: _set_weight_format,
        K.EDGE_DATA_FORMAT: _set_edge_format,
        K.NODE_COORD_TYPE: _set_coord_kind,
        K.DISPLAY_DATA_TYPE: _set_disp_kind,
    }

    _SECTION_HANDLERS: Dict[str, Callable[["TspBuilder", LineCursor], None]] = {
        K.NODE_COORD_SECTION: sections.parse_node_coord_section,
        K.DEPOT_SECTION: sections.parse_depot_section,
        K.DEMAND_SECTION: sections.parse_demand_section,
        K.EDGE_DATA_SECTION: sections.parse_edge_data_section,
        K.FIXED_EDGES_SECTION: sections.parse_fixed_edges_section,
        K.DISPLAY_DATA_SECTION: sections.parse_display_data_section,
        K.TOUR_SECTION: sections.parse_tour_section,
        K.EDGE_WEIGHT_SECTION: sections.parse_edge_weight_section,
    }

    # ---------- scan ----------
    def feed(self, cursor: LineCursor) -> "TspBuilder":
        """Consume lines from the cursor up to EOF (or end of input)."""
        for line in cursor:
            if line.startswith(K.EOF_MARKER):
                break

            key, value = split_entry(line)
            spec_handler = self._SPEC_HANDLERS.get(key)
            if spec_handler is not None:
                if value is None:
                    raise InvalidEntryError(line)
                spec_handler(self, value)
                continue

            section_handler = self._SECTION_HANDLERS.get(key)
            if section_handler is not None:
                logger.debug("line %d: entering %s", cursor.lineno, key)
                section_handler(self, cursor)
                continue

            raise InvalidEntryError(line)
        return self

    def build(self) -> Tsp:
        validate_spec(self)
        validate_data(self)

        try:
            tsp = Tsp(
                name=self.name,
                kind=self.kind,
                comment=self.comment or "",
                dimension=self.dimension or 0,
                capacity=self.capacity or 0,
                weight_kind=self.weight_kind or WeightKind.UNDEFINED,
                weight_format=self.weight_format or WeightFormat.UNDEFINED,
                edge_format=self.edge_format or EdgeFormat.UNDEFINED,
                coord_kind=self.coord_kind or CoordKind.UNDEFINED,
                disp_kind=self.disp_kind or DisplayKind.UNDEFINED,
                node_coords=self.coords or {},
                depots=frozenset(self.depots or ()),
                demands=self.demands or {},
                edges=self.edges or [],
                fixed_edges=self.fixed_edges or [],
                disp_coords=self.disp_coords or [],
                edge_weights=self.edge_weights or [],
                tours=self.tours or [],
                strict=self.config.strict_weights,
            )
        except ValidationError as e:
            err = e.errors()[0]
            loc = err.get("loc") or ("demands",)
            entry = _FIELD_ENTRIES.get(str(loc[0]), str(loc[0]))
            raise InvalidEntryError(entry, f"Invalid entry: {entry}: {err.get('msg')}") from e

        logger.info("parsed %s (%s, dimension %d, %s)", tsp.name, tsp.kind, tsp.dimension,
                    tsp.weight_kind)
        return tsp

    # ---------- entry points ----------
    @classmethod
    def parse_lines(cls, lines: Iterable[str], config: Optional[ParserConfig] = None) -> Tsp:
        return cls(config).feed(LineCursor(lines)).build()

    @classmethod
    def parse_str(cls, text: str, config: Optional[ParserConfig] = None) -> Tsp:
        return cls.parse_lines(text.splitlines(), config)

    @classmethod
    def parse_path(cls, path: Source, config: Optional[ParserConfig] = None) -> Tsp:
        config = config or ParserConfig()
        return _read_path(path, config, lambda fh: cls.parse_lines(fh, config))

    @classmethod
    def parse(cls, source: Source, config: Optional[ParserConfig] = None) -> Tsp:
        """Parse TSPLIB text, or the file at `source` when it is a path object."""
        if isinstance(source, os.PathLike):
            return cls.parse_path(source, config)
        return cls.parse_str(source, config)

    # ---------- lenient header scan ----------
    @classmethod
    def scan_header(cls, lines: Iterable[str]) -> TspHeader:
        """
        Read the specification part only, without validation. Unknown enum tokens become
        UNDEFINED, unknown keys and malformed numbers are ignored, and the scan stops at
        the first section header or EOF.
        """
        fields: Dict[str, object] = {}
        for line in LineCursor(lines):
            if line.startswith(K.EOF_MARKER):
                break
            key, value = split_entry(line)
            if key in K.SECTIONS:
                break
            if value is None:
                continue

            if key == K.NAME:
                fields["name"] = value
            elif key == K.TYPE:
                fields["kind"] = TspKind.lenient(value)
            elif key == K.COMMENT:
                # repeated COMMENT lines are joined, as in a full parse
                fields["comment"] = f"{fields['comment']}\n{value}" if "comment" in fields else value
            elif key in (K.DIMENSION, K.CAPACITY):
                try:
                    fields[key.lower()] = int(value)
                except ValueError:
                    logger.debug("header: ignoring %s value %r", key, value)
            elif key == K.EDGE_WEIGHT_TYPE:
                fields["weight_kind"] = WeightKind.lenient(value)
            elif key == K.EDGE_WEIGHT_FORMAT:
                fields["weight_format"] = WeightFormat.lenient(value)
            elif key == K.EDGE_DATA_FORMAT:
                fields["edge_format"] = EdgeFormat.lenient(value)
            elif key == K.NODE_COORD_TYPE:
                fields["coord_kind"] = CoordKind.lenient(value)
            elif key == K.DISPLAY_DATA_TYPE:
                fields["disp_kind"] = DisplayKind.lenient(value)

        if "coord_kind" not in fields and "weight_kind" in fields:
            fields["coord_kind"] = CoordKind.from_weight_kind(fields["weight_kind"])
        return TspHeader(**fields)

    @classmethod
    def scan_header_str(cls, text: str) -> TspHeader:
        return cls.scan_header(text.splitlines())

    @classmethod
    def scan_header_path(cls, path: Source, config: Optional[ParserConfig] = None) -> TspHeader:
        return _read_path(path, config or ParserConfig(), cls.scan_header)
