""" Parser for TSPLIB problem and tour files.

Typical use:

    from tsplib_parser import parse_path
    tsp = parse_path("berlin52.tsp")
    tsp.weight(1, 2)
"""

from .errors import (
    TsplibError, ParseTspError, TspIOError, MissingEntryError, InvalidEntryError,
    InvalidInputError, InvalidNumberError, OtherError, UnknownNodeError,
)
from .config import ParserConfig
from .models import (
    TspKind, WeightKind, WeightFormat, EdgeFormat, CoordKind, DisplayKind,
    Point, Tsp, TspHeader,
)
from .builder import TspBuilder

parse = TspBuilder.parse
parse_str = TspBuilder.parse_str
parse_path = TspBuilder.parse_path
scan_header_str = TspBuilder.scan_header_str
scan_header_path = TspBuilder.scan_header_path

__version__ = "0.1.0"
