from .enums import TspKind, WeightKind, WeightFormat, EdgeFormat, CoordKind, DisplayKind
from .point import Point
from .instance import Tsp, TspHeader

from .api_schemas import (
    ParseRequest, ParseResponse,
    HeaderRequest, HeaderResponse,
    WeightsRequest, WeightsResponse,
)
