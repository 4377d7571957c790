""" The Tsp model is the validated, immutable result of parsing a TSPLIB source.

It holds:

Specification part: name, problem kind, comment, dimension, capacity and the five format
specifiers (each defaults to its UNDEFINED variant rather than None).
Data part: node coordinates keyed by node id, depots, demands, edge list, fixed edges,
display points, the explicit edge weights in their stored (possibly triangular) shape,
and tours.

weight(a, b) answers edge-weight queries. For EXPLICIT instances a and b are 0-based
matrix indices into the stored rows; for every other weight kind they are node ids
looked up in node_coords and fed to the distance formula. A node id without
coordinates costs 0 unless strict lookups are requested.

The model is frozen and every sequence field is a tuple. node_coords and demands stay
plain dicts so they serialize as JSON objects; treat them as read-only and use
model_copy(update=...) to derive a changed instance.

TspHeader is the specification part alone, as returned by lenient header scanning. """

from typing import Dict, FrozenSet, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat, model_validator

from .enums import CoordKind, DisplayKind, EdgeFormat, TspKind, WeightFormat, WeightKind
from .point import Point
from .. import metric, weights
from ..errors import UnknownNodeError


class Tsp(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Specification part
    name: str
    kind: TspKind
    comment: str = ""
    dimension: int = Field(default=0, ge=0)
    capacity: int = Field(default=0, ge=0)
    weight_kind: WeightKind = WeightKind.UNDEFINED
    weight_format: WeightFormat = WeightFormat.UNDEFINED
    edge_format: EdgeFormat = EdgeFormat.UNDEFINED
    coord_kind: CoordKind = CoordKind.UNDEFINED
    disp_kind: DisplayKind = DisplayKind.UNDEFINED

    # Data part
    node_coords: Dict[int, Point] = Field(default_factory=dict)       # read-only, see module docstring
    depots: FrozenSet[int] = frozenset()
    demands: Dict[int, NonNegativeFloat] = Field(default_factory=dict)  # read-only
    edges: Tuple[Tuple[int, int], ...] = ()
    fixed_edges: Tuple[Tuple[int, int], ...] = ()
    disp_coords: Tuple[Point, ...] = ()
    edge_weights: Tuple[Tuple[float, ...], ...] = ()        # rows in the stored shape
    tours: Tuple[Tuple[int, ...], ...] = ()

    strict: bool = False                            # default for weight(..., strict=None)

    @model_validator(mode="after")
    def _check_depot_demands(self):
        for depot in self.depots:
            if self.demands.get(depot, 0.0) != 0.0:
                raise ValueError(f"depot {depot} must have demand 0 (got {self.demands[depot]})")
        return self

    def weight(self, a: int, b: int, strict: Optional[bool] = None) -> float:
        """Edge weight between a and b (matrix indices if EXPLICIT, node ids otherwise)."""
        strict = self.strict if strict is None else strict

        if self.weight_kind is WeightKind.EXPLICIT:
            n = self.dimension
            if not (0 <= a < n and 0 <= b < n):
                if strict:
                    raise UnknownNodeError(a, b)
                raise IndexError(f"matrix index out of range for dimension {n}: ({a}, {b})")
            return weights.lookup(self.weight_format, self.edge_weights, a, b)

        na, nb = self.node_coords.get(a), self.node_coords.get(b)
        if na is None or nb is None:
            if strict:
                raise UnknownNodeError(a, b)
            return 0.0
        return metric.cost(self.weight_kind, na.pos, nb.pos)

    def __str__(self) -> str:
        return (
            f"Spec: {self.name} {self.kind} {self.dimension} {self.weight_kind} "
            f"{self.weight_format} {self.edge_format} {self.coord_kind} {self.disp_kind}\n"
            f"Data: {self.node_coords} {self.edge_weights} {self.disp_coords} {self.fixed_edges}"
        )


class TspHeader(BaseModel):
    name: Optional[str] = None
    kind: TspKind = TspKind.UNDEFINED
    comment: str = ""
    dimension: Optional[int] = None
    capacity: Optional[int] = None
    weight_kind: WeightKind = WeightKind.UNDEFINED
    weight_format: WeightFormat = WeightFormat.UNDEFINED
    edge_format: EdgeFormat = EdgeFormat.UNDEFINED
    coord_kind: CoordKind = CoordKind.UNDEFINED
    disp_kind: DisplayKind = DisplayKind.UNDEFINED
