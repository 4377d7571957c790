""" Validation passes run by the builder.

validate_spec() checks the specification part and runs before every data section that
depends on it and again at build time. validate_data() checks the data part and runs only
at build time. Both stop at the first violated rule. """

from __future__ import annotations
from typing import TYPE_CHECKING

from ..errors import InvalidEntryError, MissingEntryError
from ..models.enums import EdgeFormat, TspKind, WeightKind
from . import keys as K

if TYPE_CHECKING:                                   # pragma: no cover
    from .builder import TspBuilder

_WEIGHTED_KINDS = (TspKind.TSP, TspKind.ATSP, TspKind.CVRP, TspKind.SOP)


def validate_spec(builder: "TspBuilder") -> None:
    if builder.name is None:
        raise MissingEntryError(K.NAME)

    kind = builder.kind
    if kind is None:
        raise MissingEntryError(K.TYPE)
    if kind is TspKind.UNDEFINED:
        raise InvalidEntryError(K.TYPE)

    if kind in _WEIGHTED_KINDS:
        if builder.weight_kind is None:
            raise MissingEntryError(K.EDGE_WEIGHT_TYPE)
        if builder.weight_kind is WeightKind.UNDEFINED:
            raise InvalidEntryError(K.EDGE_WEIGHT_TYPE)
        if kind is TspKind.CVRP and builder.capacity is None:
            raise MissingEntryError(K.CAPACITY)
    elif kind is TspKind.HCP:
        if builder.edge_format is None:
            raise MissingEntryError(K.EDGE_DATA_FORMAT)
        if builder.edge_format is EdgeFormat.UNDEFINED:
            raise InvalidEntryError(K.EDGE_DATA_FORMAT)

    if kind is not TspKind.TOUR and builder.dimension is None:
        raise MissingEntryError(K.DIMENSION)


def validate_data(builder: "TspBuilder") -> None:
    if builder.weight_kind is not None:
        if builder.weight_kind is WeightKind.EXPLICIT:
            if builder.edge_weights is None:
                raise MissingEntryError(K.EDGE_WEIGHT_SECTION)
        elif builder.coords is None:
            raise MissingEntryError(K.NODE_COORD_SECTION)

    if builder.kind is TspKind.TOUR and not builder.tours:
        raise MissingEntryError(K.TOUR_SECTION)
