""" Closed sets of keyword values recognised in the specification part of a TSPLIB file.

Each enumeration's value is the token as written in the file. Two conversions exist for
every enumeration: from_token() is strict and raises InvalidInputError naming the
keyword, lenient() falls back to the UNDEFINED variant. Both read the same lookup table,
built once from the members. """

from __future__ import annotations
from enum import Enum
from typing import Dict, List

from ..errors import InvalidInputError


class TokenEnum(str, Enum):
    __keyword__ = ""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def _table(cls) -> Dict[str, "TokenEnum"]:
        return {m.value: m for m in cls if m.name != "UNDEFINED"}

    @classmethod
    def from_token(cls, token: str):
        member = cls._table().get(token)
        if member is None:
            raise InvalidInputError(cls.__keyword__, token)
        return member

    @classmethod
    def lenient(cls, token: str):
        return cls._table().get(token, cls["UNDEFINED"])


class TspKind(TokenEnum):
    __keyword__ = "TYPE"

    TSP = "TSP"             # symmetric travelling salesman problem
    ATSP = "ATSP"           # asymmetric travelling salesman problem
    SOP = "SOP"             # sequential ordering problem
    HCP = "HCP"             # Hamiltonian cycle problem
    CVRP = "CVRP"           # capacitated vehicle routing problem
    TOUR = "TOUR"           # collection of tours
    UNDEFINED = "UNDEFINED"


class WeightKind(TokenEnum):
    __keyword__ = "EDGE_WEIGHT_TYPE"

    EXPLICIT = "EXPLICIT"
    EUC_2D = "EUC_2D"
    EUC_3D = "EUC_3D"
    MAX_2D = "MAX_2D"
    MAX_3D = "MAX_3D"
    MAN_2D = "MAN_2D"
    MAN_3D = "MAN_3D"
    CEIL_2D = "CEIL_2D"
    GEO = "GEO"
    ATT = "ATT"
    XRAY1 = "XRAY1"
    XRAY2 = "XRAY2"
    CUSTOM = "SPECIAL"
    UNDEFINED = "UNDEFINED"


class WeightFormat(TokenEnum):
    __keyword__ = "EDGE_WEIGHT_FORMAT"

    FUNCTION = "FUNCTION"
    FULL_MATRIX = "FULL_MATRIX"
    UPPER_ROW = "UPPER_ROW"
    LOWER_ROW = "LOWER_ROW"
    UPPER_DIAG_ROW = "UPPER_DIAG_ROW"
    LOWER_DIAG_ROW = "LOWER_DIAG_ROW"
    UPPER_COL = "UPPER_COL"
    LOWER_COL = "LOWER_COL"
    UPPER_DIAG_COL = "UPPER_DIAG_COL"
    LOWER_DIAG_COL = "LOWER_DIAG_COL"
    UNDEFINED = "UNDEFINED"

    def row_lengths(self, n: int) -> List[int]:
        """Length of each stored row for dimension n, in file order."""
        if self is WeightFormat.FULL_MATRIX:
            return [n] * n
        if self in (WeightFormat.UPPER_ROW, WeightFormat.LOWER_COL):
            return list(range(n - 1, 0, -1))
        if self in (WeightFormat.LOWER_ROW, WeightFormat.UPPER_COL):
            return list(range(1, n))
        if self in (WeightFormat.UPPER_DIAG_ROW, WeightFormat.LOWER_DIAG_COL):
            return list(range(n, 0, -1))
        if self in (WeightFormat.LOWER_DIAG_ROW, WeightFormat.UPPER_DIAG_COL):
            return list(range(1, n + 1))
        return []

    def token_count(self, n: int) -> int:
        return sum(self.row_lengths(n))


class EdgeFormat(TokenEnum):
    __keyword__ = "EDGE_DATA_FORMAT"

    EDGE_LIST = "EDGE_LIST"
    ADJ_LIST = "ADJ_LIST"
    UNDEFINED = "UNDEFINED"


class CoordKind(TokenEnum):
    __keyword__ = "NODE_COORD_TYPE"

    COORD_2D = "TWOD_COORDS"
    COORD_3D = "THREED_COORDS"
    NO_COORDS = "NO_COORDS"
    UNDEFINED = "UNDEFINED"

    @classmethod
    def from_weight_kind(cls, kind: WeightKind) -> "CoordKind":
        """Coordinate shape implied by a distance formula."""
        if kind in (WeightKind.EUC_2D, WeightKind.MAX_2D, WeightKind.MAN_2D,
                    WeightKind.CEIL_2D, WeightKind.GEO, WeightKind.ATT):
            return cls.COORD_2D
        if kind in (WeightKind.EUC_3D, WeightKind.MAX_3D, WeightKind.MAN_3D):
            return cls.COORD_3D
        return cls.UNDEFINED

    @property
    def components(self) -> int:
        return {CoordKind.COORD_2D: 2, CoordKind.COORD_3D: 3}.get(self, 0)


class DisplayKind(TokenEnum):
    __keyword__ = "DISPLAY_DATA_TYPE"

    COORD_DISPLAY = "COORD_DISPLAY"
    TWOD_DISPLAY = "TWOD_DISPLAY"
    NO_DISPLAY = "NO_DISPLAY"
    UNDEFINED = "UNDEFINED"
