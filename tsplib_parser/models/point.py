""" The Point model is a node coordinate as read from NODE_COORD_SECTION or DISPLAY_DATA_SECTION.

It keeps the node id next to its position so display points (an ordered list) and node
coordinates (keyed by id) share one type. Positions carry 2 or 3 components. """

from typing import Tuple                                  # Type hints for the position vector
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Point(BaseModel):                                   # Node coordinate
    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=0)                                 # Node identifier as written in the file
    pos: Tuple[float, ...]                                # (x, y) or (x, y, z)

    @field_validator("pos")
    @classmethod
    def _check_components(cls, v: Tuple[float, ...]):
        if len(v) not in (2, 3):
            raise ValueError(f"a point has 2 or 3 components (got {len(v)})")
        return v

    @property
    def x(self) -> float:
        return self.pos[0]

    @property
    def y(self) -> float:
        return self.pos[1]

    @property
    def z(self) -> float:                                 # 0.0 for two-dimensional points
        return self.pos[2] if len(self.pos) > 2 else 0.0
