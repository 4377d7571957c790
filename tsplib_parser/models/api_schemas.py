from typing import List, Tuple
from pydantic import BaseModel, Field
from .instance import Tsp, TspHeader

class ParseRequest(BaseModel):
    text: str = Field(..., description="TSPLIB file content")
    strict: bool = False

class ParseResponse(BaseModel):
    status: str
    instance: Tsp

class HeaderRequest(BaseModel):
    text: str

class HeaderResponse(BaseModel):
    status: str
    header: TspHeader

class WeightsRequest(BaseModel):
    text: str
    pairs: List[Tuple[int, int]] = Field(..., description="(a, b) pairs: matrix indices if EXPLICIT, node ids otherwise")
    strict: bool = False

class WeightsResponse(BaseModel):
    status: str
    weights: List[float]
