# Defines parser options shared by every parse entry point.

from pydantic import BaseModel          # Pydantic BaseModel for validation and schema support


class ParserConfig(BaseModel):          # Options for TspBuilder.parse_*
    encoding: str = "utf-8"             # Text encoding used when reading a file path
    strict_weights: bool = False        # Raise UnknownNodeError on lookups of absent nodes
