""" Exception hierarchy for the TSPLIB parser.

Every parse or validation failure is raised as a subclass of ParseTspError, so callers
can catch one type and still branch on the concrete kind (missing keyword, malformed
line, bad enum token, bad number, I/O). UnknownNodeError is not a parse failure: it is
raised by strict weight lookups on an already built instance. """

from typing import Optional


class TsplibError(Exception):
    """Base class of every error raised by this package."""


class ParseTspError(TsplibError):
    """Raised when a TSPLIB source cannot be turned into a valid instance."""


class TspIOError(ParseTspError):
    def __init__(self, error: OSError):
        self.error = error
        super().__init__(f"IO error: {error}")


class MissingEntryError(ParseTspError):
    def __init__(self, entry: str):
        self.entry = entry
        super().__init__(f"Missing entry: {entry}")


class InvalidEntryError(ParseTspError):
    def __init__(self, entry: str, message: Optional[str] = None):
        self.entry = entry
        super().__init__(message or f"Invalid entry: {entry}")


class InvalidInputError(ParseTspError):
    def __init__(self, key: str, value: str):
        self.key = key
        self.value = value
        super().__init__(f"Invalid input {key} : {value}")


class InvalidNumberError(InvalidEntryError):
    def __init__(self, token: str, entry: str):
        self.token = token
        super().__init__(entry, f"Invalid number '{token}' in {entry}")


class OtherError(ParseTspError):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnknownNodeError(TsplibError, LookupError):
    def __init__(self, a: int, b: int):
        self.nodes = (a, b)
        super().__init__(f"Unknown node in weight lookup ({a}, {b})")
