"""Error taxonomy for tag-shape enumeration.

Every fatal condition of a run is an ``XmlEnumError`` carrying the process
exit code the command-line tool terminates with. End of input is not an
error and has no exception here.
"""

from typing import Optional


class XmlEnumError(Exception):
    """Base exception for fatal enumeration errors."""

    exit_code = 1


class UsageError(XmlEnumError):
    """Raised when the command line does not name a root element and a file."""

    exit_code = 2


class InputOpenError(XmlEnumError):
    """Raised when an input file cannot be opened for reading."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Couldn't open {path}: {reason}")
        self.path = path
        self.reason = reason


class ParseError(XmlEnumError):
    """Raised when the tokenizer reports malformed markup."""

    def __init__(self, path: Optional[str], reason: str) -> None:
        super().__init__(f"Couldn't parse {path or '<input>'}: {reason}")
        self.path = path
        self.reason = reason
