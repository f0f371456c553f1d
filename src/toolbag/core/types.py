"""Type definitions for toolbag."""

from enum import Enum


class JsonErrorKind(Enum):
    """Kind of JSON codec failure."""

    DEPTH_EXCEEDED = "depth-exceeded"
    STRUCTURAL_MISMATCH = "structural-mismatch"
    CONTROL_CHARACTER = "control-character"
    SYNTAX_ERROR = "syntax-error"
    ENCODING_ERROR = "encoding-error"
    UNENCODABLE = "unencodable"

    @property
    def message(self) -> str:
        """Human-readable description of the failure."""
        return _JSON_ERROR_MESSAGES[self]


_JSON_ERROR_MESSAGES = {
    JsonErrorKind.DEPTH_EXCEEDED: (
        "Unable to parse the given JSON, the maximum stack depth has been exceeded."
    ),
    JsonErrorKind.STRUCTURAL_MISMATCH: (
        "Unable to parse the given JSON, invalid or malformed JSON."
    ),
    JsonErrorKind.CONTROL_CHARACTER: (
        "Unable to parse the given JSON, control character error, "
        "possibly incorrectly encoded."
    ),
    JsonErrorKind.SYNTAX_ERROR: "Unable to parse the given JSON, syntax error.",
    JsonErrorKind.ENCODING_ERROR: (
        "Unable to parse the given JSON, malformed UTF-8 characters, "
        "possibly incorrectly encoded."
    ),
    JsonErrorKind.UNENCODABLE: "Unable to encode the given value as JSON.",
}
