# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of everything that flows between the
# tool catalog, the request translator and the MCP server.  They carry no
# behaviour beyond small rendering helpers.
#
# THE THREE NOUNS:
#   - FieldSpec / ToolHints / ToolSpec  →  what a tool IS (static catalog data)
#   - ToolResult                        →  what a tool call RETURNS
#
# All of them are frozen: the catalog is built once at import time and is
# never mutated afterwards.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Literal


HttpMethod = Literal["GET", "POST", "DELETE"]

FieldKind = Literal[
    "integer",
    "number",
    "string",
    "boolean",
    "url",
    "datetime",
    "string_list",
]

# JSON Schema fragment for every field kind.  "url" and "datetime" are
# strings on the wire; the format keyword tells the host what to expect.
_KIND_TO_JSON_SCHEMA: dict[str, dict[str, Any]] = {
    "integer": {"type": "integer"},
    "number": {"type": "number"},
    "string": {"type": "string"},
    "boolean": {"type": "boolean"},
    "url": {"type": "string", "format": "uri"},
    "datetime": {"type": "string", "format": "date-time"},
    "string_list": {"type": "array", "items": {"type": "string"}},
}


# -----------------------------------------------------------------------------
# FieldSpec — one argument of one tool
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class FieldSpec:
    """A single input field: its type, whether it's required, and what it's for.

    The description is shown to the model by the invoking host, so it should
    read like an instruction, not like a type signature.
    """

    name: str                          # Wire name, e.g. "feedId"
    kind: FieldKind                    # See _KIND_TO_JSON_SCHEMA
    description: str                   # Human-readable purpose
    required: bool = False

    def json_schema(self) -> dict[str, Any]:
        schema = dict(_KIND_TO_JSON_SCHEMA[self.kind])
        schema["description"] = self.description
        return schema


# -----------------------------------------------------------------------------
# ToolHints — MCP behaviour annotations
# -----------------------------------------------------------------------------
# Hosts use these to decide whether to ask the user before calling a tool
# (e.g. destructive=True on "unsubscribe").
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolHints:
    read_only: bool = True
    destructive: bool = False
    idempotent: bool = True
    open_world: bool = True


# -----------------------------------------------------------------------------
# ToolSpec — one catalog entry
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolSpec:
    """Static declaration of a tool: its schema plus a fixed HTTP binding.

    Every call to the tool becomes exactly one ``http_method`` request to
    ``path`` on the Folo API, with the validated arguments as query string
    (GET) or JSON body (POST/DELETE).
    """

    name: str
    description: str
    path: str                          # "/entries", "/reads/all", ...
    http_method: HttpMethod
    input_fields: tuple[FieldSpec, ...] = ()
    hints: ToolHints = field(default_factory=ToolHints)

    def input_schema(self) -> dict[str, Any]:
        """Render the input fields as a JSON Schema object."""
        schema: dict[str, Any] = {
            "type": "object",
            "properties": {f.name: f.json_schema() for f in self.input_fields},
        }
        required = [f.name for f in self.input_fields if f.required]
        if required:
            schema["required"] = required
        return schema


# -----------------------------------------------------------------------------
# ToolResult — the uniform outcome of every tool call
# -----------------------------------------------------------------------------
# There are exactly two shapes:
#   ok    → text is pretty-printed JSON, or the literal "Success"
#   error → text is a human-readable message, is_error=True
# The translator never produces anything else and never raises.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolResult:
    """The single text block returned for a tool call."""

    text: str
    is_error: bool = False

    @classmethod
    def ok(cls, text: str) -> "ToolResult":
        return cls(text=text)

    @classmethod
    def error(cls, text: str) -> "ToolResult":
        return cls(text=text, is_error=True)
