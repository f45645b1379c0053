"""
Artifact model for processor code generation.

The input document, inferred types and generated artifacts are plain
data; rendering to source text happens only in the language renderers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

# Keys accepted for each document field, first match wins
PROCESSOR_NAME_KEYS = ("PaymentProcessorName", "processorName")
TYPE_KEYS = ("type",)
AUTH_TOKEN_KEYS = ("auth", "authTokens")
DATA_KEYS = ("data",)


class TypeKind(Enum):
    """Kinds of inferred field types."""

    STRING = "string"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT64 = "float64"
    BOOLEAN = "boolean"
    LIST = "list"
    RECORD = "record"
    UNTYPED_OBJECT = "untyped_object"
    OPAQUE = "opaque"


@dataclass(frozen=True)
class TypeDescriptor:
    """Inferred type of a JSON value."""

    kind: TypeKind
    record_name: Optional[str] = None
    element: Optional["TypeDescriptor"] = None

    @classmethod
    def primitive(cls, kind: TypeKind) -> "TypeDescriptor":
        return cls(kind=kind)

    @classmethod
    def record(cls, name: str) -> "TypeDescriptor":
        return cls(kind=TypeKind.RECORD, record_name=name)

    @classmethod
    def list_of(cls, element: "TypeDescriptor") -> "TypeDescriptor":
        return cls(kind=TypeKind.LIST, element=element)

    @classmethod
    def opaque(cls) -> "TypeDescriptor":
        return cls(kind=TypeKind.OPAQUE)

    def describe(self) -> str:
        """Short human-readable form, e.g. ``list<Address>``."""
        if self.kind == TypeKind.RECORD:
            return self.record_name
        if self.kind == TypeKind.LIST:
            return f"list<{self.element.describe()}>"
        return self.kind.value


STRING = TypeDescriptor.primitive(TypeKind.STRING)


class RecordKind(Enum):
    """How a record artifact came to exist."""

    STRUCTURED = "structured"  # top-level DTO from a JSON object
    NESTED = "nested"  # produced by the nested record expander
    RAW = "raw"  # request body was not a JSON object
    ERROR = "error"  # emission failed, diagnostic record


@dataclass(frozen=True)
class RecordField:
    """One field of a record artifact."""

    name: str
    json_name: str
    type: TypeDescriptor
    default_value: Optional[str] = None


@dataclass(frozen=True)
class RecordArtifact:
    """A generated data-holder type definition."""

    name: str
    package: str
    fields: Tuple[RecordField, ...] = ()
    kind: RecordKind = RecordKind.STRUCTURED
    description: Optional[str] = None

    @property
    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]

    def get_field(self, name: str) -> Optional[RecordField]:
        """Get field by name."""
        for record_field in self.fields:
            if record_field.name == name:
                return record_field
        return None


@dataclass(frozen=True)
class Parameter:
    """A parameter of a synthesized method."""

    name: str
    type: str


@dataclass(frozen=True)
class MethodSpec:
    """A method of the orchestration artifact, body given as source lines."""

    name: str
    return_type: str
    parameters: Tuple[Parameter, ...] = ()
    body: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ConstantField:
    """A string constant declared on the orchestration artifact."""

    name: str
    value: str


@dataclass(frozen=True)
class OrchestrationArtifact:
    """The single per-run class implementing the capability contract."""

    name: str
    package: str
    dto_package: Optional[str]
    contract_name: str
    contract_import: Optional[str]
    constants: Tuple[ConstantField, ...]
    methods: Tuple[MethodSpec, ...]


@dataclass
class ApiEntry:
    """One element of the document's ``data`` array."""

    api_name: Optional[str]
    request_body: Any = None
    has_api_node: bool = True

    @classmethod
    def from_json(cls, node: Any) -> "ApiEntry":
        if not isinstance(node, dict):
            return cls(api_name=None, has_api_node=False)

        api_node = node.get("api")
        if not isinstance(api_node, dict):
            return cls(api_name=None, has_api_node=False)

        name = api_node.get("name")
        api_name = _stripped_text(name)
        return cls(api_name=api_name or None, request_body=api_node.get("requestBody"))

    @property
    def is_usable(self) -> bool:
        return self.has_api_node and bool(self.api_name)


@dataclass
class IntegrationConfig:
    """Parsed processor configuration document."""

    processor_name: Optional[str]
    type: Optional[str]
    auth_tokens: List[str] = field(default_factory=list)
    data: Optional[List[ApiEntry]] = None

    @classmethod
    def from_json(cls, document: Dict[str, Any]) -> "IntegrationConfig":
        """Build from a decoded JSON object; missing fields stay ``None``."""
        processor_name = _first_present(document, PROCESSOR_NAME_KEYS)
        processor_type = _first_present(document, TYPE_KEYS)

        auth = _first_present(document, AUTH_TOKEN_KEYS)
        auth_tokens = []
        if isinstance(auth, list):
            auth_tokens = [text for text in map(_as_text, auth) if text is not None]

        raw_data = _first_present(document, DATA_KEYS)
        data = None
        if isinstance(raw_data, list):
            data = [ApiEntry.from_json(node) for node in raw_data]

        return cls(
            processor_name=_stripped_text(processor_name),
            type=_stripped_text(processor_type),
            auth_tokens=auth_tokens,
            data=data,
        )

    @property
    def auth_token(self) -> Optional[str]:
        return self.auth_tokens[0] if self.auth_tokens else None


def _first_present(document: Dict[str, Any], keys: Tuple[str, ...]) -> Any:
    for key in keys:
        if document.get(key) is not None:
            return document[key]
    return None


def _as_text(value: Any) -> Optional[str]:
    """Text of a scalar JSON value; None for null, objects and arrays."""
    if value is None or isinstance(value, (dict, list)):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _stripped_text(value: Any) -> Optional[str]:
    text = _as_text(value)
    return text.strip() if text is not None else None
