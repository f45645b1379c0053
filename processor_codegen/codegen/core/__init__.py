"""
Core code generation components.

Artifact model, type inference, record expansion and method synthesis,
independent of the target language.
"""

from .generator import (
    ArtifactRenderer,
    ContractNotFoundError,
    DirectoryCreationError,
    DocumentParseError,
    ExpansionDepthError,
    GenerationResult,
    GeneratorError,
    ValidationError,
)
from .schema import (
    ApiEntry,
    IntegrationConfig,
    MethodSpec,
    OrchestrationArtifact,
    RecordArtifact,
    RecordField,
    RecordKind,
    TypeDescriptor,
    TypeKind,
)
from .naming import (
    FieldNameAllocator,
    InvalidIdentifierError,
    format_class_name,
    sanitize_identifier,
    to_camel_case,
    to_pascal_case,
)
from .inference import infer
from .type_registry import GlobalTypeRegistry
from .dto import DtoEmitter
from .expander import NestedRecordExpander
from .contract import CapabilityContract, PAYMENT_PROCESSOR_CONTRACT, load_contract
from .synthesizer import ContractMethodSynthesizer
from .orchestration import OrchestrationEmitter
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Renderer interface and errors
    "ArtifactRenderer",
    "GeneratorError",
    "ValidationError",
    "DocumentParseError",
    "DirectoryCreationError",
    "ContractNotFoundError",
    "ExpansionDepthError",
    "GenerationResult",
    # Artifact model
    "ApiEntry",
    "IntegrationConfig",
    "MethodSpec",
    "OrchestrationArtifact",
    "RecordArtifact",
    "RecordField",
    "RecordKind",
    "TypeDescriptor",
    "TypeKind",
    # Naming
    "FieldNameAllocator",
    "InvalidIdentifierError",
    "format_class_name",
    "sanitize_identifier",
    "to_camel_case",
    "to_pascal_case",
    # Inference and emission
    "infer",
    "GlobalTypeRegistry",
    "DtoEmitter",
    "NestedRecordExpander",
    "CapabilityContract",
    "PAYMENT_PROCESSOR_CONTRACT",
    "load_contract",
    "ContractMethodSynthesizer",
    "OrchestrationEmitter",
    # Configuration
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Templates
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
