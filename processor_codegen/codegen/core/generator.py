"""
Base renderer interface, generation errors and the run result.

Defines the contract every target-language renderer implements and the
result envelope returned by a generation run.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

from .schema import OrchestrationArtifact, RecordArtifact
from .templates import TemplateEngine, create_template_engine

# Error-kind tags reported in GenerationResult.error
MISSING_REQUIRED_FIELD = "MissingRequiredField"
INVALID_IDENTIFIER = "InvalidIdentifier"
DIRECTORY_CREATION_FAILED = "DirectoryCreationFailed"
JSON_PARSING_ERROR = "JSONParsingError"


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    kind: Optional[str] = None

    def error_kind(self) -> str:
        """Tag reported in the result envelope."""
        return self.kind or type(self).__name__


class ValidationError(GeneratorError):
    """The processor document failed validation."""

    def __init__(self, message: str, kind: str = MISSING_REQUIRED_FIELD):
        super().__init__(message)
        self.kind = kind


class DocumentParseError(GeneratorError):
    """The processor document is not a JSON object."""

    kind = JSON_PARSING_ERROR


class DirectoryCreationError(GeneratorError):
    """An output directory could not be created."""

    kind = DIRECTORY_CREATION_FAILED

    def __init__(self, path: Path, reason: str = ""):
        message = f"Error: Failed to create directory: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.path = path


class ContractNotFoundError(GeneratorError):
    """The capability contract could not be located or read."""


class ExpansionDepthError(GeneratorError):
    """Nested record expansion exceeded the configured depth."""

    def __init__(self, max_depth: int, record_name: str):
        super().__init__(
            f"Nesting deeper than {max_depth} levels at record '{record_name}'"
        )
        self.max_depth = max_depth
        self.record_name = record_name


class ArtifactRenderer(ABC):
    """Abstract base class for target-language artifact renderers."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize renderer with optional configuration."""
        self.config = config or {}
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this renderer."""
        self._template_engine = create_template_engine(self.get_template_directory())
        self.register_template_filters(self._template_engine)

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'java')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.java')."""
        pass

    @property
    def reserved_words(self) -> Set[str]:
        """Words that cannot be used as field names in the target language."""
        return set()

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this renderer.

        Return None to use in-memory templates only.
        """
        return None

    def register_template_filters(self, engine: TemplateEngine):
        """Hook for renderers to add language-specific template filters."""
        pass

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this renderer."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def render_record(self, record: RecordArtifact) -> str:
        """Render one record artifact to source text."""
        pass

    @abstractmethod
    def render_orchestration(self, artifact: OrchestrationArtifact) -> str:
        """Render the orchestration artifact to source text."""
        pass

    def file_name(self, type_name: str) -> str:
        """File name for a generated type."""
        return f"{type_name}{self.file_extension}"

    def format_code(self, code: str) -> str:
        """
        Apply basic formatting to generated code.

        Strips trailing whitespace, collapses runs of blank lines and
        guarantees a single trailing newline.
        """
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 1:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n") + "\n"

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)


class GenerationResult:
    """Container for the outcome of one generation run."""

    def __init__(
        self,
        generated_files: List[str] = None,
        warnings: List[str] = None,
        package_name: Optional[str] = None,
        dto_package_name: Optional[str] = None,
        package_path: Optional[str] = None,
        dto_package_path: Optional[str] = None,
        main_class: Optional[str] = None,
        message: str = "Package and classes generated successfully",
    ):
        self.success = True
        self.message = message
        self.error: Optional[str] = None
        self.exception: Optional[BaseException] = None
        self.generated_files = generated_files or []
        self.warnings = warnings or []
        self.package_name = package_name
        self.dto_package_name = dto_package_name
        self.package_path = package_path
        self.dto_package_path = dto_package_path
        self.main_class = main_class

    @classmethod
    def failure(
        cls, message: str, kind: str, exception: BaseException = None
    ) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(message=message)
        result.success = False
        result.error = kind
        result.exception = exception
        return result

    @classmethod
    def from_exception(cls, exc: BaseException) -> "GenerationResult":
        """Failed result tagged with the error kind of ``exc``."""
        if isinstance(exc, GeneratorError):
            return cls.failure(str(exc), exc.error_kind(), exception=exc)
        return cls.failure(
            f"Error generating package: {exc}", type(exc).__name__, exception=exc
        )

    def to_dict(self) -> Dict[str, Any]:
        """Result envelope as a JSON-serializable dict."""
        if not self.success:
            return {"success": False, "message": self.message, "error": self.error}

        return {
            "success": True,
            "message": self.message,
            "packageName": self.package_name,
            "dtoPackageName": self.dto_package_name,
            "packagePath": self.package_path,
            "dtoPackagePath": self.dto_package_path,
            "mainClass": self.main_class,
            "generatedFiles": list(self.generated_files),
            "warnings": list(self.warnings),
        }

    def __repr__(self) -> str:
        if self.success:
            return f"GenerationResult(success=True, files={len(self.generated_files)})"
        return f"GenerationResult(success=False, error={self.error!r})"
