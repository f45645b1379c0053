"""
Generation coordinator.

Drives one run: validate the processor document, prepare the package
directories, emit the orchestration class, then one DTO per distinct
API entry. Every outcome is returned as a GenerationResult; nothing is
raised to the caller.
"""

import json
import threading
import weakref
from dataclasses import replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Union

from ..logging_config import get_logger
from .core.config import GeneratorConfig, load_config
from .core.dto import DtoEmitter
from .core.expander import NestedRecordExpander
from .core.generator import (
    INVALID_IDENTIFIER,
    MISSING_REQUIRED_FIELD,
    ArtifactRenderer,
    DocumentParseError,
    GenerationResult,
    GeneratorError,
    ValidationError,
)
from .core.naming import (
    InvalidIdentifierError,
    class_name_part,
    format_class_name,
    package_segment,
    sanitize_identifier,
)
from .core.orchestration import OrchestrationEmitter
from .core.schema import ApiEntry, IntegrationConfig, RecordArtifact
from .core.type_registry import GlobalTypeRegistry
from .languages.java import create_java_renderer
from .writer import ArtifactWriter

logger = get_logger(__name__)

PROCESSOR_NAME_FIELD = "PaymentProcessorName"
TYPE_FIELD = "type"

# One lock per resolved output root; runs against the same root are serialized.
# Entries go away once no run holds the lock.
_root_locks: "weakref.WeakValueDictionary[str, threading.Lock]" = weakref.WeakValueDictionary()
_root_locks_guard = threading.Lock()


def _lock_for(output_root: Path) -> threading.Lock:
    key = str(output_root.resolve())
    with _root_locks_guard:
        lock = _root_locks.get(key)
        if lock is None:
            lock = threading.Lock()
            _root_locks[key] = lock
        return lock


class RunState(Enum):
    """States of one generation run."""

    IDLE = "idle"
    VALIDATING = "validating"
    DIRECTORY_PREPARATION = "directory_preparation"
    MAIN_ARTIFACT_EMISSION = "main_artifact_emission"
    DTO_EMISSION_LOOP = "dto_emission_loop"
    COMPLETED = "completed"
    FAILED = "failed"


def parse_document(json_text: Union[str, bytes]) -> Dict[str, Any]:
    """
    Decode the processor document.

    Raises:
        DocumentParseError: If the text is not JSON or not a JSON object
    """
    try:
        document = json.loads(json_text)
    except (json.JSONDecodeError, UnicodeDecodeError, TypeError) as e:
        raise DocumentParseError(f"Error parsing JSON input: {e}") from e

    if not isinstance(document, dict):
        raise DocumentParseError(
            "Error parsing JSON input: document root must be a JSON object"
        )
    return document


def resolve_request_body(raw: Any) -> Optional[Dict[str, Any]]:
    """
    Object shape of a request body, or None when it has none.

    String bodies are re-parsed; only a JSON object counts as a shape.
    """
    if isinstance(raw, dict):
        return raw
    if isinstance(raw, str):
        try:
            parsed = json.loads(raw)
        except ValueError:
            return None
        return parsed if isinstance(parsed, dict) else None
    return None


def validate_integration(integration: IntegrationConfig):
    """
    Check processor name and type before anything touches the disk.

    Raises:
        ValidationError: With kind MissingRequiredField or InvalidIdentifier
    """
    required = (
        (PROCESSOR_NAME_FIELD, integration.processor_name, "package"),
        (TYPE_FIELD, integration.type, "class"),
    )
    for field_name, value, usage in required:
        if not value:
            raise ValidationError(
                f"Error: '{field_name}' field is required and cannot be null or empty",
                MISSING_REQUIRED_FIELD,
            )
        try:
            sanitize_identifier(value)
        except InvalidIdentifierError as e:
            raise ValidationError(
                f"Error: '{field_name}' contains invalid characters for Java "
                f"{usage} naming: {value}",
                INVALID_IDENTIFIER,
            ) from e


class GenerationCoordinator:
    """Runs generation for processor documents against one output root."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        renderer: Optional[ArtifactRenderer] = None,
    ):
        self.config = config or load_config()
        self.renderer = renderer or create_java_renderer(self.config)
        self.orchestration_emitter = OrchestrationEmitter()
        self.state = RunState.IDLE

    @property
    def output_root(self) -> Path:
        return Path(self.config.output_root)

    def _transition(self, state: RunState):
        logger.debug("Run state %s -> %s", self.state.value, state.value)
        self.state = state

    def generate(self, json_text: Union[str, bytes]) -> GenerationResult:
        """
        Generate all artifacts for a processor document.

        Args:
            json_text: The processor configuration document as JSON text

        Returns:
            GenerationResult; failures are reported, never raised
        """
        with _lock_for(self.output_root):
            self.state = RunState.IDLE
            try:
                self._transition(RunState.VALIDATING)
                document = parse_document(json_text)
                result = self._run(document)
            except GeneratorError as e:
                self._transition(RunState.FAILED)
                logger.error("Generation failed: %s", e)
                return GenerationResult.from_exception(e)
            except Exception as e:
                self._transition(RunState.FAILED)
                logger.error("Generation failed unexpectedly: %s", e, exc_info=True)
                return GenerationResult.from_exception(e)

            self._transition(RunState.COMPLETED)
            return result

    def _run(self, document: Dict[str, Any]) -> GenerationResult:
        integration = IntegrationConfig.from_json(document)
        validate_integration(integration)

        segment = package_segment(integration.processor_name)
        package_name = (
            f"{self.config.base_package}.{segment}" if self.config.base_package else segment
        )
        dto_package_name = f"{package_name}.{self.config.dto_subpackage}"
        main_class = class_name_part(integration.processor_name) + class_name_part(
            integration.type
        )

        package_dir = self.output_root / segment
        dto_dir = package_dir / self.config.dto_subpackage
        writer = ArtifactWriter(package_dir, self.config.encoding)

        logger.info("Generating %s into %s", main_class, package_dir)

        self._transition(RunState.DIRECTORY_PREPARATION)
        writer.prepare_directory(package_dir)
        writer.prepare_directory(dto_dir)

        self._transition(RunState.MAIN_ARTIFACT_EMISSION)
        entries = integration.data
        has_dtos = bool(entries) and any(entry.is_usable for entry in entries)
        artifact = self.orchestration_emitter.emit(
            integration,
            main_class,
            package_name,
            dto_package_name if has_dtos else None,
            contract_file=self.config.contract_file,
        )
        generated_files = [
            writer.write(
                package_dir / self.renderer.file_name(artifact.name),
                self.renderer.render_orchestration(artifact),
            )
        ]

        self._transition(RunState.DTO_EMISSION_LOOP)
        warnings: List[str] = []
        if entries is None:
            logger.warning(
                "'data' array is missing or not an array; only the main class is generated"
            )
        else:
            generated_files.extend(
                self._emit_dtos(entries, dto_package_name, dto_dir, writer, warnings)
            )

        logger.info("Generated %d files for %s", len(generated_files), main_class)

        return GenerationResult(
            generated_files=generated_files,
            warnings=warnings,
            package_name=package_name,
            dto_package_name=dto_package_name,
            package_path=package_dir.as_posix(),
            dto_package_path=dto_dir.as_posix(),
            main_class=main_class,
        )

    def _emit_dtos(
        self,
        entries: List[ApiEntry],
        dto_package_name: str,
        dto_dir: Path,
        writer: ArtifactWriter,
        warnings: List[str],
    ) -> List[str]:
        registry = GlobalTypeRegistry()
        emitter = DtoEmitter(self.renderer.reserved_words)
        emitted_classes: Set[str] = set()
        written: List[str] = []

        for index, entry in enumerate(entries):
            if not entry.is_usable:
                logger.debug("Skipping data[%d]: missing api node or name", index)
                continue

            class_name = format_class_name(entry.api_name)
            if class_name in emitted_classes:
                logger.debug("Skipping data[%d]: %s already generated", index, class_name)
                continue
            emitted_classes.add(class_name)

            self._emit_dto(
                entry, class_name, dto_package_name, dto_dir, writer,
                registry, emitter, warnings, written,
            )

        return written

    def _emit_dto(
        self,
        entry: ApiEntry,
        class_name: str,
        dto_package_name: str,
        dto_dir: Path,
        writer: ArtifactWriter,
        registry: GlobalTypeRegistry,
        emitter: DtoEmitter,
        warnings: List[str],
        written: List[str],
    ):
        def write_record(record: RecordArtifact):
            path = writer.write(
                dto_dir / self.renderer.file_name(record.name),
                self.renderer.render_record(record),
            )
            # Nested and top-level records share one directory
            if path in written:
                logger.warning("%s overwrote an earlier record at %s", record.name, path)
                warnings.append(f"{record.name}: overwrote {path}")
                return
            written.append(path)

        shape = resolve_request_body(entry.request_body)
        try:
            if shape is not None:
                expander = NestedRecordExpander(
                    registry, emitter, sink=write_record, max_depth=self.config.max_depth
                )
                expander.expand(shape, dto_package_name)
            record = emitter.emit(shape, class_name, dto_package_name)
            write_record(record)
        except Exception as e:
            # A failed DTO degrades to a diagnostic record, the run goes on
            logger.warning("Error generating class %s: %s", class_name, e, exc_info=True)
            warnings.append(f"{class_name}: {e}")
            write_record(emitter.emit_error(class_name, dto_package_name, str(e)))
        else:
            logger.info("Generated DTO %s (%d fields)", class_name, len(record.fields))


def generate(
    json_text: Union[str, bytes],
    output_root: Optional[Union[str, Path]] = None,
    config: Optional[GeneratorConfig] = None,
) -> GenerationResult:
    """
    Convenience function for a single run.

    Args:
        json_text: The processor configuration document as JSON text
        output_root: Overrides the configured output root
        config: Generator configuration, defaults from load_config()

    Returns:
        GenerationResult
    """
    if config is None:
        config = load_config()
    if output_root is not None:
        config = replace(config, output_root=str(output_root))
    return GenerationCoordinator(config).generate(json_text)
