"""
Recursive expansion of nested JSON objects into record artifacts.

Each object-valued field becomes a record named after the field, and
each array-of-object field a record named after the field plus "Item",
inferred from the first element. Names are claimed in the run's
GlobalTypeRegistry before recursing, so a name is emitted once per run
with the first shape seen in document order.
"""

from typing import Any, Callable, Dict, List, Optional

from ...logging_config import get_logger
from .dto import DtoEmitter
from .generator import ExpansionDepthError
from .inference import array_item_record_name, is_object_array, nested_record_name
from .schema import RecordArtifact, RecordKind
from .type_registry import GlobalTypeRegistry

logger = get_logger(__name__)

DEFAULT_MAX_DEPTH = 32

RecordSink = Callable[[RecordArtifact], None]


class NestedRecordExpander:
    """Walks a JSON object and emits one record per distinct nested name."""

    def __init__(
        self,
        registry: GlobalTypeRegistry,
        emitter: DtoEmitter,
        sink: Optional[RecordSink] = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        """
        Args:
            registry: Registry of the current run
            emitter: Builds the record artifacts
            sink: Called with each record as soon as it is created
            max_depth: Maximum nesting depth before expansion is aborted
        """
        self.registry = registry
        self.emitter = emitter
        self.sink = sink
        self.max_depth = max_depth

    def expand(self, shape: Dict[str, Any], package_name: str) -> List[RecordArtifact]:
        """
        Emit records for every nested object reachable from ``shape``.

        Returns:
            Records created by this call, in emission order

        Raises:
            ExpansionDepthError: If nesting exceeds ``max_depth``
        """
        created: List[RecordArtifact] = []
        self._expand(shape, package_name, 1, created)
        return created

    def _expand(
        self,
        shape: Dict[str, Any],
        package_name: str,
        depth: int,
        created: List[RecordArtifact],
    ):
        for field_name, value in shape.items():
            if isinstance(value, dict):
                record_name = nested_record_name(field_name)
                child_shape = value
            elif is_object_array(value):
                record_name = array_item_record_name(field_name)
                child_shape = value[0]
            else:
                continue

            if record_name in self.registry:
                logger.debug("Skipping %s: first-seen shape kept", record_name)
                continue

            if depth > self.max_depth:
                raise ExpansionDepthError(self.max_depth, record_name)

            # Claim the name before recursing
            self.registry.register(record_name)

            record = self.emitter.emit(
                child_shape, record_name, package_name, kind=RecordKind.NESTED
            )
            created.append(record)
            if self.sink is not None:
                self.sink(record)

            self._expand(child_shape, package_name, depth + 1, created)
