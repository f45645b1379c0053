"""
DTO emitter: builds record artifacts from JSON object shapes.

Field order follows the key order of the source object. Request bodies
that are not JSON objects get a fixed single-field raw record, and
failed emissions get a fixed diagnostic record.
"""

from typing import Any, Optional, Set

from .inference import infer
from .naming import FieldNameAllocator
from .schema import STRING, RecordArtifact, RecordField, RecordKind

RAW_BODY_FIELD = "rawRequestBody"
ERROR_FIELD = "generationError"
ERROR_MESSAGE_PREFIX = "Error during class generation: "

RAW_RECORD_DESCRIPTION = (
    "This class represents a request body that was a simple string,\n"
    "or could not be parsed as a structured JSON object from the input.\n"
    "You may need to manually modify this DTO if a more complex structure is required."
)

ERROR_RECORD_DESCRIPTION = (
    "This class was generated as a fallback due to an error during parsing.\n"
    "Please check the error logs for details and manually review/correct this class."
)


class DtoEmitter:
    """Builds RecordArtifact instances; rendering is left to a renderer."""

    def __init__(self, reserved_words: Optional[Set[str]] = None):
        self.reserved_words = reserved_words or set()

    def emit(
        self,
        shape: Any,
        class_name: str,
        package_name: str,
        kind: RecordKind = RecordKind.STRUCTURED,
    ) -> RecordArtifact:
        """
        Build a record from an object shape.

        Args:
            shape: Decoded JSON value; anything but an object yields the raw record
            class_name: Name of the record
            package_name: Package the record is declared in
            kind: STRUCTURED for top-level DTOs, NESTED for expander output

        Returns:
            The record artifact
        """
        if not isinstance(shape, dict):
            return self.emit_raw(class_name, package_name)

        allocator = FieldNameAllocator(self.reserved_words)
        fields = tuple(
            RecordField(name=allocator.allocate(key), json_name=key, type=infer(value, key))
            for key, value in shape.items()
        )
        return RecordArtifact(
            name=class_name, package=package_name, fields=fields, kind=kind
        )

    def emit_raw(self, class_name: str, package_name: str) -> RecordArtifact:
        """Record holding the unparsed request body."""
        return RecordArtifact(
            name=class_name,
            package=package_name,
            fields=(RecordField(name=RAW_BODY_FIELD, json_name=RAW_BODY_FIELD, type=STRING),),
            kind=RecordKind.RAW,
            description=RAW_RECORD_DESCRIPTION,
        )

    def emit_error(self, class_name: str, package_name: str, message: str) -> RecordArtifact:
        """Diagnostic record written in place of a DTO whose emission failed."""
        return RecordArtifact(
            name=class_name,
            package=package_name,
            fields=(
                RecordField(
                    name=ERROR_FIELD,
                    json_name=ERROR_FIELD,
                    type=STRING,
                    default_value=ERROR_MESSAGE_PREFIX + message,
                ),
            ),
            kind=RecordKind.ERROR,
            description=ERROR_RECORD_DESCRIPTION,
        )
