"""
Java type mapping for inferred type descriptors.
"""

from dataclasses import dataclass, field
from typing import Dict

from ...core.schema import TypeDescriptor, TypeKind

# Boxed forms used for generic type arguments
BOXED_TYPES = {
    "int": "Integer",
    "long": "Long",
    "double": "Double",
    "boolean": "Boolean",
}


@dataclass
class JavaTypeConfig:
    """Configuration for Java type mapping behavior."""

    string_type: str = "String"
    int32_type: str = "int"
    int64_type: str = "long"
    float64_type: str = "double"
    bool_type: str = "boolean"
    unknown_type: str = "Object"
    list_type: str = "java.util.List"

    # Custom type overrides
    type_overrides: Dict[TypeKind, str] = field(default_factory=dict)


class JavaTypeMapper:
    """Maps TypeDescriptor values to Java type names."""

    def __init__(self, config: JavaTypeConfig = None):
        self.config = config or JavaTypeConfig()
        self._primitive_types = {
            TypeKind.STRING: self.config.string_type,
            TypeKind.INT32: self.config.int32_type,
            TypeKind.INT64: self.config.int64_type,
            TypeKind.FLOAT64: self.config.float64_type,
            TypeKind.BOOLEAN: self.config.bool_type,
            TypeKind.UNTYPED_OBJECT: self.config.unknown_type,
            TypeKind.OPAQUE: self.config.unknown_type,
        }

    def map_type(self, descriptor: TypeDescriptor) -> str:
        """Java type name for a descriptor."""
        if descriptor.kind in self.config.type_overrides:
            return self.config.type_overrides[descriptor.kind]

        if descriptor.kind == TypeKind.RECORD:
            return descriptor.record_name

        if descriptor.kind == TypeKind.LIST:
            element = self.map_type(descriptor.element)
            return f"{self.config.list_type}<{BOXED_TYPES.get(element, element)}>"

        return self._primitive_types[descriptor.kind]
