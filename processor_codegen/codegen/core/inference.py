"""
Structural type inference over decoded JSON values.

Only names nested records; the records themselves are produced by the
nested record expander.
"""

from typing import Any

from .naming import to_pascal_case
from .schema import TypeDescriptor, TypeKind

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# Suffix for records inferred from the first element of an array field
ARRAY_ITEM_SUFFIX = "Item"


def nested_record_name(field_name: str) -> str:
    """Record name for an object-valued field."""
    return to_pascal_case(field_name)


def array_item_record_name(field_name: str) -> str:
    """Record name for the elements of an array-of-object field."""
    return to_pascal_case(field_name + ARRAY_ITEM_SUFFIX)


def is_object_array(value: Any) -> bool:
    """True when ``value`` is a non-empty array whose first element is an object."""
    return isinstance(value, list) and len(value) > 0 and isinstance(value[0], dict)


def infer(value: Any, context_name: str) -> TypeDescriptor:
    """
    Map a JSON value to a type descriptor.

    Arrays are classified by their first element only, and numbers by the
    single value observed; no widening happens across elements.

    Args:
        value: Decoded JSON value
        context_name: Field name the value was found under

    Returns:
        TypeDescriptor for the value
    """
    if value is None:
        return TypeDescriptor.opaque()

    if isinstance(value, dict):
        return TypeDescriptor.record(nested_record_name(context_name))

    if isinstance(value, list):
        if is_object_array(value):
            return TypeDescriptor.list_of(
                TypeDescriptor.record(array_item_record_name(context_name))
            )
        return TypeDescriptor.list_of(TypeDescriptor.opaque())

    if isinstance(value, str):
        return TypeDescriptor.primitive(TypeKind.STRING)

    # bool is an int subclass, check it first
    if isinstance(value, bool):
        return TypeDescriptor.primitive(TypeKind.BOOLEAN)

    if isinstance(value, int):
        if INT32_MIN <= value <= INT32_MAX:
            return TypeDescriptor.primitive(TypeKind.INT32)
        return TypeDescriptor.primitive(TypeKind.INT64)

    if isinstance(value, float):
        return TypeDescriptor.primitive(TypeKind.FLOAT64)

    return TypeDescriptor(kind=TypeKind.UNTYPED_OBJECT)
