"""Tests for structural type inference."""

from processor_codegen.codegen.core.inference import infer
from processor_codegen.codegen.core.schema import TypeDescriptor, TypeKind


class TestInfer:
    """Mapping of JSON values to type descriptors."""

    def test_null_is_opaque(self):
        assert infer(None, "x").kind == TypeKind.OPAQUE

    def test_string(self):
        assert infer("x", "name").kind == TypeKind.STRING

    def test_boolean_before_integer(self):
        assert infer(True, "active").kind == TypeKind.BOOLEAN

    def test_int32(self):
        assert infer(5, "amount").kind == TypeKind.INT32
        assert infer(2**31 - 1, "amount").kind == TypeKind.INT32
        assert infer(-(2**31), "amount").kind == TypeKind.INT32

    def test_int64(self):
        assert infer(2**31, "amount").kind == TypeKind.INT64

    def test_float64(self):
        assert infer(1.5, "rate").kind == TypeKind.FLOAT64

    def test_object_names_record_after_field(self):
        assert infer({"city": "x"}, "billing_address") == TypeDescriptor.record(
            "BillingAddress"
        )

    def test_object_array_uses_item_suffix(self):
        descriptor = infer([{"sku": "a"}], "items")
        assert descriptor.kind == TypeKind.LIST
        assert descriptor.element == TypeDescriptor.record("Itemsitem")

    def test_first_element_decides_array_type(self):
        descriptor = infer([1, {"sku": "a"}], "items")
        assert descriptor.element.kind == TypeKind.OPAQUE

    def test_heterogeneous_array_not_rejected(self):
        descriptor = infer([{"sku": "a"}, 3, "x"], "items")
        assert descriptor.element == TypeDescriptor.record("Itemsitem")

    def test_empty_array(self):
        assert infer([], "tags") == TypeDescriptor.list_of(TypeDescriptor.opaque())

    def test_describe(self):
        assert infer([{"a": 1}], "lines").describe() == "list<Linesitem>"
