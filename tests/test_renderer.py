"""Tests for DTO emission and Java rendering."""

import pytest

from processor_codegen.codegen.core.dto import (
    ERROR_FIELD,
    RAW_BODY_FIELD,
    DtoEmitter,
)
from processor_codegen.codegen.core.schema import (
    ConstantField,
    OrchestrationArtifact,
    RecordKind,
    TypeKind,
)
from processor_codegen.codegen.core.synthesizer import STATIC_PAYMENT_PROCESSOR_METHODS
from processor_codegen.codegen.languages.java import (
    JAVA_RESERVED_WORDS,
    create_java_renderer,
    java_string_literal,
)

PACKAGE = "onvopay.dto"


@pytest.fixture
def emitter():
    return DtoEmitter(JAVA_RESERVED_WORDS)


@pytest.fixture
def renderer():
    return create_java_renderer()


class TestDtoEmitter:
    """Record artifacts built from request body shapes."""

    def test_fields_follow_key_order(self, emitter):
        record = emitter.emit({"zeta": 1, "alpha": "a", "Customer_ID": "c"}, "X", PACKAGE)
        assert record.field_names == ["zeta", "alpha", "customerId"]
        assert record.get_field("customerId").json_name == "Customer_ID"

    def test_field_types(self, emitter):
        record = emitter.emit({"name": "x", "amount": 5}, "CreateCustomer", PACKAGE)
        assert record.get_field("name").type.kind == TypeKind.STRING
        assert record.get_field("amount").type.kind == TypeKind.INT32
        assert record.kind == RecordKind.STRUCTURED

    def test_non_object_shape_gives_raw_record(self, emitter):
        for shape in ("plain text", None, [1, 2], 42):
            record = emitter.emit(shape, "X", PACKAGE)
            assert record.kind == RecordKind.RAW
            assert record.field_names == [RAW_BODY_FIELD]
            assert record.fields[0].type.kind == TypeKind.STRING

    def test_error_record(self, emitter):
        record = emitter.emit_error("X", PACKAGE, "boom")
        assert record.kind == RecordKind.ERROR
        assert record.field_names == [ERROR_FIELD]
        assert record.fields[0].default_value == "Error during class generation: boom"

    def test_reserved_word_field(self, emitter):
        record = emitter.emit({"class": "gold"}, "X", PACKAGE)
        assert record.field_names == ["class_"]

    def test_empty_and_underscore_keys_avoid_keyword(self, emitter):
        record = emitter.emit({"": "a", "_": "b"}, "X", PACKAGE)
        assert record.field_names == ["__", "__1"]


class TestJavaRecordRendering:
    def test_structured_record(self, emitter, renderer):
        record = emitter.emit({"name": "x", "amount": 5}, "CreateCustomer", PACKAGE)
        code = renderer.render_record(record)

        assert code.startswith("package onvopay.dto;\n")
        assert "public class CreateCustomer {" in code
        assert "    public String name;" in code
        assert "    public int amount;" in code
        assert "public String getName() {" in code
        assert "public void setName(String name) {" in code
        assert "public int getAmount() {" in code
        assert "public void setAmount(int amount) {" in code

    def test_case_colliding_fields_get_distinct_accessors(self, emitter, renderer):
        record = emitter.emit({"customerId": "a", "customerid": "b"}, "X", PACKAGE)
        assert record.field_names == ["customerId", "customerid"]
        code = renderer.render_record(record)

        assert "public String getCustomerid() {" in code
        assert "return customerId;" in code
        assert "public String getCustomerid1() {" in code
        assert "public void setCustomerid1(String customerid) {" in code
        assert code.count("getCustomerid() {") == 1
        assert 'return "CreateCustomer{" +' in code
        assert '"name=" + name +' in code
        assert '", amount=" + amount +' in code
        assert code.endswith("}\n")

    def test_accessor_uses_casefolded_suffix(self, emitter, renderer):
        record = emitter.emit({"customerId": "c"}, "X", PACKAGE)
        code = renderer.render_record(record)
        assert "public String getCustomerid() {" in code

    def test_list_and_record_types(self, emitter, renderer):
        shape = {"items": [{"sku": "a"}], "tags": ["a"], "address": {"city": "x"}, "big": 2**40}
        code = renderer.render_record(emitter.emit(shape, "Order", PACKAGE))
        assert "public java.util.List<Itemsitem> items;" in code
        assert "public java.util.List<Object> tags;" in code
        assert "public Address address;" in code
        assert "public long big;" in code

    def test_raw_record_is_fixed(self, emitter, renderer):
        first = renderer.render_record(emitter.emit("a", "Refund", PACKAGE))
        second = renderer.render_record(emitter.emit(None, "Refund", PACKAGE))
        assert first == second
        assert "public String rawRequestBody;" in first
        assert "simple string" in first

    def test_error_record_initialised(self, emitter, renderer):
        record = emitter.emit_error("X", PACKAGE, 'bad "value"')
        code = renderer.render_record(record)
        assert (
            'public String generationError = '
            '"Error during class generation: bad \\"value\\"";'
        ) in code

    def test_no_comments(self, emitter):
        renderer = create_java_renderer({"add_comments": False})
        code = renderer.render_record(emitter.emit({"a": 1}, "X", PACKAGE))
        assert "/**" not in code

    def test_empty_record(self, emitter, renderer):
        code = renderer.render_record(emitter.emit({}, "Ping", PACKAGE))
        assert 'return "Ping{" +' in code
        assert "'}';" in code

    def test_no_trailing_whitespace(self, emitter, renderer):
        code = renderer.render_record(emitter.emit({"a": 1, "b": "x"}, "X", PACKAGE))
        assert all(line == line.rstrip() for line in code.split("\n"))
        assert "\n\n\n" not in code


class TestJavaOrchestrationRendering:
    @pytest.fixture
    def artifact(self):
        return OrchestrationArtifact(
            name="OnvoPayPayIn",
            package="onvopay",
            dto_package="onvopay.dto",
            contract_name="PaymentProcessor",
            contract_import="com.durgesh.service.PaymentProcessor",
            constants=(
                ConstantField("PROCESSOR_NAME", "OnvoPay"),
                ConstantField("PROCESSOR_TYPE", "PayIn"),
            ),
            methods=STATIC_PAYMENT_PROCESSOR_METHODS,
        )

    def test_class_declaration(self, artifact, renderer):
        code = renderer.render_orchestration(artifact)
        assert code.startswith("package onvopay;\n")
        assert "@Service" in code
        assert "public class OnvoPayPayIn implements PaymentProcessor {" in code
        assert 'private static final String PROCESSOR_NAME = "OnvoPay";' in code
        assert 'private static final String PROCESSOR_TYPE = "PayIn";' in code

    def test_imports(self, artifact, renderer):
        code = renderer.render_orchestration(artifact)
        assert "import com.durgesh.service.PaymentProcessor;" in code
        assert "import onvopay.dto.*;" in code
        assert "import java.util.*;" in code

    def test_no_dto_import_without_dtos(self, artifact, renderer):
        from dataclasses import replace

        code = renderer.render_orchestration(replace(artifact, dto_package=None))
        assert ".dto.*" not in code

    def test_every_method_overridden(self, artifact, renderer):
        code = renderer.render_orchestration(artifact)
        assert code.count("@Override") == 9
        assert "    public String createPayload() {" in code
        assert "    public ResponseEntity<?> executeWebhook() {" in code
        assert "        // Create payload for createPayload" in code


class TestJavaStringLiteral:
    def test_plain(self):
        assert java_string_literal("OnvoPay") == '"OnvoPay"'

    def test_escapes(self):
        assert java_string_literal('a"b\\c\n') == '"a\\"b\\\\c\\n"'

    def test_control_characters(self):
        assert java_string_literal("\x01") == '"\\u0001"'
