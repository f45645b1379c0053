"""
Java artifact renderer.

Renders record and orchestration artifacts to Java source through the
templates in ./templates.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Set

from ...core.generator import ArtifactRenderer
from ...core.naming import accessor_suffix
from ...core.schema import OrchestrationArtifact, RecordArtifact, RecordKind
from ...core.templates import TemplateEngine
from .naming import JAVA_RESERVED_WORDS, java_string_literal
from .types import JavaTypeConfig, JavaTypeMapper

RECORD_TEMPLATE = "record.java.j2"
ORCHESTRATION_TEMPLATE = "orchestration.java.j2"

# Imports of the orchestration class, before the contract and DTO imports
ORCHESTRATION_IMPORTS = (
    "org.springframework.beans.factory.annotation.Autowired",
    "org.springframework.stereotype.Service",
    "org.springframework.web.client.RestTemplate",
    "org.springframework.http.HttpHeaders",
    "org.springframework.http.MediaType",
    "org.springframework.http.HttpEntity",
    "org.springframework.http.ResponseEntity",
    "org.springframework.http.HttpMethod",
    "com.fasterxml.jackson.databind.ObjectMapper",
    "com.fasterxml.jackson.core.JsonProcessingException",
)


class JavaRenderer(ArtifactRenderer):
    """Renders artifacts as Java classes with accessors and toString()."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)
        self.add_comments = self.config.get("add_comments", True)
        self.type_mapper = JavaTypeMapper(
            JavaTypeConfig(list_type=self.config.get("list_type", "java.util.List"))
        )

    @property
    def language_name(self) -> str:
        return "java"

    @property
    def file_extension(self) -> str:
        return self.config.get("file_extension", ".java")

    @property
    def reserved_words(self) -> Set[str]:
        return JAVA_RESERVED_WORDS

    def get_template_directory(self) -> Optional[Path]:
        """Return the Java templates directory."""
        template_dir = Path(__file__).parent / "templates"
        return template_dir if template_dir.exists() else None

    def register_template_filters(self, engine: TemplateEngine):
        engine.add_filter("java_string", java_string_literal)

    def render_record(self, record: RecordArtifact) -> str:
        """Render a record artifact as a Java class."""
        # Fixed records keep the camel case of their field in accessor names
        fixed = record.kind in (RecordKind.RAW, RecordKind.ERROR)
        fields = []
        used_accessors = set()
        for record_field in record.fields:
            accessor = (
                record_field.name[:1].upper() + record_field.name[1:]
                if fixed
                else accessor_suffix(record_field.name)
            )
            # customerId and customerid both lower to getCustomerid
            base_accessor = accessor
            counter = 1
            while accessor in used_accessors:
                accessor = f"{base_accessor}{counter}"
                counter += 1
            used_accessors.add(accessor)

            default_literal = None
            if record_field.default_value is not None:
                default_literal = java_string_literal(record_field.default_value)
            fields.append(
                {
                    "name": record_field.name,
                    "type": self.type_mapper.map_type(record_field.type),
                    "accessor": accessor,
                    "default_literal": default_literal,
                }
            )

        context = {
            "package": record.package,
            "class_name": record.name,
            "description": self._record_description(record),
            "fields": fields,
        }
        return self.format_code(self.render_template(RECORD_TEMPLATE, context))

    def render_orchestration(self, artifact: OrchestrationArtifact) -> str:
        """Render the orchestration class."""
        methods = [
            {
                "name": method.name,
                "return_type": method.return_type,
                "parameters": [f"{p.type} {p.name}" for p in method.parameters],
                "body": method.body,
            }
            for method in artifact.methods
        ]

        context = {
            "package": artifact.package,
            "imports": self._orchestration_imports(artifact),
            "description": (
                f"{artifact.contract_name} implementation for {artifact.name}."
                if self.add_comments
                else None
            ),
            "class_name": artifact.name,
            "contract_name": artifact.contract_name,
            "constants": artifact.constants,
            "methods": methods,
        }
        return self.format_code(self.render_template(ORCHESTRATION_TEMPLATE, context))

    def _orchestration_imports(self, artifact: OrchestrationArtifact) -> List[str]:
        imports = list(ORCHESTRATION_IMPORTS)
        if artifact.contract_import:
            imports.append(artifact.contract_import)
        if artifact.dto_package:
            imports.append(f"{artifact.dto_package}.*")
        imports.append("java.util.*")
        return imports

    def _record_description(self, record: RecordArtifact) -> Optional[str]:
        # Raw and error records always explain themselves
        if record.kind in (RecordKind.RAW, RecordKind.ERROR):
            return record.description
        if not self.add_comments:
            return None
        if record.description:
            return record.description
        if record.kind == RecordKind.STRUCTURED:
            return (
                "To use this DTO with Jackson:\n"
                "ObjectMapper om = new ObjectMapper();\n"
                f"{record.name} requestBody = om.readValue(jsonString, {record.name}.class);"
            )
        return None
