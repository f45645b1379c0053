"""
Java artifact renderer.

Renders generated records and the orchestration class as Java sources.
"""

from .generator import JavaRenderer
from .naming import JAVA_RESERVED_WORDS, java_string_literal
from .types import JavaTypeConfig, JavaTypeMapper

__all__ = [
    "JavaRenderer",
    "JavaTypeConfig",
    "JavaTypeMapper",
    "JAVA_RESERVED_WORDS",
    "java_string_literal",
    "create_java_renderer",
]


def create_java_renderer(config=None) -> JavaRenderer:
    """Create a Java renderer; ``config`` may be a GeneratorConfig or a dict."""
    if config is None:
        return JavaRenderer()
    if isinstance(config, dict):
        return JavaRenderer(config)
    return JavaRenderer(config.to_dict())
