"""
Processor code generation.

Turns a payment processor configuration document into a Java package:
one orchestration class implementing the capability contract and one
DTO per API request body.
"""

from .coordinator import GenerationCoordinator, RunState, generate
from .core.generator import GenerationResult
from .core.config import GeneratorConfig, ConfigManager, load_config
from .languages.java import JavaRenderer, create_java_renderer

__all__ = [
    "GenerationCoordinator",
    "RunState",
    "generate",
    "GenerationResult",
    "GeneratorConfig",
    "ConfigManager",
    "load_config",
    "JavaRenderer",
    "create_java_renderer",
]
