"""Java source generation for payment processor integrations."""

from .codegen import GenerationCoordinator, GenerationResult, GeneratorConfig, generate

__version__ = "0.1.0"

__all__ = [
    "GenerationCoordinator",
    "GenerationResult",
    "GeneratorConfig",
    "generate",
    "__version__",
]
