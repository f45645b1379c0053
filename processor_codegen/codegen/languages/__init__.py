"""
Target-language renderers.
"""

from .java import JavaRenderer, create_java_renderer

__all__ = ["JavaRenderer", "create_java_renderer"]
