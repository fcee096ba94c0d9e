"""
Language-specific code generators.

This module contains the source renderers for generated directions.
"""

from .java import JavaGenerator, create_java_generator

__all__ = ["JavaGenerator", "create_java_generator"]
