"""
Java code generator module.

Renders directions classes as Java sources for the Android navigation
runtime.
"""

from .generator import JavaGenerator, ImportCollector, create_java_generator

__all__ = [
    "JavaGenerator",
    "ImportCollector",
    "create_java_generator",
]
