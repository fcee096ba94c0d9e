"""
Core code generation components.

Provides the navigation model, the argument type catalog and the
language independent directions builders used by all renderers.
"""

from .errors import GeneratorError, ModelError, CollisionError
from .model import (
    Id,
    Argument,
    Action,
    Destination,
    NavigationGraph,
    graph_from_dict,
)
from .types import ArgumentType, TypeTag, TypeCatalog, CATALOG
from .naming import capitalize, id_accessor, directions_class_name
from .specs import (
    ClassName,
    ArrayTypeName,
    CodeBlock,
    FieldSpec,
    MethodSpec,
    ParameterSpec,
    TypeSpec,
    GeneratedFile,
    Modifier,
)
from .directions import (
    ClassWithArgsSpecs,
    HostClasses,
    generate_directions_type_spec,
    generate_destination_directions_type_spec,
    generate_directions_file,
    generate_directions_files,
)
from .generator import CodeGenerator, GenerationResult, generate_code
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Errors
    "GeneratorError",
    "ModelError",
    "CollisionError",
    # Navigation model
    "Id",
    "Argument",
    "Action",
    "Destination",
    "NavigationGraph",
    "graph_from_dict",
    # Type catalog
    "ArgumentType",
    "TypeTag",
    "TypeCatalog",
    "CATALOG",
    # Naming
    "capitalize",
    "id_accessor",
    "directions_class_name",
    # Class descriptions
    "ClassName",
    "ArrayTypeName",
    "CodeBlock",
    "FieldSpec",
    "MethodSpec",
    "ParameterSpec",
    "TypeSpec",
    "GeneratedFile",
    "Modifier",
    # Directions builders
    "ClassWithArgsSpecs",
    "HostClasses",
    "generate_directions_type_spec",
    "generate_destination_directions_type_spec",
    "generate_directions_file",
    "generate_directions_files",
    # Base generator interface
    "CodeGenerator",
    "GenerationResult",
    "generate_code",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
