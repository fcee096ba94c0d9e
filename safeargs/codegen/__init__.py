"""
Directions code generation module.

Generates type-safe navigation directions classes from a navigation graph.
"""

from .core.generator import CodeGenerator, GenerationResult, generate_code
from .core.errors import GeneratorError, ModelError, CollisionError
from .core.model import NavigationGraph, graph_from_dict
from .core.config import GeneratorConfig, ConfigManager, load_config
from .languages.java import JavaGenerator, create_java_generator


def generate_from_graph(graph, config=None, application_id=""):
    """
    Generate Java directions from a navigation graph.

    Args:
        graph: NavigationGraph or its JSON dict form
        config: GeneratorConfig, override dict, or None for defaults
        application_id: Overrides the configured application id when given

    Returns:
        GenerationResult with generated sources keyed by relative path
    """
    if not isinstance(config, GeneratorConfig):
        config = load_config(custom_config=config)

    generator = create_java_generator(application_id, config)

    if not isinstance(graph, NavigationGraph):
        try:
            graph = graph_from_dict(graph, generator.config.application_id)
        except ModelError as e:
            return GenerationResult.error(f"Invalid navigation graph: {e}", exception=e)

    return generate_code(generator, graph)


def quick_generate(graph_data, application_id="", **options):
    """
    Quick generation from JSON graph data.

    Args:
        graph_data: Graph as dict/list or JSON string
        application_id: Package used for relative destination names
        **options: Generator options

    Returns:
        Mapping of relative path to generated Java source
    """
    if isinstance(graph_data, str):
        import json

        graph_data = json.loads(graph_data)

    result = generate_from_graph(graph_data, options, application_id)

    if result.success:
        return result.files
    else:
        raise GeneratorError(result.error_message)


__all__ = [
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "ModelError",
    "CollisionError",
    "NavigationGraph",
    "GeneratorConfig",
    "ConfigManager",
    "JavaGenerator",
    "generate_code",
    "generate_from_graph",
    "graph_from_dict",
    "load_config",
    "quick_generate",
]
