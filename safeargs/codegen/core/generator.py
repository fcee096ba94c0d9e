"""
Base generator interface for all code generation targets.

Defines the contract that source renderers implement on top of the
language independent directions descriptions.
"""

from abc import ABC, abstractmethod
from pathlib import PurePosixPath
from typing import Any, Dict, List, Optional, Tuple

from ...logging_config import get_logger
from .config import GeneratorConfig
from .directions import HostClasses, generate_directions_files
from .errors import CollisionError, GeneratorError, ModelError
from .model import NavigationGraph, collect_arguments, count_actions
from .naming import is_java_identifier
from .specs import GeneratedFile
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)

__all__ = [
    "CodeGenerator",
    "CollisionError",
    "GenerationResult",
    "GeneratorError",
    "ModelError",
    "generate_code",
]


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(
            self.get_template_directory(), indent=self.config.indent
        )
        self.register_templates(self._template_engine)

    def register_templates(self, engine: TemplateEngine):
        """Hook for subclasses to add built-in templates."""
        pass

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'java')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.java')."""
        pass

    def get_template_directory(self):
        """
        Return the directory containing templates for this generator.

        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @property
    def host_classes(self) -> HostClasses:
        return HostClasses.create(
            self.config.navigation_package, self.config.container_class
        )

    def build_files(self, graph: NavigationGraph) -> Tuple[GeneratedFile, ...]:
        """Describe every directions class of the graph without rendering it."""
        return generate_directions_files(
            graph, self.config.application_id, self.host_classes
        )

    @abstractmethod
    def render_file(self, generated: GeneratedFile) -> str:
        """
        Render one generated file description as source code.

        Args:
            generated: File description from ``build_files``

        Returns:
            Source text of the file
        """
        pass

    def relative_path(self, generated: GeneratedFile) -> str:
        """Path of the file below the output directory, e.g. ``com/app/FooDirections.java``."""
        parts = [p for p in generated.package_name.split(".") if p]
        parts.append(f"{generated.class_name.simple_name}{self.file_extension}")
        return str(PurePosixPath(*parts))

    def generate(self, graph: NavigationGraph) -> Dict[str, str]:
        """
        Generate source for all directions classes.

        Args:
            graph: Navigation graph to generate from

        Returns:
            Ordered mapping of relative path to source text
        """
        sources = {}
        for generated in self.build_files(graph):
            sources[self.relative_path(generated)] = self.format_code(
                self.render_file(generated)
            )
        return sources

    def validate_graph(self, graph: NavigationGraph) -> List[str]:
        """
        Check the graph for names that will not compile.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for destination in graph.iter_destinations():
            for action in destination.actions:
                if not is_java_identifier(action.id.name):
                    warnings.append(
                        f"Action id '{action.id.name}' in {destination.label} "
                        f"is not a valid Java method name"
                    )

        for destination, action, arg in collect_arguments(graph):
            if not is_java_identifier(arg.name):
                warnings.append(
                    f"Argument '{arg.name}' of {destination.label}.{action.id.name} "
                    f"is not a valid Java identifier"
                )

        for warning in warnings:
            logger.warning(warning)
        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        # Basic cleanup - remove excessive blank lines
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 1:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        while formatted_lines and not formatted_lines[-1]:
            formatted_lines.pop()

        ending = self.config.line_ending
        return ending.join(formatted_lines) + ending

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        files: Dict[str, str],
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            files: Mapping of relative path to generated source
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.files = files
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(files={})
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: CodeGenerator, graph: NavigationGraph) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        graph: Navigation graph to generate from

    Returns:
        GenerationResult with files, warnings, and metadata
    """
    try:
        warnings = generator.validate_graph(graph)
        files = generator.generate(graph)
    except GeneratorError as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)

    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "application_id": generator.config.application_id,
        "destination_count": sum(1 for _ in graph.iter_destinations()),
        "action_count": count_actions(graph),
        "file_count": len(files),
    }
    return GenerationResult(files, warnings, metadata)
