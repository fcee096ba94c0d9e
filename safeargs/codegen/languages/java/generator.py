"""
Java code generator implementation.

Renders directions class descriptions into Java source files using
in-memory Jinja2 templates.
"""

from dataclasses import replace
from typing import Dict, List, Optional, Set

from ....logging_config import get_logger
from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator
from ...core.specs import (
    ArrayTypeName,
    ClassName,
    FieldSpec,
    GeneratedFile,
    MethodSpec,
    TypeName,
    TypeSpec,
)
from ...core.templates import TemplateEngine
from .templates import BUILTIN_TEMPLATES

logger = get_logger(__name__)

GENERATED_HEADER = "Generated by safeargs from the navigation graph. Do not edit."


class ImportCollector:
    """
    Decides how each type is spelled inside one file.

    A class is referenced by its short name and imported when that name is
    free; names already taken by classes declared in the file or by an
    earlier import fall back to the fully qualified name.
    """

    def __init__(self, package_name: str, declared: Set[str]):
        self.package_name = package_name
        self._claimed: Dict[str, str] = {name: "" for name in declared}
        self._spelling: Dict[ClassName, str] = {}
        self._imports: Set[str] = set()

    def add(self, type_name: TypeName):
        if isinstance(type_name, ArrayTypeName):
            self.add(type_name.component)
            return
        if not isinstance(type_name, ClassName) or type_name in self._spelling:
            return
        if not type_name.package_name:
            # declared in this file
            self._spelling[type_name] = type_name.simple_name
            return

        if type_name.package_name == self.package_name:
            short = type_name.simple_name.split(".", 1)[0]
            spelled = type_name.simple_name
        else:
            short = type_name.reference_name
            spelled = short

        owner = self._claimed.get(short)
        if owner is not None and owner != type_name.canonical_name:
            self._spelling[type_name] = type_name.canonical_name
            return

        self._claimed[short] = type_name.canonical_name
        self._spelling[type_name] = spelled
        if type_name.package_name not in ("java.lang", self.package_name):
            self._imports.add(type_name.canonical_name)

    def name(self, type_name: TypeName) -> str:
        if isinstance(type_name, ArrayTypeName):
            return f"{self.name(type_name.component)}[]"
        if isinstance(type_name, ClassName):
            self.add(type_name)
            return self._spelling[type_name]
        return type_name

    @property
    def imports(self) -> List[str]:
        return sorted(self._imports)


class JavaGenerator(CodeGenerator):
    """Code generator for Java directions classes."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Java generator with configuration."""
        super().__init__(config)

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "java"

    @property
    def file_extension(self) -> str:
        """Return Java file extension."""
        return ".java"

    def register_templates(self, engine: TemplateEngine):
        for name, content in BUILTIN_TEMPLATES.items():
            if not engine.template_exists(name):
                engine.add_template(name, content)

    def render_file(self, generated: GeneratedFile) -> str:
        """Render a directions file with its package and imports."""
        type_spec = generated.type_spec
        collector = ImportCollector(generated.package_name, _declared_names(type_spec))

        # Register types in declaration order so import choices are stable
        for type_name in _referenced_types(type_spec):
            collector.add(type_name)

        type_source = self._render_type(type_spec, collector)
        logger.debug("Rendered %s", generated.qualified_name)

        return self.render_template(
            "file.java.j2",
            {
                "header": GENERATED_HEADER if self.config.add_comments else None,
                "package_name": generated.package_name,
                "imports": collector.imports,
                "type_source": type_source,
            },
        )

    def _render_type(self, type_spec: TypeSpec, collector: ImportCollector) -> str:
        declaration = " ".join(
            [*(m.value for m in type_spec.modifiers), "class", type_spec.name]
        )
        if type_spec.superinterfaces:
            interfaces = ", ".join(collector.name(t) for t in type_spec.superinterfaces)
            declaration += f" implements {interfaces}"

        blocks = []
        if type_spec.fields:
            blocks.append(
                "\n".join(self._render_field(f, collector) for f in type_spec.fields)
            )
        blocks.extend(self._render_method(m, collector) for m in type_spec.methods)
        blocks.extend(self._render_type(t, collector) for t in type_spec.types)

        return self.render_template(
            "type.java.j2", {"declaration": declaration, "blocks": blocks}
        )

    def _render_field(self, field: FieldSpec, collector: ImportCollector) -> str:
        parts = [m.value for m in field.modifiers]
        parts += [collector.name(field.type), field.name]
        declaration = " ".join(parts)
        if field.initializer is not None:
            declaration += f" = {field.initializer}"
        return declaration + ";"

    def _render_method(self, method: MethodSpec, collector: ImportCollector) -> str:
        parts = [m.value for m in method.modifiers]
        if not method.is_constructor:
            parts.append(collector.name(method.returns) if method.returns else "void")
        params = ", ".join(
            f"{collector.name(p.type)} {p.name}" for p in method.parameters
        )
        parts.append(f"{method.name}({params})")

        return self.render_template(
            "method.java.j2",
            {
                "signature": " ".join(parts),
                "statements": method.body(collector.name),
            },
        )


def _declared_names(type_spec: TypeSpec) -> Set[str]:
    names = {type_spec.name}
    for nested in type_spec.types:
        names |= _declared_names(nested)
    return names


def _referenced_types(type_spec: TypeSpec) -> List[TypeName]:
    found = list(type_spec.superinterfaces)
    for field in type_spec.fields:
        found.append(field.type)
    for method in type_spec.methods:
        if method.returns is not None:
            found.append(method.returns)
        found.extend(p.type for p in method.parameters)
        for statement in method.statements:
            found.extend(statement.type_names())
    for nested in type_spec.types:
        found.extend(_referenced_types(nested))
    return found


def create_java_generator(
    application_id: str = "", config: Optional[GeneratorConfig] = None
) -> JavaGenerator:
    """Create a Java generator, optionally overriding the application id."""
    config = config or GeneratorConfig()
    if application_id:
        config = replace(config, application_id=application_id)
    return JavaGenerator(config)
