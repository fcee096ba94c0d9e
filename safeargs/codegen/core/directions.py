"""
Directions class generation.

Turns each destination's outgoing actions into a ``<Name>Directions``
class description: one nested ``NavDirections`` implementation per action
plus a static factory method for it.
"""

from collections import OrderedDict
from dataclasses import dataclass
from typing import List, Tuple

from ...logging_config import get_logger
from .errors import CollisionError, ModelError
from .model import Action, Argument, Destination, NavigationGraph
from .naming import (
    action_class_name,
    directions_class_name,
    id_accessor,
    setter_name,
)
from .specs import (
    ClassName,
    CodeBlock,
    FieldSpec,
    GeneratedFile,
    MethodSpec,
    Modifier,
    ParameterSpec,
    TypeSpec,
)
from .types import CATALOG

logger = get_logger(__name__)

NAVIGATION_PACKAGE = "android.arch.navigation"
BUNDLE_VAR = "__outBundle"


@dataclass(frozen=True)
class HostClasses:
    """Platform classes referenced by generated code."""

    nav_directions: ClassName
    nav_options: ClassName
    bundle: ClassName

    @classmethod
    def create(
        cls,
        navigation_package: str = NAVIGATION_PACKAGE,
        container_class: str = "android.os.Bundle",
    ) -> "HostClasses":
        return cls(
            nav_directions=ClassName(navigation_package, "NavDirections"),
            nav_options=ClassName(navigation_package, "NavOptions"),
            bundle=ClassName.best_guess(container_class),
        )


DEFAULT_HOST = HostClasses.create()


class ClassWithArgsSpecs:
    """Fields, constructor, setters and bundle method for an argument list."""

    def __init__(self, args: Tuple[Argument, ...], application_id: str = ""):
        self.args = tuple(args)
        self.application_id = application_id

        # Resolve every type and default up front so nothing is emitted
        # for an argument list containing an invalid entry
        self._types = {}
        self._defaults = {}
        for arg in self.args:
            try:
                self._types[arg.name] = CATALOG.representation(arg.type)
                if arg.is_optional:
                    self._defaults[arg.name] = CATALOG.literal(
                        arg.type, arg.default_value, application_id
                    )
            except ModelError as e:
                raise e.add_context(argument=arg.name)

    @property
    def required(self) -> List[Argument]:
        return [arg for arg in self.args if not arg.is_optional]

    @property
    def optional(self) -> List[Argument]:
        return [arg for arg in self.args if arg.is_optional]

    def field_specs(self) -> Tuple[FieldSpec, ...]:
        specs = []
        for arg in self.args:
            if arg.is_optional:
                specs.append(
                    FieldSpec(
                        arg.name,
                        self._types[arg.name],
                        (Modifier.PRIVATE,),
                        initializer=self._defaults[arg.name],
                    )
                )
            else:
                specs.append(
                    FieldSpec(
                        arg.name, self._types[arg.name], (Modifier.PRIVATE, Modifier.FINAL)
                    )
                )
        return tuple(specs)

    def setters(self, this_class_name: ClassName) -> Tuple[MethodSpec, ...]:
        return tuple(
            MethodSpec(
                setter_name(arg.name),
                modifiers=(Modifier.PUBLIC,),
                parameters=(ParameterSpec(arg.name, self._types[arg.name]),),
                returns=this_class_name,
                statements=(
                    CodeBlock.of("this.$N = $N", arg.name, arg.name),
                    CodeBlock.of("return this"),
                ),
            )
            for arg in self.optional
        )

    def constructor(self, class_name: str) -> MethodSpec:
        required = self.required
        return MethodSpec(
            class_name,
            modifiers=(Modifier.PUBLIC,),
            parameters=tuple(ParameterSpec(a.name, self._types[a.name]) for a in required),
            statements=tuple(CodeBlock.of("this.$N = $N", a.name, a.name) for a in required),
            is_constructor=True,
        )

    def bundle_method(self, bundle_class: ClassName) -> MethodSpec:
        statements = [CodeBlock.of("$T $N = new $T()", bundle_class, BUNDLE_VAR, bundle_class)]
        for arg in self.args:
            statements.append(
                CodeBlock.of(
                    "$N.$N($S, $N)",
                    BUNDLE_VAR,
                    CATALOG.put_operation(arg.type),
                    arg.name,
                    arg.name,
                )
            )
        statements.append(CodeBlock.of("return $N", BUNDLE_VAR))
        return MethodSpec(
            "getArguments",
            modifiers=(Modifier.PUBLIC,),
            returns=bundle_class,
            statements=tuple(statements),
        )


def generate_directions_type_spec(
    action: Action, application_id: str = "", host: HostClasses = DEFAULT_HOST
) -> TypeSpec:
    """Build the nested NavDirections class for a single action."""
    try:
        specs = ClassWithArgsSpecs(action.args, application_id)
    except ModelError as e:
        raise e.add_context(action=action.id.name)

    name = action_class_name(action.id)
    class_name = ClassName("", name)

    get_destination_id = MethodSpec(
        "getDestinationId",
        modifiers=(Modifier.PUBLIC,),
        returns="int",
        statements=(CodeBlock.of("return $L", id_accessor(action.destination)),),
    )

    get_options = MethodSpec(
        "getOptions",
        modifiers=(Modifier.PUBLIC,),
        returns=host.nav_options,
        statements=(CodeBlock.of("return null"),),
    )

    return TypeSpec(
        name,
        modifiers=(Modifier.PUBLIC, Modifier.STATIC),
        superinterfaces=(host.nav_directions,),
        fields=specs.field_specs(),
        methods=(
            specs.constructor(name),
            *specs.setters(class_name),
            specs.bundle_method(host.bundle),
            get_destination_id,
            get_options,
        ),
    )


def generate_destination_directions_type_spec(
    class_name: ClassName,
    destination: Destination,
    application_id: str = "",
    host: HostClasses = DEFAULT_HOST,
) -> TypeSpec:
    """Build the holding class with one nested class and factory per action."""
    seen = set()
    for action in destination.actions:
        if action.id.name in seen:
            raise ModelError("Duplicate action id", action=action.id.name)
        seen.add(action.id.name)

    action_types = [
        (action, generate_directions_type_spec(action, application_id, host))
        for action in destination.actions
    ]

    factories = []
    for action, action_type in action_types:
        constructor = action_type.constructor
        params = ", ".join(constructor.parameter_names)
        action_type_name = ClassName("", action_type.name)
        factories.append(
            MethodSpec(
                action.id.name,
                modifiers=(Modifier.PUBLIC, Modifier.STATIC),
                parameters=constructor.parameters,
                returns=action_type_name,
                statements=(CodeBlock.of("return new $T($L)", action_type_name, params),),
            )
        )

    return TypeSpec(
        class_name.simple_name,
        modifiers=(Modifier.PUBLIC,),
        methods=tuple(factories),
        types=tuple(action_type for _, action_type in action_types),
    )


def generate_directions_file(
    application_id: str, destination: Destination, host: HostClasses = DEFAULT_HOST
) -> GeneratedFile:
    """Describe the directions file for one destination."""
    try:
        class_name = directions_class_name(destination, application_id)
        type_spec = generate_destination_directions_type_spec(
            class_name, destination, application_id, host
        )
    except ModelError as e:
        raise e.add_context(destination=destination.label)

    logger.debug(
        "Built %s with %d action(s)", class_name.canonical_name, len(destination.actions)
    )
    return GeneratedFile(class_name, type_spec)


def generate_directions_files(
    graph: NavigationGraph, application_id: str = "", host: HostClasses = DEFAULT_HOST
) -> Tuple[GeneratedFile, ...]:
    """
    Generate directions for every destination that has actions.

    Args:
        graph: Navigation graph to generate from
        application_id: Package for destinations named ``.Name``
        host: Platform classes to reference

    Returns:
        Generated files in graph order

    Raises:
        ModelError: If a destination, action or argument is invalid
        CollisionError: If two destinations produce the same class name
    """
    files = []
    owners = OrderedDict()

    for destination in graph.iter_destinations():
        if not destination.actions:
            logger.debug("Skipping %s: no actions", destination.label)
            continue

        generated = generate_directions_file(application_id, destination, host)
        files.append(generated)
        owners.setdefault(generated.qualified_name, []).append(destination.label)

    collisions = [(name, labels) for name, labels in owners.items() if len(labels) > 1]
    if collisions:
        raise CollisionError(collisions)

    logger.info("Generated %d directions class(es)", len(files))
    return tuple(files)
