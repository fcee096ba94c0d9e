"""
Naming rules for generated directions classes.

Derives class names and packages from destinations, renders the runtime
id expression of a destination, and flags names that cannot be used as
Java identifiers.
"""

import re
from typing import Optional

from .errors import ModelError
from .model import Destination, Id
from .specs import ClassName

DIRECTIONS_SUFFIX = "Directions"

JAVA_RESERVED = {
    "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
    "class", "const", "continue", "default", "do", "double", "else", "enum",
    "extends", "final", "finally", "float", "for", "goto", "if", "implements",
    "import", "instanceof", "int", "interface", "long", "native", "new",
    "package", "private", "protected", "public", "return", "short", "static",
    "strictfp", "super", "switch", "synchronized", "this", "throw", "throws",
    "transient", "try", "void", "volatile", "while", "true", "false", "null",
    "var", "record", "yield",
}

_JAVA_IDENTIFIER = re.compile(r"^[A-Za-z_$][\w$]*$")


def capitalize(name: str) -> str:
    """
    Upper-case the first character when it is a lower-case letter.

    The rest of the string is untouched and empty strings stay empty, so
    ``"fooBar"`` becomes ``"FooBar"`` and ``"FOO"`` stays ``"FOO"``.
    """
    if not name or not name[0].islower():
        return name
    head = name[0].title()
    if len(head) != 1:
        # characters like 'ß' have no single-character title case
        return name
    return head + name[1:]


def is_java_identifier(name: str) -> bool:
    return bool(_JAVA_IDENTIFIER.match(name)) and name not in JAVA_RESERVED


def id_accessor(id: Optional[Id]) -> str:
    """Java expression for the runtime value of ``id``; ``"0"`` when absent."""
    if id is None:
        return "0"
    return f"{id.package_name}.R.id.{id.name}"


def directions_class_name(destination: Destination, application_id: str) -> ClassName:
    """
    Derive the holding class of ``destination``'s directions.

    Args:
        destination: Destination owning the actions
        application_id: Package used for names starting with ``.``

    Returns:
        ClassName of the ``<Name>Directions`` class

    Raises:
        ModelError: If the destination has neither a name nor an id
    """
    if destination.name:
        simple_name = destination.name.rsplit(".", 1)[-1]
        specified_package = (
            destination.name.rsplit(".", 1)[0] if "." in destination.name else ""
        )
        if specified_package:
            class_package = specified_package
        elif destination.name.startswith("."):
            class_package = application_id
        else:
            class_package = ""
        return ClassName(class_package, f"{simple_name}{DIRECTIONS_SUFFIX}")

    if destination.id is not None:
        return ClassName(
            destination.id.package_name,
            f"{capitalize(destination.id.name)}{DIRECTIONS_SUFFIX}",
        )

    raise ModelError("Destination with actions should have either name or id")


def action_class_name(action_id: Id) -> str:
    """Simple name of the nested class generated for an action."""
    return capitalize(action_id.name)


def setter_name(argument_name: str) -> str:
    return f"set{capitalize(argument_name)}"
