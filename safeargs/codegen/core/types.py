"""
Argument type catalog for directions generation.

Maps every argument type tag to its Java representation, the Bundle put
method used to store it, and the renderer that turns a default value
written in the navigation graph into a Java literal.
"""

import math
import re
import struct
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Optional

from .errors import GeneratorError, ModelError
from .specs import ArrayTypeName, ClassName, TypeName, java_string_literal

NULL_VALUE = "@null"

STRING_CLASSNAME = ClassName("java.lang", "String")

_INT_PATTERN = re.compile(r"^-?(0[xX][0-9a-fA-F]+|[0-9]+)$")
_REFERENCE_PATTERN = re.compile(
    r"^@(?:(?P<package>[A-Za-z_][\w.]*):)?(?P<type>[a-z_]+)/(?P<name>[A-Za-z_]\w*)$"
)
_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][\w$]*$")


class TypeTag(Enum):
    """Closed set of argument types understood by the generator."""

    INT = "integer"
    LONG = "long"
    FLOAT = "float"
    BOOLEAN = "boolean"
    STRING = "string"
    REFERENCE = "reference"
    ENUM = "enum"
    PARCELABLE = "parcelable"
    SERIALIZABLE = "serializable"

    @property
    def needs_class(self) -> bool:
        return self in _OBJECT_TAGS


_OBJECT_TAGS = {TypeTag.ENUM, TypeTag.PARCELABLE, TypeTag.SERIALIZABLE}


@dataclass(frozen=True)
class ArgumentType:
    """
    Type of a single argument.

    ``class_name`` is the fully qualified Java class for enum, parcelable
    and serializable arguments and must be empty for the other tags.
    """

    tag: TypeTag
    is_array: bool = False
    class_name: str = field(default="")

    @classmethod
    def parse(cls, text: str, class_name: str = "") -> "ArgumentType":
        """Build a type from its graph spelling, e.g. ``"integer"`` or ``"string[]"``."""
        name = text.strip()
        is_array = name.endswith("[]")
        if is_array:
            name = name[:-2]
        try:
            tag = TypeTag(name)
        except ValueError:
            raise ModelError(f"Unsupported argument type: {text!r}")
        return cls(tag, is_array, class_name)

    @property
    def display_name(self) -> str:
        base = self.class_name if self.tag.needs_class else self.tag.value
        return f"{base}[]" if self.is_array else base

    def __str__(self) -> str:
        return self.display_name


# Literal renderers: (value, arg_type, application_id) -> java literal text
LiteralRenderer = Callable[[str, ArgumentType, str], str]


def _invalid(value: str, arg_type: ArgumentType) -> ModelError:
    return ModelError(
        f"Default value {value!r} is not a valid {arg_type.display_name} literal"
    )


def _integral(value: str, arg_type: ArgumentType, bits: int) -> str:
    if not _INT_PATTERN.match(value):
        raise _invalid(value, arg_type)

    negative = value.startswith("-")
    digits = value.lstrip("-")
    is_hex = digits[:2].lower() == "0x"
    number = int(digits, 16) if is_hex else int(digits)

    # hex literals may use the full unsigned width, like in Java source
    limit = (1 << bits) - 1 if is_hex and not negative else (1 << (bits - 1)) - 1
    if number > limit + (1 if negative else 0):
        raise ModelError(
            f"Default value {value!r} is out of range for {arg_type.display_name}"
        )
    if is_hex:
        return value
    return str(-number if negative else number)


def _int_literal(value: str, arg_type: ArgumentType, application_id: str) -> str:
    return _integral(value, arg_type, 32)


def _long_literal(value: str, arg_type: ArgumentType, application_id: str) -> str:
    if value[-1:] in ("l", "L"):
        value = value[:-1]
    return _integral(value, arg_type, 64) + "L"


def _float_literal(value: str, arg_type: ArgumentType, application_id: str) -> str:
    text = value[:-1] if value[-1:] in ("f", "F") else value
    try:
        number = float(text)
    except ValueError:
        raise _invalid(value, arg_type)
    if math.isnan(number) or math.isinf(number) or text.strip() != text:
        raise _invalid(value, arg_type)

    # round to single precision the way javac does
    try:
        (single,) = struct.unpack("f", struct.pack("f", number))
    except OverflowError:
        single = math.inf
    if math.isinf(single) or (number != 0 and single == 0):
        raise ModelError(
            f"Default value {value!r} is out of range for {arg_type.display_name}"
        )
    return f"{number!r}F"


def _boolean_literal(value: str, arg_type: ArgumentType, application_id: str) -> str:
    if value not in ("true", "false"):
        raise _invalid(value, arg_type)
    return value


def _string_literal(value: str, arg_type: ArgumentType, application_id: str) -> str:
    if value == NULL_VALUE:
        return "null"
    return java_string_literal(value)


def _reference_literal(value: str, arg_type: ArgumentType, application_id: str) -> str:
    if value == "0":
        return "0"
    match = _REFERENCE_PATTERN.match(value)
    if not match:
        raise _invalid(value, arg_type)
    package = match.group("package") or application_id
    if not package:
        raise ModelError(
            f"Reference {value!r} has no package and no application id was given"
        )
    return f"{package}.R.{match.group('type')}.{match.group('name')}"


def _enum_literal(value: str, arg_type: ArgumentType, application_id: str) -> str:
    if value == NULL_VALUE:
        return "null"
    if not _IDENTIFIER_PATTERN.match(value):
        raise _invalid(value, arg_type)
    return f"{arg_type.class_name}.{value}"


def _null_only_literal(value: str, arg_type: ArgumentType, application_id: str) -> str:
    if value != NULL_VALUE:
        raise ModelError(
            f"{arg_type.display_name} arguments only accept {NULL_VALUE} as default, "
            f"got {value!r}"
        )
    return "null"


@dataclass(frozen=True)
class TypeEntry:
    """Catalog row for one tag."""

    representation: Optional[TypeName]
    put_operation: str
    render_literal: LiteralRenderer
    array_put_operation: Optional[str]


class TypeCatalog:
    """
    Exhaustive lookup from argument types to their Java treatment.

    The catalog verifies on construction that every ``TypeTag`` has an
    entry, so a missing tag is reported when the generator is built rather
    than when an argument happens to use it.
    """

    def __init__(self, entries: Dict[TypeTag, TypeEntry]):
        missing = [tag.value for tag in TypeTag if tag not in entries]
        if missing:
            raise GeneratorError(f"Type catalog has no entry for: {', '.join(missing)}")
        self._entries = dict(entries)

    def entry(self, arg_type: ArgumentType) -> TypeEntry:
        """Validate ``arg_type`` and return its catalog row."""
        if not isinstance(arg_type, ArgumentType) or arg_type.tag not in self._entries:
            raise ModelError(f"Unsupported argument type: {arg_type!r}")

        entry = self._entries[arg_type.tag]
        if arg_type.tag.needs_class:
            if not arg_type.class_name:
                raise ModelError(f"{arg_type.tag.value} argument type needs a class name")
        elif arg_type.class_name:
            raise ModelError(
                f"{arg_type.tag.value} argument type does not take a class name"
            )
        if arg_type.is_array and entry.array_put_operation is None:
            raise ModelError(f"Arrays of {arg_type.tag.value} are not supported")
        return entry

    def representation(self, arg_type: ArgumentType) -> TypeName:
        entry = self.entry(arg_type)
        if arg_type.tag.needs_class:
            base = ClassName.best_guess(arg_type.class_name)
        else:
            base = entry.representation
        return ArrayTypeName(base) if arg_type.is_array else base

    def put_operation(self, arg_type: ArgumentType) -> str:
        entry = self.entry(arg_type)
        return entry.array_put_operation if arg_type.is_array else entry.put_operation

    def literal(self, arg_type: ArgumentType, value: str, application_id: str = "") -> str:
        entry = self.entry(arg_type)
        if not isinstance(value, str):
            raise ModelError(f"Default value must be a string, got {value!r}")
        if arg_type.is_array:
            return _null_only_literal(value, arg_type, application_id)
        return entry.render_literal(value, arg_type, application_id)


CATALOG = TypeCatalog(
    {
        TypeTag.INT: TypeEntry("int", "putInt", _int_literal, "putIntArray"),
        TypeTag.LONG: TypeEntry("long", "putLong", _long_literal, "putLongArray"),
        TypeTag.FLOAT: TypeEntry("float", "putFloat", _float_literal, "putFloatArray"),
        TypeTag.BOOLEAN: TypeEntry(
            "boolean", "putBoolean", _boolean_literal, "putBooleanArray"
        ),
        TypeTag.STRING: TypeEntry(
            STRING_CLASSNAME, "putString", _string_literal, "putStringArray"
        ),
        TypeTag.REFERENCE: TypeEntry("int", "putInt", _reference_literal, None),
        TypeTag.ENUM: TypeEntry(None, "putSerializable", _enum_literal, "putSerializable"),
        TypeTag.PARCELABLE: TypeEntry(
            None, "putParcelable", _null_only_literal, "putParcelableArray"
        ),
        TypeTag.SERIALIZABLE: TypeEntry(
            None, "putSerializable", _null_only_literal, "putSerializable"
        ),
    }
)


def put_operation(arg_type: ArgumentType) -> str:
    """Bundle method used to store a value of ``arg_type``."""
    return CATALOG.put_operation(arg_type)


def literal(arg_type: ArgumentType, value: str, application_id: str = "") -> str:
    """Java literal for a default value of ``arg_type``."""
    return CATALOG.literal(arg_type, value, application_id)


def representation(arg_type: ArgumentType) -> TypeName:
    """Java type used for fields and parameters of ``arg_type``."""
    return CATALOG.representation(arg_type)
