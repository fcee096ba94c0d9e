"""
Immutable descriptions of generated Java classes.

The directions builders return these values; renderers turn them into
source text. Every value is a frozen dataclass holding tuples, so two
descriptions built from equal inputs compare equal.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple, Union


class Modifier(Enum):
    """Java modifiers in their canonical declaration order."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    STATIC = "static"
    FINAL = "final"


_MODIFIER_ORDER = list(Modifier)
_MISSING = object()


def _ordered(modifiers) -> Tuple[Modifier, ...]:
    return tuple(sorted(set(modifiers), key=_MODIFIER_ORDER.index))


@dataclass(frozen=True)
class ClassName:
    """A Java class reference: package plus (possibly dotted) simple name."""

    package_name: str
    simple_name: str

    @classmethod
    def best_guess(cls, canonical: str) -> "ClassName":
        """Split ``com.example.Outer.Inner`` at the first capitalized segment."""
        parts = canonical.split(".")
        for index, part in enumerate(parts):
            if part[:1].isupper():
                return cls(".".join(parts[:index]), ".".join(parts[index:]))
        return cls(".".join(parts[:-1]), parts[-1])

    @property
    def canonical_name(self) -> str:
        if self.package_name:
            return f"{self.package_name}.{self.simple_name}"
        return self.simple_name

    @property
    def reference_name(self) -> str:
        """Name usable once the class is imported."""
        return self.simple_name.rsplit(".", 1)[-1]

    def __str__(self) -> str:
        return self.canonical_name


@dataclass(frozen=True)
class ArrayTypeName:
    component: "TypeName"

    def __str__(self) -> str:
        return f"{self.component}[]"


# Primitive types are plain strings ("int", "boolean"...)
TypeName = Union[str, ClassName, ArrayTypeName]

# Maps a TypeName to the text used for it in a particular file
TypeNamer = Callable[[TypeName], str]


def default_type_namer(type_name: TypeName) -> str:
    """Render a type with fully qualified class names."""
    if isinstance(type_name, ArrayTypeName):
        return f"{default_type_namer(type_name.component)}[]"
    return str(type_name)


def java_string_literal(value: str) -> str:
    """Quote ``value`` as a Java string literal."""
    escapes = {
        "\b": "\\b",
        "\t": "\\t",
        "\n": "\\n",
        "\f": "\\f",
        "\r": "\\r",
        '"': '\\"',
        "\\": "\\\\",
    }
    out = ['"']
    for char in value:
        code = ord(char)
        if char in escapes:
            out.append(escapes[char])
        elif code < 0x20 or 0x7F <= code <= 0x9F or 0xD800 <= code <= 0xDFFF:
            # lone surrogates cannot be encoded as UTF-8, only escaped
            out.append(f"\\u{code:04x}")
        else:
            out.append(char)
    out.append('"')
    return "".join(out)


@dataclass(frozen=True)
class CodeBlock:
    """
    A single statement in placeholder form.

    Placeholders: ``$T`` type, ``$N`` name, ``$S`` string literal,
    ``$L`` literal text and ``$$`` for a dollar sign.
    """

    format: str
    args: Tuple[object, ...] = ()

    @classmethod
    def of(cls, format: str, *args) -> "CodeBlock":
        block = cls(format, tuple(args))
        block.to_string()  # fail fast on placeholder/argument mismatch
        return block

    def to_string(self, type_namer: Optional[TypeNamer] = None) -> str:
        namer = type_namer or default_type_namer
        out = []
        args = iter(self.args)
        index = 0
        while index < len(self.format):
            char = self.format[index]
            if char != "$":
                out.append(char)
                index += 1
                continue

            placeholder = self.format[index + 1 : index + 2]
            index += 2
            if placeholder == "$":
                out.append("$")
                continue

            try:
                arg = next(args)
            except StopIteration:
                raise ValueError(f"Missing argument for ${placeholder} in {self.format!r}")

            if placeholder == "T":
                out.append(namer(arg))
            elif placeholder in ("N", "L"):
                out.append(str(arg))
            elif placeholder == "S":
                out.append("null" if arg is None else java_string_literal(str(arg)))
            else:
                raise ValueError(f"Unknown placeholder ${placeholder} in {self.format!r}")

        if next(args, _MISSING) is not _MISSING:
            raise ValueError(f"Unused arguments for {self.format!r}")
        return "".join(out)

    def type_names(self) -> Tuple[TypeName, ...]:
        """Types referenced through ``$T`` placeholders."""
        found = []
        args = iter(self.args)
        index = 0
        while index < len(self.format):
            if self.format[index] == "$":
                placeholder = self.format[index + 1 : index + 2]
                index += 2
                if placeholder == "$":
                    continue
                arg = next(args)
                if placeholder == "T":
                    found.append(arg)
            else:
                index += 1
        return tuple(found)

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True)
class ParameterSpec:
    name: str
    type: TypeName


@dataclass(frozen=True)
class FieldSpec:
    name: str
    type: TypeName
    modifiers: Tuple[Modifier, ...] = ()
    initializer: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "modifiers", _ordered(self.modifiers))

    @property
    def is_final(self) -> bool:
        return Modifier.FINAL in self.modifiers


@dataclass(frozen=True)
class MethodSpec:
    """A method or, when ``is_constructor`` is set, a constructor."""

    name: str
    modifiers: Tuple[Modifier, ...] = ()
    parameters: Tuple[ParameterSpec, ...] = ()
    returns: Optional[TypeName] = None
    statements: Tuple[CodeBlock, ...] = ()
    is_constructor: bool = False

    def __post_init__(self):
        object.__setattr__(self, "modifiers", _ordered(self.modifiers))

    @property
    def is_static(self) -> bool:
        return Modifier.STATIC in self.modifiers

    @property
    def parameter_names(self) -> Tuple[str, ...]:
        return tuple(param.name for param in self.parameters)

    def body(self, type_namer: Optional[TypeNamer] = None) -> Tuple[str, ...]:
        return tuple(block.to_string(type_namer) for block in self.statements)


@dataclass(frozen=True)
class TypeSpec:
    """A class declaration, possibly holding nested classes."""

    name: str
    modifiers: Tuple[Modifier, ...] = ()
    superinterfaces: Tuple[TypeName, ...] = ()
    fields: Tuple[FieldSpec, ...] = ()
    methods: Tuple[MethodSpec, ...] = ()
    types: Tuple["TypeSpec", ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "modifiers", _ordered(self.modifiers))

    @property
    def constructor(self) -> Optional[MethodSpec]:
        return next((m for m in self.methods if m.is_constructor), None)

    def method(self, name: str) -> MethodSpec:
        """Return the first non-constructor method called ``name``."""
        for method in self.methods:
            if method.name == name and not method.is_constructor:
                return method
        raise KeyError(f"{self.name} has no method {name}")

    def field(self, name: str) -> FieldSpec:
        for spec in self.fields:
            if spec.name == name:
                return spec
        raise KeyError(f"{self.name} has no field {name}")

    def nested(self, name: str) -> "TypeSpec":
        for spec in self.types:
            if spec.name == name:
                return spec
        raise KeyError(f"{self.name} has no nested type {name}")


@dataclass(frozen=True)
class GeneratedFile:
    """One output file: a top level class placed in its package."""

    class_name: ClassName
    type_spec: TypeSpec

    @property
    def package_name(self) -> str:
        return self.class_name.package_name

    @property
    def qualified_name(self) -> str:
        return self.class_name.canonical_name
