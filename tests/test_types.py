"""Tests for the argument type catalog."""

import pytest

from safeargs.codegen.core.errors import GeneratorError, ModelError
from safeargs.codegen.core.specs import ArrayTypeName, ClassName
from safeargs.codegen.core.types import (
    CATALOG,
    ArgumentType,
    TypeCatalog,
    TypeTag,
    literal,
    put_operation,
    representation,
)


def test_catalog_covers_every_tag():
    for tag in TypeTag:
        arg_type = ArgumentType(tag, class_name="com.example.Thing" if tag.needs_class else "")
        assert put_operation(arg_type)
        assert representation(arg_type)


def test_incomplete_catalog_is_rejected_when_built():
    with pytest.raises(GeneratorError, match="long"):
        TypeCatalog({TypeTag.INT: CATALOG._entries[TypeTag.INT]})


@pytest.mark.parametrize(
    "arg_type,expected",
    [
        (ArgumentType(TypeTag.INT), "putInt"),
        (ArgumentType(TypeTag.LONG), "putLong"),
        (ArgumentType(TypeTag.FLOAT), "putFloat"),
        (ArgumentType(TypeTag.BOOLEAN), "putBoolean"),
        (ArgumentType(TypeTag.STRING), "putString"),
        (ArgumentType(TypeTag.REFERENCE), "putInt"),
        (ArgumentType(TypeTag.ENUM, class_name="com.example.Color"), "putSerializable"),
        (ArgumentType(TypeTag.PARCELABLE, class_name="com.example.User"), "putParcelable"),
        (ArgumentType(TypeTag.SERIALIZABLE, class_name="com.example.Blob"), "putSerializable"),
        (ArgumentType(TypeTag.INT, is_array=True), "putIntArray"),
        (ArgumentType(TypeTag.STRING, is_array=True), "putStringArray"),
        (
            ArgumentType(TypeTag.PARCELABLE, is_array=True, class_name="com.example.User"),
            "putParcelableArray",
        ),
        (
            ArgumentType(TypeTag.ENUM, is_array=True, class_name="com.example.Color"),
            "putSerializable",
        ),
    ],
)
def test_put_operation(arg_type, expected):
    assert put_operation(arg_type) == expected


def test_representation():
    assert representation(ArgumentType(TypeTag.INT)) == "int"
    assert representation(ArgumentType(TypeTag.REFERENCE)) == "int"
    assert representation(ArgumentType(TypeTag.STRING)) == ClassName("java.lang", "String")
    assert representation(
        ArgumentType(TypeTag.PARCELABLE, class_name="com.example.Outer.User")
    ) == ClassName("com.example", "Outer.User")
    assert representation(ArgumentType(TypeTag.FLOAT, is_array=True)) == ArrayTypeName(
        "float"
    )


@pytest.mark.parametrize(
    "tag,value,expected",
    [
        (TypeTag.INT, "12", "12"),
        (TypeTag.INT, "-7", "-7"),
        (TypeTag.INT, "007", "7"),
        (TypeTag.INT, "0x1F", "0x1F"),
        (TypeTag.INT, "2147483647", "2147483647"),
        (TypeTag.INT, "-2147483648", "-2147483648"),
        (TypeTag.INT, "0xFFFFFFFF", "0xFFFFFFFF"),
        (TypeTag.LONG, "5", "5L"),
        (TypeTag.LONG, "5L", "5L"),
        (TypeTag.LONG, "9223372036854775807", "9223372036854775807L"),
        (TypeTag.FLOAT, "1.5", "1.5F"),
        (TypeTag.FLOAT, "2", "2.0F"),
        (TypeTag.FLOAT, "0.25f", "0.25F"),
        (TypeTag.FLOAT, "3.4e38", "3.4e+38F"),
        (TypeTag.FLOAT, "0", "0.0F"),
        (TypeTag.BOOLEAN, "true", "true"),
        (TypeTag.BOOLEAN, "false", "false"),
        (TypeTag.STRING, "x", '"x"'),
        (TypeTag.STRING, 'say "hi"\n', '"say \\"hi\\"\\n"'),
        (TypeTag.STRING, "@null", "null"),
        (TypeTag.REFERENCE, "@drawable/icon", "com.app.R.drawable.icon"),
        (TypeTag.REFERENCE, "@android:color/white", "android.R.color.white"),
        (TypeTag.REFERENCE, "0", "0"),
    ],
)
def test_literal(tag, value, expected):
    assert literal(ArgumentType(tag), value, "com.app") == expected


@pytest.mark.parametrize(
    "tag,value",
    [
        (TypeTag.INT, "abc"),
        (TypeTag.INT, "1.5"),
        (TypeTag.INT, "2147483648"),
        (TypeTag.INT, ""),
        (TypeTag.LONG, "9223372036854775808"),
        (TypeTag.FLOAT, "fast"),
        (TypeTag.FLOAT, "nan"),
        (TypeTag.FLOAT, "1e39"),
        (TypeTag.FLOAT, "3.5e38"),
        (TypeTag.FLOAT, "-1e39f"),
        (TypeTag.FLOAT, "1e-50"),
        (TypeTag.BOOLEAN, "True"),
        (TypeTag.BOOLEAN, "1"),
        (TypeTag.REFERENCE, "icon"),
    ],
)
def test_unrepresentable_literal_is_a_model_error(tag, value):
    with pytest.raises(ModelError):
        literal(ArgumentType(tag), value, "com.app")


def test_enum_literal_uses_qualified_constant():
    color = ArgumentType(TypeTag.ENUM, class_name="com.example.Color")
    assert literal(color, "RED") == "com.example.Color.RED"
    assert literal(color, "@null") == "null"
    with pytest.raises(ModelError):
        literal(color, "not a constant")


def test_object_and_array_defaults_only_accept_null():
    user = ArgumentType(TypeTag.PARCELABLE, class_name="com.example.User")
    ints = ArgumentType(TypeTag.INT, is_array=True)
    assert literal(user, "@null") == "null"
    assert literal(ints, "@null") == "null"
    with pytest.raises(ModelError, match="@null"):
        literal(user, "someone")
    with pytest.raises(ModelError):
        literal(ints, "1")


def test_reference_without_package_needs_application_id():
    with pytest.raises(ModelError, match="application id"):
        literal(ArgumentType(TypeTag.REFERENCE), "@drawable/icon")


def test_invalid_types_are_rejected():
    with pytest.raises(ModelError, match="Arrays of reference"):
        put_operation(ArgumentType(TypeTag.REFERENCE, is_array=True))
    with pytest.raises(ModelError, match="needs a class name"):
        representation(ArgumentType(TypeTag.ENUM))
    with pytest.raises(ModelError, match="does not take a class name"):
        representation(ArgumentType(TypeTag.INT, class_name="java.lang.Integer"))
    with pytest.raises(ModelError, match="Unsupported"):
        put_operation(ArgumentType("uuid"))


def test_parse_type_spelling():
    assert ArgumentType.parse("integer") == ArgumentType(TypeTag.INT)
    assert ArgumentType.parse("string[]") == ArgumentType(TypeTag.STRING, is_array=True)
    assert ArgumentType.parse("enum", "com.example.Color") == ArgumentType(
        TypeTag.ENUM, class_name="com.example.Color"
    )
    with pytest.raises(ModelError, match="Unsupported argument type"):
        ArgumentType.parse("date")
