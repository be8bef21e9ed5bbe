import dataclasses

import pytest

from json_to_php.pipeline.analyzer import ArrayOf, ClassRef, Primitive


def test_array_of_rejects_nested_array():
    inner = ArrayOf(Primitive("int", "ids"))
    with pytest.raises(TypeError):
        ArrayOf(inner, nesting=2)


def test_array_of_rejects_zero_nesting():
    with pytest.raises(ValueError):
        ArrayOf(Primitive("int", "ids"), nesting=0)


def test_array_of_property_name():
    assert ArrayOf(ClassRef("RootUsers", "users", {})).property_name == "users"


def test_unknown_primitive():
    with pytest.raises(ValueError):
        Primitive("double", "x")


def test_nodes_are_frozen():
    prop = Primitive("int", "x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        prop.type_name = "string"


def test_class_ref_copies_members():
    members = {"a": Primitive("int", "a")}
    class_ref = ClassRef("Root", "root", members)
    members["b"] = Primitive("int", "b")
    assert list(class_ref.members) == ["a"]
