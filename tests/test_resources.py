import pytest

from gameframe.resources import Resource, ResourceManager


class Mesh(Resource):
    category = "Mesh"


class Texture(Resource):
    category = "Texture"


class Uncategorised(Resource):
    pass


def test_add_then_get_returns_same_object():
    manager = ResourceManager()
    mesh = Mesh()
    manager.add("Cube", mesh)
    assert manager.get(Mesh, "Cube") is mesh


def test_categories_are_separate():
    manager = ResourceManager()
    mesh = Mesh()
    texture = Texture()
    manager.add("Mailbox", mesh)
    manager.add("Mailbox", texture)
    assert manager.get(Mesh, "Mailbox") is mesh
    assert manager.get(Texture, "Mailbox") is texture


def test_add_replaces_existing_name():
    manager = ResourceManager()
    first, second = Mesh(), Mesh()
    manager.add("Cube", first)
    manager.add("Cube", second)
    assert manager.get(Mesh, "Cube") is second


def test_missing_name_raises():
    manager = ResourceManager()
    manager.add("Cube", Mesh())
    with pytest.raises(KeyError):
        manager.get(Mesh, "Sphere")


def test_missing_category_raises():
    manager = ResourceManager()
    manager.add("Cube", Mesh())
    with pytest.raises(KeyError):
        manager.get(Texture, "Cube")


def test_resource_without_category_is_rejected():
    manager = ResourceManager()
    with pytest.raises(TypeError):
        manager.add("Thing", Uncategorised())
    with pytest.raises(TypeError):
        manager.get(Uncategorised, "Thing")


def test_resource_lists_groups_and_sorts_names():
    manager = ResourceManager()
    manager.add("Sphere", Mesh())
    manager.add("Cube", Mesh())
    manager.add("Mailbox", Texture())
    assert manager.resource_lists() == {
        "Mesh": ["Cube", "Sphere"],
        "Texture": ["Mailbox"],
    }


def test_resource_lists_empty_manager():
    assert ResourceManager().resource_lists() == {}