import pytest

from cmdlauncher.db.script_registry import ScriptRegistry, validate_name
from cmdlauncher.errors import DuplicateName, InvalidName, NotFound
from cmdlauncher.models.script_model import Script


def test_add_then_list_returns_single_entry():
    registry = ScriptRegistry()

    script = registry.add("hello", "prints hello")

    assert script == Script("hello", "prints hello")
    assert registry.list() == [Script("hello", "prints hello")]
    assert len(registry) == 1


def test_list_keeps_insertion_order():
    registry = ScriptRegistry()
    for name in ["zeta", "alpha", "mid"]:
        registry.add(name, f"{name} script")

    assert [s.name for s in registry.list()] == ["zeta", "alpha", "mid"]


def test_duplicate_add_fails_and_keeps_first_entry():
    registry = ScriptRegistry()
    registry.add("x", "first")

    with pytest.raises(DuplicateName):
        registry.add("x", "second")

    assert registry.list() == [Script("x", "first")]


def test_remove_returns_entry():
    registry = ScriptRegistry()
    registry.add("a", "A")
    registry.add("b", "B")

    removed = registry.remove("a")

    assert removed == Script("a", "A")
    assert "a" not in registry
    assert registry.get("a") is None
    assert [s.name for s in registry] == ["b"]


def test_remove_unknown_name_fails():
    registry = ScriptRegistry()
    with pytest.raises(NotFound):
        registry.remove("ghost")


def test_get_unknown_returns_none():
    assert ScriptRegistry().get("nope") is None


def test_readding_after_remove_goes_to_the_end():
    registry = ScriptRegistry()
    registry.add("a")
    registry.add("b")
    registry.remove("a")
    registry.add("a")

    assert [s.name for s in registry] == ["b", "a"]


@pytest.mark.parametrize("name", [
    "",
    "-x",
    "--init",
    "-a",
    "--version",
    "dir/name",
    "dir\\name",
    ".",
    "..",
    " padded",
    "bad\udcffbyte",
])
def test_invalid_names_are_rejected(name):
    registry = ScriptRegistry()
    with pytest.raises(InvalidName):
        registry.add(name, "desc")
    assert len(registry) == 0


@pytest.mark.parametrize("name", ["hello", "build-all", "deploy_prod", "v1.2", "ünïcode"])
def test_valid_names(name):
    validate_name(name)
