import pytest

from cmdlauncher import __version__
from cmdlauncher.errors import CorruptIndex, WriteFailure
from cmdlauncher.main import build_parser, main
from cmdlauncher.models.scope_model import ScopeKind, ScopeRoot


@pytest.fixture
def menu(locator, project, make_menu):
    locator.init_global()
    locator.init(project)
    return make_menu(project)


def test_parser_run_collects_remaining_arguments():
    args = build_parser().parse_args(["-g", "deploy", "--force", "prod"])

    assert args.force_global
    assert args.script == "deploy"
    assert args.args == ["--force", "prod"]


def test_parser_edit_without_name():
    assert build_parser().parse_args(["-e"]).edit == ""


def test_version(menu):
    assert main(["--version"], menu=menu) == 0
    assert __version__ in menu.out.getvalue()


def test_add_joins_description_words(menu, project, store, launched):
    assert main(["--add", "hello", "prints", "hello"], menu=menu) == 0

    registry = store.load(ScopeRoot(project.resolve()))
    assert registry.get("hello").description == "prints hello"


def test_unknown_script_exit_code(menu, launched):
    assert main(["--remove", "ghost"], menu=menu) == 21
    assert main(["ghost"], menu=menu) == 21


def test_invalid_name_exit_code(menu, launched):
    assert main(["--add", "a/b"], menu=menu) == 22
    assert launched.calls == []


def test_duplicate_exit_code(menu, launched):
    main(["-a", "x"], menu=menu)
    assert main(["-a", "x"], menu=menu) == 20
    assert "already exists" in menu.err.getvalue()


def test_corrupt_index_exit_code_and_file_untouched(menu, project, launched):
    index_file = ScopeRoot(project.resolve()).index_file
    index_file.write_text("{broken", encoding="utf-8")

    code = main(["hello"], menu=menu)

    assert code == CorruptIndex.exit_code
    assert index_file.read_text(encoding="utf-8") == "{broken"


def test_run_forced_local_without_marker(locator, make_menu, tmp_path, launched):
    locator.init_global()
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()
    menu = make_menu(elsewhere)

    assert main(["-l", "anything"], menu=menu) == 10


def test_script_argument_with_management_action_is_usage_error(menu):
    assert main(["--list", "extra"], menu=menu) == 2


def test_bare_invocation_lists_scripts(menu, launched):
    menu.add("hello", "prints hello", ScopeKind.GLOBAL)

    assert main([], menu=menu) == 0

    output = menu.out.getvalue()
    assert "usage: cmd" in output
    assert "prints hello" in output


def test_undecodable_description_exit_code(menu, project, launched):
    code = main(["--add", "hello", "bad\udcff"], menu=menu)

    assert code == WriteFailure.exit_code
    assert list(ScopeRoot(project.resolve()).scripts_dir.iterdir()) == []
