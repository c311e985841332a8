"""
============================================================
File: main.py
Author: Internal Systems Automation Team
Created: 2025-01-10
Last Updated: 2026-10-19

Description:
Entry point del launcher `cmd`. Legge la configurazione,
prepara il logger, costruisce lo ScopeLocator con la radice
globale e passa l'azione richiesta al ToolMenu. Gli errori
del launcher diventano un messaggio e un exit code.
============================================================
"""

import argparse
import sys

from rich.console import Console
from rich.markup import escape

from cmdlauncher.config.config import ConfigManager
from cmdlauncher.db.scope_locator import ScopeLocator
from cmdlauncher.errors import CmdError, UsageError
from cmdlauncher.menu.tool_menu import ToolMenu
from cmdlauncher.models.scope_model import ScopeKind
from cmdlauncher.utils.logger import logger, setup_logging

EDIT_INDEX = ""


def build_parser():
    p = argparse.ArgumentParser(
        prog="cmd",
        description="Register, edit and run small shell scripts in a global or a local scope.",
    )

    scope = p.add_mutually_exclusive_group()
    scope.add_argument("-g", "--global", dest="force_global", action="store_true", help="Force global scope")
    scope.add_argument("-l", "--local", dest="force_local", action="store_true", help="Force local scope")

    action = p.add_mutually_exclusive_group()
    action.add_argument("-i", "--init", action="store_true", help="Setup local scope in the current directory")
    action.add_argument("-a", "--add", nargs="+", metavar=("NAME", "DESCRIPTION"),
                        help="Create script and open it in the $EDITOR")
    action.add_argument("-e", "--edit", nargs="?", const=EDIT_INDEX, default=None, metavar="NAME",
                        help="Open script index or NAME in the $EDITOR")
    action.add_argument("-r", "--remove", metavar="NAME",
                        help="Remove script from the index (does NOT remove file)")
    action.add_argument("--list", action="store_true", help="List the scripts of the visible scopes")
    action.add_argument("--version", action="store_true", help="Prints out version information")

    p.add_argument("script", nargs="?", help="Name of the script to run")
    p.add_argument("args", nargs=argparse.REMAINDER, help="Arguments passed to the script")
    return p


def forced_scope(args):
    if args.force_global:
        return ScopeKind.GLOBAL
    if args.force_local:
        return ScopeKind.LOCAL
    return None


def dispatch(menu, args):
    override = forced_scope(args)
    management = args.init or args.add is not None or args.edit is not None \
        or args.remove is not None or args.list or args.version

    if management and args.script is not None:
        raise UsageError(f"unexpected argument '{args.script}'")

    if args.version:
        return menu.version()
    if args.init:
        return menu.init(override)
    if args.add is not None:
        name, *words = args.add
        return menu.add(name, " ".join(words), override)
    if args.edit is not None:
        return menu.edit(args.edit or None, override)
    if args.remove is not None:
        return menu.remove(args.remove, override)
    if args.list:
        return menu.show_list(override)
    if args.script is not None:
        return menu.run(args.script, args.args, override)

    # Nessuna azione: help e lista degli script disponibili
    menu.console.print(build_parser().format_usage(), markup=False, highlight=False)
    return menu.show_list(override)


def main(argv=None, menu=None):
    args = build_parser().parse_args(argv)
    err_console = menu.err_console if menu is not None else Console(stderr=True)

    try:
        if menu is None:
            config = ConfigManager()
            setup_logging(config.logs_dir, config.debug)
            menu = ToolMenu(ScopeLocator(config.global_dir), config, err_console=err_console)
        return dispatch(menu, args)
    except CmdError as e:
        logger.error(f"{type(e).__name__}: {e}")
        err_console.print(f"[bold red]ERROR:[/bold red] {escape(str(e))}", highlight=False)
        return e.exit_code
    except Exception as e:
        logger.exception(f"Errore inatteso: {e}")
        err_console.print(f"[bold red]ERROR:[/bold red] {escape(str(e))}", highlight=False)
        return 1


if __name__ == "__main__":
    sys.exit(main())
