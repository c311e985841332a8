"""
============================================================
File: tool_menu.py
Author: Internal Systems Automation Team
Created: 2025-01-10
Last Updated: 2026-10-19

Description:
Dispatcher dei comandi del launcher. Traduce le azioni della
riga di comando in chiamate a ScopeLocator, ScriptRegistry e
IndexStore, poi apre l'editor o lancia lo script come
processo figlio in primo piano. Output tramite la libreria
Rich.
============================================================
"""

import shlex
import subprocess
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cmdlauncher import __version__
from cmdlauncher.config import setting
from cmdlauncher.db.index_store import IndexStore
from cmdlauncher.errors import LaunchError, NotFound, ScriptFileMissing
from cmdlauncher.models.scope_model import ScopeKind
from cmdlauncher.utils.logger import logger


class ToolMenu:
    def __init__(self, locator, config, store=None, cwd=None, console=None, err_console=None):
        self.locator = locator
        self.config = config
        self.store = store or IndexStore()
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    # --- azioni di gestione ---

    def init(self, override=None):
        if override is ScopeKind.GLOBAL:
            root = self.locator.init_global()
        else:
            root = self.locator.init(self.cwd)
        logger.info(f"Scope inizializzato: {root.path}")
        self.console.print(f"[bold green]Initialized {escape(str(root.cmd_dir))}[/bold green]")
        return 0

    def add(self, name, description="", override=None):
        scope = self.locator.resolve(self.cwd, override)
        registry = self.store.load(scope.root)
        script = registry.add(name, description)

        # Il file si crea solo dopo che l'indice è stato salvato
        self.store.save(scope.root, registry)

        script_path = scope.root.script_path(script.name)
        script_path.parent.mkdir(parents=True, exist_ok=True)
        if not script_path.exists():
            script_path.write_text(self.config.script_template, encoding="utf-8")
            script_path.chmod(setting.SCRIPT_MODE)
            logger.info(f"Script creato: {script_path}")
        else:
            logger.info(f"Script già presente, riutilizzato: {script_path}")

        self.console.print(f"[bold green]Added '{escape(script.name)}' to the {scope.kind.value} scope[/bold green]")
        return self.edit_file(script_path)

    def edit(self, name=None, override=None):
        if name is None:
            scope = self.locator.resolve(self.cwd, override)
            return self.edit_file(scope.root.index_file)

        scope, _registry, script = self._find_script(name, override)
        return self.edit_file(scope.root.script_path(script.name))

    def remove(self, name, override=None):
        scope, registry, script = self._find_script(name, override)
        registry.remove(script.name)
        self.store.save(scope.root, registry)
        logger.info(f"Script rimosso dall'indice: {script.name} ({scope.root.path})")
        self.console.print(
            f"[bold green]Removed '{escape(script.name)}' from the {scope.kind.value} index[/bold green] "
            f"(file kept at {escape(str(scope.root.script_path(script.name)))})"
        )
        return 0

    def version(self):
        self.console.print(f"cmd {__version__}")
        return 0

    def show_list(self, override=None):
        if override is None:
            scopes = self.locator.scopes(self.cwd)
        else:
            scopes = [self.locator.resolve(self.cwd, override)]

        table = Table(show_header=True, header_style="bold blue")
        table.add_column("Script Name")
        table.add_column("Description")
        table.add_column("Scope")

        count = 0
        for scope in scopes:
            for script in self.store.load(scope.root).list():
                table.add_row(escape(script.name), escape(script.description), scope.kind.value)
                count += 1

        if count == 0:
            self.console.print("[yellow]No scripts found[/yellow]")
        else:
            self.console.print(table)
        return 0

    # --- esecuzione ---

    def run(self, name, args=(), override=None):
        scope, _registry, script = self._find_script(name, override)
        script_path = scope.root.script_path(script.name)
        if not script_path.is_file():
            raise ScriptFileMissing(script.name, script_path)
        return self._execute([str(script_path), *args])

    def edit_file(self, path):
        editor = shlex.split(self.config.editor) or [setting.DEFAULT_EDITOR]
        return self._execute([*editor, str(path)])

    def _find_script(self, name, override):
        """Cerca lo script: scope forzato, altrimenti prima il locale e poi il globale"""
        if override is not None:
            scopes = [self.locator.resolve(self.cwd, override)]
        else:
            scopes = self.locator.scopes(self.cwd)
            if not scopes:
                # Nessuno scope: solleva l'errore del globale mancante
                scopes = [self.locator.resolve(self.cwd)]

        for scope in scopes:
            registry = self.store.load(scope.root)
            script = registry.get(name)
            if script is not None:
                return scope, registry, script
        raise NotFound(name)

    def _execute(self, cmd):
        logger.info(f"Executing: {cmd}")
        try:
            result = subprocess.run(cmd)
        except OSError as e:
            raise LaunchError(cmd[0], e) from e

        returncode = result.returncode
        if returncode < 0:
            # Terminato da un segnale: codice come nelle shell
            returncode = 128 - returncode
        if returncode != 0:
            logger.info(f"Exit code {returncode}: {cmd[0]}")
            self.err_console.print(f"[yellow]INFO: Program exited with code: {returncode}[/yellow]")
        return returncode
