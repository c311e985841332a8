"""
============================================================
 File: scope_locator.py
 Author: Internal Systems Automation Team
 Created: 2026-10-19

 Description:
     Risolve lo scope effettivo di un'invocazione. Lo scope
     locale è la cartella antenata più vicina (cwd compresa)
     che contiene il marker .cmd/; lo scope globale ha una
     radice fissa, calcolata una volta e passata al costruttore.
     La ricerca non crea mai cartelle.
============================================================
"""

from pathlib import Path

from cmdlauncher.errors import AlreadyInitialized, GlobalScopeMissing, MarkerNotDirectory, NoLocalScope
from cmdlauncher.models.scope_model import Scope, ScopeKind, ScopeRoot


class ScopeLocator:
    def __init__(self, global_root):
        self.global_root = ScopeRoot(Path(global_root).resolve())

    def find_local(self, cwd):
        """Primo antenato di cwd (compresa) con il marker, o None"""
        directory = Path(cwd).resolve()
        while True:
            root = ScopeRoot(directory)
            # La radice globale non è mai uno scope locale
            if root != self.global_root and root.exists():
                return root
            if directory.parent == directory:
                return None
            directory = directory.parent

    def global_scope(self):
        if not self.global_root.exists():
            raise GlobalScopeMissing(self.global_root.path)
        return Scope(ScopeKind.GLOBAL, self.global_root)

    def resolve(self, cwd, override=None):
        if override is ScopeKind.GLOBAL:
            return self.global_scope()

        local_root = self.find_local(cwd)
        if local_root is not None:
            return Scope(ScopeKind.LOCAL, local_root)
        if override is ScopeKind.LOCAL:
            raise NoLocalScope(Path(cwd))
        return self.global_scope()

    def scopes(self, cwd):
        """Tutti gli scope visibili da cwd: prima il locale, poi il globale"""
        found = []
        local_root = self.find_local(cwd)
        if local_root is not None:
            found.append(Scope(ScopeKind.LOCAL, local_root))
        if self.global_root.exists():
            found.append(Scope(ScopeKind.GLOBAL, self.global_root))
        return found

    def init(self, cwd):
        return _initialize(ScopeRoot(Path(cwd).resolve()))

    def init_global(self):
        return _initialize(self.global_root)


def _initialize(root):
    """Crea .cmd/, .cmd/scripts/ e un index.json vuoto"""
    if root.exists():
        raise AlreadyInitialized(root.path)
    if root.cmd_dir.exists():
        raise MarkerNotDirectory(root.cmd_dir)
    root.cmd_dir.mkdir(parents=True)
    root.scripts_dir.mkdir()
    root.index_file.write_text("[]\n", encoding="utf-8")
    return root
