"""
============================================================
 File: scope_model.py
 Author: Internal Systems Automation Team
 Created: 2026-10-19

 Description:
     Modello degli scope. Uno ScopeRoot è una cartella che
     contiene la sottocartella nascosta .cmd/ con dentro la
     cartella scripts/ e il file index.json. Uno Scope lega
     il tipo (globale o locale) alla sua radice su disco.
============================================================
"""

from enum import Enum
from pathlib import Path

from cmdlauncher.config import setting


class ScopeKind(Enum):
    GLOBAL = "global"
    LOCAL = "local"


class ScopeRoot:
    """Radice di uno scope e percorsi derivati"""

    def __init__(self, path):
        self.path = Path(path)

    @property
    def cmd_dir(self):
        return self.path / setting.CMD_DIR_NAME

    @property
    def scripts_dir(self):
        return self.cmd_dir / setting.SCRIPTS_DIR_NAME

    @property
    def index_file(self):
        return self.cmd_dir / setting.INDEX_FILE_NAME

    def exists(self):
        """Il marker .cmd/ è presente"""
        return self.cmd_dir.is_dir()

    def script_path(self, name):
        """Percorso dello script: scripts/<name>.<estensione>"""
        return self.scripts_dir / f"{name}.{setting.SCRIPT_EXTENSION}"

    def __eq__(self, other):
        if not isinstance(other, ScopeRoot):
            return NotImplemented
        return self.path == other.path

    def __hash__(self):
        return hash(self.path)

    def __repr__(self):
        return f"ScopeRoot({str(self.path)!r})"


class Scope:
    def __init__(self, kind, root):
        self.kind = kind
        self.root = root

    def __eq__(self, other):
        if not isinstance(other, Scope):
            return NotImplemented
        return self.kind is other.kind and self.root == other.root

    def __repr__(self):
        return f"Scope({self.kind.value}, {self.root!r})"
