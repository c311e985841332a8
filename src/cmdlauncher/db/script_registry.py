"""
============================================================
 File: script_registry.py
 Author: Internal Systems Automation Team
 Created: 2026-10-19

 Description:
     Registro in memoria degli script di uno scope: mappa
     ordinata nome -> Script. L'ordine di inserimento viene
     mantenuto per avere un elenco stabile nell'help. Il
     registro non tocca mai il disco.
============================================================
"""

import os

from cmdlauncher.errors import DuplicateName, InvalidName, NotFound
from cmdlauncher.models.script_model import Script

# Token dei comandi di gestione: un nome script non può coincidere
RESERVED_NAMES = frozenset({
    "--init", "-i",
    "--add", "-a",
    "--edit", "-e",
    "--remove", "-r",
    "--list",
    "--version",
    "--global", "-g",
    "--local", "-l",
    "--help", "-h",
})

_SEPARATORS = {"/", "\\", os.sep} | ({os.altsep} if os.altsep else set())


def validate_name(name):
    """Solleva InvalidName se il nome non è utilizzabile come alias"""
    if not isinstance(name, str) or not name:
        raise InvalidName(name, "name must be a non-empty string")
    if name in RESERVED_NAMES:
        raise InvalidName(name, "name is reserved for a management command")
    if name.startswith("-"):
        raise InvalidName(name, "name must not start with '-'")
    if any(sep in name for sep in _SEPARATORS):
        raise InvalidName(name, "name must not contain path separators")
    if name in (".", ".."):
        raise InvalidName(name, "name must not be a relative directory")
    if "\x00" in name or name != name.strip():
        raise InvalidName(name, "name contains invalid characters")
    if any("\ud800" <= ch <= "\udfff" for ch in name):
        raise InvalidName(name, "name is not valid UTF-8")


class ScriptRegistry:
    def __init__(self):
        self._scripts = {}

    def add(self, name, description=""):
        validate_name(name)
        if name in self._scripts:
            raise DuplicateName(name)
        script = Script(name, description)
        self._scripts[name] = script
        return script

    def remove(self, name):
        try:
            return self._scripts.pop(name)
        except KeyError:
            raise NotFound(name) from None

    def get(self, name):
        return self._scripts.get(name)

    def list(self):
        return list(self._scripts.values())

    def __contains__(self, name):
        return name in self._scripts

    def __iter__(self):
        return iter(self.list())

    def __len__(self):
        return len(self._scripts)
