"""
============================================================
 File: index_store.py
 Author: Internal Systems Automation Team
 Created: 2025-01-10
 Last Updated: 2026-10-19

 Description:
     Questo modulo gestisce la persistenza del registro degli
     script tramite il file index.json di ogni scope.

     Formato: lista JSON ordinata di record {"name", "description"}.
     Il percorso dello script non viene salvato: è sempre
     derivato dal nome.

     Il salvataggio è atomico (file temporaneo + rename), quindi
     un lettore non vede mai un indice scritto a metà. Due
     invocazioni concorrenti che salvano lo stesso scope non
     sono coordinate: vince l'ultima che scrive.
============================================================
"""

import json

from cmdlauncher.db.script_registry import ScriptRegistry
from cmdlauncher.errors import CorruptIndex, RegistryError, WriteFailure
from cmdlauncher.utils.file_loader import write_file_atomic

_FIELDS = {"name", "description"}


def dumps(registry):
    records = [script.to_dict() for script in registry.list()]
    return json.dumps(records, indent=2, ensure_ascii=False) + "\n"


def loads(text, source="<index>"):
    try:
        records = json.loads(text)
    except ValueError as e:
        raise CorruptIndex(source, f"invalid JSON ({e})") from e

    if not isinstance(records, list):
        raise CorruptIndex(source, "top level must be a JSON array")

    registry = ScriptRegistry()
    for position, record in enumerate(records):
        if not isinstance(record, dict) or set(record) != _FIELDS:
            raise CorruptIndex(source, f"entry {position} must have exactly the fields name, description")
        name = record["name"]
        description = record["description"]
        if not isinstance(name, str) or not isinstance(description, str):
            raise CorruptIndex(source, f"entry {position} has non-string fields")
        try:
            registry.add(name, description)
        except RegistryError as e:
            raise CorruptIndex(source, f"entry {position}: {e}") from e
    return registry


class IndexStore:
    """Carica e salva il registro di uno ScopeRoot"""

    def load(self, scope_root):
        index_file = scope_root.index_file
        try:
            text = index_file.read_text(encoding="utf-8")
        except FileNotFoundError:
            # Scope appena inizializzato o indice mai scritto
            return ScriptRegistry()
        except UnicodeDecodeError as e:
            raise CorruptIndex(index_file, f"not UTF-8 text ({e})") from e
        except OSError as e:
            raise CorruptIndex(index_file, f"unreadable ({e})") from e
        return loads(text, source=index_file)

    def save(self, scope_root, registry):
        index_file = scope_root.index_file
        try:
            write_file_atomic(index_file, dumps(registry))
        except (OSError, UnicodeError) as e:
            raise WriteFailure(index_file, e) from e
