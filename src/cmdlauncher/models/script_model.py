"""
============================================================
 File: script_model.py
 Author: Internal Systems Automation Team
 Created: 2025-01-10
 Last Updated: 2026-10-19

 Description:
     Modello dati che rappresenta uno script registrato in
     uno scope. Incapsula solo nome e descrizione: il percorso
     fisico è sempre derivato dal nome tramite lo ScopeRoot
     che possiede lo script, e non viene mai salvato.
============================================================
"""


class Script:
    def __init__(self, name, description=""):
        self.name = name
        self.description = description

    def to_dict(self):
        return {"name": self.name, "description": self.description}

    def __eq__(self, other):
        if not isinstance(other, Script):
            return NotImplemented
        return self.name == other.name and self.description == other.description

    def __repr__(self):
        return f"Script(name={self.name!r}, description={self.description!r})"
