"""
============================================================
File: __init__.py
Author: Internal Systems Automation Team
Created: 2026-10-19

Description:
Modelli dati: script registrati e scope su disco.
============================================================
"""

from cmdlauncher.models.script_model import Script
from cmdlauncher.models.scope_model import Scope, ScopeKind, ScopeRoot

__all__ = ['Script', 'Scope', 'ScopeKind', 'ScopeRoot']
