"""
============================================================
File: __init__.py
Author: Internal Systems Automation Team
Created: 2026-10-19

Description:
Package del launcher di script `cmd`. Gestisce gli scope
globale e locale, l'indice degli script e il loro lancio.
============================================================
"""

__version__ = "1.0.0"
