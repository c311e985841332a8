"""
============================================================
 File: setting.py
 Author: Internal Systems Automation Team
 Created: 2025-01-10
 Last Updated: 2026-10-19

 Description:
     Impostazioni fisse del launcher: nomi delle cartelle e
     dei file di uno scope, valori di default usati quando
     config.ini non definisce la chiave.
============================================================
"""

CMD_DIR_NAME = ".cmd"
SCRIPTS_DIR_NAME = "scripts"
INDEX_FILE_NAME = "index.json"
SCRIPT_EXTENSION = "sh"
SCRIPT_MODE = 0o775

CONFIG_FILE_NAME = "config.ini"
USER_CONFIG_DIR = "~/.config/cmdlauncher"

LOG_FILE_NAME = "cmdlauncher.log"
LOGS_DIRECTORY = "logs"

DEFAULT_EDITOR = "vim"
EDITOR_ENV_VAR = "EDITOR"
DEFAULT_SCRIPT_TEMPLATE = '#!/usr/bin/env sh\n\necho "Hello world"\n'
