"""
============================================================
File: config.py
Author: Internal Systems Automation Team
Created: 2026-01-12
Last Updated: 2026-10-19

Description:
Gestione della configurazione centralizzata del launcher.
Legge da config.ini e fornisce accesso ai settings in tutta
l'app: posizione dello scope globale, cartella dei log,
editor e template dei nuovi script.
============================================================
"""

import configparser
import os
import sys
from pathlib import Path

from cmdlauncher.config import setting
from cmdlauncher.utils.file_loader import load_file
from cmdlauncher.utils.logger import logger


def install_dir():
    """Cartella di installazione: quella dell'eseguibile o dell'entry point"""
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).parent.resolve()
    if sys.argv and sys.argv[0]:
        return Path(sys.argv[0]).resolve().parent
    return Path(__file__).resolve().parent.parent


class ConfigManager:
    """Gestore centralizzato della configurazione dell'applicazione"""

    _instance = None
    _config = None

    def __new__(cls, config_path=None):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize(config_path)
        return cls._instance

    @classmethod
    def reset(cls):
        """Scarta l'istanza corrente (usato dai test)"""
        cls._instance = None

    def _initialize(self, config_path):
        """Inizializza il configuration manager"""
        logger.debug("Inizializzazione ConfigManager...")
        self._install_dir = install_dir()
        self._config = configparser.ConfigParser(interpolation=None)
        self._load_defaults()
        self._config_path = Path(config_path) if config_path else self._find_config_file()

        if self._config_path and self._config_path.exists():
            logger.info(f"Config trovato: {self._config_path}")
            self._config.read(self._config_path, encoding='utf-8')
        else:
            logger.warning("Config.ini non trovato, usando defaults")

    def _find_config_file(self):
        """Cerca il file config.ini in varie locazioni"""

        # 1. Prova nella cartella di installazione (exe o entry point)
        config_file = self._install_dir / setting.CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        # 2. Prova nella cartella di configurazione dell'utente
        config_file = Path(setting.USER_CONFIG_DIR).expanduser() / setting.CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        return None

    def _load_defaults(self):
        """Carica configurazione di default"""
        self._config['PATHS'] = {}
        self._config['APP'] = {
            'debug': 'false',
        }
        self._config['EDITOR'] = {
            'command': setting.DEFAULT_EDITOR,
        }
        self._config['SCRIPTS'] = {}

    def get(self, section, key, fallback=None):
        """Ottiene un valore dalla configurazione"""
        try:
            value = self._config.get(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError):
            return fallback
        return value if value != "" else fallback

    def get_bool(self, section, key, fallback=False):
        """Ottiene un valore booleano dalla configurazione"""
        try:
            return self._config.getboolean(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError, ValueError):
            return fallback

    def get_path(self, section, key):
        """Ottiene un percorso; se relativo, rispetto alla cartella di installazione"""
        path_str = self.get(section, key)
        if not path_str:
            logger.debug(f"get_path: '{section}.{key}' non trovato in config")
            return None

        path = Path(path_str).expanduser()

        # Se il percorso è assoluto, restituiscilo così
        if path.is_absolute():
            logger.debug(f"get_path: '{key}' è assoluto: {path}")
            return path

        absolute_path = (self._install_dir / path).resolve()
        logger.debug(f"get_path: base={self._install_dir}, relative='{path}', absolute={absolute_path}")
        return absolute_path

    @property
    def install_dir(self):
        return self._install_dir

    @property
    def global_dir(self):
        """Radice dello scope globale"""
        path = self.get_path('PATHS', 'global_directory')
        if path is None:
            path = self._install_dir
            logger.debug(f"Global dir (fallback install dir): {path}")
        else:
            logger.debug(f"Global dir (from config): {path}")
        return path

    @property
    def logs_dir(self):
        """Directory dei log"""
        path = self.get_path('PATHS', 'logs_directory')
        if path is None:
            path = Path(setting.USER_CONFIG_DIR).expanduser() / setting.LOGS_DIRECTORY
        return path

    @property
    def editor(self):
        """Editor: $EDITOR, poi config.ini, poi il default"""
        from_env = os.environ.get(setting.EDITOR_ENV_VAR)
        if from_env:
            return from_env
        return self.get('EDITOR', 'command', setting.DEFAULT_EDITOR)

    @property
    def script_template(self):
        """Contenuto iniziale dei nuovi script"""
        template_path = self.get_path('SCRIPTS', 'template_file')
        if template_path is not None:
            content = load_file(template_path)
            if content is not None:
                return content
            logger.warning(f"Template non trovato: {template_path}, usando il default")
        return setting.DEFAULT_SCRIPT_TEMPLATE

    @property
    def debug(self):
        """Modalità debug attiva"""
        return self.get_bool('APP', 'debug', False)
