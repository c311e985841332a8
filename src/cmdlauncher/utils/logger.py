"""
============================================================
 File: logger.py
 Author: Internal Systems Automation Team
 Created: 2025-01-10
 Last Updated: 2026-10-19

 Description:
     Logger dell'applicazione. Scrive su file nella cartella
     dei log e, in modalità debug, anche su stderr. Pensato
     per debugging interno e tracing delle esecuzioni.
============================================================
"""

import logging
import sys
from pathlib import Path

from cmdlauncher.config import setting

logger = logging.getLogger("cmdlauncher")
logger.addHandler(logging.NullHandler())

_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(logs_dir=None, debug=False):
    """
    Configura gli handler del logger 'cmdlauncher'.

    Args:
        logs_dir: Cartella dei log (creata se manca). None = nessun file.
        debug: Se True, livello DEBUG e output anche su stderr.

    Returns:
        Il percorso del file di log, o None se non è stato possibile crearlo.
    """
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    # Rimuove gli handler precedenti per evitare log duplicati
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(_FORMAT)
    log_file_path = None

    if logs_dir is not None:
        try:
            # Assicura che la cartella logs esista
            Path(logs_dir).mkdir(parents=True, exist_ok=True)
            log_file_path = Path(logs_dir) / setting.LOG_FILE_NAME
            file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError:
            # Installazione in sola lettura: si prosegue senza file di log
            log_file_path = None

    if debug:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.propagate = False
    return log_file_path
