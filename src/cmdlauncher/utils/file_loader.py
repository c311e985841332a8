"""
============================================================
 File: file_loader.py
 Author: Internal Systems Automation Team
 Created: 2025-01-10
 Last Updated: 2026-10-19

 Description:
     Funzioni di utilità dedicate alla gestione di file.
     Lettura sicura di file di testo e scrittura atomica:
     il contenuto va in un file temporaneo nella stessa
     cartella, che poi sostituisce l'originale con una rename.
============================================================
"""

import os
import tempfile
from pathlib import Path


def load_file(path):
    p = Path(path)
    if p.exists():
        return p.read_text(encoding="utf-8")
    return None


def write_file_atomic(path, text):
    """
    Scrive `text` in `path` senza mai lasciare un file a metà.

    In caso di errore il file temporaneo viene rimosso, il file
    originale resta intatto e l'OSError viene rilanciata.
    """
    p = Path(path)
    fd, tmp = tempfile.mkstemp(prefix=f".{p.name}.", suffix=".tmp", dir=p.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, p)
    except Exception:
        try:
            os.unlink(tmp)
        except FileNotFoundError:
            pass
        raise
