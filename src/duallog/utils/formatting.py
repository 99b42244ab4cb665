"""
============================================================
 File: formatting.py
 Author: Internal Systems Automation Team
 Created: 2026-10-17
 Last Updated: 2026-10-18

 Description:
     Costruzione della riga di log: prefisso del livello,
     eventuale colore ANSI e suffisso del cronometro per
     il livello TIME.
============================================================
"""

from typing import Optional

from duallog.models.level import TIME, lookup_level
from duallog.utils.stopwatch import Stopwatch


def format_message(level: str, message: str, colorize: bool = False,
                   stopwatch: Optional[Stopwatch] = None) -> str:
    """
    Formatta un messaggio come "<prefisso> <messaggio>"

    Args:
        level: Nome del livello (INFO, WARN, ...), case-insensitive
        message: Testo del messaggio
        colorize: Se True il prefisso viene racchiuso nel colore ANSI del livello
        stopwatch: Cronometro da far avanzare per il livello TIME

    Returns:
        La stringa formattata
    """
    lvl = lookup_level(level)

    if lvl is TIME and stopwatch is not None:
        message = f"{message}{stopwatch.lap()}"

    return f"{lvl.render_prefix(colorize)} {message}"
