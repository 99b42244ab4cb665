"""
============================================================
 File: level.py
 Author: Internal Systems Automation Team
 Created: 2026-10-17
 Last Updated: 2026-10-18

 Description:
     Modello dati che rappresenta un livello di log.
     Incapsula nome, prefisso a larghezza fissa e colore
     ANSI usato sulla console. La tabella LEVELS elenca i
     livelli riconosciuti; tutto il resto ricade su LOG.
============================================================
"""

from duallog.utils import colors


class Level:
    def __init__(self, name, prefix, color=None):
        self.name = name
        self.prefix = prefix
        self.color = color

    def render_prefix(self, colorize=False):
        if colorize:
            return colors.colorize(self.prefix, self.color)
        return self.prefix

    def __repr__(self):
        return f"Level({self.name!r})"


# I prefissi sono allineati a 8 caratteri.
# INFO usa il ciano, non il verde: è il colore storicamente emesso.
LEVELS = {
    "INFO": Level("INFO", "  [INFO]", colors.CYAN),
    "WARN": Level("WARN", "  [WARN]", colors.YELLOW),
    "ERROR": Level("ERROR", " [ERROR]", colors.RED),
    "FATAL": Level("FATAL", " [FATAL]", colors.RED),
    "DEBUG": Level("DEBUG", " [DEBUG]", colors.BLUE),
    "TIME": Level("TIME", "[TIMING]", colors.GREEN),
}

FALLBACK = Level("LOG", "   [LOG]")

TIME = LEVELS["TIME"]


def lookup_level(name):
    """Restituisce il Level per il nome dato, senza distinzione maiuscole/minuscole"""
    return LEVELS.get((name or "").upper(), FALLBACK)
