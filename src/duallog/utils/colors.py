"""
============================================================
 File: colors.py
 Author: Internal Systems Automation Team
 Created: 2026-10-17
 Last Updated: 2026-10-18

 Description:
     Codici di escape ANSI usati per colorare il prefisso
     del livello sull'output a console.
============================================================
"""

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
CYAN = "\033[36m"
YELLOW = "\033[33m"
BLUE = "\033[94m"


def colorize(text, color):
    """Racchiude il testo tra il colore indicato e il reset"""
    if not color:
        return text
    return f"{color}{text}{RESET}"
