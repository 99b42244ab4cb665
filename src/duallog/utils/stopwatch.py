"""
============================================================
 File: stopwatch.py
 Author: Internal Systems Automation Team
 Created: 2026-10-17
 Last Updated: 2026-10-18

 Description:
     Cronometro usato dal livello TIME. La prima chiamata
     fissa la baseline e restituisce " (start)", le
     successive restituiscono il tempo trascorso dalla
     baseline, troncato al millisecondo, nel formato
     testuale delle durate (es. "500ms", "1.234s").
============================================================
"""

import time
from typing import Callable, Optional


def format_duration(milliseconds: int) -> str:
    """
    Rende una durata in millisecondi nel formato compatto
    h/m/s usato nei log.

    Esempi: 0 -> "0s", 500 -> "500ms", 1234 -> "1.234s",
    61500 -> "1m1.5s", 3600000 -> "1h0m0s"
    """
    if milliseconds < 0:
        return "-" + format_duration(-milliseconds)
    if milliseconds == 0:
        return "0s"
    if milliseconds < 1000:
        return f"{milliseconds}ms"

    seconds, millis = divmod(milliseconds, 1000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)

    text = str(seconds)
    if millis:
        text += "." + f"{millis:03d}".rstrip("0")
    text += "s"

    if hours:
        return f"{hours}h{minutes}m{text}"
    if minutes:
        return f"{minutes}m{text}"
    return text


class Stopwatch:
    """Baseline mutabile per misurare intervalli tra chiamate TIME"""

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        self._clock = clock or time.monotonic_ns
        self._baseline: Optional[int] = None

    @property
    def started(self) -> bool:
        return self._baseline is not None

    def lap(self) -> str:
        """
        Restituisce il suffisso da accodare al messaggio TIME.

        La baseline non viene azzerata: ogni lap misura il
        tempo dall'inizio, non dal lap precedente.
        """
        now = self._clock()
        if self._baseline is None:
            self._baseline = now
            return " (start)"

        # clock in nanosecondi, troncamento intero al millisecondo
        elapsed_ms = (now - self._baseline) // 1_000_000
        return f" (+{format_duration(elapsed_ms)})"

    def reset(self):
        self._baseline = None
