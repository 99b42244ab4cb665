"""
============================================================
 File: __init__.py
 Author: Internal Systems Automation Team
 Created: 2026-10-17
 Last Updated: 2026-10-18

 Description:
     Package duallog: logger a doppia uscita (file + console)
     con livelli colorati e cronometro.
============================================================
"""

from duallog.utils.formatting import format_message
from duallog.utils.logger import Logger, LogFileError
from duallog.utils.stopwatch import Stopwatch, format_duration

__all__ = ['Logger', 'LogFileError', 'Stopwatch', 'format_duration', 'format_message']

__version__ = "1.0.0"
