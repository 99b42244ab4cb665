"""
============================================================
 File: settings.py
 Author: Internal Systems Automation Team
 Created: 2026-10-17
 Last Updated: 2026-10-18

 Description:
     Impostazioni centralizzate del progetto: formati di
     data/ora dei sink, nomi e percorsi dei file di
     configurazione, valori di default.
============================================================
"""

DATE_FORMAT = "%Y/%m/%d"
TIME_FORMAT = "%H:%M:%S"
DATETIME_FORMAT = f"{DATE_FORMAT} {TIME_FORMAT}"

FILE_LINE_FORMAT = "%(asctime)s %(filename)s:%(lineno)d: %(message)s"
SCREEN_LINE_FORMAT = "%(asctime)s %(message)s"
LOG_FILE_ENCODING = "utf-8"

CONFIG_FILE_NAME = "duallog.ini"
CONFIG_SEARCH_DIRS = ("config", ".")

DEFAULT_LOG_FILE = ""

FATAL_EXIT_CODE = 1
