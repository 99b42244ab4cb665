"""
============================================================
 File: logger.py
 Author: Internal Systems Automation Team
 Created: 2026-10-17
 Last Updated: 2026-10-18

 Description:
     Logger a doppia uscita: scrive righe di log con livello
     su file (opzionale, in append) e su console (colorata).
     Ogni sink antepone data e ora; il sink su file aggiunge
     anche file e riga del chiamante. Il livello TIME fa da
     cronometro tra chiamate successive.
============================================================
"""

import itertools
import logging
import os
import sys
import threading

from duallog.config import settings
from duallog.utils.dump import dump
from duallog.utils.formatting import format_message
from duallog.utils.stopwatch import Stopwatch

# frame del chiamante visti da _write_file: _write_file -> metodo pubblico -> chiamante
_CALLER_STACKLEVEL = 3

_instance_ids = itertools.count(1)


class LogFileError(OSError):
    """Il file di log non può essere aperto in scrittura"""

    def __init__(self, path, cause):
        super().__init__(cause.errno, f"Impossibile aprire il file di log '{path}': {cause.strerror or cause}")
        self.path = path


def _sink(name, handler, line_format):
    handler.setFormatter(logging.Formatter(line_format, datefmt=settings.DATETIME_FORMAT))
    # fuori dal registro di logging: il sink vive quanto il Logger che lo possiede
    sink = logging.Logger(name)
    sink.addHandler(handler)
    sink.setLevel(logging.DEBUG)
    sink.propagate = False
    return sink


def _interpolate(fmt, args):
    """Interpolazione printf; se fmt e args non combaciano li accoda così come sono"""
    if not args:
        return fmt
    try:
        return fmt % args
    except (TypeError, ValueError):
        return f"{fmt} {args!r}"


class Logger:
    """
    Logger su file e console.

    Il file viene aperto una sola volta alla costruzione e non
    viene chiuso esplicitamente. Con un percorso vuoto il
    filesystem non viene toccato e le scritture su file
    diventano no-op.
    """

    def __init__(self, file_path="", stopwatch=None):
        self._file_path = os.fspath(file_path or "") or None
        self._stopwatch = stopwatch or Stopwatch()

        name = f"{__name__}.{next(_instance_ids)}"

        self._file_sink = None
        if self._file_path:
            try:
                handler = logging.FileHandler(
                    self._file_path, mode="a", encoding=settings.LOG_FILE_ENCODING
                )
            except OSError as e:
                raise LogFileError(self._file_path, e) from e
            self._file_sink = _sink(f"{name}.file", handler, settings.FILE_LINE_FORMAT)

        self._screen_sink = _sink(
            f"{name}.screen", logging.StreamHandler(sys.stdout), settings.SCREEN_LINE_FORMAT
        )

    @property
    def file_path(self):
        return self._file_path

    @property
    def has_file(self):
        return self._file_sink is not None

    @property
    def stopwatch(self):
        return self._stopwatch

    def format(self, level, message, colorize=False):
        return format_message(level, message, colorize, self._stopwatch)

    # ------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------

    def to_file(self, level, message):
        """Scrive sul file, senza colori. No-op se il file non è configurato"""
        self._write_file(level, message)

    def to_screen(self, level, message):
        """Scrive sulla console con il prefisso colorato"""
        self._write_screen(level, message)

    def to_both(self, level, message):
        """Scrive prima sul file e poi sulla console"""
        self._write_file(level, message)
        self._write_screen(level, message)

    def _write_file(self, level, message):
        if self._file_sink is None:
            return
        line = self.format(level, message, colorize=False)
        self._file_sink.info(line, stacklevel=_CALLER_STACKLEVEL)

    def _write_screen(self, level, message):
        line = self.format(level, message, colorize=True).strip()
        self._screen_sink.info(line)

    # ------------------------------------------------------------
    # Utility
    # ------------------------------------------------------------

    def reset_timer(self):
        """La prossima chiamata TIME ricomincia da "(start)" """
        self._stopwatch.reset()

    def fatal(self, fmt, *args):
        """
        Registra un messaggio FATAL su entrambi i sink e
        termina il processo con exit code 1.

        Il messaggio è interpolato in stile printf (fmt % args).
        Da un thread secondario il processo termina con os._exit.
        """
        message = _interpolate(fmt, args)
        self._write_file("FATAL", message)
        self._write_screen("FATAL", message)

        if threading.current_thread() is threading.main_thread():
            sys.exit(settings.FATAL_EXIT_CODE)

        # SystemExit fermerebbe solo il thread corrente
        self._flush()
        os._exit(settings.FATAL_EXIT_CODE)

    def _flush(self):
        for sink in (self._file_sink, self._screen_sink):
            if sink is not None:
                for handler in sink.handlers:
                    handler.flush()

    def debug(self, *values):
        """Dump dettagliato dei valori, solo su console"""
        self._write_screen("DEBUG", dump(*values))
