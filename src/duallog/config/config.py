"""
============================================================
File: config.py
Author: Internal Systems Automation Team
Created: 2026-10-17
Last Updated: 2026-10-18

Description:
Gestione della configurazione centralizzata del logger.
Legge da duallog.ini e fornisce il percorso del file di
log e il flag di debug; build_logger costruisce un Logger
a partire dalla configurazione.
============================================================
"""

import configparser
from pathlib import Path

from duallog.config import settings
from duallog.utils.logger import Logger


class ConfigManager:
    """Gestore centralizzato della configurazione del logger"""

    _instance = None
    _config = None
    _console = None

    def __new__(cls, config_path=None):
        if cls._instance is None:
            instance = super(ConfigManager, cls).__new__(cls)
            instance._initialize(config_path)
            cls._instance = instance
        return cls._instance

    @classmethod
    def reset(cls):
        """Scarta l'istanza corrente, la prossima verrà riletta da disco"""
        cls._instance = None

    def _initialize(self, config_path):
        """Inizializza il configuration manager"""
        self._config = configparser.ConfigParser()

        if config_path is not None:
            self._config_path = Path(config_path)
            if not self._config_path.exists():
                raise FileNotFoundError(f"Config non trovato: {self._config_path}")
        else:
            self._config_path = self._find_config_file()

        if self._config_path:
            self._config.read(self._config_path, encoding='utf-8')
            self._report("INFO", f"Config trovato: {self._config_path}")
        else:
            self._load_defaults()
            self._report("WARN", f"{settings.CONFIG_FILE_NAME} non trovato, usando defaults")

    def _find_config_file(self):
        """Cerca il file di configurazione nelle cartelle note"""
        for folder in settings.CONFIG_SEARCH_DIRS:
            config_file = Path(folder) / settings.CONFIG_FILE_NAME
            if config_file.exists():
                return config_file
        return None

    def _load_defaults(self):
        """Carica configurazione di default"""
        self._config['LOGGING'] = {
            'log_file': settings.DEFAULT_LOG_FILE,
            'debug': 'false',
        }

    def _report(self, level, message):
        # Messaggi di avvio solo su console e solo in debug
        if not self.debug:
            return
        if self._console is None:
            self._console = Logger()
        self._console.to_screen(level, message)

    def get(self, section, key, fallback=None):
        """Ottiene un valore dalla configurazione"""
        try:
            return self._config.get(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError):
            return fallback

    def get_bool(self, section, key, fallback=False):
        """Ottiene un valore booleano dalla configurazione"""
        try:
            return self._config.getboolean(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError, ValueError):
            return fallback

    def get_path(self, section, key):
        """Ottiene un percorso; i percorsi relativi restano relativi alla working dir"""
        path_str = self.get(section, key)
        if not path_str:
            return None
        return Path(path_str)

    @property
    def log_file(self):
        """File di log, None se il logger scrive solo su console"""
        return self.get_path('LOGGING', 'log_file')

    @property
    def debug(self):
        """Modalità debug attiva"""
        return self.get_bool('LOGGING', 'debug', False)

    @property
    def config_file(self):
        """Percorso del file di configurazione"""
        return self._config_path

    def print_info(self):
        """Stampa informazioni di configurazione (debug)"""
        print(f"[CONFIG] Config file: {self._config_path}")
        print(f"[CONFIG] Log file: {self.log_file or '(console only)'}")
        if self.debug:
            print("[CONFIG] Debug mode: ENABLED")


def build_logger(config=None):
    """Crea un Logger usando il file di log indicato in configurazione"""
    if config is None:
        config = ConfigManager()
    log_file = config.log_file
    return Logger(str(log_file) if log_file else "")
