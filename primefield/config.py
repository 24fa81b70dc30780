"""
Copyright (c) 2020, the Decred developers
See LICENSE for details

Configuration settings for primefield. Settings are read from an INI file,
primefield.conf, in the OS-appropriate application data directory, e.g.

    loglevel = PRIMES:debug,CONFIG:warning
    checkprimes = true
"""

import configparser
import logging
import os

from primefield import PrimeFieldError, field
from primefield.util import helpers


APP_NAME = "primefield"

# The configuration file name.
CONFIG_NAME = "primefield.conf"

# Keys recognized in the configuration file.
CONFIG_KEYS = ("loglevel", "checkprimes")

logLevelMap = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "notset": logging.NOTSET,
    "0": logging.NOTSET,
}

boolMap = {
    "1": True,
    "true": True,
    "yes": True,
    "on": True,
    "0": False,
    "false": False,
    "no": False,
    "off": False,
}

log = helpers.getLogger("CONFIG")


def logLvl(s):
    """
    Get the log level from the map.

    Args:
        s (str): A string which is a key for the logLevelMap. Case-insensitive.

    Returns:
        int: The logging level.
    """
    try:
        return logLevelMap[s.strip().lower()]
    except KeyError:
        raise PrimeFieldError(f"unknown log level: {s!r}")


def parseLogLevel(specifier):
    """
    Parse a log level specifier. The specifier is either a single level, used
    as the default for all loggers, or a comma-separated list of
    logger:level pairs.

    Args:
        specifier (str): The specifier, e.g. "debug" or "PRIMES:debug,CONFIG:error".

    Returns:
        int: The default logging level.
        dict: Logger name to logging level for loggers with their own level.
    """
    if not any(ch in specifier for ch in (",", ":")):
        return logLvl(specifier), {}
    moduleLevels = {}
    for pair in specifier.split(","):
        parts = pair.split(":")
        if len(parts) != 2 or not parts[0].strip():
            raise PrimeFieldError(f"malformed loglevel specifier: {specifier!r}")
        moduleLevels[parts[0].strip()] = logLvl(parts[1])
    return logging.INFO, moduleLevels


def parseBool(s):
    """
    Parse a boolean configuration value.

    Args:
        s (str): The value, e.g. "true", "no", "1". Case-insensitive.

    Returns:
        bool: The parsed value.
    """
    try:
        return boolMap[s.strip().lower()]
    except KeyError:
        raise PrimeFieldError(f"not a boolean value: {s!r}")


def configPath():
    """
    The default location of the configuration file.

    Returns:
        str: The path of primefield.conf in the application data directory.
    """
    return os.path.join(helpers.appDataDir(APP_NAME), CONFIG_NAME)


class FieldConfig:
    """
    FieldConfig holds the configuration settings. A missing configuration file
    leaves every setting at its default.
    """

    def __init__(self, path=None):
        """
        Args:
            path (str): optional. The configuration file path. Defaults to
                primefield.conf in the application data directory.
        """
        self.path = path if path else configPath()
        self.logLevel = logging.INFO
        self.moduleLevels = {}
        # Modulus primality is a caller-enforced precondition unless
        # checkprimes is set.
        self.checkPrimes = False
        if not os.path.isfile(self.path):
            log.debug(f"no configuration file at {self.path}")
            return
        try:
            cfg = helpers.readINI(self.path, CONFIG_KEYS)
        except configparser.Error as e:
            raise PrimeFieldError(f"malformed configuration file {self.path}: {e}")
        if "loglevel" in cfg:
            self.logLevel, self.moduleLevels = parseLogLevel(cfg["loglevel"])
        if "checkprimes" in cfg:
            self.checkPrimes = parseBool(cfg["checkprimes"])
        log.debug(f"loaded configuration from {self.path}")

    def prepareLogging(self, filepath=None):
        """
        Apply the configured log levels.

        Args:
            filepath (str): optional. The base name for a rotating log file.
        """
        helpers.prepareLogging(
            filepath, logLvl=self.logLevel, lvlMap=self.moduleLevels
        )


fieldConfig = None


def load(path=None):
    """
    Load and return the current configuration, and apply its checkprimes
    setting as the default for new field elements. The configuration is only
    loaded once. Successive calls to the modular `load` function will return
    the same instance.

    Args:
        path (str): optional. The configuration file path, used on the first
            call only.

    Returns:
        FieldConfig: The current configuration.
    """
    global fieldConfig
    if not fieldConfig:
        fieldConfig = FieldConfig(path)
        field.checkPrimes = fieldConfig.checkPrimes
    return fieldConfig
