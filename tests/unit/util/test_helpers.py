"""
Copyright (c) 2020, the Decred developers
See LICENSE for details
"""

import logging
import os
import os.path
from pathlib import Path
import platform

from appdirs import AppDirs

from primefield import PrimeFieldError
from primefield.util import helpers


def test_formatTraceback():
    # Not raised, so there are no frames to format.
    formatted = helpers.formatTraceback(PrimeFieldError("errmsg"))
    assert formatted.endswith("PrimeFieldError: errmsg\n")

    try:
        raise PrimeFieldError("raised")
    except PrimeFieldError as e:
        formatted = helpers.formatTraceback(e)
    assert formatted.startswith("Traceback")
    assert "test_formatTraceback" in formatted


def test_prepareLogging(tmp_path):
    path = tmp_path / "test.log"
    helpers.prepareLogging(filepath=path)
    logger = helpers.getLogger("1")
    logger1 = logger
    assert logger.getEffectiveLevel() == logging.INFO

    logger.info("something")
    assert path.is_file()

    helpers.prepareLogging(filepath=path, logLvl=logging.DEBUG)
    logger = helpers.getLogger("2")
    assert logger.getEffectiveLevel() == logging.DEBUG

    helpers.prepareLogging(
        filepath=path,
        logLvl=logging.INFO,
        lvlMap={"1": logging.NOTSET, "3": logging.WARNING},
    )
    logger = helpers.getLogger("3")
    assert logger.getEffectiveLevel() == logging.WARNING
    assert logger1.getEffectiveLevel() == logging.NOTSET


def test_readINI(tmp_path):
    path = tmp_path / "test.conf"
    path.write_text(
        "rootkey=rootvalue\n"
        "[Section]\n"
        "sectionkey = sectionvalue\n"
        "ignored = value\n"
    )
    cfg = helpers.readINI(path, ["rootkey", "sectionkey", "missing"])
    assert cfg == {"rootkey": "rootvalue", "sectionkey": "sectionvalue"}


def test_appDataDir(monkeypatch):
    """
    Tests appDataDir to ensure it gives expected results for various operating
    systems.
    """
    appName = "myapp"
    appNameUpper = appName.capitalize()

    homeDir = Path.home()
    winLocal = AppDirs(appNameUpper, "").user_data_dir
    posixPath = Path(homeDir, "." + appName)
    macPath = Path(homeDir, "Library", "Application Support", appNameUpper)

    tests = []
    for name in (appName, appNameUpper, "." + appName, "." + appNameUpper):
        tests.append(("Windows", name, winLocal))
        tests.append(("Darwin", name, macPath))
        for opSys in ("Linux", "OpenBSD", "FreeBSD", "NetBSD", "unrecognized"):
            tests.append((opSys, name, posixPath))
    # No application name, or a single dot, means the current directory.
    for opSys in ("Windows", "Linux", "Darwin", "unrecognized"):
        tests.append((opSys, "", "."))
        tests.append((opSys, ".", "."))

    def testplatform():
        return opSys

    monkeypatch.setattr(platform, "system", testplatform)

    for opSys, name, want in tests:
        ret = helpers.appDataDir(name)
        assert str(want) == str(ret), (opSys, name, want)

    def testexpanduser(s):
        return ""

    def testgetenv(s, default=None):
        return ""

    opSys = "Linux"
    monkeypatch.setattr(os.path, "expanduser", testexpanduser)
    monkeypatch.setattr(os, "getenv", testgetenv)
    assert helpers.appDataDir(appName) == "."
