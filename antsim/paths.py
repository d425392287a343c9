"""Locations of bundled resources and of the user configuration file."""

import sys

_BUNDLE_EXE_SUFFIX = ".app/Contents/MacOS/"


def exe_dir() -> str:
    """Directory holding the running executable, with a trailing slash.

    Only resolved on macOS; elsewhere an empty string is returned so that
    paths are taken relative to the working directory.
    """
    if sys.platform != "darwin":
        return ""
    head, sep, _ = (sys.executable or "").rpartition("/")
    return head + sep if sep else ""


def resource_path() -> str:
    """Base path for resource files, with a trailing slash, or ``""``.

    Inside a macOS application bundle this is ``Contents/Resources/``.
    """
    if sys.platform != "darwin":
        return ""
    directory = exe_dir()
    if directory.endswith(_BUNDLE_EXE_SUFFIX):
        return directory[: -len("MacOS/")] + "Resources/"
    return directory


def conf_path() -> str:
    """Path of ``conf.txt`` next to the executable."""
    return exe_dir() + "conf.txt"