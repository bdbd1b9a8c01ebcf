"""Data models, constants and configuration for chrklst."""

import os
from dataclasses import dataclass

from . import __version__

APP_NAME = "chrklst"
AUTHORS = "chrklst contributors"

DONE_TEXT = "All done :)"

DIR_ENV = "CHRKLST_DIR"
LOG_LEVEL_ENV = "CHRKLST_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def default_dir() -> str:
    """Return the checklists directory.

    $CHRKLST_DIR wins; otherwise $XDG_DATA_HOME/chrklst, falling back to
    ~/.local/share/chrklst.
    """
    override = os.environ.get(DIR_ENV)
    if override:
        return os.path.expanduser(override)
    data_home = os.environ.get("XDG_DATA_HOME") or os.path.expanduser(
        "~/.local/share"
    )
    return os.path.join(data_home, APP_NAME)


class ChecklistError(Exception):
    """Loading or invocation failure, reported to the user as one line."""

    def __init__(self, msg: object):
        super().__init__(str(msg))
        self.msg = str(msg)

    def __str__(self) -> str:
        return self.msg


@dataclass(frozen=True)
class AppInfo:
    """Package metadata shown by --help and --version."""

    name: str
    version: str
    authors: str

    @classmethod
    def default(cls) -> "AppInfo":
        return cls(name=APP_NAME, version=__version__, authors=AUTHORS)
