"""Checklist discovery and loading."""

import logging
import os
from typing import List

from .models import ChecklistError, default_dir

logger = logging.getLogger(__name__)


def checklist_dir() -> str:
    """Return the directory where checklists are stored."""
    return default_dir()


def ensure_dir_exists() -> str:
    """Create the checklists directory if needed and return its path."""
    path = checklist_dir()
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise ChecklistError(e) from e
    return path


def get_checklists() -> List[str]:
    """List the names of the checklist files, sorted.

    Only regular files count; symlinks are skipped. A missing directory is
    reported with a hint on where to create it.
    """
    path = checklist_dir()
    try:
        with os.scandir(path) as it:
            entries = list(it)
    except FileNotFoundError as e:
        raise ChecklistError(f"Create a checklists directory at {path}") from e
    except OSError as e:
        raise ChecklistError(e) from e

    names: List[str] = []
    for entry in entries:
        if not entry.is_file(follow_symlinks=False):
            continue
        name = entry.name
        try:
            # scandir smuggles undecodable bytes through as surrogates
            name.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ChecklistError(
                f"Error converting filename to string: {name!r}"
            ) from e
        names.append(name)

    names.sort()
    logger.debug("Found %d checklists in %s", len(names), path)
    return names


def split_lines(contents: str) -> List[str]:
    """Trimmed, non-empty lines of contents in file order."""
    lines = (line.strip() for line in contents.split("\n"))
    return [line for line in lines if line]


def get_checklist(name: str) -> List[str]:
    """Load a checklist by file name and return its non-empty lines."""
    if name in ("", ".", "..") or os.path.basename(name) != name:
        raise ChecklistError(f"Invalid checklist name: {name!r}")

    path = os.path.join(checklist_dir(), name)
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise ChecklistError(f"Couldn't read checklist {name!r}: {e.strerror or e}") from e

    lines = split_lines(raw.decode("utf-8", errors="replace"))
    logger.debug("Loaded %d steps from %s", len(lines), path)
    return lines
