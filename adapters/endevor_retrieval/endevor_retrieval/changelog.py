# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Change log computation and persistence.

The target folder is fingerprinted before and after a retrieval; the
difference becomes the change log. A retrieval that changes nothing writes
an empty ``<changelog/>`` document.
"""

import hashlib
import xml.etree.ElementTree as ET
from collections.abc import Iterable
from pathlib import Path

from .exceptions import ChangeLogError
from .models import ChangeLogEntry

CHANGELOG_TAG = "changelog"
ENTRY_TAG = "entry"

ADD = "add"
EDIT = "edit"
DELETE = "delete"


def calculate_file_hash(file_path: str | Path, algorithm: str = "sha256") -> str:
    """Calculate the hex digest of a file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the algorithm is not supported
    """
    try:
        hash_obj = hashlib.new(algorithm)
    except ValueError as e:
        raise ValueError(f"Unsupported hash algorithm: {algorithm}") from e

    with open(file_path, "rb") as f:
        for chunk in iter(lambda: f.read(4096), b""):
            hash_obj.update(chunk)

    return hash_obj.hexdigest()


def fingerprint_directory(directory: str | Path, exclude: Iterable[str] = ()) -> dict[str, str]:
    """Map every file below ``directory`` to its SHA-256 digest.

    Args:
        directory: Folder to scan; a missing folder has no files
        exclude: Top-level entry names to skip (e.g. the CLI workspace)

    Returns:
        Relative POSIX path -> digest
    """
    root = Path(directory)
    if not root.is_dir():
        return {}

    excluded = set(exclude)
    fingerprints = {}
    for path in root.rglob("*"):
        relative = path.relative_to(root)
        if relative.parts[0] in excluded or not path.is_file():
            continue
        fingerprints[relative.as_posix()] = calculate_file_hash(path)
    return fingerprints


def diff_fingerprints(before: dict[str, str], after: dict[str, str]) -> list[ChangeLogEntry]:
    """Compare two fingerprints, ordered by path."""
    entries = []
    for path in sorted(before.keys() | after.keys()):
        if path not in before:
            entries.append(ChangeLogEntry(path=path, action=ADD))
        elif path not in after:
            entries.append(ChangeLogEntry(path=path, action=DELETE))
        elif before[path] != after[path]:
            entries.append(ChangeLogEntry(path=path, action=EDIT))
    return entries


def write_change_log(path: str | Path, entries: Iterable[ChangeLogEntry]) -> None:
    """Write entries as a change log document; no entries writes an empty one.

    Raises:
        ChangeLogError: If the file cannot be written
    """
    root = ET.Element(CHANGELOG_TAG)
    for entry in entries:
        ET.SubElement(root, ENTRY_TAG, action=entry.action, path=entry.path)

    try:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        ET.ElementTree(root).write(path, encoding="utf-8", xml_declaration=True)
    except OSError as e:
        raise ChangeLogError(f"Failed to write change log {path}: {e}") from e


def read_change_log(path: str | Path) -> list[ChangeLogEntry]:
    """Read a change log written by ``write_change_log``.

    Raises:
        ChangeLogError: If the file is missing or malformed
    """
    try:
        root = ET.parse(path).getroot()
    except (OSError, ET.ParseError) as e:
        raise ChangeLogError(f"Failed to read change log {path}: {e}") from e

    if root.tag != CHANGELOG_TAG:
        raise ChangeLogError(f"Not a change log: {path}")

    return [
        ChangeLogEntry(path=element.get("path", ""), action=element.get("action", ""))
        for element in root.iter(ENTRY_TAG)
    ]
