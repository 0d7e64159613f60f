# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Data models for source retrieval."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ChangeLogEntry:
    """One file changed by a retrieval."""

    path: str
    """Path relative to the target folder, with forward slashes."""

    action: str
    """One of "add", "edit" or "delete"."""

    def to_dict(self) -> dict[str, str]:
        return {"path": self.path, "action": self.action}


@dataclass
class RetrievalResult:
    """Outcome of one retrieval run."""

    success: bool
    """Whether the Topaz CLI completed and the change log was written."""

    change_log_path: str | None = None
    """Change log file; None when the retrieval failed."""

    error: str | None = None
    """Failure description; None on success."""

    changes: list[ChangeLogEntry] = field(default_factory=list)
    """Entries written to the change log."""
