# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Base source retriever interface."""

from abc import ABC, abstractmethod
from pathlib import Path

from endevor_config import RetrievalConfiguration

from .models import RetrievalResult


class SourceRetriever(ABC):
    """Abstract base class for Endevor source retrievers."""

    @abstractmethod
    def retrieve(
        self,
        config: RetrievalConfiguration,
        target_dir: str | Path,
        change_log_path: str | Path,
    ) -> RetrievalResult:
        """Retrieve the elements selected by ``config`` into ``target_dir``.

        Failures are reported through the result, not raised.

        Args:
            config: Validated retrieval configuration
            target_dir: Directory receiving the element files
            change_log_path: File receiving the change log on success

        Returns:
            RetrievalResult describing success and the changes made
        """
        pass
