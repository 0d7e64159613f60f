# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Root conftest.py making every adapter and the SCM service importable.

Tests run from the repo root or from inside a package folder without an
editable install, so the package roots are put on ``sys.path`` here.
"""

import sys
from pathlib import Path

_repo_root = Path(__file__).parent

for _package_root in [*sorted((_repo_root / "adapters").glob("endevor_*")), _repo_root / "scm"]:
    if _package_root.is_dir() and str(_package_root) not in sys.path:
        sys.path.insert(0, str(_package_root))


def pytest_configure(config) -> None:
    config.addinivalue_line("markers", "integration: runs real processes or touches the filesystem outside tmp")
