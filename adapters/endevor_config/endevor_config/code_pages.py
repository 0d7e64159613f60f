# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Code page catalog.

The catalog maps numeric EBCDIC code page identifiers to descriptions. It is
read once per process from ``data/code_page_mappings.json`` and always
presented in numeric order of the identifier ("9" before "10"), never in
string order.
"""

import json
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path

from .exceptions import CodePageCatalogError
from .models import CodePage

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "code_page_mappings.json"


def numeric_key(code_page_id: str) -> int:
    """Return the numeric value of a code page identifier.

    Raises:
        CodePageCatalogError: If the identifier is not an unsigned decimal number
    """
    stripped = code_page_id.strip()
    if not stripped.isascii() or not stripped.isdigit():
        raise CodePageCatalogError(f"Code page identifier is not numeric: {code_page_id!r}")
    return int(stripped)


def sort_code_pages(mapping: Mapping[str, str]) -> tuple[CodePage, ...]:
    """Order an identifier-to-description mapping numerically.

    Args:
        mapping: Code page identifiers mapped to their descriptions

    Returns:
        Catalog entries ordered by numeric identifier, ascending

    Raises:
        CodePageCatalogError: If an identifier is not numeric or two
            identifiers have the same numeric value (e.g. "37" and "037")
    """
    seen: dict[int, str] = {}
    for code_page_id in mapping:
        value = numeric_key(code_page_id)
        if value in seen:
            raise CodePageCatalogError(
                f"Code page identifiers {seen[value]!r} and {code_page_id!r} have the same numeric value"
            )
        seen[value] = code_page_id

    return tuple(
        CodePage(id=seen[value], description=str(mapping[seen[value]]))
        for value in sorted(seen)
    )


def load_code_page_catalog(path: str | Path | None = None) -> tuple[CodePage, ...]:
    """Read and order a code page catalog file.

    Args:
        path: JSON object file of identifier -> description. Defaults to the
            catalog shipped with this package.

    Raises:
        CodePageCatalogError: If the file cannot be read or is malformed
    """
    catalog_path = Path(path) if path is not None else DEFAULT_CATALOG_PATH

    try:
        data = json.loads(catalog_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise CodePageCatalogError(f"Failed to read code page catalog {catalog_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CodePageCatalogError(f"Code page catalog {catalog_path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise CodePageCatalogError(f"Code page catalog {catalog_path} must be a JSON object")

    return sort_code_pages(data)


@lru_cache(maxsize=1)
def lookup_code_page_catalog() -> tuple[CodePage, ...]:
    """Return the packaged catalog, loaded on first use and cached."""
    return load_code_page_catalog()
