# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Command-line entry point: validate a configuration, list code pages, run a checkout.

Examples:
    endevor-scm validate --host-port mvs1:30947 --filter "PROD.COBOL.*" \\
        --file-extension cbl --credentials-id build --code-page 1047
    endevor-scm code-pages
    endevor-scm checkout --config job.json --workspace ./src
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from endevor_config import (
    CODE_PAGE_FIELD,
    CREDENTIALS_ID_FIELD,
    FILE_EXTENSION_FIELD,
    FILTER_PATTERN_FIELD,
    HOST_PORT_FIELD,
    ConfigurationValidator,
    RetrievalConfiguration,
    load_settings,
    lookup_code_page_catalog,
)

from .api import default_change_log_path
from .exceptions import CheckoutAbortedError
from .service import create_scm_service

_FIELD_OPTIONS = (
    ("--host-port", HOST_PORT_FIELD),
    ("--filter", FILTER_PATTERN_FIELD),
    ("--file-extension", FILE_EXTENSION_FIELD),
    ("--credentials-id", CREDENTIALS_ID_FIELD),
    ("--code-page", CODE_PAGE_FIELD),
)


def _add_configuration_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", help="JSON file with the configuration keyed by field name.")
    for option, field in _FIELD_OPTIONS:
        parser.add_argument(option, dest=field, help=f"Overrides {field} from --config.")


class ConfigFileError(Exception):
    """Raised when the --config file cannot be used."""
    pass


def read_config_file(path: str) -> dict[str, Any]:
    """Read a JSON object of field values.

    Raises:
        ConfigFileError: If the file is unreadable, not JSON, or not a JSON object
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigFileError(f"Failed to read {path}: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigFileError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigFileError(f"{path} must contain a JSON object keyed by field name")
    return data


def load_configuration(args: argparse.Namespace) -> RetrievalConfiguration:
    """Merge the --config file with individual field options.

    Raises:
        ConfigFileError: If the --config file cannot be used
    """
    data: dict[str, Any] = {}
    if args.config:
        data.update(read_config_file(args.config))
    for _, field in _FIELD_OPTIONS:
        value = getattr(args, field)
        if value is not None:
            data[field] = value
    return RetrievalConfiguration.from_dict(data)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="endevor-scm", description="Endevor source retrieval through the Topaz CLI.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Validate every configuration field.")
    _add_configuration_args(validate)
    validate.add_argument("--json", action="store_true", help="Print results as JSON.")

    subparsers.add_parser("code-pages", help="List the supported code pages.")

    checkout = subparsers.add_parser("checkout", help="Retrieve Endevor source into a workspace.")
    _add_configuration_args(checkout)
    checkout.add_argument("--workspace", required=True, help="Directory receiving the retrieved elements.")
    checkout.add_argument("--change-log", help="Change log file (defaults to changelog.xml beside the workspace).")

    return parser.parse_args(argv)


def run_validate(args: argparse.Namespace) -> int:
    results = ConfigurationValidator().validate(load_configuration(args))

    if args.json:
        print(json.dumps([result.to_dict() for result in results.values()], indent=2))
    else:
        for field, result in results.items():
            print(f"{field}: ok" if result.ok else f"{field}: {result.message}")

    return 0 if all(result.ok for result in results.values()) else 1


def run_code_pages(args: argparse.Namespace) -> int:
    for page in lookup_code_page_catalog():
        print(f"{page.id}\t{page.description}")
    return 0


def run_checkout(args: argparse.Namespace) -> int:
    service = create_scm_service(load_settings())
    change_log = Path(args.change_log) if args.change_log else default_change_log_path(args.workspace)

    try:
        result = service.checkout(load_configuration(args), args.workspace, change_log)
    except CheckoutAbortedError as e:
        print(f"Checkout aborted: {e}", file=sys.stderr)
        return 1

    print(f"Checked out {len(result.changes)} change(s); change log: {result.change_log_path}")
    return 0


_COMMANDS = {
    "validate": run_validate,
    "code-pages": run_code_pages,
    "checkout": run_checkout,
}


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        return _COMMANDS[args.command](args)
    except ConfigFileError as e:
        print(f"Invalid configuration file: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
