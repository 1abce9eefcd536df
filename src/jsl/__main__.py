"""CLI entry-point for jsl.

Usage:
    python -m jsl verify <schema>
    python -m jsl validate <schema> <instance> [--max-errors N] [--max-depth N]
                                               [--strict] [--json] [--sort]
    python -m jsl form <schema>

Schemas and instances may be JSON or YAML files.  Limits not given on the
command line come from JSL_MAX_ERRORS / JSL_MAX_DEPTH / JSL_STRICT.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

from jsl import __version__
from jsl.api import validate_instance, verify_schema
from jsl.contracts.load import load_document, load_schema
from jsl.core.config import ValidatorConfig
from jsl.errors import MaxDepthExceededError, SchemaDecodeError, SchemaError
from jsl.utils.exit_codes import ExitCode
from jsl.utils.json_norm import stable_json_dumps

_logger = logging.getLogger("jsl.cli")

# Failures that mean "could not run", not "found a problem".
_RUNTIME_ERRORS = (
    FileNotFoundError,
    json.JSONDecodeError,
    yaml.YAMLError,
    SchemaDecodeError,
    MaxDepthExceededError,
    TypeError,
)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="jsl",
        description="Verify JSON Schema Language schemas and validate instances.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    sub = p.add_subparsers(dest="command")

    # ── verify subcommand ───────────────────────────────────────────
    ver_p = sub.add_parser("verify", help="Check that a schema is correct.")
    ver_p.add_argument("schema", type=Path, help="Path to the schema file.")

    # ── validate subcommand ─────────────────────────────────────────
    val_p = sub.add_parser(
        "validate",
        help="Validate an instance against a schema.",
    )
    val_p.add_argument("schema", type=Path, help="Path to the schema file.")
    val_p.add_argument("instance", type=Path, help="Path to the instance file.")
    val_p.add_argument(
        "--max-errors",
        dest="max_errors",
        type=int,
        default=None,
        help="Stop after N errors (0 = report all).",
    )
    val_p.add_argument(
        "--max-depth",
        dest="max_depth",
        type=int,
        default=None,
        help="Abort when ref nesting reaches N frames, root included (0 = unbounded).",
    )
    val_p.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Enforce strict instance semantics (reject unknown properties).",
    )
    val_p.add_argument("--json", action="store_true", help="Emit the result as JSON.")
    val_p.add_argument(
        "--sort",
        action="store_true",
        help="Sort errors by schema path, then instance path.",
    )

    # ── form subcommand ─────────────────────────────────────────────
    form_p = sub.add_parser("form", help="Print the form of a schema.")
    form_p.add_argument("schema", type=Path, help="Path to the schema file.")

    p.set_defaults(command=None)
    return p


def _handle_verify(args: argparse.Namespace) -> int:
    verify_schema(args.schema)
    print("OK")
    return ExitCode.SUCCESS


def _handle_validate(args: argparse.Namespace) -> int:
    config = ValidatorConfig.from_env()
    instance = load_document(args.instance)
    result = validate_instance(
        args.schema,
        instance,
        config=config,
        max_errors=args.max_errors,
        max_depth=args.max_depth,
        strict=args.strict,
    )
    if args.sort:
        result = result.sorted()

    if args.json:
        sys.stdout.write(stable_json_dumps(result))
    elif result.is_valid:
        print("OK")
    else:
        print(f"FAIL: {len(result)} validation error(s)", file=sys.stderr)
        for err in result:
            d = err.to_dict()
            print(f"{d['instancePath'] or '/'}\t{d['schemaPath'] or '/'}")
    return ExitCode.SUCCESS if result.is_valid else ExitCode.VIOLATION


def _handle_form(args: argparse.Namespace) -> int:
    print(load_schema(args.schema).form.value)
    return ExitCode.SUCCESS


_HANDLERS = {
    "verify": _handle_verify,
    "validate": _handle_validate,
    "form": _handle_form,
}


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = ok, 1 = violation, 2 = error)."""
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # --help / --version exit 0; bad usage exits 2.
        return ExitCode.SUCCESS if e.code in (0, None) else ExitCode.ERROR

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command is None:
        parser.print_help(sys.stderr)
        return ExitCode.ERROR

    try:
        return _HANDLERS[args.command](args)
    except RecursionError:
        # Unbounded ref cycle (max_depth=0) or a pathologically deep document.
        _logger.debug("%s failed", args.command, exc_info=True)
        print(
            "ERROR: maximum recursion depth exceeded; set --max-depth to bound ref nesting",
            file=sys.stderr,
        )
        return ExitCode.ERROR
    except _RUNTIME_ERRORS as e:
        _logger.debug("%s failed", args.command, exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return ExitCode.ERROR
    except SchemaError as e:
        print(f"FAIL: {e}", file=sys.stderr)
        return ExitCode.VIOLATION
    except ValueError as e:
        # Malformed JSL_* environment configuration or negative limits.
        print(f"ERROR: {e}", file=sys.stderr)
        return ExitCode.ERROR


if __name__ == "__main__":
    raise SystemExit(main())
