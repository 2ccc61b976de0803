"""Command-line utilities for the FastPDF service."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, List, Tuple

from fastpdf.clients import PDFClient
from fastpdf.config import FastPDFConfig
from fastpdf.exceptions import FastPDFError

logger = logging.getLogger("fastpdf.cli")


def _parse_range(value: str) -> List[int]:
    try:
        start, end = value.split(":", 1)
        return [int(start), int(end)]
    except ValueError as exc:
        raise argparse.ArgumentTypeError("Ranges must use START:END, e.g. 0:3") from exc


def _parse_metadata(value: str) -> Tuple[str, str]:
    key, sep, item = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError("Metadata entries must use KEY=VALUE")
    return key, item


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Utilities for the FastPDF service")
    parser.add_argument("--api-key", default=None, help="API key (defaults to FASTPDF_API_KEY)")
    parser.add_argument("--base-url", default=None, help="Service root URL")
    parser.add_argument("--api-version", default=None, help="API version segment, e.g. v1")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("validate-token", help="Check that the API key is accepted")

    split = subparsers.add_parser("split", help="Split a PDF at the given pages")
    split.add_argument("file", help="Path to the PDF")
    split.add_argument(
        "--at", dest="splits", type=int, action="append", default=[], help="Repeatable page number"
    )
    split.add_argument("-o", "--output", required=True, help="Where to write the resulting PDF")

    split_zip = subparsers.add_parser("split-zip", help="Split a PDF into page ranges as a zip")
    split_zip.add_argument("file", help="Path to the PDF")
    split_zip.add_argument(
        "--range",
        dest="ranges",
        type=_parse_range,
        action="append",
        default=[],
        help="Repeatable START:END page range",
    )
    target = split_zip.add_mutually_exclusive_group(required=True)
    target.add_argument("-o", "--output", help="Where to write the zip archive")
    target.add_argument("--extract", metavar="DIR", help="Extract the archive into DIR")

    metadata = subparsers.add_parser("edit-metadata", help="Rewrite PDF metadata entries")
    metadata.add_argument("file", help="Path to the PDF")
    metadata.add_argument(
        "--set",
        dest="entries",
        type=_parse_metadata,
        action="append",
        default=[],
        help="Repeatable KEY=VALUE metadata entry",
    )
    metadata.add_argument("-o", "--output", required=True, help="Where to write the resulting PDF")

    return parser


def _build_client(args: argparse.Namespace) -> PDFClient:
    overrides: Dict[str, Any] = {
        "api_key": args.api_key,
        "base_url": args.base_url,
        "api_version": args.api_version,
    }
    config = FastPDFConfig(**{key: value for key, value in overrides.items() if value is not None})
    return PDFClient.from_config(config)


def _run_validate_token(client: PDFClient, args: argparse.Namespace) -> None:
    print(f"Token is valid: {client.validate_token()}")


def _run_split(client: PDFClient, args: argparse.Namespace) -> None:
    client.save(client.split(args.file, args.splits), args.output)
    print(f"Wrote {args.output}")


def _run_split_zip(client: PDFClient, args: argparse.Namespace) -> None:
    archive = client.split_zip(args.file, args.ranges)
    if args.extract:
        written = client.extract(archive, args.extract)
        print(f"Extracted {len(written)} files to {args.extract}")
        return
    client.save(archive, args.output)
    print(f"Wrote {args.output}")


def _run_edit_metadata(client: PDFClient, args: argparse.Namespace) -> None:
    client.save(client.edit_metadata(args.file, dict(args.entries)), args.output)
    print(f"Wrote {args.output}")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    commands: dict[str, Any] = {
        "validate-token": _run_validate_token,
        "split": _run_split,
        "split-zip": _run_split_zip,
        "edit-metadata": _run_edit_metadata,
    }

    try:
        commands[args.command](_build_client(args), args)
    except (FastPDFError, OSError, ValueError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
