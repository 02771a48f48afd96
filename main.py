#!/usr/bin/env python
# ============================================================================
# RECORD SCHEMA GENERATOR - COMMAND LINE
# ============================================================================
# EPOCH: 1 - RECORD SCHEMA GENERATION
# STATUS: Tool - Thin command surface over SchemaService
# PURPOSE: Generate CREATE TABLE scripts for a record type
# CREATED: 19 OCT 2026
# USAGE:
#   python main.py --descriptor descriptors/invoice.yaml --dry-run
#   python main.py --descriptor descriptors/invoice.yaml --output-dir sql
#   python main.py --model myapp.records:Invoice --table-name NS_Invoice
# ============================================================================
"""
Record Schema Generator CLI

Reads a type descriptor (YAML/JSON file, or a pydantic model given as
module:Class), synthesizes its relational schema, and prints or writes
the DDL. Exit code 1 on generation errors.
"""

import argparse
import importlib
import os
import sys
from typing import List, Optional

from pydantic import ValidationError

from __version__ import __version__
from core.config import get_defaults
from core.errors import SchemaGenerationError
from core.logging import ComponentType, configure_logging, get_logger, log_context
from services import DescriptorService, SchemaService

logger = get_logger(__name__, ComponentType.CLI)


def load_model(spec: str):
    """
    Import a pydantic model from "package.module:ClassName".

    Raises:
        SchemaGenerationError if the spec is malformed or cannot be imported
    """
    module_name, sep, class_name = spec.partition(":")
    if not sep or not module_name or not class_name:
        raise SchemaGenerationError(f"Model must be given as module:Class, got '{spec}'")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise SchemaGenerationError(f"Cannot import module '{module_name}': {e}") from e
    try:
        return getattr(module, class_name)
    except AttributeError as e:
        raise SchemaGenerationError(f"Module '{module_name}' has no '{class_name}'") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate CREATE TABLE DDL for a record type",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --descriptor descriptors/invoice.yaml --dry-run
  python main.py --descriptor descriptors/invoice.yaml --output-dir sql
  python main.py --model myapp.records:Invoice --no-fk

Environment Variables:
  DDL_OUTPUT_DIR        Default output directory (default: sql)
  DDL_IDENTITY_FIELD    Identity field name (default: internalId)
  LOG_LEVEL             Log level (default: WARNING)
  LOG_FORMAT            "json" for structured logs
        """
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--descriptor",
        type=str,
        help="Path to a YAML/JSON type descriptor"
    )
    source.add_argument(
        "--model",
        type=str,
        help="Pydantic model as module:Class"
    )
    parser.add_argument(
        "--table-name",
        type=str,
        help="Root table name (defaults to the type name)"
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        help="Directory for .sql files (one per table)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print DDL without writing files"
    )
    parser.add_argument(
        "--no-fk",
        action="store_true",
        help="Omit FOREIGN KEY constraints"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit structured JSON logs"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    configure_logging(
        level="DEBUG" if args.verbose else os.environ.get("LOG_LEVEL", "WARNING"),
        json_output=args.json_logs,
        stream=sys.stderr,
    )

    defaults = get_defaults()
    service = SchemaService(defaults=defaults)

    try:
        if args.descriptor:
            source = DescriptorService.load_file(args.descriptor)
        else:
            source = load_model(args.model)

        with log_context(descriptor=args.descriptor or args.model):
            result = service.generate(
                source,
                table_name=args.table_name,
                output_dir=args.output_dir,
                dry_run=args.dry_run,
                include_foreign_key=not args.no_fk,
            )
    except (SchemaGenerationError, ValidationError) as e:
        logger.error(f"Generation failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(result.sql, end="")

    if result.written:
        print(f"-- Wrote {len(result.files)} file(s) to {result.output_dir}", file=sys.stderr)
    for skipped in result.schema.skipped:
        print(
            f"-- Skipped {skipped.table}.{skipped.field} ({skipped.reason.value})",
            file=sys.stderr,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
