#!/usr/bin/env python
# ============================================================================
# SCHEMA RENDER SCRIPT
# ============================================================================
# PURPOSE: Print the DDL for Pydantic models through a registered dialect
# USAGE:
#   python scripts/render_schema.py myapp.models:User
#   python scripts/render_schema.py myapp.models:User myapp.models:Order --dialect postgres
#   python scripts/render_schema.py myapp.models:User --if-not-exists --json-logs
# ============================================================================
"""
Dry-run DDL rendering. Nothing is executed; statements go to stdout and
logs to stderr, so the output can be piped into psql or a migration file.
"""

import argparse
import importlib
import os
import sys
from typing import List, Optional

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ddlforge.core.contracts import SchemaError
from ddlforge.core.logging import ComponentType, configure_logging, get_logger
from ddlforge.generators import get_dialect, list_dialects
from ddlforge.schema import PydanticToTable

logger = get_logger("ddlforge.scripts.render_schema", ComponentType.SCRIPT)


def load_model(target: str):
    """
    Import ``module.path:ClassName``.

    Raises:
        ValueError: If the target is not in module:Class form
    """
    module_name, _, class_name = target.partition(":")
    if not module_name or not class_name:
        raise ValueError(f"Expected module:Class, got {target!r}")
    module = importlib.import_module(module_name)
    return getattr(module, class_name)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Render CREATE TABLE DDL for Pydantic models",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/render_schema.py myapp.models:User
  python scripts/render_schema.py myapp.models:User --dialect postgres --if-not-exists

Environment Variables:
  DDLFORGE_DIALECT          Default dialect (default: postgres)
  DDLFORGE_STRING_LENGTH    Bound for string() columns (default: 255)
  LOG_FORMAT                Set to "json" for structured logs
        """
    )
    parser.add_argument(
        "models",
        nargs="+",
        help="Models to render, as module.path:ClassName"
    )
    parser.add_argument(
        "--dialect",
        type=str,
        default=None,
        help=f"Dialect name (registered: {', '.join(list_dialects())})"
    )
    parser.add_argument(
        "--if-not-exists",
        action="store_true",
        help="Guard CREATE TABLE against existing tables"
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit structured JSON logs"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    args = parser.parse_args(argv)

    configure_logging(
        level="DEBUG" if args.verbose else "INFO",
        json_output=args.json_logs,
    )

    try:
        dialect = get_dialect(args.dialect)
        models = [load_model(target) for target in args.models]
        statements = PydanticToTable(dialect).generate(models, if_not_exists=args.if_not_exists)
    except (SchemaError, ValueError, ImportError, AttributeError) as e:
        logger.error(f"Rendering failed: {e}")
        return 1

    for stmt in statements:
        print(f"{stmt};")
    return 0


if __name__ == "__main__":
    sys.exit(main())
