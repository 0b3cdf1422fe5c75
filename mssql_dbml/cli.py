"""
mssql-dbml — generate DBML from a Microsoft SQL Server database.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from mssql_dbml import __version__
from mssql_dbml.config import settings
from mssql_dbml.core.dbml_generator import generate_dbml
from mssql_dbml.models.connection import ConnectionRequest, SchemaFilter

logger = logging.getLogger("mssql_dbml")

EXAMPLES = """\
Examples:

  # Using connection string
  $ mssql-dbml -c "Server=localhost,5433;Database=MyDB;User Id=sa;Password=P@ss123"

  # Using individual parameters
  $ mssql-dbml -h localhost -p 5433 -d MyDB -u sa -P "P@ss123"

  # Include only specific schemas
  $ mssql-dbml -c "Server=..." -i "dbo,custom"

  # Exclude specific schemas
  $ mssql-dbml -c "Server=..." -e "sys,temp,backup"

  # Custom output file
  $ mssql-dbml -c "Server=..." -o my-schema.dbml
"""


def build_parser() -> argparse.ArgumentParser:
    # -h is the host flag, so help is only available as --help
    parser = argparse.ArgumentParser(
        prog="mssql-dbml",
        description="Generate DBML from Microsoft SQL Server databases",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="Show this help message and exit")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-c", "--connection-string",
                        help='Connection string (e.g. "Server=localhost,5433;Database=mydb;User Id=sa;Password=pass")')
    parser.add_argument("-h", "--host", default=settings.DEFAULT_HOST,
                        help=f"Server host (default: {settings.DEFAULT_HOST})")
    parser.add_argument("-p", "--port", type=int, default=settings.DEFAULT_PORT,
                        help=f"Server port (default: {settings.DEFAULT_PORT})")
    parser.add_argument("-d", "--database", help="Database name (required)")
    parser.add_argument("-u", "--user", default=settings.DEFAULT_USER,
                        help=f"Username (default: {settings.DEFAULT_USER})")
    parser.add_argument("-P", "--password", help="Password")
    parser.add_argument("-o", "--output", help="Output file path (default: <database>.dbml)")
    parser.add_argument("-i", "--include-schemas",
                        help='Comma-separated list of schemas to include (e.g. "dbo,custom")')
    parser.add_argument("-e", "--exclude-schemas", default=settings.DEFAULT_EXCLUDE_SCHEMAS,
                        help=f'Comma-separated list of schemas to exclude (default: "{settings.DEFAULT_EXCLUDE_SCHEMAS}")')
    parser.add_argument("-v", "--verbose", action="store_true", help="Show detailed error messages")
    return parser


def connection_from_args(args: argparse.Namespace) -> ConnectionRequest:
    """A connection string, when given, replaces the individual parameters."""
    if args.connection_string:
        return ConnectionRequest.from_connection_string(args.connection_string)
    return ConnectionRequest(
        host=args.host,
        port=args.port,
        database=args.database,
        username=args.user,
        password=args.password,
    )


def _configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    _configure_logging()
    args = build_parser().parse_args(argv)

    try:
        req = connection_from_args(args)
        if not req.database:
            raise ValueError("Database name is required")
        schema_filter = SchemaFilter.from_csv(args.include_schemas, args.exclude_schemas)

        doc = generate_dbml(req, schema_filter)

        output_path = Path(args.output or f"{req.database}.dbml").resolve()
        output_path.write_text(doc.text, encoding="utf-8")
    except Exception as e:
        if args.verbose:
            logger.exception("Error: %s", e)
        else:
            logger.error("Error: %s", e)
        return 1

    logger.info("SUCCESS! Generated: %s", output_path)
    logger.info("   Tables: %d", doc.counts.tables)
    logger.info("   Columns: %d", doc.counts.columns)
    logger.info("   Foreign Keys: %d", doc.counts.foreign_keys)
    logger.info("View your diagram at: https://dbdiagram.io/")
    return 0


if __name__ == "__main__":
    sys.exit(main())
