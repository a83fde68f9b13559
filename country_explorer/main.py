"""Main entry point for the Global Country Explorer."""

import argparse
import json
import sys
import time
from pathlib import Path
from typing import List, Optional, Tuple

from dotenv import load_dotenv

from country_explorer.config.environment import EnvironmentConfig
from country_explorer.config.exceptions import ConfigurationError
from country_explorer.config.loader import load_config, validate_config_file
from country_explorer.config.models import AppConfig
from country_explorer.domain.models import DisplayRecord
from country_explorer.fetcher.exceptions import FetcherError
from country_explorer.fetcher.factory import get_fetcher
from country_explorer.logging import get_logger
from country_explorer.logging.config import configure_logging
from country_explorer.lookup.models import MissingSearchTermError
from country_explorer.lookup.service import CountryLookupService, resolve_search
from country_explorer.rendering.templates import TemplateRenderer

logger = get_logger(__name__, component="cli")

LOG_LEVEL_CHOICES = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def load_runtime_config(
    config_path: Optional[Path], log_level_override: Optional[str]
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and settle the effective log level.

    Log level priority: CLI flag > LOG_LEVEL environment variable > config file.

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    if log_level_override:
        env_config.log_level = log_level_override
    elif not env_config.log_level:
        env_config.log_level = app_config.logging.level

    return app_config, env_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="country-explorer",
        description="Global Country Explorer - look up countries by name, capital or region",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: config.yaml if present, else built-in defaults)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=LOG_LEVEL_CHOICES,
        help="Log level (overrides config and environment)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the web application")
    serve.add_argument("--host", default=None, help="Interface to bind (default: from config)")
    serve.add_argument("--port", type=int, default=None, help="Port to listen on (default: PORT env or 3000)")

    search = subparsers.add_parser("search", help="Search countries and print the results")
    terms = search.add_mutually_exclusive_group(required=True)
    terms.add_argument("--country", help="Country name (substring match)")
    terms.add_argument("--capital", help="Capital city")
    terms.add_argument("--region", help="Region, e.g. europe")
    search.add_argument("--json", action="store_true", help="Print records as JSON")

    view = subparsers.add_parser("view", help="Print one country by exact name")
    view.add_argument("name", help="Exact country name")
    view.add_argument("--json", action="store_true", help="Print the record as JSON")

    check = subparsers.add_parser("validate-config", help="Validate a configuration file and exit")
    check.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=Path("config.yaml"),
        help="Configuration file to check (default: config.yaml)",
    )

    return parser


def _print_records(records: List[DisplayRecord], as_json: bool, renderer: TemplateRenderer) -> None:
    if as_json:
        print(json.dumps([record.to_api_dict() for record in records], ensure_ascii=False, indent=2))
        return
    print("\n".join(renderer.render("country.txt.j2", {"record": record}) for record in records))


def run_search(args: argparse.Namespace, service: CountryLookupService, renderer: TemplateRenderer) -> int:
    try:
        kind, value = resolve_search(args.country, args.capital, args.region)
    except MissingSearchTermError as e:
        print(str(e), file=sys.stderr)
        return 2

    outcome = service.search(kind, value)
    if not outcome.ok:
        print(outcome.error, file=sys.stderr)
        return 1

    _print_records(outcome.records, args.json, renderer)
    return 0


def run_view(args: argparse.Namespace, service: CountryLookupService, renderer: TemplateRenderer) -> int:
    record = service.view(args.name)
    if record is None:
        print("Country not found", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(record.to_api_dict(), ensure_ascii=False, indent=2))
    else:
        print(renderer.render("country.txt.j2", {"record": record}))
    return 0


def run_server(args: argparse.Namespace, app_config: AppConfig, env_config: EnvironmentConfig) -> int:
    import uvicorn

    from country_explorer.web.app import create_app_from_config

    host = args.host or app_config.server.host
    port = args.port or env_config.port

    logger.info(
        f"Global Country Explorer listening on http://{host}:{port}",
        extra={"event": "service.listening", "host": host, "port": port},
    )
    # log_config=None keeps the root handler installed by configure_logging
    uvicorn.run(create_app_from_config(app_config), host=host, port=port, log_config=None)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the Global Country Explorer.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    start_time = time.time()
    load_dotenv()
    args = build_parser().parse_args(argv)

    if args.command == "validate-config":
        return 0 if validate_config_file(args.path) else 1

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level)

        # Lookup commands print results on stdout, so their logs go to stderr
        log_stream = sys.stdout if args.command == "serve" else sys.stderr
        configure_logging(
            level=env_config.log_level,
            format_type=app_config.logging.format,
            environment=env_config.environment,
            stream=log_stream,
        )

        logger.info(
            "Global Country Explorer starting",
            extra={
                "event": "service.starting",
                "command": args.command,
                "config_path": str(args.config) if args.config else None,
                "log_level": env_config.log_level,
                "api_key_configured": env_config.has_api_key,
            },
        )

        if args.command == "serve":
            return run_server(args, app_config, env_config)

        service = CountryLookupService(get_fetcher(app_config.http))
        renderer = TemplateRenderer()

        if args.command == "search":
            exit_code = run_search(args, service, renderer)
        else:
            exit_code = run_view(args, service, renderer)

        logger.info(
            "Global Country Explorer finished",
            extra={
                "event": "service.stopping",
                "exit_code": exit_code,
                "uptime_seconds": round(time.time() - start_time, 2),
            },
        )
        return exit_code

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return 1
    except FetcherError as e:
        print(f"Error: {e}", file=sys.stderr)
        logger.error(
            f"Lookup failed: {e}",
            extra={"event": "service.lookup.failed", "error_type": type(e).__name__},
        )
        return 1
    except KeyboardInterrupt:
        print("\nShutdown requested by user", file=sys.stderr)
        return 0


if __name__ == "__main__":
    sys.exit(main())
