#!/usr/bin/env python3
"""
Application Entry Script.

Main entry point for the todo service. All functionality is accessible
through command-line options.

Usage:
    python run.py --help
    python run.py --action server --verbose
    python run.py --action config
    python run.py --action test --test-type unit
"""

import subprocess
import sys
from pathlib import Path

import click

# Ensure project root is in path for absolute imports
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from modules.backend.core.logging import get_logger, log_with_source, setup_logging


def validate_project_root() -> Path:
    """Validate that we're running from the project root."""
    if not (PROJECT_ROOT / ".project_root").exists():
        click.echo(
            click.style("Error: .project_root not found. Run from project root.", fg="red"),
            err=True,
        )
        sys.exit(1)
    return PROJECT_ROOT


@click.command()
@click.option(
    "--action",
    type=click.Choice(["server", "config", "test", "info"]),
    default="info",
    help="Action to perform.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output (INFO level logging).",
)
@click.option(
    "--debug", "-d",
    is_flag=True,
    help="Enable debug output (DEBUG level logging).",
)
@click.option(
    "--host",
    default=None,
    help="Server host (for server action).",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Server port (for server action). Defaults to PORT or application.yaml.",
)
@click.option(
    "--reload",
    is_flag=True,
    help="Enable auto-reload (for server action).",
)
@click.option(
    "--test-type",
    type=click.Choice(["all", "unit", "integration"]),
    default="all",
    help="Test type to run (for test action).",
)
@click.option(
    "--coverage",
    is_flag=True,
    help="Run tests with coverage (for test action).",
)
def main(
    action: str,
    verbose: bool,
    debug: bool,
    host: str | None,
    port: int | None,
    reload: bool,
    test_type: str,
    coverage: bool,
) -> None:
    """
    Todo Service Entry Point.

    Run the HTTP server, view configuration, or run tests.

    Examples:

        # Start the server on the configured port
        python run.py --action server --verbose

        # View loaded configuration
        python run.py --action config

        # Run unit tests with coverage
        python run.py --action test --test-type unit --coverage
    """
    validate_project_root()

    if debug:
        log_level = "DEBUG"
    elif verbose:
        log_level = "INFO"
    else:
        log_level = "WARNING"

    setup_logging(level=log_level, format_type="console")
    logger = get_logger(__name__)

    logger.debug("Starting application", extra={"action": action, "log_level": log_level})

    if action == "server":
        run_server(logger, host, port, reload)
    elif action == "config":
        show_config(logger)
    elif action == "test":
        run_tests(logger, test_type, coverage)
    elif action == "info":
        show_info(logger)


def run_server(logger, host: str | None, port: int | None, reload: bool) -> None:
    """Run uvicorn in this process so SIGTERM reaches the app's shutdown."""
    import uvicorn

    from modules.backend.core.config import get_database_path, get_server_address

    default_host, default_port = get_server_address()
    server_host = host or default_host
    server_port = port or default_port

    log_with_source(
        logger, "cli", "info", "Starting server",
        host=server_host, port=server_port, reload=reload,
    )

    click.echo(f"Todo server running at http://{server_host}:{server_port}")
    click.echo(f"Using database: {get_database_path()}")

    uvicorn.run(
        "modules.backend.main:app",
        host=server_host,
        port=server_port,
        reload=reload,
    )


def show_config(logger) -> None:
    """Display loaded configuration."""
    click.echo("Application Configuration:\n")

    try:
        from modules.backend.core.config import (
            get_app_config,
            get_database_path,
            get_server_address,
        )

        app_config = get_app_config()

        sections = [
            ("Application Settings (from YAML)", app_config.application),
            ("Database Settings (from YAML)", app_config.database),
            ("Logging Settings (from YAML)", app_config.logging),
        ]
        for title, section in sections:
            click.echo(f"{title}:")
            click.echo("-" * 40)
            for key, value in section.model_dump().items():
                click.echo(f"  {key}: {value}")
            click.echo()

        host, port = get_server_address()
        click.echo("Effective Values (environment applied):")
        click.echo("-" * 40)
        click.echo(f"  listen: {host}:{port}")
        click.echo(f"  database: {get_database_path()}")

        logger.info("Configuration displayed successfully")

    except Exception as e:
        logger.error("Failed to load configuration", extra={"error": str(e)})
        click.echo(click.style(f"Error loading configuration: {e}", fg="red"))
        sys.exit(1)


def run_tests(logger, test_type: str, coverage: bool) -> None:
    """Run the test suite."""
    logger.info("Running tests", extra={"type": test_type, "coverage": coverage})

    cmd = [sys.executable, "-m", "pytest"]

    if test_type == "unit":
        cmd.append("tests/unit")
    elif test_type == "integration":
        cmd.append("tests/integration")
    else:
        cmd.append("tests/")

    cmd.append("-v")

    if coverage:
        cmd.extend(["--cov=modules/backend", "--cov-report=term-missing"])

    click.echo(f"Running: {' '.join(cmd)}\n")

    try:
        result = subprocess.run(cmd)
        sys.exit(result.returncode)
    except FileNotFoundError:
        logger.error("pytest not found. Install with: pip install -e '.[test]'")
        sys.exit(1)


def show_info(logger) -> None:
    """Display application information."""
    click.echo("Todo Service")
    click.echo("=" * 40)

    try:
        from modules.backend.core.config import get_app_config
        app_config = get_app_config()
        click.echo(f"Name: {app_config.application.name}")
        click.echo(f"Version: {app_config.application.version}")
        click.echo(f"Description: {app_config.application.description}")
    except Exception:
        click.echo("Name: Todo Service")
        click.echo("Version: 0.1.0")

    click.echo()
    click.echo("Available Actions:")
    click.echo("  --action server   Start the HTTP server")
    click.echo("  --action config   Display configuration")
    click.echo("  --action test     Run test suite")
    click.echo("  --action info     Show this information")
    click.echo()
    click.echo("Logging Options:")
    click.echo("  --verbose, -v     Enable INFO level logging")
    click.echo("  --debug, -d       Enable DEBUG level logging")
    click.echo()
    click.echo("Examples:")
    click.echo("  python run.py --action server --port 8080 --verbose")
    click.echo("  python run.py --action test --test-type unit --coverage")

    logger.debug("Info displayed")


if __name__ == "__main__":
    main()
