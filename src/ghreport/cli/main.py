"""Command line entry point: ``ghreport``."""

import json

import click

from ghreport.cli.handlers import handle_generate, handle_show_settings
from ghreport.config.settings import get_settings
from ghreport.core.logging import setup_logging


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Override GHR_LOG_LEVEL for this invocation.",
)
def cli(log_level):
    """Generate PDF reports from public GitHub profiles."""
    if log_level:
        get_settings().log_level = log_level
    setup_logging()


@cli.command()
@click.argument("profile_url")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Where to write the PDF (defaults to the configured report filename).",
)
def generate(profile_url, output):
    """Fetch PROFILE_URL (or a bare login) and write its report PDF."""
    result = handle_generate(profile_url, output)
    if not result["ok"]:
        raise click.ClickException(f"Error generating report: {result['error']}")

    report = result["value"]
    click.echo(
        f"Wrote {report['output_path']} "
        f"({report['repositories']} repositories for {report['username']})"
    )


@cli.command()
@click.option("--host", help="Interface to bind (default from settings).")
@click.option("--port", type=int, help="Port to bind (default from settings).")
def serve(host, port):
    """Start the web dashboard."""
    from ghreport.dashboard import app

    settings = get_settings()
    app.run(
        host=host or settings.dashboard_host,
        port=port or settings.dashboard_port,
        debug=False,
    )


@cli.command("settings")
def show_settings():
    """Print the effective configuration as JSON."""
    result = handle_show_settings()
    click.echo(json.dumps(result["value"], indent=2))


def main():
    cli()


if __name__ == "__main__":
    main()
