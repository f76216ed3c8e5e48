import click
import structlog

from vault_relay import __version__
from vault_relay.constants import ENV_HOST, ENV_PORT
from vault_relay.exceptions import ConfigurationError
from vault_relay.services.vault.app import serve
from vault_relay.utils.configuration import load_relay_config
from vault_relay.utils.logs import configure_logging

log = structlog.get_logger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group(invoke_without_command=True, context_settings={"max_content_width": 120})
@click.pass_context
def main(ctx):
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command(name="run", help="Serve the relay's HTTP API.")
@click.option("--host", default=None, help="Host to listen on. [default: $HOST or 0.0.0.0]")
@click.option("--port", default=None, type=int, help="Port to listen on. [default: $PORT or 4000]")
@click.option(
    "--env-file",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="Load settings from this file. [default: .env in the working directory, if present]",
)
@click.option(
    "--log-file",
    default=None,
    type=click.Path(dir_okay=False),
    help="Append log output to this file instead of writing it to stderr.",
)
@click.option(
    "--log-level", default="INFO", type=click.Choice(LOG_LEVELS, case_sensitive=False)
)
def run(host, port, env_file, log_file, log_level):
    configure_logging(log_file, log_level.upper())

    try:
        config = load_relay_config(env_file, overrides={ENV_HOST: host, ENV_PORT: port})
    except ConfigurationError as e:
        raise click.UsageError(str(e))

    log.info("Starting Vault Relay", version=__version__, config=repr(config))
    serve(config)


@main.command(name="version", help="Show the version of vault_relay.")
def version():
    click.secho(message=__version__)
