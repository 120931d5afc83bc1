import logging
import logging.config

import click

import hcdna
from hcdna import Dna, ParseError

logger = logging.getLogger(__name__)

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "default": {
            "formatter": "default",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "hcdna": {"handlers": ["default"], "level": "INFO", "propagate": False},
    },
}


def _load(file) -> Dna:
    try:
        return Dna.from_json(file.read())
    except ParseError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("-d", "--debug", help="Debug output", is_flag=True)
def cli(debug: bool):
    logging.config.dictConfig(LOGGING_CONFIG)
    if debug:
        logging.getLogger("hcdna").setLevel(logging.DEBUG)


@cli.command()
@click.option("--name", help="DNA name", default="")
@click.option("--description", help="DNA description", default="")
def new(name: str, description: str):
    """Print a new DNA document."""
    dna = hcdna.create_default()
    dna.name = name
    dna.description = description
    logger.debug("Created DNA %s", dna.uuid)
    click.echo(dna.to_json(indent=2))


@cli.command()
@click.argument("document", type=click.File("r"), default="-")
def show(document):
    """Print a DNA document in normalized form."""
    click.echo(_load(document).to_json(indent=2))


@cli.command(name="name")
@click.argument("document", type=click.File("r"), default="-")
@click.option("--set", "new_name", help="Replace the name", default=None)
def name_(document, new_name: str | None):
    """Print the name of a DNA, or the document renamed with --set."""
    dna = _load(document)
    if new_name is None:
        click.echo(dna.name)
        return
    dna.name = new_name
    click.echo(dna.to_json(indent=2))


@cli.command()
@click.argument("document", type=click.File("r"), default="-")
def version(document):
    """Print the schema version a DNA document is read at."""
    click.echo(_load(document).dna_spec_version)


if __name__ == "__main__":
    cli()
