import click
import importlib.metadata
import logging
import sys
import yaml

from ordset.cli.set_commands import (
    new,
    union,
    intersection,
    difference,
    symmetric_difference,
    subset,
    disjoint,
    member,
    min_,
    max_,
)
from ordset.config import (
    OrdsetConfig,
    SUPPORTED_ELEMENT_TYPES,
    SUPPORTED_OUTPUT_FORMATS,
    SUPPORTED_LOG_LEVELS,
    default_config_path,
)

LOGGER = logging.getLogger(__name__)


@click.group()
@click.option(
    "--config",
    help="Path to configuration file",
    type=click.Path(exists=False, readable=True),
    show_default=True,
    default=default_config_path,
)
@click.option(
    "--element-type",
    help="How set elements given on the command line are parsed",
    type=click.Choice(SUPPORTED_ELEMENT_TYPES),
    required=False,
)
@click.option("--separator", help="Separator between set elements", type=str)
@click.option(
    "--output-format",
    help="How result sets are printed",
    type=click.Choice(SUPPORTED_OUTPUT_FORMATS),
    required=False,
)
@click.option(
    "--log-level",
    help="Logging level",
    type=click.Choice(SUPPORTED_LOG_LEVELS, case_sensitive=False),
    required=False,
)
@click.pass_context
def cli(ctx, config, element_type, separator, output_format, log_level):
    if ctx.invoked_subcommand == "version":
        return
    try:
        conf = OrdsetConfig.load(config)
    except FileNotFoundError:
        conf = OrdsetConfig()
        click.echo(f"Warning: Configuration file not found {config}", err=True)
    except (ValueError, TypeError, yaml.YAMLError) as e:
        click.echo(f"Error: Invalid configuration file {config}: {e}", err=True)
        sys.exit(1)

    if element_type:
        conf.element_type = element_type
    if separator:
        conf.separator = separator
    if output_format:
        conf.output_format = output_format
    if log_level:
        conf.log_level = log_level.upper()

    logging.basicConfig(level=conf.log_level)
    LOGGER.debug(f"Using configuration {conf}")
    ctx.obj = {"config": conf}


@cli.command()
def version():
    print(f"{importlib.metadata.version('ordset')}")


cli.add_command(new)
cli.add_command(union)
cli.add_command(intersection)
cli.add_command(difference)
cli.add_command(symmetric_difference)
cli.add_command(subset)
cli.add_command(disjoint)
cli.add_command(member)
cli.add_command(min_)
cli.add_command(max_)


def main():
    cli()


if __name__ == "__main__":
    main()
