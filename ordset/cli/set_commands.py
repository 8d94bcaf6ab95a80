import sys
import click

from ordset.config import OrdsetConfig
from ordset.errors import EmptyCollection
from ordset.ordered_set import OrderedSet


def parse_element(ctx, param, value):
    config: OrdsetConfig = ctx.obj["config"]
    try:
        return config.parse_element(value.strip())
    except ValueError:
        raise click.BadParameter(f"{value!r} is not a valid {config.element_type}")


def parse_set(ctx, param, value):
    # An empty argument is the empty set
    config: OrdsetConfig = ctx.obj["config"]
    tokens = [t for t in value.split(config.separator) if t.strip()]
    return OrderedSet(parse_element(ctx, param, t) for t in tokens)


def echo_set(s: OrderedSet):
    config: OrdsetConfig = click.get_current_context().obj["config"]
    if config.output_format == "lines":
        for item in s:
            click.echo(item)
    else:
        click.echo("[" + ", ".join(str(item) for item in s) + "]")


def echo_bool(answer: bool):
    click.echo("true" if answer else "false")
    sys.exit(0 if answer else 1)


@click.command(help="Print the canonical form of a set")
@click.argument("set_a", callback=parse_set)
def new(set_a):
    echo_set(set_a)


@click.command(help="Elements in either set")
@click.argument("set_a", callback=parse_set)
@click.argument("set_b", callback=parse_set)
def union(set_a, set_b):
    echo_set(set_a.union(set_b))


@click.command(help="Elements in both sets")
@click.argument("set_a", callback=parse_set)
@click.argument("set_b", callback=parse_set)
def intersection(set_a, set_b):
    echo_set(set_a.intersection(set_b))


@click.command(help="Elements of SET_A that are not in SET_B")
@click.argument("set_a", callback=parse_set)
@click.argument("set_b", callback=parse_set)
def difference(set_a, set_b):
    echo_set(set_a.difference(set_b))


@click.command(name="symmetric-difference", help="Elements in exactly one of the sets")
@click.argument("set_a", callback=parse_set)
@click.argument("set_b", callback=parse_set)
def symmetric_difference(set_a, set_b):
    echo_set(set_a.symmetric_difference(set_b))


@click.command(help="Exit 0 if every element of SET_A is in SET_B")
@click.argument("set_a", callback=parse_set)
@click.argument("set_b", callback=parse_set)
def subset(set_a, set_b):
    echo_bool(set_a.subset(set_b))


@click.command(help="Exit 0 if the sets share no element")
@click.argument("set_a", callback=parse_set)
@click.argument("set_b", callback=parse_set)
def disjoint(set_a, set_b):
    echo_bool(set_a.disjoint(set_b))


@click.command(help="Exit 0 if ITEM is in SET_A")
@click.argument("set_a", callback=parse_set)
@click.argument("item", callback=parse_element)
def member(set_a, item):
    echo_bool(set_a.member(item))


def _echo_extreme(s: OrderedSet, which: str):
    try:
        click.echo(s.min() if which == "min" else s.max())
    except EmptyCollection as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command(name="min", help="Smallest element of SET_A")
@click.argument("set_a", callback=parse_set)
def min_(set_a):
    _echo_extreme(set_a, "min")


@click.command(name="max", help="Largest element of SET_A")
@click.argument("set_a", callback=parse_set)
def max_(set_a):
    _echo_extreme(set_a, "max")
