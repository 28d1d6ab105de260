"""selector-builder CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging
import sys

import click

from selector_builder import __version__
from selector_builder.builder import SelectorBuilder
from selector_builder.config import CliConfig, configure_logging
from selector_builder.errors import SelectorError
from selector_builder.facade import combine
from selector_builder.model import PartKind

logger = logging.getLogger(__name__)

# Accepted spellings for each kind on the command line.
_KIND_NAMES: dict[str, PartKind] = {}
for _kind in PartKind:
    _KIND_NAMES[_kind.value] = _kind
    _KIND_NAMES[_kind.value.replace("-", "_")] = _kind
_KIND_NAMES["attribute"] = PartKind.ATTRIBUTE


def _parse_part(token: str) -> tuple[PartKind, str]:
    """Split a ``kind=value`` token.  The value is everything after the first ``=``."""
    name, _, value = token.partition("=")
    kind = _KIND_NAMES.get(name.strip().lower())
    if kind is None:
        raise click.BadParameter(
            f"Unknown part kind {name!r} in {token!r}", param_hint="TOKENS"
        )
    return kind, value


def build_from_tokens(tokens: tuple[str, ...] | list[str]) -> SelectorBuilder:
    """Build a selector from CLI tokens.

    ``kind=value`` tokens are appended to the current compound selector; any
    other token is a combinator that starts the next one.  Compound selectors
    are joined right to left so ``a + b ~ c`` becomes
    ``combine(a, '+', combine(b, '~', c))``.
    """
    compounds: list[SelectorBuilder] = []
    combinators: list[str] = []
    current: SelectorBuilder | None = None

    for token in tokens:
        if "=" in token:
            kind, value = _parse_part(token)
            if current is None:
                current = SelectorBuilder()
            current.append(kind, value)
            continue
        if current is None:
            raise click.BadParameter(
                f"Combinator {token!r} must follow a selector part", param_hint="TOKENS"
            )
        compounds.append(current)
        combinators.append(token)
        current = None

    if current is None:
        raise click.BadParameter(
            "Expected a selector part at the end", param_hint="TOKENS"
        )
    compounds.append(current)

    result = compounds[-1]
    for compound, combinator in zip(reversed(compounds[:-1]), reversed(combinators)):
        result = combine(compound, combinator, result)
    return result


@click.group()
@click.version_option(version=__version__, prog_name="selector-builder")
def cli() -> None:
    """selector-builder - compose CSS selectors from ordered parts."""


@cli.command()
@click.argument("tokens", nargs=-1, required=True)
@click.option(
    "--log-level", default="WARNING", show_default=True, help="Logging level name"
)
def build(tokens: tuple[str, ...], log_level: str) -> None:
    """Build a selector from KIND=VALUE parts and combinator tokens.

    Example: selector-builder build element=div id=main + element=span
    """
    try:
        config = CliConfig(log_level=log_level)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--log-level") from exc
    configure_logging(config)

    try:
        selector = build_from_tokens(tokens)
    except SelectorError as exc:
        logger.debug("Build failed on %s", exc.kind)
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.stringify())


@cli.command()
def kinds() -> None:
    """List part kinds in their required order."""
    for kind in sorted(PartKind, key=lambda k: k.rank):
        parts = [f"{kind.rank}  {kind.value:<15}", f"{kind.render('VALUE'):<10}"]
        if kind.once_only:
            parts.append("once-only")
        click.echo("  ".join(parts).rstrip())
