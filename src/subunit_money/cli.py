"""
subunit-money CLI — convert amounts between subunits and major units.

Commands:
    subunit-money to-major      Subunit count → major-unit amount
    subunit-money to-subunits   Major-unit amount → subunit count
    subunit-money factor        Show a currency's subunit factor
    subunit-money currencies    List supported currencies
"""

from __future__ import annotations

import json
import logging
import os
import sys
from decimal import ROUND_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP
from typing import Optional

import click

from . import __version__
from .currency import Currency, canonical_currency
from .errors import ConversionError
from .factor import SUBUNIT_FACTORS, decimal_places, factor_of, supported_currencies
from .money import MonetaryValue


DEFAULT_CURRENCY_ENV = "SUBUNIT_MONEY_DEFAULT_CURRENCY"
FALLBACK_CURRENCY = "USD"

# Unknown options pass through as arguments so AMOUNT can be negative (-5, -1.5).
SIGNED_AMOUNT_SETTINGS = {"ignore_unknown_options": True}

ROUNDING_MODES = {
    "half-up": ROUND_HALF_UP,
    "half-even": ROUND_HALF_EVEN,
    "down": ROUND_DOWN,
}


def _resolve_currency(code: Optional[str]) -> Currency:
    raw = code or os.getenv(DEFAULT_CURRENCY_ENV, FALLBACK_CURRENCY)
    return canonical_currency(raw)


def _format_major(value: MonetaryValue) -> str:
    places = decimal_places(value.currency)
    return f"{value.amount:.{places}f} {value.currency}"


def _fail(message: str, exc: Exception) -> None:
    click.echo(f"❌ {message}: {exc}", err=True)
    sys.exit(1)


# ── CLI ───────────────────────────────────────────────────────────

@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log conversion details to stderr")
def main(verbose: bool):
    """subunit-money — exact subunits ↔ floating major units."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


@main.command("to-major", context_settings=SIGNED_AMOUNT_SETTINGS)
@click.argument("amount", type=int)
@click.argument("currency", required=False)
@click.option("--json", "as_json", is_flag=True, help="Print {amount, currency} as JSON")
def to_major(amount: int, currency: Optional[str], as_json: bool):
    """Convert an integer subunit AMOUNT to major units."""
    try:
        value = MonetaryValue.from_subunits(amount, _resolve_currency(currency))
        converted = value.to_major_units()
    except ConversionError as exc:
        _fail("Conversion failed", exc)

    if as_json:
        click.echo(json.dumps(converted.to_dict()))
    else:
        click.echo(_format_major(converted))


@main.command("to-subunits", context_settings=SIGNED_AMOUNT_SETTINGS)
@click.argument("amount", type=float)
@click.argument("currency", required=False)
@click.option(
    "--rounding",
    type=click.Choice(sorted(ROUNDING_MODES.keys()), case_sensitive=False),
    default="half-up",
    show_default=True,
    help="How a fractional subunit is narrowed (down = truncate toward zero)",
)
@click.option("--json", "as_json", is_flag=True, help="Print {amount, currency} as JSON")
def to_subunits(amount: float, currency: Optional[str], rounding: str, as_json: bool):
    """Convert a major-unit AMOUNT to an integer subunit count."""
    try:
        value = MonetaryValue.from_major_units(amount, _resolve_currency(currency))
        converted = value.to_subunits(rounding=ROUNDING_MODES[rounding.lower()])
    except ConversionError as exc:
        _fail("Conversion failed", exc)

    if as_json:
        click.echo(json.dumps(converted.to_dict()))
    else:
        click.echo(f"{converted.amount} {converted.currency} subunits")


@main.command()
@click.argument("currency")
def factor(currency: str):
    """Show the subunit factor of CURRENCY."""
    try:
        resolved = canonical_currency(currency)
        value = factor_of(resolved)
    except ConversionError as exc:
        _fail("Unknown currency", exc)

    click.echo(f"{resolved}: factor {int(value)}, {decimal_places(resolved)} decimal places")


@main.command()
@click.option(
    "--decimals",
    type=click.Choice(["0", "2", "3"]),
    default=None,
    help="Only list currencies with this many decimal places",
)
def currencies(decimals: Optional[str]):
    """List supported currencies and their factors."""
    for currency in supported_currencies():
        if decimals is not None and decimal_places(currency) != int(decimals):
            continue
        click.echo(f"{currency}  {SUBUNIT_FACTORS[currency]}")


if __name__ == "__main__":
    main()
