"""CLI entry point for krsalary."""

from __future__ import annotations

import logging
import re
from pathlib import Path

import click

from krsalary.config.defaults import default_policy
from krsalary.core.calculator import calculate_net_pay
from krsalary.io.report import format_details, format_report
from krsalary.io.serialize import dump_breakdown, load_policy
from krsalary.utils.exceptions import ConfigError, InputError

# Salaries are entered in units of 10,000 KRW (만원).
INPUT_UNIT: int = 10_000

PROMPT = '연봉을 "만원 단위"로 입력해주세요 (예: 5000)'
INPUT_ERROR_MESSAGE = "정수만 입력해주세요. 예: 5000 (=> 5,000만원)"

# Largest accepted annual gross, 1,000조원; larger amounts lose precision as floats.
MAX_ANNUAL_GROSS: int = 10**15

_DIGITS = re.compile(r"[0-9]+")


def parse_salary_input(text: str) -> int:
    """Convert the prompted salary (in 10,000 KRW units) to an annual KRW amount.

    Raises:
        InputError: If the text is not a non-negative integer, or the amount
            exceeds MAX_ANNUAL_GROSS.
    """
    text = text.strip()
    if not _DIGITS.fullmatch(text):
        raise InputError(INPUT_ERROR_MESSAGE)
    # Length check first: int() refuses very long digit strings.
    digits = text.lstrip("0") or "0"
    if len(digits) > len(str(MAX_ANNUAL_GROSS)):
        raise InputError(INPUT_ERROR_MESSAGE)
    annual_gross = int(digits) * INPUT_UNIT
    if annual_gross > MAX_ANNUAL_GROSS:
        raise InputError(INPUT_ERROR_MESSAGE)
    return annual_gross


@click.command()
@click.version_option(package_name="krsalary")
@click.option(
    "--policy",
    "policy_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to a YAML or JSON policy file. Uses the shipped table if not provided.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the full breakdown as JSON.")
@click.option("--details", is_flag=True, help="Also print the annual tax calculation steps.")
@click.option("-v", "--verbose", is_flag=True, help="Log intermediate values to stderr.")
def cli(policy_path: Path | None, as_json: bool, details: bool, verbose: bool) -> None:
    """krsalary — Korean salary take-home pay calculator."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        policy = load_policy(policy_path) if policy_path is not None else default_policy()
    except ConfigError as exc:
        raise click.BadParameter(str(exc), param_hint="--policy") from exc

    if not as_json:
        click.echo("=" * 38)
        click.echo("     KR Actual Salary (간편 계산기)     ")
        click.echo("=" * 38)
    raw = click.prompt(PROMPT, default="", show_default=False, prompt_suffix=" > ", err=as_json)

    try:
        annual_gross = parse_salary_input(raw)
    except InputError as exc:
        click.echo(str(exc), err=True)
        raise SystemExit(1) from exc

    breakdown = calculate_net_pay(annual_gross, policy)

    if as_json:
        click.echo(dump_breakdown(breakdown))
        return
    for line in format_report(breakdown, policy.currency_suffix):
        click.echo(line)
    if details:
        for line in format_details(breakdown, policy.currency_suffix):
            click.echo(line)


if __name__ == "__main__":
    cli()
