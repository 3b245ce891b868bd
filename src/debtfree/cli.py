"""Command line entry points for DebtFree."""

from __future__ import annotations

from pathlib import Path

import click

from .config import BaseConfig
from .logging_config import get_logger, setup_logging
from .models.debt import DebtRecord, StrategyTag
from .services import reports
from .services.debts import compare_strategies, plan
from .services.import_csv import load_debts
from .services.strategy import order, recommend

logger = get_logger(__name__)

_CSV_ARGUMENT = click.argument(
    "csv_path", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
_STRATEGY_CHOICE = click.Choice([tag.value for tag in StrategyTag], case_sensitive=False)


def _load(csv_path: Path) -> list[DebtRecord]:
    try:
        return load_debts(csv_path)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc


def _budget_or_recommended(budget: float | None, debts: list[DebtRecord]) -> float:
    if budget is not None:
        return budget
    suggested = reports.recommended_payment(debts)
    click.echo(f"Using recommended monthly budget: {suggested:.2f}")
    return suggested


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Plan debt payoff from a CSV of balances, rates and minimum payments."""

    try:
        config = BaseConfig()
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    setup_logging(config)
    ctx.obj = config


@cli.command("recommend")
@_CSV_ARGUMENT
def recommend_command(csv_path: Path) -> None:
    """Print the recommended repayment strategy."""

    tag = recommend(_load(csv_path))
    click.echo(f"{tag.label} ({tag.value})")
    click.echo(tag.description)


@cli.command("order")
@_CSV_ARGUMENT
@click.option("--strategy", type=_STRATEGY_CHOICE, default=None, help="Force a strategy")
def order_command(csv_path: Path, strategy: str | None) -> None:
    """List debts in payoff priority order."""

    debts = _load(csv_path)
    tag = StrategyTag.from_value(strategy) if strategy else recommend(debts)
    click.echo(f"Strategy: {tag.label}")
    for position, debt in enumerate(order(debts, tag), start=1):
        label = debt.name or str(debt.id)
        click.echo(
            f"{position}. {label}: balance {debt.balance:.2f}, "
            f"rate {debt.annual_interest_rate_percent:.2f}%, minimum {debt.minimum_payment:.2f}"
        )


@cli.command("simulate")
@_CSV_ARGUMENT
@click.option("--budget", type=float, default=None, help="Total monthly payment")
@click.option("--strategy", type=_STRATEGY_CHOICE, default=None, help="Force a strategy")
@click.pass_obj
def simulate_command(
    config: BaseConfig, csv_path: Path, budget: float | None, strategy: str | None
) -> None:
    """Simulate payoff and report time to debt free and interest saved."""

    debts = _load(csv_path)
    monthly_budget = _budget_or_recommended(budget, debts)
    tag = StrategyTag.from_value(strategy) if strategy else None
    try:
        payoff = plan(debts, monthly_budget, strategy=tag, options=config.simulation_options())
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"Strategy: {payoff.strategy.label}")
    click.echo(f"Time to debt free: {reports.describe_duration(payoff.result)}")
    payoff_date = reports.debt_free_date(payoff.result)
    if payoff_date is not None:
        click.echo(f"Debt free by: {payoff_date.isoformat()}")
    click.echo(f"Interest saved: {payoff.result.interest_saved:.2f}")


@cli.command("compare")
@_CSV_ARGUMENT
@click.option("--budget", type=float, default=None, help="Total monthly payment")
@click.pass_obj
def compare_command(config: BaseConfig, csv_path: Path, budget: float | None) -> None:
    """Rank every strategy by months to payoff."""

    debts = _load(csv_path)
    monthly_budget = _budget_or_recommended(budget, debts)
    try:
        comparisons = compare_strategies(debts, monthly_budget, config.simulation_options())
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    frame = reports.comparison_frame(comparisons)
    click.echo(frame.to_string(index=False))


@cli.command("summary")
@_CSV_ARGUMENT
def summary_command(csv_path: Path) -> None:
    """Show portfolio totals and a suggested budget range."""

    debts = _load(csv_path)
    summary = reports.summarize(debts)
    low, high = reports.payment_bounds(debts)
    click.echo(f"Debts: {summary.debt_count}")
    click.echo(f"Total balance: {summary.total_balance:.2f}")
    click.echo(f"Total minimum payment: {summary.total_minimum_payment:.2f}")
    click.echo(f"Average rate: {summary.average_rate:.2f}%")
    click.echo(f"Monthly interest: {summary.monthly_interest:.2f}")
    click.echo(f"Recommended payment: {reports.recommended_payment(debts):.2f}")
    click.echo(f"Budget range: {low:.2f} - {high:.2f}")
    for share in reports.breakdown_by_category(debts):
        if share.amount > 0:
            click.echo(f"  {share.category.value}: {share.amount:.2f} ({share.percentage:.1f}%)")
    hint = reports.interest_recommendation(debts)
    if hint:
        click.echo(hint)
    logger.debug("Summary printed", extra={"debt_count": summary.debt_count})


def main() -> None:  # pragma: no cover - console script
    cli()
