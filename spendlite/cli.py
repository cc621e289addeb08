# spendlite/cli.py
import logging
import sys
from datetime import datetime
import click
from spendlite.config import load_config, log_level
from spendlite.loaders import get_loader
from spendlite.outputs import get_output
from spendlite.core.totals import percentage
from spendlite.session import Session
from spendlite.utils import title_case


def _validate_month(ctx, param, value):
    if value is None:
        return None
    try:
        return datetime.strptime(value, '%Y-%m').strftime('%Y-%m')
    except ValueError:
        raise click.BadParameter(f"'{value}' is not a month in YYYY-MM form")


def _echo_view(view):
    click.echo(view.banner)
    click.echo("")

    totals = view.category_totals
    click.echo(f"{'Category':<24} {'Total':>12} {'%':>7}")
    for cat, total in totals.rows:
        pct = percentage(total, totals.grand_total)
        click.echo(f"{title_case(cat):<24} {total:>12.2f} {pct:>6.1f}%")
    click.echo(f"{'Total':<24} {totals.grand_total:>12.2f} {'100%':>7}")
    click.echo("")

    click.echo(f"{'Date':<12} {'Amount':>10}  {'Category':<18} Description")
    for tx in view.page.items:
        click.echo(
            f"{tx.date:<12} {tx.amount:>10.2f}  {title_case(tx.category):<18} {tx.description}"
        )

    pager = []
    for btn in view.pager:
        if btn.disabled:
            pager.append(f"({btn.label})")
        elif btn.active:
            pager.append(f"[{btn.label}]")
        else:
            pager.append(btn.label)
    click.echo(" ".join(pager) + f"   Page {view.page.number} / {view.page.total_pages}")


@click.command()
@click.option(
    '--csv', 'csv_path',
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help='Bank CSV export to load.'
)
@click.option(
    '--rules', 'rules_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Rules file, one "keyword => CATEGORY" per line (overrides config if provided)'
)
@click.option(
    '--config', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Path to config.yaml'
)
@click.option(
    '--loader', 'loader_name',
    default='csv',
    help='Name of the bank loader from the config (default: csv)'
)
@click.option(
    '--month',
    default=None,
    callback=_validate_month,
    help='Only show transactions in this month (YYYY-MM).'
)
@click.option('--category', default=None, help='Only show transactions in this category.')
@click.option('--page', default=1, type=int, help='Page of transactions to show.')
@click.option(
    '--list-months',
    is_flag=True,
    default=False,
    help='List the months present in the file and exit.'
)
@click.option(
    '--export-totals',
    is_flag=True,
    default=False,
    help='Write the category totals report for the current filters.'
)
@click.option(
    '--export-rules',
    is_flag=True,
    default=False,
    help='Write the active rules to rules.txt.'
)
@click.option(
    '--output-dir', 'output_dir',
    default=None,
    type=click.Path(file_okay=False),
    help='Directory for exported files (overrides config if provided)'
)
def main(csv_path, rules_path, config_path, loader_name, month, category, page,
         list_months, export_totals, export_rules, output_dir):
    """
    Load a bank CSV export, categorise each transaction with keyword rules,
    and print category totals plus one page of transactions.
    """
    cfg = load_config(config_path)
    logging.basicConfig(level=log_level(cfg))
    if output_dir:
        cfg['output_dir'] = output_dir

    try:
        loader = get_loader(loader_name, cfg)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='--loader')
    session = Session(loader=loader, page_size=int(cfg.get('page_size') or 10))

    rules_file = rules_path or cfg.get('rules_file')
    if rules_file:
        try:
            with open(rules_file, newline='', encoding='utf-8') as f:
                session.import_rules(f.read())
        except OSError as e:
            click.echo(f"Error loading rules: {e}", err=True)

    ok, status = session.load_csv_file(csv_path)
    click.echo(status, err=not ok)
    if not ok:
        sys.exit(1)

    if list_months:
        for key, label in session.months():
            click.echo(f"{key}  {label}")
        return

    if month:
        session.set_month(month)
    if category:
        session.set_category(category)
    session.go_to_page(page)

    _echo_view(session.view())

    if export_totals or export_rules:
        outputter = get_output('text', cfg)
        if export_totals:
            path = outputter.write(*session.export_totals())
            click.echo(f"Wrote category totals to {path}")
        if export_rules:
            path = outputter.write(*session.export_rules())
            click.echo(f"Wrote rules to {path}")
