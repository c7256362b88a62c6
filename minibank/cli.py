"""
CLI interface for the bank account system.

This module provides a command-line interface that builds an in-memory bank
from options and runs a single operation against it.
"""

import click
import logging
from decimal import Decimal
from typing import List, Tuple

from .exceptions import BankError
from .models import Account, Bank, to_decimal

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']


class BankCLI:
    """CLI wrapper for bank operations."""

    def __init__(self, bank_name: str = "Bank"):
        """Initialize CLI with an empty bank."""
        self.bank = Bank(bank_name)

    def format_currency(self, amount: Decimal) -> str:
        """Format currency for display."""
        return f"{amount:,.2f}"

    @staticmethod
    def parse_currency(amount_str: str) -> Decimal:
        """Parse currency input."""
        # Remove thousands separators
        clean_str = amount_str.replace(',', '').strip()
        return to_decimal(clean_str)

    def open_account(self, owner: str, balance: Decimal) -> Account:
        """Create an account and register it with the bank."""
        account = Account(owner, balance)
        self.bank.add_account(account)
        return account

    def get_account(self, owner: str) -> Account:
        """Get a registered account by owner name."""
        account = self.bank.find_account(owner)
        if account is None:
            raise ValueError(f"Account not found: {owner}")
        return account


def _parse_accounts(ctx, param, values) -> List[Tuple[str, Decimal]]:
    """Turn repeated OWNER=BALANCE options into (owner, balance) pairs."""
    accounts = []
    seen = set()

    for value in values:
        owner, sep, balance = value.partition('=')
        owner = owner.strip()
        if not sep or not owner:
            raise click.BadParameter(f"expected OWNER=BALANCE, got {value!r}")
        if owner in seen:
            raise click.BadParameter(f"duplicate account owner {owner!r}")

        try:
            amount = BankCLI.parse_currency(balance)
        except ValueError as e:
            raise click.BadParameter(str(e))

        seen.add(owner)
        accounts.append((owner, amount))

    return accounts


@click.group()
@click.option('--bank-name', default='Bank', show_default=True, help='Name of the bank')
@click.option('--account', 'accounts', multiple=True, callback=_parse_accounts,
              envvar='MINIBANK_ACCOUNT', metavar='OWNER=BALANCE',
              help='Register an account (repeatable)')
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default='WARNING', show_default=True, help='Logging level')
@click.pass_context
def cli(ctx, bank_name, accounts, log_level):
    """Bank Account CLI"""
    level = getattr(logging, log_level.upper())
    logging.basicConfig(level=level, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)

    bank_cli = BankCLI(bank_name)
    for owner, balance in accounts:
        bank_cli.open_account(owner, balance)

    ctx.ensure_object(dict)
    ctx.obj['cli'] = bank_cli


@cli.command()
@click.pass_context
def show(ctx):
    """Show all accounts held by the bank."""
    bank_cli = ctx.obj['cli']
    bank = bank_cli.bank

    click.echo(f"\n🏦 {bank.name}")
    click.echo(f"{'='*40}")

    if not bank.accounts:
        click.echo("No accounts")
        return

    click.echo(f"{'Owner':<20} {'Balance':>19}")
    click.echo(f"{'-'*40}")
    for account in bank.accounts:
        click.echo(f"{account.owner:<20} {bank_cli.format_currency(account.balance):>19}")
    click.echo(f"{'-'*40}")
    click.echo(f"{'Total':<20} {bank_cli.format_currency(bank.total_balance()):>19}")


@cli.command()
@click.argument('owner')
@click.argument('amount')
@click.pass_context
def debit(ctx, owner, amount):
    """Take AMOUNT out of OWNER's account."""
    bank_cli = ctx.obj['cli']

    try:
        debit_amount = bank_cli.parse_currency(amount)
        account = bank_cli.get_account(owner)
        account.debit(debit_amount)

        click.echo(f"✅ Debit successful!")
        click.echo(f"Amount: {bank_cli.format_currency(debit_amount)}")
        click.echo(f"New Balance: {bank_cli.format_currency(account.balance)}")

    except (BankError, ValueError) as e:
        click.echo(f"❌ Error: {e}", err=True)
        ctx.exit(1)


@cli.command()
@click.argument('owner')
@click.argument('amount')
@click.pass_context
def credit(ctx, owner, amount):
    """Put AMOUNT into OWNER's account."""
    bank_cli = ctx.obj['cli']

    try:
        credit_amount = bank_cli.parse_currency(amount)
        account = bank_cli.get_account(owner)
        account.credit(credit_amount)

        click.echo(f"✅ Credit successful!")
        click.echo(f"Amount: {bank_cli.format_currency(credit_amount)}")
        click.echo(f"New Balance: {bank_cli.format_currency(account.balance)}")

    except (BankError, ValueError) as e:
        click.echo(f"❌ Error: {e}", err=True)
        ctx.exit(1)


@cli.command()
@click.argument('from_owner')
@click.argument('to_owner')
@click.argument('amount')
@click.pass_context
def transfer(ctx, from_owner, to_owner, amount):
    """Transfer AMOUNT from FROM_OWNER to TO_OWNER."""
    bank_cli = ctx.obj['cli']

    try:
        transfer_amount = bank_cli.parse_currency(amount)
        from_account = bank_cli.get_account(from_owner)
        to_account = bank_cli.get_account(to_owner)
        bank_cli.bank.transfer(from_account, to_account, transfer_amount)

        click.echo(f"✅ Transfer successful!")
        click.echo(f"Amount: {bank_cli.format_currency(transfer_amount)}")
        click.echo(f"{from_owner} Balance: {bank_cli.format_currency(from_account.balance)}")
        click.echo(f"{to_owner} Balance: {bank_cli.format_currency(to_account.balance)}")

    except (BankError, ValueError) as e:
        click.echo(f"❌ Error: {e}", err=True)
        ctx.exit(1)


def main():
    """Main entry point for CLI."""
    cli(auto_envvar_prefix='MINIBANK')


if __name__ == '__main__':
    main()
