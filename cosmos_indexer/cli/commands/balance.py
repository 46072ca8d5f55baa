# cosmos_indexer/cli/commands/balance.py

import click


@click.command('balance')
@click.argument('address')
@click.option('--token', 'token_address', help='Only show the balance of this token')
@click.pass_context
def balance(ctx, address, token_address):
    """Show the current token balances of an account

    Examples:
        cosmos-indexer balance juno1abc...
        cosmos-indexer balance juno1abc... --token juno1token...
    """
    cli_context = ctx.obj['cli_context']
    balance_repo = cli_context.db_manager.get_balance_repo()

    with cli_context.db_manager.get_session() as session:
        if token_address:
            found = balance_repo.get_by_account_and_token(session, address, token_address)
            balances = [found] if found else []
        else:
            balances = balance_repo.get_by_account(session, address)

        if not balances:
            click.echo(f"No balances found for {address}")
            return

        click.echo(f"Balances for {address}:")
        for row in balances:
            click.echo(f"   {row.token_address}: {row.amount}")
