# cosmos_indexer/cli/commands/token.py

import click


@click.command('token')
@click.argument('address')
@click.pass_context
def token(ctx, address):
    """Show token metadata and transfer statistics

    Examples:
        cosmos-indexer token juno1token...
    """
    cli_context = ctx.obj['cli_context']
    token_repo = cli_context.db_manager.get_token_repo()

    with cli_context.db_manager.get_session() as session:
        found = token_repo.get_by_address(session, address)
        if found is None:
            raise click.ClickException(f"Token '{address}' not found")

        click.echo(f"📋 Token: {found.symbol}")
        click.echo(f"   Name: {found.name}")
        click.echo(f"   Address: {found.address}")
        click.echo(f"   Code ID: {found.code_id}")
        click.echo(f"   Decimals: {found.decimals}")
        click.echo(f"   Minter: {found.minter or 'none'}")
        click.echo(f"   Total supply: {found.total_supply}")
        click.echo(f"   Transfers: {found.transfer_event_count}")
        click.echo(f"   Total transferred: {found.total_transferred}")
