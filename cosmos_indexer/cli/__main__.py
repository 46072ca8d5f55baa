# cosmos_indexer/cli/__main__.py

"""
Cosmos Indexer CLI

Usage: cosmos-indexer --config config.yaml [command] [options]
"""

import click

from .context import CLIContext
from ..core.logging import IndexerLogger


@click.group()
@click.option('--config', 'config_path', envvar='COSMOS_INDEXER_CONFIG',
              default='config.yaml', show_default=True,
              type=click.Path(dir_okay=False),
              help='Indexer configuration file (YAML or JSON)')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.pass_context
def cli(ctx, config_path, verbose):
    """Cosmos Indexer - replay and inspect indexed contract events"""
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose

    log_level = "DEBUG" if verbose else None
    IndexerLogger.configure(
        log_level=log_level or "INFO",
        console_enabled=True,
        file_enabled=False,
        structured_format=False,
    )

    cli_context = CLIContext(config_path, log_level=log_level)
    ctx.obj['cli_context'] = cli_context
    ctx.call_on_close(cli_context.shutdown)


from .commands.database import init_db
from .commands.replay import replay
from .commands.balance import balance
from .commands.token import token

cli.add_command(init_db)
cli.add_command(replay)
cli.add_command(balance)
cli.add_command(token)


if __name__ == '__main__':
    cli()
