# cosmos_indexer/cli/commands/database.py

import click


@click.command('init-db')
@click.pass_context
def init_db(ctx):
    """Create every table in the configured database

    Production databases should be migrated with alembic instead.
    """
    cli_context = ctx.obj['cli_context']

    try:
        db_manager = cli_context.db_manager
        if not db_manager.health_check():
            raise click.ClickException("Database is not reachable")
        db_manager.create_schema()
    except click.ClickException:
        raise
    except Exception as e:
        raise click.ClickException(f"Failed to create schema: {e}")

    click.echo("✅ Database schema created")
    click.echo(f"   Config: {cli_context.config.name}")
