# cosmos_indexer/cli/commands/replay.py

import click
import msgspec

from ...types import HandlerError, decode_event


@click.command('replay')
@click.argument('events_file', type=click.File('r'))
@click.option('--continue-on-error', is_flag=True,
              help='Log handler failures and keep going instead of stopping')
@click.pass_context
def replay(ctx, events_file, continue_on_error):
    """Dispatch events from a JSON-lines file, in order

    Each non-blank line is one decoded CosmosEvent. Replay stops at the first
    failing event unless --continue-on-error is given; the failing event's
    writes are always rolled back.

    Examples:
        cosmos-indexer --config config.yaml replay events.jsonl
    """
    cli_context = ctx.obj['cli_context']
    dispatcher = cli_context.dispatcher

    processed = 0
    handled = 0
    failed = 0

    for line_number, line in enumerate(events_file, start=1):
        if not line.strip():
            continue

        try:
            event = decode_event(line)
        except msgspec.DecodeError as e:
            raise click.ClickException(f"Line {line_number}: invalid event: {e}")

        try:
            handled += dispatcher.dispatch(event)
        except HandlerError as e:
            failed += 1
            click.echo(f"❌ Line {line_number}: {e}", err=True)
            if not continue_on_error:
                ctx.exit(1)
        processed += 1

    click.echo(f"✅ Replayed {processed} events ({handled} handler runs, {failed} failed)")
    if failed:
        ctx.exit(1)
