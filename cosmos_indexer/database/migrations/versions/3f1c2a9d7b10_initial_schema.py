"""Initial schema

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-18 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa
from cosmos_indexer.database.types import CosmosAddressType, TxHashType, DecimalString

# revision identifiers, used by Alembic.
revision = '3f1c2a9d7b10'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    ]


def _provenance():
    return [
        sa.Column('block_height', sa.Integer(), nullable=True),
        sa.Column('timestamp', sa.DateTime(timezone=True), nullable=True),
        sa.Column('tx_hash', TxHashType(), nullable=True),
    ]


def _provenance_indexes(table_name: str) -> None:
    for column in ('block_height', 'timestamp', 'tx_hash'):
        op.create_index(op.f(f'ix_{table_name}_{column}'), table_name, [column], unique=False)


def upgrade() -> None:
    op.create_table('tokens',
        sa.Column('id', sa.String(length=255), nullable=False),
        sa.Column('address', CosmosAddressType(), nullable=False),
        sa.Column('code_id', sa.Integer(), nullable=True),
        sa.Column('decimals', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('symbol', sa.String(length=64), nullable=False),
        sa.Column('source', CosmosAddressType(), nullable=False),
        sa.Column('minter', CosmosAddressType(), nullable=True),
        sa.Column('transfer_event_count', sa.Integer(), nullable=False),
        sa.Column('total_supply', DecimalString(), nullable=False),
        sa.Column('total_transferred', DecimalString(), nullable=False),
        *_timestamps(),
        *_provenance(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('address')
    )
    op.create_index(op.f('ix_tokens_symbol'), 'tokens', ['symbol'], unique=False)
    _provenance_indexes('tokens')

    op.create_table('accounts',
        sa.Column('id', sa.String(length=255), nullable=False),
        sa.Column('address', CosmosAddressType(), nullable=False),
        sa.Column('abstract_id', sa.String(length=64), nullable=True),
        sa.Column('creator', CosmosAddressType(), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('owner', CosmosAddressType(), nullable=True),
        sa.Column('manager', CosmosAddressType(), nullable=True),
        sa.Column('proxy', CosmosAddressType(), nullable=True),
        sa.Column('admin', CosmosAddressType(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('governance_type', sa.String(length=64), nullable=True),
        sa.Column('funds_denom', sa.String(length=128), nullable=True),
        sa.Column('funds_amount', DecimalString(), nullable=True),
        *_timestamps(),
        *_provenance(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_accounts_address'), 'accounts', ['address'], unique=False)
    op.create_index(op.f('ix_accounts_manager'), 'accounts', ['manager'], unique=False)
    op.create_index(op.f('ix_accounts_proxy'), 'accounts', ['proxy'], unique=False)
    _provenance_indexes('accounts')

    op.create_table('transfer_events',
        sa.Column('id', sa.String(length=255), nullable=False),
        sa.Column('token', CosmosAddressType(), nullable=False),
        sa.Column('amount', DecimalString(), nullable=False),
        sa.Column('sender', CosmosAddressType(), nullable=False),
        sa.Column('destination', CosmosAddressType(), nullable=False),
        *_timestamps(),
        *_provenance(),
        sa.PrimaryKeyConstraint('id')
    )
    for column in ('token', 'sender', 'destination'):
        op.create_index(op.f(f'ix_transfer_events_{column}'), 'transfer_events', [column], unique=False)
    _provenance_indexes('transfer_events')

    op.create_table('account_balances',
        sa.Column('id', sa.String(length=255), nullable=False),
        sa.Column('account_id', sa.String(length=255), nullable=False),
        sa.Column('account_address', CosmosAddressType(), nullable=False),
        sa.Column('token_id', sa.String(length=255), nullable=False),
        sa.Column('token_address', CosmosAddressType(), nullable=False),
        sa.Column('amount', DecimalString(), nullable=False),
        sa.Column('last_transfer_id', sa.String(length=255), nullable=True),
        *_timestamps(),
        *_provenance(),
        sa.ForeignKeyConstraint(['account_id'], ['accounts.id'], ),
        sa.ForeignKeyConstraint(['token_id'], ['tokens.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_account_balances_account_id'), 'account_balances', ['account_id'], unique=False)
    op.create_index(op.f('ix_account_balances_token_id'), 'account_balances', ['token_id'], unique=False)
    op.create_index('ix_account_balances_account_token', 'account_balances',
                    ['account_address', 'token_address'], unique=True)
    _provenance_indexes('account_balances')

    op.create_table('account_balance_snapshots',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('balance_id', sa.String(length=255), nullable=False),
        sa.Column('account_address', CosmosAddressType(), nullable=False),
        sa.Column('token_address', CosmosAddressType(), nullable=False),
        sa.Column('amount', DecimalString(), nullable=False),
        sa.Column('delta', DecimalString(), nullable=False),
        sa.Column('transfer_id', sa.String(length=255), nullable=False),
        *_timestamps(),
        *_provenance(),
        sa.ForeignKeyConstraint(['balance_id'], ['account_balances.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    for column in ('balance_id', 'account_address', 'token_address', 'transfer_id'):
        op.create_index(op.f(f'ix_account_balance_snapshots_{column}'), 'account_balance_snapshots',
                        [column], unique=False)
    _provenance_indexes('account_balance_snapshots')

    for table_name in ('modules', 'module_snapshots'):
        op.create_table(table_name,
            sa.Column('id', sa.String(length=255), nullable=False),
            sa.Column('namespace', sa.String(length=128), nullable=False),
            sa.Column('name', sa.String(length=128), nullable=False),
            sa.Column('version', sa.String(length=64), nullable=False),
            sa.Column('type', sa.String(length=32), nullable=False),
            sa.Column('address', sa.String(length=128), nullable=True),
            sa.Column('sender', CosmosAddressType(), nullable=False),
            sa.Column('vc_address', CosmosAddressType(), nullable=False),
            *_timestamps(),
            *_provenance(),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f(f'ix_{table_name}_namespace'), table_name, ['namespace'], unique=False)
        op.create_index(op.f(f'ix_{table_name}_name'), table_name, ['name'], unique=False)
        _provenance_indexes(table_name)

    op.create_table('account_modules',
        sa.Column('id', sa.String(length=255), nullable=False),
        sa.Column('address', CosmosAddressType(), nullable=True),
        sa.Column('namespace', sa.String(length=128), nullable=False),
        sa.Column('name', sa.String(length=128), nullable=False),
        sa.Column('version', sa.String(length=64), nullable=False),
        sa.Column('manager', CosmosAddressType(), nullable=False),
        sa.Column('account', CosmosAddressType(), nullable=False),
        sa.Column('vc_address', CosmosAddressType(), nullable=True),
        sa.Column('sender', CosmosAddressType(), nullable=False),
        *_timestamps(),
        *_provenance(),
        sa.PrimaryKeyConstraint('id')
    )
    for column in ('address', 'manager', 'account'):
        op.create_index(op.f(f'ix_account_modules_{column}'), 'account_modules', [column], unique=False)
    _provenance_indexes('account_modules')

    op.create_table('assets',
        sa.Column('id', sa.String(length=255), nullable=False),
        sa.Column('sender', CosmosAddressType(), nullable=False),
        sa.Column('source', sa.String(length=128), nullable=True),
        sa.Column('name', sa.String(length=128), nullable=False),
        sa.Column('type', sa.String(length=32), nullable=False),
        sa.Column('address', sa.String(length=128), nullable=True),
        sa.Column('ans_host', CosmosAddressType(), nullable=False),
        *_timestamps(),
        *_provenance(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_assets_source'), 'assets', ['source'], unique=False)
    op.create_index(op.f('ix_assets_name'), 'assets', ['name'], unique=False)
    _provenance_indexes('assets')

    op.create_table('module_executions',
        sa.Column('id', sa.String(length=255), nullable=False),
        sa.Column('address', CosmosAddressType(), nullable=False),
        sa.Column('module_id', sa.String(length=255), nullable=False),
        *_timestamps(),
        *_provenance(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_module_executions_address'), 'module_executions', ['address'], unique=False)
    op.create_index(op.f('ix_module_executions_module_id'), 'module_executions', ['module_id'], unique=False)
    _provenance_indexes('module_executions')


def downgrade() -> None:
    for table_name in ('module_executions', 'assets', 'account_modules', 'module_snapshots', 'modules',
                       'account_balance_snapshots', 'account_balances', 'transfer_events',
                       'accounts', 'tokens'):
        op.drop_table(table_name)
