"""create_repasse_tables

Revision ID: c4e1a7d2b9f3
Revises:
Create Date: 2026-10-18 10:00:00.000000

Tabelas iniciais do CRM: properties, clients e matches.
O dono de cada registro é o "sub" do token do provedor de auth (sem tabela local de usuários).
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB, UUID


# revision identifiers, used by Alembic.
revision: str = 'c4e1a7d2b9f3'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # properties — imóveis de repasse
    op.create_table(
        'properties',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('user_id', UUID(as_uuid=True), nullable=False),
        sa.Column('type', sa.String(20), nullable=False),
        sa.Column('street', sa.String(255), nullable=False),
        sa.Column('neighborhood', sa.String(255), nullable=True),
        sa.Column('city', sa.String(100), nullable=False, server_default='Curitiba'),
        sa.Column('state', sa.String(2), nullable=False, server_default='PR'),
        sa.Column('region', sa.String(100), nullable=False),
        sa.Column('transfer_value', sa.Numeric(14, 2), nullable=False),
        sa.Column('monthly_payment', sa.Numeric(14, 2), nullable=True),
        sa.Column('outstanding_balance', sa.Numeric(14, 2), nullable=True),
        sa.Column('bank_constructor', sa.String(100), nullable=True),
        sa.Column('owner_name', sa.String(255), nullable=True),
        sa.Column('owner_phone', sa.String(30), nullable=True),
        sa.Column('status', sa.String(20), nullable=False, server_default='disponivel'),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('photos', JSONB(), nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column('videos', JSONB(), nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint(
            "type IN ('apartamento', 'casa', 'garden', 'sobrado', 'sitio')",
            name='ck_properties_type',
        ),
        sa.CheckConstraint(
            "status IN ('disponivel', 'negociacao', 'vendido')",
            name='ck_properties_status',
        ),
    )
    op.create_index('ix_properties_user_id', 'properties', ['user_id'])
    op.create_index('ix_properties_user_created', 'properties', ['user_id', 'created_at'])

    # clients — compradores e vendedores
    op.create_table(
        'clients',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('user_id', UUID(as_uuid=True), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(30), nullable=False),
        sa.Column('type', sa.String(30), nullable=False),
        sa.Column('max_purchase_value', sa.Numeric(14, 2), nullable=True),
        sa.Column('desired_property_types', JSONB(), nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column('regions_of_interest', JSONB(), nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column('has_property_for_transfer', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('status', sa.String(20), nullable=False, server_default='ativo'),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint(
            "type IN ('comprador', 'vendedor', 'comprador_vendedor')",
            name='ck_clients_type',
        ),
        sa.CheckConstraint(
            "status IN ('ativo', 'negociacao', 'fechado')",
            name='ck_clients_status',
        ),
    )
    op.create_index('ix_clients_user_id', 'clients', ['user_id'])

    # matches — pares cliente × imóvel com score externo
    op.create_table(
        'matches',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('client_id', UUID(as_uuid=True), sa.ForeignKey('clients.id', ondelete='CASCADE'), nullable=False),
        sa.Column('property_id', UUID(as_uuid=True), sa.ForeignKey('properties.id', ondelete='CASCADE'), nullable=False),
        sa.Column('match_score', sa.Integer(), nullable=False),
        sa.Column('is_viewed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('status', sa.String(20), nullable=False, server_default='pending'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('client_id', 'property_id', name='uq_matches_client_property'),
        sa.CheckConstraint('match_score BETWEEN 0 AND 100', name='ck_matches_score'),
        sa.CheckConstraint("status IN ('pending', 'negotiating')", name='ck_matches_status'),
    )
    op.create_index('ix_matches_client_id', 'matches', ['client_id'])
    op.create_index('ix_matches_property_id', 'matches', ['property_id'])


def downgrade() -> None:
    op.drop_index('ix_matches_property_id', table_name='matches')
    op.drop_index('ix_matches_client_id', table_name='matches')
    op.drop_table('matches')
    op.drop_index('ix_clients_user_id', table_name='clients')
    op.drop_table('clients')
    op.drop_index('ix_properties_user_created', table_name='properties')
    op.drop_index('ix_properties_user_id', table_name='properties')
    op.drop_table('properties')
