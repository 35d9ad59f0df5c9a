"""initial schema

Revision ID: 20261019_initial
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '20261019_initial'
down_revision = None
branch_labels = None
depends_on = None


def _common_columns():
    return [
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'farmers',
        *_common_columns(),
        sa.Column('cpf', sa.String(11), nullable=True, unique=True),
        sa.Column('cnpj', sa.String(14), nullable=True, unique=True),
        sa.Column('producer_name', sa.String(150), nullable=False),
        sa.Column('email', sa.String(150), nullable=False, unique=True),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(16), nullable=False),
        sa.Column('role', sa.String(20), nullable=False, server_default='farmer'),
    )
    op.create_index('ix_farmers_email', 'farmers', ['email'])

    op.create_table(
        'properties',
        *_common_columns(),
        sa.Column('farmer_id', sa.Uuid(), sa.ForeignKey('farmers.id'), nullable=False),
        sa.Column('farm_name', sa.String(150), nullable=False),
        sa.Column('city', sa.String(100), nullable=False),
        sa.Column('state', sa.String(2), nullable=False),
        sa.Column('total_area_ha', sa.Float(), nullable=False),
        sa.Column('arable_area_ha', sa.Float(), nullable=False),
        sa.Column('vegetable_area_ha', sa.Float(), nullable=False),
    )
    op.create_index('ix_properties_farmer_id', 'properties', ['farmer_id'])
    op.create_index('ix_properties_city', 'properties', ['city'])
    op.create_index('ix_properties_state', 'properties', ['state'])

    op.create_table(
        'crops',
        *_common_columns(),
        sa.Column('crop_name', sa.String(100), nullable=False),
    )
    op.create_index('ix_crops_crop_name_lower', 'crops', [sa.text('lower(crop_name)')], unique=True)

    op.create_table(
        'harvests',
        *_common_columns(),
        sa.Column('property_id', sa.Uuid(), sa.ForeignKey('properties.id'), nullable=True),
        sa.Column('harvest_year', sa.Integer(), nullable=False),
        sa.Column('harvest_name', sa.String(150), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('total_area_ha', sa.Float(), nullable=True),
    )
    op.create_index('ix_harvests_property_id', 'harvests', ['property_id'])
    op.create_index('ix_harvests_harvest_year', 'harvests', ['harvest_year'])

    op.create_table(
        'property_crop_harvests',
        *_common_columns(),
        sa.Column('property_id', sa.Uuid(), sa.ForeignKey('properties.id'), nullable=False),
        sa.Column('harvest_id', sa.Uuid(), sa.ForeignKey('harvests.id'), nullable=False),
        sa.Column('crop_id', sa.Uuid(), sa.ForeignKey('crops.id'), nullable=False),
        sa.Column('planted_area_ha', sa.Float(), nullable=False),
        sa.Column('planting_date', sa.Date(), nullable=False),
        sa.Column('harvest_date', sa.Date(), nullable=False),
    )
    op.create_index('ix_property_crop_harvests_property_id', 'property_crop_harvests', ['property_id'])
    op.create_index('ix_property_crop_harvests_harvest_id', 'property_crop_harvests', ['harvest_id'])
    op.create_index('ix_property_crop_harvests_crop_id', 'property_crop_harvests', ['crop_id'])


def downgrade() -> None:
    op.drop_table('property_crop_harvests')
    op.drop_table('harvests')
    op.drop_index('ix_crops_crop_name_lower', table_name='crops')
    op.drop_table('crops')
    op.drop_table('properties')
    op.drop_index('ix_farmers_email', table_name='farmers')
    op.drop_table('farmers')
