"""Initial migration: create images, planets and astronauts

Revision ID: initial
Revises: 
Create Date: 2024-01-01 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'initial'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Create images table
    op.create_table(
        'images',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('path', sa.String(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    # Create planets table
    op.create_table(
        'planets',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=False),
        sa.Column('isHabitable', sa.Boolean(), nullable=False),
        sa.Column('imageId', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['imageId'], ['images.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_planets_imageId'), 'planets', ['imageId'], unique=False)

    # Create astronauts table
    op.create_table(
        'astronauts',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('firstname', sa.String(), nullable=False),
        sa.Column('lastname', sa.String(), nullable=False),
        sa.Column('originPlanetId', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['originPlanetId'], ['planets.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_astronauts_originPlanetId'), 'astronauts', ['originPlanetId'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_astronauts_originPlanetId'), table_name='astronauts')
    op.drop_table('astronauts')
    op.drop_index(op.f('ix_planets_imageId'), table_name='planets')
    op.drop_table('planets')
    op.drop_table('images')
