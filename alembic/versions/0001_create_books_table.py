"""create books table

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('books',
        sa.Column('isbn', sa.String(length=20), nullable=False, comment='International Standard Book Number'),
        sa.Column('amazon_url', sa.String(length=2048), nullable=False, comment='Link to the book on Amazon'),
        sa.Column('author', sa.String(length=255), nullable=False, comment='Author name'),
        sa.Column('language', sa.String(length=100), nullable=False, comment='Language the book is written in'),
        sa.Column('pages', sa.Integer(), nullable=False, comment='Number of pages in the book'),
        sa.Column('publisher', sa.String(length=255), nullable=False, comment='Publisher name'),
        sa.Column('title', sa.String(length=500), nullable=False, comment='Book title'),
        sa.Column('year', sa.Integer(), nullable=False, comment='Publication year'),
        sa.PrimaryKeyConstraint('isbn')
    )
    op.create_index(op.f('ix_books_title'), 'books', ['title'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_books_title'), table_name='books')
    op.drop_table('books')
