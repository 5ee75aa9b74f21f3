from alembic import op
import sqlalchemy as sa

revision = '0001_init'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table('sleep_records',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('date', sa.Date, nullable=False),
        sa.Column('hours_slept', sa.Float, nullable=False),
        sa.Column('quality', sa.String(16), nullable=False),
        sa.Column('woke_up_during_night', sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column('notes', sa.Text),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('idx_sleep_records_date', 'sleep_records', ['date'])

def downgrade():
    op.drop_index('idx_sleep_records_date', table_name='sleep_records')
    op.drop_table('sleep_records')
