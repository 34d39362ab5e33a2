"""Initial schema — game_results, all_answers, incorrect_answers.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "game_results",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("total_questions", sa.Integer, nullable=False),
        sa.Column("correct_answers", sa.Integer, nullable=False),
        sa.Column("wrong_answers", sa.Integer, nullable=False),
        sa.Column("score_percentage", sa.Float, nullable=False),
        sa.Column("game_date", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "all_answers",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("game_id", sa.Integer, sa.ForeignKey("game_results.id"), nullable=True),
        sa.Column("country", sa.String(100), nullable=False),
        sa.Column("user_answer", sa.String(100), nullable=False),
        sa.Column("correct_answer", sa.String(100), nullable=False),
        sa.Column("is_correct", sa.Boolean, nullable=False),
        sa.Column("question_number", sa.Integer, nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_all_answers_game_id", "all_answers", ["game_id"])

    op.create_table(
        "incorrect_answers",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("country", sa.String(100), nullable=False),
        sa.Column("user_answer", sa.String(100), nullable=False),
        sa.Column("correct_answer", sa.String(100), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("incorrect_answers")
    op.drop_index("ix_all_answers_game_id", table_name="all_answers")
    op.drop_table("all_answers")
    op.drop_table("game_results")
