"""create catalog and measurement tables

Revision ID: 8b42e6c1d5a3
Revises: 3f1c9a7d2b10
Create Date: 2026-10-19 16:40:05.218774

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '8b42e6c1d5a3'
down_revision: Union[str, Sequence[str], None] = '3f1c9a7d2b10'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


BLOUSE_FIELDS = [
    "blouse_back_length", "full_shoulder", "shoulder_strap", "back_neck_depth",
    "front_neck_depth", "shoulder_to_apex", "front_length", "chest", "waist",
    "sleeve_length", "arm_round", "sleeve_round", "arm_hole",
]

LEHENGA_FIELDS = ["lehenga_waist", "lehenga_hip", "lehenga_length", "lehenga_width"]

SALWAR_FIELDS = [
    "bust", "waist", "hip", "kameez_length", "shoulder", "sleeve_length",
    "armhole_round", "wrist_round", "waist_tie", "salwar_length",
    "thigh_round", "knee_round", "ankle_round",
]


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def _garment_model_table(name, *extra):
    op.create_table(
        name,
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("design_name", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("image", sa.String(), nullable=True),
        sa.Column("images", sa.String(), nullable=True),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("discount", sa.Float(), nullable=True),
        sa.Column("final_price", sa.Float(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *extra,
        *_timestamps(),
    )
    op.create_index(f"ix_{name}_name", name, ["name"])


def _measurement_table(name, fields):
    op.create_table(
        name,
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("user_id", sa.String(), sa.ForeignKey("user.id"), nullable=False),
        sa.Column("custom_order_id", sa.String(), sa.ForeignKey("custom_order.id"), nullable=True),
        sa.Column("notes", sa.String(), nullable=True),
        sa.Column("measured_by", sa.String(), nullable=True),
        *[sa.Column(f, sa.Float(), nullable=True) for f in fields],
        *_timestamps(),
    )
    op.create_index(f"ix_{name}_user_id", name, ["user_id"])


def upgrade():
    op.create_table(
        "fabric",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("type", sa.String(), nullable=True),
        sa.Column("color", sa.String(), nullable=True),
        sa.Column("price_per_meter", sa.Float(), nullable=False),
        sa.Column("image", sa.String(), nullable=True),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_index("ix_fabric_name", "fabric", ["name"])

    op.create_table(
        "blouse_design",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("type", sa.String(), nullable=False, server_default="FRONT"),
        sa.Column("image", sa.String(), nullable=True),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("stitch_cost", sa.Float(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_index("ix_blouse_design_name", "blouse_design", ["name"])

    _garment_model_table(
        "blouse_model",
        sa.Column("stitch_cost", sa.Float(), nullable=False, server_default="0"),
    )
    _garment_model_table("lehenga_model")
    _garment_model_table("salwar_kameez_model")

    _measurement_table("blouse_measurement", BLOUSE_FIELDS)
    _measurement_table("lehenga_measurement", BLOUSE_FIELDS + LEHENGA_FIELDS)
    _measurement_table("salwar_measurement", SALWAR_FIELDS)


def downgrade():
    op.drop_table("salwar_measurement")
    op.drop_table("lehenga_measurement")
    op.drop_table("blouse_measurement")
    op.drop_table("salwar_kameez_model")
    op.drop_table("lehenga_model")
    op.drop_table("blouse_model")
    op.drop_table("blouse_design")
    op.drop_table("fabric")
