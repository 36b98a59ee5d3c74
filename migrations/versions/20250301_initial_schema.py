"""user settings, interns e certificate verifications

Revision ID: 20250301_initial
Revises:
Create Date: 2025-03-01
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20250301_initial"
down_revision = None
branch_labels = None
depends_on = None

template_enum = sa.Enum("classic", "modern", "elegant", name="certificatetemplate")
status_enum = sa.Enum("active", "completed", name="internstatus")

def upgrade():
    op.create_table(
        "user_settings",
        sa.Column("account_id", sa.String(128), nullable=False),
        sa.Column("company_name", sa.String(200), nullable=True),
        sa.Column("company_logo", sa.Text(), nullable=True),
        sa.Column("supervisor_name", sa.String(160), nullable=True),
        sa.Column("supervisor_signature", sa.Text(), nullable=True),
        sa.Column("ceo_name", sa.String(160), nullable=True),
        sa.Column("ceo_signature", sa.Text(), nullable=True),
        sa.Column("selected_template", template_enum, nullable=False),
        sa.Column("setup_completed", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("account_id", name=op.f("pk_user_settings")),
    )

    op.create_table(
        "interns",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("full_name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(200), nullable=True),
        sa.Column("domain", sa.String(120), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("certificate_id", sa.String(64), nullable=False),
        sa.Column("created_by", sa.String(128), nullable=False),
        sa.Column("status", status_enum, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_interns")),
    )
    op.create_index(op.f("ix_interns_certificate_id"), "interns", ["certificate_id"], unique=True)
    op.create_index(op.f("ix_interns_created_by"), "interns", ["created_by"])
    op.create_index(op.f("ix_interns_domain"), "interns", ["domain"])

    op.create_table(
        "certificate_verifications",
        sa.Column("certificate_id", sa.String(64), nullable=False),
        sa.Column("intern_id", sa.String(36), nullable=False),
        sa.Column("verification_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("last_verified", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["intern_id"], ["interns.id"],
                                name=op.f("fk_certificate_verifications_intern_id_interns")),
        sa.PrimaryKeyConstraint("certificate_id", name=op.f("pk_certificate_verifications")),
    )
    op.create_index(op.f("ix_certificate_verifications_intern_id"), "certificate_verifications", ["intern_id"])

def downgrade():
    op.drop_index(op.f("ix_certificate_verifications_intern_id"), table_name="certificate_verifications")
    op.drop_table("certificate_verifications")
    op.drop_index(op.f("ix_interns_domain"), table_name="interns")
    op.drop_index(op.f("ix_interns_created_by"), table_name="interns")
    op.drop_index(op.f("ix_interns_certificate_id"), table_name="interns")
    op.drop_table("interns")
    op.drop_table("user_settings")
    status_enum.drop(op.get_bind(), checkfirst=True)
    template_enum.drop(op.get_bind(), checkfirst=True)
