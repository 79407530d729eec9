"""create core tables

Revision ID: 0001
Revises:
Create Date: 2026-01-01 00:00:00
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
            comment="创建时间 (UTC)",
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
            comment="更新时间 (UTC)",
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False, comment="主键 (UUID v7)"),
        sa.Column("email", sa.String(255), nullable=False, comment="邮箱 (登录凭证)"),
        sa.Column("username", sa.String(45), nullable=False, comment="用户名"),
        sa.Column("password", sa.String(255), nullable=False, comment="密码哈希值"),
        sa.Column("nickname", sa.String(45), nullable=False, comment="昵称"),
        sa.Column(
            "sex", sa.SmallInteger(), server_default=sa.text("2"), nullable=False, comment="性别"
        ),
        sa.Column("company", sa.String(255), nullable=True, comment="公司"),
        sa.Column("introduce", sa.Text(), nullable=True, comment="个人介绍"),
        sa.Column(
            "role", sa.SmallInteger(), server_default=sa.text("0"), nullable=False, comment="用户组"
        ),
        sa.Column("avatar", sa.String(255), nullable=True, comment="头像URL"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )
    op.create_index("ix_users_users_role", "users", ["role"])

    op.create_table(
        "articles",
        sa.Column("id", sa.Uuid(), nullable=False, comment="主键 (UUID v7)"),
        sa.Column("title", sa.String(45), nullable=False, comment="标题"),
        sa.Column("content", sa.Text(), nullable=False, comment="正文"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_articles"),
    )

    op.create_table(
        "categories",
        sa.Column("id", sa.Uuid(), nullable=False, comment="主键 (UUID v7)"),
        sa.Column("name", sa.String(45), nullable=False, comment="分类名称"),
        sa.Column(
            "rank", sa.Integer(), server_default=sa.text("1"), nullable=False, comment="排序 (升序)"
        ),
        *_timestamps(),
        sa.CheckConstraint("rank > 0", name="ck_categories_rank_positive"),
        sa.PrimaryKeyConstraint("id", name="pk_categories"),
        sa.UniqueConstraint("name", name="uq_categories_name"),
    )

    op.create_table(
        "courses",
        sa.Column("id", sa.Uuid(), nullable=False, comment="主键 (UUID v7)"),
        sa.Column("category_id", sa.Uuid(), nullable=False, comment="分类ID"),
        sa.Column("user_id", sa.Uuid(), nullable=False, comment="讲师用户ID"),
        sa.Column("name", sa.String(45), nullable=False, comment="课程名称"),
        sa.Column("image", sa.String(255), nullable=True, comment="封面图片URL"),
        sa.Column(
            "recommended",
            sa.Boolean(),
            server_default=sa.text("false"),
            nullable=False,
            comment="是否推荐",
        ),
        sa.Column(
            "introductory",
            sa.Boolean(),
            server_default=sa.text("false"),
            nullable=False,
            comment="是否入门课程",
        ),
        sa.Column("content", sa.Text(), nullable=True, comment="课程介绍"),
        sa.Column(
            "likes_count", sa.Integer(), server_default=sa.text("0"), nullable=False, comment="点赞数"
        ),
        sa.Column(
            "chapters_count",
            sa.Integer(),
            server_default=sa.text("0"),
            nullable=False,
            comment="章节数",
        ),
        *_timestamps(),
        sa.CheckConstraint("likes_count >= 0", name="ck_courses_likes_count_non_negative"),
        sa.CheckConstraint(
            "chapters_count >= 0", name="ck_courses_chapters_count_non_negative"
        ),
        sa.ForeignKeyConstraint(
            ["category_id"],
            ["categories.id"],
            name="fk_courses_category_id_categories",
            ondelete="RESTRICT",
        ),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["users.id"],
            name="fk_courses_user_id_users",
            ondelete="RESTRICT",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_courses"),
    )
    op.create_index("ix_courses_courses_category_id", "courses", ["category_id"])
    op.create_index("ix_courses_courses_user_id", "courses", ["user_id"])

    op.create_table(
        "settings",
        sa.Column("id", sa.Uuid(), nullable=False, comment="主键 (UUID v7)"),
        sa.Column("name", sa.String(255), nullable=False, comment="站点名称"),
        sa.Column("icp", sa.String(255), nullable=True, comment="ICP备案号"),
        sa.Column("copyright", sa.String(255), nullable=True, comment="版权信息"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_settings"),
    )


def downgrade() -> None:
    op.drop_table("settings")
    op.drop_index("ix_courses_courses_user_id", table_name="courses")
    op.drop_index("ix_courses_courses_category_id", table_name="courses")
    op.drop_table("courses")
    op.drop_table("categories")
    op.drop_table("articles")
    op.drop_index("ix_users_users_role", table_name="users")
    op.drop_table("users")
