"""SQLAlchemy table definitions - dialect-agnostic (works with SQLite and PostgreSQL)."""

from sqlalchemy import BigInteger, Boolean, Column, Index, MetaData, String, Table, Text

# Metadata object for all tables
metadata = MetaData()


# ============================================================================
# RECORDS TABLE (append-only, partitioned by display_name)
# ============================================================================
# Optional columns are NULL when the attribute is absent from the sparse item.
records_table = Table(
    "records",
    metadata,
    Column("display_name", String, primary_key=True),
    Column("created_at", BigInteger, primary_key=True),
    Column("blob_key", String, nullable=False),
    Column("visible_after", BigInteger, nullable=False),
    Column("has_verified_link", Boolean, nullable=True),
    Column("is_verified_user", Boolean, nullable=True),
    Column("verification_link", Text, nullable=True),
)

Index(
    "idx_records_has_verified_link",
    records_table.c.display_name,
    records_table.c.has_verified_link,
)
