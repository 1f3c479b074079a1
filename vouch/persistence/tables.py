"""SQLAlchemy table definitions.

Tables are created on startup with ``ensure_schema``; the column lists here
are the single source of truth for the schema.
"""

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# INVITES TABLE
# ============================================================================
invites_table = Table(
    "invites",
    metadata,
    Column("id", String(255), primary_key=True),
    Column("medium", String(50), nullable=False),  # 'email', 'msisdn'
    Column("address", String(512), nullable=False),  # Normalized address
    Column("room_id", String(255), nullable=False),
    Column("sender", String(255), nullable=False),
    Column("properties", JSON, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
)

Index("idx_invites_threepid", invites_table.c.medium, invites_table.c.address)

# ============================================================================
# VERIFICATION SESSIONS TABLE
# ============================================================================
sessions_table = Table(
    "verification_sessions",
    metadata,
    Column("id", String(255), primary_key=True),
    Column("medium", String(50), nullable=False),
    Column("address", String(512), nullable=False),
    Column("secret", String(255), nullable=False),
    Column("token", String(255), nullable=False),
    Column("state", String(20), nullable=False),  # 'pending', 'validated'
    Column("attempt", Integer, nullable=False),
    Column("send_count", Integer, nullable=False),
    Column("server", String(255), nullable=True),
    Column("next_link", Text, nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("last_sent_at", DateTime(timezone=True), nullable=True),
    Column("expires_at", DateTime(timezone=True), nullable=True),
    Column("validated_at", DateTime(timezone=True), nullable=True),
)

# Lookup path for validation. Not unique: duplicates must stay detectable
Index(
    "idx_sessions_threepid_secret",
    sessions_table.c.medium,
    sessions_table.c.address,
    sessions_table.c.secret,
)

# ============================================================================
# TRANSACTIONS TABLE (idempotency log)
# ============================================================================
transactions_table = Table(
    "transactions",
    metadata,
    Column("localpart", String(255), nullable=False),
    Column("transaction_id", String(255), nullable=False),
    Column("completed_at", DateTime(timezone=True), nullable=False),
    Column("result", Text, nullable=False),
    PrimaryKeyConstraint("localpart", "transaction_id", name="pk_transactions"),
)

ALL_TABLES = (invites_table, sessions_table, transactions_table)
