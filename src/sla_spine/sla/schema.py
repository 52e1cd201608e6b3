"""
DDL for the ``sla_summary`` table.

Instants are stored as INTEGER epoch milliseconds so range filters compare
numbers, and unset durations as ``-1``.
"""

SLA_SUMMARY_TABLE = "sla_summary"

SLA_SUMMARY_DDL = (
    f"""
    CREATE TABLE IF NOT EXISTS {SLA_SUMMARY_TABLE} (
        job_id            TEXT PRIMARY KEY,
        parent_id         TEXT,
        app_name          TEXT NOT NULL DEFAULT '',
        app_type          TEXT NOT NULL,
        user_name         TEXT NOT NULL DEFAULT '',
        created_time      INTEGER,
        nominal_time      INTEGER NOT NULL,
        expected_start    INTEGER,
        expected_end      INTEGER,
        expected_duration INTEGER NOT NULL DEFAULT -1,
        actual_start      INTEGER,
        actual_end        INTEGER,
        actual_duration   INTEGER NOT NULL DEFAULT -1,
        job_status        TEXT,
        sla_status        TEXT,
        event_processed   INTEGER NOT NULL DEFAULT 0,
        last_modified     INTEGER
    )
    """,
    f"CREATE INDEX IF NOT EXISTS idx_sla_summary_parent_id ON {SLA_SUMMARY_TABLE} (parent_id)",
    f"CREATE INDEX IF NOT EXISTS idx_sla_summary_app_name ON {SLA_SUMMARY_TABLE} (app_name)",
    f"CREATE INDEX IF NOT EXISTS idx_sla_summary_nominal_time ON {SLA_SUMMARY_TABLE} (nominal_time)",
    f"CREATE INDEX IF NOT EXISTS idx_sla_summary_last_modified ON {SLA_SUMMARY_TABLE} (last_modified)",
)

TABLES = (SLA_SUMMARY_TABLE,)
