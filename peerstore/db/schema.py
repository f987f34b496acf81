"""Database schema DDL — ``peer`` and ``allow_relay_list`` per dialect."""

SQLITE_SCHEMA_DDL = """
-- ==========================================================================
-- Peer registry
-- ==========================================================================
CREATE TABLE IF NOT EXISTS peer (
    guid    BLOB PRIMARY KEY NOT NULL,
    id      TEXT NOT NULL,
    uuid    BLOB NOT NULL,
    pk      BLOB NOT NULL,
    user    BLOB,
    info    TEXT NOT NULL DEFAULT '',
    status  BIGINT,
    note    TEXT
);

CREATE INDEX IF NOT EXISTS idx_peer_id ON peer(id);

-- ==========================================================================
-- Relay allow-list
-- ==========================================================================
CREATE TABLE IF NOT EXISTS allow_relay_list (
    identifier  TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_allow_relay_list_identifier ON allow_relay_list(identifier);
"""

MYSQL_SCHEMA_DDL = """
CREATE TABLE IF NOT EXISTS peer (
    guid    VARBINARY(16) NOT NULL PRIMARY KEY,
    id      VARCHAR(100) NOT NULL,
    uuid    VARBINARY(16) NOT NULL,
    pk      VARBINARY(1024) NOT NULL,
    user    VARBINARY(16),
    info    TEXT NOT NULL,
    status  BIGINT,
    note    VARCHAR(300),
    INDEX idx_peer_id (id)
);

CREATE TABLE IF NOT EXISTS allow_relay_list (
    identifier  VARCHAR(100) NOT NULL,
    INDEX idx_allow_relay_list_identifier (identifier)
);
"""

SCHEMA_BY_DIALECT = {
    "sqlite": SQLITE_SCHEMA_DDL,
    "mysql": MYSQL_SCHEMA_DDL,
    "mariadb": MYSQL_SCHEMA_DDL,
}


def schema_statements(dialect: str) -> list[str]:
    """Split the DDL for ``dialect`` into single statements, comments dropped."""
    try:
        ddl = SCHEMA_BY_DIALECT[dialect]
    except KeyError:
        raise ValueError(f"No bundled schema for dialect: {dialect}") from None
    lines = [ln for ln in ddl.splitlines() if not ln.strip().startswith("--")]
    return [s.strip() for s in "\n".join(lines).split(";") if s.strip()]
