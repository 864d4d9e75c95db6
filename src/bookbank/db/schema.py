# ABOUTME: SQL DDL statements for the BookBank inventory database schema.
# ABOUTME: Defines the registered-books table and the indexes reconciliation queries rely on.

SCHEMA_V1 = """
-- Books the user has registered
CREATE TABLE books (
    id             INTEGER PRIMARY KEY AUTOINCREMENT,
    title          TEXT NOT NULL,
    author         TEXT NOT NULL DEFAULT '',
    isbn           TEXT,
    publisher      TEXT,
    published_year INTEGER,
    price          INTEGER NOT NULL DEFAULT 0,
    thumbnail_url  TEXT,
    page_count     INTEGER,
    registered_at  TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

CREATE UNIQUE INDEX idx_books_isbn ON books(isbn) WHERE isbn IS NOT NULL;
CREATE INDEX idx_books_title_author ON books(title, author);

-- Schema versioning for future migrations
CREATE TABLE schema_version (
    version    INTEGER NOT NULL,
    applied_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

INSERT INTO schema_version (version) VALUES (1);
"""
