"""Database schema bootstrap."""

import logging

from portfolio_cms.adapters.sql_client import SqlClient, SqlConnection

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS users (
  id SERIAL PRIMARY KEY,
  username VARCHAR(50) NOT NULL UNIQUE,
  email VARCHAR(255) NOT NULL UNIQUE,
  password VARCHAR(255) NOT NULL,
  role VARCHAR(20) NOT NULL DEFAULT 'user' CHECK (role IN ('admin', 'user')),
  created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
  updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
);

CREATE TABLE IF NOT EXISTS categories (
  id SERIAL PRIMARY KEY,
  name VARCHAR(100) NOT NULL UNIQUE,
  description TEXT NOT NULL DEFAULT '',
  created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
  updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
);

CREATE TABLE IF NOT EXISTS tags (
  id SERIAL PRIMARY KEY,
  name VARCHAR(50) NOT NULL UNIQUE,
  created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
);

CREATE TABLE IF NOT EXISTS photos (
  id SERIAL PRIMARY KEY,
  title VARCHAR(255) NOT NULL,
  description TEXT,
  category_id INTEGER NOT NULL REFERENCES categories(id) ON DELETE RESTRICT,
  file_url VARCHAR(1024) NOT NULL,
  thumbnail_url VARCHAR(1024) NOT NULL,
  width INTEGER NOT NULL DEFAULT 1200,
  height INTEGER NOT NULL DEFAULT 800,
  upload_date TIMESTAMPTZ NOT NULL DEFAULT NOW(),
  created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
  updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
);

CREATE TABLE IF NOT EXISTS photo_tags (
  photo_id INTEGER NOT NULL REFERENCES photos(id) ON DELETE CASCADE,
  tag_id INTEGER NOT NULL REFERENCES tags(id) ON DELETE CASCADE,
  PRIMARY KEY (photo_id, tag_id)
);

CREATE TABLE IF NOT EXISTS articles (
  id SERIAL PRIMARY KEY,
  title VARCHAR(255) NOT NULL,
  slug VARCHAR(255) NOT NULL UNIQUE,
  content TEXT NOT NULL,
  summary TEXT NOT NULL DEFAULT '',
  featured_image VARCHAR(1024),
  author_id INTEGER REFERENCES users(id) ON DELETE SET NULL,
  category_id INTEGER REFERENCES categories(id) ON DELETE SET NULL,
  published BOOLEAN NOT NULL DEFAULT FALSE,
  published_at TIMESTAMPTZ,
  created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
  updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
);

CREATE TABLE IF NOT EXISTS article_tags (
  article_id INTEGER NOT NULL REFERENCES articles(id) ON DELETE CASCADE,
  tag_id INTEGER NOT NULL REFERENCES tags(id) ON DELETE CASCADE,
  PRIMARY KEY (article_id, tag_id)
);

CREATE TABLE IF NOT EXISTS site_settings (
  id INTEGER PRIMARY KEY CHECK (id = 1),
  site_name VARCHAR(100) NOT NULL,
  site_description TEXT NOT NULL DEFAULT '',
  contact_email VARCHAR(255) NOT NULL DEFAULT '',
  logo_url VARCHAR(1024) NOT NULL DEFAULT '',
  primary_color VARCHAR(20) NOT NULL DEFAULT '#000000',
  secondary_color VARCHAR(20) NOT NULL DEFAULT '#ffffff',
  social_media JSONB NOT NULL DEFAULT '{}',
  meta_tags JSONB NOT NULL DEFAULT '{}',
  created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
  updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
);

CREATE INDEX IF NOT EXISTS idx_photos_category ON photos(category_id);

CREATE INDEX IF NOT EXISTS idx_photos_title ON photos(title);

CREATE INDEX IF NOT EXISTS idx_articles_published ON articles(published, published_at)
"""

DEFAULT_CATEGORIES = (
    ("Concerts", "Concert and music event photography"),
    ("Sports", "Sports and athletic event photography"),
    ("Street", "Urban and street photography"),
    ("Nature", "Landscape and wildlife photography"),
    ("Automotive", "Car and automotive photography"),
)


def schema_statements() -> list[str]:
    """Split the schema into individual statements."""
    return [stmt.strip() for stmt in SCHEMA_SQL.split(";") if stmt.strip()]


def apply_schema(client: SqlClient) -> None:
    """Create missing tables and seed default categories in one transaction."""

    def _apply(conn: SqlConnection) -> None:
        for statement in schema_statements():
            conn.execute(statement)
        for name, description in DEFAULT_CATEGORIES:
            conn.execute(
                "INSERT INTO categories (name, description) VALUES (%s, %s) "
                "ON CONFLICT (name) DO NOTHING",
                (name, description),
            )

    client.transaction(_apply)
    logger.info("Database schema is up to date")
