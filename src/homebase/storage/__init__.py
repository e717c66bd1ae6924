"""SQLite-backed key/value persistence (JSON values under string keys)."""
