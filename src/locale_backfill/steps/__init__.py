"""Steps canônicos do pipeline de backfill de locales."""
