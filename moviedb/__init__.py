"""
Client-side data layer for the TMDb 2.1 movie-database service.

The package turns raw service payloads (JSON, and HTML for the homepage
listings) into typed domain entities:

- `moviedb.models` holds the entities and the image variant registry
- `moviedb.integrations.tmdb` holds hydration, payload parsing, the listing
  scraper and the HTTP resource client

CLI entrypoints live in `scripts/` and import from `moviedb` rather than the
other way around.
"""
