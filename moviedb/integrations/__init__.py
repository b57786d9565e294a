"""
External service integrations.

The TMDb 2.1 client lives under `moviedb.integrations.tmdb`.
"""
