"""
TMDb 2.1 integration: payload hydration, homepage listings and the resource client.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from moviedb.integrations.tmdb.client import RequestsTransport, TmdbClient, Transport
    from moviedb.integrations.tmdb.errors import MalformedPayloadError, TmdbClientError, TmdbTransportError
    from moviedb.integrations.tmdb.hydration import Flavor, hydrate_movie, hydrate_movie_images, hydrate_person
    from moviedb.integrations.tmdb.listings import ListingSection, extract_ids

_EXPORTS = {
    "RequestsTransport": "client",
    "TmdbClient": "client",
    "Transport": "client",
    "MalformedPayloadError": "errors",
    "TmdbClientError": "errors",
    "TmdbTransportError": "errors",
    "Flavor": "hydration",
    "hydrate_movie": "hydration",
    "hydrate_movie_images": "hydration",
    "hydrate_person": "hydration",
    "ListingSection": "listings",
    "extract_ids": "listings",
}

__all__ = sorted(_EXPORTS)


def __getattr__(name: str):
    module_name = _EXPORTS.get(name)
    if module_name is not None:
        from importlib import import_module

        module = import_module(f"moviedb.integrations.tmdb.{module_name}")
        return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
