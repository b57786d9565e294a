"""
Domain entities produced by the TMDb hydrator.
"""

from moviedb.models.images import (
    BackdropSize,
    ImageRegistry,
    ImageVariant,
    MovieBackdrop,
    MovieImages,
    MoviePoster,
    PersonProfile,
    PosterSize,
    ProfileSize,
)
from moviedb.models.movies import CastEntry, Genre, Movie
from moviedb.models.people import FilmographyEntry, Person

__all__ = [
    "BackdropSize",
    "CastEntry",
    "FilmographyEntry",
    "Genre",
    "ImageRegistry",
    "ImageVariant",
    "Movie",
    "MovieBackdrop",
    "MovieImages",
    "MoviePoster",
    "Person",
    "PersonProfile",
    "PosterSize",
    "ProfileSize",
]
