#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import Any

from moviedb.config import TmdbSettings
from moviedb.integrations.tmdb.client import TmdbClient
from moviedb.integrations.tmdb.errors import TmdbClientError
from moviedb.models.images import MovieImages
from moviedb.models.movies import Movie
from moviedb.models.people import Person


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tmdb_lookup",
        description="Query the TMDb 2.1 API and the homepage listings.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")
    parser.add_argument("--language", default=None, help="Response language code (default: TMDB_LANGUAGE or 'en').")

    sub = parser.add_subparsers(dest="command", required=True)

    search_movies = sub.add_parser("search-movies", help="Search movies by title.")
    search_movies.add_argument("query")
    search_movies.add_argument("--deep", action="store_true", help="Fetch full info for every result.")

    movie = sub.add_parser("movie", help="Full info for one movie id.")
    movie.add_argument("tmdb_id", type=int)

    movie_images = sub.add_parser("movie-images", help="Posters and backdrops for one movie id.")
    movie_images.add_argument("tmdb_id", type=int)

    search_people = sub.add_parser("search-people", help="Search people by name.")
    search_people.add_argument("query")
    search_people.add_argument("--deep", action="store_true", help="Fetch full info for every result.")

    person = sub.add_parser("person", help="Full info for one person id.")
    person.add_argument("tmdb_id", type=int)

    for name in ("box-office", "most-popular"):
        listing = sub.add_parser(name, help=f"Movies in the homepage {name.replace('-', ' ')} list.")
        listing.add_argument("--ids-only", action="store_true", help="Only print the scraped movie ids.")

    return parser.parse_args(argv)


def _format_movie(movie: Movie | None) -> str:
    if movie is None:
        return "(not found)"
    year = movie.released.year if movie.released else "????"
    flavor = "reduced" if movie.reduced else "full"
    line = f"{movie.tmdb_id} | {movie.name or ''} ({year}) | rating={movie.rating} | {flavor}"
    if not movie.reduced:
        genres = ", ".join(g.name for g in movie.genres)
        line += f" | runtime={movie.runtime} | genres={genres} | cast={len(movie.cast)}"
    if movie.defaulted_fields:
        line += f" | defaulted={','.join(movie.defaulted_fields)}"
    return line


def _format_person(person: Person | None) -> str:
    if person is None:
        return "(not found)"
    flavor = "reduced" if person.reduced else "full"
    line = f"{person.tmdb_id} | {person.name or ''} | popularity={person.popularity} | {flavor}"
    if not person.reduced:
        born = person.birthday.isoformat() if person.birthday else ""
        line += f" | born={born} | known_movies={person.known_movies} | films={len(person.filmography)}"
    return line


def _format_images(images: MovieImages | None) -> list[str]:
    if images is None:
        return ["(not found)"]
    lines: list[str] = []
    for kind, registry in (("poster", images.posters), ("backdrop", images.backdrops)):
        for variant in registry:
            sizes = ", ".join(f"{size.value}={url or ''}" for size, url in variant.images.items())
            lines.append(f"{kind} {variant.image_id} | {sizes}")
    return lines


def _run(client: TmdbClient, args: argparse.Namespace) -> list[str] | None:
    command = args.command
    results: Any

    if command == "search-movies":
        results = client.deep_search_movies(args.query) if args.deep else client.search_movies(args.query)
        return None if results is None else [_format_movie(m) for m in results]
    if command == "movie":
        return [_format_movie(client.get_movie_info(args.tmdb_id))]
    if command == "movie-images":
        return _format_images(client.get_movie_images(args.tmdb_id))
    if command == "search-people":
        results = client.deep_search_people(args.query) if args.deep else client.search_people(args.query)
        return None if results is None else [_format_person(p) for p in results]
    if command == "person":
        return [_format_person(client.get_person_info(args.tmdb_id))]
    if command in ("box-office", "most-popular"):
        if args.ids_only:
            ids = client.box_office_ids() if command == "box-office" else client.most_popular_ids()
            return [str(i) for i in ids]
        results = client.box_office() if command == "box-office" else client.most_popular()
        return None if results is None else [_format_movie(m) for m in results]

    raise ValueError(f"Unknown command: {command}")


def main(argv: list[str] | None = None, *, client: TmdbClient | None = None) -> int:
    args = _parse_args(argv if argv is not None else sys.argv[1:])
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if client is None:
        settings = TmdbSettings.from_env()
        if args.language:
            settings = replace(settings, language=args.language)
        client = TmdbClient(settings)

    try:
        lines = _run(client, args)
    except TmdbClientError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if lines is None:
        print("ERROR: TMDB_API_KEY is not set (or the query was empty).", file=sys.stderr)
        return 2

    for line in lines:
        print(line)
    if not lines:
        print("No results.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
