"""
Image variants and the registry that merges them by image-group id.

The service returns one JSON record per (image, size) pair. Records sharing an
image-group id describe the same picture and are merged into one variant.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Generic, Iterator, TypeVar


class _SizeEnum(str, Enum):
    @classmethod
    def from_tag(cls, tag: str | None):
        normalized = (tag or "").strip().casefold()
        for member in cls:
            if member.value == normalized:
                return member
        return cls("original")


class ProfileSize(_SizeEnum):
    THUMB = "thumb"
    PROFILE = "profile"
    ORIGINAL = "original"


class PosterSize(_SizeEnum):
    THUMB = "thumb"
    MID = "mid"
    COVER = "cover"
    ORIGINAL = "original"


class BackdropSize(_SizeEnum):
    THUMB = "thumb"
    POSTER = "poster"
    ORIGINAL = "original"


@dataclass
class ImageVariant:
    image_id: str
    images: dict = field(default_factory=dict)

    size_enum: ClassVar[type[_SizeEnum]] = ProfileSize

    def set_image(self, size: _SizeEnum | str, url: str | None) -> None:
        if not isinstance(size, self.size_enum):
            size = self.size_enum.from_tag(size)
        self.images[size] = url

    def get_image(self, size: _SizeEnum | str) -> str | None:
        if not isinstance(size, self.size_enum):
            size = self.size_enum.from_tag(size)
        return self.images.get(size)

    @property
    def sizes(self) -> list[_SizeEnum]:
        return list(self.images)


@dataclass
class PersonProfile(ImageVariant):
    size_enum: ClassVar[type[_SizeEnum]] = ProfileSize


@dataclass
class MoviePoster(ImageVariant):
    size_enum: ClassVar[type[_SizeEnum]] = PosterSize


@dataclass
class MovieBackdrop(ImageVariant):
    size_enum: ClassVar[type[_SizeEnum]] = BackdropSize


V = TypeVar("V", bound=ImageVariant)


class ImageRegistry(Generic[V]):
    """Insertion-ordered variants keyed by image-group id."""

    def __init__(self, variant_type: type[V]) -> None:
        self._variant_type = variant_type
        self._variants: dict[str, V] = {}

    def merge(self, image_id: str, size: _SizeEnum | str, url: str | None) -> V:
        variant = self._variants.get(image_id)
        if variant is None:
            variant = self._variant_type(image_id)
            self._variants[image_id] = variant
        variant.set_image(size, url)
        return variant

    def get(self, image_id: str) -> V | None:
        return self._variants.get(image_id)

    def first(self) -> V | None:
        return next(iter(self._variants.values()), None)

    def ids(self) -> list[str]:
        return list(self._variants)

    def __iter__(self) -> Iterator[V]:
        return iter(self._variants.values())

    def __len__(self) -> int:
        return len(self._variants)

    def __contains__(self, image_id: object) -> bool:
        return image_id in self._variants

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImageRegistry):
            return NotImplemented
        return self._variant_type is other._variant_type and self._variants == other._variants

    def __repr__(self) -> str:
        return f"ImageRegistry({self._variant_type.__name__}, ids={self.ids()!r})"


@dataclass
class MovieImages:
    posters: ImageRegistry[MoviePoster] = field(default_factory=lambda: ImageRegistry(MoviePoster))
    backdrops: ImageRegistry[MovieBackdrop] = field(default_factory=lambda: ImageRegistry(MovieBackdrop))
