"""
Typed models for Unsplash API responses.

Each model's annotations are its wire schema: plain field types are
required, ``Soft[...]`` fields fall back to None when missing or malformed.
Models are frozen, so a decoded entity never changes after construction.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from unsplash.decode import decode
from unsplash.fields import Color, Flag, Integer, Number, Soft, Text, Timestamp, Url


class UnsplashModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def from_dict(cls, data: Any):
        """Decode an API payload, returning None when a required field is unusable."""
        return decode(cls, data)


class Position(UnsplashModel):
    latitude: Number
    longitude: Number


class Location(UnsplashModel):
    title: Soft[Text] = None
    name: Soft[Text] = None
    city: Soft[Text] = None
    country: Soft[Text] = None
    position: Soft[Position] = None


class Exif(UnsplashModel):
    make: Soft[Text] = None
    model: Soft[Text] = None
    exposure_time: Soft[Number] = None
    aperture: Soft[Number] = None
    focal_length: Soft[Integer] = None
    iso: Soft[Integer] = None


class ProfileImages(UnsplashModel):
    small: Soft[Url] = None
    medium: Soft[Url] = None
    large: Soft[Url] = None


class UserLinks(UnsplashModel):
    link: Url = Field(alias="self")
    html: Url
    photos: Url
    likes: Soft[Url] = None
    portfolio: Soft[Url] = None
    following: Soft[Url] = None
    followers: Soft[Url] = None


class User(UnsplashModel):
    id: Text
    username: Text
    name: Soft[Text] = None
    bio: Soft[Text] = None
    location: Soft[Text] = None
    portfolio_url: Soft[Url] = None
    total_likes: Soft[Integer] = None
    total_photos: Soft[Integer] = None
    total_collections: Soft[Integer] = None
    profile_image: Soft[ProfileImages] = None
    links: Soft[UserLinks] = None


class PhotoUrls(UnsplashModel):
    raw: Url
    full: Url
    regular: Url
    small: Url
    thumb: Url
    custom: Soft[Url] = None


class PhotoLinks(UnsplashModel):
    link: Url = Field(alias="self")
    html: Url
    download: Url


class Image(UnsplashModel):
    id: Text
    created_at: Timestamp
    width: Integer
    height: Integer
    color: Color
    downloads: Soft[Integer] = None
    likes: Soft[Integer] = None
    exif: Soft[Exif] = None
    location: Soft[Location] = None
    user: User
    urls: PhotoUrls
    links: PhotoLinks

    @property
    def is_abbreviated(self) -> bool:
        # list endpoints leave out exif and location
        return self.exif is None and self.location is None


class CoverPhoto(UnsplashModel):
    id: Text
    width: Integer
    height: Integer
    color: Color
    likes: Integer
    liked_by_user: Soft[Flag] = None
    user: User
    urls: PhotoUrls
    links: PhotoLinks


class CollectionLinks(UnsplashModel):
    link: Url = Field(alias="self")
    html: Url
    photos: Url
    # curated collections have no related link
    related: Soft[Url] = None


class Collection(UnsplashModel):
    id: Integer
    title: Text
    description: Soft[Text] = None
    published_at: Timestamp
    curated: Flag
    featured: Flag
    total_photos: Integer
    is_private: Flag = Field(alias="private")
    share_key: Soft[Text] = None
    cover_photo: Soft[CoverPhoto] = None
    user: User
    links: CollectionLinks


def decode_collection(data: Any) -> Optional[Collection]:
    return decode(Collection, data)


def decode_cover_photo(data: Any) -> Optional[CoverPhoto]:
    return decode(CoverPhoto, data)


def decode_image(data: Any) -> Optional[Image]:
    return decode(Image, data)


def decode_user(data: Any) -> Optional[User]:
    return decode(User, data)


def decode_location(data: Any) -> Optional[Location]:
    return decode(Location, data)


def decode_exif(data: Any) -> Optional[Exif]:
    return decode(Exif, data)


def decode_profile_images(data: Any) -> Optional[ProfileImages]:
    return decode(ProfileImages, data)


def decode_user_links(data: Any) -> Optional[UserLinks]:
    return decode(UserLinks, data)


def decode_photo_urls(data: Any) -> Optional[PhotoUrls]:
    return decode(PhotoUrls, data)


def decode_photo_links(data: Any) -> Optional[PhotoLinks]:
    return decode(PhotoLinks, data)


def decode_collection_links(data: Any) -> Optional[CollectionLinks]:
    return decode(CollectionLinks, data)
