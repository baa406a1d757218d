"""EXIF tag storage and the human-readable lookups built on it."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

EXIF_MAX_DATA = 1024
EXIF_STD_BUF_LEN = 128
NULL_NAME = "(null)"

TAG_IMAGE_DESCRIPTION = 0x010E
TAG_MAKE = 0x010F
TAG_MODEL = 0x0110
TAG_EXPOSURE_TIME = 0x829A
TAG_FNUMBER = 0x829D
TAG_EXPOSURE_PROGRAM = 0x8822
TAG_ISO_SPEED_RATINGS = 0x8827
TAG_DATE_TIME_ORIGINAL = 0x9003
TAG_FLASH = 0x9209
TAG_FOCAL_LENGTH = 0x920A
TAG_EXPOSURE_MODE = 0xA402
TAG_FOCAL_LENGTH_IN_35MM_FILM = 0xA405
TAG_LENS_MODEL = 0xA434

TAG_GPS_LATITUDE_REF = 0x0001
TAG_GPS_LATITUDE = 0x0002
TAG_GPS_LONGITUDE_REF = 0x0003
TAG_GPS_LONGITUDE = 0x0004
TAG_GPS_MAP_DATUM = 0x0012

_STANDARD_TAG_NAMES = {
    TAG_IMAGE_DESCRIPTION: "ImageDescription",
    TAG_MAKE: "Make",
    TAG_MODEL: "Model",
    TAG_EXPOSURE_TIME: "ExposureTime",
    TAG_FNUMBER: "FNumber",
    TAG_EXPOSURE_PROGRAM: "ExposureProgram",
    TAG_ISO_SPEED_RATINGS: "ISOSpeedRatings",
    TAG_DATE_TIME_ORIGINAL: "DateTimeOriginal",
    TAG_FLASH: "Flash",
    TAG_FOCAL_LENGTH: "FocalLength",
    TAG_EXPOSURE_MODE: "ExposureMode",
    TAG_FOCAL_LENGTH_IN_35MM_FILM: "FocalLengthIn35mmFilm",
    TAG_LENS_MODEL: "LensModel",
}

_GPS_TAG_NAMES = {
    TAG_GPS_LATITUDE_REF: "GPSLatitudeRef",
    TAG_GPS_LATITUDE: "GPSLatitude",
    TAG_GPS_LONGITUDE_REF: "GPSLongitudeRef",
    TAG_GPS_LONGITUDE: "GPSLongitude",
    TAG_GPS_MAP_DATUM: "GPSMapDatum",
}


class Ifd(enum.IntEnum):
    """The image file directories an EXIF tag can live in."""

    IFD_0 = 0
    IFD_1 = 1
    EXIF = 2
    GPS = 3
    INTEROPERABILITY = 4


@dataclass(frozen=True)
class MakerNote:
    """One vendor-specific maker note entry.

    A value of None means the entry's value could not be read.
    """

    id: int
    value: str | None
    name: str | None = None
    title: str | None = None


def trim_spaces(text: str) -> str:
    """Remove the spaces at the right end of *text*."""
    return text.rstrip(" ")


def _limit(value: str) -> str:
    return value[: EXIF_MAX_DATA - 1]


class ExifData:
    """Readable EXIF values keyed by directory and tag, plus maker notes."""

    def __init__(
        self,
        entries: Mapping[tuple[int, int], str],
        makernotes: Iterable[MakerNote] = (),
        tag_names: Mapping[int, str] | None = None,
    ) -> None:
        self.entries = {(Ifd(ifd), tag): value for (ifd, tag), value in entries.items()}
        self.makernotes = list(makernotes)
        self.tag_names = dict(tag_names or {})

    def tag_name(self, ifd: int, tag: int) -> str:
        """Return the name of *tag* in *ifd*, or "(null)" when it is unknown."""
        if tag in self.tag_names:
            return self.tag_names[tag]
        table = _GPS_TAG_NAMES if Ifd(ifd) is Ifd.GPS else _STANDARD_TAG_NAMES
        return table.get(tag, NULL_NAME)

    def tag_content(self, ifd: int, tag: int) -> str:
        """Return the value of a tag with trailing spaces removed, or "" if absent."""
        value = self.entries.get((Ifd(ifd), tag))
        if value is None:
            return ""
        return trim_spaces(_limit(value))

    def tag(self, ifd: int, tag: int) -> str:
        """Return "Name: value\\n" for a tag, or "" when it is absent or blank."""
        content = self.tag_content(ifd, tag)
        if not content:
            return ""
        return f"{self.tag_name(ifd, tag)}: {content}\n"

    def mnote_tag(self, tag: int) -> str:
        """Return "Title: value\\n" for the maker note *tag*, or "" if none is usable.

        When several entries share the id, the last readable one wins.
        """
        result = ""
        for note in self.makernotes:
            if note.id != tag or note.value is None:
                continue
            value = trim_spaces(_limit(note.value))
            if value:
                title = note.title if note.title is not None else NULL_NAME
                result = f"{title}: {value}\n"
        return result