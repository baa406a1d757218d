"""Human-readable summaries of the EXIF data in an image file."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

from PIL import Image

from slideview.exifdata import (
    EXIF_STD_BUF_LEN,
    TAG_DATE_TIME_ORIGINAL,
    TAG_EXPOSURE_MODE,
    TAG_EXPOSURE_PROGRAM,
    TAG_EXPOSURE_TIME,
    TAG_FLASH,
    TAG_FNUMBER,
    TAG_FOCAL_LENGTH,
    TAG_FOCAL_LENGTH_IN_35MM_FILM,
    TAG_GPS_LATITUDE,
    TAG_GPS_LATITUDE_REF,
    TAG_GPS_LONGITUDE,
    TAG_GPS_LONGITUDE_REF,
    TAG_GPS_MAP_DATUM,
    TAG_IMAGE_DESCRIPTION,
    TAG_ISO_SPEED_RATINGS,
    TAG_LENS_MODEL,
    TAG_MAKE,
    TAG_MODEL,
    ExifData,
    Ifd,
)
from slideview.nikon import nikon_tag

NO_EXIF = "No Exif data in file.\n"
NIKON_MAKES = frozenset({"NIKON CORPORATION", "Nikon", "NIKON"})
CANON_MAKE = "Canon"

_EXIF_IFD_POINTER = 0x8769
_GPS_IFD_POINTER = 0x8825

_FLASH_VALUES = {
    0x00: "Flash did not fire",
    0x01: "Flash fired",
    0x05: "Strobe return light not detected",
    0x07: "Strobe return light detected",
    0x09: "Flash fired, compulsory flash mode",
    0x10: "Flash did not fire, compulsory flash mode",
    0x18: "Flash did not fire, auto mode",
    0x19: "Flash fired, auto mode",
    0x20: "No flash function",
}

_EXPOSURE_PROGRAMS = {
    0: "Not defined",
    1: "Manual",
    2: "Normal program",
    3: "Aperture priority",
    4: "Shutter priority",
    5: "Creative program (biased toward depth of field)",
    6: "Creative program (biased toward fast shutter speed)",
    7: "Portrait mode",
    8: "Landscape mode",
}

_EXPOSURE_MODES = {0: "Auto exposure", 1: "Manual exposure", 2: "Auto bracket"}


def _content(data: ExifData, ifd: Ifd, tag: int) -> str:
    return data.tag_content(ifd, tag)[: EXIF_STD_BUF_LEN - 1]


def make_model_lens(data: ExifData) -> str:
    """Return "Make Model + Lens\\n", leaving out the make if the model repeats it."""
    make = _content(data, Ifd.IFD_0, TAG_MAKE)
    model = _content(data, Ifd.IFD_0, TAG_MODEL)
    lens = _content(data, Ifd.EXIF, TAG_LENS_MODEL)
    text = ""
    if make and not model.startswith(make):
        text += f"{make} "
    if model:
        text += model
    if lens:
        text += f" + {lens}"
    return text + "\n"


def exposure(data: ExifData) -> str:
    """Return aperture, shutter speed, ISO and focal length on one line."""
    fnumber = _content(data, Ifd.EXIF, TAG_FNUMBER)
    exposure_time = _content(data, Ifd.EXIF, TAG_EXPOSURE_TIME)
    iso = _content(data, Ifd.EXIF, TAG_ISO_SPEED_RATINGS)
    focus = _content(data, Ifd.EXIF, TAG_FOCAL_LENGTH)
    focus35 = _content(data, Ifd.EXIF, TAG_FOCAL_LENGTH_IN_35MM_FILM)
    text = ""
    if fnumber or exposure_time:
        text += f"{fnumber}  {exposure_time}  "
    if iso:
        text += f"ISO{iso}  "
    if focus and focus35:
        text += f"{focus} ({focus35} mm)\n"
    elif focus:
        text += f"{focus}\n"
    return text


def flash(data: ExifData) -> str:
    """Return the flash description line, or "" if there is none."""
    value = _content(data, Ifd.EXIF, TAG_FLASH)
    return f"{value}\n" if value else ""


def mode(data: ExifData) -> str:
    """Return "ExposureMode (ExposureProgram)\\n", or "" if both are missing."""
    exposure_mode = _content(data, Ifd.EXIF, TAG_EXPOSURE_MODE)
    program = _content(data, Ifd.EXIF, TAG_EXPOSURE_PROGRAM)
    if exposure_mode or program:
        return f"{exposure_mode} ({program})\n"
    return ""


def datetime_original(data: ExifData) -> str:
    """Return the original capture date line, or ""."""
    value = _content(data, Ifd.EXIF, TAG_DATE_TIME_ORIGINAL)
    return f"{value}\n" if value else ""


def description(data: ExifData) -> str:
    """Return the quoted image description line, or ""."""
    value = _content(data, Ifd.IFD_0, TAG_IMAGE_DESCRIPTION)
    return f'"{value}"\n' if value else ""


def gps_coords(data: ExifData) -> str:
    """Return the GPS position, stopping at the first missing component."""
    pieces = (
        (TAG_GPS_LATITUDE_REF, "GPS: {} "),
        (TAG_GPS_LATITUDE, "{} "),
        (TAG_GPS_LONGITUDE_REF, ", {} "),
        (TAG_GPS_LONGITUDE, "{} "),
        (TAG_GPS_MAP_DATUM, "({})\n"),
    )
    text = ""
    for tag, template in pieces:
        value = _content(data, Ifd.GPS, tag)
        if not value:
            break
        text += template.format(value)
    return text


def canon_tag(data: ExifData, tag: int) -> str:
    """Readable line for a Canon maker note tag."""
    return data.mnote_tag(tag)


def exif_info(
    data: ExifData | None,
    nikon_tags: Iterable[int] = (),
    canon_tags: Iterable[int] = (),
) -> str:
    """Return the full EXIF summary shown for an image.

    Vendor maker notes are listed for the given tag ids when the camera
    make is Nikon or Canon.
    """
    if data is None:
        return NO_EXIF
    parts = [
        description(data),
        make_model_lens(data),
        exposure(data),
        mode(data),
        flash(data),
        datetime_original(data),
    ]
    make = _content(data, Ifd.IFD_0, TAG_MAKE)
    if make in NIKON_MAKES:
        parts.extend(nikon_tag(data, tag) for tag in nikon_tags)
    elif make == CANON_MAKE:
        parts.extend(canon_tag(data, tag) for tag in canon_tags)
    parts.append(gps_coords(data))
    return "".join(parts)


def _number(value: Any) -> str:
    if isinstance(value, int):
        return str(value)
    try:
        number = float(value)
    except (TypeError, ValueError, ZeroDivisionError):
        return str(value)
    if math.isnan(number) or math.isinf(number):
        return str(value)
    if number.is_integer():
        return str(int(number))
    return f"{number:.2f}"


def _float(value: Any) -> float | None:
    try:
        number = float(value)
    except (TypeError, ValueError, ZeroDivisionError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _readable(ifd: Ifd, tag: int, value: Any) -> str:
    if isinstance(value, bytes):
        return value.split(b"\0", 1)[0].decode("latin-1")
    if isinstance(value, str):
        return value.split("\0", 1)[0]
    if ifd is Ifd.EXIF:
        if tag == TAG_FLASH and isinstance(value, int):
            return _FLASH_VALUES.get(value, str(value))
        if tag == TAG_EXPOSURE_PROGRAM and isinstance(value, int):
            return _EXPOSURE_PROGRAMS.get(value, str(value))
        if tag == TAG_EXPOSURE_MODE and isinstance(value, int):
            return _EXPOSURE_MODES.get(value, str(value))
        number = _float(value)
        if tag == TAG_FNUMBER and number is not None:
            return f"f/{number:.1f}"
        if tag == TAG_FOCAL_LENGTH and number is not None:
            return f"{number:.1f} mm"
        if tag == TAG_EXPOSURE_TIME and number is not None:
            if 0 < number < 1:
                return f"1/{round(1 / number)} sec."
            return f"{_number(value)} sec."
    if isinstance(value, (tuple, list)):
        return ", ".join(_number(item) for item in value)
    return _number(value)


def load_exif(path: str) -> ExifData | None:
    """Read the EXIF data of the image at *path*.

    Returns None when the file cannot be read or holds no EXIF data.
    """
    try:
        with Image.open(path) as image:
            exif = image.getexif()
            if not exif:
                return None
            directories = {
                Ifd.IFD_0: dict(exif),
                Ifd.EXIF: dict(exif.get_ifd(_EXIF_IFD_POINTER)),
                Ifd.GPS: dict(exif.get_ifd(_GPS_IFD_POINTER)),
            }
    except (OSError, ValueError, SyntaxError):
        return None
    entries: dict[tuple[int, int], str] = {}
    for ifd, tags in directories.items():
        for tag, value in tags.items():
            if ifd is Ifd.IFD_0 and tag in (_EXIF_IFD_POINTER, _GPS_IFD_POINTER):
                continue
            entries[(ifd, tag)] = _readable(ifd, tag, value)
    if not entries:
        return None
    return ExifData(entries)