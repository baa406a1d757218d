"""Decoding of selected Nikon maker note entries into readable lines."""

from __future__ import annotations

import math
import re

from slideview.exifdata import TAG_FLASH, ExifData, Ifd, trim_spaces

FLASH_NOT_FIRED = "Flash: Flash did not fire\n"
FLASH_CONTROL_MODE_MASK = 0x7F

FLASH_CONTROL_MODES = (
    "Off",
    "iTTL-BL",
    "iTTL",
    "Auto Aperture",
    "Automatic",
    "GN (distance priority)",
    "Manual",
    "Repeating Flash",
    "N/A",
)

CONTRAST_DETECT_AF = ("Off", "On")

AF_AREA_MODE_PHASE = (
    "Single Area",
    "Dynamic Area",
    "Dynamic Area (closest subject)",
    "Group Dynamic ",
    "Dynamic Area (9 points) ",
    "Dynamic Area (21 points)",
    "Dynamic Area (51 points) ",
    "Dynamic Area (51 points, 3D-tracking)",
    "Auto-area",
    "Dynamic Area (3D-tracking)",
    "Single Area (wide)",
    "Dynamic Area (wide)",
    "Dynamic Area (wide, 3D-tracking)",
)

AF_AREA_MODE_CONTRAST = (
    "Contrast-detect",
    "Contrast-detect (normal area)",
    "Contrast-detect (wide area)",
    "Contrast-detect (face priority)",
    "Contrast-detect (subject tracking)",
)

PHASE_DETECT_AF = ("Off", "On (51-point)", "On (11-point)", "On (39-point)")

PRIM_AF_PT_51 = (
    "(none)", "C6 (Center)", "B6", "A5", "D6", "E5", "C7", "B7", "A6", "D7",
    "E6", "C5", "B5", "A4", "D5", "E4", "C8", "B8", "A7", "D8", "E7", "C9",
    "B9", "A8", "D9", "E8", "C10", "B10", "A9", "D10", "E9", "C11", "B11",
    "D11", "C4", "B4", "A3", "D4", "E3", "C3", "B3", "A2", "D3", "E2", "C2",
    "B2", "A1", "D2", "E1", "C1", "B1", "D1",
)

PRIM_AF_PT_11 = (
    "(none)", "Center", "Top", "Bottom", "Mid-left", "Upper-left",
    "Lower-left", "Far Left", "Mid-right", "Upper-right", "Lower-right",
    "Far Right",
)

PRIM_AF_PT_39 = (
    "(none)", "C6 (Center)", "B6", "A2", "D6", "E2", "C7", "B7", "A3", "D7",
    "E3", "C5", "B5", "A1", "D5", "E1", "C8", "B8", "D8", "C9", "B9", "D9",
    "C10", "B10", "D10", "C11", "B11", "D11", "C4", "B4", "D4", "C3", "B3",
    "D3", "C2", "B2", "D2", "C1", "B1", "D1",
)

PIC_CTRL_ADJ = ("Default Settings", "Quick Adjust", "Full Control")

_ACTIVE_D_LIGHTING = {0: "Off", 1: "Low", 3: "Normal", 5: "High", 7: "Extra High", 65535: "Auto"}

_UNKNOWN_DATA = " bytes unknown data: 303130"
_HEX = "0123456789abcdefABCDEF"
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class _Scanner:
    """Sequential scanner following the matching rules of a formatted scan."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def _skip_ws(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def literal(self, lit: str) -> bool:
        for char in lit:
            if char.isspace():
                self._skip_ws()
            elif self.pos < len(self.text) and self.text[self.pos] == char:
                self.pos += 1
            else:
                return False
        return True

    def uint(self) -> int | None:
        self._skip_ws()
        match = re.compile(r"[+-]?\d+").match(self.text, self.pos)
        if not match:
            return None
        self.pos = match.end()
        return int(match.group()) % 2**32

    def hex(self, width: int) -> int | None:
        self._skip_ws()
        start = self.pos
        while self.pos < len(self.text) and self.pos - start < width and self.text[self.pos] in _HEX:
            self.pos += 1
        if self.pos == start:
            return None
        return int(self.text[start:self.pos], 16)

    def word(self, width: int) -> str | None:
        self._skip_ws()
        start = self.pos
        while self.pos < len(self.text) and self.pos - start < width and not self.text[self.pos].isspace():
            self.pos += 1
        if self.pos == start:
            return None
        return self.text[start:self.pos]

    def float(self) -> float | None:
        self._skip_ws()
        match = _FLOAT_RE.match(self.text, self.pos)
        if not match:
            return None
        self.pos = match.end()
        return float(match.group())


def _scan_unknown_data(text: str, *fields: tuple[str, int]) -> list:
    """Scan "(null): <len> bytes unknown data: 303130..." and the given fields.

    Returns the length followed by one value per field that is not a skip;
    conversions never reached are None.
    """
    results: list = []
    wanted = 1 + sum(1 for kind, _ in fields if kind != "skip")
    scanner = _Scanner(text)
    if scanner.literal("(null): "):
        length = scanner.uint()
        if length is not None:
            results.append(length)
            if scanner.literal(_UNKNOWN_DATA):
                for kind, width in fields:
                    if kind == "hex":
                        value = scanner.hex(width)
                    else:
                        value = scanner.word(width)
                    if value is None:
                        break
                    if kind != "skip":
                        results.append(value)
    return results + [None] * (wanted - len(results))


def _or(value, default):
    return default if value is None else value


def _c_round(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _signed_char(value: int) -> int:
    return (value + 128) % 256 - 128


def _hex_string(text: str | None) -> str:
    """Decode hex digit pairs into text, stopping at a NUL byte or a bad pair."""
    raw = bytearray()
    text = text or ""
    for start in range(0, len(text) - 1, 2):
        pair = text[start:start + 2]
        if any(char not in _HEX for char in pair):
            break
        raw.append(int(pair, 16))
    raw = raw.split(b"\0", 1)[0]
    return trim_spaces(raw.decode("latin-1"))


def primary_af_point(phase_detect_af: int, point: int) -> str:
    """Name of the primary AF point for the given phase-detect AF system.

    Points outside the system's table give an empty string.
    """
    tables = {1: PRIM_AF_PT_51, 2: PRIM_AF_PT_11, 3: PRIM_AF_PT_39}
    if phase_detect_af == 0:
        return "FAIL"
    table = tables.get(phase_detect_af)
    if table is None:
        return "?"
    return table[point] if 0 <= point < len(table) else ""


def flash_output(value: int) -> str:
    """Describe flash output power, given in sixths of a stop below full."""
    if value == 0:
        return "Full"
    if value % 6 == 0:
        return f"1/{1 << (value // 6)}"
    return f"1/2^({value / 6.0:f})"


def flash_exposure_compensation(text: str) -> str:
    """Line for maker note 18, rounding the value to the nearest sixth of a stop."""
    data = 0.0
    scanner = _Scanner(text)
    if scanner.literal("Flash Exposure Compensation: "):
        data = _or(scanner.float(), 0.0)
    sixths = _signed_char(_c_round(data * 6.0))
    return f"FlashExposureCompensation: {sixths / 6.0:+.1f} EV\n"


def active_d_lighting(text: str) -> str:
    """Line for maker note 34 (Active D-Lighting)."""
    data = 0
    scanner = _Scanner(text)
    if scanner.literal("(null): "):
        data = _or(scanner.uint(), 0)
    return f"Active D-Lightning: {_ACTIVE_D_LIGHTING.get(data, 'N/A')}\n"


def picture_control(text: str) -> str:
    """Line for maker note 35 (picture control data), or "" if not version 0100."""
    (length, version, name, base, adj, quick, sharp, contrast, bright, sat, hue) = (
        _scan_unknown_data(
            text,
            ("hex", 2), ("str", 40), ("str", 40), ("skip", 8),
            ("hex", 2), ("hex", 2), ("hex", 2), ("hex", 2),
            ("hex", 2), ("hex", 2), ("hex", 2),
        )
    )
    adj = _or(adj, 0)
    if _or(length, 0) != 58 or _or(version, 0) != ord("0") or adj >= len(PIC_CTRL_ADJ):
        return ""
    return (
        f"PictCtrlData: Name: {_hex_string(name)}; Base: {_hex_string(base)}; "
        f"CtrlAdj: {PIC_CTRL_ADJ[adj]}; Quick: {_or(quick, 0)}; "
        f"Shrp: {_or(sharp, 0)}; Contr: {_or(contrast, 0)}; "
        f"Brght: {_or(bright, 0)}; Sat: {_or(sat, 0)}; Hue: {_or(hue, 0)}\n"
    )


def flash_control_mode(text: str) -> str:
    """Line for maker note 168 (flash info), or "" for unknown versions."""
    length, version, _flags, mode, output, _compensation = _scan_unknown_data(
        text, ("hex", 2), ("skip", 8), ("hex", 2), ("hex", 2), ("hex", 2), ("hex", 2)
    )
    mode = _or(mode, len(FLASH_CONTROL_MODES) - 1) & FLASH_CONTROL_MODE_MASK
    known = {(22, ord("3")), (22, ord("4")), (21, ord("2")), (19, ord("0"))}
    if mode >= len(FLASH_CONTROL_MODES) or (_or(length, 0), _or(version, 0)) not in known:
        return ""
    power = flash_output(_or(output, 0))
    return f"NikonFlashControlMode: {FLASH_CONTROL_MODES[mode]} (Power: {power})\n"


def af_info2(text: str) -> str:
    """Line for maker note 183 (AF info, version 0100), or "" if unusable."""
    length, version, contrast, area, phase, point = _scan_unknown_data(
        text, ("hex", 2), ("hex", 2), ("hex", 2), ("hex", 2), ("hex", 2)
    )
    contrast, area, phase, point = (_or(v, 0) for v in (contrast, area, phase, point))
    if (
        _or(length, 0) != 30
        or _or(version, 0) != ord("0")
        or contrast >= len(CONTRAST_DETECT_AF)
        or phase >= len(PHASE_DETECT_AF)
    ):
        return ""
    if contrast != 0 and area < len(AF_AREA_MODE_CONTRAST):
        return (
            f"ContrastDetectAF: {CONTRAST_DETECT_AF[contrast]}; "
            f"AFAreaMode: {AF_AREA_MODE_CONTRAST[area]}\n"
        )
    if phase != 0 and area < len(AF_AREA_MODE_PHASE):
        return (
            f"PhaseDetectAF: {PHASE_DETECT_AF[phase]}; "
            f"AreaMode: {AF_AREA_MODE_PHASE[area]}; "
            f"PrimaryAFPoint: {primary_af_point(phase, point)}\n"
        )
    return ""


def nikon_tag(data: ExifData, tag: int) -> str:
    """Readable line for a Nikon maker note tag; flash details only if the flash fired."""
    fired = trim_spaces(data.tag(Ifd.EXIF, TAG_FLASH)) != FLASH_NOT_FIRED
    if tag in (8, 9, 135):
        return data.mnote_tag(tag) if fired else ""
    if tag == 18:
        return flash_exposure_compensation(data.mnote_tag(18)) if fired else ""
    if tag == 34:
        return active_d_lighting(data.mnote_tag(34))
    if tag == 35:
        return picture_control(data.mnote_tag(35))
    if tag == 168:
        return flash_control_mode(data.mnote_tag(168)) if fired else ""
    if tag == 183:
        return af_info2(data.mnote_tag(183))
    return data.mnote_tag(tag)