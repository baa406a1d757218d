import pytest

from slideview.exifdata import TAG_FLASH, ExifData, Ifd, MakerNote
from slideview.nikon import (
    active_d_lighting,
    af_info2,
    flash_control_mode,
    flash_exposure_compensation,
    flash_output,
    nikon_tag,
    picture_control,
    primary_af_point,
)

PREFIX = "(null): {} bytes unknown data: 303130"


def test_flash_output_full_and_powers_of_two():
    assert flash_output(0) == "Full"
    assert flash_output(6) == "1/2"
    assert flash_output(12) == "1/4"


def test_flash_output_uneven_value():
    result = flash_output(3)
    assert result.startswith("1/2^(")
    assert result.endswith(")")


@pytest.mark.parametrize(
    "system,point,expected",
    [
        (0, 5, "FAIL"),
        (1, 1, "C6 (Center)"),
        (2, 1, "Center"),
        (3, 0, "(none)"),
        (7, 0, "?"),
        (1, 99, ""),
    ],
)
def test_primary_af_point(system, point, expected):
    assert primary_af_point(system, point) == expected


@pytest.mark.parametrize(
    "value,word",
    [(0, "Off"), (3, "Normal"), (7, "Extra High"), (65535, "Auto"), (2, "N/A")],
)
def test_active_d_lighting(value, word):
    assert active_d_lighting(f"(null): {value}\n") == f"Active D-Lightning: {word}\n"


def test_active_d_lighting_unparsable_defaults_to_off():
    assert active_d_lighting("garbage") == "Active D-Lightning: Off\n"


def test_flash_exposure_compensation_parses_value():
    result = flash_exposure_compensation("Flash Exposure Compensation: -1.0\n")
    assert result == "FlashExposureCompensation: -1.0 EV\n"


def test_flash_exposure_compensation_unparsable_is_zero():
    assert flash_exposure_compensation("nothing") == "FlashExposureCompensation: +0.0 EV\n"


def test_af_info2_phase_detect():
    text = PREFIX.format(30) + "30" + "00" + "00" + "01" + "01"
    expected = "PhaseDetectAF: On (51-point); AreaMode: Single Area; PrimaryAFPoint: C6 (Center)\n"
    assert af_info2(text) == expected


def test_af_info2_contrast_detect():
    text = PREFIX.format(30) + "30" + "01" + "02" + "00" + "00"
    assert af_info2(text) == "ContrastDetectAF: On; AFAreaMode: Contrast-detect (wide area)\n"


def test_af_info2_wrong_length_or_version_is_empty():
    assert af_info2(PREFIX.format(31) + "30" + "00" + "00" + "01" + "01") == ""
    assert af_info2(PREFIX.format(30) + "31" + "00" + "00" + "01" + "01") == ""
    assert af_info2("") == ""


def test_flash_control_mode_masks_high_bit():
    plain = PREFIX.format(22) + "33" + "AABBCCDD" + "00" + "06" + "06" + "00"
    masked = PREFIX.format(22) + "33" + "AABBCCDD" + "00" + "86" + "06" + "00"
    assert flash_control_mode(plain).startswith("NikonFlashControlMode: Manual")
    assert flash_control_mode(masked) == flash_control_mode(plain)
    assert flash_control_mode(plain).endswith("(Power: 1/2)\n")


def test_flash_control_mode_unknown_version_is_empty():
    text = PREFIX.format(22) + "39" + "AABBCCDD" + "00" + "06" + "06" + "00"
    assert flash_control_mode(text) == ""


def _padded_hex(name):
    return name.encode().hex().upper().ljust(40, "0")


def test_picture_control_decodes_names():
    text = (
        PREFIX.format(58) + "30" + _padded_hex("STANDARD") + _padded_hex("NEUTRAL ")
        + "AABBCCDD" + "01" + "02" + "03" + "04" + "05" + "06" + "07"
    )
    result = picture_control(text)
    assert result.startswith("PictCtrlData: Name: STANDARD; Base: NEUTRAL; CtrlAdj: Quick Adjust;")
    assert result.endswith("Hue: 7\n")


def test_picture_control_rejects_bad_adjustment():
    text = (
        PREFIX.format(58) + "30" + _padded_hex("A") + _padded_hex("B")
        + "AABBCCDD" + "05" + "00" * 6
    )
    assert picture_control(text) == ""


def _data(flash, notes):
    return ExifData({(Ifd.EXIF, TAG_FLASH): flash}, notes)


def test_nikon_tag_hides_flash_details_when_not_fired():
    notes = [
        MakerNote(8, "NORMAL", title="Flash Setting"),
        MakerNote(18, "Flash Exposure Compensation: 1.0", title="Flash Exposure Compensation"),
    ]
    data = _data("Flash did not fire", notes)
    assert nikon_tag(data, 8) == ""
    assert nikon_tag(data, 18) == ""


def test_nikon_tag_shows_flash_details_when_fired():
    notes = [MakerNote(8, "NORMAL", title="Flash Setting")]
    data = _data("Flash fired", notes)
    assert nikon_tag(data, 8) == data.mnote_tag(8)
    assert nikon_tag(data, 8).startswith("Flash Setting: NORMAL")


def test_nikon_tag_dispatches_special_tags():
    data = _data("Flash did not fire", [MakerNote(34, "5")])
    assert nikon_tag(data, 34) == "Active D-Lightning: High\n"


def test_nikon_tag_default_uses_mnote_tag():
    data = _data("Flash fired", [MakerNote(2, "200", title="ISO")])
    assert nikon_tag(data, 2) == data.mnote_tag(2)
    assert nikon_tag(data, 99) == ""