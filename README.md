# slideview

Parts of an image viewer that work without a window: readable EXIF
summaries, the arithmetic behind mouse-driven zooming and panning,
configurable mouse-button bindings, and layered text styles.

It needs Python 3.10 or later and Pillow.

## Modules

- `slideview.exifdata`: `ExifData` holds readable EXIF values keyed by
  directory (`Ifd`) and tag number, plus vendor `MakerNote` entries.
  `tag_content` returns a value with trailing spaces removed, `tag` returns
  `"Name: value\n"`, and `mnote_tag` returns `"Title: value\n"` for a maker
  note. `trim_spaces` strips spaces from the right end of a string.
- `slideview.exif`: `load_exif(path)` reads the EXIF data of an image with
  Pillow. It returns an `ExifData`, or `None` when the file cannot be read or
  holds no EXIF data. `exif_info` builds the full summary: description,
  camera and lens, exposure, mode, flash, capture date, selected Nikon or
  Canon maker notes, and the GPS position. Each line is also available on its
  own: `description`, `make_model_lens`, `exposure`, `mode`, `flash`,
  `datetime_original`, `gps_coords` and `canon_tag`.
- `slideview.nikon`: decodes Nikon maker notes. This covers flash exposure
  compensation (18), Active D-Lighting (34), picture control data (35),
  flash control mode (168) and AF info (183). `nikon_tag(data, tag)` picks the
  right decoder, and shows flash details only when the flash fired.
- `slideview.navigation`: pure functions for mouse interaction.
  - `clamp_zoom` and `step_zoom` limit zoom levels.
  - `drag_zoom` adds one zoom step per 128 pixels dragged.
  - `anchored_offset` keeps the clicked point fixed while zooming.
  - `blur_radius` and `rotation_angle` map the pointer position to an effect.
  - `exceeds_jitter` tells a click from a pan.
  - `menu_slide` pulls a menu back on screen.
- `slideview.buttons`: mouse-button bindings, covered below.
- `slideview.style`: `Style` and `StyleBit` describe text drawn as several
  offset, coloured layers.
  - `add_bit` adds a layer.
  - `origin_shift` keeps layers off negative coordinates.
  - `extend_size` grows a text size to fit all layers.
  - `bit_color` picks a layer's colour. A layer whose colour is all zeros
    uses the text colour.
  - `layers` returns where and in what colour to draw each layer.

## Examples

Summarise the EXIF data of a photo:

```python
from slideview.exif import exif_info, load_exif

print(exif_info(load_exif("photo.jpg")), end="")
```

`exif_info(None)` returns `"No Exif data in file.\n"`.

Zoom by dragging:

```python
from slideview.navigation import anchored_offset, drag_zoom

zoom = drag_zoom(1.0, click_x=100, x=228, zoom_min=0.01, zoom_max=50.0)  # 2.0
im_x = anchored_offset(100, 40.0, zoom)
```

## Button bindings

`slideview.buttons.ButtonBindings` starts from these defaults:

- button 1 pans
- button 2 zooms
- button 3 toggles the menu
- buttons 4 and 5 go to the previous and next image
- Ctrl plus button 1 blurs
- Ctrl plus button 2 rotates

`action_for(button, state)` returns the `ButtonAction` that a press starts. It
ignores modifiers other than Control, Shift, Mod1 and Mod4.

`load(environ)` reads the first of these files that can be opened and returns
its path:

1. `slideview/buttons` under `XDG_CONFIG_HOME`, or else `.config/slideview/buttons` under `HOME`
2. `/etc/slideview/buttons`

If neither `XDG_CONFIG_HOME` nor `HOME` is set, no file is read.
`load_lines` applies lines directly.

Each line names an action and a binding. The actions are `pan`, `zoom`,
`toggle_menu`, `prev_img`, `next_img`, `blur`, `rotate`, `zoom_in`, `zoom_out`
and `reload_image`, with the aliases `menu`, `prev`, `next` and `reload`.

A binding is a button number. It may be preceded by modifiers: `C-` for
Control, `S-` for Shift, `1-` for Mod1 and `4-` for Mod4. Lines starting with
`#` are comments. Unknown actions and modifiers are logged as warnings.

```
zoom  C-2
prev  4
next  5
```

## What it does not do

There is no command-line program and no window. Images are never displayed,
decoded for viewing, saved or transformed. Files and directories are not
collected into a slideshow list. The package only supplies the calculations,
bindings and metadata text that such a viewer would use.

## Tests

The test suite uses pytest and lives in `tests/`.