"""Geometry of mouse-driven zooming, panning, rotating and menu placement."""

from __future__ import annotations

import math

JITTER_OFFSET = 2
JITTER_TIME = 1
DRAG_ZOOM_SCALE = 128.0
BLUR_RANGE = 20
BLUR_CENTER = 10
ROTATION_SCALE = 3.1415926535


def clamp_zoom(zoom: float, zoom_min: float, zoom_max: float) -> float:
    """Keep *zoom* within [zoom_min, zoom_max]."""
    if zoom < zoom_min:
        return zoom_min
    if zoom > zoom_max:
        return zoom_max
    return zoom


def drag_zoom(
    old_zoom: float, click_x: int, x: int, zoom_min: float, zoom_max: float
) -> float:
    """Zoom level after dragging horizontally from *click_x* to *x*.

    Every 128 pixels to the right add one to the zoom, to the left take one off.
    """
    if x > click_x:
        zoom = old_zoom + (float(x) - float(click_x)) / DRAG_ZOOM_SCALE
    else:
        zoom = old_zoom - (float(click_x) - float(x)) / DRAG_ZOOM_SCALE
    return clamp_zoom(zoom, zoom_min, zoom_max)


def anchored_offset(click: int, im_click_offset: float, zoom: float) -> int:
    """Image offset that keeps the image point under the pointer fixed at *click*."""
    return int(click - im_click_offset * zoom)


def step_zoom(
    zoom: float, rate: float, zoom_in: bool, zoom_min: float, zoom_max: float
) -> float:
    """Multiply or divide *zoom* by *rate*, limited only in the direction moved."""
    if zoom_in:
        zoom = zoom * rate
        return zoom_max if zoom > zoom_max else zoom
    zoom = zoom / rate
    return zoom_min if zoom < zoom_min else zoom


def blur_radius(x: int, width: int) -> int:
    """Blur radius for pointer position *x*: negative blurs, positive sharpens."""
    if width <= 0:
        raise ValueError("width must be positive")
    return int((float(x) / width) * BLUR_RANGE - BLUR_CENTER)


def rotation_angle(x: int, width: int) -> float:
    """Rotation in radians for pointer position *x*, from -pi at the left to pi at the right."""
    if width <= 0:
        raise ValueError("width must be positive")
    return (x - width // 2) / (width / 2) * ROTATION_SCALE


def exceeds_jitter(
    click_x: int,
    click_y: int,
    x: int,
    y: int,
    im_x: int,
    im_y: int,
    elapsed: float,
) -> bool:
    """Tell whether a press has moved or lasted enough to count as a pan."""
    return (
        abs(click_x - (x - im_x)) > JITTER_OFFSET
        or abs(click_y - (y - im_y)) > JITTER_OFFSET
        or elapsed > JITTER_TIME
    )


def menu_slide(
    screen_w: int, screen_h: int, menu_x: int, menu_y: int, menu_w: int, menu_h: int
) -> tuple[int, int]:
    """Shift needed to pull a menu back onto the screen, never past its left or top edge."""
    dx = min(screen_w - (menu_x + menu_w), 0)
    dy = min(screen_h - (menu_y + menu_h), 0)
    if menu_x + dx < 0:
        dx = -menu_x
    if menu_y + dy < 0:
        dy = -menu_y
    return (dx, dy)


def _is_close(a: float, b: float) -> bool:
    return math.isclose(a, b)