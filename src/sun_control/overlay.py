"""
On-screen date/time overlay.

Renders the current short time and short date in the bottom-left corner of a
small sky backdrop, with the sun drawn where the controller places it.
"""
import numpy as np
from PIL import Image, ImageDraw, ImageFont

from sun_control import constants
from sun_control.utils import wrap_degrees


def format_time(instant):
    """Short time ("HH:MM"), or a placeholder when there is no instant yet."""
    if instant is None:
        return constants.PLACEHOLDER_TEXT
    return instant.strftime("%H:%M")


def format_date(instant):
    """Short date ("DD/MM/YYYY"), or a placeholder when there is no instant yet."""
    if instant is None:
        return constants.PLACEHOLDER_TEXT
    return instant.strftime("%d/%m/%Y")


def daylight_factor(altitude):
    """0 at night, 1 in full day, linear across civil twilight (-6..6 degrees)."""
    return float(np.clip((altitude + 6.0) / 12.0, 0.0, 1.0))


def sky_gradient(width, height, daylight):
    """
    Vertical sky gradient blended between night and day palettes.

    Returns:
        (height, width, 3) uint8 array
    """
    top = np.array(constants.SKY_NIGHT_TOP) * (1.0 - daylight) + np.array(constants.SKY_DAY_TOP) * daylight
    horizon = (np.array(constants.SKY_NIGHT_HORIZON) * (1.0 - daylight)
               + np.array(constants.SKY_DAY_HORIZON) * daylight)

    t = np.linspace(0.0, 1.0, height)[:, None]
    column = top[None, :] * (1.0 - t) + horizon[None, :] * t
    img = np.broadcast_to(column[:, None, :], (height, width, 3))
    return (np.clip(img, 0.0, 1.0) * 255).astype(np.uint8)


def sun_pixel(heading, altitude, width, height):
    """
    Map a scene heading/altitude to overlay pixel coordinates.

    Heading spans the full width (-180 at the left edge); the horizon sits
    at three quarters of the height and the zenith at the top.
    """
    horizon_y = height * 0.75
    x = (wrap_degrees(heading) + 180.0) / 360.0 * width
    y = horizon_y - (altitude / 90.0) * horizon_y
    return x, y


def render_overlay(instant, state=None, width=None, height=None, color=None, font_size=None):
    """
    Draw the overlay.

    Args:
        instant: datetime shown as time and date, or None for placeholders
        state: Optional SunState; when given the sky and sun follow it
        width, height: Image size in pixels
        color: RGB text color
        font_size: Text size in pixels

    Returns:
        PIL.Image in RGB mode
    """
    width = width if width is not None else constants.OVERLAY_WIDTH
    height = height if height is not None else constants.OVERLAY_HEIGHT
    color = tuple(color) if color is not None else constants.OVERLAY_COLOR
    font_size = font_size if font_size is not None else constants.OVERLAY_FONT_SIZE

    daylight = daylight_factor(state.position.altitude) if state is not None else 1.0
    image = Image.fromarray(sky_gradient(width, height, daylight))
    draw = ImageDraw.Draw(image)

    if state is not None and state.position.altitude > 0.0:
        x, y = sun_pixel(state.heading, state.position.altitude, width, height)
        r = constants.SUN_RADIUS_PX
        draw.ellipse([x - r, y - r, x + r, y + r], fill=constants.SUN_COLOR)

    font = ImageFont.load_default(size=font_size)
    draw.text((constants.OVERLAY_MARGIN_X, height - constants.OVERLAY_TIME_OFFSET),
              format_time(instant), fill=color, font=font)
    draw.text((constants.OVERLAY_MARGIN_X, height - constants.OVERLAY_DATE_OFFSET),
              format_date(instant), fill=color, font=font)
    return image
