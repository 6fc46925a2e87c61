from datetime import datetime

import numpy as np

from sun_control import constants
from sun_control.models import SkyPosition, SunState
from sun_control.overlay import (
    daylight_factor,
    format_date,
    format_time,
    render_overlay,
    sky_gradient,
    sun_pixel,
)


def test_placeholders_without_instant():
    assert format_time(None) == "--:--"
    assert format_date(None) == "--:--"


def test_short_time_and_date():
    instant = datetime(1996, 10, 11, 9, 5)
    assert format_time(instant) == "09:05"
    assert format_date(instant) == "11/10/1996"


def test_daylight_factor_twilight_ramp():
    assert daylight_factor(-30.0) == 0.0
    assert daylight_factor(0.0) == 0.5
    assert daylight_factor(30.0) == 1.0


def test_sky_gradient_shape_and_palette():
    img = sky_gradient(8, 4, daylight=1.0)
    assert img.shape == (4, 8, 3)
    assert img.dtype == np.uint8
    np.testing.assert_array_equal(img[0, 0], (np.array(constants.SKY_DAY_TOP) * 255).astype(np.uint8))
    np.testing.assert_array_equal(img[-1, -1], (np.array(constants.SKY_DAY_HORIZON) * 255).astype(np.uint8))


def test_sun_pixel_mapping():
    x, y = sun_pixel(0.0, 90.0, 640, 360)
    assert (x, y) == (320.0, 0.0)
    x, y = sun_pixel(-180.0, 0.0, 640, 360)
    assert (x, y) == (0.0, 270.0)
    # Headings wrap around the full circle
    assert sun_pixel(270.0, 10.0, 640, 360) == sun_pixel(-90.0, 10.0, 640, 360)


def test_render_overlay_without_state():
    image = render_overlay(None)
    assert image.size == (constants.OVERLAY_WIDTH, constants.OVERLAY_HEIGHT)
    assert image.mode == "RGB"


def test_render_overlay_draws_sun_and_text():
    instant = datetime(1996, 10, 11, 12, 30)
    state = SunState(instant, SkyPosition(azimuth=0.0, altitude=45.0))
    pixels = np.asarray(render_overlay(instant, state, width=640, height=360))

    np.testing.assert_array_equal(pixels[135, 320], constants.SUN_COLOR)

    # Some white text pixels in the bottom-left corner
    corner = pixels[360 - constants.OVERLAY_TIME_OFFSET:, :200]
    assert np.any(np.all(corner == constants.OVERLAY_COLOR, axis=-1))


def test_render_overlay_night_is_darker():
    instant = datetime(1996, 10, 11, 0, 0)
    day = np.asarray(render_overlay(instant, SunState(instant, SkyPosition(0.0, 30.0))))
    night = np.asarray(render_overlay(instant, SunState(instant, SkyPosition(0.0, -30.0))))
    assert int(night[0, 0].sum()) < int(day[0, 0].sum())
    # No sun disc below the horizon
    assert not np.any(np.all(night == constants.SUN_COLOR, axis=-1))
