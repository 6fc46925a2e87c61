import logging
from datetime import datetime, timedelta

from sun_control import constants
from sun_control.models import (
    FixedCardinal,
    GeoCoordinate,
    StartingDate,
    StartingTime,
    SunState,
    TimeReference,
)
from sun_control.solar import get_sun_position
from sun_control.utils import lerp

_LOGGER = logging.getLogger(__name__)


class DateParseError(ValueError):
    """Raised when a free-text date cannot be read as day-month-year."""


def parse_date(text):
    """
    Split a free-text date into (day, month, year).

    Accepts space, '.', '/' and '-' as separators; runs of separators are
    treated as one.
    """
    blanks = " " * len(constants.DATE_SEPARATORS)
    tokens = text.translate(str.maketrans(constants.DATE_SEPARATORS, blanks)).split()

    if len(tokens) != 3:
        raise DateParseError(f"expected day, month and year in {text!r}, got {len(tokens)} field(s)")
    for token in tokens:
        if not (token.isascii() and token.isdigit()):
            raise DateParseError(f"non-numeric date field {token!r} in {text!r}")
    day, month, year = (int(token) for token in tokens)
    return day, month, year


class SunController:
    def __init__(self, location=None, date=None, time=None, speed=None, offset=None,
                 time_reference=TimeReference.UTC):
        """
        Hold the simulated clock and publish the sun's position on every change.

        Args:
            location: GeoCoordinate of the observer
            date: StartingDate for the initial instant
            time: StartingTime; also supplies hour/minute for set_from_text
            speed: Simulated minutes per second of full scrub input
            offset: RotationOffset (LiveReference or FixedCardinal)
            time_reference: How naive instants map to UTC
        """
        self.location = location if location is not None else GeoCoordinate()
        self.date = date if date is not None else StartingDate()
        self.time = time if time is not None else StartingTime()
        self.speed = speed if speed is not None else constants.DEFAULT_SPEED
        self.offset = offset if offset is not None else FixedCardinal()
        self.time_reference = time_reference

        self._subscribers = []
        self._instant = datetime(self.date.year, self.date.month, self.date.day,
                                 self.time.hour, self.time.minute, 0)
        self._state = self._compute_state(self._instant)

    @property
    def state(self):
        """Last published SunState."""
        return self._state

    def get_instant(self):
        return self._instant

    def rotation_offset(self):
        """Scene heading offset in degrees, read fresh from the configured source."""
        return self.offset.resolve()

    def subscribe(self, callback):
        """
        Register `callback(state)` to be called after every time change.

        Returns:
            A zero-argument function that removes the subscription.
        """
        self._subscribers.append(callback)
        _LOGGER.debug("Subscribed %r (%d total)", callback, len(self._subscribers))

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)
                _LOGGER.debug("Unsubscribed %r", callback)

        return unsubscribe

    def set_instant(self, instant):
        """Replace the current instant and publish the new sun state."""
        state = self._compute_state(instant)
        self._instant, self._state = instant, state
        _LOGGER.debug("Sun at %s: azimuth=%.3f altitude=%.3f offset=%.3f",
                      instant.isoformat(), self._state.position.azimuth,
                      self._state.position.altitude, self._state.rotation_offset)
        for callback in list(self._subscribers):
            callback(self._state)

    def set_from_text(self, text):
        """
        Set the date from a day-month-year string such as "11.10.1996".

        The time of day comes from the configured starting time, not the string.

        Raises:
            DateParseError: If the string does not hold exactly three numeric
                fields or they do not form a calendar date.
        """
        day, month, year = parse_date(text)
        try:
            instant = datetime(year, month, day, self.time.hour, self.time.minute, 0)
        except ValueError as err:
            raise DateParseError(f"invalid calendar date {text!r}: {err}") from err
        self.set_instant(instant)

    def set_by_day_fraction(self, frac):
        """
        Set the clock between 00:00 (frac=0) and 23:59 (frac=1), keeping the date.

        Raises:
            ValueError: If frac is outside [0, 1].
        """
        if not 0.0 <= frac <= 1.0:
            raise ValueError(f"day fraction must be within [0, 1], got {frac}")
        total = int(lerp(0, constants.LAST_MINUTE_OF_DAY, frac))
        hour, minute = divmod(total, 60)
        current = self._instant
        self.set_instant(datetime(current.year, current.month, current.day, hour, minute, 0))

    def day_fraction(self):
        """Inverse of set_by_day_fraction for the current clock time."""
        minutes = self._instant.hour * 60 + self._instant.minute
        return min(minutes / constants.LAST_MINUTE_OF_DAY, 1.0)

    def advance(self, delta_minutes):
        """Move the clock by `delta_minutes` (may be negative or fractional)."""
        self.set_instant(self._instant + timedelta(minutes=delta_minutes))

    def tick(self, scrub, elapsed_seconds):
        """
        Per-frame update from an analog scrub input.

        Args:
            scrub: Input sample, typically in [-1, 1]; zero means no change
            elapsed_seconds: Real time since the previous frame
        """
        if scrub != 0:
            self.advance(scrub * elapsed_seconds * self.speed)

    def _compute_state(self, instant):
        position = get_sun_position(instant, self.location.latitude, self.location.longitude,
                                    time_reference=self.time_reference)
        return SunState(instant=instant, position=position,
                        rotation_offset=self.rotation_offset())
