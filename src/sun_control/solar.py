"""
Low-precision solar position.

Closed-form sun ephemeris after the SunCalc library (Vladimir Agafonkin, BSD)
and the Astronomy Answers article it is based on:
http://aa.quae.nl/en/reken/zonpositie.html

Accurate to a fraction of a degree, which is plenty for placing a sun light in
a scene. Every function is pure; the batch functions accept either a scalar
day-count or an array of them.
"""
from datetime import datetime, timedelta, timezone

import numpy as np

from sun_control import constants
from sun_control.models import SkyPosition, TimeReference
from sun_control.utils import batch_compatible

UNIX_EPOCH = datetime(1970, 1, 1)
_MILLISECOND = timedelta(milliseconds=1)

OBLIQUITY = np.deg2rad(constants.OBLIQUITY_DEG)
PERIHELION = np.deg2rad(constants.PERIHELION_DEG)


def to_utc(instant, time_reference=TimeReference.UTC):
    """
    Return `instant` as a naive UTC datetime.

    Aware datetimes are always converted. Naive datetimes are taken as UTC, or
    as system local time when `time_reference` is LOCAL.
    """
    if instant.tzinfo is not None or time_reference is TimeReference.LOCAL:
        return instant.astimezone(timezone.utc).replace(tzinfo=None)
    return instant


def to_julian(instant, time_reference=TimeReference.UTC):
    """Julian date of an instant."""
    ms = (to_utc(instant, time_reference) - UNIX_EPOCH) / _MILLISECOND
    return ms / constants.DAY_MS - 0.5 + constants.J1970


def from_julian(julian):
    """Naive UTC datetime for a Julian date."""
    ms = (julian + 0.5 - constants.J1970) * constants.DAY_MS
    return UNIX_EPOCH + timedelta(milliseconds=ms)


def to_days(instant, time_reference=TimeReference.UTC):
    """Days since 2000-01-01 12:00 UTC."""
    return to_julian(instant, time_reference) - constants.J2000


def solar_mean_anomaly(days):
    return np.deg2rad(constants.MEAN_ANOMALY_DEG + constants.MEAN_ANOMALY_RATE * days)


def ecliptic_longitude(mean_anomaly):
    """Ecliptic longitude (radians) from the mean anomaly, with the equation of center."""
    c1, c2, c3 = constants.CENTER_COEFFS
    center = np.deg2rad(c1 * np.sin(mean_anomaly)
                        + c2 * np.sin(2.0 * mean_anomaly)
                        + c3 * np.sin(3.0 * mean_anomaly))
    return mean_anomaly + center + PERIHELION + np.pi


def declination(lon, lat):
    return np.arcsin(np.sin(lat) * np.cos(OBLIQUITY)
                     + np.cos(lat) * np.sin(OBLIQUITY) * np.sin(lon))


def right_ascension(lon, lat):
    return np.arctan2(np.sin(lon) * np.cos(OBLIQUITY) - np.tan(lat) * np.sin(OBLIQUITY),
                      np.cos(lon))


def sidereal_time(days, lw):
    """Local sidereal time (radians); `lw` is the west longitude in radians."""
    return np.deg2rad(constants.SIDEREAL_DEG + constants.SIDEREAL_RATE * days) - lw


@batch_compatible
def sun_coords(days):
    """
    Equatorial coordinates of the sun.

    Args:
        days: Day-count(s) since J2000

    Returns:
        (declination, right_ascension) in radians
    """
    lon = ecliptic_longitude(solar_mean_anomaly(days))
    return declination(lon, 0.0), right_ascension(lon, 0.0)


@batch_compatible
def sun_positions(days, latitude, longitude):
    """
    Horizontal coordinates of the sun for one or many day-counts.

    Args:
        days: Day-count(s) since J2000
        latitude: Observer latitude in degrees
        longitude: Observer longitude in degrees (east positive)

    Returns:
        (azimuth, altitude) in degrees; azimuth 0 = south, positive toward west
    """
    lw = np.deg2rad(-longitude)
    phi = np.deg2rad(latitude)

    lon = ecliptic_longitude(solar_mean_anomaly(days))
    dec = declination(lon, 0.0)
    ra = right_ascension(lon, 0.0)
    H = sidereal_time(days, lw) - ra

    altitude = np.arcsin(np.sin(phi) * np.sin(dec) + np.cos(phi) * np.cos(dec) * np.cos(H))
    azimuth = np.arctan2(np.sin(H), np.cos(H) * np.sin(phi) - np.tan(dec) * np.cos(phi))
    return np.rad2deg(azimuth), np.rad2deg(altitude)


def get_sun_position(instant, latitude, longitude, time_reference=TimeReference.UTC):
    """
    Where the sun is for an observer at a given instant.

    Latitude and longitude are not range-checked; out-of-range values give a
    continuous but physically meaningless result.

    Args:
        instant: datetime; naive values are read per `time_reference`
        latitude: Degrees north
        longitude: Degrees east
        time_reference: Interpretation of naive instants

    Returns:
        SkyPosition in degrees
    """
    azimuth, altitude = sun_positions(to_days(instant, time_reference), latitude, longitude)
    return SkyPosition(azimuth=azimuth, altitude=altitude)


def day_track(date, latitude, longitude, samples=24 * 12, time_reference=TimeReference.UTC):
    """
    Sample the sun's path across one calendar day.

    Args:
        date: datetime or date; only the calendar fields are used
        samples: Number of evenly spaced samples from 00:00 (inclusive) to 24:00 (exclusive)

    Returns:
        (hours, azimuth, altitude) arrays
    """
    midnight = datetime(date.year, date.month, date.day)
    start = to_days(midnight, time_reference)
    hours = np.arange(samples) * (24.0 / samples)
    azimuth, altitude = sun_positions(start + hours / 24.0, latitude, longitude)
    return hours, azimuth, altitude
