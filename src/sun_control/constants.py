"""
Astronomical constants and configuration defaults for the sun controller.
"""

# Time
DAY_MS = 1000.0 * 60.0 * 60.0 * 24.0
J1970 = 2440588.0  # 12:00 UTC Jan 1st 1970 as a Julian date
J2000 = 2451545.0  # 12:00 UTC Jan 1st 2000 as a Julian date
LAST_MINUTE_OF_DAY = 23 * 60 + 59

# Earth
OBLIQUITY_DEG = 23.4397
PERIHELION_DEG = 102.9372

# Solar mean anomaly: M = M0 + M1 * d
MEAN_ANOMALY_DEG = 357.5291
MEAN_ANOMALY_RATE = 0.98560028

# Equation of center harmonics (degrees)
CENTER_COEFFS = (1.9148, 0.02, 0.0003)

# Sidereal time: theta = S0 + S1 * d
SIDEREAL_DEG = 280.16
SIDEREAL_RATE = 360.9856235

# Default starting configuration
DEFAULT_DAY = 11
DEFAULT_MONTH = 10
DEFAULT_YEAR = 1996
DEFAULT_HOUR = 12
DEFAULT_MINUTE = 30
DEFAULT_LATITUDE = 0.0
DEFAULT_LONGITUDE = 0.0
DEFAULT_SPEED = 100.0  # simulated minutes per second of full scrub input

# Free-text date separators
DATE_SEPARATORS = " ./-"

# Overlay
OVERLAY_WIDTH = 640
OVERLAY_HEIGHT = 360
OVERLAY_COLOR = (255, 255, 255)
OVERLAY_FONT_SIZE = 30
OVERLAY_MARGIN_X = 5
OVERLAY_TIME_OFFSET = 80  # pixels from the bottom edge
OVERLAY_DATE_OFFSET = 50
PLACEHOLDER_TEXT = "--:--"

# Sky colors for the overlay backdrop
SKY_DAY_TOP = [0.25, 0.45, 0.85]
SKY_DAY_HORIZON = [0.65, 0.8, 1.0]
SKY_NIGHT_TOP = [0.01, 0.01, 0.05]
SKY_NIGHT_HORIZON = [0.08, 0.08, 0.2]
SUN_COLOR = (255, 240, 200)
SUN_RADIUS_PX = 12
