import os
from datetime import datetime

import numpy as np
import matplotlib.pyplot as plt

from sun_control import constants
from sun_control.solar import day_track


def create_visualization(date=None, latitude=None, longitude=None, output_path="output/sun_path.png"):
    """
    Plot one day of sun positions: altitude against time, and a polar sky map.

    Returns:
        Path of the saved PNG
    """
    date = date or datetime(constants.DEFAULT_YEAR, constants.DEFAULT_MONTH, constants.DEFAULT_DAY)
    latitude = latitude if latitude is not None else constants.DEFAULT_LATITUDE
    longitude = longitude if longitude is not None else constants.DEFAULT_LONGITUDE
    hours, azimuth, altitude = day_track(date, latitude, longitude, samples=24 * 60)
    above = altitude > 0.0

    fig = plt.figure(figsize=(12, 5))
    fig.suptitle(f"Sun path {date:%d/%m/%Y} at ({latitude:.2f}, {longitude:.2f})")

    # View 1: Altitude over the day
    ax1 = fig.add_subplot(1, 2, 1)
    ax1.set_title("Altitude (UTC)")
    ax1.plot(hours, altitude, color='orange', linewidth=2)
    ax1.axhline(0.0, color='gray', linestyle='--', linewidth=1)
    ax1.fill_between(hours, altitude, 0.0, where=above, color='gold', alpha=0.3)
    ax1.set_xlim(0, 24)
    ax1.set_ylim(-90, 90)
    ax1.set_xlabel("Hour")
    ax1.set_ylabel("Degrees")

    # View 2: Sky dome, south up, west to the right.
    # Radius is zenith distance so the horizon is the outer circle.
    ax2 = fig.add_subplot(1, 2, 2, projection='polar')
    ax2.set_title("Sky (0 = south)")
    ax2.set_theta_zero_location('N')
    ax2.set_theta_direction(-1)
    ax2.set_rlim(0, 90)
    ax2.set_yticks([30, 60, 90])
    ax2.set_yticklabels(["60°", "30°", "0°"])
    ax2.scatter(np.deg2rad(azimuth[above]), 90.0 - altitude[above],
                c=hours[above], cmap='plasma', s=4)

    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    fig.savefig(output_path, dpi=100)
    plt.close(fig)
    print(f"Saved sun path to {output_path}")
    return output_path


if __name__ == "__main__":
    create_visualization()
