import argparse
import logging
import sys

from sun_control import constants
from sun_control.controller import DateParseError, SunController
from sun_control.models import GeoCoordinate


def run_verification(controller):
    """Print the sun's position every hour of the configured day."""
    print(f"\n--- Sun positions for {controller.get_instant():%d/%m/%Y} "
          f"at ({controller.location.latitude}, {controller.location.longitude}) ---")
    controller.set_by_day_fraction(0.0)
    for hour in range(24):
        state = controller.state
        marker = "*" if state.position.is_above_horizon else " "
        print(f"{state.instant:%H:%M} {marker} azimuth={state.position.azimuth:8.2f}  "
              f"altitude={state.position.altitude:7.2f}")
        if hour < 23:
            controller.advance(60)


def main():
    parser = argparse.ArgumentParser(description="Sun Control CLI")
    parser.add_argument("--ui", action="store_true", help="Launch the interactive Gradio UI")
    parser.add_argument("--track", action="store_true", help="Plot the sun's path for the day")
    parser.add_argument("--verify", action="store_true", help="Print hourly sun positions for the day")
    parser.add_argument("--date", type=str, default=None, help="Date as day.month.year")
    parser.add_argument("--lat", type=float, default=constants.DEFAULT_LATITUDE, help="Latitude in degrees")
    parser.add_argument("--lon", type=float, default=constants.DEFAULT_LONGITUDE, help="Longitude in degrees")
    parser.add_argument("--output", type=str, default="output/sun_path.png", help="Output path for --track")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        controller = SunController(location=GeoCoordinate(args.lat, args.lon))
        if args.date:
            controller.set_from_text(args.date)
    except DateParseError as err:
        parser.error(f"invalid --date: {err}")
    except ValueError as err:
        parser.error(str(err))

    if args.ui:
        from sun_control.ui import create_ui, CSS
        print("Launching UI...")
        demo = create_ui()
        demo.launch(css=CSS)
    elif args.track:
        from sun_control.tools.plot_sun_path import create_visualization
        create_visualization(controller.get_instant(), args.lat, args.lon, args.output)
    elif args.verify:
        run_verification(controller)
    else:
        parser.print_help()


def run_ui():
    """Entry point for sun-control-ui command."""
    sys.argv = [sys.argv[0], "--ui"]
    main()


def run_verify():
    """Entry point for sun-control-verify command."""
    sys.argv = [sys.argv[0], "--verify"] + sys.argv[1:]
    main()


if __name__ == "__main__":
    main()
