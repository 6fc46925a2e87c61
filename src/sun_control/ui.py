import gradio as gr

from sun_control import constants
from sun_control.controller import DateParseError, SunController
from sun_control.models import Direction, FixedCardinal, GeoCoordinate
from sun_control.overlay import render_overlay

CSS = """
.gradio-container { background-color: #0b0f19 !important; color: #e5e7eb !important; }
#output_img { background-color: #0b0f19 !important; border-radius: 8px; overflow: hidden; border: none !important; }
#output_img img { object-fit: contain; }
"""

DEFAULT_DATE_TEXT = f"{constants.DEFAULT_DAY}.{constants.DEFAULT_MONTH}.{constants.DEFAULT_YEAR}"
DEFAULT_FRACTION = (constants.DEFAULT_HOUR * 60 + constants.DEFAULT_MINUTE) / constants.LAST_MINUTE_OF_DAY


def render_frame(date_text, fraction, latitude, longitude, direction, fine_tune):
    """Build a controller from the widget values and render its overlay."""
    latitude = latitude if latitude is not None else constants.DEFAULT_LATITUDE
    longitude = longitude if longitude is not None else constants.DEFAULT_LONGITUDE
    try:
        location = GeoCoordinate(latitude, longitude)
        offset = FixedCardinal(Direction(direction), fine_tune % 360.0)
    except (TypeError, ValueError) as err:
        raise gr.Error(str(err)) from err

    controller = SunController(location=location, offset=offset)
    try:
        controller.set_from_text(date_text)
    except DateParseError as err:
        raise gr.Error(str(err)) from err
    controller.set_by_day_fraction(fraction)

    state = controller.state
    image = render_overlay(state.instant, state)
    info = (f"**Azimuth** {state.position.azimuth:.2f}° · "
            f"**Altitude** {state.position.altitude:.2f}° · "
            f"**Scene heading** {state.heading:.2f}°")
    return image, info


def create_ui():

    with gr.Blocks(title="Sun Control") as demo:

        gr.Markdown("# Sun Control: Time of Day Preview")
        gr.Markdown("Position a virtual sun from a simulated date, time and location.")

        with gr.Row():
            with gr.Column(scale=1):
                with gr.Group():
                    gr.Markdown("### 📅 Date & Time")
                    date_box = gr.Textbox(value=DEFAULT_DATE_TEXT, label="Date", info="Day, month, year separated by space . / or -")
                    time_slider = gr.Slider(minimum=0, maximum=1, value=DEFAULT_FRACTION, step=0.001, label="Time of Day", info="0 = 00:00, 1 = 23:59")

                with gr.Group():
                    gr.Markdown("### 🌍 Location")
                    lat_box = gr.Number(value=constants.DEFAULT_LATITUDE, label="Latitude", minimum=-90, maximum=90)
                    lon_box = gr.Number(value=constants.DEFAULT_LONGITUDE, label="Longitude", minimum=-180, maximum=180)

                with gr.Group():
                    gr.Markdown("### 🧭 Scene Orientation")
                    direction_dd = gr.Dropdown(choices=[d.value for d in Direction], value=Direction.POSITIVE_X.value, label="Sunrise Direction")
                    fine_slider = gr.Slider(minimum=0, maximum=359.9, value=0, step=0.1, label="Rotation Offset", info="Degrees added to the sunrise direction")

            with gr.Column(scale=2):
                output_img = gr.Image(label="Sky", interactive=False, elem_id="output_img")
                output_info = gr.Markdown()

        inputs = [date_box, time_slider, lat_box, lon_box, direction_dd, fine_slider]
        outputs = [output_img, output_info]

        # Auto-render on any change
        for input_comp in inputs:
            input_comp.change(fn=render_frame, inputs=inputs, outputs=outputs,
                              trigger_mode="always_last", show_progress="hidden")

        # Initial render
        demo.load(fn=render_frame, inputs=inputs, outputs=outputs, show_progress="hidden")

    return demo


if __name__ == "__main__":
    demo = create_ui()
    demo.launch(css=CSS)
