from datetime import datetime

import pytest

from sun_control.weather import WeatherSync


def test_attach_syncs_current_instant(controller, recorder):
    sync = WeatherSync(recorder)
    sync.attach(controller)
    assert recorder.calls == [controller.get_instant()]
    assert sync.attached


def test_only_changed_instants_are_forwarded(controller, recorder):
    sync = WeatherSync(recorder)
    sync.attach(controller)

    controller.set_instant(controller.get_instant())
    assert len(recorder.calls) == 1

    controller.advance(10)
    assert recorder.calls[-1] == datetime(1996, 10, 11, 12, 40)
    assert sync.last_instant == controller.get_instant()


def test_detach_stops_forwarding(controller, recorder):
    sync = WeatherSync(recorder)
    sync.attach(controller)
    sync.detach()
    controller.advance(10)
    assert len(recorder.calls) == 1
    assert not sync.attached


def test_attach_twice_is_an_error(controller, recorder):
    sync = WeatherSync(recorder)
    sync.attach(controller)
    with pytest.raises(RuntimeError):
        sync.attach(controller)


def test_sync_reports_whether_target_was_called(recorder):
    sync = WeatherSync(recorder)
    instant = datetime(2024, 1, 1)
    assert sync.sync(instant) is True
    assert sync.sync(instant) is False
    assert recorder.calls == [instant]
