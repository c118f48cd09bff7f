from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from btzviz.scene.pipeline import VizMode

APP_PATH = Path(__file__).resolve().parents[1] / "apps" / "dashboard" / "app.py"


@pytest.fixture
def app() -> AppTest:
    at = AppTest.from_file(str(APP_PATH), default_timeout=60)
    at.run()
    assert not at.exception
    return at


def test_mode_radio_switches_back_and_forth(app: AppTest) -> None:
    app.radio(key="mode").set_value(VizMode.POINCARE.value).run()
    assert not app.exception
    assert app.session_state["btz_session"].view.mode is VizMode.POINCARE

    app.radio(key="mode").set_value(VizMode.EMBEDDING.value).run()
    assert not app.exception
    assert app.session_state["btz_session"].view.mode is VizMode.EMBEDDING
    assert app.radio(key="mode").value == VizMode.EMBEDDING.value


def test_time_slider_tracks_every_edit(app: AppTest) -> None:
    app.slider(key="t").set_value(1.0).run()
    assert app.session_state["btz_session"].view.t == pytest.approx(1.0)

    app.slider(key="t").set_value(2.0).run()
    assert not app.exception
    assert app.session_state["btz_session"].view.t == pytest.approx(2.0)
    assert app.slider(key="t").value == pytest.approx(2.0)


def test_time_range_edits_update_slider_bounds(app: AppTest) -> None:
    app.number_input(key="t_min").set_value(-5.0).run()
    assert app.session_state["btz_session"].view.t_min == pytest.approx(-5.0)

    app.number_input(key="t_min").set_value(-6.0).run()
    assert app.session_state["btz_session"].view.t_min == pytest.approx(-6.0)

    app.slider(key="t").set_value(2.0).run()
    app.number_input(key="t_max").set_value(0.5).run()
    assert not app.exception
    view = app.session_state["btz_session"].view
    assert view.t_max == pytest.approx(0.5)
    assert view.t == pytest.approx(0.5)
    assert app.slider(key="t").value == pytest.approx(0.5)


def test_tau_edit_rederives_mass(app: AppTest) -> None:
    app.slider(key="tau").set_value(0.5).run()
    assert not app.exception

    session = app.session_state["btz_session"]
    assert session.params.mass == pytest.approx(4.0)
    assert session.params.tau == pytest.approx(0.5)
    assert app.slider(key="mass").value == pytest.approx(4.0)
