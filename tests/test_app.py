from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP = str(Path(__file__).resolve().parent.parent / "jerseyshop.py")


@pytest.fixture
def app():
    at = AppTest.from_file(APP, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def bag_names(at):
    return [p.name for p in at.session_state["store"].in_bag()]


def test_catalog_renders_without_summary(app):
    assert len(app.session_state["store"]) == 9
    assert app.button(key="toggle_1").label == "Add to bag"
    assert len(app.table) == 0
    assert "Order Details" not in [s.value for s in app.subheader]


def test_toggle_shows_summary(app):
    app.button(key="toggle_1").click().run()
    assert bag_names(app) == ["Real Madrid"]
    assert app.button(key="toggle_1").label == "Remove from bag"
    assert "Order Details" in [s.value for s in app.subheader]
    assert len(app.table) == 1
    assert app.metric[0].value == "$359.97"


def test_quantity_controls_are_disabled(app):
    app.button(key="toggle_1").click().run()
    assert app.button(key="dec_1").disabled
    assert app.button(key="inc_1").disabled
    assert any("Qty: **3**" in m.value for m in app.markdown)


def test_two_products_total(app):
    app.button(key="toggle_1").click().run()
    app.button(key="toggle_2").click().run()
    assert bag_names(app) == ["Real Madrid", "Milan"]
    assert app.metric[0].value == "$459.96"


def test_toggle_twice_hides_summary(app):
    app.button(key="toggle_1").click().run()
    app.button(key="toggle_1").click().run()
    assert bag_names(app) == []
    assert len(app.table) == 0
    assert app.session_state["store"].version == 2
