"""Unit tests for JinjaResultsRenderer."""

import pytest
from markupsafe import Markup

from safequote.adapters.outbound.rendering.jinja_results_renderer import (
    JinjaResultsRenderer,
    escape_html,
)
from safequote.application.dtos.vehicle import Vehicle
from safequote.application.use_cases.vehicle_card_presenter import VehicleCardPresenter


@pytest.fixture
def renderer() -> JinjaResultsRenderer:
    """Create renderer."""
    return JinjaResultsRenderer()


def _render(renderer: JinjaResultsRenderer, *vehicles: Vehicle) -> str:
    return renderer.render(VehicleCardPresenter().present_all(list(vehicles)))


def test_empty_results_render_single_placeholder(renderer):
    """Test an empty list renders exactly one placeholder."""
    html = renderer.render([])

    assert html.count("vehicle-results-empty") == 1
    assert "No vehicles found" in html
    assert "vehicle-card" not in html


def test_camry_card_markup(renderer):
    """Test title, stars and crash block of a rated vehicle."""
    html = _render(
        renderer,
        Vehicle(
            id=1,
            year=2024,
            make="Toyota",
            model="Camry",
            type="Sedan",
            safety_rating=5,
            front_crash=4.6,
        ),
    )

    assert ">2024 Toyota Camry</h3>" in html
    assert html.count("safety-star-filled") == 5
    assert "safety-star-empty" not in html
    assert "Front Crash: 4.6" in html
    assert "Sedan" in html


def test_three_star_markup(renderer):
    """Test rating 3 renders 3 filled and 2 empty stars."""
    html = _render(renderer, Vehicle(year=2023, make="Kia", model="Soul", safety_rating=3))

    assert html.count("safety-star-filled") == 3
    assert html.count("safety-star-empty") == 2


def test_unrated_markup_shows_no_rating(renderer):
    """Test rating 0 renders 'No Rating' and no stars."""
    html = _render(renderer, Vehicle(year=2023, make="Kia", model="Soul", safety_rating=0))

    assert "No Rating" in html
    assert "safety-star" not in html
    assert "crash-ratings" not in html


def test_image_or_placeholder(renderer):
    """Test an image is used when present, otherwise a grey block."""
    with_image = _render(renderer, Vehicle(model="A", vehicle_picture="https://cdn.test/a.jpg"))
    without_image = _render(renderer, Vehicle(model="B"))

    assert 'src="https://cdn.test/a.jpg"' in with_image
    assert "vehicle-card-placeholder" not in with_image
    assert "vehicle-card-placeholder" in without_image
    assert "<img" not in without_image


def test_title_is_escaped(renderer):
    """Test the five HTML special characters are escaped in the title."""
    html = _render(renderer, Vehicle(year=2024, make="O'Brien & Sons <Motors>", model="X"))

    assert "2024 O&#039;Brien &amp; Sons &lt;Motors&gt; X" in html
    assert "<Motors>" not in html


def test_attribute_values_are_escaped(renderer):
    """Test quotes cannot break out of attributes."""
    html = _render(renderer, Vehicle(model="M", image='x.jpg" onerror="alert(1)'))

    assert 'src="x.jpg&quot; onerror=&quot;alert(1)"' in html


def test_cards_follow_input_order(renderer):
    """Test cards are not sorted."""
    html = _render(
        renderer,
        Vehicle(year=2020, make="Volvo", model="XC90"),
        Vehicle(year=2024, make="Audi", model="A4"),
    )

    assert html.index("Volvo") < html.index("Audi")


def test_escape_html_entities():
    """Test the escape map."""
    assert str(escape_html("&<>\"'")) == "&amp;&lt;&gt;&quot;&#039;"
    assert str(escape_html(None)) == ""
    assert str(escape_html(5)) == "5"


def test_escape_html_leaves_literal_entities_escaped():
    """Test entity-looking input text is escaped, not rewritten."""
    assert str(escape_html("&#39; &#34;")) == "&amp;#39; &amp;#34;"
    assert str(escape_html(Markup("<b>x</b>"))) == "<b>x</b>"
