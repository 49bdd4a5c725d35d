import pytest

from apps.exoplanets.enrichment import (
    BaseExoplanetComponent,
    EarthComparisonDecorator,
    create_basic,
    create_fully_featured,
    create_with_earth_comparison,
    create_with_habitability,
    create_with_travel_time,
)
from apps.exoplanets.models import Exoplanet


def planet(**fields):
    defaults = {
        "name": "Kepler-Test",
        "distance": 42.0,
        "temperature": 273.0,
        "radius": 1.0,
        "mass": 1.0,
        "orbital_period_days": 365.0,
    }
    defaults.update(fields)
    return Exoplanet(**defaults)


def test_basic_component_copies_fields():
    component = create_basic(planet())
    assert isinstance(component, BaseExoplanetComponent)
    assert component.description == "Exoplanet Kepler-Test"
    assert component.orbital_period == 365.0
    assert component.distance == 42.0


@pytest.mark.parametrize(
    "temperature, habitable",
    [(180.0, True), (310.0, True), (250.0, True), (179.9, False), (310.1, False), (None, False)],
)
def test_habitability_thresholds(temperature, habitable):
    component = create_with_habitability(planet(temperature=temperature))
    assert component.is_potentially_habitable is habitable
    suffix = " (potentially habitable)" if habitable else " (not habitable)"
    assert component.description == "Exoplanet Kepler-Test" + suffix


def test_travel_time_description():
    component = create_with_travel_time(planet(), 0.1)
    assert component.travel_time_years == pytest.approx(420.0)
    assert component.description == (
        "Exoplanet Kepler-Test (estimated travel time: 420.0 years at 10.0% of light speed)"
    )


@pytest.mark.parametrize("distance, fraction", [(None, 0.1), (42.0, 0), (42.0, -0.5)])
def test_travel_time_not_computable(distance, fraction):
    component = create_with_travel_time(planet(distance=distance), fraction)
    assert component.travel_time_years is None
    assert component.description.endswith(" (travel time not computable)")


def test_model_travel_time():
    assert planet(distance=42.0).calculate_travel_time(0.5) == pytest.approx(84.0)


@pytest.mark.parametrize("distance, speed", [(None, 0.5), (42.0, None), (42.0, 0), (42.0, -1.0)])
def test_model_travel_time_not_computable(distance, speed):
    assert planet(distance=distance).calculate_travel_time(speed) is None


@pytest.mark.parametrize(
    "radius, expected",
    [
        (None, "Unknown size"),
        (0, "Unknown size"),
        (1.05, "Similar size to Earth"),
        (2.5, "2.5 times larger than Earth"),
        (0.5, "2.0 times smaller than Earth"),
    ],
)
def test_radius_comparison(radius, expected):
    assert create_with_earth_comparison(planet(radius=radius)).radius_compared_to_earth == expected


@pytest.mark.parametrize(
    "mass, expected",
    [
        (None, "Unknown mass"),
        (0.95, "Similar mass to Earth"),
        (3.0, "3.0 times more massive than Earth"),
        (0.25, "4.0 times less massive than Earth"),
    ],
)
def test_mass_comparison(mass, expected):
    assert create_with_earth_comparison(planet(mass=mass)).mass_compared_to_earth == expected


def test_fully_featured_chain():
    component = create_fully_featured(planet(), 0.1)

    assert isinstance(component, EarthComparisonDecorator)
    # properties of inner decorators are reachable from the outermost one
    assert component.is_potentially_habitable is True
    assert component.travel_time_years == pytest.approx(420.0)
    assert component.name == "Kepler-Test"
    assert component.description == (
        "Exoplanet Kepler-Test (potentially habitable)"
        " (estimated travel time: 420.0 years at 10.0% of light speed)"
        " | Similar size to Earth | Similar mass to Earth"
    )


def test_unknown_attribute_raises():
    component = create_fully_featured(planet(), 0.1)
    with pytest.raises(AttributeError):
        component.does_not_exist  # noqa: B018
