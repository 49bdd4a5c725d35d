"""
Read-only enrichment of an already-loaded exoplanet.

A ``BaseExoplanetComponent`` wraps the model row; decorators wrap a component
and add derived facts (habitability, travel time, comparison with Earth) on
top of the wrapped description. Decorators forward every attribute they do
not define to the component they wrap, so the outermost wrapper exposes the
whole chain::

    planet = create_fully_featured(exoplanet, speed_fraction=0.1)
    planet.is_potentially_habitable, planet.travel_time_years, planet.description

Nothing here touches the database.
"""

from apps.common.constants import EARTH_MASS, EARTH_RADIUS, HABITABLE_MAX_TEMPERATURE, HABITABLE_MIN_TEMPERATURE
from apps.exoplanets.models import Exoplanet

EARTH_SIMILARITY_TOLERANCE = 0.1


class ExoplanetComponent:
    """Exposes name, distance, temperature, year_discovered, radius, mass, orbital_period."""

    @property
    def description(self) -> str:
        raise NotImplementedError


class BaseExoplanetComponent(ExoplanetComponent):
    def __init__(self, exoplanet: Exoplanet):
        self.exoplanet = exoplanet
        self.name = exoplanet.name
        self.distance = exoplanet.distance
        self.temperature = exoplanet.temperature
        self.year_discovered = exoplanet.year_discovered
        self.radius = exoplanet.radius
        self.mass = exoplanet.mass
        self.orbital_period = exoplanet.orbital_period_days

    @property
    def description(self) -> str:
        return f"Exoplanet {self.name}"


class ExoplanetDecorator(ExoplanetComponent):
    def __init__(self, decorated: ExoplanetComponent):
        self.decorated = decorated

    def __getattr__(self, item):
        if item == "decorated":
            raise AttributeError(item)
        return getattr(self.decorated, item)

    @property
    def description(self) -> str:
        return self.decorated.description


class HabitabilityDecorator(ExoplanetDecorator):
    @property
    def is_potentially_habitable(self) -> bool:
        temperature = self.temperature
        return temperature is not None and HABITABLE_MIN_TEMPERATURE <= temperature <= HABITABLE_MAX_TEMPERATURE

    @property
    def description(self) -> str:
        suffix = " (potentially habitable)" if self.is_potentially_habitable else " (not habitable)"
        return self.decorated.description + suffix


class TravelTimeDecorator(ExoplanetDecorator):
    def __init__(self, decorated: ExoplanetComponent, speed_fraction: float):
        super().__init__(decorated)
        self.speed_fraction = speed_fraction

    @property
    def travel_time_years(self):
        """Years to reach the planet at ``speed_fraction`` of light speed, ``None`` if unknown."""
        distance = self.distance
        if distance is None or self.speed_fraction is None or self.speed_fraction <= 0:
            return None
        return distance / self.speed_fraction

    @property
    def description(self) -> str:
        travel_time = self.travel_time_years
        if travel_time is None:
            return self.decorated.description + " (travel time not computable)"
        return self.decorated.description + (
            f" (estimated travel time: {travel_time:.1f} years at {self.speed_fraction * 100:.1f}% of light speed)"
        )


class EarthComparisonDecorator(ExoplanetDecorator):
    @property
    def radius_compared_to_earth(self) -> str:
        radius = self.radius
        if radius is None or radius <= 0:
            return "Unknown size"
        if abs(radius - EARTH_RADIUS) < EARTH_SIMILARITY_TOLERANCE:
            return "Similar size to Earth"
        if radius > EARTH_RADIUS:
            return f"{radius / EARTH_RADIUS:.1f} times larger than Earth"
        return f"{EARTH_RADIUS / radius:.1f} times smaller than Earth"

    @property
    def mass_compared_to_earth(self) -> str:
        mass = self.mass
        if mass is None or mass <= 0:
            return "Unknown mass"
        if abs(mass - EARTH_MASS) < EARTH_SIMILARITY_TOLERANCE:
            return "Similar mass to Earth"
        if mass > EARTH_MASS:
            return f"{mass / EARTH_MASS:.1f} times more massive than Earth"
        return f"{EARTH_MASS / mass:.1f} times less massive than Earth"

    @property
    def description(self) -> str:
        return f"{self.decorated.description} | {self.radius_compared_to_earth} | {self.mass_compared_to_earth}"


def create_basic(exoplanet: Exoplanet) -> ExoplanetComponent:
    return BaseExoplanetComponent(exoplanet)


def create_with_habitability(exoplanet: Exoplanet) -> HabitabilityDecorator:
    return HabitabilityDecorator(BaseExoplanetComponent(exoplanet))


def create_with_travel_time(exoplanet: Exoplanet, speed_fraction: float) -> TravelTimeDecorator:
    return TravelTimeDecorator(BaseExoplanetComponent(exoplanet), speed_fraction)


def create_with_earth_comparison(exoplanet: Exoplanet) -> EarthComparisonDecorator:
    return EarthComparisonDecorator(BaseExoplanetComponent(exoplanet))


def create_fully_featured(exoplanet: Exoplanet, speed_fraction: float) -> EarthComparisonDecorator:
    return EarthComparisonDecorator(
        TravelTimeDecorator(
            HabitabilityDecorator(BaseExoplanetComponent(exoplanet)),
            speed_fraction,
        )
    )
