from apps.common.constants import DAYS_PER_YEAR
from apps.exoplanets.models import Exoplanet

EXOPLANET_FIELDS = (
    "name",
    "image_url",
    "distance",
    "temperature",
    "year_discovered",
    "radius",
    "mass",
    "semi_major_axis",
    "eccentricity",
    "orbital_period_days",
    "orbital_period_years",
)


class ExoplanetBuilder:
    """
    Fluent construction of Exoplanet rows.

    ``from_exoplanet`` starts from an existing row so that updates keep its id,
    audit columns and version; ``build`` never saves. Orbital years follow the
    days whenever days are set without years in the same build.
    """

    def __init__(self):
        self._exoplanet = Exoplanet()
        self._assigned = set()

    def from_exoplanet(self, existing: Exoplanet) -> "ExoplanetBuilder":
        self._exoplanet = existing
        return self

    def with_id(self, exoplanet_id) -> "ExoplanetBuilder":
        self._exoplanet.id = exoplanet_id
        self._assigned.add("id")
        return self

    def with_name(self, name) -> "ExoplanetBuilder":
        self._exoplanet.name = name
        self._assigned.add("name")
        return self

    def with_image(self, image_url) -> "ExoplanetBuilder":
        self._exoplanet.image_url = image_url
        self._assigned.add("image_url")
        return self

    def with_distance(self, distance) -> "ExoplanetBuilder":
        self._exoplanet.distance = distance
        self._assigned.add("distance")
        return self

    def with_temperature(self, temperature) -> "ExoplanetBuilder":
        self._exoplanet.temperature = temperature
        self._assigned.add("temperature")
        return self

    def with_year_discovered(self, year) -> "ExoplanetBuilder":
        self._exoplanet.year_discovered = year
        self._assigned.add("year_discovered")
        return self

    def with_radius(self, radius) -> "ExoplanetBuilder":
        self._exoplanet.radius = radius
        self._assigned.add("radius")
        return self

    def with_mass(self, mass) -> "ExoplanetBuilder":
        self._exoplanet.mass = mass
        self._assigned.add("mass")
        return self

    def with_semi_major_axis(self, semi_major_axis) -> "ExoplanetBuilder":
        self._exoplanet.semi_major_axis = semi_major_axis
        self._assigned.add("semi_major_axis")
        return self

    def with_eccentricity(self, eccentricity) -> "ExoplanetBuilder":
        self._exoplanet.eccentricity = eccentricity
        self._assigned.add("eccentricity")
        return self

    def with_orbital_period_days(self, days) -> "ExoplanetBuilder":
        self._exoplanet.orbital_period_days = days
        self._assigned.add("orbital_period_days")
        return self

    def with_orbital_period_years(self, years) -> "ExoplanetBuilder":
        self._exoplanet.orbital_period_years = years
        self._assigned.add("orbital_period_years")
        return self

    def with_fields(self, **fields) -> "ExoplanetBuilder":
        for field, value in fields.items():
            if field not in EXOPLANET_FIELDS:
                raise ValueError(f"Unknown exoplanet field: {field}")
            setattr(self._exoplanet, field, value)
            self._assigned.add(field)
        return self

    def build(self) -> Exoplanet:
        exoplanet = self._exoplanet
        days_given = "orbital_period_days" in self._assigned and "orbital_period_years" not in self._assigned
        if exoplanet.orbital_period_days is not None and (days_given or exoplanet.orbital_period_years is None):
            exoplanet.orbital_period_years = exoplanet.orbital_period_days / DAYS_PER_YEAR
        return exoplanet
