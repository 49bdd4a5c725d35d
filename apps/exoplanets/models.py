from django.db import models

from apps.common.constants import (
    DAYS_PER_YEAR,
    EARTH_SIZED_MAX_RADIUS,
    EARTH_SIZED_MIN_RADIUS,
    HABITABLE_MAX_TEMPERATURE,
    HABITABLE_MIN_TEMPERATURE,
)
from apps.common.models import BaseModel


class ExoplanetQuerySet(models.QuerySet):
    def by_name(self, name: str):
        """Case-insensitive exact lookup, ``None`` when there is no match."""
        return self.filter(name__iexact=name).first()

    def in_temperature_range(self, min_temp, max_temp):
        return self.filter(temperature__gte=min_temp, temperature__lte=max_temp)

    def potentially_habitable(self):
        return self.in_temperature_range(HABITABLE_MIN_TEMPERATURE, HABITABLE_MAX_TEMPERATURE)

    def earth_sized(self):
        return self.filter(radius__gte=EARTH_SIZED_MIN_RADIUS, radius__lte=EARTH_SIZED_MAX_RADIUS)

    def discovered_in(self, year: int):
        return self.filter(year_discovered=year)

    def count_in_temperature_range(self, min_temp, max_temp) -> int:
        return self.in_temperature_range(min_temp, max_temp).count()


class Exoplanet(BaseModel):
    id = models.AutoField(primary_key=True)
    name = models.CharField(max_length=255, unique=True)
    image_url = models.URLField(max_length=500, blank=True, null=True)
    distance = models.FloatField(null=True, blank=True)
    temperature = models.FloatField(null=True, blank=True)
    year_discovered = models.IntegerField(null=True, blank=True)
    radius = models.FloatField(null=True, blank=True)
    mass = models.FloatField(null=True, blank=True)
    semi_major_axis = models.FloatField(null=True, blank=True)
    eccentricity = models.FloatField(null=True, blank=True)
    orbital_period_days = models.FloatField(null=True, blank=True)
    orbital_period_years = models.FloatField(null=True, blank=True)

    objects = ExoplanetQuerySet.as_manager()

    class Meta:
        db_table = "exoplanet"
        ordering = ["-id"]
        indexes = [
            models.Index(fields=["temperature"], name="exoplanet_temperature_idx"),
            models.Index(fields=["year_discovered"], name="exoplanet_year_idx"),
        ]

    def __str__(self):
        return self.name

    def is_potentially_habitable(self) -> bool:
        return (
            self.temperature is not None
            and HABITABLE_MIN_TEMPERATURE <= self.temperature <= HABITABLE_MAX_TEMPERATURE
        )

    def calculate_travel_time(self, speed_in_light_years):
        if self.distance is None or speed_in_light_years is None or speed_in_light_years <= 0:
            return None
        return self.distance / speed_in_light_years

    @property
    def formatted_orbital_period(self) -> str:
        if self.orbital_period_days is None:
            return "Unknown"
        if self.orbital_period_days < 100:
            return f"{self.orbital_period_days:.1f} days"
        return f"{self.orbital_period_days / DAYS_PER_YEAR:.1f} years"
