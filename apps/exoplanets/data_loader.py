"""Sample data for local environments and demos."""

import logging
import random

from django.db import transaction

from apps.exoplanets.builders import ExoplanetBuilder
from apps.exoplanets.models import Exoplanet
from apps.exoplanets.services import evict_exoplanet_caches

logger = logging.getLogger(__name__)

RANDOM_EXOPLANET_COUNT = 500

HABITABLE_SAMPLE_NAMES = (
    "Kepler-186f",
    "Kepler-442b",
    "Kepler-62f",
    "Kepler-1649c",
    "TRAPPIST-1e",
    "TRAPPIST-1f",
    "Proxima Centauri b",
    "TOI-700d",
    "Teegarden's Star b",
    "K2-18b",
    "WASP-12b",
    "Wolf 1061c",
)


def _picsum(seed: str) -> str:
    return f"https://picsum.photos/seed/{seed}/200"


def _random_exoplanet(index: int, rng: random.Random) -> Exoplanet:
    return (
        ExoplanetBuilder()
        .with_name(f"ExoTest-{index}")
        .with_distance(rng.uniform(0, 5000))
        .with_temperature(rng.uniform(50, 500))
        .with_image(_picsum(f"exotest{index}"))
        .with_year_discovered(rng.randint(1995, 2022))
        .with_radius(rng.uniform(0.5, 10.5))
        .with_mass(rng.uniform(0.1, 20.1))
        .with_semi_major_axis(rng.uniform(0.05, 50.05))
        .with_eccentricity(rng.uniform(0, 0.5))
        .with_orbital_period_days(rng.uniform(1, 1001))
        .build()
    )


def _habitable_exoplanet(name: str, rng: random.Random) -> Exoplanet:
    return (
        ExoplanetBuilder()
        .with_name(name)
        .with_distance(rng.uniform(1, 201))
        .with_temperature(rng.uniform(180, 310))
        .with_image(_picsum(name.replace("'", "").replace(" ", "")))
        .with_year_discovered(rng.randint(2000, 2022))
        .with_radius(rng.uniform(0.5, 2.5))
        .with_mass(rng.uniform(0.5, 3.5))
        .with_semi_major_axis(rng.uniform(0.5, 2.5))
        .with_eccentricity(rng.uniform(0, 0.2))
        .with_orbital_period_days(rng.uniform(100, 500))
        .build()
    )


def _insert_missing(exoplanets: list[Exoplanet]) -> int:
    names = [exoplanet.name for exoplanet in exoplanets]
    existing = set(Exoplanet.objects.filter(name__in=names).values_list("name", flat=True))
    new = [exoplanet for exoplanet in exoplanets if exoplanet.name not in existing]
    Exoplanet.objects.bulk_create(new, batch_size=100)
    evict_exoplanet_caches()
    return len(new)


@transaction.atomic
def insert_random_exoplanets(count: int = RANDOM_EXOPLANET_COUNT, seed=None) -> int:
    """Insert ``ExoTest-1`` .. ``ExoTest-<count>``; names already present are left alone."""
    rng = random.Random(seed)
    inserted = _insert_missing([_random_exoplanet(i, rng) for i in range(1, count + 1)])
    logger.info("Inserted %s random test exoplanets", inserted)
    return inserted


@transaction.atomic
def insert_habitable_exoplanets(seed=None) -> int:
    rng = random.Random(seed)
    inserted = _insert_missing([_habitable_exoplanet(name, rng) for name in HABITABLE_SAMPLE_NAMES])
    logger.info("Inserted %s sample habitable exoplanets", inserted)
    return inserted


@transaction.atomic
def clear_exoplanets() -> int:
    _, per_model = Exoplanet.objects.all().delete()
    deleted = per_model.get(Exoplanet._meta.label, 0)
    evict_exoplanet_caches()
    logger.info("Cleared all exoplanet data")
    return deleted
