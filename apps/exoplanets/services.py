import logging

from django.conf import settings
from django.db import IntegrityError, transaction
from rest_framework.exceptions import ValidationError

from apps.common import cache
from apps.common.constants import DAYS_PER_YEAR
from apps.common.exceptions import ResourceNotFoundError
from apps.exoplanets.builders import ExoplanetBuilder
from apps.exoplanets.clients import ExternalExoplanetClient
from apps.exoplanets.enrichment import create_fully_featured, create_with_habitability
from apps.exoplanets.filters import ExoplanetFilter
from apps.exoplanets.images import get_image_service
from apps.exoplanets.models import Exoplanet
from apps.exoplanets.paginators import paginate
from apps.exoplanets.serializers import ExoplanetSummarySerializer

logger = logging.getLogger(__name__)

FILTER_PARAMS = ("name", "min_temp", "max_temp", "min_distance", "max_distance", "min_year", "max_year")


def _actor_name(actor) -> str | None:
    return getattr(actor, "email", None) or None


def evict_exoplanet_caches():
    # Favorites embed exoplanet rows, so they go stale with any exoplanet write.
    cache.evict_all(cache.EXOPLANET_SUMMARIES, cache.EXOPLANET_DETAILS, cache.USER_FAVORITES)


def get_summaries(filters=None, page=None, page_size=None) -> dict:
    filters = {key: filters[key] for key in FILTER_PARAMS if filters and filters.get(key) not in (None, "")}
    key_parts = [f"{key}={filters[key]}" for key in sorted(filters)] + [f"page={page}", f"size={page_size}"]

    def compute():
        logger.info("Loading exoplanet summaries (filters=%s, page=%s, size=%s)", filters, page, page_size)
        filterset = ExoplanetFilter(filters, queryset=Exoplanet.objects.order_by("-id"))
        if not filterset.is_valid():
            raise ValidationError({field: list(errors) for field, errors in filterset.errors.items()})
        return paginate(
            filterset.qs.only("id", "name", "image_url"),
            page,
            page_size,
            serialize=lambda items: [dict(row) for row in ExoplanetSummarySerializer(items, many=True).data],
        )

    return cache.cached(cache.EXOPLANET_SUMMARIES, key_parts, compute)


def get_all():
    return Exoplanet.objects.order_by("-id")


def get_by_id(exoplanet_id) -> Exoplanet:
    try:
        return Exoplanet.objects.get(pk=exoplanet_id)
    except Exoplanet.DoesNotExist as err:
        raise ResourceNotFoundError(f"Exoplanet not found with id: {exoplanet_id}") from err


def _detail(exoplanet: Exoplanet, speed_fraction: float) -> dict:
    enriched = create_fully_featured(exoplanet, speed_fraction)
    return {
        "id": exoplanet.id,
        "name": exoplanet.name,
        "image_url": exoplanet.image_url,
        "distance": exoplanet.distance,
        "temperature": exoplanet.temperature,
        "year_discovered": exoplanet.year_discovered,
        "radius": exoplanet.radius,
        "mass": exoplanet.mass,
        "semi_major_axis": exoplanet.semi_major_axis,
        "eccentricity": exoplanet.eccentricity,
        "orbital_period_days": exoplanet.orbital_period_days,
        "orbital_period_years": exoplanet.orbital_period_years,
        "potentially_habitable": enriched.is_potentially_habitable,
        "earth_size_comparison": enriched.radius_compared_to_earth,
        "earth_mass_comparison": enriched.mass_compared_to_earth,
        "travel_time_years": enriched.travel_time_years,
        "travel_speed_fraction": speed_fraction,
        "description": enriched.description,
    }


def get_details(exoplanet_id) -> dict:
    """Fully enriched view of one exoplanet, cached until the next exoplanet write."""

    def compute():
        logger.info("Building enriched details for exoplanet %s", exoplanet_id)
        return _detail(get_by_id(exoplanet_id), settings.EXOPLANET_TRAVEL_SPEED_FRACTION)

    return cache.cached(cache.EXOPLANET_DETAILS, [exoplanet_id], compute)


def get_habitable():
    return [create_with_habitability(exoplanet) for exoplanet in Exoplanet.objects.potentially_habitable()]


@transaction.atomic
def create(data: dict, actor=None) -> Exoplanet:
    exoplanet = ExoplanetBuilder().with_fields(**data).build()
    exoplanet.created_by = exoplanet.updated_by = _actor_name(actor)
    exoplanet.save()
    logger.info("Created exoplanet %s (id=%s)", exoplanet.name, exoplanet.id)
    evict_exoplanet_caches()
    return exoplanet


@transaction.atomic
def update(exoplanet_id, data: dict, actor=None) -> Exoplanet:
    existing = get_by_id(exoplanet_id)
    exoplanet = ExoplanetBuilder().from_exoplanet(existing).with_id(existing.id).with_fields(**data).build()
    exoplanet.updated_by = _actor_name(actor)
    exoplanet.save()
    logger.info("Updated exoplanet %s (id=%s, version=%s)", exoplanet.name, exoplanet.id, exoplanet.version)
    evict_exoplanet_caches()
    return exoplanet


@transaction.atomic
def delete(exoplanet_id):
    exoplanet = get_by_id(exoplanet_id)
    exoplanet.delete()
    logger.info("Deleted exoplanet %s", exoplanet_id)
    evict_exoplanet_caches()


def refresh_exoplanet_data(client: ExternalExoplanetClient | None = None) -> dict:
    """
    Upsert the archive's planets by case-insensitive name.

    Known planets keep their id and image; new ones get an image from the
    bundled catalog when it has one. A row that violates a constraint is
    logged and skipped.
    """
    client = client or ExternalExoplanetClient()
    records = client.fetch_exoplanet_data()
    images = get_image_service()
    created = updated = 0

    for record in records:
        existing = Exoplanet.objects.by_name(record.name)
        years = record.orbital_period_days / DAYS_PER_YEAR if record.orbital_period_days is not None else None
        builder = ExoplanetBuilder()
        if existing is not None:
            builder.from_exoplanet(existing)
        else:
            builder.with_name(record.name).with_image(images.get_image_url(record.name))
        exoplanet = (
            builder.with_radius(record.radius)
            .with_mass(record.mass)
            .with_distance(record.distance)
            .with_orbital_period_days(record.orbital_period_days)
            .with_orbital_period_years(years)
            .with_temperature(record.temperature)
            .build()
        )
        try:
            with transaction.atomic():
                exoplanet.save()
        except IntegrityError as err:
            logger.error("Skipping exoplanet %s: %s", record.name, err)
            continue
        if existing is not None:
            updated += 1
        else:
            created += 1

    evict_exoplanet_caches()
    logger.info("Exoplanet refresh done: %s created, %s updated", created, updated)
    return {"created": created, "updated": updated}
