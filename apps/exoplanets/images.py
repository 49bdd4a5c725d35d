import json
import logging
from functools import lru_cache

from django.conf import settings

logger = logging.getLogger(__name__)


class ExoplanetImageService:
    """Maps exoplanet names to illustration URLs from the bundled catalog file."""

    def __init__(self, path=None):
        self.path = path or settings.EXOPLANET_IMAGES_FILE
        self._images = self._load()

    def _load(self) -> dict[str, str]:
        try:
            with open(self.path, encoding="utf-8") as fh:
                mappings = json.load(fh)
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as err:
            logger.error("Error loading exoplanet images from %s: %s", self.path, err)
            return {}

        if not isinstance(mappings, list):
            logger.error("Exoplanet image file %s must hold a list of mappings", self.path)
            return {}

        images = {}
        for mapping in mappings:
            if not isinstance(mapping, dict):
                logger.warning("Skipping malformed exoplanet image mapping: %r", mapping)
                continue
            if mapping.get("name") and mapping.get("image"):
                images[mapping["name"]] = mapping["image"]
        logger.info("Loaded %s exoplanet image mappings", len(images))
        return images

    def __len__(self):
        return len(self._images)

    def get_image_url(self, exoplanet_name: str) -> str | None:
        url = self._images.get(exoplanet_name)
        if url is not None:
            return url
        lowered = exoplanet_name.lower()
        for name, image in self._images.items():
            if name.lower() == lowered:
                return image
        return None


@lru_cache(maxsize=1)
def get_image_service() -> ExoplanetImageService:
    return ExoplanetImageService()
