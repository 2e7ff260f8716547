"""Read-through cache for company metadata in Redis."""

import json
import logging

import redis

from lead_magnet.config import Settings
from lead_magnet.models.company import CompanyContext

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


class CompanyCache:
    """Stores scraped company metadata keyed by domain.

    Cache errors are logged and treated as misses; the cache never fails a
    lookup. Concurrent misses for the same domain may both scrape.
    """

    def __init__(self, settings: Settings, client: redis.Redis | None = None):
        self.redis = client if client is not None else redis.from_url(settings.redis_url)
        self.ttl = settings.company_cache_ttl_days * SECONDS_PER_DAY

    def _key(self, domain: str) -> str:
        """Generate Redis key for a company domain."""
        return f"company:{domain}"

    def get(self, domain: str) -> CompanyContext | None:
        """Get cached company metadata.

        Returns:
            CompanyContext or None on a miss
        """
        try:
            data = self.redis.get(self._key(domain))
        except redis.RedisError as e:
            logger.warning(f"Company cache read failed for {domain}: {e}")
            return None

        if not data:
            return None

        try:
            return CompanyContext.from_dict(json.loads(data))
        except (ValueError, KeyError) as e:
            logger.warning(f"Discarding corrupt cache entry for {domain}: {e}")
            return None

    def set(self, company: CompanyContext) -> None:
        """Cache company metadata for the configured TTL."""
        try:
            self.redis.setex(
                self._key(company.domain),
                self.ttl,
                json.dumps(company.to_dict()),
            )
        except redis.RedisError as e:
            logger.warning(f"Company cache write failed for {company.domain}: {e}")
