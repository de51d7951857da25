"""Redis cache service implementation."""

import logging

import redis

from smart_minutes.exceptions import CacheServiceError

from .interfaces import CacheService

logger = logging.getLogger(__name__)


class RedisCacheService(CacheService):
    """Cache service implementation using Redis, with keys under a namespace."""

    def __init__(self, client: redis.Redis, ttl_seconds: int, namespace: str = "minutes"):
        self._client = client
        self._ttl_seconds = ttl_seconds
        self._namespace = namespace

    def _key(self, key: str) -> str:
        return f"{self._namespace}:{key}"

    def get(self, key: str) -> str | None:
        try:
            value = self._client.get(self._key(key))
        except redis.RedisError as e:
            logger.exception("Redis get failed", extra={"key": key})
            raise CacheServiceError(key, "get", cause=e) from e

        logger.info("Cache lookup", extra={"key": key, "hit": value is not None})
        return value

    def set(self, key: str, value: str) -> None:
        try:
            self._client.set(self._key(key), value, ex=self._ttl_seconds)
        except redis.RedisError as e:
            logger.exception("Redis set failed", extra={"key": key})
            raise CacheServiceError(key, "set", cause=e) from e

        logger.info("Cache set", extra={"key": key, "ttl": self._ttl_seconds})
