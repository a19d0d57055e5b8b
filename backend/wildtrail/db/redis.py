"""Redis client for the redis storage backend."""

import redis

from wildtrail.config import settings

redis_client: redis.Redis | None = None


def get_redis_client() -> redis.Redis:
    """Get or create the Redis client singleton (lazy init)."""
    global redis_client
    if redis_client is None:
        redis_client = redis.Redis.from_url(settings.REDIS_URL, decode_responses=True)
    return redis_client


def close_redis() -> None:
    """Close the Redis connection if open."""
    global redis_client
    if redis_client is not None:
        redis_client.close()
        redis_client = None
