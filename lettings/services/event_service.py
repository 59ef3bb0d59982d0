"""
Domain event publishing over Redis pub/sub.

Events are one-way notifications: publishing never blocks the caller and
delivery failures are logged, never raised.
"""

import json
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Optional

import redis
from redis.exceptions import RedisError, ConnectionError, TimeoutError
from flask import Flask, current_app

logger = logging.getLogger(__name__)

TENANT_CREATED_TOPIC = 'property.tenant.created'


def serialize_event(payload: Any) -> str:
    """Serialize an event payload to JSON (Decimals as strings)."""
    def default_handler(obj: Any) -> Any:
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        elif isinstance(obj, Decimal):
            return str(obj)
        raise TypeError(f"Object of type {type(obj)} is not JSON serializable")
    return json.dumps(payload, default=default_handler)


class EventPublisher:
    """One-way notification port."""

    def send(self, topic: str, payload: Dict[str, Any]) -> None:
        raise NotImplementedError


class NullEventPublisher(EventPublisher):
    """Drops every event. Used when events are disabled."""

    def send(self, topic: str, payload: Dict[str, Any]) -> None:
        logger.debug(f"[EVENTS] Disabled, dropping event on {topic}")


class RedisEventPublisher(EventPublisher):
    """
    Publishes events on Redis channels from a background thread pool.

    Channel name: {prefix}{topic}
    """

    def __init__(self, client: redis.Redis, prefix: str = '', max_workers: int = 2):
        self.client = client
        self._prefix = prefix
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix='events')

    def channel(self, topic: str) -> str:
        return f"{self._prefix}{topic}"

    def send(self, topic: str, payload: Dict[str, Any]) -> Optional[Future]:
        """Queue the event for publishing and return immediately."""
        try:
            message = serialize_event(payload)
        except TypeError as e:
            logger.error(f"[EVENTS] ✗ Cannot serialize event for {topic}: {e}")
            return None
        return self._executor.submit(self._publish, self.channel(topic), message)

    def _publish(self, channel: str, message: str) -> int:
        try:
            receivers = self.client.publish(channel, message)
            logger.info(f"[EVENTS] ✓ Published on {channel} ({receivers} subscribers)")
            return receivers
        except RedisError as e:
            logger.warning(f"[EVENTS] ✗ Publish to {channel} failed: {e}")
            return 0

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)


def connect_redis(redis_url: str) -> redis.Redis:
    """Open a Redis client and check it answers."""
    client = redis.from_url(
        redis_url,
        decode_responses=True,
        socket_connect_timeout=3,
        socket_keepalive=True,
        retry_on_timeout=True,
        health_check_interval=30
    )
    client.ping()
    return client


def init_events(app: Flask) -> EventPublisher:
    """Build the event publisher from app config."""
    redis_url = app.config.get('REDIS_URL', 'redis://redis:6379/0')

    if not app.config.get('EVENTS_ENABLED', True):
        logger.info("[EVENTS] Events are DISABLED via config")
        publisher = NullEventPublisher()
    else:
        try:
            client = connect_redis(redis_url)
            publisher = RedisEventPublisher(
                client,
                prefix=app.config.get('EVENTS_CHANNEL_PREFIX', ''),
                max_workers=app.config.get('EVENTS_MAX_WORKERS', 2)
            )
            logger.info(f"[EVENTS] ✓ Redis connected: {redis_url}")
        except (ConnectionError, TimeoutError, RedisError) as e:
            logger.warning(f"[EVENTS] ⚠ Redis connection failed: {e}. Events DISABLED.")
            publisher = NullEventPublisher()

    if not hasattr(app, 'extensions'):
        app.extensions = {}
    app.extensions['events'] = publisher
    return publisher


def get_publisher() -> EventPublisher:
    """Get the event publisher of the current app."""
    publisher = current_app.extensions.get('events')
    if publisher is None:
        raise RuntimeError("Events not initialized.")
    return publisher
