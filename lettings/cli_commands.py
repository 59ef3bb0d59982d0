"""
Flask CLI commands.

Commands:
- flask init-db: Create database tables
- flask listen-tenant-events: Log every tenant-created event
"""

import logging
import time

import click
from flask import current_app
from redis.exceptions import RedisError

from lettings.database import create_all
from lettings.services.event_service import TENANT_CREATED_TOPIC, connect_redis

logger = logging.getLogger(__name__)


def connect_with_retry(redis_url, attempts, delay, sleep=time.sleep):
    """Connect to Redis, retrying `attempts` times with `delay` seconds between tries."""
    for attempt in range(1, attempts + 1):
        logger.info(f"[WORKER] Attempt {attempt}...")
        try:
            return connect_redis(redis_url)
        except RedisError as e:
            if attempt == attempts:
                raise click.ClickException(f'All {attempts} retries failed: {e}')
            logger.warning(f"[WORKER] Connection failed: {e}")
            sleep(delay)


def listen(pubsub, max_messages=None):
    """Log messages from a subscribed pubsub until max_messages are seen."""
    received = 0
    for message in pubsub.listen():
        if message.get('type') != 'message':
            continue
        logger.info(f"[WORKER] Received: {message['data']}")
        click.echo(f"Received: {message['data']}")
        received += 1
        if max_messages is not None and received >= max_messages:
            break
    return received


def init_cli_commands(app):
    """Register CLI commands with Flask app."""

    @app.cli.command('init-db')
    def init_db_command():
        """Create all database tables."""
        create_all()
        click.echo(click.style('✅ Database tables created', fg='green'))

    @app.cli.command('listen-tenant-events')
    @click.option('--max-messages', type=int, default=None, help='Stop after N messages')
    def listen_tenant_events(max_messages):
        """Subscribe to tenant-created events and log them."""
        cfg = current_app.config
        client = connect_with_retry(
            cfg['REDIS_URL'],
            cfg.get('EVENTS_CONNECT_RETRIES', 5),
            cfg.get('EVENTS_RETRY_DELAY', 2)
        )
        click.echo('Connected successfully!')

        channel = f"{cfg.get('EVENTS_CHANNEL_PREFIX', '')}{TENANT_CREATED_TOPIC}"
        pubsub = client.pubsub()
        pubsub.subscribe(channel)
        click.echo(f'[*] Waiting for new messages on {channel}')
        try:
            listen(pubsub, max_messages)
        finally:
            pubsub.close()
