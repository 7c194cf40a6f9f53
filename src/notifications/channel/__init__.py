"""Channel adapter registry.

Provides singleton access to channel adapters. Email goes through SMTP when
SMTP_HOST is configured and to the in-memory fake otherwise.
"""

import os

from notifications.notification.notification import NotificationChannel

_channel_instances: dict[str, object] = {}


def get_channel(channel_type: str):
    """Return the configured channel adapter (singleton per channel type)."""
    if channel_type not in _channel_instances:
        if channel_type != NotificationChannel.EMAIL.value:
            raise ValueError(f"Unknown channel type: {channel_type}")

        if os.getenv("SMTP_HOST"):
            from notifications.channel.smtp_email import SmtpEmailAdapter

            _channel_instances[channel_type] = SmtpEmailAdapter.from_env()
        else:
            from notifications.channel.fake_email import FakeEmailAdapter

            _channel_instances[channel_type] = FakeEmailAdapter()

    return _channel_instances[channel_type]


def set_channel(channel_type: str, adapter) -> None:
    _channel_instances[channel_type] = adapter


def reset_channels():
    """Reset all channel singletons (useful for testing)."""
    _channel_instances.clear()
