"""Notifier adapters."""

from warden.infrastructure.email.log_notifier import LogNotifier
from warden.infrastructure.email.postmark_notifier import PostmarkNotifier

__all__ = ["LogNotifier", "PostmarkNotifier"]
