"""API clients package for the ClickUp migration."""

from clickup_migration.clients.clickup_client import ClickUpClient

__all__ = ["ClickUpClient"]
