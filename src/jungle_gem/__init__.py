"""Jungle Gem Organizer: tabbed task lists with durable storage and a companion server."""

__version__ = "0.1.0"
