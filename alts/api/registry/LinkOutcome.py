"""Outcome of resolving a registry entry's link."""

from enum import Enum


class LinkOutcome(str, Enum):
    NO_LINK = "no_link"
    UNCHANGED = "unchanged"
    UPDATED = "updated"
    CREATED = "created"
