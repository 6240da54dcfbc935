"""tz — фиксированный реестр часовых поясов США."""

from .zones import (
    ALASKA,
    ATLANTIC,
    CENTRAL,
    CHAMORRO,
    EASTERN,
    HAWAII_ALEUTIAN,
    MOUNTAIN,
    PACIFIC,
    SAMOA,
    ZONES,
    TimezoneRegistryError,
    lookup,
    must_load,
)

__all__ = [
    "ATLANTIC",
    "EASTERN",
    "CENTRAL",
    "MOUNTAIN",
    "PACIFIC",
    "ALASKA",
    "HAWAII_ALEUTIAN",
    "SAMOA",
    "CHAMORRO",
    "ZONES",
    "TimezoneRegistryError",
    "lookup",
    "must_load",
]
