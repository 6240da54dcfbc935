"""Часто используемые часовые пояса США.

Пояса из §71.1 49 CFR (Standard time zone boundaries):
https://www.gpo.gov/fdsys/pkg/CFR-2010-title49-vol1/pdf/CFR-2010-title49-vol1-part71.pdf

Все пояса загружаются один раз при импорте модуля. Набор фиксирован,
поэтому неизвестное имя — ошибка конфигурации: импорт прерывается
с TimezoneRegistryError.
"""

import logging
from types import MappingProxyType
from typing import Final, Mapping
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)


class TimezoneRegistryError(Exception):
    """Пояс не найден в базе tz или имя некорректно."""
    pass


def must_load(zone: str) -> ZoneInfo:
    """
    Загрузка пояса по IANA-имени.

    Args:
        zone: Имя пояса, например 'America/New_York'

    Returns:
        ZoneInfo

    Raises:
        TimezoneRegistryError: Если пояс не найден или имя некорректно
    """
    try:
        loc = ZoneInfo(zone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise TimezoneRegistryError(f"Cannot load timezone {zone!r}: {e}") from e
    logger.debug(f"Loaded timezone {zone}")
    return loc


ATLANTIC: Final[ZoneInfo] = must_load("America/Puerto_Rico")
EASTERN: Final[ZoneInfo] = must_load("America/New_York")
CENTRAL: Final[ZoneInfo] = must_load("America/Chicago")
MOUNTAIN: Final[ZoneInfo] = must_load("America/Denver")
PACIFIC: Final[ZoneInfo] = must_load("America/Los_Angeles")
ALASKA: Final[ZoneInfo] = must_load("America/Anchorage")
HAWAII_ALEUTIAN: Final[ZoneInfo] = must_load("America/Adak")
SAMOA: Final[ZoneInfo] = must_load("Pacific/Pago_Pago")
CHAMORRO: Final[ZoneInfo] = must_load("Pacific/Guam")

# Только для чтения
ZONES: Final[Mapping[str, ZoneInfo]] = MappingProxyType(
    {
        "Atlantic": ATLANTIC,
        "Eastern": EASTERN,
        "Central": CENTRAL,
        "Mountain": MOUNTAIN,
        "Pacific": PACIFIC,
        "Alaska": ALASKA,
        "HawaiiAleutian": HAWAII_ALEUTIAN,
        "Samoa": SAMOA,
        "Chamorro": CHAMORRO,
    }
)


def lookup(name: str) -> ZoneInfo:
    """
    Пояс по имени из реестра ('Eastern', 'Pacific', ...).

    Raises:
        TimezoneRegistryError: Если имени нет в реестре
    """
    try:
        return ZONES[name]
    except KeyError:
        raise TimezoneRegistryError(
            f"Unknown timezone name {name!r}, expected one of {sorted(ZONES)}"
        ) from None
