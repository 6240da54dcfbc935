"""
Тесты для модуля Weekdays

Проверяет:
1. Инвариант: результат всегда приходится на запрошенный день недели
2. n == 0 на целевом дне недели → дата без изменений
3. Монотонность FORWARD / BACKWARD при n >= 1
4. Выбор ближайшего вхождения для EITHER
5. Обёртки next / previous / closest
6. Календарную арифметику для aware datetime
"""

import calendar
import random
from datetime import date, datetime, timedelta

import pytest

from src.core.calendar.weekdays import (
    Direction,
    closest_weekday,
    next_weekday,
    nth_weekday,
    previous_weekday,
)
from src.tz import EASTERN

# 2017-01-04 — среда
WEDNESDAY_JAN4 = date(2017, 1, 4)
# 2017-01-02 — понедельник
MONDAY_JAN2 = date(2017, 1, 2)


# =============================================================================
# БАЗОВЫЕ СЛУЧАИ
# =============================================================================


class TestNthWeekdayGeneralCase:
    """Тесты общего случая (d.weekday() != weekday)"""

    def test_forward_first_occurrence(self) -> None:
        """FORWARD: ближайший понедельник после среды"""
        assert nth_weekday(WEDNESDAY_JAN4, calendar.MONDAY, 1, Direction.FORWARD) == date(2017, 1, 9)

    def test_forward_zero_equals_one(self) -> None:
        """FORWARD: n=0 и n=1 дают одно и то же вхождение"""
        assert nth_weekday(WEDNESDAY_JAN4, calendar.MONDAY, 0, Direction.FORWARD) == date(2017, 1, 9)

    def test_forward_nth_occurrence(self) -> None:
        """FORWARD: каждое следующее n добавляет неделю"""
        assert nth_weekday(WEDNESDAY_JAN4, calendar.MONDAY, 2, Direction.FORWARD) == date(2017, 1, 16)
        assert nth_weekday(WEDNESDAY_JAN4, calendar.FRIDAY, 3, Direction.FORWARD) == date(2017, 1, 20)

    def test_backward_first_occurrence(self) -> None:
        """BACKWARD: ближайший понедельник до среды"""
        assert nth_weekday(WEDNESDAY_JAN4, calendar.MONDAY, 1, Direction.BACKWARD) == date(2017, 1, 2)
        assert nth_weekday(WEDNESDAY_JAN4, calendar.MONDAY, 0, Direction.BACKWARD) == date(2017, 1, 2)

    def test_backward_nth_occurrence(self) -> None:
        """BACKWARD: переход через границу года"""
        assert nth_weekday(WEDNESDAY_JAN4, calendar.MONDAY, 2, Direction.BACKWARD) == date(2016, 12, 26)
        assert nth_weekday(WEDNESDAY_JAN4, calendar.FRIDAY, 1, Direction.BACKWARD) == date(2016, 12, 30)

    def test_backward_target_later_in_week(self) -> None:
        """BACKWARD: целевой день позже текущего в неделе → прошлая неделя"""
        # incr = 6 - 2 = 4 → 4 - 7 = -3
        assert nth_weekday(WEDNESDAY_JAN4, calendar.SUNDAY, 1, Direction.BACKWARD) == date(2017, 1, 1)

    def test_either_picks_nearer_backward(self) -> None:
        """EITHER: понедельник в 2 днях назад ближе, чем в 5 днях вперёд"""
        assert nth_weekday(WEDNESDAY_JAN4, calendar.MONDAY, 1, Direction.EITHER) == date(2017, 1, 2)
        assert nth_weekday(WEDNESDAY_JAN4, calendar.MONDAY, 0, Direction.EITHER) == date(2017, 1, 2)

    def test_either_picks_nearer_forward(self) -> None:
        """EITHER: пятница в 2 днях вперёд ближе, чем в 5 днях назад"""
        assert nth_weekday(WEDNESDAY_JAN4, calendar.FRIDAY, 1, Direction.EITHER) == date(2017, 1, 6)

    def test_either_folds_weeks_in_chosen_direction(self) -> None:
        """EITHER: n > 1 добавляет недели в сторону выбранного кандидата"""
        assert nth_weekday(WEDNESDAY_JAN4, calendar.MONDAY, 2, Direction.EITHER) == date(2016, 12, 26)
        assert nth_weekday(WEDNESDAY_JAN4, calendar.FRIDAY, 2, Direction.EITHER) == date(2017, 1, 13)

    def test_default_direction_is_forward(self) -> None:
        assert nth_weekday(WEDNESDAY_JAN4, calendar.MONDAY, 1) == date(2017, 1, 9)


class TestNthWeekdaySameDay:
    """Тесты случая d.weekday() == weekday"""

    @pytest.mark.parametrize("direction", list(Direction))
    def test_zero_returns_same_date(self, direction: Direction) -> None:
        """n == 0 → дата без изменений при любом направлении"""
        assert nth_weekday(MONDAY_JAN2, calendar.MONDAY, 0, direction) == MONDAY_JAN2

    def test_forward_moves_whole_weeks(self) -> None:
        assert nth_weekday(MONDAY_JAN2, calendar.MONDAY, 1, Direction.FORWARD) == date(2017, 1, 9)
        assert nth_weekday(MONDAY_JAN2, calendar.MONDAY, 3, Direction.FORWARD) == date(2017, 1, 23)

    def test_backward_moves_whole_weeks(self) -> None:
        assert nth_weekday(MONDAY_JAN2, calendar.MONDAY, 1, Direction.BACKWARD) == date(2016, 12, 26)
        assert nth_weekday(MONDAY_JAN2, calendar.MONDAY, 2, Direction.BACKWARD) == date(2016, 12, 19)

    def test_either_moves_forward(self) -> None:
        """EITHER на целевом дне недели движется вперёд"""
        assert nth_weekday(MONDAY_JAN2, calendar.MONDAY, 1, Direction.EITHER) == date(2017, 1, 9)


class TestNthWeekdayInputs:
    """Тесты граничных входов"""

    @pytest.mark.parametrize("direction", list(Direction))
    def test_negative_n_is_noop(self, direction: Direction) -> None:
        """n < 0 → дата без изменений (не ошибка)"""
        assert nth_weekday(WEDNESDAY_JAN4, calendar.MONDAY, -1, direction) == WEDNESDAY_JAN4
        assert nth_weekday(WEDNESDAY_JAN4, calendar.WEDNESDAY, -5, direction) == WEDNESDAY_JAN4

    @pytest.mark.parametrize("weekday", [-1, 7, 100])
    def test_invalid_weekday_rejected(self, weekday: int) -> None:
        with pytest.raises(ValueError, match="weekday must be in"):
            nth_weekday(WEDNESDAY_JAN4, weekday, 1, Direction.FORWARD)

    def test_invalid_direction_rejected(self) -> None:
        with pytest.raises(ValueError, match="direction must be a Direction"):
            nth_weekday(WEDNESDAY_JAN4, calendar.MONDAY, 1, "forward")

    def test_datetime_type_preserved(self) -> None:
        """datetime на входе → datetime на выходе, время сохраняется"""
        dt = datetime(2017, 1, 4, 15, 30)
        result = nth_weekday(dt, calendar.MONDAY, 1, Direction.FORWARD)
        assert isinstance(result, datetime)
        assert result == datetime(2017, 1, 9, 15, 30)

    def test_aware_datetime_wall_clock_across_dst(self) -> None:
        """
        Переход на летнее время (2021-03-14, America/New_York) не сдвигает
        дату и время на часах.
        """
        friday = datetime(2021, 3, 12, 12, 0, tzinfo=EASTERN)
        sunday = nth_weekday(friday, calendar.SUNDAY, 1, Direction.FORWARD)
        assert (sunday.year, sunday.month, sunday.day) == (2021, 3, 14)
        assert (sunday.hour, sunday.minute) == (12, 0)
        assert sunday.tzinfo is EASTERN

        monday = nth_weekday(friday, calendar.MONDAY, 1, Direction.FORWARD)
        assert monday.date() == date(2021, 3, 15)
        assert monday.hour == 12


# =============================================================================
# ОБЁРТКИ
# =============================================================================


class TestDerivedFunctions:
    """Тесты next_weekday / previous_weekday / closest_weekday"""

    def test_next_advances_even_on_same_day(self) -> None:
        assert next_weekday(MONDAY_JAN2, calendar.MONDAY) == date(2017, 1, 9)
        assert next_weekday(WEDNESDAY_JAN4, calendar.MONDAY) == date(2017, 1, 9)

    def test_previous_does_not_recede_on_same_day(self) -> None:
        """previous_weekday на целевом дне недели движется вперёд (EITHER)"""
        assert previous_weekday(MONDAY_JAN2, calendar.MONDAY) == date(2017, 1, 9)

    def test_previous_returns_nearest(self) -> None:
        assert previous_weekday(WEDNESDAY_JAN4, calendar.MONDAY) == date(2017, 1, 2)
        assert previous_weekday(WEDNESDAY_JAN4, calendar.FRIDAY) == date(2017, 1, 6)

    def test_closest_returns_nearest(self) -> None:
        assert closest_weekday(WEDNESDAY_JAN4, calendar.MONDAY) == date(2017, 1, 2)
        assert closest_weekday(WEDNESDAY_JAN4, calendar.SATURDAY) == date(2017, 1, 7)
        assert closest_weekday(MONDAY_JAN2, calendar.MONDAY) == date(2017, 1, 9)

    def test_previous_and_closest_identical(self) -> None:
        """previous_weekday и closest_weekday ведут себя одинаково"""
        start = date(2016, 12, 1)
        for offset in range(28):
            d = start + timedelta(days=offset)
            for weekday in range(7):
                assert previous_weekday(d, weekday) == closest_weekday(d, weekday)


# =============================================================================
# ИНВАРИАНТЫ (случайное блуждание по годам 1..9999)
# =============================================================================


def _walk_step(rng: random.Random, days: list[int], tm: date, i: int, direction: Direction) -> date:
    weekday = days[i % len(days)]
    n = i % (rng.randint(1, 10))
    result = nth_weekday(tm, weekday, n, direction)

    context = f"#{i}: nth_weekday({tm}, {weekday}, {n}, {direction}) -> {result}"
    assert result.weekday() == weekday, context
    if n == 0:
        if tm.weekday() == weekday:
            assert result == tm, context
    elif direction == Direction.FORWARD:
        assert result > tm, context
    elif direction == Direction.BACKWARD:
        assert result < tm, context
    return result


class TestNthWeekdayInvariants:
    """Инварианты nth_weekday на всём диапазоне datetime.date"""

    @pytest.fixture
    def rng(self) -> random.Random:
        return random.Random(20170102)

    @pytest.fixture
    def days(self, rng: random.Random) -> list[int]:
        return [rng.randint(0, 6) for _ in range(100)]

    def test_forward_walk(self, rng: random.Random, days: list[int]) -> None:
        tm = date(1, 1, 1)
        i = 0
        while tm.year <= 9998:
            tm = _walk_step(rng, days, tm, i, Direction.FORWARD)
            i += 1

    def test_backward_walk(self, rng: random.Random, days: list[int]) -> None:
        tm = date(9999, 12, 31)
        i = 0
        while tm.year >= 2:
            tm = _walk_step(rng, days, tm, i, Direction.BACKWARD)
            i += 1

    def test_either_lands_on_weekday_and_is_nearest(self) -> None:
        """EITHER, n=1: не дальше 3 дней, если дни недели различаются"""
        start = date(2020, 2, 24)
        for offset in range(14):
            d = start + timedelta(days=offset)
            for weekday in range(7):
                result = nth_weekday(d, weekday, 1, Direction.EITHER)
                assert result.weekday() == weekday
                if d.weekday() == weekday:
                    assert result == d + timedelta(days=7)
                else:
                    assert 1 <= abs((result - d).days) <= 3

    def test_direction_str(self) -> None:
        assert str(Direction.FORWARD) == "forward"
        assert str(Direction.BACKWARD) == "backward"
        assert str(Direction.EITHER) == "either"
