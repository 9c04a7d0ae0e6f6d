"""
Url templates and the checks on race / year arguments.
"""
import pytest

from pcsdump.constants import KNOWN_RACE_SLUGS
from pcsdump.errors import InvalidYearError, UnknownRaceError, UsageError
from pcsdump.urls import make_pcs_url, check_race, check_year


@pytest.mark.parametrize("race", KNOWN_RACE_SLUGS)
def test_startlist_url(race):
    assert make_pcs_url(race, 2025, "startlist") == (
        f"https://www.procyclingstats.com/race/{race}/2025/startlist")


@pytest.mark.parametrize("race", KNOWN_RACE_SLUGS)
def test_stage_url(race):
    assert make_pcs_url(race, 1999, "stage", stage_no="7") == (
        f"https://www.procyclingstats.com/race/{race}/1999/stage-7")


def test_race_url():
    assert make_pcs_url("dauphine", 2024) == (
        "https://www.procyclingstats.com/race/dauphine/2024")


def test_stage_url_needs_a_stage():
    with pytest.raises(UsageError):
        make_pcs_url("giro-d-italia", 2025, "stage")


def test_unknown_kind():
    with pytest.raises(ValueError):
        make_pcs_url("giro-d-italia", 2025, "climbs")


def test_there_are_17_known_races():
    assert len(KNOWN_RACE_SLUGS) == 17
    assert len(set(KNOWN_RACE_SLUGS)) == 17


def test_check_race_known():
    assert check_race("paris-roubaix") == "paris-roubaix"


@pytest.mark.parametrize("race", ["tour", "Tour-de-France", "", "strade-bianche"])
def test_check_race_unknown(race):
    with pytest.raises(UnknownRaceError):
        check_race(race)


@pytest.mark.parametrize("year", ["1900", "3000", "2025", 2025, " 2024 "])
def test_check_year_accepts(year):
    assert check_year(year) == int(str(year).strip())


@pytest.mark.parametrize("year", ["1899", "3001", "0", "-2025"])
def test_check_year_out_of_range(year):
    with pytest.raises(InvalidYearError):
        check_year(year)


@pytest.mark.parametrize("year", [
    "", "twenty", "2025.5", "25a", "2_025", "+2025", "\u0662\u0660\u0662\u0665"])
def test_check_year_not_a_number(year):
    with pytest.raises(InvalidYearError):
        check_year(year)
