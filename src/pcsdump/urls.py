"""
PCS urls are simple, everything hangs off race/<slug>/<year>:

>>> make_pcs_url('tour-de-france', 2025, 'startlist')
'https://www.procyclingstats.com/race/tour-de-france/2025/startlist'

>>> make_pcs_url('vuelta-a-espana', 2025, 'stage', stage_no=5)
'https://www.procyclingstats.com/race/vuelta-a-espana/2025/stage-5'

The stage is not checked, so things like 'stage-0' (a prologue) or
'stage-2b' just pass through.
"""
from .constants import ROOT, KNOWN_RACE_SLUGS, MIN_YEAR, MAX_YEAR
from .errors import InvalidYearError, UnknownRaceError, UsageError


def make_pcs_url(race, year, kind='race', stage_no=None):
    """
    Pass race slug eg 'giro-d-italia' and year
    kinds:
        'race', 'startlist', 'stage'
    """

    race_url = "/".join([ROOT, 'race', race, str(year)])

    if kind == 'race':
        return race_url

    if kind == 'startlist':
        return "/".join([race_url, 'startlist'])

    if kind == 'stage':
        if stage_no is None:
            raise UsageError("a stage is required for a stage url")
        return "/".join([race_url, f"stage-{stage_no}"])

    raise ValueError(f"unknown url kind {kind}")


def check_race(race):
    """
    Return the slug if it's one we know, else raise
    """

    if race not in KNOWN_RACE_SLUGS:
        raise UnknownRaceError(f"Unknown race slug '{race}'")

    return race


def check_year(year):
    """
    Years come in as strings from the cli, make them ints and
    check they're in range
    """

    text = str(year).strip()

    # plain ascii digits only, int() would also take '2_025' or '+2025'
    if not (text.isascii() and text.isdigit()):
        raise InvalidYearError(
            f"--year must be a valid year, e.g., 2025 (got {year!r})")

    year_no = int(text)

    if not MIN_YEAR <= year_no <= MAX_YEAR:
        raise InvalidYearError(
            f"--year must be between {MIN_YEAR} and {MAX_YEAR} (got {year_no})")

    return year_no
