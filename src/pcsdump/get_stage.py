"""
Parse a pcs stage result page.

The results container holds one .resTab per tab on the page, in order:

    0   the stage itself
    1   gc
    2   points
    3   mountains
    4   youth
    then teams, picked out by its '.general' tables

These are taken by position, as there's nothing much to tell them apart.
A tab that isn't there (eg no youth jersey in a one day race) just comes
back empty.

Team time trials have a different first tab (teams, each with a nested
table of riders) so the title is checked first to choose the parser:

>>> soup = make_soup(get_html(make_pcs_url('tour-de-france', 2025, 'stage', 5)))
>>> is_ttt(soup)
False
>>> results = get_stage_result(soup)
>>> results['stageResults'][0]['lastName']
'EVENEPOEL'
"""
from .constants import LOG, TTT_MARKER
from . import fields as sel

TABS = '#resultsCont > .resTab'

CLASSIFICATION_TABS = {
    'generalClassification': 1,
    'pointsClassification': 2,
    'mountainsClassification': 3,
    'youthClassification': 4,
}

TEAM_TABLE = f'{TABS} .general'
TEAM_TABLE_INDEX = 5


def get_page_title(soup):
    return sel.get_text(soup, '.page-title > .imob', 0)


def is_ttt(soup):
    return TTT_MARKER in get_page_title(soup)


def get_stage_result(soup, strict=False):
    """
    Return a dict with the stage results and the five classifications:
        stageResults, generalClassification, pointsClassification,
        mountainsClassification, youthClassification, teamClassification

    stageResults is a list of ttt teams for a team time trial, otherwise
    a list of rider rows
    """

    if is_ttt(soup):
        LOG.debug('team time trial, parsing results by team')
        stage_results = get_ttt_results(soup, strict=strict)
    else:
        stage_results = get_rider_results(soup, strict=strict)

    if not stage_results:
        LOG.warning('No riders found. The page structure may have changed '
                    'or the results are not available yet.')

    out = {'stageResults': stage_results}
    out.update(get_classifications(soup, strict=strict))

    return out


def get_rider_results(soup, strict=False):
    return [make_result_row(row, strict=strict)
            for row in get_rows(soup, TABS, 0)]


def get_ttt_results(soup, strict=False):
    """
    One dict per team, with its riders.
    Each team is in the html twice, the .hideIfMobile copy is skipped
    """

    teams = []
    for tab in soup.select(f'{TABS} .ttt-results'):
        for li in tab.select('li:not(.hideIfMobile)'):
            teams.append(make_ttt_team(li, strict=strict))

    return teams


def make_ttt_team(li, strict=False):
    # riders all get the team's place
    place = sel.get_ttt_place(li)

    riders = [
        {
            'place': place,
            'firstName': sel.get_ttt_rider_first_name(row),
            'lastName': sel.get_ttt_rider_last_name(row),
        }
        for row in li.select('tbody > tr')
    ]

    return {
        'place': place,
        'team': sel.get_team_name(li),
        'shortName': sel.get_team_short_name(li, strict=strict),
        'riders': riders,
    }


def get_rows(soup, selector, index):
    """
    Body rows of the index-th match of selector, [] if there isn't one
    """

    rows = []
    for table in sel.select_nth(soup, selector, index):
        rows.extend(table.select('tbody > tr'))

    return rows


def make_result_row(row, strict=False):
    return {
        'country': sel.get_country(row, strict=strict),
        'lastName': sel.get_last_name(row),
        'firstName': sel.get_first_name(row),
        'startNumber': sel.get_start_number(row),
        'gc': sel.get_gc(row),
        'place': sel.get_place(row),
        'timeDifference': sel.get_time_difference(row),
        'team': sel.get_team(row),
        'shortName': sel.get_short_name(row, strict=strict),
        'uciPoints': sel.get_uci_points(row),
        'points': sel.get_points(row),
        'qualificationTime': sel.get_qualification_time(row),
    }


def make_youth_row(row, strict=False):
    return {
        'country': sel.get_country(row, strict=strict),
        'lastName': sel.get_last_name(row),
        'firstName': sel.get_first_name(row),
        'startNumber': sel.get_start_number(row),
        'place': sel.get_place(row),
        'team': sel.get_team(row),
        'shortName': sel.get_short_name(row, strict=strict),
    }


def make_points_row(row):
    return {
        'place': sel.get_place(row),
        'rider': sel.get_last_name(row),
        'team': sel.get_team(row),
        'pointsTotal': sel.get_points_total(row),
        'points': sel.get_points_gained(row),
    }


def make_mountains_row(row):
    return {
        'place': sel.get_place(row),
        'rider': sel.get_last_name(row),
        'team': sel.get_team(row),
        'pointsTotal': sel.get_points_total(row),
        'points': sel.get_mountain_points(row),
    }


def make_team_row(row, strict=False):
    return {
        'place': sel.get_place(row),
        'team': sel.get_team_name(row),
        'shortName': sel.get_team_short_name(row, strict=strict),
        'class': sel.get_class(row),
    }


def get_classifications(soup, strict=False):
    """
    The four rider classifications by tab position, plus teams
    """

    def rows(name):
        return get_rows(soup, TABS, CLASSIFICATION_TABS[name])

    return {
        'generalClassification': [
            make_result_row(row, strict=strict)
            for row in rows('generalClassification')],
        'pointsClassification': [
            make_points_row(row) for row in rows('pointsClassification')],
        'mountainsClassification': [
            make_mountains_row(row)
            for row in rows('mountainsClassification')],
        'youthClassification': [
            make_youth_row(row, strict=strict)
            for row in rows('youthClassification')],
        'teamClassification': [
            make_team_row(row, strict=strict)
            for row in get_rows(soup, TEAM_TABLE, TEAM_TABLE_INDEX)],
    }
