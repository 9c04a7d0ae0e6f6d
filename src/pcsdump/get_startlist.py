"""
Parse the pcs startlist page into teams with their riders

>>> html = get_html(make_pcs_url('tour-de-france', 2025, 'startlist'))
>>> teams = get_startlist(make_soup(html))
>>> teams[0]['name'], len(teams[0]['riders'])
('UAE Team Emirates - XRG', 8)
"""
from .constants import LOG
from . import fields as sel


def get_startlist(soup, strict=False):
    """
    A list of team dicts in page order:
        image, name, shortName, riders

    An empty list (with a warning) if there are no team blocks, which is
    what you get before the startlist is published
    """

    teams = [make_team(block, strict=strict)
             for block in soup.select('.startlist_v4 > li')]

    if not teams:
        LOG.warning('No riders found. The page structure may have changed '
                    'or the startlist is not available yet.')

    return teams


def make_team(block, strict=False):
    """
    The riders are made first then put in the team
    """

    riders = [make_rider(li, strict=strict)
              for li in block.select('.ridersCont li')]

    return {
        'image': sel.get_shirt_image(block),
        'name': sel.get_startlist_team_name(block),
        'shortName': sel.get_startlist_team_slug(block, strict=strict),
        'riders': riders,
    }


def make_rider(li, strict=False):
    return {
        'name': sel.get_rider_name(li),
        'country': sel.get_rider_country(li, strict=strict),
        'startNumber': sel.get_bib(li),
        'dropout': sel.is_dropout(li),
    }


def count_riders(teams):
    return sum(len(team['riders']) for team in teams)
