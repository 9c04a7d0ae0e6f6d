"""
Tests for the startlist page parser.
"""
import logging

import pytest

from pcsdump.errors import ExtractionError
from pcsdump.get_resources import make_soup
from pcsdump.get_startlist import get_startlist, count_riders


def test_teams_in_page_order(startlist_soup):
    teams = get_startlist(startlist_soup)

    assert [t["shortName"] for t in teams] == [
        "uae-team-emirates-xrg-2025",
        "team-visma-lease-a-bike-2025",
        "soudal-quick-step-2025",
    ]


def test_rider_counts(startlist_soup):
    teams = get_startlist(startlist_soup)

    assert len(teams) == 3
    assert [len(t["riders"]) for t in teams] == [3, 2, 1]
    assert count_riders(teams) == 6


def test_team_fields(startlist_soup):
    team = get_startlist(startlist_soup)[0]

    assert team["image"] == "images/shirts/uae-2025.png"
    assert team["name"] == "UAE Team Emirates - XRG"
    assert team["shortName"] == "uae-team-emirates-xrg-2025"
    assert set(team) == {"image", "name", "shortName", "riders"}


def test_rider_fields_in_order(startlist_soup):
    riders = get_startlist(startlist_soup)[0]["riders"]

    assert riders[0] == {
        "name": "POGAČAR Tadej",
        "country": "si",
        "startNumber": "1",
        "dropout": False,
    }
    assert [r["name"] for r in riders] == [
        "POGAČAR Tadej", "ALMEIDA João", "SOLER Marc"]


def test_dropout_only_from_own_class(startlist_soup):
    teams = get_startlist(startlist_soup)

    assert [r["dropout"] for r in teams[0]["riders"]] == [False, False, True]
    # the second team's <ul> has the class, its riders don't
    assert [r["dropout"] for r in teams[1]["riders"]] == [False, False]


def test_missing_image_and_bib(startlist_soup):
    team = get_startlist(startlist_soup)[2]

    assert team["image"] is None
    assert team["riders"][0]["startNumber"] == ""


def test_no_teams_warns(caplog):
    soup = make_soup("<html><body><p>Startlist not available</p></body></html>")

    with caplog.at_level(logging.WARNING, logger="pcsdump"):
        teams = get_startlist(soup)

    assert teams == []
    assert "No riders found" in caplog.text


NO_FLAG = """
<ul class="startlist_v4">
  <li>
    <div class="ridersCont">
      <a class="team" href="team/cofidis-2025">Cofidis</a>
      <ul><li><span class="bib">41</span><a href="rider/x">COQUARD Bryan</a></li></ul>
    </div>
  </li>
</ul>
"""


def test_missing_flag_is_null():
    rider = get_startlist(make_soup(NO_FLAG))[0]["riders"][0]

    assert rider["country"] is None
    assert rider["name"] == "COQUARD Bryan"


def test_missing_flag_strict():
    with pytest.raises(ExtractionError):
        get_startlist(make_soup(NO_FLAG), strict=True)
