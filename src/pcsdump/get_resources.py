"""
Getting the pages: one request, no retries, no caching
"""
import requests
from bs4 import BeautifulSoup, FeatureNotFound

from .constants import LOG, HEADERS, TIMEOUT, HTML_PARSER
from .errors import DownloadError, MissingCapabilityError


def get_html(url, timeout=TIMEOUT):
    """
    Request the html for passed url, raise DownloadError if it
    doesn't come back ok
    """

    LOG.info(f'Fetching: {url}')

    try:
        req = requests.get(url, headers=HEADERS, timeout=timeout)
    except requests.RequestException as e:
        raise DownloadError(f"Request failed: {url} ({e})") from e

    if not 200 <= req.status_code < 300:
        raise DownloadError(
            f"Request failed: {req.status_code} {req.reason}",
            status_code=req.status_code)

    return req.text


def make_soup(html, parser=HTML_PARSER):
    """
    Parse the html, complaining properly if the parser isn't installed
    (eg lxml)
    """

    try:
        return BeautifulSoup(html, parser)
    except FeatureNotFound as e:
        raise MissingCapabilityError(
            f"html parser '{parser}' is not available, install it "
            f"or use the default '{HTML_PARSER}'") from e
