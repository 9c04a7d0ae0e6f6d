import logging
from pathlib import Path

ROOT = "https://www.procyclingstats.com"

OUTPUT_DIR = Path('output')

LOG = logging.getLogger('pcsdump')
LOG_FORMAT = '%(asctime)s %(levelname)s %(message)s'

# the race slugs the scripts know how to build urls for
KNOWN_RACE_SLUGS = [
    'tour-de-france',
    'giro-d-italia',
    'vuelta-a-espana',
    'world-championship',
    'milano-sanremo',
    'amstel-gold-race',
    'tirreno-adriatico',
    'liege-bastogne-liege',
    'il-lombardia',
    'la-fleche-wallone',
    'paris-nice',
    'paris-roubaix',
    'volta-a-catalunya',
    'dauphine',
    'ronde-van-vlaanderen',
    'gent-wevelgem',
    'san-sebastian',
]

MIN_YEAR = 1900
MAX_YEAR = 3000

HEADERS = {
    'User-Agent': ('Mozilla/5.0 (Windows NT 10.0; Win64; x64) '
                   'AppleWebKit/537.36 (KHTML, like Gecko) '
                   'Chrome/124.0 Safari/537.36'),
    'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
    'Accept-Language': 'en-US,en;q=0.5',
}

TIMEOUT = 30  # seconds

HTML_PARSER = 'html.parser'

# substring of the stage page title that marks a team time trial
TTT_MARKER = 'TTT'
