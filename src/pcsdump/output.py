"""
Wrapping extracted data up with where it came from, and saving it.

Output goes to
    output/startlist-<race>-<year>.json
    output/<year>/<race>/<stage>/results.json
"""
import json
from datetime import datetime, timezone
from pathlib import Path

from .constants import LOG, OUTPUT_DIR


def now_iso():
    """
    UTC, millisecond precision, eg '2025-07-05T14:02:11.532Z'
    """
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def make_startlist_record(race, year, source, teams):
    return {
        'race': race,
        'year': year,
        'source': source,
        'count': len(teams),
        'riders': teams,
        'scrapedAt': now_iso(),
    }


def make_stage_record(race, year, stage, source, results):
    """
    results is the dict from get_stage_result, its keys go straight
    into the record
    """

    record = {
        'race': race,
        'year': year,
        'stage': str(stage),
        'source': source,
        'count': len(results['stageResults']),
    }
    record.update(results)
    record['scrapedAt'] = now_iso()

    return record


def startlist_fpath(race, year, output_dir=None):
    if output_dir is None:
        output_dir = OUTPUT_DIR

    return Path(output_dir) / f"startlist-{race}-{year}.json"


def stage_fpath(race, year, stage, output_dir=None):
    if output_dir is None:
        output_dir = OUTPUT_DIR

    return Path(output_dir) / str(year) / race / str(stage) / 'results.json'


def to_json(record):
    return json.dumps(record, indent=2, ensure_ascii=False)


def save_record(record, fpath):
    """
    Write record as json to fpath, making dirs as needed
    """

    fpath = Path(fpath)
    fpath.parent.mkdir(parents=True, exist_ok=True)

    with open(fpath, 'w', encoding='utf-8') as fp:
        fp.write(to_json(record))

    LOG.info(f'Saved: {fpath}')

    return fpath
