import argparse
import logging
import sys
from datetime import datetime

from .constants import (LOG, LOG_FORMAT, KNOWN_RACE_SLUGS, OUTPUT_DIR,
                        TIMEOUT, HTML_PARSER)
from .errors import PcsDumpError, UsageError, UnknownRaceError
from .urls import make_pcs_url, check_race, check_year
from .get_resources import get_html, make_soup
from .get_startlist import get_startlist, count_riders
from .get_stage import get_stage_result, get_page_title
from .output import (make_startlist_record, make_stage_record,
                     startlist_fpath, stage_fpath, save_record, to_json)

SLUGS_HELP = "supported race slugs:\n  - " + "\n  - ".join(KNOWN_RACE_SLUGS)


def print_json(record):
    """
    The json to stdout as utf-8, whatever the console encoding is
    (eg cp1252 on windows would choke on the accents in rider names)
    """

    text = to_json(record) + '\n'
    buffer = getattr(sys.stdout, 'buffer', None)

    if buffer is None:
        sys.stdout.write(text)
        return

    sys.stdout.flush()
    buffer.write(text.encode('utf-8'))
    buffer.flush()


def run_startlist(args, race, year):
    url = make_pcs_url(race, year, 'startlist')
    soup = make_soup(get_html(url, timeout=args.timeout), parser=args.parser)

    teams = get_startlist(soup, strict=args.strict)
    LOG.info(f'{len(teams)} teams, {count_riders(teams)} riders')

    record = make_startlist_record(race, year, url, teams)

    save_record(record, startlist_fpath(race, year, args.output_dir))

    if args.stdout:
        print_json(record)

    return record


def run_stage(args, race, year):
    stage = str(args.stage).strip()

    if not stage:
        raise UsageError("--stage is required")

    url = make_pcs_url(race, year, 'stage', stage_no=stage)
    soup = make_soup(get_html(url, timeout=args.timeout), parser=args.parser)

    LOG.info(get_page_title(soup))

    results = get_stage_result(soup, strict=args.strict)
    record = make_stage_record(race, year, stage, url, results)

    save_record(record, stage_fpath(race, year, stage, args.output_dir))

    if args.stdout:
        print_json(record)

    return record


def make_parser():
    parser = argparse.ArgumentParser(
        prog='pcsdump',
        description='Scrape procyclingstats startlists and stage results to json',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=("examples:\n"
                "  pcsdump startlist --race tour-de-france --year 2025\n"
                "  pcsdump stage --race vuelta-a-espana --stage 1\n\n"
                + SLUGS_HELP),
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--race', required=True,
                        help='race slug, eg "tour-de-france"')
    common.add_argument('--year', default=str(datetime.now().year),
                        help='the year, defaults to this one')
    common.add_argument('--output-dir', default=OUTPUT_DIR,
                        help=f'where to save the json (default "{OUTPUT_DIR}")')
    common.add_argument('--timeout', type=float, default=TIMEOUT,
                        help=f'request timeout in seconds (default {TIMEOUT})')
    common.add_argument('--strict', action='store_true', default=False,
                        help='fail on missing flags / links instead of '
                             'writing nulls')
    common.add_argument('--parser', default=HTML_PARSER,
                        help=f'BeautifulSoup parser (default {HTML_PARSER})')
    common.add_argument('--log-file', default=None,
                        help='also log to this file')
    common.add_argument('-v', '--verbose', action='store_true', default=False)

    subparsers = parser.add_subparsers(dest='command', required=True)

    startlist = subparsers.add_parser(
        'startlist', parents=[common],
        formatter_class=argparse.RawDescriptionHelpFormatter,
        help='teams and riders from the race startlist',
        epilog=SLUGS_HELP)
    startlist.add_argument('--stdout', action=argparse.BooleanOptionalAction,
                           default=True,
                           help='print the json as well as saving it')
    startlist.set_defaults(func=run_startlist)

    stage = subparsers.add_parser(
        'stage', parents=[common],
        formatter_class=argparse.RawDescriptionHelpFormatter,
        help='stage result and classifications',
        epilog=SLUGS_HELP)
    stage.add_argument('--stage', required=True,
                       help='the stage, eg "1"')
    stage.add_argument('--stdout', action=argparse.BooleanOptionalAction,
                       default=False,
                       help='print the json as well as saving it')
    stage.set_defaults(func=run_stage)

    return parser


def setup_logging(verbose=False, log_file=None):
    """
    Diagnostics go to stderr (and log_file), stdout is just for the json
    """

    for handler in LOG.handlers:
        handler.close()
    LOG.handlers.clear()
    LOG.setLevel(logging.DEBUG if verbose else logging.INFO)

    add_handler(logging.StreamHandler(sys.stderr))

    if log_file is not None:
        try:
            add_handler(logging.FileHandler(log_file, encoding='utf-8'))
        except OSError as e:
            raise UsageError(f'cannot open log file {log_file} ({e})') from e


def add_handler(handler):
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    LOG.addHandler(handler)


def main(argv=None):

    parser = make_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(args.verbose, args.log_file)
        race = check_race(args.race)
        year = check_year(args.year)
        args.func(args, race, year)

    except UsageError as e:
        LOG.error(f'Error: {e}')
        parser.print_usage(sys.stderr)
        if isinstance(e, UnknownRaceError):
            print(SLUGS_HELP, file=sys.stderr)
        return e.exit_code

    except PcsDumpError as e:
        LOG.error(e)
        return e.exit_code

    except Exception:
        LOG.exception('Unexpected error')
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
