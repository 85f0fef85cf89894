import argparse
import logging
import math
import sys
from datetime import datetime

from elapsed.localization import formatter
from elapsed.util import config


def parse_timestamp(value: str):
    try:
        seconds = float(value)
    except ValueError:
        pass
    else:
        if not math.isfinite(seconds):
            raise argparse.ArgumentTypeError(f'not a finite number of epoch seconds: {value!r}')

        return seconds

    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f'not an ISO 8601 datetime or epoch seconds: {value!r}')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='elapsed',
        description='Print how long ago a point in time was, as a short localized phrase.',
    )
    parser.add_argument('timestamp', nargs='?', type=parse_timestamp,
                        help='ISO 8601 datetime or POSIX epoch seconds')
    parser.add_argument('-l', '--locale', default=config.REFERENCE_LOCALE,
                        help=f'locale code (default: {config.REFERENCE_LOCALE})')
    parser.add_argument('--list-locales', action='store_true',
                        help='print the registered locale codes and exit')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log locale loading')

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else config.LOG_LEVEL)

    service = formatter.get_default()

    if args.list_locales:
        for code in service.registry.locales:
            print(code)

        return 0

    if args.timestamp is None:
        parser.error('the timestamp argument is required')

    locale = service.registry.get_nearest(args.locale)
    print(service.format(args.timestamp, locale))

    return 0


if __name__ == '__main__':
    sys.exit(main())
