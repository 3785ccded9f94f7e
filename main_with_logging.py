"""
lrc-sync-engine - Main Entry Point
"""

import argparse
import sys
import logging

import config
from core.lrc import LrcParser, LrcWriter, find_active_index, format_clock

logger = logging.getLogger(__name__)


def log_handlers(log_file=config.LOG_FILE):
    """logging 輸出目標（stdout 保留給 LRC 輸出）"""
    return [
        logging.FileHandler(log_file),  # 寫到檔案
        logging.StreamHandler(sys.stderr)  # 也輸出到 terminal
    ]


def setup_logging(level=logging.INFO):
    """設定 logging"""
    logging.basicConfig(
        level=level,
        format=config.LOG_FORMAT,
        handlers=log_handlers(),
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='lrc-sync', description='LRC lyrics sync tools')
    subparsers = parser.add_subparsers(dest='command', required=True)

    normalize = subparsers.add_parser('normalize', help='parse and re-generate an LRC file')
    normalize.add_argument('input')
    normalize.add_argument('-o', '--output', help='write to this file instead of stdout')
    normalize.add_argument('--plain', action='store_true', help='drop every [tag:...] line')

    show = subparsers.add_parser('show', help='list lines and the active line at a time')
    show.add_argument('input')
    show.add_argument('--at', type=float, default=0.0, help='playback position in seconds')
    return parser


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)
    setup_logging()

    parser = LrcParser()
    try:
        timeline = parser.parse_file(args.input, filter_metadata=getattr(args, 'plain', False))
    except (OSError, ValueError) as e:
        logger.error(f"Cannot read {args.input}: {e}")
        return 1

    if args.command == 'normalize':
        writer = LrcWriter()
        if args.output:
            writer.write_file(timeline, args.output)
            logger.info(f"Wrote {args.output}")
        else:
            print(writer.to_string(timeline))
        return 0

    active = find_active_index(timeline, args.at)
    for index, line in enumerate(timeline):
        marker = '>' if index == active else ' '
        print(f"{marker} {format_clock(line.time):>8}  {line.text}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
