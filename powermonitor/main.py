import argparse
import logging
import sys
from pathlib import Path

from powermonitor.core import ExportSettings
from powermonitor.export import CsvResultsWriter, ResultsReader
from powermonitor.version import __version__, APP_NAME, DESCRIPTION


def _show_files(args: argparse.Namespace) -> int:
    writer = CsvResultsWriter.from_settings(ExportSettings.load(args.settings), pid=args.pid)
    for path in writer.files:
        print(path)
    return 0


def _show_summary(args: argparse.Namespace) -> int:
    try:
        points = ResultsReader.read(Path(args.file))
    except (OSError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    for s in ResultsReader.summarize(points):
        line = f"{s.name}: n={s.count} total={s.total:.5f} {s.unit} mean={s.mean:.5f} max={s.maximum:.5f}"
        if s.co2_total is not None:
            line += f" co2={s.co2_total:.5f} g"
        print(line)
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(prog=APP_NAME.lower(), description=DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--settings", default=None, help="INI settings file instead of the user settings")
    sub = parser.add_subparsers(dest="command", required=True)

    files = sub.add_parser("files", help="Show where results are written")
    files.add_argument("--pid", type=int, default=None, help="Process id (default: this process)")
    files.set_defaults(func=_show_files)

    summary = sub.add_parser("summary", help="Summarize an exported results file")
    summary.add_argument("file", help="Results CSV file")
    summary.set_defaults(func=_show_summary)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
