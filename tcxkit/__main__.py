# pylint: disable=import-outside-toplevel
"""Main entry point for the tcxkit CLI.

This module provides the command-line interface for tcxkit, allowing users to
decode single TCX files, scan folders of them, export track points as CSV,
and write a configuration file.
"""

import argparse
import sys

from dotenv import load_dotenv

from tcxkit.appconfig import configure_logging, load_config

load_dotenv()

HELP_TEXT = """
tcxkit - Decode TCX activity files and summarize them.

Usage:
    python -m tcxkit <command>

Commands:
    show PATH         Decode one .tcx (or .tcx.gz) file and print its metrics
    scan [FOLDER]     Decode every .tcx file in a folder (default: data_folder)
    export PATH -o F  Write the track points of a file or folder to CSV
    configure         Write tcxkit_config.json for your environment
    help              Show this help and usage documentation

Settings come from tcxkit_config.json and TCXKIT_* environment variables
(a .env file is read automatically).
"""


def main(argv=None):
    """Main function for the tcxkit CLI."""
    parser = argparse.ArgumentParser(description="tcxkit CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    show_parser = subparsers.add_parser("show", help="Decode one activity file and print its metrics")
    show_parser.add_argument("path", help="Path to a .tcx or .tcx.gz file")

    scan_parser = subparsers.add_parser("scan", help="Decode every TCX file in a folder")
    scan_parser.add_argument("folder", nargs="?", help="Folder to scan (default: data_folder from config)")

    export_parser = subparsers.add_parser("export", help="Write track points as CSV")
    export_parser.add_argument("path", help="A TCX file or a folder of them")
    export_parser.add_argument("-o", "--output", required=True, help="CSV file to write")

    subparsers.add_parser("configure", help="Configure tcxkit for your environment")
    subparsers.add_parser("help", help="Show usage and documentation")

    args = parser.parse_args(argv)

    config = load_config()
    configure_logging(config)

    if args.command == "show":
        from tcxkit.commands.show import run

        return run(args.path, config["table_format"])
    elif args.command == "scan":
        from tcxkit.commands.scan import run

        return run(args.folder or config["data_folder"], config["table_format"])
    elif args.command == "export":
        from tcxkit.commands.export import run

        return run(args.path, args.output)
    elif args.command == "configure":
        from tcxkit.commands.configure import run

        run()
        return 0
    elif args.command == "help":
        print(HELP_TEXT)
        return 0
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
