import argparse
import logging
import sys
import time

from dotenv import find_dotenv, load_dotenv

from .config import ConfigError, load_config
from .emitter import build_command
from .hook import ActivityHook


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="hours-hook",
        description="Record input activity with record-hours, at most once per interval",
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--file", dest="log_file", help="Log file passed to record-hours")
    common.add_argument("--interval", help="Minimum seconds between two recordings")
    common.add_argument("--command", help="Recorder executable (default: record-hours)")
    common.add_argument("--project", help="Project name to record activity under")
    common.add_argument(
        "--debug", action="store_true", default=None, help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="action")
    subparsers.add_parser("run", parents=[common], help="Watch input and record activity")
    subparsers.add_parser("check", parents=[common], help="Show the resolved configuration")

    args = parser.parse_args(argv)
    if args.action is None:
        parser.print_help()
        sys.exit(2)
    return args


def _overrides(args):
    return {
        "log_file": args.log_file,
        "interval": args.interval,
        "command": args.command,
        "project": args.project,
        "debug": args.debug,
    }


def check(hook: ActivityHook) -> int:
    config = hook.config
    executable = hook.emitter.locate()
    print(f"log file : {config.log_file}")
    print(f"interval : {config.interval:g}s")
    print(f"project  : {config.project or '(default)'}")
    if executable is None:
        print(f"recorder : {config.command} (not found on PATH)")
        return 1
    print(f"recorder : {executable}")
    print(f"command  : {' '.join(build_command(executable, config.log_file, config.project))}")
    return 0


def run(hook: ActivityHook, poll_interval: float = 1.0) -> int:
    if not hook.register():
        print("ERROR: input monitoring is unavailable", file=sys.stderr)
        return 1

    if hook.emitter.locate() is None:
        print(
            f"WARNING: {hook.config.command} not found on PATH, "
            "activity is recorded once it is installed",
            file=sys.stderr,
        )

    print("Recording activity... Ctrl+C to stop")
    try:
        while True:
            time.sleep(poll_interval)
    except KeyboardInterrupt:
        print("\nStopped.")
    finally:
        hook.unregister()
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    load_dotenv(find_dotenv(usecwd=True))

    try:
        config = load_config(_overrides(args))
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    if config.debug:
        logging.basicConfig(
            level=logging.DEBUG, format="%(asctime)s [%(name)s] %(message)s", datefmt="%H:%M:%S"
        )

    hook = ActivityHook(config)
    if args.action == "check":
        return check(hook)
    return run(hook)
