import argparse
import sys

from constants import (
    DEFAULT_DETAIL,
    DEFAULT_IMAGE,
    DEFAULT_MAIN_IMAGE_OUT,
    DEFAULT_NAME,
    DEFAULT_RUN_ALL_DETAIL,
    VERIFY_PATH,
    get_commands,
)
from state import CLIState

from commands.common import print_examples, print_help_for_command, print_usage
from utils.core import debug_print, set_debug
from utils.errors import RunnerError, UsageError
from utils.validation import DEBUG_FLAGS, parse_bool, strip_flags, strip_quiet


def _bool_arg(value):
    try:
        return parse_bool(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _add_card_arguments(parser, state):
    parser.add_argument("--image", default=DEFAULT_IMAGE, help="Image file path")
    parser.add_argument("--id", default=state.card_id, help="Card id (defaults to CARD_ID)")
    parser.add_argument("--name", default=DEFAULT_NAME, help="Display name")


def build_parser(state):
    """Build the argument parser; id defaults come from the resolved state."""
    parser = argparse.ArgumentParser(
        prog="card-runner",
        description="Card API runner - exercise the card integration endpoints",
    )
    subparsers = parser.add_subparsers(dest="command")

    create = subparsers.add_parser("create-card", help="Create a card from an image")
    _add_card_arguments(create, state)
    create.add_argument(
        "--consent",
        type=_bool_arg,
        nargs="?",
        const=True,
        default=False,
        help="consentTermSigned value",
    )

    main_image = subparsers.add_parser("main-image", help="Download the main image")
    main_image.add_argument("--idcard", default="", help="idCard header value (required)")
    main_image.add_argument(
        "--out", default=DEFAULT_MAIN_IMAGE_OUT, help="Output file"
    )

    verify = subparsers.add_parser("verify-card", help="Verify an image")
    verify.add_argument("--endpoint", default=VERIFY_PATH, help="Verify route path")
    _add_card_arguments(verify, state)
    verify.add_argument("--detail", default=DEFAULT_DETAIL, help="Free-form detail string")

    delete = subparsers.add_parser("delete-card", help="Delete a card")
    delete.add_argument("--id", default=state.card_id, help="Card id (defaults to CARD_ID)")

    run_all = subparsers.add_parser("run-all", help="preclean → create → verify → delete")
    _add_card_arguments(run_all, state)
    run_all.add_argument("--detail", default=DEFAULT_RUN_ALL_DETAIL, help="Detail string")
    run_all.add_argument(
        "--preclean",
        type=_bool_arg,
        nargs="?",
        const=True,
        default=True,
        help="Delete the card first, ignoring 404/422",
    )

    subparsers.add_parser("show-config", help="Show resolved configuration")

    help_parser = subparsers.add_parser("help", help="Show help")
    help_parser.add_argument("command_name", nargs="?", default=None)

    return parser


def execute_command(commands, command, args):
    """Run a handler and map its outcome to an exit code."""
    try:
        commands[command](args)
    except UsageError as e:
        print(f"❌ {e}", file=sys.stderr)
        print_help_for_command(command)
        return e.exit_code
    except RunnerError as e:
        print(f"❌ {e}", file=sys.stderr)
        return e.exit_code
    except KeyboardInterrupt:
        print("\n⚠️  Command interrupted", file=sys.stderr)
        return 130
    return 0


def main(argv=None, environ=None):
    argv = sys.argv[1:] if argv is None else list(argv)

    # --quiet/-q and --debug are accepted anywhere on the line
    argv, quiet = strip_quiet(argv)
    argv, debug = strip_flags(argv, DEBUG_FLAGS)

    if not argv:
        print_usage()
        return 2

    state = CLIState.from_environment(environ, quiet=quiet)
    set_debug(debug, state)

    commands = get_commands(state)
    if argv[0] in ("-h", "--help"):
        argv = ["help"] + argv[1:]
    command = argv[0]
    if command not in commands:
        print_usage()
        print()
        print_examples()
        return 2

    try:
        args = build_parser(state).parse_args(argv)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 2

    debug_print(f"Executing command: {command} with args: {vars(args)}")
    return execute_command(commands, command, args)


if __name__ == "__main__":
    sys.exit(main())
