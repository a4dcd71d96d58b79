"""
Common helpers for the card API runner commands.
"""

from constants import DEFAULT_BASE_URL, VERIFY_PATH

COMMAND_USAGE = {
    "create-card": (
        "Usage: create-card [--image PATH] [--id ID] [--name NAME] [--consent[=BOOL]]",
        "Create a card from an image (POST /api/card/integration/register).",
    ),
    "main-image": (
        "Usage: main-image --idcard VALUE [--out PATH]",
        "Download the card's main image (idCard header) and save it to a file.",
    ),
    "verify-card": (
        "Usage: verify-card [--endpoint PATH] [--image PATH] [--id ID] [--name NAME] [--detail TEXT]",
        f"Verify an image against the stored one (POST {VERIFY_PATH}).",
    ),
    "delete-card": (
        "Usage: delete-card [--id ID]",
        "Delete the card (DELETE /api/card/{id}).",
    ),
    "run-all": (
        "Usage: run-all [--image PATH] [--id ID] [--name NAME] [--detail TEXT] [--preclean[=BOOL]]",
        "Run preclean → create → verify → delete, stopping at the first failure.",
    ),
    "show-config": (
        "Usage: show-config",
        "Show the configuration resolved from the environment.",
    ),
}


def print_help_for_command(command, state=None):
    if command in COMMAND_USAGE:
        for line in COMMAND_USAGE[command]:
            print(line)
    else:
        print(f"No help available for {command}.")


def print_usage():
    print("card-runner")
    print()
    print("Commands:")
    print("  create-card   - create a card from an image")
    print(f"  verify-card   - verify the current image (POST {VERIFY_PATH})")
    print("  delete-card   - delete the card (DELETE /api/card/{id})")
    print("  main-image    - download the main image (idCard header)")
    print("  run-all       - preclean → create → verify → delete")
    print("  show-config   - show resolved configuration")
    print("  help [command]")
    print()
    print("Global flags: --quiet/-q (hide response bodies), --debug")
    print(f"Environment: BASE_URL (default {DEFAULT_BASE_URL}), AUTH_TOKEN, CARD_ID (optional)")


def print_examples():
    print("Examples:")
    print("  card-runner create-card --image images/create.jpg --id 123 --name 'Jane Doe' --consent=true")
    print("  card-runner verify-card --image images/selfie.jpg --id 123")
    print("  card-runner delete-card --id 123")
    print("  card-runner run-all")


def cmd_help(args, state):
    command = getattr(args, "command_name", None)
    if command:
        return print_help_for_command(command, state)
    print_usage()
    print()
    print_examples()


def cmd_show_config(args, state):
    state.list_variables()
