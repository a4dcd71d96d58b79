DEFAULT_BASE_URL = "https://api.develop.biodoc.com.br"

# Fallback card id when CARD_ID is not set in the environment
DEFAULT_CARD_ID = "99980000999999993"

DEFAULT_IMAGE = "image/created_1.jpg"
DEFAULT_NAME = "Celso QA"
DEFAULT_DETAIL = ""
DEFAULT_RUN_ALL_DETAIL = "{'guia':'654321'}"
DEFAULT_MAIN_IMAGE_OUT = "mainimage.bin"

REQUEST_TIMEOUT = 20  # seconds, whole request/response cycle

REGISTER_PATH = "/api/card/integration/register"
MAIN_IMAGE_PATH = "/api/card/integration/mainimage"
VERIFY_PATH = "/api/card/integration/verify"
CARD_PATH = "/api/card/{id}"

# Delete statuses that mean the card is already gone
MISSING_CARD_STATUSES = (404, 422)

MIME_BY_EXTENSION = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".webp": "image/webp",
}
FALLBACK_MIME = "image/jpeg"

ENV_BASE_URL = "BASE_URL"
ENV_AUTH_TOKEN = "AUTH_TOKEN"
ENV_CARD_ID = "CARD_ID"


def get_commands(state):
    """Build the mapping of subcommand names to handlers."""
    from commands.card import (
        cmd_create_card,
        cmd_delete_card,
        cmd_main_image,
        cmd_verify_card,
    )
    from commands.common import cmd_help, cmd_show_config
    from commands.flow import cmd_run_all

    return {
        "create-card": lambda args: cmd_create_card(args, state),
        "main-image": lambda args: cmd_main_image(args, state),
        "verify-card": lambda args: cmd_verify_card(args, state),
        "delete-card": lambda args: cmd_delete_card(args, state),
        "run-all": lambda args: cmd_run_all(args, state),
        "show-config": lambda args: cmd_show_config(args, state),
        "help": lambda args: cmd_help(args, state),
    }
