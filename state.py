"""
Resolved configuration for a single runner invocation.
"""

import os
import sys

from constants import (
    DEFAULT_BASE_URL,
    DEFAULT_CARD_ID,
    ENV_AUTH_TOKEN,
    ENV_BASE_URL,
    ENV_CARD_ID,
)
from utils.core import debug_print, mask_secret


class CLIState:
    """Configuration shared by every command of one process run."""

    def __init__(self, base_url=DEFAULT_BASE_URL, token="", card_id=DEFAULT_CARD_ID, quiet=False):
        self.variables = {
            "BASE_URL": base_url,
            "AUTH_TOKEN": token,
            "CARD_ID": card_id,
            "QUIET": "true" if quiet else "false",
            "DEBUG": "false",
        }

        # Variables that should be returned as booleans
        self.boolean_variables = {"QUIET", "DEBUG"}
        self.secret_variables = {"AUTH_TOKEN"}

    @classmethod
    def from_environment(cls, environ=None, quiet=False):
        """Resolve BASE_URL, AUTH_TOKEN and CARD_ID from the environment.

        Empty values fall back to the built-in defaults, except the token,
        which may stay empty: a warning is printed and the API will reject
        the calls later.
        """
        environ = os.environ if environ is None else environ
        base_url = environ.get(ENV_BASE_URL) or DEFAULT_BASE_URL
        token = environ.get(ENV_AUTH_TOKEN, "")
        card_id = environ.get(ENV_CARD_ID) or DEFAULT_CARD_ID

        if not token:
            print(
                f"⚠️  {ENV_AUTH_TOKEN} not set; protected endpoints will fail",
                file=sys.stderr,
            )
        debug_print(f"Resolved BASE_URL={base_url} CARD_ID={card_id}")
        return cls(base_url=base_url, token=token, card_id=card_id, quiet=quiet)

    @property
    def base_url(self):
        return self.get_variable("BASE_URL")

    @property
    def token(self):
        return self.get_variable("AUTH_TOKEN")

    @property
    def card_id(self):
        return self.get_variable("CARD_ID")

    @property
    def quiet(self):
        return self.get_variable("QUIET")

    def set_variable(self, name, value):
        name = name.upper()
        if name in self.variables:
            self.variables[name] = str(value) if value is not None else ""
            return True
        debug_print(f"Unknown variable: {name}")
        return False

    def get_variable(self, name):
        name = name.upper()
        value = self.variables.get(name, "")

        # Convert boolean variables to actual booleans
        if name in self.boolean_variables:
            return value.lower() in ["true", "1", "yes", "on"]

        return value

    def list_variables(self):
        print("\n" + "=" * 50)
        print("CURRENT CONFIGURATION")
        print("=" * 50)
        for name, value in self.variables.items():
            status = "✅ SET" if value else "❌ UNSET"
            display_value = str(value)
            if name in self.secret_variables:
                display_value = mask_secret(display_value)
            display_value = (
                display_value[:40] + "..." if len(display_value) > 40 else display_value
            )
            print(f"{name:20} = {display_value:45} [{status}]")
        print("=" * 50)
