"""
The run-all command: preclean, create, verify and delete one card in order.
"""

from commands.card import create_card, delete_card, delete_card_ignore_missing, verify_card
from constants import VERIFY_PATH
from utils.core import debug_print
from utils.errors import RunnerError, StepError


def _run_step(step, func, *args):
    debug_print(f"run-all step: {step}")
    try:
        return func(*args)
    except RunnerError as e:
        raise StepError(step, e) from e


def run_all(state, image_path, card_id, name, detail, preclean=True):
    """Run the full card lifecycle, stopping at the first failing step.

    Consent is always sent as signed so the create step is accepted.
    """
    steps = []
    if preclean:
        _run_step("preclean", delete_card_ignore_missing, state, card_id)
        steps.append("preclean")

    _run_step("create", create_card, state, image_path, card_id, name, True)
    steps.append("create")

    _run_step("verify", verify_card, state, image_path, card_id, name, detail, VERIFY_PATH)
    steps.append("verify")

    _run_step("delete", delete_card, state, card_id)
    steps.append("delete")

    print(f"✅ full flow complete: {' → '.join(steps)}")
    return steps


def cmd_run_all(args, state):
    run_all(state, args.image, args.id, args.name, args.detail, args.preclean)
