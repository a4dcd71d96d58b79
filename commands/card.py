"""
Card API commands: create, main image download, verify and delete.
"""

from pathlib import Path

from constants import (
    CARD_PATH,
    DEFAULT_MAIN_IMAGE_OUT,
    MAIN_IMAGE_PATH,
    MISSING_CARD_STATUSES,
    REGISTER_PATH,
    VERIFY_PATH,
)
from data.payloads import CreateCardRequest, VerifyCardRequest, parse_verify_response
from utils.core import debug_print, join_url
from utils.encoding import encode_base64, encode_data_uri
from utils.errors import FileAccessError, HTTPStatusError, UsageError
from utils.transport import auth_headers, execute
from utils.validation import require_value


def _is_success(status_code):
    return 200 <= status_code < 300


def _print_body(state, body):
    if not state.quiet:
        print(body.decode("utf-8", errors="replace"))


def create_card(state, image_path, card_id, name, consent):
    """POST /api/card/integration/register with the image as raw base64."""
    request = CreateCardRequest(
        id=card_id,
        name=name,
        consent_term_signed=consent,
        image=encode_base64(image_path),
    )
    url = join_url(state.base_url, REGISTER_PATH)
    result = execute("POST", url, auth_headers(state.token), request)

    print(f"status={result.status_code}")
    _print_body(state, result.body)
    if not _is_success(result.status_code):
        raise HTTPStatusError(result.status_code, result.body)
    return result


def fetch_main_image(state, id_card, out_path=None):
    """GET the stored main image of a card and save it verbatim.

    Only a 200 response counts as success. Returns the path written.
    """
    require_value(id_card, "--idcard")
    url = join_url(state.base_url, MAIN_IMAGE_PATH)
    result = execute("GET", url, auth_headers(state.token, {"idCard": id_card}))

    print(f"status={result.status_code}")
    if result.status_code != 200:
        _print_body(state, result.body)
        raise HTTPStatusError(
            result.status_code,
            result.body,
            message=f"expected 200, got {result.status_code}",
        )

    out = Path(out_path or DEFAULT_MAIN_IMAGE_OUT)
    try:
        out.write_bytes(result.body)
    except OSError as e:
        raise FileAccessError(out, e.strerror or str(e)) from e
    print(f"✅ image saved to {out} ({len(result.body)} bytes)")
    return out


def verify_card(state, image_path, card_id, name, detail, endpoint=None):
    """Submit an image for comparison against the card's stored image.

    The response summary is best effort: a body that does not decode as a
    verify response is reported only through the raw output.
    """
    request = VerifyCardRequest(
        id=card_id,
        name=name,
        detail=detail,
        image=encode_data_uri(image_path),
    )
    url = join_url(state.base_url, endpoint or VERIFY_PATH)

    print(f"[verify] POST {url} (JSON)")
    result = execute("POST", url, auth_headers(state.token), request)
    print(f"status={result.status_code}")
    _print_body(state, result.body)
    if not _is_success(result.status_code):
        raise HTTPStatusError(result.status_code, result.body)

    verification = parse_verify_response(result.body)
    if verification is None:
        debug_print("Verify response did not match the expected shape")
        return None

    icon = "✅" if verification.response.success else "❌"
    print(
        f"[verify] {icon} match | similarity={verification.similarity} "
        f"| status={verification.response.status} | idLog={verification.response.id_log}"
    )
    return verification


def delete_card(state, card_id):
    """DELETE /api/card/{id}."""
    if not card_id:
        raise UsageError("--id is empty (set CARD_ID or pass --id)")
    url = join_url(state.base_url, CARD_PATH.format(id=card_id))
    result = execute("DELETE", url, auth_headers(state.token))

    print(f"status={result.status_code}")
    if result.body:
        _print_body(state, result.body)
    if not _is_success(result.status_code):
        raise HTTPStatusError(
            result.status_code,
            result.body,
            message=f"delete failed: {result.status_code}",
        )
    return result


def delete_card_ignore_missing(state, card_id):
    """Delete a card, treating 404/422 as "already gone".

    Returns True when a card was deleted and False when none existed.
    """
    try:
        delete_card(state, card_id)
    except HTTPStatusError as e:
        if e.status_code not in MISSING_CARD_STATUSES:
            raise
        print(f"[preclean] id={card_id} does not exist or was already deleted, continuing")
        return False
    print(f"[preclean] id={card_id} deleted")
    return True


def cmd_create_card(args, state):
    create_card(state, args.image, args.id, args.name, args.consent)


def cmd_main_image(args, state):
    fetch_main_image(state, args.idcard, args.out)


def cmd_verify_card(args, state):
    verify_card(state, args.image, args.id, args.name, args.detail, args.endpoint)


def cmd_delete_card(args, state):
    delete_card(state, args.id)
