"""
HTTP request execution for the card API.

The executor only sends requests and collects the raw response. Deciding
whether a status code means success is left to each command.
"""

import json
import socket
import threading
from collections import namedtuple

import requests

from constants import REQUEST_TIMEOUT
from utils.core import debug_print, mask_secret
from utils.errors import PayloadEncodingError, TransportError, UsageError

HTTPResult = namedtuple("HTTPResult", ["status_code", "body"])

CHUNK_SIZE = 64 * 1024


def auth_headers(token, extra=None):
    """Headers sent on every API call.

    ``Content-Type`` is included even for bodyless requests, which is what
    the API has always received from this client.
    """
    headers = {
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
    }
    if extra:
        headers.update(extra)
    return headers


def _flatten_headers(headers):
    flat = {}
    for key, value in (headers or {}).items():
        if isinstance(value, (list, tuple)):
            flat[key] = ", ".join(str(v) for v in value)
        else:
            flat[key] = str(value)
    return flat


def _encode_body(body):
    if body is None:
        return None
    if hasattr(body, "to_payload"):
        body = body.to_payload()
    try:
        return json.dumps(body).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise PayloadEncodingError(f"marshal body: {e}") from e


def _describe_headers(headers):
    shown = dict(headers)
    if "Authorization" in shown:
        scheme, _, credential = shown["Authorization"].partition(" ")
        shown["Authorization"] = f"{scheme} {mask_secret(credential)}".rstrip()
    return shown


def _check_header_encoding(headers):
    for key, value in headers.items():
        try:
            value.encode("latin-1")
        except UnicodeEncodeError:
            raise UsageError(
                f"header {key} contains characters that cannot be sent in HTTP headers"
            ) from None


def _exchange(method, url, headers, data, timeout, outcome):
    """Send the request and read the whole body; runs on the worker thread."""
    try:
        response = requests.request(
            method,
            url,
            headers=headers,
            data=data,
            timeout=timeout,
            stream=True,
        )
        try:
            outcome["status_code"] = response.status_code
            outcome["body"] = b"".join(response.iter_content(chunk_size=CHUNK_SIZE))
        finally:
            response.close()
    except Exception as e:
        outcome["error"] = e


def execute(method, url, headers=None, body=None, timeout=REQUEST_TIMEOUT):
    """Send one request and return its status code and raw body.

    The exchange runs on a daemon thread so the ceiling holds for connect,
    headers and body together; a call still running at the deadline is
    abandoned.

    Args:
        method (str): HTTP method
        url (str): Absolute request URL
        headers (dict): Header values; a list value is sent comma-joined
        body: JSON-serializable object, an object with ``to_payload()``,
            or None for no body
        timeout (float): Ceiling in seconds for the whole exchange

    Returns:
        HTTPResult: status code and response bytes, whatever the status

    Raises:
        PayloadEncodingError: If the body cannot be serialized
        UsageError: If a header value cannot be encoded for HTTP
        TransportError: On connection failure, read failure or timeout
    """
    data = _encode_body(body)
    flat_headers = _flatten_headers(headers)
    _check_header_encoding(flat_headers)
    debug_print(f"{method} {url}")
    debug_print(f"Headers: {_describe_headers(flat_headers)}")
    if data is not None:
        debug_print(f"Request body: {len(data)} bytes")

    outcome = {}
    worker = threading.Thread(
        target=_exchange,
        args=(method, url, flat_headers, data, timeout, outcome),
        daemon=True,
    )
    worker.start()
    worker.join(timeout)
    if worker.is_alive():
        debug_print(f"⏳ Timeout calling {url}")
        raise TransportError(f"do request: timed out after {timeout}s", timed_out=True)

    error = outcome.get("error")
    if isinstance(error, (requests.Timeout, socket.timeout)):
        debug_print(f"⏳ Timeout calling {url}: {error}")
        raise TransportError(f"do request: timed out after {timeout}s", timed_out=True) from error
    if isinstance(error, (requests.RequestException, UnicodeError)):
        debug_print(f"❌ Error calling {url}: {error}")
        raise TransportError(f"do request: {error}") from error
    if error is not None:
        raise error

    payload = outcome["body"]
    debug_print(f"Response: status={outcome['status_code']} body={len(payload)} bytes")
    return HTTPResult(outcome["status_code"], payload)
