import logging

import requests

from chat_service_client.config import (
    BASE_URL,
    CHAT_COMPLETION_PATH,
    CHAT_MODEL,
    CHAT_PROMPT,
    GEMINI_STREAM_PATH,
    HEALTH_PATH,
    STREAM_DONE_MARKER,
    STREAM_MODEL,
    STREAM_PROMPT,
)
from chat_service_client.models import user_request

JSON_HEADERS = {"Content-Type": "application/json"}

LOGGER = logging.getLogger(__name__)


def _status_line(res: requests.Response) -> str:
    return f"Status: {res.status_code} {res.reason or ''}".rstrip()


def _print_line(line: bytes):
    print(line.rstrip(b"\r").decode("utf-8", errors="replace"), flush=True)


def _print_full_response(res: requests.Response):
    """Read the whole body and print it next to the status line."""
    try:
        body = res.content.decode("utf-8", errors="replace")
    except requests.RequestException as e:
        LOGGER.error("Failed to read response from %s: %s", res.url, e)
        return

    print(_status_line(res))
    print(f"Response: {body}")


def check_health(base_url: str = BASE_URL):
    print("\n=== Testing Health Check ===")

    try:
        res = requests.get(f"{base_url}{HEALTH_PATH}", stream=True)
    except requests.RequestException as e:
        LOGGER.error("Failed to send health check request: %s", e)
        return

    with res:
        _print_full_response(res)


def chat_completion(base_url: str = BASE_URL):
    print("\n=== Testing Chat Completion (Non-Streaming) ===")

    try:
        payload = user_request(CHAT_MODEL, CHAT_PROMPT).to_json()
    except ValueError as e:
        LOGGER.error("Failed to encode chat request: %s", e)
        return

    try:
        res = requests.post(
            f"{base_url}{CHAT_COMPLETION_PATH}",
            headers=JSON_HEADERS,
            data=payload.encode("utf-8"),
            stream=True,
        )
    except requests.RequestException as e:
        LOGGER.error("Failed to send POST request: %s", e)
        return

    with res:
        _print_full_response(res)


def gemini_stream(base_url: str = BASE_URL):
    """
    Post to the streaming endpoint and echo each raw line as soon as it
    arrives. The completion marker is printed even when the stream breaks.
    """
    print("\n=== Testing Gemini Stream Endpoint (Raw) ===")

    try:
        payload = user_request(STREAM_MODEL, STREAM_PROMPT).to_json()
    except ValueError as e:
        LOGGER.error("Failed to encode stream request: %s", e)
        return

    try:
        res = requests.post(
            f"{base_url}{GEMINI_STREAM_PATH}",
            headers=JSON_HEADERS,
            data=payload.encode("utf-8"),
            stream=True,
        )
    except requests.RequestException as e:
        LOGGER.error("Failed to send POST request: %s", e)
        return

    with res:
        print(_status_line(res))
        print("Streaming Response (Raw):")
        pending = b""
        try:
            for chunk in res.iter_content(chunk_size=None):
                pending += chunk
                *lines, pending = pending.split(b"\n")
                for line in lines:
                    _print_line(line)
        except requests.RequestException as e:
            # Whatever arrived before the break is still printed
            if pending:
                _print_line(pending)
            LOGGER.error("Failed to read stream: %s", e)
        else:
            if pending:
                _print_line(pending)

    print(STREAM_DONE_MARKER, flush=True)
