import argparse
import logging
import sys
import time

from chat_service_client.client import chat_completion, check_health, gemini_stream
from chat_service_client.config import BASE_URL, LOG_FORMAT, LOG_LEVEL, PAUSE_SECONDS

LOGGER = logging.getLogger(__name__)


def run_tests(base_url=BASE_URL, pause=PAUSE_SECONDS):
    # Make sure the server is running before starting this client
    LOGGER.info("Running client tests against %s...", base_url)

    check_health(base_url)
    time.sleep(pause)  # short pause between tests

    chat_completion(base_url)
    time.sleep(pause)

    gemini_stream(base_url)

    LOGGER.info("Tests complete.")


def resolve_log_level(name):
    """Fall back to INFO when the name is not a known logging level."""
    if isinstance(logging.getLevelName(name), int):
        return name
    return "INFO"


def main(argv=None):
    parser = argparse.ArgumentParser(
        description=(
            f"Manual integration test client for the chat service at {BASE_URL}. "
            "Calls /health, /chat-completion and /gemini-stream in order and prints the raw responses."
        )
    )
    parser.parse_args(argv)

    level = resolve_log_level(LOG_LEVEL)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    if level != LOG_LEVEL:
        LOGGER.warning("Unknown LOG_LEVEL %r, using INFO", LOG_LEVEL)

    run_tests()
    return 0


if __name__ == "__main__":
    sys.exit(main())
