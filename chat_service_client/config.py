import os

from dotenv import load_dotenv

# Only LOG_LEVEL is read from the environment
load_dotenv()

BASE_URL = "http://localhost:3000"
HEALTH_PATH = "/health"
CHAT_COMPLETION_PATH = "/chat-completion"
GEMINI_STREAM_PATH = "/gemini-stream"

CHAT_MODEL = "gpt-4o-mini"
CHAT_PROMPT = "What model are you using?"
STREAM_MODEL = "gemini-1.5-flash"
STREAM_PROMPT = "Tell me a short joke about programming."

PAUSE_SECONDS = 1
STREAM_DONE_MARKER = "--- Stream Finished ---"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
