"""Configuration management for the calculator."""
import os
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Strict parsing rejects malformed input instead of guessing a result
CALC_STRICT = os.getenv("CALC_STRICT", "true").lower() in ("1", "true", "yes", "on")
MAX_EXPRESSION_LENGTH = int(os.getenv("MAX_EXPRESSION_LENGTH", "1000"))
TRACE_LIMIT = int(os.getenv("TRACE_LIMIT", "1000"))

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8787"))
