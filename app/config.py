"""
Environment configuration module
Loads optional settings for the confirmation service.
Patterns are not configurable here: they ship with app/parser/patterns.yaml.
"""

import os
from dotenv import load_dotenv

# Load .env file (for local development)
load_dotenv()

# Optional environment variables (with defaults)
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
WEBHOOK_URL = os.getenv('WEBHOOK_URL', '')
WEBHOOK_TIMEOUT = int(os.getenv('WEBHOOK_TIMEOUT', '10'))
MAX_MESSAGE_BYTES = int(os.getenv('MAX_MESSAGE_BYTES', '65536'))

if WEBHOOK_TIMEOUT <= 0:
    raise ValueError(f"WEBHOOK_TIMEOUT must be positive, got {WEBHOOK_TIMEOUT}")

if MAX_MESSAGE_BYTES <= 0:
    raise ValueError(f"MAX_MESSAGE_BYTES must be positive, got {MAX_MESSAGE_BYTES}")
