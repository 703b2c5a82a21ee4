"""
Runtime configuration for the calculator.

Server settings come from the environment; engine limits are constants.
"""

import os
import secrets

# Server configuration
HOST = os.environ.get("CALCULATOR_HOST", "0.0.0.0")
PORT = int(os.environ.get("CALCULATOR_PORT", "5000"))
SECRET_KEY = os.environ.get("CALCULATOR_SECRET_KEY") or secrets.token_hex(16)
LOG_LEVEL = os.environ.get("CALCULATOR_LOG_LEVEL", "INFO").upper()
MAX_SESSIONS = int(os.environ.get("CALCULATOR_MAX_SESSIONS", "1000"))

# Engine limits
MAX_INPUT_LENGTH = 15
SIGNIFICANT_DIGITS = 12

# Display thresholds for switching to exponential notation
EXPONENT_UPPER = 1e12
EXPONENT_LOWER = 1e-6
EXPONENT_DIGITS = 6
