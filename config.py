"""
Configuration for devgraph.

Values come from the environment (a local .env file is loaded first);
command-line flags in main.py and scripts/ override them.
"""
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = Path(__file__).parent

# Database
MEMGRAPH_URI = os.getenv("MEMGRAPH_URI", "bolt://localhost:7687")
MEMGRAPH_USER = os.getenv("MEMGRAPH_USER", "memgraph")
MEMGRAPH_PASSWORD = os.getenv("MEMGRAPH_PASSWORD", "memgraph")
MEMGRAPH_DATABASE = os.getenv("MEMGRAPH_DATABASE", "memgraph")

# Readiness wait
WAIT_MAX_ATTEMPTS = int(os.getenv("WAIT_MAX_ATTEMPTS", "100"))
WAIT_INTERVAL = float(os.getenv("WAIT_INTERVAL", "1.0"))
# Integration tests give up sooner than the main program
TEST_WAIT_MAX_ATTEMPTS = int(os.getenv("TEST_WAIT_MAX_ATTEMPTS", "10"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "text").lower()  # text | json
