"""Static configuration for the Change-Id hook.

All user-editable settings live in a single optional JSON file so a
repository can tune the hook without touching Python. git runs hooks from the
top of the work tree, so the default path is relative to the working
directory.
"""

import json
import os

from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = os.getcwd()

# CHANGEID_CONFIG may point anywhere; otherwise look for a repo-local file.
CONFIG_PATH = os.getenv("CHANGEID_CONFIG") or os.path.join(PROJECT_ROOT, ".changeid.json")


def _load_json_config() -> dict:
    """Load the JSON config, treating a missing file as empty."""

    if not os.path.exists(CONFIG_PATH):
        return {}

    with open(CONFIG_PATH, "r", encoding="utf-8") as handle:
        return json.load(handle)


_CONFIG = _load_json_config()

# Master switch; git's gerrit.createChangeId=false also disables the hook.
ENABLED = bool(_CONFIG.get("enabled", True))

# "git-object" hashes like `git hash-object -t commit`, "plain" hashes the
# synthetic commit text alone.
HASH_STRATEGY = _CONFIG.get("hash_strategy", "git-object")

# None means use git's core.commentChar.
COMMENT_CHAR = _CONFIG.get("comment_char")

# Logging configuration (optional).
LOGGING = _CONFIG.get("logging", {})
