"""repotalk main: loads the GitHub token and serves the create_repo tool over MCP stdio.

Usage:
    GITHUB_TOKEN=... python -m repotalk            # free-text "command" tool
    GITHUB_TOKEN=... python -m repotalk -fields    # description/tags/website tool
"""

import asyncio
import os
import sys
import time

from repotalk.dispatcher import Dispatcher
from repotalk.server import RepoServer


def log(msg):
    # stdout carries the MCP stream
    print(msg, file=sys.stderr, flush=True)


def load_token():
    """GITHUB_TOKEN from the environment, else from github_credentials.py.

    Returns None if neither is set.
    """
    token = os.environ.get("GITHUB_TOKEN", "").strip()
    if token:
        return token
    try:
        from repotalk.github_credentials import GITHUB_TOKEN
    except ImportError:
        return None
    return GITHUB_TOKEN.strip() or None


def require_token():
    token = load_token()
    if not token:
        raise SystemExit("GITHUB_TOKEN environment variable is required")
    return token


def main(variant="command"):
    t0 = time.time()
    dispatcher = Dispatcher(token=require_token())
    server = RepoServer(dispatcher, variant=variant)
    log(f"GitHub client ready ({time.time() - t0:.1f}s)")
    log(f"repotalk MCP server running on stdio (tool variant: {variant})")

    try:
        asyncio.run(server.run())
    except KeyboardInterrupt:
        log("\nShutting down.")


if __name__ == "__main__":
    main()
