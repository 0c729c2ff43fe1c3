"""Command router: interprets input text, logs it, and dispatches the result.

The dispatcher is passed in by the caller; the router holds no client.
"""

import os
from datetime import datetime

from repotalk.commands.interpret import interpret, from_fields
from repotalk.commands.parse import ParseError

# Log file: lives next to the repotalk package directory unless REPOTALK_LOG is set
_LOG_PATH = os.environ.get("REPOTALK_LOG") or os.path.join(
    os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "repotalk.log")


def format_command(cmd):
    """One-line summary of a parsed command, e.g. 'update-tags, name=..., tags=[...]'."""
    parts = [cmd.mode]
    for key in ("name", "description", "tags", "website"):
        if hasattr(cmd, key):
            value = getattr(cmd, key)
            if isinstance(value, tuple):
                value = list(value)
            parts.append(f"{key}={value!r}")
    return ", ".join(parts)


def _log_request(text, cmd=None, error=None, source="[mcp]"):
    """Append a compact 2-line entry to the log file."""
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    if error is not None:
        parse_line = f"  -> error: {type(error).__name__}: {error}"
    else:
        parse_line = f"  -> {format_command(cmd)}"
    try:
        with open(_LOG_PATH, "a") as f:
            f.write(f"{ts} {source}  {text}\n{parse_line}\n")
    except OSError:
        pass


def parse(text, source="[mcp]"):
    """Interpret text and log the outcome. ParseErrors propagate to the caller."""
    try:
        cmd = interpret(text)
    except ParseError as e:
        _log_request(text, error=e, source=source)
        raise
    _log_request(text, cmd, source=source)
    return cmd


def parse_fields(description, tags, website=None, source="[mcp]"):
    """Build a create command from discrete fields, logging it like parse()."""
    text = f"description={description!r} tags={tags!r} website={website!r}"
    try:
        cmd = from_fields(description, tags, website)
    except ParseError as e:
        _log_request(text, error=e, source=source)
        raise
    _log_request(text, cmd, source=source)
    return cmd


def dispatch(text, dispatcher, source="[mcp]"):
    """Interpret text and run it.

    Args:
        text: Natural-language command.
        dispatcher: A Dispatcher (or anything with dispatch(cmd)).
        source: Source tag for logging, e.g. "[mcp]" or "[cli]".

    Returns:
        OperationResult from the dispatcher. Raises ParseError before any
        API call if the text can't be interpreted.
    """
    return dispatcher.dispatch(parse(text, source))
