"""Entry point for `python -m repotalk`."""

import sys


def _parse_cmd(text):
    """Parse a single input and print the result in test_cases.txt format."""
    from repotalk.commands import interpret, ParseError

    print(f"> {text}")

    try:
        cmd = interpret(text)
    except ParseError as e:
        print(f"error: {type(e).__name__}")
        return

    print(f"mode: {cmd.mode}")

    for key in ("name", "description", "tags", "website"):
        if not hasattr(cmd, key):
            continue
        val = getattr(cmd, key)
        if isinstance(val, tuple):
            print(f"{key}: {' '.join(val) if val else 'empty'}")
        elif val is None:
            print(f"{key}: none")
        else:
            print(f"{key}: {val}")


def _run_cmd(text):
    """Interpret and execute a single command against GitHub, printing the result."""
    from repotalk.commands import router, ParseError
    from repotalk.dispatcher import Dispatcher
    from repotalk.main import require_token

    try:
        result = router.dispatch(text, Dispatcher(token=require_token()), source="[cli]")
    except ParseError as e:
        print(f"Invalid command: {e}", file=sys.stderr)
        return 2
    print(result.to_text())
    return 1 if result.is_error else 0


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) >= 2 and argv[0] == "-parse":
        _parse_cmd(" ".join(argv[1:]))
        return 0
    if len(argv) >= 2 and argv[0] == "-run":
        return _run_cmd(" ".join(argv[1:]))

    from repotalk.main import main as serve
    serve(variant="fields" if argv[:1] == ["-fields"] else "command")
    return 0


if __name__ == "__main__" or not sys.argv[0]:
    sys.exit(main())
