"""Handlers for 'moodboard web' command."""

import shlex
import shutil
import sys

from textual_serve.server import Server

from moodboard.config import load_config


def web(args) -> int:
    config = load_config(getattr(args, "api", None))

    moodboard = shutil.which("moodboard")
    if moodboard is None:
        print("error: moodboard not found on PATH", file=sys.stderr)
        return 1

    command = f"{shlex.quote(moodboard)} --api {shlex.quote(config.api_base)}"
    server = Server(command, host=args.host, port=args.port, title="moodboard")

    print(f"serving {config.api_base} at http://{args.host}:{args.port}")
    server.serve()
    return 0
