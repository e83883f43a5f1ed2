"""
orthopack — entry point.

Usage:
    python -m orthopack serve                 # start web server on :8000
    python -m orthopack serve --port 3000
    python -m orthopack demo --count 20 --heuristic best --metric manhattan
"""

import json
import logging
import random
import sys


USAGE = (
    "Usage: python -m orthopack serve [--port PORT] [--host HOST]\n"
    "       python -m orthopack demo [--count N] [--heuristic first|best] "
    "[--metric euclidean|chessboard|manhattan] [--seed S]"
)


def _flags(args: list[str], **defaults) -> dict:
    """Read `--name value` pairs; unknown flags are ignored."""
    values = dict(defaults)
    for flag, value in zip(args, args[1:]):
        name = flag[2:].replace("-", "_") if flag.startswith("--") else None
        if name in values:
            kind = type(defaults[name]) if defaults[name] is not None else str
            values[name] = kind(value)
    return values


def _serve(args: list[str]) -> None:
    from orthopack.web.server import main as serve

    flags = _flags(args, host="127.0.0.1", port=8000)
    serve(host=flags["host"], port=flags["port"])


def _demo(args: list[str]) -> None:
    from orthopack.config import PackingOptions
    from orthopack.packer import RectArrangement, arrangement_to_dict

    flags = _flags(args, count=12, seed=0, heuristic=None, metric=None)
    count, seed = flags["count"], flags["seed"]
    opts = {k: flags[k] for k in ("heuristic", "metric") if flags[k] is not None}

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    rng = random.Random(seed)
    arr = RectArrangement(center=(0.0, 0.0), options=PackingOptions(**opts))
    for _ in range(count):
        arr.add_rect(rng.uniform(20.0, 200.0), rng.uniform(0.5, 2.0))
    print(json.dumps(arrangement_to_dict(arr), indent=2))


COMMANDS = {"serve": _serve, "demo": _demo}


def main():
    args = sys.argv[1:] or ["serve"]
    command = COMMANDS.get(args[0])
    if command is None:
        print(f"Unknown command: {args[0]}")
        print(USAGE)
        sys.exit(1)
    command(args[1:])


if __name__ == "__main__":
    main()
