#!/usr/bin/env python3
"""Interactive chat against a running relay (manual debugging)."""

from __future__ import annotations

import sys
import asyncio
import argparse
import contextlib
from pathlib import Path

if __package__ in {None, ""}:
    sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from tests.client.chat import ChatClient  # noqa: E402
from tests.client.env import build_ws_url, derive_default_server  # noqa: E402


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Interactive relay chat client")
    p.add_argument("--server", default=derive_default_server())
    p.add_argument("--secure", action="store_true")
    return p.parse_args()


async def _read_stdin_line() -> str:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, sys.stdin.readline)


async def _interactive_send_loop(client: ChatClient) -> None:
    while True:
        line = await _read_stdin_line()
        if not line:
            return
        line = line.strip()
        if not line:
            continue

        if line == "/quit":
            return
        if line == "/stop":
            await client.interrupt()
            continue
        if line.startswith("/voice "):
            path = Path(line.removeprefix("/voice ").strip()).expanduser()
            if not path.is_file():
                print(f"no such file: {path}")
                continue
            await client.send_audio_file(path)
            continue

        await client.send_text(line)


async def run(args: argparse.Namespace) -> int:
    url = build_ws_url(args.server, secure=args.secure)
    print(f"ws: {url}")
    print("Commands:")
    print("  <text>          ask Rev")
    print("  /voice <file>   send a recording")
    print("  /stop           interrupt")
    print("  /quit")

    client = ChatClient(url)
    task = asyncio.create_task(client.run())
    try:
        await client.wait_connected(timeout=10.0)
        await _interactive_send_loop(client)
    except TimeoutError:
        print("could not connect")
        return 1
    finally:
        await client.close()
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError, Exception):
            await task

    return 0


def main() -> None:
    raise SystemExit(asyncio.run(run(parse_args())))


if __name__ == "__main__":
    main()
