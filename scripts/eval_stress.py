#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import contextlib
import json
import logging
import random
from dataclasses import dataclass
from typing import Dict, List

from websockets.asyncio.client import connect
from websockets.exceptions import ConnectionClosed

from eval_host.server import EvalHost, HostConfig
from handeval.cards import build_deck, cards_to_labels, deal
from handeval.evaluator import evaluate_best

LOGGER = logging.getLogger("eval_stress")


@dataclass
class ClientStats:
    requests: int = 0
    mismatches: int = 0
    errors: int = 0


async def run_client(
    *,
    name: str,
    url: str,
    requests: int,
    seed: int,
    stats: Dict[str, ClientStats],
) -> None:
    """Send random deals to the host and check every reply against a local evaluation."""
    stats[name] = ClientStats()
    rng = random.Random(seed)
    try:
        async with connect(url) as ws:
            for req_id in range(requests):
                deck = build_deck(rng.randrange(1 << 32))
                hole = deal(deck, 2)
                board = deal(deck, rng.choice((3, 4, 5)))
                await ws.send(
                    json.dumps(
                        {
                            "type": "evaluate",
                            "v": 1,
                            "req_id": req_id,
                            "hole": cards_to_labels(hole),
                            "board": cards_to_labels(board),
                        }
                    )
                )
                reply = json.loads(await ws.recv())
                stats[name].requests += 1
                if reply.get("type") == "error":
                    stats[name].errors += 1
                    LOGGER.warning("%s got error %s: %s", name, reply.get("code"), reply.get("msg"))
                    continue

                expected = evaluate_best(hole, board)
                assert expected is not None
                got = reply.get("hand") or {}
                if got.get("label") != expected.label or got.get("kickers") != [r.char for r in expected.kickers]:
                    stats[name].mismatches += 1
                    LOGGER.error("%s mismatch on %s | %s: %s", name, hole, board, got)
    except ConnectionClosed:
        LOGGER.warning("Client %s lost its connection", name)
    except Exception as exc:
        LOGGER.exception("Client %s terminated due to error: %s", name, exc)


async def run_stress(args: argparse.Namespace) -> int:
    host = EvalHost(HostConfig(host=args.host, port=args.port))
    url = f"ws://{args.host}:{args.port}/"

    LOGGER.info(
        "Starting eval host on %s:%s for %s clients x %s requests",
        args.host,
        args.port,
        args.clients,
        args.requests,
    )
    server_task = asyncio.create_task(host.start())
    await asyncio.sleep(0.25)  # allow server socket to bind

    stats: Dict[str, ClientStats] = {}
    names: List[str] = [f"client-{idx}" for idx in range(args.clients)]
    try:
        await asyncio.gather(
            *(
                run_client(name=name, url=url, requests=args.requests, seed=args.seed + idx, stats=stats)
                for idx, name in enumerate(names)
            )
        )
    finally:
        server_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await server_task

    LOGGER.info("Stress run complete. Summary:")
    for name, client_stats in stats.items():
        LOGGER.info(
            "  %-10s -> %5d requests, %3d mismatches, %3d errors",
            name,
            client_stats.requests,
            client_stats.mismatches,
            client_stats.errors,
        )
    failures = sum(s.mismatches + s.errors for s in stats.values())
    return 1 if failures else 0


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Spin up the eval host and hammer it with concurrent clients.")
    parser.add_argument("--host", default="127.0.0.1", help="Host interface for the embedded server.")
    parser.add_argument("--port", type=int, default=8770, help="Port for the embedded server.")
    parser.add_argument("--clients", type=int, default=8, help="Number of concurrent clients.")
    parser.add_argument("--requests", type=int, default=500, help="Evaluations per client.")
    parser.add_argument("--seed", type=int, default=777, help="Base seed for the random deals.")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, etc.).")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")
    raise SystemExit(asyncio.run(run_stress(args)))


if __name__ == "__main__":
    main()
