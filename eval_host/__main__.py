import argparse
import asyncio
import logging

from .server import EvalHost, HostConfig


def main() -> None:
    parser = argparse.ArgumentParser(description="Hand evaluator WebSocket host")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8770)
    parser.add_argument("--max-players", type=int, default=10, help="Largest showdown accepted in one request")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, etc.).")
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    config = HostConfig(host=args.host, port=args.port, max_players=args.max_players)
    asyncio.run(EvalHost(config).start())


if __name__ == "__main__":
    main()
