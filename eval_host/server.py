from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Dict, List, Optional

from websockets.asyncio.server import ServerConnection, serve
from websockets.exceptions import ConnectionClosed
from websockets.http11 import Request, Response

from handeval.cards import Card, parse_card
from handeval.evaluator import MIN_CARDS, evaluate_best, showdown_winners
from handeval.models import CATEGORY_LABELS

LOGGER = logging.getLogger("eval_host")

PROTOCOL_VERSION = 1

# EvalHost exposes the evaluator to display and analytics clients over
# WebSocket. All card logic stays in handeval; this module only validates
# requests and shapes replies.


class EvalRequestError(Exception):
    def __init__(self, code: str, msg: str) -> None:
        super().__init__(msg)
        self.code = code
        self.msg = msg


@dataclass
class HostConfig:
    host: str = "0.0.0.0"
    port: int = 8770
    max_players: int = 10


def _parse_tokens(raw: Any, field_name: str) -> List[Card]:
    if not isinstance(raw, list):
        raise EvalRequestError("BAD_SCHEMA", f"{field_name} must be a list of cards")
    cards: List[Card] = []
    for token in raw:
        card = parse_card(token)
        if card is None:
            raise EvalRequestError("BAD_CARD", f"Invalid card in {field_name}: {token!r}")
        cards.append(card)
    return cards


def _missing_reason(card_count: int) -> str:
    return "NOT_ENOUGH_CARDS" if card_count < MIN_CARDS else "TOO_MANY_CARDS"


class EvalHost:
    def __init__(self, config: Optional[HostConfig] = None) -> None:
        self.config = config or HostConfig()
        self.active_connections = 0
        self.requests_served = 0

    async def start(self) -> None:
        async with serve(
            self._handle_connection,
            self.config.host,
            self.config.port,
            process_request=_process_request,
        ):
            LOGGER.info("Eval host listening on %s:%s", self.config.host, self.config.port)
            await asyncio.Future()

    async def _handle_connection(self, websocket: ServerConnection) -> None:
        self.active_connections += 1
        LOGGER.info("Client connected (%d active)", self.active_connections)
        try:
            async for raw in websocket:
                reply = self.handle_raw(raw)
                await websocket.send(json.dumps(reply))
        except ConnectionClosed:
            pass
        except Exception as exc:  # noqa: BLE001
            LOGGER.exception("Eval connection crashed: %s", exc)
        finally:
            self.active_connections -= 1
            LOGGER.info("Client disconnected (%d active)", self.active_connections)

    def handle_raw(self, raw: Any) -> Dict[str, Any]:
        try:
            message = json.loads(raw)
        except (TypeError, ValueError, RecursionError):
            return _error("BAD_JSON", "Message must be a JSON object")
        if not isinstance(message, dict):
            return _error("BAD_JSON", "Message must be a JSON object")
        try:
            reply = self.handle_message(message)
        except EvalRequestError as exc:
            reply = _error(exc.code, exc.msg)
        if "req_id" in message:
            reply["req_id"] = message["req_id"]
        return reply

    def handle_message(self, message: Dict[str, Any]) -> Dict[str, Any]:
        msg_type = message.get("type")
        if msg_type == "evaluate":
            reply = self._evaluate(message)
        elif msg_type == "showdown":
            reply = self._showdown(message)
        elif msg_type == "categories":
            reply = {"type": "categories", "labels": list(CATEGORY_LABELS.values())}
        else:
            raise EvalRequestError("UNKNOWN_TYPE", f"Unsupported message type: {msg_type!r}")
        self.requests_served += 1
        return {"v": PROTOCOL_VERSION, **reply}

    def _evaluate(self, message: Dict[str, Any]) -> Dict[str, Any]:
        hole = _parse_tokens(message.get("hole"), "hole")
        board = _parse_tokens(message.get("board", []), "board")
        hand = evaluate_best(hole, board)
        if hand is None:
            return {"type": "result", "hand": None, "reason": _missing_reason(len(hole) + len(board))}
        return {"type": "result", "hand": hand.as_payload()}

    def _showdown(self, message: Dict[str, Any]) -> Dict[str, Any]:
        board = _parse_tokens(message.get("board", []), "board")
        players = message.get("players")
        if not isinstance(players, dict) or not players:
            raise EvalRequestError("BAD_SCHEMA", "players must map player ids to hole cards")
        if len(players) > self.config.max_players:
            raise EvalRequestError("BAD_SCHEMA", f"At most {self.config.max_players} players per showdown")

        hands = {
            str(player_id): evaluate_best(_parse_tokens(hole, f"players.{player_id}"), board)
            for player_id, hole in players.items()
        }
        return {
            "type": "showdown",
            "winners": showdown_winners(hands),
            "hands": {player_id: hand.as_payload() if hand is not None else None for player_id, hand in hands.items()},
        }


def _error(code: str, msg: str) -> Dict[str, Any]:
    return {"v": PROTOCOL_VERSION, "type": "error", "code": code, "msg": msg}


def _process_request(connection: ServerConnection, request: Request) -> Optional[Response]:
    """Answer plain HTTP health checks; let WebSocket upgrades through."""
    if request.headers.get("Upgrade", "").lower() == "websocket":
        return None
    if request.path in {"/", "/health", "/healthz"}:
        return connection.respond(HTTPStatus.OK, "eval host running\n")
    return connection.respond(HTTPStatus.NOT_FOUND, "not found\n")
