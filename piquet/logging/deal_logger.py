"""Deal logger for detailed deal replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from pydantic import BaseModel

from piquet.models.card import Deck
from piquet.models.game_state import Step
from piquet.models.moves import MoveRecord, PlayerId
from piquet.models.player import Player

from .formatters import format_cards, format_move


class DealLogConfig(BaseModel):
    """Configuration for deal logging."""

    enabled: bool = False
    output_path: str = "deal_log.jsonl"


class DealLogger:
    """Logger for deal events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    This allows step-by-step replay of the deals of a game.
    """

    def __init__(self, config: DealLogConfig | None = None):
        """Initialize deal logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or DealLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "DealLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_game_start(self, players: list[Player], seed: str) -> None:
        """Log game start with player names and the seed to replay it."""
        self._write({
            "type": "game_start",
            "timestamp": datetime.now().isoformat(),
            "seed": seed,
            "players": [
                {"id": p.player_id.name.lower(), "name": p.name}
                for p in players
            ],
        })

    def log_deal_start(
        self,
        deal_num: int,
        players: list[Player],
        talon: Deck,
        elder: PlayerId,
    ) -> None:
        """Log dealt hands and talon.

        Args:
            deal_num: Deal number.
            players: Players holding their new hands.
            talon: Undealt cards.
            elder: Elder of this deal.
        """
        self._write({
            "type": "deal_start",
            "deal": deal_num,
            "elder": elder.name.lower(),
            "hands": {p.player_id.name.lower(): format_cards(p.hand) for p in players},
            "talon": format_cards(talon),
        })

    def log_move(self, deal_num: int, step: Step, record: MoveRecord) -> None:
        """Log one accepted or awarded move.

        Args:
            deal_num: Deal number.
            step: Step during which the move happened.
            record: Move and credited points.
        """
        self._write({
            "type": "move",
            "deal": deal_num,
            "step": step.name.lower(),
            **format_move(record),
        })

    def log_deal_end(self, deal_num: int, players: list[Player]) -> None:
        """Log deal results."""
        self._write({
            "type": "deal_end",
            "deal": deal_num,
            "results": {
                p.player_id.name.lower(): {
                    "deal_points": p.deal_points,
                    "tricks": p.deal_tricks,
                    "game_points": p.game_points,
                }
                for p in players
            },
        })

    def log_game_end(self, total_deals: int, players: list[Player]) -> None:
        """Log final game points."""
        self._write({
            "type": "game_end",
            "total_deals": total_deals,
            "game_points": {p.player_id.name.lower(): p.game_points for p in players},
        })
