"""Read turn logs and yield TurnRecords."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterator

from torusbot.sim.contracts import TurnRecord


def read_turn_records(path: Path) -> Iterator[TurnRecord]:
    with path.open("r", encoding="utf-8") as handle:
        for line in handle:
            record = parse_record(line)
            if not record:
                continue
            if record.get("type") != "turn":
                continue
            payload = record.get("payload")
            if payload is None:
                continue
            yield TurnRecord.model_validate(payload)


def parse_record(line: str) -> dict | None:
    try:
        return json.loads(line)
    except json.JSONDecodeError:
        return None
