from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List, Sequence


def read_records(path: Path) -> List[str]:
    """One record per line. Blank lines are kept so outputs line up with inputs."""
    raw = path.read_text(encoding="utf-8", errors="replace")
    raw = raw.replace("\r\n", "\n").replace("\r", "\n")
    lines = raw.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def pair_records(inputs: Sequence[str], outputs: Sequence[str]) -> list[dict]:
    if len(inputs) != len(outputs):
        raise ValueError("inputs and outputs must have the same length")
    return [{"input": i, "output": o} for i, o in zip(inputs, outputs)]


def format_records(outputs: Iterable[str], *, as_json: bool = False, inputs: Sequence[str] | None = None) -> str:
    outs = list(outputs)
    if as_json:
        return json.dumps(pair_records(list(inputs or []), outs), ensure_ascii=False)
    return "\n".join(outs)


def write_records(content: str, out_path: Path) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(content + ("\n" if content else ""), encoding="utf-8")
