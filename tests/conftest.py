from pathlib import Path
from typing import Callable, Sequence

import pytest

PUZZLE = "530070000600195000098000060800060003400803001700020006060000280000419005000080079"
SOLUTION = "534678912672195348198342567859761423426853791713924856961537284287419635345286179"


def rows_from_string(text: str) -> list:
    digits = [int(ch) for ch in text]
    return [digits[i : i + 9] for i in range(0, 81, 9)]


def puzzle_text(rows: Sequence[Sequence[int]]) -> str:
    return "\n".join(" ".join(str(value) for value in row) for row in rows) + "\n"


@pytest.fixture
def write_puzzle(tmp_path: Path) -> Callable[..., Path]:
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
