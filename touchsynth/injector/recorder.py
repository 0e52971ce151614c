from __future__ import annotations

import json
import time
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import List, Sequence, Tuple

from touchsynth.core.types import Sample

"""
In-memory sink. Keeps every sequence it is handed, one entry per gesture,
and can write them out as JSONL (one sample per line) for later replay or
inspection.
"""


def _ser(sample: Sample, gesture: int) -> dict:
    row = asdict(sample)
    row["phase"] = sample.phase.value
    row["gesture"] = gesture
    return row


def log_path() -> Path:
    outdir = Path.home() / ".cache" / "touchsynth" / "recordings"
    outdir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    return outdir / f"gestures_{ts}.jsonl"


@dataclass
class RecordingSink:
    gestures: List[Tuple[Sample, ...]] = field(default_factory=list)

    def accept(self, samples: Sequence[Sample]) -> None:
        self.gestures.append(tuple(samples))

    @property
    def samples(self) -> List[Sample]:
        return [s for g in self.gestures for s in g]

    @property
    def last(self) -> Tuple[Sample, ...]:
        return self.gestures[-1]

    def clear(self) -> None:
        self.gestures.clear()

    def dump_jsonl(self, path: Path | None = None) -> Path:
        path = Path(path) if path is not None else log_path()
        with path.open("w") as f:
            for i, gesture in enumerate(self.gestures):
                for sample in gesture:
                    f.write(json.dumps(_ser(sample, i)) + "\n")
        return path
