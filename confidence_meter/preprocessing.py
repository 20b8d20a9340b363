import math
import re
from dataclasses import dataclass
from typing import List, Optional

# Leading decimal number, anything after it is ignored ("3.5pts" -> 3.5)
_LEADING_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass
class Candidate:
    name: str
    score: float


def parse_score(text: str) -> Optional[float]:
    m = _LEADING_NUMBER_RE.match(text.strip())
    if m is None:
        return None
    value = float(m.group(0))
    if not math.isfinite(value):
        return None
    return value


def parse_candidates(text: str) -> List[Candidate]:
    """
    One candidate per line, either "name:score" or a bare score.
    Lines without a usable number are dropped.
    """
    candidates = []
    for i, line in enumerate(text.strip().split("\n")):
        line = line.strip()
        if not line:
            continue

        if ":" in line:
            name, rest = line.split(":", 1)
            name = name.strip()
            score = parse_score(rest)
        else:
            name = f"Candidate {i + 1}"
            score = parse_score(line)

        if score is not None:
            candidates.append(Candidate(name=name, score=score))
    return candidates
