from typing import Dict, List


# Confidence bands (percent, lower bound inclusive)
HIGH_MIN_CONFIDENCE = 70.0
MEDIUM_MIN_CONFIDENCE = 40.0

# Temperature slider
DEFAULT_TEMPERATURE = 1.0
TEMPERATURE_MIN = 0.1
TEMPERATURE_MAX = 5.0
TEMPERATURE_STEP = 0.1

# Bars shown in the result chart
MAX_BARS = 5

# Below this the meter refuses to evaluate
MIN_CANDIDATES = 2

# Optional key=value overrides (T=..., max_bars=...)
PARAMS_PATH = "artifacts/meter.txt"
PARAMS_ENV_VAR = "METER_CONFIG"

SAMPLE_DATA: Dict[str, str] = {
    "dominant": "Candidate A:5.0\nCandidate B:1.0\nCandidate C:0.5\nCandidate D:0.2",
    "basic": "Candidate A:3.5\nCandidate B:2.1\nCandidate C:1.2\nCandidate D:0.5",
    "close": "Option 1:2.3\nOption 2:2.2\nOption 3:2.1\nOption 4:2.0",
    "scores": "4.2\n2.8\n1.5\n0.9",
}

# Demo score sets used by the explainer tabs and the sweep script
BASIC_SCORES: List[float] = [3.0, 1.0, 0.5]
BASIC_LABELS: List[str] = ["A", "B", "C"]

DEMO_TEMP_SCORES: List[float] = [2.5, 1.8, 1.2, 0.5]
DEMO_TEMP_LABELS: List[str] = ["Candidate A", "Candidate B", "Candidate C", "Candidate D"]

SOLO_SCORES: List[float] = [5.0, 1.0, 0.8, 0.5]
CLOSE_RACE_SCORES: List[float] = [2.1, 2.0, 1.9, 1.8]
RANK_LABELS: List[str] = ["1st", "2nd", "3rd", "4th"]
