import logging
import math
import os
from typing import Optional, Sequence

import numpy as np

from confidence_meter.config import PARAMS_ENV_VAR, PARAMS_PATH

logger = logging.getLogger(__name__)


class InvalidTemperatureError(ValueError):
    """Raised when softmax is asked to run at a non-positive or non-finite temperature."""


def _check_temperature(temperature: float) -> float:
    t = float(temperature)
    if not math.isfinite(t) or t <= 0:
        raise InvalidTemperatureError(f"temperature must be > 0, got {temperature!r}")
    return t


def softmax(scores: Sequence[float], temperature: float = 1.0) -> np.ndarray:
    """
    Temperature-scaled softmax over a 1-D list of scores.

    Empty input gives an empty distribution and a single score gives [1.0];
    neither goes through the general formula.
    """
    t = _check_temperature(temperature)
    x = np.asarray(scores, dtype=np.float64).ravel()

    if x.size == 0:
        return np.array([], dtype=np.float64)
    if x.size == 1:
        return np.array([1.0])

    # shift before scaling; all exponents <= 0, overflow saturates to -inf -> 0
    with np.errstate(over="ignore"):
        z = (x - x.max()) / t
    exp = np.exp(z)
    return exp / exp.sum()


def entropy(probs: Sequence[float]) -> float:
    """Shannon entropy in nats. Zero-probability terms contribute nothing."""
    p = np.asarray(probs, dtype=np.float64).ravel()
    if p.size <= 1:
        return 0.0
    p = p[p > 0]
    return float(-np.sum(p * np.log(p)))


def confidence(probs: Sequence[float]) -> float:
    """
    Normalized-entropy confidence on a 0-100 scale:

      confidence = (1 - H / ln N) * 100

    Zero or one outcome counts as fully decided (100).
    """
    p = np.asarray(probs, dtype=np.float64).ravel()
    if p.size <= 1:
        return 100.0

    h = entropy(p)
    max_entropy = math.log(p.size)
    normalized = h / max_entropy
    conf = (1.0 - normalized) * 100.0
    return float(max(0.0, min(100.0, conf)))


def load_meter_params(path: str) -> dict:
    """
    Reads a meter params file with lines like:
      T=0.8
      max_bars=5
    """
    params = {}
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            k, v = line.split("=", 1)
            params[k.strip()] = float(v.strip())
    logger.info("Loaded meter params from %s: %s", path, params)
    return params


def resolve_meter_params(path: Optional[str] = None) -> dict:
    # explicit path > $METER_CONFIG > default location
    path = path or os.environ.get(PARAMS_ENV_VAR) or PARAMS_PATH
    if not os.path.exists(path):
        logger.debug("No meter params at %s, using defaults", path)
        return {}
    return load_meter_params(path)
