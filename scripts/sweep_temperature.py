import os
from typing import Dict, List

import numpy as np
import pandas as pd

from confidence_meter.calibration import confidence, softmax
from confidence_meter.config import (
    BASIC_SCORES,
    CLOSE_RACE_SCORES,
    DEMO_TEMP_SCORES,
    HIGH_MIN_CONFIDENCE,
    MEDIUM_MIN_CONFIDENCE,
    SOLO_SCORES,
    TEMPERATURE_MAX,
    TEMPERATURE_MIN,
)
from confidence_meter.meter import classify


SCORE_SETS: Dict[str, List[float]] = {
    "basic": BASIC_SCORES,
    "temperature_demo": DEMO_TEMP_SCORES,
    "runaway_leader": SOLO_SCORES,
    "close_race": CLOSE_RACE_SCORES,
}

OUT_CSV = "artifacts/temperature_sweep.csv"
OUT_PLOT = "artifacts/temperature_sweep.png"


def sweep(
    score_sets: Dict[str, List[float]],
    T_grid: np.ndarray = None,
) -> pd.DataFrame:
    """
    One row per (score set, temperature) with the resulting confidence,
    its category and the top probability.
    """
    if T_grid is None:
        T_grid = np.linspace(TEMPERATURE_MIN, TEMPERATURE_MAX, 50)

    rows = []
    for name, scores in score_sets.items():
        for T in T_grid:
            proba = softmax(scores, float(T))
            conf = confidence(proba)
            rows.append(
                {
                    "score_set": name,
                    "temperature": float(T),
                    "confidence": conf,
                    "category": classify(conf).category.value,
                    "top_probability": float(proba.max()),
                }
            )
    return pd.DataFrame(rows)


def save_sweep_plot(df: pd.DataFrame, out_path: str) -> None:
    import matplotlib.pyplot as plt

    fig = plt.figure(figsize=(8, 5))
    ax = plt.gca()
    for name, group in df.groupby("score_set"):
        ax.plot(group["temperature"], group["confidence"], label=name)
    ax.axhline(HIGH_MIN_CONFIDENCE, linestyle="--", linewidth=0.8)
    ax.axhline(MEDIUM_MIN_CONFIDENCE, linestyle="--", linewidth=0.8)
    ax.set_xlabel("Temperature")
    ax.set_ylabel("Confidence (%)")
    ax.set_ylim(0, 100)
    ax.set_title("Confidence vs. temperature")
    ax.legend()
    fig.tight_layout()

    os.makedirs(os.path.dirname(out_path), exist_ok=True)
    plt.savefig(out_path, dpi=200)
    plt.close(fig)


def main():
    df = sweep(SCORE_SETS)

    print("Confidence at a few temperatures:")
    summary = df[df["temperature"].round(1).isin([0.1, 1.0, 2.0, 5.0])]
    print(summary.pivot_table(index="temperature", columns="score_set", values="confidence").round(1))

    os.makedirs(os.path.dirname(OUT_CSV), exist_ok=True)
    df.to_csv(OUT_CSV, index=False)
    print(f"\nSaved sweep to: {OUT_CSV}")

    save_sweep_plot(df, OUT_PLOT)
    print(f"Saved plot to: {OUT_PLOT}")


if __name__ == "__main__":
    main()
