"""HTML fragments for the bar chart and the confidence meter."""

from typing import Iterable, List, Tuple, Union

from confidence_meter.config import MAX_BARS
from confidence_meter.meter import ConfidenceLabel, RankedCandidate, temperature_status

ChartItem = Union[Tuple[str, float], RankedCandidate]

CHART_CSS = """
<style>
.bar-chart { display: flex; flex-direction: column; gap: 6px; }
.bar-row { display: flex; align-items: center; gap: 8px; }
.bar-label { width: 120px; overflow: hidden; text-overflow: ellipsis; white-space: nowrap; }
.bar-wrapper { flex: 1; background: #eef0f4; border-radius: 4px; height: 18px; }
.bar-fill { background: #4c78a8; height: 100%; border-radius: 4px; }
.bar-value { width: 56px; text-align: right; font-variant-numeric: tabular-nums; }
.meter { position: relative; height: 22px; border-radius: 11px;
         background: linear-gradient(90deg, #d9534f, #f0ad4e, #5cb85c); }
.meter-fill { position: absolute; right: 0; top: 0; height: 100%;
              background: #e4e6eb; border-radius: 0 11px 11px 0; }
.confidence-value { font-size: 2rem; font-weight: 600; }
.confidence-label.high, .confidence-reason.high { color: #2e7d32; }
.confidence-label.medium, .confidence-reason.medium { color: #b26a00; }
.confidence-label.low, .confidence-reason.low { color: #c62828; }
.temp-status { padding: 4px 10px; border-radius: 6px; display: inline-block; }
.temp-status.status-hot { background: #fdecea; color: #b71c1c; }
.temp-status.status-normal { background: #eef0f4; color: #37474f; }
.temp-status.status-cool { background: #e3f2fd; color: #1565c0; }
.temp-status.status-cold { background: #e0f7fa; color: #006064; }
</style>
"""


def escape_html(value):
    if not isinstance(value, str):
        return value
    return (
        value.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )


def _as_pairs(items: Iterable[ChartItem]) -> List[Tuple[str, float]]:
    pairs = []
    for item in items:
        if isinstance(item, RankedCandidate):
            pairs.append((item.label, item.probability))
        else:
            label, value = item
            pairs.append((label, float(value)))
    return pairs


def render_bar_chart(
    items: Iterable[ChartItem],
    max_bars: int = MAX_BARS,
    show_percent: bool = True,
) -> str:
    rows = []
    for label, value in _as_pairs(items)[:max_bars]:
        percent = f"{value * 100:.1f}%" if show_percent else ""
        width = max(value * 100, 0.5)  # keep tiny bars visible
        safe = escape_html(label)
        rows.append(
            '<div class="bar-row">'
            f'<div class="bar-label" title="{safe}">{safe}</div>'
            f'<div class="bar-wrapper"><div class="bar-fill" style="width: {width}%"></div></div>'
            f'<div class="bar-value">{percent}</div>'
            "</div>"
        )
    return '<div class="bar-chart">' + "".join(rows) + "</div>"


def render_meter(conf: float, label: ConfidenceLabel) -> str:
    # The grey fill covers the meter from the right
    return (
        '<div class="meter">'
        f'<div class="meter-fill" style="width: {100 - conf}%"></div>'
        "</div>"
        f'<div class="confidence-value">{conf:.1f}%</div>'
        f'<div class="confidence-label {label.css_class}">{escape_html(label.label)}</div>'
        f'<div class="confidence-reason {label.css_class}">{escape_html(label.reason)}</div>'
    )


def render_temperature_status(temperature: float) -> str:
    text, css_class = temperature_status(temperature)
    return f'<div class="temp-status {css_class}">{escape_html(text)}</div>'
