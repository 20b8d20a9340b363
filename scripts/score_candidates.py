import argparse
import logging
import sys

from confidence_meter.calibration import InvalidTemperatureError, resolve_meter_params
from confidence_meter.config import DEFAULT_TEMPERATURE, SAMPLE_DATA
from confidence_meter.meter import NotEnoughCandidatesError, evaluate_candidates
from confidence_meter.preprocessing import parse_candidates


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Softmax + confidence for a list of candidate scores.")
    p.add_argument("file", nargs="?", help="Candidates file (name:score or score per line). Reads stdin if omitted.")
    p.add_argument("-t", "--temperature", type=float, default=None)
    p.add_argument("--sample", choices=sorted(SAMPLE_DATA), help="Use a built-in sample instead of a file.")
    p.add_argument("--config", default=None, help="Meter params file (key=value lines).")
    p.add_argument("--verbose", action="store_true")
    return p


def read_input(args) -> str:
    if args.sample:
        return SAMPLE_DATA[args.sample]
    if args.file:
        with open(args.file, "r", encoding="utf-8") as f:
            return f.read()
    return sys.stdin.read()


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    params = resolve_meter_params(args.config)
    T = args.temperature if args.temperature is not None else params.get("T", DEFAULT_TEMPERATURE)

    try:
        text = read_input(args)
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    candidates = parse_candidates(text)

    try:
        result = evaluate_candidates(candidates, T)
    except (NotEnoughCandidatesError, InvalidTemperatureError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(f"Temperature: {result.temperature:.2f}")
    print("=" * 60)
    for rank, item in enumerate(result.ranked, start=1):
        print(f"{rank:>2}. {item.label:<24} score={item.score:>8g}  p={item.probability*100:6.2f}%")
    print("=" * 60)
    print(f"Entropy:    {result.entropy:.4f} nats")
    print(f"Confidence: {result.confidence:.1f}%")
    print(f"Judgement:  {result.label.label} - {result.label.reason}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
