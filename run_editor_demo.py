from __future__ import annotations

import argparse
import math

from editor import SceneConfig, run_demo


def finite_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(f"scale factor must be finite, got {text!r}")
    return value


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Draw the demo scene, scale every primitive, draw it again.")
    p.add_argument("--factor", type=finite_float, default=2.0, help="scale factor applied by scale_all (default: 2)")
    return p.parse_args(argv)


def main() -> None:
    args = parse_args()
    cfg = SceneConfig(scale_factor=args.factor)
    run_demo(cfg)


if __name__ == "__main__":
    main()
