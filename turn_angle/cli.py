import argparse
import math

from .angle import Angle, convert_to_degree, convert_to_radian


_FACTORIES = {
    "deg": Angle.from_degree,
    "rad": Angle.from_radian,
}


def finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(f"angle must be finite, got {text!r}")
    return value


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Show how an angle reads back after fixed-point encoding"
    )
    parser.add_argument("value", nargs="?", type=finite_float, default=180.0,
                        help="Angle to encode (default: 180)")
    parser.add_argument("--unit", choices=sorted(_FACTORIES), default="deg",
                        help="Unit of VALUE")
    args = parser.parse_args(argv)

    angle = _FACTORIES[args.unit](args.value)
    label = f"{args.value}_{args.unit}"
    print(f"{label} is: {convert_to_degree(angle):g}_deg")
    print(f"{label} is: {convert_to_radian(angle):g}_rad")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
