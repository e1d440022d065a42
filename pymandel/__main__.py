import argparse
import math

from .coords import DEFAULT_VIEWPORT, Viewport
from .scheduler import FRAME_BUDGET, TIME_CHECK_INTERVAL


def build_parser():
    parser = argparse.ArgumentParser(
        prog="pymandel",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--dims",
        type=int,
        default=[1280, 720],
        nargs=2,
        metavar=("WIDTH", "HEIGHT"),
        help="The initial window (or output image) size, in pixels",
    )
    parser.add_argument(
        "--window",
        type=float,
        default=[
            DEFAULT_VIEWPORT.xa,
            DEFAULT_VIEWPORT.xb,
            DEFAULT_VIEWPORT.ya,
            DEFAULT_VIEWPORT.yb,
        ],
        nargs=4,
        metavar=("XA", "XB", "YA", "YB"),
        help="The fractal space coordinates to render",
    )
    parser.add_argument(
        "--power",
        type=float,
        default=2.0,
        help="The exponent of the recurrence (2 is the Mandelbrot set)",
    )
    parser.add_argument(
        "--frame-ms",
        type=float,
        default=FRAME_BUDGET * 1000,
        help="Time spent rendering per displayed frame, in milliseconds",
    )
    parser.add_argument(
        "--check-interval",
        type=int,
        default=TIME_CHECK_INTERVAL,
        help="Pixels drawn between two checks of the frame time",
    )
    parser.add_argument(
        "-o",
        "--out-file",
        default=None,
        help="Render without a window and write the image to this file",
    )
    parser.add_argument(
        "--passes",
        type=int,
        default=32,
        help="Full passes to render before writing --out-file",
    )
    return parser


def parse_args(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if min(args.dims) < 1:
        parser.error(f"--dims must be positive, got {args.dims}")
    if not math.isfinite(args.power) or args.power < 1:
        parser.error(f"--power must be >= 1, got {args.power}")
    if not math.isfinite(args.frame_ms) or args.frame_ms <= 0:
        parser.error(f"--frame-ms must be positive, got {args.frame_ms}")
    if args.check_interval < 1:
        parser.error(f"--check-interval must be >= 1, got {args.check_interval}")
    if args.passes < 1:
        parser.error(f"--passes must be >= 1, got {args.passes}")
    try:
        args.viewport = Viewport(*args.window)
    except ValueError as e:
        parser.error(str(e))
    return args


def main(argv=None):
    args = parse_args(argv)

    print(f"dims: {args.dims}")
    print(f"window: {args.window}")
    print(f"power: {args.power}")

    if args.out_file:
        from .snapshot import render_passes, save_snapshot

        print(f"passes: {args.passes}")
        surface = render_passes(
            *args.dims,
            passes=args.passes,
            viewport=args.viewport,
            power=args.power,
        )
        path = save_snapshot(surface, args.out_file)
        print(f"img_name: {path}")
        return

    from .viewer import FractalViewer

    print(f"frame budget: {args.frame_ms}ms")
    viewer = FractalViewer(
        *args.dims,
        viewport=args.viewport,
        power=args.power,
        frame_budget=args.frame_ms / 1000,
        check_interval=args.check_interval,
    )
    viewer.run()


if __name__ == "__main__":
    main()
