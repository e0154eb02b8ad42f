import argparse
import sys

from markov_runner import step
from markov_runner.algorithms import ALGORITHMS
from markov_runner.display import DEFAULT_DELAY, DISPLAY_METHODS, save_image


def build_parser():
    parser = argparse.ArgumentParser(
        prog="markov-runner",
        description="A simple visualization tool for Markov algorithms",
    )
    parser.add_argument(
        "-a", "--algorithm", choices=sorted(ALGORITHMS), required=True
    )
    parser.add_argument("-i", "--input", required=True)
    parser.add_argument(
        "-d",
        "--display-method",
        choices=list(DISPLAY_METHODS),
        default="all-steps",
    )
    parser.add_argument("--delay", type=float, default=DEFAULT_DELAY)
    parser.add_argument("-n", "--max-steps", type=int, default=None)
    parser.add_argument("--image", default=None)
    return parser


def main(argv=None, out=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.max_steps is not None and args.max_steps < 0:
        parser.error("--max-steps must be non-negative")
    if args.delay < 0:
        parser.error("--delay must be non-negative")

    out = sys.stdout if out is None else out
    node = ALGORITHMS[args.algorithm]()
    display = DISPLAY_METHODS[args.display_method]

    kwargs = {"out": out, "max_steps": args.max_steps}
    if args.display_method == "evolutive":
        kwargs["delay"] = args.delay
    history = display(args.input, node, **kwargs)

    if args.max_steps is not None and len(history) - 1 == args.max_steps:
        if step(history[-1], node) is not None:
            print(f"stopped after {args.max_steps} steps", file=sys.stderr)

    if args.image:
        if not any(history):
            print(f"nothing to draw, not writing {args.image}", file=sys.stderr)
        else:
            print(f"writing {args.image}", file=out)
            save_image(args.image, history)

    return 0
