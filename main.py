import argparse
import logging
import sys

from core.global_ctrl import COLOR_MODES, GlobalController
from linklist.sl_ctrl import LinkedListController

SAMPLE_VALUES = (39, 45, 11, 22)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Stable in-place insertion sort on a singly linked list."
    )
    parser.add_argument(
        "--trace", action="store_true", help="print a boxed snapshot around every rewiring"
    )
    parser.add_argument(
        "--color", choices=COLOR_MODES, default="auto", help="color policy for trace frames"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="debug logging on stderr"
    )
    return parser


def run(global_ctrl, values=SAMPLE_VALUES, stream=None):
    out = stream if stream is not None else sys.stdout
    controller = LinkedListController(global_ctrl, out)
    for value in values:
        controller.push_back(value)

    if not global_ctrl.trace_enabled:
        out.write("=== Linked List Insertion Sort ===\n")
        out.write(f"Input:  {controller.format_values()}\n")

    controller.sort()

    if global_ctrl.trace_enabled:
        out.write(f"\nSorted: {controller.format_values()}\n")
    else:
        out.write(f"Output: {controller.format_values()}\n")
        out.write("\nAlgorithm: O(n^2) time, O(1) space, stable\n")
    return controller


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    global_ctrl = GlobalController(trace_enabled=args.trace, color_mode=args.color)
    run(global_ctrl)
    return 0


if __name__ == "__main__":
    sys.exit(main())
