#!/usr/bin/env python3
"""
lineslice Demo

Slices a generated stream of numbered lines with a few expressions and
prints what each selects and how many lines it had to hold in memory.

Run: python demo/run_demo.py
"""

from lineslice import SliceSpec, StreamSlicer


class ListSink:
    def __init__(self) -> None:
        self.lines: list[str] = []

    def write_line(self, line: str) -> None:
        self.lines.append(line)


EXPRESSIONS = ["1:", "-1:", "2:-1", "-4:3", ":0", "100:-99990", "-3:-1"]


def numbered(count: int):
    return (f"line {i}" for i in range(count))


def main() -> None:
    total = 100_000
    print(f"Slicing a stream of {total:,} lines\n")
    print(f"{'expr':>12}  {'mode':>8}  {'read':>7}  {'held':>5}  selected")

    for expr in EXPRESSIONS:
        spec = SliceSpec.parse(expr)
        sink = ListSink()
        stats = StreamSlicer(spec).run(numbered(total), sink)

        shown = ", ".join(sink.lines[:3])
        if len(sink.lines) > 3:
            shown += f", ... ({len(sink.lines)} lines)"
        print(
            f"{expr:>12}  {stats.mode.value:>8}  {stats.lines_read:>7}  "
            f"{stats.peak_buffered:>5}  {shown or '(nothing)'}"
        )


if __name__ == "__main__":
    main()
