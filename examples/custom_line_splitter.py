#!/usr/bin/env python3
"""
Inject a custom line splitter stage.

The analyzer still decides where text may break; the stage only decides how
tokens are packed. This one reports what each line holds; the rendering loop
then drops leading spaces from continuation lines.

Usage:
    python examples/custom_line_splitter.py
"""

from pymikan import Line, Splitter, Token
from pymikan.stages.splitters import GreedyLineSplitter


class TracingLineSplitter(GreedyLineSplitter):
    def split(self, tokens: list[Token], rune_width: int) -> list[Line]:
        lines = super().split(tokens, rune_width)
        for idx, line in enumerate(lines):
            print(f"line {idx}: {len(line.tokens)} tokens, {line.width} columns")
        return lines


def main() -> None:
    splitter = Splitter(rune_width=20, line_splitter=TracingLineSplitter())
    text = (
        "Always the latest and best mobile. "
        "From the same team that developed Android."
    )
    for idx, line in enumerate(splitter.split(text)):
        print(line if idx == 0 else line.lstrip(" "))


if __name__ == "__main__":
    main()
