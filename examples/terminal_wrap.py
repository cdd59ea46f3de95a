#!/usr/bin/env python3
"""
Wrap Japanese-mixed text to the current terminal width.

Each line is printed with its display width so the packing can be checked by
eye; a line is only wider than the budget when a single token is.

Usage:
    python examples/terminal_wrap.py [columns]
"""

import os
import sys

from pymikan import Splitter, SplitterConfig

TEXT = (
    "常に最新、最高のモバイル。Androidを開発した同じチームから。"
    "ﾊﾛｰ・ﾜｰﾙﾄﾞ! mitu's (株)ミカン & Co. 〜test〜"
)


def main() -> None:
    if len(sys.argv) > 1:
        columns = int(sys.argv[1])
    else:
        columns = os.get_terminal_size().columns if sys.stdout.isatty() else 40

    splitter = Splitter(SplitterConfig(rune_width=columns))
    for line in splitter.split_lines(TEXT):
        print(f"{line.width:3d} | {line.text}")


if __name__ == "__main__":
    main()
