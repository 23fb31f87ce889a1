"""Drive a binary search tree with single-letter commands read from a file."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Optional

from dsakit.bst import ListBST

_INTEGER = re.compile(r"[+-]?[0-9]+")


class _Scanner:
    """Reads characters, words and integers from text, skipping whitespace."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _skip(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1

    def char(self) -> Optional[str]:
        self._skip()
        if self._pos >= len(self._text):
            return None
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def word(self) -> Optional[str]:
        self._skip()
        start = self._pos
        while self._pos < len(self._text) and not self._text[self._pos].isspace():
            self._pos += 1
        return self._text[start:self._pos] or None

    def integer(self) -> Optional[int]:
        self._skip()
        match = _INTEGER.match(self._text, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        return int(match.group())


def run_commands(text: str) -> str:
    """Run the commands in text against a fresh tree and return the output.

    Each command is one letter, read as a single character, followed by its
    argument if it takes one. Processing stops at a missing or malformed
    argument; unknown letters are skipped.
    """
    tree: ListBST[int, int] = ListBST()
    scanner = _Scanner(text)
    out: list[str] = []
    while (command := scanner.char()) is not None:
        if command in "FID":
            key = scanner.integer()
            if key is None:
                break
            if command == "F":
                verdict = "found" if tree.find(key) else "not found"
                out.append(f"Key {key} {verdict} in BST.")
            elif command == "I":
                if tree.insert(key, key):
                    head = f"Key {key} inserted into BST"
                else:
                    head = f"Insertion failed! Key {key} already exists in BST"
                out.append(f"{head}, BST (Default): {tree.render('D')}")
            else:
                if tree.remove(key):
                    head = f"Key {key} removed from BST"
                else:
                    head = f"Removal failed! Key {key} not found in BST"
                out.append(f"{head}, BST (Default): {tree.render('D')}")
        elif command == "E":
            out.append("Empty" if tree.is_empty() else "Not empty")
        elif command == "M":
            which = scanner.word()
            if which is None:
                break
            try:
                if which == "Min":
                    out.append(f"Minimum value: {tree.find_min()}")
                else:
                    out.append(f"Maximum value: {tree.find_max()}")
            except ValueError:
                out.append("Empty")
        elif command == "T":
            order = scanner.word()
            if order is None:
                break
            if order == "In":
                out.append(f"BST (In-order): {tree.render('I')}")
            elif order == "Pre":
                out.append(f"BST (Pre-order): {tree.render('P')}")
            elif order == "Post":
                out.append(f"BST (Post-order): {tree.render('O')}")
        elif command == "S":
            out.append(f"Size: {len(tree)}")
    return "".join(line + "\n" for line in out)


def main(argv: list[str] | None = None) -> int:
    """Run the command file named on the command line."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) != 1:
        print("Usage: filename", file=sys.stderr)
        return 1
    try:
        text = Path(argv[0]).read_text(encoding="utf-8")
    except OSError:
        print("Unable to open file", file=sys.stderr)
        return 2
    sys.stdout.write(run_commands(text))
    return 0


if __name__ == "__main__":
    sys.exit(main())