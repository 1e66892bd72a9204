#!/usr/bin/env python3
"""Demo of the textdelta layouts.

This example diffs two versions of a small JSON record and prints the
result in each layout with color forced on, which is what a terminal
user of the library would see.
"""

from textdelta import diff_with

OLD = """{
  "name": "Alice",
  "age": 30,
  "email": "alice@example.com"
}"""

NEW = """{
  "name": "Bob",
  "age": 31,
  "email": "bob@example.com"
}"""


def show(title: str, **options):
    """Print one rendering under a heading."""
    print(f"=== {title} ===")
    print(diff_with(OLD, NEW, color=True, **options))


if __name__ == "__main__":
    show("Inline Mode")
    show("Side-by-Side Mode (width=100)", layout="side-by-side", width=100)
    show("Side-by-Side Mode (terminal width)", layout="side-by-side")
    show("Prefer Side-by-Side Mode", layout="prefer-side-by-side")
