"""Output sink for generated units."""

from __future__ import annotations

from pathlib import Path
from typing import Callable


def write_to_file(
    content: str,
    output_path: Path,
    force: bool,
    ask: Callable[[str], str] = input,
) -> bool:
    """Write a generated unit, confirming before overwriting unless forced.

    Args:
        content: Generated source text.
        output_path: Target file.
        force: Overwrite an existing file without asking.
        ask: Prompt function, ``input`` by default.

    Returns:
        True if the file was written, False if the overwrite was declined.
    """
    if output_path.exists() and not force:
        try:
            answer = ask(f"file({output_path}) already exists, is overwritten(Y/N)? ")
        except EOFError:
            # Closed stdin reads as an empty answer
            answer = ""
        if answer.strip() not in ("Y", "y"):
            print(f"skip {output_path}")
            return False

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")
    return True
