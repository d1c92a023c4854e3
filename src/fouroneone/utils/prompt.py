"""Interactive line prompt."""

import sys
from typing import TextIO

from fouroneone.errors import PromptAbortedError


def prompt(
    label: str,
    *,
    input_stream: TextIO | None = None,
    output_stream: TextIO | None = None,
) -> str:
    """Prompt for input until a non-empty answer is given.

    Args:
        label: Text shown before the colon.
        input_stream: Where answers are read from. Defaults to ``sys.stdin``.
        output_stream: Where the prompt is written. Defaults to ``sys.stdout``.

    Returns:
        str: The first non-blank answer, stripped of surrounding whitespace.

    Raises:
        PromptAbortedError: If input ends before an answer is given.
    """
    input_stream = input_stream or sys.stdin
    output_stream = output_stream or sys.stdout
    while True:
        output_stream.write(f"{label}: ")
        output_stream.flush()
        line = input_stream.readline()
        if not line:
            raise PromptAbortedError(label)
        if answer := line.strip():
            return answer
