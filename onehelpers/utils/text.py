from __future__ import annotations


def split(text: str, delim: str) -> list[str]:
    """
    Split text on every leftmost, non-overlapping occurrence of delim.

    Empty pieces are kept, so consecutive or trailing delimiters produce
    empty strings. Text without the delimiter comes back as a single element.
    """
    if not delim:
        raise ValueError("delim must be a non-empty string")

    pieces: list[str] = []
    start = 0
    step = len(delim)
    while True:
        pos = text.find(delim, start)
        if pos == -1:
            break
        pieces.append(text[start:pos])
        start = pos + step
    pieces.append(text[start:])
    return pieces


__all__ = ["split"]
