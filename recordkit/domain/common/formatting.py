"""Plain-text rendering helpers used by describe() methods."""

from collections.abc import Iterable


def format_money(amount: float) -> str:
    """Render an amount with two decimals."""
    return f"{amount:.2f}"


def numbered(lines: Iterable[str], start: int = 1) -> list[str]:
    """Prefix each line with its 1-based position: ``1. first``."""
    return [f"{position}. {line}" for position, line in enumerate(lines, start=start)]


def render_block(title: str, lines: Iterable[str], *, rule: str | None = None) -> str:
    """
    Join a title and its lines into one multi-line block.

    Args:
        title: First line of the block
        lines: Body lines, rendered in order
        rule: Optional separator drawn under the title

    Returns:
        The block, without a trailing newline
    """
    parts = [title]
    if rule is not None:
        parts.append(rule)
    parts.extend(lines)
    return "\n".join(parts)
