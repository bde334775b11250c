"""Line-oriented text editing engine.

Pure functions over in-memory text: no filesystem access happens here.
Line numbers are 1-indexed throughout, and an end line of -1 means
"through the end of the file".

Content is split on line feeds with one canonical rule for the final
newline: a single trailing "\\n" terminates the last line rather than
starting an extra empty one. "a\\nb\\n" and "a\\nb" both have the lines
["a", "b"]; the first remembers that it ended with a newline and gets it
back when rejoined. Every no-op transformation therefore returns the
input byte-for-byte.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from errors import InvalidArgumentError, RangeError

LINE_SEPARATOR = "\n"

# Sentinel end line meaning "last line of the file"
END_OF_FILE = -1


@dataclass
class ReplaceResult:
    """Outcome of a substring replacement.

    Attributes:
        content: Full content after replacement.
        replacements: Number of occurrences replaced (0 means unchanged).
    """

    content: str
    replacements: int


@dataclass
class EditResult:
    """Outcome of a line-range replacement.

    Attributes:
        content: Full content after the edit.
        old_text: The replaced lines, joined by line feeds.
        start_line: First replaced line (1-indexed).
        end_line: Last replaced line after resolving -1 (1-indexed).
    """

    content: str
    old_text: str
    start_line: int
    end_line: int


def split_lines(content: str) -> Tuple[List[str], bool]:
    """Split content into lines.

    Args:
        content: Full text.

    Returns:
        Tuple of (lines, trailing_newline). Empty content has no lines.
    """
    if not content:
        return [], False

    trailing_newline = content.endswith(LINE_SEPARATOR)
    if trailing_newline:
        content = content[: -len(LINE_SEPARATOR)]
    return content.split(LINE_SEPARATOR), trailing_newline


def join_lines(lines: Sequence[str], trailing_newline: bool) -> str:
    """Reassemble lines produced by split_lines.

    A last line that is empty always gets a terminator; without one it
    would vanish on the next split.

    Args:
        lines: Lines without separators.
        trailing_newline: Whether to terminate the last line.

    Returns:
        Full text. No lines gives an empty string.
    """
    if not lines:
        return ""
    text = LINE_SEPARATOR.join(lines)
    if trailing_newline or lines[-1] == "":
        text += LINE_SEPARATOR
    return text


def _format_numbered(lines: Sequence[str], first_line_number: int) -> str:
    return LINE_SEPARATOR.join(
        f"{first_line_number + idx}: {line}" for idx, line in enumerate(lines)
    )


def _is_valid_view_range(view_range: object) -> bool:
    if not isinstance(view_range, (list, tuple)) or len(view_range) != 2:
        return False
    return all(isinstance(v, int) and not isinstance(v, bool) for v in view_range)


def render_view(content: str, view_range: Optional[Sequence[int]] = None) -> str:
    """Render file content with 1-indexed line numbers.

    Viewing is best-effort: a missing or malformed range, or one whose start
    ends up after its end, falls back to the whole file instead of failing.
    A valid range is clamped to the file's bounds.

    Args:
        content: Full file content.
        view_range: Optional [start_line, end_line]; end_line may be -1.

    Returns:
        Lines formatted as "N: text", joined by line feeds.
    """
    lines, _ = split_lines(content)

    if view_range is not None and _is_valid_view_range(view_range):
        last_index = len(lines) - 1
        start = max(0, view_range[0] - 1)
        if view_range[1] == END_OF_FILE:
            end = last_index
        else:
            end = min(last_index, view_range[1] - 1)

        if start <= end:
            return _format_numbered(lines[start : end + 1], start + 1)

    return _format_numbered(lines, 1)


def replace_substring(
    content: str,
    old_str: str,
    new_str: str,
    count: Optional[int] = None,
) -> ReplaceResult:
    """Replace literal occurrences of old_str, scanning left to right.

    old_str is plain text: no character in it has special meaning. Matches
    are exact, case-sensitive and non-overlapping. Finding nothing is not an
    error; the content comes back unchanged.

    Args:
        content: Full file content.
        old_str: Text to search for.
        new_str: Replacement text.
        count: Replace only the first N occurrences. None or <= 0 replaces all.

    Returns:
        ReplaceResult with the new content and number of replacements.

    Raises:
        InvalidArgumentError: If old_str is empty.
    """
    if not old_str:
        raise InvalidArgumentError("old_str must not be empty")

    limit = count if count is not None and count > 0 else None

    parts: List[str] = []
    position = 0
    replaced = 0
    while limit is None or replaced < limit:
        index = content.find(old_str, position)
        if index == -1:
            break
        parts.append(content[position:index])
        parts.append(new_str)
        position = index + len(old_str)
        replaced += 1

    if replaced == 0:
        return ReplaceResult(content=content, replacements=0)

    parts.append(content[position:])
    return ReplaceResult(content="".join(parts), replacements=replaced)


def replace_lines(
    content: str,
    start_line: int,
    end_line: int,
    new_content: str,
) -> EditResult:
    """Replace an inclusive range of lines with new content.

    new_content is split under the same rule as file content, so it may
    contribute any number of lines; an empty string deletes the range.

    Args:
        content: Full file content.
        start_line: First line to replace (1-indexed).
        end_line: Last line to replace (1-indexed), or -1 for end of file.
        new_content: Replacement text.

    Returns:
        EditResult with the new content and the displaced text.

    Raises:
        RangeError: If start_line or end_line fall outside the file.
    """
    lines, trailing_newline = split_lines(content)
    line_count = len(lines)

    if start_line < 1 or start_line > line_count:
        raise RangeError(
            f"Invalid start_line parameter: {start_line}. It should be within "
            f"the range of lines of the file: [1, {line_count}]"
        )

    effective_end = line_count if end_line == END_OF_FILE else end_line
    if effective_end < start_line or effective_end > line_count:
        raise RangeError(
            f"Invalid end_line parameter: {end_line}. It should be within "
            f"the range [{start_line}, {line_count}] or -1"
        )

    start_index = start_line - 1
    old_text = LINE_SEPARATOR.join(lines[start_index:effective_end])
    new_lines, _ = split_lines(new_content)

    updated = lines[:start_index] + new_lines + lines[effective_end:]
    return EditResult(
        content=join_lines(updated, trailing_newline),
        old_text=old_text,
        start_line=start_line,
        end_line=effective_end,
    )


def insert_line(content: str, line_number: int, text: str) -> str:
    """Insert text as a new line at the given position.

    The line currently at line_number (and everything after it) moves down
    by one. Positions past the end of the file extend it with empty lines so
    that text ends up exactly at line_number. text is inserted as one line
    even if it contains line feeds.

    Args:
        content: Full file content.
        line_number: Position for the new line (1-indexed).
        text: Text to insert.

    Returns:
        Full content after insertion.

    Raises:
        RangeError: If line_number is less than 1.
    """
    if line_number < 1:
        raise RangeError("Line number must be at least 1")

    lines, trailing_newline = split_lines(content)

    if line_number <= len(lines):
        lines.insert(line_number - 1, text)
    else:
        lines.extend([""] * (line_number - 1 - len(lines)))
        lines.append(text)

    return join_lines(lines, trailing_newline)
