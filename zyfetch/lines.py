"""
Line helpers shared by the collectors.

- read_line: first line of a file starting with a prefix
- trim_name: value between the quotes of KEY="value" lines
- get_line_part / get_line_part_and_rest: split on single spaces
"""

from .errors import InvalidFormat, LineNotFound, PartNotFound, SourceFileNotFound


def read_line(path, prefix=""):
    """
    Return the first line of `path` that starts with `prefix`.
    An empty prefix matches the first line of the file.
    """
    wanted = prefix.encode("utf-8")
    try:
        with open(path, "rb") as f:
            for raw in f:
                line = raw[:-1] if raw.endswith(b"\n") else raw
                if line.startswith(wanted):
                    return line.decode("utf-8", errors="replace")
    except OSError as e:
        raise SourceFileNotFound(f"{path}: {e.strerror or e}") from e
    raise LineNotFound(f"no line starting with {prefix!r} in {path}")


def trim_name(line):
    """Return the text between the first and last double quote of `line`."""
    start = line.find('"')
    end = line.rfind('"')
    if start == -1 or start == end:
        raise InvalidFormat(f"expected a quoted value in {line!r}")
    return line[start + 1:end]


def get_line_part(line, index):
    """Return part `index` of `line` split on single spaces (empty parts count)."""
    parts = line.split(" ")
    if index >= len(parts):
        raise PartNotFound(f"part {index} not found in {line!r}")
    return parts[index]


def get_line_part_and_rest(line, start_index):
    """Return parts from `start_index` to the end, joined with single spaces."""
    result = ""
    for part in line.split(" ")[start_index:]:
        # leading empty parts never produce a separator
        if result:
            result += " "
        result += part
    if not result:
        raise PartNotFound(f"nothing from part {start_index} on in {line!r}")
    return result
