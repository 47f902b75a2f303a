import re

# ---------------------------------------------------------------------------- #
#                             General Parser Helper                            #
# ---------------------------------------------------------------------------- #


BYTE_UNITS = {
    "": 1,
    "b": 1,
    "k": 1024,
    "kb": 1024,
    "kib": 1024,
    "m": 1024**2,
    "mb": 1024**2,
    "mib": 1024**2,
}


def parse_byte_count(text: str) -> int | None:
    """Given a byte amount, e.g. `64`, `4k`, `1KiB`, `2m`, it returns the amount
    in bytes. Units are binary multiples and case-insensitive. If the format is
    malformed, the return value is `None`.
    """

    pattern = re.compile(r"^(?P<n>[0-9]+)\s*(?P<unit>[a-z]*)$")
    matched = re.match(pattern, text.strip().lower())

    if matched:
        unit = matched.group("unit")
        if unit not in BYTE_UNITS:
            return None
        return int(matched.group("n")) * BYTE_UNITS[unit]

    return None


# ---------------------------------------------------------------------------- #
#                                Output Helper                                 #
# ---------------------------------------------------------------------------- #


def to_hex_dump(data: bytes, width: int = 16) -> str:
    """
    Render bytes in the classic hex dump layout:
        * 8 digit hex offset
        * `width` space separated hex bytes, padded on the last line
        * printable ASCII column, `.` for everything else
    """
    if width <= 0:
        raise ValueError(f"hex dump width must be positive, got {width}")

    lines = []
    for offset in range(0, len(data), width):
        chunk = data[offset : offset + width]
        hex_part = " ".join(f"{b:02x}" for b in chunk).ljust(3 * width - 1)
        text_part = "".join(chr(b) if 0x20 <= b <= 0x7E else "." for b in chunk)
        lines.append(f"{offset:08x}  {hex_part}  |{text_part}|")
    return "\n".join(lines)
