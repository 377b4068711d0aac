from __future__ import annotations

DELIMITER = ","
QUOTE = '"'


def parse_line(line: str) -> list[str]:
    """Split one catalog line into trimmed fields.

    Commas inside a quoted span do not split, and a doubled quote inside a
    quoted span is one literal quote:

      CSCI200,"Data Structures, with Labs",CSCI100
        -> ["CSCI200", "Data Structures, with Labs", "CSCI100"]

    An unterminated quote is closed at end of line. Always returns at least
    one field.
    """
    fields: list[str] = []
    cur: list[str] = []
    in_quotes = False

    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if ch == QUOTE:
            if in_quotes and i + 1 < n and line[i + 1] == QUOTE:
                cur.append(QUOTE)
                i += 1
            else:
                in_quotes = not in_quotes
        elif ch == DELIMITER and not in_quotes:
            fields.append("".join(cur).strip())
            cur = []
        else:
            cur.append(ch)
        i += 1

    fields.append("".join(cur).strip())
    return fields
