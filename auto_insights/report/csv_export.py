"""CSV rendering for iteration reports.

Every cell is wrapped in double quotes but the values themselves are not
escaped, so a title containing ``"`` or a newline produces malformed CSV.
Existing consumers of the report rely on this exact output.
"""

from collections.abc import Mapping, Sequence
from typing import Any


def _quote(value: Any) -> str:
    return f'"{value}"'


def to_csv(rows: Sequence[Mapping[str, Any]]) -> str:
    """Render uniform rows as CSV text without a trailing newline.

    The header comes from the first row's keys. An empty sequence renders
    as an empty string.
    """
    if not rows:
        return ""

    headers = list(rows[0].keys())
    lines = [",".join(_quote(header) for header in headers)]
    for row in rows:
        lines.append(",".join(_quote(row[header]) for header in headers))
    return "\n".join(lines)
