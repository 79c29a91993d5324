# ABOUTME: Extracts {{dataset}} entries that follow a {{visualize}} invocation for motion charts
# ABOUTME: Each entry carries exactly five pipe-delimited fields: id, date, x, y, label

import re

from wiki_visualizer.core.models import DatasetTuple

VISUALIZE_PATTERN = re.compile(r"\{\{\s*visualize\s*\|", re.IGNORECASE)

DATASET_PATTERN = re.compile(
    r"\{\{\s*dataset\s*\|"
    r"\s*([^|]*?)\s*\|"
    r"\s*([^|]*?)\s*\|"
    r"\s*([^|]*?)\s*\|"
    r"\s*([^|]*?)\s*\|"
    r"\s*([^|]*?)\s*\}\}",
    re.IGNORECASE | re.DOTALL,
)

_DATE = re.compile(r"\s*([+-]?\d+)(?:/\s*([+-]?\d+)(?:/\s*([+-]?\d+))?)?")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_int(text: str) -> int:
    """Read the leading integer of ``text``: ``"12.7"`` is 12, ``"abc"`` is 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_date(text: str) -> tuple[int, int, int]:
    """Read ``year/month/day``.

    Reading stops at the first component that is not a number; it and every
    component after it become 0, so ``"2003/x/5"`` is ``(2003, 0, 0)``.
    """
    match = _DATE.match(text)
    if not match:
        return (0, 0, 0)
    year, month, day = (int(group) if group is not None else 0 for group in match.groups())
    return (year, month, day)


def extract_datasets(page_source: str) -> list[DatasetTuple] | None:
    """Collect the {{dataset}} entries written after the first {{visualize| marker.

    Returns:
        One DatasetTuple per entry in page order, or None when the page has no
        {{visualize| marker or no well-formed {{dataset}} entry after it
    """
    visualize = VISUALIZE_PATTERN.search(page_source)
    if visualize is None:
        return None

    datasets = [
        DatasetTuple(
            id=identifier.strip(),
            date=parse_date(date.strip()),
            x=parse_int(x.strip()),
            y=parse_int(y.strip()),
            label=label.strip(),
        )
        for identifier, date, x, y, label in DATASET_PATTERN.findall(page_source, visualize.end())
    ]
    return datasets or None
