# ABOUTME: Wiki markup handling for template-delimited tables and motion-chart datasets
# ABOUTME: Not a general wikitext parser; covers the subset the visualizer templates use

from .cleaner import clean
from .dataset import extract_datasets
from .locator import locate
from .table import coerce_number, extract_rows, normalize_table, parse_table, split_rows

__all__ = [
    "clean",
    "coerce_number",
    "extract_datasets",
    "extract_rows",
    "locate",
    "normalize_table",
    "parse_table",
    "split_rows",
]
