# ABOUTME: Locates a named template invocation in page source and isolates the table after it
# ABOUTME: Template names match case-insensitively on their first letter only, as MediaWiki does

import re

from wiki_visualizer.core.errors import TableCloseNotFoundError, TemplateNotFoundError, TemplateUnterminatedError

TEMPLATE_OPEN = "{{"
TEMPLATE_CLOSE = "}}"
TABLE_CLOSE = "\n|}"

# {{Visualizer|<newline>: the table is passed as the template's argument
_WRAPPING_ARGUMENT = re.compile(r"[ \t]*\|[ \t]*\r?\n")


def template_markers(template_name: str) -> list[str]:
    """Return the opening markers to try, upper-case first letter first."""
    head, tail = template_name[:1], template_name[1:]
    return list(dict.fromkeys([f"{TEMPLATE_OPEN}{head.upper()}{tail}", f"{TEMPLATE_OPEN}{head.lower()}{tail}"]))


def find_template(page_source: str, template_name: str) -> tuple[int, str]:
    """Find the first template marker in ``page_source``.

    Returns:
        The marker's offset and the marker text that matched

    Raises:
        TemplateNotFoundError: If no capitalization variant is present
    """
    for marker in template_markers(template_name):
        position = page_source.find(marker)
        if position != -1:
            return position, marker
    raise TemplateNotFoundError(template_name)


def locate(page_source: str, template_name: str) -> str:
    """Return the table body that follows the ``template_name`` invocation.

    The body runs from the template's closing ``}}`` up to (not including)
    the first ``\\n|}`` line. When the invocation opens an argument list that
    holds the table itself (``{{Visualizer|`` then a newline, with the table
    closing before any ``}}``), the body starts on the line after the marker.

    Raises:
        TemplateNotFoundError: The template is not used on the page
        TemplateUnterminatedError: The invocation is never closed
        TableCloseNotFoundError: No table-close line follows the template
    """
    position, marker = find_template(page_source, template_name)
    after_marker = page_source[position + len(marker) :]

    template_close = after_marker.find(TEMPLATE_CLOSE)
    table_close = after_marker.find(TABLE_CLOSE)
    wrapping = _WRAPPING_ARGUMENT.match(after_marker)

    if wrapping and table_close != -1 and (template_close == -1 or table_close < template_close):
        candidate = after_marker[wrapping.end() - 1 :]
    elif template_close == -1:
        raise TemplateUnterminatedError(template_name)
    else:
        candidate = after_marker[template_close + len(TEMPLATE_CLOSE) :]

    end = candidate.find(TABLE_CLOSE)
    if end == -1:
        raise TableCloseNotFoundError(template_name)
    return candidate[:end]
