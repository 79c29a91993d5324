# ABOUTME: Error taxonomy for the extraction pipeline and its glue layer
# ABOUTME: Every error carries an ErrorKind tag so callers branch on kind, not on message text

from enum import Enum


class ErrorKind(str, Enum):
    """Reportable failure kinds."""

    # Extraction pipeline
    TEMPLATE_NOT_FOUND = "template_not_found"
    TEMPLATE_UNTERMINATED = "template_unterminated"
    TABLE_CLOSE_NOT_FOUND = "table_close_not_found"
    EMPTY_TABLE = "empty_table"
    MALFORMED_ROW = "malformed_row"
    DATASET_PATTERN_NOT_MATCHED = "dataset_pattern_not_matched"

    # Request handling and page retrieval
    MISSING_PARAMETER = "missing_parameter"
    UNSUPPORTED_CHART_KIND = "unsupported_chart_kind"
    UNAUTHORISED_DOMAIN = "unauthorised_domain"
    FETCH_ERROR = "fetch_error"
    PAGE_NOT_FOUND = "page_not_found"


class VisualizerError(Exception):
    """Base exception for every reportable visualizer failure."""

    kind: ErrorKind


class TemplateNotFoundError(VisualizerError):
    """Raised when neither capitalization of the template marker is in the page."""

    kind = ErrorKind.TEMPLATE_NOT_FOUND

    def __init__(self, template_name: str):
        self.template_name = template_name
        super().__init__(f"The page does not contain the string: {{{{{template_name[:1].upper()}{template_name[1:]}")


class TemplateUnterminatedError(VisualizerError):
    """Raised when a template opening has no closing marker. Not worth retrying."""

    kind = ErrorKind.TEMPLATE_UNTERMINATED

    def __init__(self, template_name: str):
        self.template_name = template_name
        super().__init__(f'Template ending code "}}}}" not found after the {{{{{template_name} opening')


class TableCloseNotFoundError(VisualizerError):
    """Raised when the template is closed but the table-close line is missing."""

    kind = ErrorKind.TABLE_CLOSE_NOT_FOUND

    def __init__(self, template_name: str):
        self.template_name = template_name
        super().__init__(f"The page does not contain the line: |}} after the {{{{{template_name}}}}} template")


class EmptyTableError(VisualizerError):
    """Raised when a table has no header columns or no data rows."""

    kind = ErrorKind.EMPTY_TABLE


class MalformedRowError(VisualizerError):
    """Raised in strict mode when a data row's cell count differs from the header."""

    kind = ErrorKind.MALFORMED_ROW

    def __init__(self, row_index: int, expected: int, actual: int):
        self.row_index = row_index
        self.expected = expected
        self.actual = actual
        super().__init__(f"Data row {row_index} has {actual} cells, header has {expected}")


class DatasetPatternNotMatchedError(VisualizerError):
    """Raised when motion-chart mode finds no {{visualize}} / {{dataset}} entries."""

    kind = ErrorKind.DATASET_PATTERN_NOT_MATCHED

    def __init__(self):
        super().__init__("The page is not using {{dataset}} and {{visualize}} correctly")


class MissingParameterError(VisualizerError):
    """Raised when a required request parameter is absent."""

    kind = ErrorKind.MISSING_PARAMETER

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Could not find required parameter '{name}'")


class UnsupportedChartKindError(VisualizerError):
    kind = ErrorKind.UNSUPPORTED_CHART_KIND

    def __init__(self, chart_kind: str):
        self.chart_kind = chart_kind
        super().__init__(f'The chart type "{chart_kind}" is not valid')


class UnauthorisedDomainError(VisualizerError):
    kind = ErrorKind.UNAUTHORISED_DOMAIN

    def __init__(self, domain: str):
        self.domain = domain
        super().__init__(
            f"{domain} is not an authorised domain name. "
            "The project parameter should be something such as en.wikipedia.org"
        )


class FetchError(VisualizerError):
    """Raised when the page source provider cannot return markup."""

    kind = ErrorKind.FETCH_ERROR


class PageNotFoundError(FetchError):
    kind = ErrorKind.PAGE_NOT_FOUND

    def __init__(self, page: str, project: str):
        self.page = page
        self.project = project
        super().__init__(f"The page [[{page}]] does not exist on {project}")
