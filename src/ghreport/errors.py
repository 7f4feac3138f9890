"""Exception hierarchy for the GitHub profile report.

Each stage of the report pipeline raises one of these; the pipeline maps the
exception type onto the failure kind it reports.
"""


class ReportError(Exception):
    """Base exception for all report errors.

    All custom exceptions inherit from this base class for easy catching.
    """

    kind = "error"


class ExtractionError(ReportError):
    """No account identifier could be extracted from the input."""

    kind = "extraction"


class NetworkError(ReportError):
    """Transport failures (connection, DNS, timeouts, HTTP error status)."""

    kind = "transport"


class ShapeError(ReportError):
    """Well-formed response with missing fields or the wrong structure."""

    kind = "shape"


class PDFError(ReportError):
    """PDF generation errors (layout, rendering)."""

    kind = "render"
