"""
Exception classes for yrxlsim.

These exceptions are used throughout the yrxlsim package to signal error conditions
while reading sheet documents, expanding fill rules and rendering views.
"""


class YrxlsimError(Exception):
    """Base class for every error raised by yrxlsim."""
    pass


class DocumentParseError(YrxlsimError):
    """Raised when the document parser cannot turn source text into a document.

    The original parser exception (for example ``yaml.YAMLError``) is chained
    as ``__cause__``.
    """
    pass


class InvalidDocumentError(YrxlsimError):
    """Raised when a parsed document cannot describe a sheet.

    Fatal for the sheet being rendered. Examples:
        - The document root (or an entry of ``sheets``) is not a mapping
        - ``rows``, ``cells`` or ``fill`` has the wrong container type
        - Neither rows, cells nor fill supply any cell (empty sheet)
        - A fill offset such as ``down`` is not an integer
    """
    pass


class TemplateNotFoundError(YrxlsimError):
    """Raised when a row or column fill names a template that is not in the grid.

    Attributes:
        kind: ``"row"`` or ``"column"``
        template: The template row number or column letters
        index: Position of the offending operation in the ``fill`` list
    """

    def __init__(self, kind: str, template, index: int) -> None:
        self.kind = kind
        self.template = template
        self.index = index
        if kind == "row":
            message = f"fill[{index}] references template row {template} which does not exist"
        else:
            message = (
                f"fill[{index}] references template column {template} "
                "which has no cells in the grid"
            )
        super().__init__(message)


class InvalidReferenceError(YrxlsimError, ValueError):
    """Raised by the strict A1 helpers for malformed addresses or ranges.

    Inside fill rules these errors are not fatal: the offending operation is
    logged and skipped so unrelated content still renders.
    """
    pass


class InvalidAddressError(InvalidReferenceError):
    """Raised when a string is not a single-cell A1 address (e.g. ``B7``)."""
    pass


class InvalidRangeError(InvalidReferenceError):
    """Raised when a string is not an ``A1:B2`` style range."""
    pass
