from __future__ import annotations


class TidyDataError(ValueError):
    """Base class for malformed-input failures in the HAR tidy pipeline."""


class ParseError(TidyDataError):
    """A line in one of the input files could not be tokenized or converted."""


class SchemaMismatchError(TidyDataError):
    """Column count or column names disagree (matrix vs catalog, or train vs test)."""


class RowCountMismatchError(TidyDataError):
    """The subject, activity and measurement files of one partition differ in length."""


class UnknownActivityCodeError(TidyDataError):
    """An activity code outside 1..6 was found."""
