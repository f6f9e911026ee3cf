from __future__ import annotations


class TaskError(Exception):
    """Base class for every way a single crawl task can fail.

    The crawl loop catches these and decides per kind whether to drop,
    log or dump the task. None of them are retried.
    """

    kind: str = "task_error"


class OtherError(TaskError):
    """Transport-level or generic failure (network error, non-OK status)."""

    kind = "other"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ParsingError(TaskError):
    """A structural element the page schema relies on was missing.

    Carries the raw document so it can be written out for inspection.
    """

    kind = "parsing"

    def __init__(self, document: str, detail: str = "required element missing") -> None:
        super().__init__(detail)
        self.document = document
        self.detail = detail


class FragmentError(TaskError):
    """A single record (one game row) failed a local extraction rule."""

    kind = "fragment"

    def __init__(self, context: str, markup: str) -> None:
        super().__init__(f"{context}: {markup}")
        self.context = context
        self.markup = markup


class NoParsingFunctionError(TaskError):
    """No parser is registered for a task's page type."""

    kind = "no_parsing_function"

    def __init__(self, page_type: str) -> None:
        super().__init__(f"No parsing function {page_type}")
        self.page_type = page_type
