"""Error kinds raised while loading and analysing a CCI listing."""


class CCIError(Exception):
    """Base class for CCI triage errors."""


class ParseError(CCIError):
    """The listing text contains no recognizable page entry."""


class MalformedDiffLine(CCIError):
    """A page entry in an otherwise valid listing has no usable diff token."""


class FetchError(CCIError):
    """The added text of a single diff could not be resolved."""

    def __init__(self, rev_id: int, message: str):
        super().__init__(f"diff {rev_id}: {message}")
        self.rev_id = rev_id
        self.message = message
