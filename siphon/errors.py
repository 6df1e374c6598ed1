"""Exceptions raised by extractors. Every one of them ends the current call."""


class ExtractorError(Exception):
    pass


class FetchFailed(ExtractorError):
    """The page itself could not be retrieved."""


class ParseFailed(ExtractorError):
    """The embedded state block is missing or empty."""


class DecodeFailed(ExtractorError):
    """The embedded JSON does not match any known page shape."""


class ProbeFailed(ExtractorError):
    """A remote size lookup failed."""


class UnsupportedSite(ExtractorError):
    pass
