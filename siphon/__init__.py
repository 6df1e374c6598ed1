"""siphon — direct stream URL extraction for video pages."""
from .base import ExtractResult, Options, Part, Stream
from .errors import (
    DecodeFailed, ExtractorError, FetchFailed, ParseFailed, ProbeFailed, UnsupportedSite,
)
from .runner import ExtractorEngine

__version__ = "0.1.0"
