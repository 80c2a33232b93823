"""Exception taxonomy for the analysis request path."""

from __future__ import annotations


class FlowDocError(Exception):
    """Base class for errors raised by flowdoc."""


class InputError(FlowDocError):
    """Caller supplied something unusable. Rejected before any network call."""


class InvalidInput(InputError):
    """The image payload is missing entirely."""


class MissingCredentials(FlowDocError):
    """The reasoning service API key is not configured."""


class FormatError(FlowDocError):
    """Model content could not be decoded as strict JSON."""


class ResponseEnvelopeError(FlowDocError):
    """The reasoning service reported success but its body is not a JSON envelope."""
