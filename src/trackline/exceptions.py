# SPDX-License-Identifier: MIT


class TracklineError(Exception):
    """Base class for recoverable trackline errors."""


class ValidationError(TracklineError, ValueError):
    """An input record or argument cannot be laid out as given."""


class PageRangeError(ValidationError):
    """The requested page falls outside the representable calendar."""


class EventNotFoundError(TracklineError, LookupError):
    pass


class LaneInvariantError(AssertionError):
    """Two events sharing a lane overlap; the lane assignment is broken."""
