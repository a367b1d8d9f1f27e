"""Custom exceptions for layered-reachability."""


class ReachabilityError(Exception):
    """Base exception for reachability operations."""


class InvalidDistanceError(ReachabilityError, ValueError):
    """Raised when a traversal distance is not a non-negative integer."""


class UnsupportedGraphError(ReachabilityError, TypeError):
    """Raised when an object cannot be used as a directed graph view."""


class InvalidGraphError(ReachabilityError, ValueError):
    """Raised when a graph view is built from malformed data."""
