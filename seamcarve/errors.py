"""Exception and warning types raised by the carving engine."""


class SeamCarveError(Exception):
    """Base class for all seam carving errors."""


class InvalidInputError(SeamCarveError, ValueError):
    """Bad reduction fraction, malformed raster, or raster below the carving floor."""


class SeamInvariantError(SeamCarveError, RuntimeError):
    """A seam or raster violates the structural invariants carving relies on.

    Not recoverable: the raster can no longer be trusted.
    """


class ExhaustedGeometryWarning(UserWarning):
    """The requested reduction was clipped to keep the width above the floor."""
