"""Exceptions raised by element parsing and orbit propagation."""


class SatelliteError(RuntimeError):
    """Raised when the propagator cannot compute a position."""


class TleError(RuntimeError):
    """Raised when a two-line element set cannot be decoded."""


class DecayedError(RuntimeError):
    """Raised when a satellite has decayed; carries the time, position and velocity."""

    def __init__(self, decayed, position, velocity):
        super().__init__("Satellite decayed")
        self.decayed = decayed
        self.position = position
        self.velocity = velocity