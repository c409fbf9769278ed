"""Geodetic and topocentric coordinate records."""

from dataclasses import dataclass

from .util import degrees_to_radians, radians_to_degrees


@dataclass
class CoordGeodetic:
    """Latitude and longitude in radians, altitude in kilometres."""

    latitude: float = 0.0
    longitude: float = 0.0
    altitude: float = 0.0

    @classmethod
    def from_degrees(cls, lat, lon, alt):
        """Build from latitude and longitude in degrees and altitude in kilometres."""
        return cls(degrees_to_radians(lat), degrees_to_radians(lon), alt)

    def __str__(self):
        return (
            f"Lat: {radians_to_degrees(self.latitude):8.3f}, "
            f"Lon: {radians_to_degrees(self.longitude):8.3f}, "
            f"Alt: {self.altitude:10.3f}"
        )


@dataclass
class CoordTopocentric:
    """Azimuth and elevation in radians, range in km, range rate in km/s."""

    azimuth: float = 0.0
    elevation: float = 0.0
    range: float = 0.0
    range_rate: float = 0.0

    def __str__(self):
        return (
            f"Az: {radians_to_degrees(self.azimuth):8.3f}, "
            f"El: {radians_to_degrees(self.elevation):8.3f}, "
            f"Rng: {self.range:10.3f}, "
            f"Rng Rt: {self.range_rate:7.3f}"
        )