"""
Station ranking and selection.

Stations are ordered by great-circle distance from the user, then filtered
down to the ones worth suggesting for the requested resource.
"""

from typing import List, Sequence

from bikeshare_assistant.core.geo import haversine_distance
from bikeshare_assistant.schemas.station import Coordinate, ResourceKind, Station

STATION_OPEN = "OPEN"
MIN_AVAILABLE = 3
DEFAULT_LIMIT = 3


def distance_to(origin: Coordinate, station: Station) -> float:
    """Kilometers from origin to the station"""
    return haversine_distance(
        origin.latitude,
        origin.longitude,
        station.position.lat,
        station.position.lng
    )


def rank_by_distance(stations: Sequence[Station], origin: Coordinate) -> List[Station]:
    """
    Order stations by distance from origin, nearest first.
    
    Equidistant stations are ordered by address; stations sharing both keep
    their input order. The input sequence is left untouched.
    
    Args:
        stations: Stations to rank
        origin: Reference point
        
    Returns:
        New list of the same stations
    """
    return sorted(stations, key=lambda station: (distance_to(origin, station), station.address))


def is_suggested(station: Station, kind: ResourceKind) -> bool:
    """True if the station is open and has enough of the requested resource"""
    return station.status == STATION_OPEN and station.available(kind) >= MIN_AVAILABLE


def select_top(
    stations: Sequence[Station],
    origin: Coordinate,
    kind: ResourceKind,
    limit: int = DEFAULT_LIMIT
) -> List[Station]:
    """
    Nearest stations worth suggesting for the requested resource.
    
    Args:
        stations: Candidate stations, in any order
        origin: User location
        kind: Bikes or stands
        limit: Maximum number of stations to return
        
    Returns:
        At most `limit` suggested stations, nearest first. May be empty.
    """
    ranked = rank_by_distance(stations, origin)
    return [station for station in ranked if is_suggested(station, kind)][:limit]
