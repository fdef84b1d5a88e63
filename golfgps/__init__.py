"""Geodesic shot analysis for golf rounds tracked by GPS.

Subpackages:
- geometry: haversine distance, bearing, destination, cross/along track
- shots: shot records, miss classification, per-hole analysis
- club_distance: per-club distance profiles from shot history
- storage: store interface plus in-memory and JSON file stores
"""

__version__ = "0.1.0"
