from ._normalize_tag import _normalize_tag
from ._haversine_km import _haversine_km
from ._speed_kmh_for_tag import _speed_kmh_for_tag
from ._priority_for_tag import _priority_for_tag
from ._format_seconds_hms import _format_seconds_hms

# Nome público do modelo de custo
speed_for = _speed_kmh_for_tag

__all__ = [
    "_normalize_tag",
    "_haversine_km",
    "_speed_kmh_for_tag",
    "_priority_for_tag",
    "_format_seconds_hms",
    "speed_for",
]
