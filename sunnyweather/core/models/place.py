# sunnyweather/core/models/place.py
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class Location:
    lng: str
    lat: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Location":
        return cls(lng=str(data["lng"]), lat=str(data["lat"]))


@dataclass(frozen=True)
class Place:
    name: str
    location: Location
    address: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Place":
        """Разбирает элемент places[] (адрес приходит как formatted_address)."""
        return cls(
            name=str(data["name"]),
            location=Location.from_dict(data["location"]),
            address=str(data.get("formatted_address") or data.get("address") or "")
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "location": {"lng": self.location.lng, "lat": self.location.lat},
            "formatted_address": self.address
        }


@dataclass(frozen=True)
class PlaceResponse:
    status: str
    places: List[Place] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlaceResponse":
        status = str(data["status"])
        if status != "ok":
            return cls(status=status)
        return cls(status=status, places=[Place.from_dict(p) for p in data["places"]])
