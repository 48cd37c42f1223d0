# sunnyweather/ui/weather/weather_view_model.py
from sunnyweather.core.live_data import LiveData, switch_map
from sunnyweather.core.models.place import Location
from sunnyweather.core.models.result import Result
from sunnyweather.core.models.weather import Weather
from sunnyweather.core.repository import Repository


class WeatherViewModel:
    """Погода для выбранного места: refresh_weather() → weather_live_data."""

    def __init__(self, repository: Repository):
        self.repository = repository
        self._location_live_data: LiveData[Location] = LiveData()
        self.location_lng = ""
        self.location_lat = ""
        self.place_name = ""
        self.weather_live_data: LiveData[Result[Weather]] = switch_map(
            self._location_live_data,
            lambda location: self.repository.refresh_weather(location.lng, location.lat)
        )

    def refresh_weather(self, lng: str, lat: str) -> None:
        self.location_lng = lng
        self.location_lat = lat
        self._location_live_data.set_value(Location(lng=lng, lat=lat))

    def refresh(self) -> bool:
        """Повторный запрос для последнего места. False, если места ещё не было."""
        if not (self.location_lng and self.location_lat):
            return False
        self.refresh_weather(self.location_lng, self.location_lat)
        return True
