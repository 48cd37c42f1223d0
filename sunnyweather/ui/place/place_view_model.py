# sunnyweather/ui/place/place_view_model.py
"""
Адаптер поиска мест для слоя представления.

search_places(query) не вызывает репозиторий напрямую: он публикует запрос в
триггер, а place_live_data через switch_map запускает новый поиск на каждое
значение и пересылает результат только последнего поиска.
place_list — кэш последних найденных мест, его ведёт вызывающий.
"""

from typing import List

from sunnyweather.core.live_data import LiveData, switch_map
from sunnyweather.core.models.place import Place
from sunnyweather.core.models.result import Result
from sunnyweather.core.repository import Repository


class PlaceViewModel:

    def __init__(self, repository: Repository):
        self.repository = repository
        self._search_live_data: LiveData[str] = LiveData()
        self.place_list: List[Place] = []
        self.place_live_data: LiveData[Result[List[Place]]] = switch_map(
            self._search_live_data, self.repository.search_places
        )

    def search_places(self, query: str) -> None:
        """Каждый вызов (даже с тем же запросом) запускает ровно один новый поиск."""
        self._search_live_data.set_value(query)

    def save_place(self, place: Place) -> None:
        self.repository.save_place(place)

    def get_saved_place(self) -> Place:
        return self.repository.get_saved_place()

    def is_place_saved(self) -> bool:
        return self.repository.is_place_saved()
