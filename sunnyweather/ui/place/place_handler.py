# sunnyweather/ui/place/place_handler.py
import asyncio
import logging
from typing import List

from telegram import InlineKeyboardButton, InlineKeyboardMarkup, Update
from telegram.ext import ContextTypes

from sunnyweather.core.models.place import Place
from sunnyweather.core.models.result import Result
from sunnyweather.core.utils.validator import sanitize_user_input
from sunnyweather.ui.place.place_view_model import PlaceViewModel
from sunnyweather.ui.weather.weather_handler import show_weather

logger = logging.getLogger("place_handler")

MAX_PLACE_BUTTONS = 10


def get_place_view_model(context: ContextTypes.DEFAULT_TYPE, chat_id: int) -> PlaceViewModel:
    """PlaceViewModel на чат; подписка на результаты поиска создаётся один раз."""
    view_model = context.chat_data.get("place_view_model")
    if view_model is not None:
        return view_model

    repository = context.bot_data["app_context"].repository
    view_model = PlaceViewModel(repository)
    bot = context.bot

    async def on_places(result: Result[List[Place]]) -> None:
        if result.is_failure:
            logger.warning(f"⚠️ Поиск в чате {chat_id} не удался: {result.error}")
            await bot.send_message(chat_id=chat_id, text="❌ Не удалось найти место. Попробуйте позже.")
            return

        # Кэш для кнопок: callback_data хранит только индекс
        view_model.place_list.clear()
        view_model.place_list.extend(result.value[:MAX_PLACE_BUTTONS])
        if not view_model.place_list:
            await bot.send_message(chat_id=chat_id, text="🔍 Ничего не найдено.")
            return

        buttons = [
            [InlineKeyboardButton(f"📍 {place.name[:40]}", callback_data=f"place:{i}")]
            for i, place in enumerate(view_model.place_list)
        ]
        await bot.send_message(
            chat_id=chat_id,
            text="Выберите место:",
            reply_markup=InlineKeyboardMarkup(buttons)
        )

    view_model.place_live_data.observe_async(on_places)
    context.chat_data["place_view_model"] = view_model
    return view_model


async def handle_search_text(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Текст сообщения — запрос на поиск места."""
    chat_id = update.effective_chat.id
    view_model = get_place_view_model(context, chat_id)
    query = sanitize_user_input(update.message.text or "")
    logger.info(f"⌨️ Чат {chat_id}: поиск '{query}'")

    if not query:
        view_model.place_list.clear()
        await context.bot.send_message(chat_id=chat_id, text="Введите название города.")
        return

    view_model.search_places(query)


async def handle_place_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Нажата кнопка места: сохраняем его и показываем погоду."""
    query = update.callback_query
    await query.answer()
    chat_id = update.effective_chat.id
    view_model = get_place_view_model(context, chat_id)

    try:
        index = int(query.data.split(":", 1)[1])
        place = view_model.place_list[index]
    except (IndexError, ValueError):
        await context.bot.send_message(chat_id=chat_id, text="⚠️ Список устарел, повторите поиск.")
        return

    await asyncio.to_thread(view_model.save_place, place)
    await show_weather(context, chat_id, place)
