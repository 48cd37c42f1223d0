# sunnyweather/ui/weather/weather_handler.py
import asyncio
import logging

from telegram import InlineKeyboardButton, InlineKeyboardMarkup, Update
from telegram.constants import ParseMode
from telegram.ext import ContextTypes

from sunnyweather.core.models.place import Place
from sunnyweather.core.models.result import Result
from sunnyweather.core.models.weather import Weather
from sunnyweather.ui.weather.formatter import format_weather_report
from sunnyweather.ui.weather.weather_view_model import WeatherViewModel

logger = logging.getLogger("weather_handler")

REFRESH_MARKUP = InlineKeyboardMarkup([[InlineKeyboardButton("🔄 Обновить", callback_data="weather:refresh")]])


def get_weather_view_model(context: ContextTypes.DEFAULT_TYPE, chat_id: int) -> WeatherViewModel:
    """WeatherViewModel на чат; отчёт отправляется при каждом новом результате."""
    view_model = context.chat_data.get("weather_view_model")
    if view_model is not None:
        return view_model

    view_model = WeatherViewModel(context.bot_data["app_context"].repository)
    bot = context.bot

    async def on_weather(result: Result[Weather]) -> None:
        if result.is_failure:
            logger.warning(f"⚠️ Погода для чата {chat_id} не получена: {result.error}")
            await bot.send_message(chat_id=chat_id, text="❌ Не удалось получить погоду.")
            return
        await bot.send_message(
            chat_id=chat_id,
            text=format_weather_report(result.value, view_model.place_name),
            parse_mode=ParseMode.HTML,
            reply_markup=REFRESH_MARKUP
        )

    view_model.weather_live_data.observe_async(on_weather)
    context.chat_data["weather_view_model"] = view_model
    return view_model


async def show_weather(context: ContextTypes.DEFAULT_TYPE, chat_id: int, place: Place) -> None:
    view_model = get_weather_view_model(context, chat_id)
    view_model.place_name = place.name
    view_model.refresh_weather(place.location.lng, place.location.lat)


async def weather_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """/weather — погода для сохранённого места."""
    chat_id = update.effective_chat.id
    repository = context.bot_data["app_context"].repository

    if not await asyncio.to_thread(repository.is_place_saved):
        await context.bot.send_message(
            chat_id=chat_id,
            text="🌍 Место не выбрано. Напишите название города."
        )
        return

    place = await asyncio.to_thread(repository.get_saved_place)
    await show_weather(context, chat_id, place)


async def forget_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """/forget — удалить сохранённое место."""
    repository = context.bot_data["app_context"].repository
    await asyncio.to_thread(repository.clear_saved_place)
    await context.bot.send_message(chat_id=update.effective_chat.id, text="🗑️ Место удалено.")


async def handle_refresh_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Кнопка «Обновить» под отчётом: повтор запроса для того же места."""
    await update.callback_query.answer()
    chat_id = update.effective_chat.id
    view_model = get_weather_view_model(context, chat_id)
    if not view_model.refresh():
        await context.bot.send_message(chat_id=chat_id, text="🌍 Место не выбрано. Напишите название города.")
