# sunnyweather/bot.py
# -*- coding: utf-8 -*-
"""
Telegram-бот: поиск места, выбор, погода для сохранённого места.
"""
import logging
import sys

from telegram import Update
from telegram.constants import ParseMode
from telegram.ext import (
    Application,
    CallbackQueryHandler,
    CommandHandler,
    ContextTypes,
    MessageHandler,
    filters,
)

from sunnyweather.app_context import AppContext
from sunnyweather.ui.place.place_handler import handle_place_callback, handle_search_text
from sunnyweather.ui.weather.weather_handler import forget_command, handle_refresh_callback, weather_command


# === Обработчики команд ===
async def start(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Главное меню."""
    await context.bot.send_message(
        chat_id=update.effective_chat.id,
        text=(
            "🌤️ <b>SunnyWeather</b>\n\n"
            "Напишите название города, чтобы найти место.\n"
            "• /weather — погода для сохранённого места\n"
            "• /forget — забыть сохранённое место"
        ),
        parse_mode=ParseMode.HTML
    )


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE):
    logging.error(f"⚠️ Исключение при обработке: {context.error}", exc_info=context.error)
    if update and hasattr(update, "update_id"):
        logging.error(f"Update ID: {update.update_id}")


def build_application(app_context: AppContext) -> Application:
    """Создаёт приложение и регистрирует обработчики."""
    config = app_context.config
    app = Application.builder().token(config.telegram_token).build()
    app.bot_data["app_context"] = app_context

    # Хранилище держит одно место, поэтому бот может быть ограничен одним чатом
    chat_filter = filters.Chat(chat_id=config.owner_chat_id) if config.owner_chat_id else filters.ALL

    # 1. Команды
    app.add_handler(CommandHandler("start", start, filters=chat_filter))
    app.add_handler(CommandHandler("weather", weather_command, filters=chat_filter))
    app.add_handler(CommandHandler("forget", forget_command, filters=chat_filter))

    # 2. Текст — поиск места
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND & chat_filter, handle_search_text))

    # 3. Кнопки: выбор места и обновление погоды
    app.add_handler(CallbackQueryHandler(handle_place_callback, pattern="^place:"))
    app.add_handler(CallbackQueryHandler(handle_refresh_callback, pattern="^weather:refresh$"))

    app.add_error_handler(error_handler)
    return app


# === Основная функция запуска ===
def main():
    app_context = AppContext().initialize_sync()
    logging.info("🚀 Запуск бота")
    if not app_context.config.telegram_token:
        logging.critical("❌ TELEGRAM_BOT_TOKEN не задан")
        app_context.shutdown_sync()
        raise ValueError("TELEGRAM_BOT_TOKEN не задан в .env!")

    app = build_application(app_context)
    print("🚀 Бот запущен. Напишите название города.")
    print("Нажмите Ctrl+C для остановки.")

    try:
        app.run_polling(drop_pending_updates=True)
    except KeyboardInterrupt:
        print("\n🛑 Остановка по запросу пользователя.")
    finally:
        app_context.shutdown_sync()
        print("✅ Бот завершил работу.")


if __name__ == "__main__":
    if sys.platform == "win32":
        import asyncio
        asyncio.set_event_loop_policy(asyncio.WindowsProactorEventLoopPolicy())
    main()
