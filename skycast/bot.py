# skycast/bot.py
# -*- coding: utf-8 -*-
"""
Точка входа: Telegram-бот погоды с подсказками занятий.
"""
import logging
from telegram import Update
from telegram.ext import (
    Application,
    CommandHandler,
    MessageHandler,
    CallbackQueryHandler,
    filters,
    ContextTypes
)
from telegram.constants import ParseMode

from skycast.app_context import app_context
from skycast.scripts.weather.weather_handler import (
    CALLBACK_PREFIX,
    handle_city_text,
    weather_callback,
    weather_command
)


# === Обработчики команд ===
async def start(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Главное меню."""
    await context.bot.send_message(
        chat_id=update.effective_chat.id,
        text=(
            "🌤️ <b>Погода и занятия</b>\n\n"
            "Отправьте название города или используйте:\n"
            "• /weather &lt;город&gt;: текущая погода\n"
            "Кнопки под ответом переключают архив и прогноз."
        ),
        parse_mode=ParseMode.HTML
    )


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE):
    logging.error(f"⚠️ Исключение при обработке: {context.error}", exc_info=context.error)
    if update and hasattr(update, 'update_id'):
        logging.error(f"Update ID: {update.update_id}")


def build_application(token: str) -> Application:
    app = Application.builder().token(token).build()

    # 1. Команды
    app.add_handler(CommandHandler("start", start))
    app.add_handler(CommandHandler("weather", weather_command))

    # 2. Обычный текст без команды: название города
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, handle_city_text))

    # 3. Inline-кнопки погоды, только со своим префиксом
    app.add_handler(CallbackQueryHandler(weather_callback, pattern=f"^{CALLBACK_PREFIX}"))

    # 4. Ошибки
    app.add_error_handler(error_handler)
    return app


# === Основная функция запуска ===
def main():
    app_context.initialize_sync()
    logging.info("🚀 Запуск бота")
    if not app_context.config.telegram_token:
        logging.critical("❌ TELEGRAM_BOT_TOKEN не задан")
        raise ValueError("TELEGRAM_BOT_TOKEN не задан в .env!")

    app = build_application(app_context.config.telegram_token)
    print("🚀 Бот запущен. Отправьте название города.")
    print("Нажмите Ctrl+C для остановки.")

    try:
        app.run_polling(drop_pending_updates=True)
    except KeyboardInterrupt:
        print("\n🛑 Остановка по запросу пользователя.")
    finally:
        app_context.shutdown_sync()
        print("✅ Бот завершил работу.")


if __name__ == "__main__":
    main()
