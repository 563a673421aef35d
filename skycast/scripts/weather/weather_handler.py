# skycast/scripts/weather/weather_handler.py
import logging

from telegram import Update, InlineKeyboardMarkup, InlineKeyboardButton
from telegram.ext import ContextTypes
from telegram.constants import ParseMode

from skycast.app_context import app_context
from skycast.core.models.view_state import CurrentView, ViewState
from skycast.core.models.weather_response import DisplayMode
from skycast.core.utils.error_handler import InvalidTransitionError, user_message
from skycast.scripts.weather._processes.formatter import format_weekday, render_view
from skycast.scripts.weather.view_controller import ViewController

logger = logging.getLogger("weather_handler")

CALLBACK_PREFIX = "wx:"
DAYS_PER_ROW = 4

MODE_BUTTONS = [
    ("🌤️ Сейчас", DisplayMode.CURRENT),
    ("📜 Архив", DisplayMode.HISTORICAL),
    ("🔮 Прогноз", DisplayMode.FORECAST),
]


def get_controller(context: ContextTypes.DEFAULT_TYPE) -> ViewController:
    """Контроллер представления живёт в chat_data, по одному на чат."""
    controller = context.chat_data.get("weather_view")
    if controller is None:
        controller = app_context.create_view_controller()
        context.chat_data["weather_view"] = controller
    return controller


def build_keyboard(state: ViewState) -> InlineKeyboardMarkup:
    """Кнопки режимов, дней обзора или возврата из подробностей дня."""
    if not isinstance(state, CurrentView) and state.selected is not None:
        return InlineKeyboardMarkup([
            [InlineKeyboardButton("← К обзору", callback_data=f"{CALLBACK_PREFIX}back")]
        ])

    buttons = []
    if not isinstance(state, CurrentView):
        row = []
        for day in state.days:
            label = f"{format_weekday(day.date)} {day.date[5:]}"
            row.append(InlineKeyboardButton(label, callback_data=f"{CALLBACK_PREFIX}day:{day.date}"))
            if len(row) == DAYS_PER_ROW:
                buttons.append(row)
                row = []
        if row:
            buttons.append(row)

    buttons.append([
        InlineKeyboardButton(
            f"• {label}" if mode is state.mode else label,
            callback_data=f"{CALLBACK_PREFIX}{mode.value}"
        )
        for label, mode in MODE_BUTTONS
    ])
    return InlineKeyboardMarkup(buttons)


async def send_view(update: Update, context: ContextTypes.DEFAULT_TYPE, controller: ViewController):
    await context.bot.send_message(
        chat_id=update.effective_chat.id,
        text=render_view(controller.state, controller.city, controller.error),
        reply_markup=build_keyboard(controller.state),
        parse_mode=ParseMode.HTML
    )


async def weather_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """/weather <город>: текущая погода."""
    city = " ".join(context.args or []).strip()
    if not city:
        await context.bot.send_message(
            chat_id=update.effective_chat.id,
            text="🌍 Укажите город: /weather Paris"
        )
        return
    await search_city(update, context, city)


async def handle_city_text(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Любой текст без команды считается названием города."""
    await search_city(update, context, update.effective_message.text.strip())


async def search_city(update: Update, context: ContextTypes.DEFAULT_TYPE, city: str):
    logger.info(f"⌨️ Чат {update.effective_chat.id}: поиск «{city}»")
    controller = get_controller(context)
    await controller.search(city)
    await send_view(update, context, controller)


async def weather_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Обработка inline-кнопок: режимы, выбор дня, возврат к обзору."""
    query = update.callback_query
    await query.answer()
    action = query.data[len(CALLBACK_PREFIX):]
    controller = get_controller(context)
    logger.info(f"🖱️ Чат {update.effective_chat.id}: кнопка '{action}'")

    if action == DisplayMode.CURRENT.value:
        await controller.select_current()
    elif action == DisplayMode.HISTORICAL.value:
        await controller.select_historical()
    elif action == DisplayMode.FORECAST.value:
        await controller.select_forecast()
    elif action == "back":
        controller.back_to_overview()
    elif action.startswith("day:"):
        try:
            controller.select_day_by_date(action.split(":", 1)[1])
        except InvalidTransitionError as e:
            controller.error = user_message(e)
    else:
        logger.warning(f"⚠️ Неизвестное действие: {action}")
        return

    await send_view(update, context, controller)
