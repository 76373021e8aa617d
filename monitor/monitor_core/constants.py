"""
Constants, timeouts, display texts, and theme colors.
"""

MONITOR_VERSION = "1.0.0"

# ─── Target ──────────────────────────────────────────────────────
ESP32_IP_ADDRESS = "172.20.10.3"
REFRESH_INTERVAL_SEC = 5       # One tick every 5s, first tick immediately

# ─── Network ─────────────────────────────────────────────────────
CONNECT_TIMEOUT_SEC = 3
READ_TIMEOUT_SEC = 3

# ─── UI scheduling ───────────────────────────────────────────────
UI_POLL_MS = 200               # How often the Tk thread drains tick outcomes

# ─── Placeholders ────────────────────────────────────────────────
PLACEHOLDER = "Н/Д"
NO_STATUS_TEXT = "Няма данни."
LOADING_TEXT = "Зареждане..."
ERROR_LABEL_TEXT = "Грешка!"
ERROR_CELL_TEXT = "Грешка"

# ─── Labels (current-value block) ────────────────────────────────
TEMPERATURE_LABEL = "Температура"
HUMIDITY_LABEL = "Влажност"
GAS_LABEL = "Газ/Дим (MQ-2)"
STATUS_LABEL = "Състояние"

TEMPERATURE_UNIT = "°C"
HUMIDITY_UNIT = "%"
GAS_SCALE = "/ 4095"           # MQ-2 raw ADC range on the ESP32

# ─── Failure reasons ─────────────────────────────────────────────
HTTP_ERROR_REASON = "Грешка при HTTP заявка: {code}"
CONNECT_ERROR_REASON = "Невъзможна връзка с ESP32: {error}"

# ─── Window ──────────────────────────────────────────────────────
WINDOW_TITLE = "Мониторинг на Пожароизвестяване (ESP32)"
HEADER_TITLE = "Състояние на сензорите и история"
HISTORY_TITLE = "История на показанията"
FOOTER_TEXT = "Обновяване на всеки {interval} секунди"
WINDOW_SIZE = (700, 600)
TIME_FORMAT = "%H:%M:%S"

HISTORY_COLUMNS = (
    ("time", "Време", 90),
    ("temperature", "Температура (°C)", 130),
    ("humidity", "Влажност (%)", 110),
    ("gas_level", "Газ/Дим (MQ-2)", 120),
    ("status", "Състояние", 220),
)

# ─── Status colors ───────────────────────────────────────────────
STATUS_COLORS = {
    "normal":   "#007c00",   # dark green
    "warning":  "#b28c00",   # dark orange
    "critical": "#b20000",   # dark red
    "unknown":  "#000000",   # default text color
}
ERROR_COLOR = "#b20000"

# ─── Theme ───────────────────────────────────────────────────────
THEME = {
    "header_bg":    "#0056b3",   # blue header band
    "header_fg":    "#ffffff",
    "body_bg":      "#ffffff",
    "footer_bg":    "#f4f4f4",
    "footer_fg":    "#777777",
    "text":         "#000000",
}

FONT_FAMILY = "Arial"
