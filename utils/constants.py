APP_NAME = "Spending Tracker"
APP_WIDTH = 1100
APP_HEIGHT = 720

DEFAULT_API_BASE_URL = "http://localhost:8080"
DEFAULT_SPENDING_PREFIX = "/api/spending"
DEFAULT_DASHBOARD_PREFIX = "/api/dashboard"
API_URL_ENV_VAR = "SPENDINGTRACKER_API_URL"

CURRENCY_SYMBOL = "KSh "

TRANSACTIONS_LIST_TITLE = "This Week's Expenses"
LOAD_TRANSACTIONS_ERROR = "Failed to load transactions"
ADD_TRANSACTION_ERROR = "Failed to add transaction"
LOAD_DASHBOARD_ERROR = "Failed to load dashboard data"

SEVERITY_COLORS = {
    "error":   "#F44336",
    "warning": "#FF9800",
    "info":    "#2196F3",
}

TREND_COLORS = {
    "up":   "#F44336",   # spending went up
    "down": "#4CAF50",
}
