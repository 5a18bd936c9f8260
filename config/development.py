import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Apps Script web app URL (Deploy > Web app > /exec)
APPS_SCRIPT_URL = os.getenv("APPS_SCRIPT_URL", "")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "15"))

# Decimal places for exported/graph percentages
PERCENT_DECIMALS = int(os.getenv("PERCENT_DECIMALS", "2"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Fetch the roster once when the app starts
LOAD_ROSTER_ON_STARTUP = bool(int(os.getenv("LOAD_ROSTER_ON_STARTUP", "1")))
