import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_payroll"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also load shifts/holidays/demo employees on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

# Payroll policy
GENERAL_SHIFT_ID = os.getenv("GENERAL_SHIFT_ID", "GS")
INFRACTIONS_PER_PENALTY_DAY = int(os.getenv("INFRACTIONS_PER_PENALTY_DAY", "3"))
NIGHT_OUT_CUTOFF_HOUR = int(os.getenv("NIGHT_OUT_CUTOFF_HOUR", "12"))
DEFAULT_ANNUAL_CTC = float(os.getenv("DEFAULT_ANNUAL_CTC", "600000"))
PAYROLL_GENERATED_BY = os.getenv("PAYROLL_GENERATED_BY", "system")
