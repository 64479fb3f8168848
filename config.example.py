# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "CREW_APP_NAME": "App display name (default: crew-schedule).",
    "CREW_LOG_LEVEL": "Console logging level (default: INFO).",
    "CREW_DATA_DIR": "Local data directory for the log file (default: .local/crew).",
    "CREW_LOG_FILE_ENABLED": "Write full DEBUG logs to <data_dir>/crew.log (true/false, default: true).",
    # Console
    "CREW_CONSOLE_ENABLED": "Run the interactive console (true/false, default: true).",
    # Scheduling
    "CREW_OBSERVERS": "Comma separated conflict observer ids (default: Mission Control).",
    "CREW_TIME_FORMAT": "strptime format for task times typed in the console (default: %H:%M).",
}
