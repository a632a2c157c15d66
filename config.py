import os
from dataclasses import dataclass, field

import pytz
from dotenv import load_dotenv

from src.config.translations import TRANSLATIONS, Translation

# Load environment variables
load_dotenv()

# Slack configuration
SLACK_BOT_TOKEN = os.getenv("SLACK_BOT_TOKEN")
SLACK_APP_TOKEN = os.getenv("SLACK_APP_TOKEN")
SLACK_SIGNING_SECRET = os.getenv("SLACK_SIGNING_SECRET")

# Firestore configuration
GOOGLE_APPLICATION_CREDENTIALS = os.getenv("GOOGLE_APPLICATION_CREDENTIALS")

# Application configuration
MANAGER_SLACK_USER_ID = os.getenv("MANAGER_SLACK_USER_ID", "")
STANDUP_LANGUAGE = os.getenv("STANDUP_LANGUAGE", "en")
STANDUP_TIMEZONE = os.getenv("STANDUP_TIMEZONE", "UTC")  # Change this to your team's timezone
ALLOW_SELF_REPORTS = os.getenv("ALLOW_SELF_REPORTS", "false").lower() in ("1", "true", "yes")
PORT = int(os.getenv("PORT", 3000))

# Database collections
COLLECTIONS = {
    "USERS": "users",
    "CHANNELS": "channels",
    "CHANNEL_MEMBERS": "channel_members",
    "TIMETABLES": "timetables",
    "STANDUPS": "standups"
}


@dataclass(frozen=True)
class BotConfig:
    """Settings handed to every component at construction time."""
    manager_id: str = ""
    translation: Translation = field(default_factory=Translation)
    timezone: str = "UTC"
    # When set, users may request their own reports regardless of tier
    allow_self_reports: bool = False
    collections: dict = field(default_factory=lambda: dict(COLLECTIONS))

    @property
    def tz(self):
        return pytz.timezone(self.timezone)

    @classmethod
    def from_env(cls):
        if STANDUP_LANGUAGE not in TRANSLATIONS:
            raise ValueError(f"Unsupported language: {STANDUP_LANGUAGE}")
        return cls(
            manager_id=MANAGER_SLACK_USER_ID,
            translation=TRANSLATIONS[STANDUP_LANGUAGE],
            timezone=STANDUP_TIMEZONE,
            allow_self_reports=ALLOW_SELF_REPORTS,
        )
