"""
Timestamp helpers. Records keep created_at / updated_at as ISO-8601 strings.
Timezone from config (system.timezone).
"""
from datetime import datetime
from zoneinfo import ZoneInfo


def get_timezone(config: dict) -> str:
    """Get timezone from config, default UTC."""
    return (config.get("system") or {}).get("timezone", "UTC")


def get_now(tz: str | None = None) -> datetime:
    """Current datetime in given timezone (default UTC)."""
    return datetime.now(ZoneInfo(tz or "UTC"))


def format_iso(dt: datetime) -> str:
    """Format datetime as ISO-8601 / RFC 3339."""
    return dt.isoformat()


def now_iso(tz: str | None = None) -> str:
    return format_iso(get_now(tz))
