"""
Message catalog for user-visible texts.

Lookup falls back to English, then to the key itself.
"""

DEFAULT_LOCALE = "en"

DISPLAY_NAME = "project_link.display_name"
URL_INVALID = "project_link.url.invalid"
USER_ID_INVALID = "project_link.user_id.invalid"

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        DISPLAY_NAME: "Backlog",
        URL_INVALID: "Invalid URL.",
        USER_ID_INVALID: "User ID may only contain letters, digits, '-', '_', '@' and '.'.",
    },
    "ja": {
        DISPLAY_NAME: "Backlog",
        URL_INVALID: "URLが正しくありません。",
        USER_ID_INVALID: "ユーザIDには英数字と '-'、'_'、'@'、'.' のみ使用できます。",
    },
}


def get_message(key: str, locale: str = DEFAULT_LOCALE) -> str:
    """Resolve a message key for the given locale."""
    catalog = MESSAGES.get(locale, {})
    if key in catalog:
        return catalog[key]
    return MESSAGES[DEFAULT_LOCALE].get(key, key)
