"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "title": {
        "ko": "월출, 남중, 월몰",
        "en": "Moonrise, Moon Transit and Moonset",
    },
    "label_rise": {
        "ko": "월출",
        "en": "rise",
    },
    "label_transit": {
        "ko": "남중",
        "en": "tran",
    },
    "label_set": {
        "ko": "월몰",
        "en": "set",
    },
    "today": {
        "ko": "오늘 달은 {rise}에 뜨고 {set}에 집니다.",
        "en": "Moon rises today at {rise} and sets at {set}",
    },
    "second_rise": {
        "ko": "두 번째 월출: {time}",
        "en": "Second rise: {time}",
    },
    "second_set": {
        "ko": "두 번째 월몰: {time}",
        "en": "Second set: {time}",
    },
    "legend": {
        "ko": "'**:**' = 달이 종일 지평선 위, '--:--' = 달이 종일 지평선 아래",
        "en": "'**:**' = Moon continuously above horizon, '--:--' = Moon continuously below horizon",
    },
    "error_range": {
        "ko": "계산할 수 없는 날짜입니다: {error}",
        "en": "Cannot compute this date: {error}",
    },
    "error_config": {
        "ko": "관측자 설정이 올바르지 않습니다: {error}",
        "en": "Invalid observer settings: {error}",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
