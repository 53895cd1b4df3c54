"""Simple two-language (en/ar) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "en": "Adhan Times",
        "ar": "مواقيت الأذان",
    },
    "tab_prayers": {
        "en": "Prayer Times",
        "ar": "مواقيت الصلاة",
    },
    "tab_qibla": {
        "en": "Qibla",
        "ar": "القبلة",
    },
    "tab_calendar": {
        "en": "Calendar",
        "ar": "التقويم",
    },
    "label_current": {
        "en": "Current Prayer",
        "ar": "الصلاة الحالية",
    },
    "label_next": {
        "en": "Next Prayer",
        "ar": "الصلاة القادمة",
    },
    "label_in": {
        "en": "in {countdown}",
        "ar": "بعد {countdown}",
    },
    "label_heading": {
        "en": "Device heading (°)",
        "ar": "اتجاه الجهاز (°)",
    },
    "btn_calibrate": {
        "en": "Calibrate Compass",
        "ar": "معايرة البوصلة",
    },
    "no_sensor": {
        "en": "No compass sensor found. Enter the heading manually.",
        "ar": "لم يتم العثور على مستشعر البوصلة. أدخل الاتجاه يدويًا.",
    },
    "label_address": {
        "en": "Search a place",
        "ar": "ابحث عن مكان",
    },
    "label_direction": {
        "en": "Qibla Direction: {bearing}°",
        "ar": "اتجاه القبلة: {bearing}°",
    },
    "label_distance": {
        "en": "Distance to Kaaba: ~{distance} km",
        "ar": "المسافة إلى الكعبة: ~{distance} كم",
    },
    "label_significance": {
        "en": "Today's Significance",
        "ar": "مناسبات اليوم",
    },
    "label_month": {
        "en": "Current Month: {month}",
        "ar": "الشهر الحالي: {month}",
    },
    "badge_next": {
        "en": "Next",
        "ar": "التالية",
    },
    "fallback_notice": {
        "en": "Location unavailable. Showing times for Mecca.",
        "ar": "الموقع غير متاح. يتم عرض مواقيت مكة.",
    },
    "error_address": {
        "en": "Address not found. Try a more specific address. ({error})",
        "ar": "لم يتم العثور على العنوان. جرّب عنوانًا أدق. ({error})",
    },
    "btn_search": {
        "en": "Search",
        "ar": "بحث",
    },
    "btn_notify": {
        "en": "Enable prayer alerts",
        "ar": "تفعيل تنبيهات الصلاة",
    },
    "notify_scheduled": {
        "en": "Alerts scheduled: {names}",
        "ar": "تم جدولة التنبيهات: {names}",
    },
    "how_to_use": {
        "en": "Hold your device flat and level, then turn until the arrow points up.",
        "ar": "أمسك جهازك بشكل مستوٍ ثم استدر حتى يشير السهم إلى الأعلى.",
    },
}


def t(key: str, lang: str, **kwargs: object) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found. Keyword
    arguments are substituted with str.format.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    text = entry.get(lang) or entry.get("en") or key
    return text.format(**kwargs) if kwargs else text
