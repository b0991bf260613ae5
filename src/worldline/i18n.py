"""Small multi-language string table for unit labels and frame names."""

SUPPORTED_LOCALES = ("en", "ko", "pt", "es", "de", "fr")

_STRINGS: dict[str, dict[str, str]] = {
    "frame_spin": {
        "en": "Earth Rotation",
        "ko": "지구 자전",
        "pt": "Rotação da Terra",
        "es": "Rotación terrestre",
        "de": "Erdrotation",
        "fr": "Rotation terrestre",
    },
    "frame_orbit": {
        "en": "Heliocentric Orbit",
        "ko": "공전 궤도",
        "pt": "Órbita heliocêntrica",
        "es": "Órbita heliocéntrica",
        "de": "Sonnenumlauf",
        "fr": "Orbite héliocentrique",
    },
    "frame_galaxy": {
        "en": "Galactic Orbit",
        "ko": "은하 공전",
        "pt": "Órbita galáctica",
        "es": "Órbita galáctica",
        "de": "Galaktischer Umlauf",
        "fr": "Orbite galactique",
    },
    "frame_cmb": {
        "en": "CMB Rest Frame",
        "ko": "CMB 정지 좌표계",
        "pt": "Referencial da RCF",
        "es": "Marco de reposo del FCM",
        "de": "CMB-Ruhesystem",
        "fr": "Référentiel du CMB",
    },
    "unit_km": {
        "en": "km",
    },
    "unit_au": {
        "en": "AU",
        "ko": "AU",
        "pt": "UA",
        "es": "UA",
        "de": "AE",
        "fr": "ua",
    },
    "unit_ly": {
        "en": "ly",
        "ko": "광년",
        "pt": "al",
        "es": "al",
        "de": "Lj",
        "fr": "al",
    },
    "unit_kms": {
        "en": "km/s",
    },
    "unit_kmh": {
        "en": "km/h",
    },
    "unit_mph": {
        "en": "mph",
    },
    "unit_ms": {
        "en": "m/s",
    },
    "label_age": {
        "en": "Age",
        "ko": "나이",
        "pt": "Idade",
        "es": "Edad",
        "de": "Alter",
        "fr": "Âge",
    },
    "label_total": {
        "en": "Total",
        "ko": "합계",
        "pt": "Total",
        "es": "Total",
        "de": "Gesamt",
        "fr": "Total",
    },
    "label_uncertain": {
        "en": "(uncertain ±{sigma} km/s)",
        "ko": "(불확실성 ±{sigma} km/s)",
        "pt": "(incerteza ±{sigma} km/s)",
        "es": "(incertidumbre ±{sigma} km/s)",
        "de": "(Unsicherheit ±{sigma} km/s)",
        "fr": "(incertitude ±{sigma} km/s)",
    },
    "label_pre_birth": {
        "en": "Not born yet at the target date.",
        "ko": "목표 시점에는 아직 태어나지 않았어요.",
        "pt": "Ainda não nascido na data alvo.",
        "es": "Aún no nacido en la fecha objetivo.",
        "de": "Zum Zieldatum noch nicht geboren.",
        "fr": "Pas encore né à la date cible.",
    },
}


def normalize_locale(locale: str | None) -> str:
    """Reduce a locale tag ("pt-BR", "ko_KR") to a supported language code.

    Unknown or empty locales map to "en".
    """
    if not locale:
        return "en"
    lang = locale.replace("_", "-").split("-")[0].lower()
    return lang if lang in SUPPORTED_LOCALES else "en"


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(normalize_locale(lang)) or entry.get("en") or key
