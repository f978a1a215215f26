"""User-facing strings for the strength meter, one flat catalog per locale."""
import logging

logger = logging.getLogger("passmeter.messages")

CATALOGS = {
    "en": {
        "labels": {
            "very_weak": "Very Weak",
            "weak": "Weak",
            "medium": "Medium",
            "strong": "Strong",
            "very_strong": "Very Strong",
            "ultra_strong": "Ultra Strong",
        },
        "idle_prompt": "Start typing to create a strong password.",
        "percentage_prefix": "Strength",
        "feedback_ultra": "Your password is ultra strong! It meets every criterion.",
        "feedback_very_strong": (
            "Your password is very strong! Add at least 2 special characters "
            "to make it ultra strong."
        ),
        "feedback_header": "For a stronger password:",
        "criteria": {
            "length": "- Use at least {min_length} characters.",
            "lower": "- Include at least one lowercase letter (a-z).",
            "upper": "- Include at least one uppercase letter (A-Z).",
            "digit": "- Include at least one digit (0-9).",
            "special": "- Include at least one special character (!@#$...).",
        },
    },
    "tr": {
        "labels": {
            "very_weak": "Çok Zayıf",
            "weak": "Zayıf",
            "medium": "Orta",
            "strong": "Güçlü",
            "very_strong": "Çok Güçlü",
            "ultra_strong": "Ultra Güçlü",
        },
        "idle_prompt": "Güçlü bir şifre oluşturmak için yazmaya başlayın.",
        "percentage_prefix": "Güçlülük",
        "feedback_ultra": "Şifreniz ultra güçlü! Tüm kriterleri sağlıyor.",
        "feedback_very_strong": (
            "Şifreniz çok güçlü! Ultra güçlülük için en az 2 özel karakter ekleyin."
        ),
        "feedback_header": "Daha güçlü bir şifre için:",
        "criteria": {
            "length": "- En az {min_length} karakter uzunluğunda olmalı.",
            "lower": "- En az bir küçük harf (a-z) içermeli.",
            "upper": "- En az bir büyük harf (A-Z) içermeli.",
            "digit": "- En az bir rakam (0-9) içermeli.",
            "special": "- En az bir özel karakter (!@#$...) içermeli.",
        },
    },
}

DEFAULT_LOCALE = "en"
DEFAULT_CATALOG = CATALOGS[DEFAULT_LOCALE]


def get_catalog(locale: str) -> dict:
    catalog = CATALOGS.get((locale or "").lower())
    if catalog is None:
        logger.warning("Unknown locale '%s', falling back to '%s'", locale, DEFAULT_LOCALE)
        return DEFAULT_CATALOG
    return catalog
