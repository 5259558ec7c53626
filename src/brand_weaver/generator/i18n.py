"""Phrase dictionary and locale-aware text rendering for generated sites."""

from __future__ import annotations

from typing import NamedTuple

from markupsafe import Markup, escape

from brand_weaver.models.design import LanguageSelection

__all__ = ["PHRASES", "Phrase", "Translator"]


class Phrase(NamedTuple):
    en: str
    ar: str


PHRASES: dict[str, Phrase] = {
    "about": Phrase("About Me", "نبذة عني"),
    "experience": Phrase("Experience", "الخبرة العملية"),
    "education": Phrase("Education", "التعليم"),
    "skills": Phrase("Skills", "المهارات"),
    "certifications": Phrase("Certifications", "الشهادات"),
    "recommendations": Phrase("Recommendations", "التوصيات"),
    "featuredPosts": Phrase("Featured Posts", "المنشورات المميزة"),
    "portfolio": Phrase("Portfolio", "معرض الأعمال"),
    "featured": Phrase("Featured", "مميز"),
    "viewProject": Phrase("View Project", "عرض المشروع"),
    "viewCode": Phrase("View Code", "عرض الكود"),
    "present": Phrase("Present", "حتى الآن"),
    "viewPost": Phrase("View Post", "عرض المنشور"),
    "cookieConsent": Phrase(
        "This website uses cookies for analytics.",
        "يستخدم هذا الموقع ملفات تعريف الارتباط للتحليلات.",
    ),
    "accept": Phrase("Accept", "قبول"),
    "decline": Phrase("Decline", "رفض"),
    "viewOnLinkedIn": Phrase("View on LinkedIn", "عرض على لينكد إن"),
    "issuedBy": Phrase("Issued by", "صادرة من"),
    "viewCredential": Phrase("View Credential", "عرض الشهادة"),
    "whatsApp": Phrase("WhatsApp", "واتساب"),
    "callMe": Phrase("Call Me", "اتصل بي"),
    "contactOptions": Phrase("Contact options", "خيارات التواصل"),
    "language": Phrase("Language", "اللغة"),
    "in": Phrase("in", "في"),
    "personalPortfolio": Phrase("Personal Portfolio", "الملف الشخصي"),
    "allRightsReserved": Phrase("All Rights Reserved", "جميع الحقوق محفوظة"),
}


class Translator:
    """Render phrases for one language selection.

    Single-language sites get the literal phrase.  Bilingual sites get both
    variants in ``lang-en`` / ``lang-ar`` spans; which one shows is decided
    by stylesheet rules keyed on the document's ``data-locale`` attribute.
    """

    def __init__(self, language: LanguageSelection) -> None:
        self.language = LanguageSelection(language)

    @property
    def is_rtl(self) -> bool:
        return self.language is LanguageSelection.ARABIC

    @property
    def is_bilingual(self) -> bool:
        return self.language is LanguageSelection.BOTH

    def __call__(self, key: str) -> Markup:
        phrase = PHRASES[key]
        if self.is_bilingual:
            return Markup('<span class="lang-en">{}</span><span class="lang-ar">{}</span>').format(
                phrase.en, phrase.ar
            )
        return escape(self.plain(key))

    def plain(self, key: str) -> str:
        """Return the unwrapped phrase in the page's initial language."""
        phrase = PHRASES[key]
        return phrase.ar if self.is_rtl else phrase.en

    def label(self, key: str) -> str:
        """Text for attributes and ``<title>``, where spans cannot go.

        Bilingual sites get both variants joined with a slash.
        """
        if self.is_bilingual:
            phrase = PHRASES[key]
            return f"{phrase.en} / {phrase.ar}"
        return self.plain(key)
