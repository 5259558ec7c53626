"""Render context: every value the templates read, resolved up front.

Building the context is where fallback chains, sanitizing of values that
end up in CSS, and the locale/aesthetic switches are decided.  Templates
then only test flags and print values.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import quote

from markupsafe import Markup

from brand_weaver.generator.i18n import Translator
from brand_weaver.models.design import AestheticLevel, DesignConfig, PortfolioProject
from brand_weaver.models.profile import ProfileData, Skill
from brand_weaver.utils.fallback import first_text, is_present

__all__ = [
    "AOS_CSS",
    "AOS_JS",
    "GSAP_JS",
    "MAX_REVEAL_DELAY",
    "SWIPER_CSS",
    "SWIPER_JS",
    "SiteContext",
    "build_context",
    "derive_initials",
    "digits_only",
]

AOS_CSS = "https://unpkg.com/aos@2.3.1/dist/aos.css"
AOS_JS = "https://unpkg.com/aos@2.3.1/dist/aos.js"
SWIPER_CSS = "https://cdn.jsdelivr.net/npm/swiper@11/swiper-bundle.min.css"
SWIPER_JS = "https://cdn.jsdelivr.net/npm/swiper@11/swiper-bundle.min.js"
GSAP_JS = "https://cdnjs.cloudflare.com/ajax/libs/gsap/3.12.2/gsap.min.js"
GOOGLE_FONTS_CSS = "https://fonts.googleapis.com/css2"
ARABIC_FONTS = ("Cairo", "Tajawal")

MAX_REVEAL_DELAY = 600
META_DESCRIPTION_LENGTH = 160

_CSS_COLOR = re.compile(
    r"^(#[0-9a-fA-F]{3,8}|[a-zA-Z]{3,20}|(rgb|rgba|hsl|hsla)\([0-9.,%\s]+\))$"
)
_FONT_NAME = re.compile(r"[^A-Za-z0-9 \-]")


def css_color(value: str, default: str) -> str:
    """Return *value* if it is a plain CSS colour, else *default*."""
    value = (value or "").strip()
    return value if _CSS_COLOR.match(value) else default


def css_font(value: str, default: str) -> str:
    """Strip everything but letters, digits, spaces and hyphens from a font name."""
    cleaned = _FONT_NAME.sub("", value or "").strip()
    return cleaned or default


def css_url(value: str) -> str:
    """Make a URL safe to place inside ``url('...')``."""
    return re.sub(r"""['"()\\<>\s]""", lambda m: quote(m.group(0), safe=""), value)


def digits_only(value: str) -> str:
    return re.sub(r"\D", "", value or "")


def dial_string(value: str) -> str:
    """Keep a leading ``+`` and the digits of a phone number."""
    value = (value or "").strip()
    prefix = "+" if value.startswith("+") else ""
    return prefix + digits_only(value)


def derive_initials(name: str) -> str:
    """``"jane van doe"`` -> ``"JVD"``."""
    return "".join(part[0] for part in name.split()).upper()


def google_fonts_url(heading_font: str, body_font: str, with_arabic: bool) -> str:
    families: list[str] = []
    if heading_font == body_font:
        families.append(f"{heading_font.replace(' ', '+')}:wght@400;500;600;700")
    else:
        families.append(f"{heading_font.replace(' ', '+')}:wght@400;600;700")
        families.append(f"{body_font.replace(' ', '+')}:wght@400;500")
    if with_arabic:
        families.append(f"{ARABIC_FONTS[0]}:wght@400;600;700")
        families.append(f"{ARABIC_FONTS[1]}:wght@400;500;700")
    query = "&".join(f"family={family}" for family in families)
    return f"{GOOGLE_FONTS_CSS}?{query}&display=swap"


@dataclass(frozen=True)
class SiteContext:
    """Resolved, render-ready view of one (profile, config) pair."""

    data: ProfileData
    config: DesignConfig
    t: Translator
    year: int
    base_url: str

    display_name: str
    initials: str
    headline: str
    summary: str
    location: str
    profile_picture: str
    header_image: str
    linkedin_url: str
    job_title: str

    primary: str
    secondary: str
    accent: str
    heading_font: str
    body_font: str
    fonts_url: str

    analytics_id: str
    show_consent_banner: bool
    whatsapp_link: str
    phone_link: str
    portfolio_projects: tuple[PortfolioProject, ...]

    @property
    def is_rtl(self) -> bool:
        return self.t.is_rtl

    @property
    def is_bilingual(self) -> bool:
        return self.t.is_bilingual

    @property
    def locale(self) -> str:
        return "ar" if self.is_rtl else "en"

    @property
    def direction(self) -> str:
        return "rtl" if self.is_rtl else "ltr"

    @property
    def start_side(self) -> str:
        """The inline-start edge: ``left`` for LTR, ``right`` for RTL."""
        return "right" if self.is_rtl else "left"

    @property
    def end_side(self) -> str:
        return "left" if self.is_rtl else "right"

    @property
    def aos_enabled(self) -> bool:
        return self.config.aesthetic_level != AestheticLevel.STANDARD

    @property
    def gsap_enabled(self) -> bool:
        return self.config.aesthetic_level == AestheticLevel.PREMIUM

    @property
    def carousel_enabled(self) -> bool:
        return bool(self.data.featured_posts)

    @property
    def needs_arabic_fonts(self) -> bool:
        return self.is_rtl or self.is_bilingual

    @property
    def has_contacts(self) -> bool:
        return bool(self.whatsapp_link or self.phone_link)

    @property
    def meta_description(self) -> str:
        return self.summary[:META_DESCRIPTION_LENGTH]

    @property
    def named_skills(self) -> list[Skill]:
        return [skill for skill in self.data.skills if is_present(skill.name)]

    @property
    def keywords(self) -> str:
        return ", ".join(skill.name.strip() for skill in self.named_skills)

    @property
    def page_title(self) -> str:
        tagline = self.headline or self.t.label("personalPortfolio")
        return f"{self.display_name} - {tagline}" if self.display_name else tagline

    def reveal(
        self,
        effect: str = "fade-up",
        index: int = 0,
        *,
        step: int = 100,
        base: int = 0,
        cap: int = MAX_REVEAL_DELAY,
    ) -> Markup:
        """Return ``data-aos`` attributes for an element, or nothing.

        The delay grows with *index* in *step* milliseconds and never
        exceeds *cap*.
        """
        if not self.aos_enabled:
            return Markup("")
        delay = min(base + index * step, cap)
        if delay <= 0:
            return Markup(' data-aos="{}"').format(effect)
        return Markup(' data-aos="{}" data-aos-delay="{}"').format(effect, delay)


def _display_name(data: ProfileData) -> str:
    profile = data.profile
    return first_text(
        profile,
        [
            "full_name",
            lambda p: f"{p.first_name} {p.last_name}".strip(),
            "username",
        ],
    )


def _linkedin_url(data: ProfileData) -> str:
    return first_text(
        data.profile,
        [
            "linkedin_url",
            lambda p: f"https://www.linkedin.com/in/{p.username}" if p.username else "",
        ],
    )


def _ordered_projects(config: DesignConfig) -> tuple[PortfolioProject, ...]:
    # Featured projects first; otherwise keep the user's order.
    return tuple(sorted(config.portfolio_projects, key=lambda p: not p.featured))


def build_context(
    data: ProfileData,
    config: DesignConfig,
    *,
    year: int,
    base_url: str,
) -> SiteContext:
    """Resolve every template input for *data* rendered with *config*."""
    translator = Translator(config.language)
    profile = data.profile
    name = _display_name(data)
    experience = data.experience

    scheme = config.color_scheme
    heading_font = css_font(config.typography.heading_font, "Inter")
    body_font = css_font(config.typography.body_font, "Roboto")

    analytics = config.analytics
    analytics_id = analytics.google_analytics_id.strip() if analytics else ""
    consent = bool(analytics_id) and analytics is not None and analytics.enable_consent_banner

    whatsapp_digits = digits_only(config.whatsapp_number)
    phone = dial_string(config.phone_number)

    return SiteContext(
        data=data,
        config=config,
        t=translator,
        year=year,
        base_url=base_url.rstrip("/"),
        display_name=name,
        initials=derive_initials(name),
        headline=profile.headline.strip(),
        summary=profile.summary.strip(),
        location=profile.location.strip(),
        profile_picture=profile.profile_picture.strip(),
        header_image=css_url(profile.header_image.strip()),
        linkedin_url=_linkedin_url(data),
        job_title=first_text(experience[0], ["title"]) if experience else "",
        primary=css_color(scheme.primary, "#2563eb"),
        secondary=css_color(scheme.secondary, "#1e40af"),
        accent=css_color(scheme.accent, "#60a5fa"),
        heading_font=heading_font,
        body_font=body_font,
        fonts_url=google_fonts_url(
            heading_font, body_font, with_arabic=translator.is_rtl or translator.is_bilingual
        ),
        analytics_id=analytics_id,
        show_consent_banner=consent,
        whatsapp_link=f"https://wa.me/{whatsapp_digits}" if whatsapp_digits else "",
        phone_link=f"tel:{phone}" if digits_only(phone) else "",
        portfolio_projects=_ordered_projects(config),
    )
