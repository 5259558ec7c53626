"""Design choices collected by the customization wizard.

Also holds the preset catalogues the wizard offers: colour schemes,
typography pairs and aesthetic levels.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from brand_weaver.models.base import CamelModel

__all__ = [
    "AESTHETIC_LEVELS",
    "COLOR_SCHEMES",
    "TYPOGRAPHY_OPTIONS",
    "AestheticLevel",
    "AestheticLevelInfo",
    "AnalyticsConfig",
    "ColorScheme",
    "DesignConfig",
    "LanguageSelection",
    "PortfolioProject",
    "Typography",
    "get_color_scheme",
    "get_typography",
]


class LanguageSelection(StrEnum):
    ENGLISH = "english"
    ARABIC = "arabic"
    BOTH = "both"


class AestheticLevel(StrEnum):
    """Controls which animation libraries the generated site loads."""

    STANDARD = "standard"
    ENHANCED = "enhanced"
    PREMIUM = "premium"


class ColorScheme(CamelModel):
    id: str = "custom"
    name: str = "Custom Colors"
    primary: str = "#2563eb"
    secondary: str = "#1e40af"
    accent: str = "#60a5fa"


class Typography(CamelModel):
    id: str = "modern-professional"
    name: str = "Modern Professional"
    heading_font: str = "Inter"
    body_font: str = "Roboto"


class PortfolioProject(CamelModel):
    id: str = ""
    title: str = ""
    description: str = ""
    image: str = ""
    technologies: list[str] = Field(default_factory=list)
    live_url: str = ""
    source_url: str = ""
    featured: bool = False


class AnalyticsConfig(CamelModel):
    google_analytics_id: str = ""
    enable_consent_banner: bool = True


class DesignConfig(CamelModel):
    """Everything the user chose in the wizard.

    The generator only reads this object; a changed choice means a new
    config and a full regeneration.
    """

    language: LanguageSelection = LanguageSelection.ENGLISH
    color_scheme: ColorScheme = Field(default_factory=ColorScheme)
    typography: Typography = Field(default_factory=Typography)
    aesthetic_level: AestheticLevel = AestheticLevel.STANDARD
    whatsapp_number: str = ""
    phone_number: str = ""
    portfolio_projects: list[PortfolioProject] = Field(default_factory=list)
    analytics: AnalyticsConfig | None = None

    @classmethod
    def from_presets(
        cls,
        *,
        color_scheme_id: str = "modern-blue",
        typography_id: str = "modern-professional",
        **overrides: object,
    ) -> DesignConfig:
        """Build a config from preset ids plus any other field overrides.

        Raises:
            ValueError: If either preset id is unknown.
        """
        return cls(
            color_scheme=get_color_scheme(color_scheme_id),
            typography=get_typography(typography_id),
            **overrides,
        )


class AestheticLevelInfo(CamelModel):
    id: AestheticLevel
    name: str
    name_ar: str
    description: str
    features: list[str] = Field(default_factory=list)


COLOR_SCHEMES: tuple[ColorScheme, ...] = (
    ColorScheme(
        id="modern-blue",
        name="Modern Blue",
        primary="#2563eb",
        secondary="#1e40af",
        accent="#60a5fa",
    ),
    ColorScheme(
        id="professional-gray",
        name="Professional Gray",
        primary="#374151",
        secondary="#1f2937",
        accent="#9ca3af",
    ),
    ColorScheme(
        id="vibrant-orange",
        name="Vibrant Orange",
        primary="#ea580c",
        secondary="#c2410c",
        accent="#fb923c",
    ),
    ColorScheme(
        id="elegant-purple",
        name="Elegant Purple",
        primary="#7c3aed",
        secondary="#5b21b6",
        accent="#a78bfa",
    ),
    ColorScheme(
        id="fresh-green",
        name="Fresh Green",
        primary="#059669",
        secondary="#047857",
        accent="#34d399",
    ),
    ColorScheme(
        id="custom",
        name="Custom Colors",
        primary="#2563eb",
        secondary="#1e40af",
        accent="#60a5fa",
    ),
)

TYPOGRAPHY_OPTIONS: tuple[Typography, ...] = (
    Typography(
        id="modern-professional",
        name="Modern Professional",
        heading_font="Inter",
        body_font="Roboto",
    ),
    Typography(
        id="classic-elegant",
        name="Classic Elegant",
        heading_font="Playfair Display",
        body_font="Merriweather",
    ),
    Typography(
        id="tech-minimalist",
        name="Tech Minimalist",
        heading_font="Space Grotesk",
        body_font="IBM Plex Sans",
    ),
    Typography(
        id="creative-bold",
        name="Creative Bold",
        heading_font="Montserrat",
        body_font="Open Sans",
    ),
)

AESTHETIC_LEVELS: tuple[AestheticLevelInfo, ...] = (
    AestheticLevelInfo(
        id=AestheticLevel.STANDARD,
        name="Standard",
        name_ar="عادي",
        description="Simple, clean, fast loading with basic animations",
        features=["Clean design", "Basic hover effects", "Fast loading", "Minimal animations"],
    ),
    AestheticLevelInfo(
        id=AestheticLevel.ENHANCED,
        name="Enhanced",
        name_ar="جمال متوسط",
        description="Professional polish with smooth transitions",
        features=["Smooth transitions", "Parallax scrolling", "Hover effects", "Staggered reveals"],
    ),
    AestheticLevelInfo(
        id=AestheticLevel.PREMIUM,
        name="Premium",
        name_ar="جمال عالي",
        description="Stunning design with advanced animations",
        features=[
            "GSAP animations",
            "Particle effects",
            "Micro-interactions",
            "Gradient animations",
        ],
    ),
)


def get_color_scheme(scheme_id: str) -> ColorScheme:
    """Return the preset colour scheme registered under *scheme_id*.

    Raises:
        ValueError: If no preset with that id exists.
    """
    for scheme in COLOR_SCHEMES:
        if scheme.id == scheme_id:
            return scheme
    available = ", ".join(s.id for s in COLOR_SCHEMES)
    msg = f"Unknown color scheme {scheme_id!r}. Available: {available}"
    raise ValueError(msg)


def get_typography(typography_id: str) -> Typography:
    """Return the preset typography pair registered under *typography_id*.

    Raises:
        ValueError: If no preset with that id exists.
    """
    for option in TYPOGRAPHY_OPTIONS:
        if option.id == typography_id:
            return option
    available = ", ".join(t.id for t in TYPOGRAPHY_OPTIONS)
    msg = f"Unknown typography {typography_id!r}. Available: {available}"
    raise ValueError(msg)
