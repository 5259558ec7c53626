"""Data models and type definitions"""

from brand_weaver.models.deployment import (
    DeploymentOptions,
    DeploymentResult,
    DnsGuidance,
    DnsRecord,
    Platform,
)
from brand_weaver.models.design import (
    AESTHETIC_LEVELS,
    COLOR_SCHEMES,
    TYPOGRAPHY_OPTIONS,
    AestheticLevel,
    AnalyticsConfig,
    ColorScheme,
    DesignConfig,
    LanguageSelection,
    PortfolioProject,
    Typography,
)
from brand_weaver.models.profile import (
    Certification,
    Education,
    Engagement,
    FeaturedPost,
    Language,
    LinkedInProfile,
    ProfileData,
    Recommendation,
    Skill,
    WorkExperience,
)

GeneratedBundle = dict[str, str]

__all__ = [
    "AESTHETIC_LEVELS",
    "COLOR_SCHEMES",
    "TYPOGRAPHY_OPTIONS",
    "AestheticLevel",
    "AnalyticsConfig",
    "Certification",
    "ColorScheme",
    "DeploymentOptions",
    "DeploymentResult",
    "DesignConfig",
    "DnsGuidance",
    "DnsRecord",
    "Education",
    "Engagement",
    "FeaturedPost",
    "GeneratedBundle",
    "Language",
    "LanguageSelection",
    "LinkedInProfile",
    "Platform",
    "PortfolioProject",
    "ProfileData",
    "Recommendation",
    "Skill",
    "Typography",
    "WorkExperience",
]
