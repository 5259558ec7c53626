"""Normalized LinkedIn profile data.

These models are the contract between the normalizer and the site
generator.  Every list defaults to empty and every optional scalar to
``""`` so templates can test truthiness instead of presence.
"""

from __future__ import annotations

from pydantic import Field

from brand_weaver.models.base import CamelModel

__all__ = [
    "Certification",
    "Education",
    "Engagement",
    "FeaturedPost",
    "Language",
    "LinkedInProfile",
    "ProfileData",
    "Recommendation",
    "Skill",
    "WorkExperience",
]


class LinkedInProfile(CamelModel):
    """Top-level identity of the person the site is about."""

    username: str = ""
    first_name: str = ""
    last_name: str = ""
    full_name: str = ""
    headline: str = ""
    summary: str = ""
    location: str = ""
    profile_picture: str = ""
    header_image: str = ""
    email: str = ""
    phone: str = ""
    linkedin_url: str = Field("", alias="linkedinUrl")
    connections: int = 0


class WorkExperience(CamelModel):
    id: str = ""
    title: str = ""
    company: str = ""
    company_logo: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    is_current: bool = False
    description: str = ""


class Education(CamelModel):
    id: str = ""
    school: str = ""
    degree: str = ""
    field_of_study: str = ""
    school_logo: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""


class Certification(CamelModel):
    id: str = ""
    name: str = ""
    issuer: str = ""
    issuer_logo: str = ""
    issue_date: str = ""
    expiration_date: str = ""
    credential_id: str = ""
    credential_url: str = ""


class Skill(CamelModel):
    name: str
    endorsements: int = 0


class Language(CamelModel):
    name: str
    proficiency: str = ""


class Engagement(CamelModel):
    """Reaction counters attached to a featured post."""

    likes: int = 0
    comments: int = 0
    shares: int = 0


class FeaturedPost(CamelModel):
    id: str = ""
    embed_code: str = ""
    post_url: str = ""
    content_preview: str = ""
    date: str = ""
    image_url: str = ""
    engagement: Engagement | None = None


class Recommendation(CamelModel):
    id: str = ""
    recommender_name: str = ""
    recommender_headline: str = ""
    recommender_profile_picture: str = ""
    recommender_linked_in_url: str = Field("", alias="recommenderLinkedInUrl")
    text: str = ""
    relationship: str = ""
    date: str = ""


class ProfileData(CamelModel):
    """Everything extracted for one profile, ready to render."""

    profile: LinkedInProfile = Field(default_factory=LinkedInProfile)
    experience: list[WorkExperience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    certifications: list[Certification] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)
    languages: list[Language] = Field(default_factory=list)
    featured_posts: list[FeaturedPost] = Field(default_factory=list)
    recommendations: list[Recommendation] = Field(default_factory=list)
    extracted_at: str = ""
