"""
Built-in sample profile.

Served when no upstream API key is configured and used for the preview
page before the user has generated anything.
"""

from __future__ import annotations

import re

from brand_weaver.models.design import AestheticLevel, DesignConfig
from brand_weaver.models.profile import ProfileData

SAMPLE_USERNAME = "sample-user"

_SUMMARY = (
    "Passionate software engineer with 8+ years of experience building scalable web "
    "applications and cloud-native solutions. I specialize in React, Node.js, and AWS, "
    "with a focus on clean code and developer experience.\n\n"
    "Currently leading development teams and architecting solutions that serve millions "
    "of users. I believe in continuous learning and sharing knowledge with the community.\n\n"
    "Open to discussing new opportunities and collaborations."
)

_EXPERIENCE = [
    {
        "id": "exp-1",
        "title": "Senior Software Engineer",
        "company": "Tech Innovations Inc.",
        "location": "San Francisco, CA",
        "startDate": "2021-03",
        "isCurrent": True,
        "description": "Leading development of cloud-native applications and mentoring "
        "junior developers. Architecting scalable solutions using modern technologies.",
    },
    {
        "id": "exp-2",
        "title": "Software Engineer",
        "company": "Digital Solutions Corp",
        "location": "New York, NY",
        "startDate": "2018-06",
        "endDate": "2021-02",
        "description": "Developed full-stack web applications using React and Node.js. "
        "Implemented CI/CD pipelines and improved code quality standards.",
    },
    {
        "id": "exp-3",
        "title": "Junior Developer",
        "company": "StartUp Labs",
        "location": "Boston, MA",
        "startDate": "2016-09",
        "endDate": "2018-05",
        "description": "Built responsive web interfaces and contributed to backend API "
        "development. Collaborated with design team on UX improvements.",
    },
]

_EDUCATION = [
    {
        "id": "edu-1",
        "school": "Massachusetts Institute of Technology",
        "degree": "Master of Science",
        "fieldOfStudy": "Computer Science",
        "startDate": "2014",
        "endDate": "2016",
    },
    {
        "id": "edu-2",
        "school": "University of California, Berkeley",
        "degree": "Bachelor of Science",
        "fieldOfStudy": "Computer Engineering",
        "startDate": "2010",
        "endDate": "2014",
    },
]

_CERTIFICATIONS = [
    {
        "id": "cert-1",
        "name": "AWS Solutions Architect Professional",
        "issuer": "Amazon Web Services",
        "issueDate": "2023-01",
        "credentialUrl": "https://aws.amazon.com/certification/",
    },
    {
        "id": "cert-2",
        "name": "Google Cloud Professional Developer",
        "issuer": "Google Cloud",
        "issueDate": "2022-06",
        "credentialUrl": "https://cloud.google.com/certification/",
    },
    {
        "id": "cert-3",
        "name": "Certified Kubernetes Administrator",
        "issuer": "Cloud Native Computing Foundation",
        "issueDate": "2022-03",
    },
]

_SKILLS = [
    ("JavaScript", 42),
    ("TypeScript", 38),
    ("React", 35),
    ("Node.js", 33),
    ("Python", 28),
    ("AWS", 25),
    ("Docker", 22),
    ("Kubernetes", 18),
    ("PostgreSQL", 15),
    ("GraphQL", 12),
]

_LANGUAGES = [
    ("English", "Native"),
    ("Spanish", "Professional"),
    ("French", "Conversational"),
]

_FEATURED_POSTS = [
    {
        "id": "post-1",
        "postUrl": "https://linkedin.com/posts/sample-1",
        "contentPreview": "Excited to share our team's latest achievement in cloud "
        "architecture optimization. We reduced infrastructure costs by 40% while "
        "improving performance...",
        "date": "2024-01-15",
        "engagement": {"likes": 234, "comments": 45, "shares": 12},
    },
    {
        "id": "post-2",
        "postUrl": "https://linkedin.com/posts/sample-2",
        "contentPreview": "Key takeaways from the tech conference on AI and machine "
        "learning trends. The future of software development is evolving rapidly...",
        "date": "2023-11-20",
        "engagement": {"likes": 189, "comments": 32, "shares": 8},
    },
]

_RECOMMENDATIONS = [
    {
        "id": "rec-1",
        "recommenderName": "Sarah Johnson",
        "recommenderHeadline": "VP of Engineering at Tech Corp",
        "recommenderLinkedInUrl": "https://linkedin.com/in/sarahjohnson",
        "text": "{name} is an exceptional engineer with a rare combination of technical "
        "expertise and leadership skills. Their ability to tackle complex problems while "
        "mentoring others makes them an invaluable team member.",
        "relationship": "Managed directly",
        "date": "2023-08",
    },
    {
        "id": "rec-2",
        "recommenderName": "Michael Chen",
        "recommenderHeadline": "Senior Software Architect",
        "recommenderLinkedInUrl": "https://linkedin.com/in/michaelchen",
        "text": "Working with this professional has been a pleasure. Their code quality "
        "and attention to detail set a high standard for the entire team. Highly "
        "recommended for any technical leadership role.",
        "relationship": "Worked together",
        "date": "2023-05",
    },
    {
        "id": "rec-3",
        "recommenderName": "Emily Rodriguez",
        "recommenderHeadline": "Product Manager at Innovation Labs",
        "recommenderLinkedInUrl": "https://linkedin.com/in/emilyrodriguez",
        "text": "A true professional who consistently delivers high-quality work. Their "
        "communication skills and ability to translate technical concepts for "
        "non-technical stakeholders is remarkable.",
        "relationship": "Cross-functional collaboration",
        "date": "2022-12",
    },
]


def format_username(username: str) -> str:
    """``"jane_van-doe"`` -> ``"Jane Van Doe"``."""
    words = [word for word in re.split(r"[-_]", username) if word]
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)


def sample_profile(username: str = SAMPLE_USERNAME, *, extracted_at: str = "") -> ProfileData:
    """Return a fully populated profile for *username*.

    The display name is derived from the username so the sample reads as
    the person the user asked for.
    """
    name = format_username(username) or "John Doe"
    first, _, last = name.partition(" ")
    return ProfileData.model_validate(
        {
            "profile": {
                "username": username,
                "firstName": first or "John",
                "lastName": last or "Doe",
                "fullName": name,
                "headline": "Senior Software Engineer | Cloud Architecture | "
                "Full-Stack Development",
                "summary": _SUMMARY,
                "location": "San Francisco Bay Area",
                "profilePicture": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d"
                "?w=400&h=400&fit=crop&crop=face",
                "headerImage": "https://images.unsplash.com/photo-1517694712202-14dd9538aa97"
                "?w=1920&h=600&fit=crop",
                "linkedinUrl": f"https://linkedin.com/in/{username}",
                "connections": 500,
            },
            "experience": _EXPERIENCE,
            "education": _EDUCATION,
            "certifications": _CERTIFICATIONS,
            "skills": [{"name": n, "endorsements": e} for n, e in _SKILLS],
            "languages": [{"name": n, "proficiency": p} for n, p in _LANGUAGES],
            "featuredPosts": _FEATURED_POSTS,
            "recommendations": [
                {**rec, "text": rec["text"].format(name=name)} for rec in _RECOMMENDATIONS
            ],
            "extractedAt": extracted_at,
        }
    )


def sample_config() -> DesignConfig:
    """Design choices used for the sample preview."""
    return DesignConfig.from_presets(
        color_scheme_id="modern-blue",
        typography_id="modern-professional",
        aesthetic_level=AestheticLevel.ENHANCED,
        whatsapp_number="+1234567890",
        phone_number="+1234567890",
    )
