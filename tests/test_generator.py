"""Tests for the static site generator."""

from __future__ import annotations

import datetime as dt
import json
import re

import pytest

from brand_weaver.generator import BUNDLE_FILES, create_preview_html, generate
from brand_weaver.generator.context import AOS_CSS, AOS_JS, GSAP_JS, SWIPER_CSS, SWIPER_JS
from brand_weaver.generator.i18n import PHRASES
from brand_weaver.models import DesignConfig, ProfileData

YEAR = 2025


def _config(**fields: object) -> DesignConfig:
    return DesignConfig.model_validate(fields)


def _html(profile: ProfileData, **fields: object) -> str:
    return generate(profile, _config(**fields), year=YEAR)["index.html"]


def _everything_config(**fields: object) -> DesignConfig:
    """Config that switches on every optional section and banner."""
    return _config(
        portfolio_projects=[
            {
                "id": "p1",
                "title": "Side Project",
                "description": "Something small",
                "technologies": ["Python"],
                "liveUrl": "https://example.org",
                "sourceUrl": "https://github.com/example/side",
                "featured": True,
            }
        ],
        analytics={"googleAnalyticsId": "G-TEST123"},
        whatsapp_number="+1 555 0100",
        phone_number="+1 555 0100",
        **fields,
    )


class TestBundle:
    """Tests for the shape of the generated bundle."""

    def test_bundle_has_fixed_files(self, full_profile: ProfileData) -> None:
        bundle = generate(full_profile, _config(), year=YEAR)
        assert set(bundle) == set(BUNDLE_FILES)
        assert all(isinstance(content, str) and content for content in bundle.values())

    def test_index_inlines_stylesheet(self, full_profile: ProfileData) -> None:
        bundle = generate(full_profile, _config(), year=YEAR)
        assert bundle["styles.css"].strip() in bundle["index.html"]

    def test_output_is_deterministic(self, full_profile: ProfileData) -> None:
        config = _everything_config(language="both", aesthetic_level="premium")
        first = generate(full_profile, config, year=YEAR)
        second = generate(full_profile, config, year=YEAR)
        assert first == second

    def test_year_appears_in_footer(self, full_profile: ProfileData) -> None:
        assert f"&copy; {YEAR} Jane Doe" in _html(full_profile)

    def test_year_defaults_to_current(self, full_profile: ProfileData) -> None:
        html = generate(full_profile, _config())["index.html"]
        assert f"&copy; {dt.date.today().year}" in html

    def test_no_self_closing_tags(self, full_profile: ProfileData) -> None:
        html = generate(full_profile, _everything_config(aesthetic_level="premium"), year=YEAR)[
            "index.html"
        ]
        assert "/>" not in html
        assert html.startswith("<!DOCTYPE html>")

    def test_external_resources_are_absolute(self, full_profile: ProfileData) -> None:
        html = _html(full_profile, aesthetic_level="premium")
        for match in re.finditer(r'<(?:script|link)[^>]+(?:src|href)="([^"]+)"', html):
            assert match.group(1).startswith("https://")


class TestSectionOmission:
    """Each optional section is emitted only when its data is present."""

    @pytest.mark.parametrize(
        ("field", "section_id"),
        [
            ("experience", "experience"),
            ("education", "education"),
            ("skills", "skills"),
            ("certifications", "certifications"),
            ("featured_posts", "posts"),
            ("recommendations", "recommendations"),
        ],
    )
    def test_empty_list_omits_section(
        self, full_profile: ProfileData, field: str, section_id: str
    ) -> None:
        assert f'id="{section_id}"' in _html(full_profile)
        emptied = full_profile.model_copy(update={field: []})
        assert f'id="{section_id}"' not in _html(emptied)

    def test_empty_summary_omits_about(self, full_profile: ProfileData) -> None:
        profile = full_profile.model_copy(
            update={"profile": full_profile.profile.model_copy(update={"summary": ""})}
        )
        html = _html(profile)
        assert 'id="about"' not in html
        assert "About Me" not in html

    def test_portfolio_requires_projects(self, full_profile: ProfileData) -> None:
        assert 'id="portfolio"' not in _html(full_profile)
        html = generate(full_profile, _everything_config(), year=YEAR)["index.html"]
        assert 'id="portfolio"' in html

    def test_empty_experience_has_no_heading(self, full_profile: ProfileData) -> None:
        html = _html(full_profile.model_copy(update={"experience": []}))
        assert ">Experience<" not in html

    def test_blank_skill_names_omit_section(self) -> None:
        profile = ProfileData.model_validate(
            {"profile": {"fullName": "Jane Doe"}, "skills": [{"name": "   "}, {"name": "\t"}]}
        )
        html = _html(profile)
        assert 'id="skills"' not in html
        assert ">Skills<" not in html
        assert 'name="keywords"' not in html

    def test_blank_skill_names_are_skipped(self) -> None:
        profile = ProfileData.model_validate(
            {"skills": [{"name": " "}, {"name": " Python "}, {"name": "Go"}]}
        )
        html = _html(profile)
        assert html.count('class="skill-tag"') == 2
        assert '<meta name="keywords" content="Python, Go">' in html

    def test_sections_follow_fixed_order(self, full_profile: ProfileData) -> None:
        html = generate(full_profile, _everything_config(), year=YEAR)["index.html"]
        markers = [
            'class="hero"',
            'id="about"',
            'id="experience"',
            'id="education"',
            'id="skills"',
            'id="certifications"',
            'id="posts"',
            'id="recommendations"',
            'id="portfolio"',
            "<footer>",
            'class="floating-contacts"',
            'id="cookie-banner"',
        ]
        positions = [html.index(marker) for marker in markers]
        assert positions == sorted(positions)

    def test_featured_projects_come_first(self, full_profile: ProfileData) -> None:
        config = _config(
            portfolio_projects=[
                {"id": "a", "title": "Plain One"},
                {"id": "b", "title": "Star One", "featured": True},
            ]
        )
        html = generate(full_profile, config, year=YEAR)["index.html"]
        assert html.index("Star One") < html.index("Plain One")


class TestLocale:
    """Tests for English, Arabic and bilingual output."""

    # Only used in <title> when the headline is empty.
    TITLE_ONLY = {"personalPortfolio"}
    # Only rendered by the language switcher.
    SWITCHER_ONLY = {"language"}

    def test_english_uses_english_phrases(self, full_profile: ProfileData) -> None:
        html = generate(full_profile, _everything_config(language="english"), year=YEAR)[
            "index.html"
        ]
        assert '<html lang="en" dir="ltr"' in html
        for key, phrase in PHRASES.items():
            if key not in self.TITLE_ONLY | self.SWITCHER_ONLY:
                assert phrase.en in html, key
        assert PHRASES["about"].ar not in html
        assert 'class="lang-ar"' not in html

    def test_arabic_uses_arabic_phrases(self, full_profile: ProfileData) -> None:
        html = generate(full_profile, _everything_config(language="arabic"), year=YEAR)[
            "index.html"
        ]
        assert '<html lang="ar" dir="rtl"' in html
        assert '<body class="rtl">' in html
        for key, phrase in PHRASES.items():
            if key not in self.TITLE_ONLY | self.SWITCHER_ONLY:
                assert phrase.ar in html, key
        assert "About Me" not in html
        assert 'class="lang-en"' not in html

    def test_bilingual_emits_both_variants(self, full_profile: ProfileData) -> None:
        html = generate(full_profile, _everything_config(language="both"), year=YEAR)[
            "index.html"
        ]
        for key, phrase in PHRASES.items():
            if key not in self.TITLE_ONLY:
                assert phrase.en in html, key
                assert phrase.ar in html, key
        assert (
            '<span class="lang-en">About Me</span><span class="lang-ar">نبذة عني</span>' in html
        )

    def test_bilingual_visibility_follows_locale_attribute(
        self, full_profile: ProfileData
    ) -> None:
        bundle = generate(full_profile, _config(language="both"), year=YEAR)
        html = bundle["index.html"]
        assert 'data-locale="en"' in html
        assert 'html[data-locale="en"] .lang-ar' in bundle["styles.css"]
        assert 'html[data-locale="ar"] .lang-en' in bundle["styles.css"]
        assert 'data-lang="ar"' in html
        assert "function setLocale(locale)" in html

    def test_attribute_labels_are_translated(self, full_profile: ProfileData) -> None:
        arabic = generate(full_profile, _everything_config(language="arabic"), year=YEAR)[
            "index.html"
        ]
        assert 'class="floating-contacts" aria-label="خيارات التواصل"' in arabic
        assert "Contact options" not in arabic

        bilingual = generate(full_profile, _everything_config(language="both"), year=YEAR)[
            "index.html"
        ]
        assert 'aria-label="Language / اللغة"' in bilingual
        assert 'aria-label="Contact options / خيارات التواصل"' in bilingual

    def test_single_language_has_no_switcher(self, full_profile: ProfileData) -> None:
        html = _html(full_profile, language="arabic")
        assert "lang-switcher" not in html
        assert "setLocale" not in html

    def test_title_falls_back_to_phrase(self) -> None:
        profile = ProfileData.model_validate({"profile": {"fullName": "Jane Doe"}})
        assert "<title>Jane Doe - Personal Portfolio</title>" in _html(profile)
        assert "الملف الشخصي" in _html(profile, language="arabic")

    def test_arabic_loads_arabic_fonts(self, full_profile: ProfileData) -> None:
        assert "family=Cairo" in _html(full_profile, language="arabic")
        assert "family=Cairo" not in _html(full_profile, language="english")

    def test_rtl_mirrors_timeline(self, full_profile: ProfileData) -> None:
        ltr = generate(full_profile, _config(), year=YEAR)["styles.css"]
        rtl = generate(full_profile, _config(language="arabic"), year=YEAR)["styles.css"]
        assert "padding-left: 40px" in ltr
        assert "padding-right: 40px" in rtl


class TestFallbacks:
    """Tests for rendering partially populated profiles."""

    def test_missing_picture_renders_initials(self, jane_profile: ProfileData) -> None:
        html = _html(jane_profile)
        assert '<div class="profile-image"' in html
        assert ">JD</div>" in html
        assert '<img src="" ' not in html
        assert 'class="profile-image" loading' not in html

    def test_picture_renders_img(self, full_profile: ProfileData) -> None:
        html = _html(full_profile)
        assert '<img src="https://images.unsplash.com' in html
        assert '<div class="profile-image"' not in html

    def test_empty_profile_renders(self) -> None:
        html = _html(ProfileData())
        assert "None" not in html
        assert "undefined" not in html
        assert "<footer>" in html

    def test_name_falls_back_to_first_and_last(self) -> None:
        profile = ProfileData.model_validate(
            {"profile": {"firstName": "Ada", "lastName": "Lovelace"}}
        )
        html = _html(profile)
        assert "<h1>Ada Lovelace</h1>" in html
        assert ">AL</div>" in html

    def test_name_falls_back_to_username(self) -> None:
        profile = ProfileData.model_validate({"profile": {"username": "adal"}})
        assert "<h1>adal</h1>" in _html(profile)

    def test_linkedin_url_derived_from_username(self) -> None:
        profile = ProfileData.model_validate({"profile": {"username": "adal"}})
        assert 'href="https://www.linkedin.com/in/adal"' in _html(profile)

    def test_recommender_without_picture_gets_initials(self, jane_profile: ProfileData) -> None:
        profile = jane_profile.model_copy(
            update={
                "recommendations": ProfileData.model_validate(
                    {"recommendations": [{"recommenderName": "Sam Lee", "text": "Great."}]}
                ).recommendations
            }
        )
        html = _html(profile)
        assert "SL" in html
        assert "Great." in html

    def test_header_image_spaces_are_percent_encoded(self) -> None:
        profile = ProfileData.model_validate(
            {"profile": {"fullName": "Jane", "headerImage": "https://img.test/my cover (1).jpg"}}
        )
        css = generate(profile, _config(), year=YEAR)["styles.css"]
        assert "url('https://img.test/my%20cover%20%281%29.jpg')" in css

    def test_null_lists_become_empty(self) -> None:
        profile = ProfileData.model_validate({"experience": None, "skills": None})
        assert profile.experience == []
        assert 'id="experience"' not in _html(profile)


class TestAestheticTiers:
    """Tests for animation library wiring per aesthetic level."""

    LIBRARIES = (AOS_CSS, AOS_JS, GSAP_JS)

    def _libraries(self, html: str) -> set[str]:
        return {url for url in self.LIBRARIES if url in html}

    def test_tiers_are_monotonic(self, jane_profile: ProfileData) -> None:
        standard = self._libraries(_html(jane_profile, aesthetic_level="standard"))
        enhanced = self._libraries(_html(jane_profile, aesthetic_level="enhanced"))
        premium = self._libraries(_html(jane_profile, aesthetic_level="premium"))
        assert standard == set()
        assert standard <= enhanced <= premium
        assert enhanced == {AOS_CSS, AOS_JS}
        assert premium == {AOS_CSS, AOS_JS, GSAP_JS}

    def test_standard_has_no_reveal_attributes(self, full_profile: ProfileData) -> None:
        assert "data-aos" not in _html(full_profile, aesthetic_level="standard")

    def test_enhanced_has_reveal_attributes(self, full_profile: ProfileData) -> None:
        html = _html(full_profile, aesthetic_level="enhanced")
        assert 'data-aos="fade-up"' in html
        assert "AOS.init(" in html

    def test_reveal_delays_are_capped(self, full_profile: ProfileData) -> None:
        html = _html(full_profile, aesthetic_level="enhanced")
        delays = [int(d) for d in re.findall(r'data-aos-delay="(\d+)"', html)]
        assert delays
        assert max(delays) <= 600

        skills_start = html.index('id="skills"')
        skills_html = html[skills_start : html.index("</section>", skills_start)]
        skill_delays = [int(d) for d in re.findall(r'data-aos-delay="(\d+)"', skills_html)]
        assert skill_delays == [50, 100, 150, 200, 250, 300, 350, 400, 400]

    def test_premium_adds_gsap_tweens(self, full_profile: ProfileData) -> None:
        html = _html(full_profile, aesthetic_level="premium")
        assert "gsap.from('.hero h1'" in html
        assert "--parallax-offset" in html

    def test_carousel_independent_of_tier(self, full_profile: ProfileData) -> None:
        html = _html(full_profile, aesthetic_level="standard")
        assert SWIPER_CSS in html
        assert SWIPER_JS in html
        assert AOS_JS not in html

    def test_no_posts_no_carousel(self, full_profile: ProfileData) -> None:
        html = _html(full_profile.model_copy(update={"featured_posts": []}))
        assert SWIPER_JS not in html
        assert SWIPER_CSS not in html


class TestScenarios:
    """End-to-end scenarios."""

    def test_standard_english_profile(self, jane_profile: ProfileData) -> None:
        html = _html(jane_profile, language="english", aesthetic_level="standard")
        assert "Jane Doe" in html
        assert "Senior Engineer" in html
        assert "Present" in html
        assert AOS_JS not in html
        assert "<script src=" not in html

    def test_premium_with_posts(self, jane_profile: ProfileData) -> None:
        posts = ProfileData.model_validate(
            {
                "featuredPosts": [
                    {"id": "1", "contentPreview": "First post", "postUrl": "https://x.test/1"},
                    {"id": "2", "contentPreview": "Second post", "postUrl": "https://x.test/2"},
                ]
            }
        ).featured_posts
        profile = jane_profile.model_copy(update={"featured_posts": posts})
        html = _html(profile, language="english", aesthetic_level="premium")
        assert f'<script src="{AOS_JS}"></script>' in html
        assert f'<script src="{GSAP_JS}"></script>' in html
        assert f'<link rel="stylesheet" href="{SWIPER_CSS}">' in html
        assert f'<script src="{SWIPER_JS}"></script>' in html

    def test_bilingual_about(self, full_profile: ProfileData) -> None:
        html = _html(full_profile, language="both")
        assert "About Me" in html
        assert "نبذة عني" in html


class TestContacts:
    """Tests for the floating contact buttons."""

    def test_whatsapp_link_keeps_digits_only(self, jane_profile: ProfileData) -> None:
        html = _html(jane_profile, whatsapp_number="+1 (555) 123-4567")
        assert 'href="https://wa.me/15551234567"' in html

    def test_phone_link_keeps_plus(self, jane_profile: ProfileData) -> None:
        html = _html(jane_profile, phone_number="+44 20 7946 0958")
        assert 'href="tel:+442079460958"' in html
        assert "wa.me" not in html

    def test_no_numbers_no_buttons(self, jane_profile: ProfileData) -> None:
        assert 'class="floating-contacts"' not in _html(jane_profile)

    def test_number_without_digits_is_ignored(self, jane_profile: ProfileData) -> None:
        assert 'class="floating-contacts"' not in _html(jane_profile, whatsapp_number="n/a")


class TestAnalytics:
    """Tests for the analytics snippet and consent banner."""

    def test_no_id_no_tracking(self, jane_profile: ProfileData) -> None:
        html = _html(jane_profile, analytics={"googleAnalyticsId": ""})
        assert "googletagmanager" not in html
        assert 'id="cookie-banner"' not in html

    def test_consent_banner_gates_tracking(self, jane_profile: ProfileData) -> None:
        html = _html(jane_profile, analytics={"googleAnalyticsId": "G-ABC"})
        assert "gtag/js?id=G-ABC" in html
        assert 'id="cookie-banner"' in html
        assert "localStorage.getItem('analytics-consent') === 'accepted'" in html

    def test_banner_can_be_disabled(self, jane_profile: ProfileData) -> None:
        html = _html(
            jane_profile,
            analytics={"googleAnalyticsId": "G-ABC", "enableConsentBanner": False},
        )
        assert 'id="cookie-banner"' not in html
        assert "startAnalytics();" in html


class TestEscaping:
    """Profile and config values cannot inject markup."""

    def test_name_is_escaped(self) -> None:
        profile = ProfileData.model_validate(
            {"profile": {"fullName": "<script>alert(1)</script>"}}
        )
        html = _html(profile)
        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html

    def test_script_urls_are_dropped(self, jane_profile: ProfileData) -> None:
        profile = jane_profile.model_copy(
            update={
                "certifications": ProfileData.model_validate(
                    {
                        "certifications": [
                            {"name": "Cert", "credentialUrl": "javascript:alert(1)"}
                        ]
                    }
                ).certifications
            }
        )
        html = _html(profile)
        assert "javascript:" not in html
        assert "View Credential" not in html

    def test_css_values_are_sanitized(self, jane_profile: ProfileData) -> None:
        config = _config(
            color_scheme={"primary": "red;}</style><script>x()</script>"},
            typography={"headingFont": "Evil'); }"},
        )
        bundle = generate(jane_profile, config, year=YEAR)
        assert "</style><script>" not in bundle["index.html"]
        assert "--primary: #2563eb;" in bundle["styles.css"]
        assert "'Evil '" not in bundle["styles.css"]


class TestSeo:
    """Tests for structured data, meta tags, sitemap and robots.txt."""

    def _json_ld(self, html: str) -> dict:
        match = re.search(r'<script type="application/ld\+json">(.*?)</script>', html, re.S)
        assert match
        return json.loads(match.group(1))

    def test_person_json_ld(self, full_profile: ProfileData) -> None:
        person = self._json_ld(_html(full_profile))
        assert person["@type"] == "Person"
        assert person["name"] == "Jane Doe"
        assert person["jobTitle"] == "Senior Software Engineer"
        assert person["worksFor"]["name"] == "Tech Innovations Inc."
        assert [org["name"] for org in person["alumniOf"]] == [
            "Massachusetts Institute of Technology",
            "University of California, Berkeley",
        ]
        assert person["sameAs"] == ["https://linkedin.com/in/jane-doe"]

    def test_json_ld_omits_missing_fields(self) -> None:
        person = self._json_ld(_html(ProfileData.model_validate({"profile": {"fullName": "X"}})))
        assert "jobTitle" not in person
        assert "image" not in person
        assert "worksFor" not in person

    def test_open_graph_tags(self, full_profile: ProfileData) -> None:
        html = _html(full_profile)
        assert '<meta property="og:title" content="Jane Doe">' in html
        assert '<meta property="og:image"' in html
        assert '<meta name="keywords" content="JavaScript, TypeScript' in html

    def test_no_picture_no_og_image(self, jane_profile: ProfileData) -> None:
        assert "og:image" not in _html(jane_profile)

    def test_sitemap_slugs_and_priorities(self, full_profile: ProfileData) -> None:
        sitemap = generate(full_profile, _config(), year=YEAR, base_url="https://jane.dev/")[
            "sitemap.xml"
        ]
        locs = re.findall(r"<loc>(.*?)</loc>", sitemap)
        assert locs[0] == "https://jane.dev/"
        assert "https://jane.dev/experience" in locs
        assert len(locs) == 8
        priorities = re.findall(r"<priority>(.*?)</priority>", sitemap)
        assert priorities == ["1.0"] + ["0.8"] * 7

    def test_robots_references_sitemap(self, full_profile: ProfileData) -> None:
        robots = generate(full_profile, _config(), year=YEAR, base_url="https://jane.dev")[
            "robots.txt"
        ]
        assert robots.splitlines() == [
            "User-agent: *",
            "Allow: /",
            "Sitemap: https://jane.dev/sitemap.xml",
        ]

    def test_canonical_uses_base_url(self, full_profile: ProfileData) -> None:
        html = generate(full_profile, _config(), year=YEAR, base_url="https://jane.dev")[
            "index.html"
        ]
        assert '<link rel="canonical" href="https://jane.dev/">' in html


class TestPreview:
    """Tests for the sample preview."""

    def test_sample_preview_without_inputs(self) -> None:
        html = create_preview_html(year=YEAR)
        assert "<h1" in html and "Sample User" in html
        assert "postsSwiper" in html

    def test_preview_uses_given_inputs(self, jane_profile: ProfileData) -> None:
        html = create_preview_html(jane_profile, _config(), year=YEAR)
        assert "Jane Doe" in html
        assert "Sample User" not in html
