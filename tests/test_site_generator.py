"""Unit tests for the static site generator."""

import json

from profilesite.sitegen import render_index, render_profile_page, render_site, write_site
from profilesite.sitegen.generator import fill


class TestRenderProfilePage:
    def test_fills_placeholders(self, sample_profile):
        page = render_profile_page(sample_profile)

        assert "<title>田中太郎 - プロフィール</title>" in page
        assert "<span>32歳</span>" in page
        assert "<span>エンジニア</span>" in page
        assert '<span class="skill-tag">Python</span>' in page
        assert "{{" not in page

    def test_missing_age_is_undisclosed(self, sample_profile):
        del sample_profile["age"]

        page = render_profile_page(sample_profile)

        assert "<span>非公開</span>" in page

    def test_no_skills_section_for_empty_skills(self, sample_profile):
        sample_profile["skills"] = []

        page = render_profile_page(sample_profile)

        assert "skills-section\"" not in page
        assert "スキル</h2>" not in page

    def test_escapes_html(self, sample_profile):
        sample_profile["bio"] = "<script>alert(1)</script>"

        page = render_profile_page(sample_profile)

        assert "<script>alert(1)</script>" not in page
        assert "&lt;script&gt;" in page

    def test_fill_does_not_rescan_values(self):
        assert fill("{{A}}{{B}}", {"A": "{{B}}", "B": "x"}) == "{{B}}x"


class TestRenderSite:
    def test_original_page_gets_link_and_no_page(self, sample_profile):
        linked = {"id": "chika", "name": "ちか", "originalPage": "chika/index.html"}

        pages = render_site([sample_profile, linked])

        assert set(pages) == {"index.html", "tanaka.html"}
        assert 'href="chika/index.html"' in pages["index.html"]
        assert 'href="tanaka.html"' in pages["index.html"]

    def test_index_card_contents(self, sample_profile):
        index = render_index([sample_profile])

        assert '<span class="profile-english">Taro Tanaka</span>' in index
        assert '<div class="profile-age">32歳</div>' in index

    def test_rerun_is_byte_identical(self, tmp_path, sample_profile):
        profiles = [sample_profile, {"id": "suzuki", "name": "鈴木", "skills": []}]
        out = tmp_path / "site"

        write_site(profiles, out)
        first = {p.name: p.read_bytes() for p in out.iterdir()}
        write_site(json.loads(json.dumps(profiles)), out)
        second = {p.name: p.read_bytes() for p in out.iterdir()}

        assert first == second
        assert set(first) == {"index.html", "tanaka.html", "suzuki.html"}

    def test_summary(self, tmp_path, sample_profile):
        linked = {"id": "chika", "name": "ちか", "originalPage": "chika/index.html"}

        summary = write_site([sample_profile, linked], tmp_path)

        assert summary["pages"] == 2
        assert summary["linked"] == 1
