import pytest
from bs4 import BeautifulSoup

import section_renderers as sr


def _container():
    return BeautifulSoup('<div id="c"></div>', "html.parser").div


SKILLS_TPL = (
    '<h2>{{ skills_section.title }}</h2>'
    '<div class="row" id="skills-list"></div>'
    '<div class="row" id="certificates-list"></div>'
)
SKILLS_DATA = {
    "skills_section": {
        "title": "Skills",
        "skills": [
            {"name": "A", "info": "i1", "items": ["x"]},
            {"name": "B", "info": "i2", "items": ["y", "z"]},
        ],
        "certificates": {"items": [{"description": "AWS", "img_src": "aws.png", "alt": "aws"}]},
    }
}

EXPERIENCE_TPL = '<h2>{{ experience_section.title }}</h2><div id="experience-list"></div>'


def test_absent_container_is_a_noop():
    assert sr.render_skills(None, SKILLS_TPL, SKILLS_DATA) is False


def test_absent_section_leaves_container_alone():
    c = _container()
    assert sr.render_skills(c, SKILLS_TPL, {"nav": {}}) is False
    assert str(c) == '<div id="c"></div>'


def test_skills_blocks_in_input_order():
    c = _container()
    assert sr.render_skills(c, SKILLS_TPL, SKILLS_DATA)
    blocks = c.select("#skills-list > div")
    assert [b.select_one(".skill-name").text for b in blocks] == ["A", "B"]
    assert [li.text for li in blocks[1].find_all("li")] == ["y", "z"]
    assert c.h2.text == "Skills"


def test_certificates_get_prefixed_images_and_overlay():
    c = _container()
    sr.render_skills(c, SKILLS_TPL, SKILLS_DATA)
    cert = c.select_one("#certificates-list")
    assert cert.select_one("img.skill-img")["src"] == "./img/aws.png"
    assert cert.select_one(".more-item .close") is not None


def test_experience_job_with_description_items():
    data = {"experience_section": {"title": "Work", "jobs": [
        {"title": "Eng", "company": "Acme", "duration": "2020-2022", "description": ["did X", "did Y"]},
    ]}}
    c = _container()
    sr.render_experience(c, EXPERIENCE_TPL, data)
    jobs = c.select(".experience-item")
    assert len(jobs) == 1
    assert jobs[0].select_one(".job-title").text == "Eng"
    assert "Acme" in jobs[0].select_one(".company").text
    assert "2020-2022" in jobs[0].select_one(".duration").text
    assert [li.text for li in jobs[0].select("li.experience-detail")] == ["did X", "did Y"]


def test_experience_description_not_a_list_is_empty():
    data = {"experience_section": {"jobs": [{"title": "Eng", "description": "free text"}]}}
    c = _container()
    sr.render_experience(c, EXPERIENCE_TPL, data)
    assert c.select("li.experience-detail") == []


def test_missing_required_list_raises_and_leaves_container():
    data = {"skills_section": {"title": "Skills", "skills": []}}   # no certificates
    c = _container()
    with pytest.raises(KeyError):
        sr.render_skills(c, SKILLS_TPL, data)
    assert str(c) == '<div id="c"></div>'


def test_header_social_links_and_optional_onclick():
    tpl = '<nav><span>{{ nav.name }}</span><div class="social-media"></div></nav>'
    data = {"nav": {"name": "Ming", "social": [
        {"href": "https://github.com/x", "icon": "fa-github"},
        {"href": "#", "icon": "fa-print", "onclick": "window.print()"},
    ]}}
    c = _container()
    sr.render_header(c, tpl, data)
    links = c.select(".social-media a.social-media-link")
    assert [a["href"] for a in links] == ["https://github.com/x", "#"]
    assert not links[0].has_attr("onclick")
    assert links[1]["onclick"] == "window.print()"


def test_personal_info_connections():
    tpl = '<div class="connection-group"></div><p>{{ personal_info.connections[0].text }}</p>'
    data = {"personal_info": {"connections": [{"icon": "fa-envelope", "text": "me@x.com"}]}}
    c = _container()
    sr.render_personal_info(c, tpl, data)
    assert c.select_one(".connection-group .connection").text.strip() == "me@x.com"
    assert c.p.text == "me@x.com"


def test_summary_accepts_single_string_and_bolds():
    tpl = '<div id="summary-text"></div>'
    data = {"summary_section": {"content": "six **years** of work"}}
    c = _container()
    sr.render_summary(c, tpl, data)
    items = c.select("p.summary-item")
    assert len(items) == 1
    assert items[0].strong.text == "years"


def test_about_me_paragraph_list():
    tpl = '<div id="about-me-text"></div>'
    data = {"about_me_section": {"paragraphs": ["one", "**two**"]}}
    c = _container()
    sr.render_about_me(c, tpl, data)
    paras = c.select("p.about-me-paragraph")
    assert [p.text for p in paras] == ["one", "two"]


def test_portfolio_award_and_images():
    tpl = '<div id="portfolio-list"></div>'
    data = {"portfolio_section": {"projects": [
        {"title": "P1", "award": "Gold", "description": "d", "link": "https://p1",
         "images": [{"src": "a.png", "alt": "a"}, {"src": "b.png", "alt": "b"}],
         "logo": {"src": "logo.png", "alt": "logo"}},
        {"title": "P2", "description": "d2", "link": "https://p2",
         "images": [], "logo": {"src": "l2.png", "alt": "l2"}},
    ]}}
    c = _container()
    sr.render_portfolio(c, tpl, data)
    first, second = c.select("#portfolio-list > div")
    assert first.select_one(".note").text == "Gold"
    assert [i["src"] for i in first.select("img.portfolio-img")] == ["./img/a.png", "./img/b.png"]
    assert first.select_one("img.portfolio-logo")["src"] == "./img/logo.png"
    assert second.select_one(".note") is None


def test_autobiography_languages_use_their_own_slot():
    data = {"autobiography_section": {"paragraphs_ch": ["中文"], "paragraphs_en": ["one", "two"]}}
    ch, en = _container(), _container()
    sr.render_autobiography_ch(ch, '<div id="autobio-ch-paragraphs"></div>', data)
    sr.render_autobiography_en(en, '<div id="autobio-en-paragraphs"></div>', data)
    assert [p.text for p in ch.select("p.description")] == ["中文"]
    assert [p.text for p in en.select("p.description-en")] == ["one", "two"]


def test_missing_slot_keeps_resolved_template():
    html = '<div class="x"></div>'
    assert sr.fill_slots(html, {"#nowhere": "<p>lost</p>"}) == html


def test_rendering_twice_is_identical():
    a, b = _container(), _container()
    sr.render_skills(a, SKILLS_TPL, SKILLS_DATA)
    sr.render_skills(b, SKILLS_TPL, SKILLS_DATA)
    assert str(a) == str(b)


def test_empty_section_is_present_and_fails_fast():
    c = _container()
    with pytest.raises(KeyError):
        sr.render_skills(c, SKILLS_TPL, {"skills_section": {}})
    assert str(c) == '<div id="c"></div>'


def test_missing_item_fields_render_empty_not_none():
    data = {"skills_section": {
        "skills": [{"items": ["x"]}],
        "certificates": {"items": [{"img_src": "c.png"}]},
    }}
    c = _container()
    sr.render_skills(c, SKILLS_TPL, data)
    assert "None" not in str(c)
    assert c.select_one(".skill-name").text == ""
    assert c.select_one("img.skill-img")["alt"] == ""
