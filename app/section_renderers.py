"""
Section renderers: template fragment + content document → container markup.

Every renderer has the same shape:
  1. skip silently when the container or the section's data is missing
  2. substitute {{placeholders}} in the fragment
  3. build the section's repeated markup from app/templates/*.html and put it
     into the fragment's named slot
  4. replace the container's children with the result

A required list missing inside a present section raises out of the renderer;
page_builder decides what to do about it.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Mapping

from bs4 import BeautifulSoup, Tag
from jinja2 import Environment, FileSystemLoader

import config
from cleaner import img_src, list_or_empty, rich_paragraphs
from template_resolver import render

logger = logging.getLogger(__name__)

# content is trusted and may carry its own markup; None prints as ""
env = Environment(loader=FileSystemLoader(Path(__file__).parent / "templates"),
                  autoescape=False,
                  finalize=lambda v: "" if v is None else v)

Renderer = Callable[[Tag | None, str, Mapping[str, Any]], bool]


# ───────────────────────────────────────── slots ──
def fill_slots(html: str, slots: Dict[str, str]) -> str:
    """Replace the children of each slot (CSS selector → markup) in *html*."""
    soup = BeautifulSoup(html, "html.parser")
    for selector, fragment in slots.items():
        slot = soup.select_one(selector)
        if slot is None:
            logger.warning("Slot %r not found in template; left unfilled", selector)
            continue
        slot.clear()
        for node in list(BeautifulSoup(fragment, "html.parser").contents):
            slot.append(node)
    return str(soup)


def assign(container: Tag, html: str) -> None:
    container.clear()
    for node in list(BeautifulSoup(html, "html.parser").contents):
        container.append(node)


def _items(template_name: str, **ctx: Any) -> str:
    return env.get_template(template_name).render(**ctx)


def _absent(container: Tag | None, data: Mapping[str, Any] | None, key: str) -> bool:
    if container is None or not data or data.get(key) is None:
        logger.debug("Skipping %s: no container or no data", key)
        return True
    return False


def _finish(container: Tag, template: str, data: Mapping[str, Any], slots: Dict[str, str]) -> bool:
    assign(container, fill_slots(render(template, data), slots))
    return True


def _img(name: Any) -> str:
    return img_src(config.IMG_PREFIX, name or "")


# ───────────────────────────────────────── renderers ──
def render_header(container, template, data) -> bool:
    if _absent(container, data, "nav"):
        return False
    links = _items("social_links.html", social=data["nav"]["social"])
    return _finish(container, template, data, {".social-media": links})


def render_personal_info(container, template, data) -> bool:
    if _absent(container, data, "personal_info"):
        return False
    html = _items("connections.html", connections=data["personal_info"]["connections"])
    return _finish(container, template, data, {".connection-group": html})


def render_summary(container, template, data) -> bool:
    if _absent(container, data, "summary_section"):
        return False
    html = _items("paragraphs.html",
                  paragraphs=rich_paragraphs(data["summary_section"]["content"]),
                  css_class="summary-item")
    return _finish(container, template, data, {"#summary-text": html})


def render_about_me(container, template, data) -> bool:
    if _absent(container, data, "about_me_section"):
        return False
    html = _items("paragraphs.html",
                  paragraphs=rich_paragraphs(data["about_me_section"]["paragraphs"]),
                  css_class="about-me-paragraph")
    return _finish(container, template, data, {"#about-me-text": html})


def render_experience(container, template, data) -> bool:
    if _absent(container, data, "experience_section"):
        return False
    jobs = [dict(job, details=list_or_empty(job.get("description")))
            for job in data["experience_section"]["jobs"]]
    html = _items("jobs.html", jobs=jobs)
    return _finish(container, template, data, {"#experience-list": html})


def render_skills(container, template, data) -> bool:
    if _absent(container, data, "skills_section"):
        return False
    section = data["skills_section"]
    skills = [{"name": s.get("name"), "info": s.get("info"), "entries": s["items"]}
              for s in section["skills"]]
    certs = [{"description": c.get("description"), "alt": c.get("alt"), "src": _img(c.get("img_src"))}
             for c in section["certificates"]["items"]]
    return _finish(container, template, data, {
        "#skills-list": _items("skills.html", skills=skills),
        "#certificates-list": _items("certificates.html", certificates=certs),
    })


def render_portfolio(container, template, data) -> bool:
    if _absent(container, data, "portfolio_section"):
        return False
    projects = []
    for p in data["portfolio_section"]["projects"]:
        logo = p["logo"]
        projects.append(dict(
            p,
            images=[{"src": _img(i.get("src")), "alt": i.get("alt")} for i in p["images"]],
            logo={"src": _img(logo.get("src")), "alt": logo.get("alt")},
        ))
    html = _items("projects.html", projects=projects)
    return _finish(container, template, data, {"#portfolio-list": html})


def _autobiography(container, template, data, lang: str, css_class: str) -> bool:
    if _absent(container, data, "autobiography_section"):
        return False
    html = _items("paragraphs.html",
                  paragraphs=data["autobiography_section"][f"paragraphs_{lang}"],
                  css_class=css_class)
    return _finish(container, template, data, {f"#autobio-{lang}-paragraphs": html})


def render_autobiography_ch(container, template, data) -> bool:
    return _autobiography(container, template, data, "ch", "description")


def render_autobiography_en(container, template, data) -> bool:
    return _autobiography(container, template, data, "en", "description-en")


# keyed like schema_site.SECTIONS
RENDERERS: Dict[str, Renderer] = {
    "header": render_header,
    "personalInfo": render_personal_info,
    "summary": render_summary,
    "aboutMe": render_about_me,
    "experience": render_experience,
    "skills": render_skills,
    "portfolio": render_portfolio,
    "autobioCh": render_autobiography_ch,
    "autobioEn": render_autobiography_en,
}
