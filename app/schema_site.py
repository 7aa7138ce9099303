# section registry, in render order: (name, data key, component file, container id)
SECTIONS = [
    ("header",       "nav",                   "_header.html",           "header-container"),
    ("personalInfo", "personal_info",         "_personal-info.html",    "personal-info-container"),
    ("summary",      "summary_section",       "_summary-content.html",  "summary-container"),
    ("aboutMe",      "about_me_section",      "_about-me.html",         "about-me-container"),
    ("experience",   "experience_section",    "_experience.html",       "experience-container"),
    ("skills",       "skills_section",        "_skills.html",           "skills-container"),
    ("portfolio",    "portfolio_section",     "_portfolio.html",        "portfolio-container"),
    ("autobioCh",    "autobiography_section", "_autobiography-ch.html", "autobiography-ch-container"),
    ("autobioEn",    "autobiography_section", "_autobiography-en.html", "autobiography-en-container"),
]

COMPONENT_FILES = {name: fname for name, _, fname, _ in SECTIONS}
CONTAINER_IDS = {name: cid for name, _, _, cid in SECTIONS}

# starter content document (empty lists – no placeholders)
SITE_SCHEMA = {
    "nav": {"name": "", "title": "", "social": []},
    "personal_info": {"name_ch": "", "name_en": "", "avatar": "", "connections": []},
    "summary_section": {"title": "", "content": []},
    "about_me_section": {"title": "", "paragraphs": []},
    "experience_section": {"title": "", "jobs": []},
    "skills_section": {"title": "", "skills": [], "certificates": {"title": "", "items": []}},
    "portfolio_section": {"title": "", "projects": []},
    "autobiography_section": {"title_ch": "", "title_en": "", "paragraphs_ch": [], "paragraphs_en": []},
}
