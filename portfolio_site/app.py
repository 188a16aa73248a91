# app.py — Home (single scroll) + project detail subpages
# ----------------------------------------------------------------
# Sections: home (particle hero) · about · projects · skills · resume · contact
# Run: streamlit run portfolio_site/app.py
#      (contact endpoint: uvicorn contact_api.main:app --port 8000)
# ----------------------------------------------------------------

from __future__ import annotations
import logging
import math
import json
from html import escape
from typing import Dict, Optional

import numpy as np
import streamlit as st
import matplotlib.pyplot as plt
from streamlit.components.v1 import html as st_html

from portfolio_site.config import (
    ASSETS, CONTACT_ENDPOINT, GA_MEASUREMENT_ID, HERO_WIDTH, HERO_HEIGHT, HERO_FPS,
    ANIMATE_HERO, SHOW_RESUME_PREVIEW, configure_logging,
)
from portfolio_site.content import (
    SITE, PROFILE, SECTIONS, PLATFORMS, APPROACH, PROJECTS, SKILLS, SKILL_ICONS,
    PROJECT_TABS, ProjectStatus, Project, filter_projects, get_project,
)
from widgets.analytics import Analytics, gtag_bridge, inject_gtag
from widgets.contact_form import contact_form
from widgets.particles import Viewport, play_hero
from widgets.visibility import IntersectionEntry, SectionVisibilityTracker, scroll_spy

configure_logging()
logger = logging.getLogger(__name__)

# -----------------------------
# Page config + CSS
# -----------------------------
st.set_page_config(
    page_title=SITE["title"],
    page_icon="⛓️",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown("""
<style>
/* Hero heading + subheading */
.hero-badge {
  display: inline-block;
  padding: 4px 12px;
  border-radius: 999px;
  border: 1px solid rgba(100,217,232,.45);
  font-size: .85rem;
  margin-bottom: 10px;
}
.hero {
  font-weight: 800;
  line-height: 1.1;
  margin: 0 0 6px;
  letter-spacing: .2px;
  font-size: clamp(28px, 3.6vw, 52px);
}
.hero-sub {
  font-size: clamp(15px, 1.2vw, 18px);
  line-height: 1.6;
  opacity: .9;
  max-width: 62ch;
}
@media (max-width: 700px) {
  .hero { font-size: 26px; }
  .hero-sub { font-size: 16px; }
}

.section-title { font-size: 1.9rem; font-weight: 800; margin: 18px 0 4px; }
.section-lead { opacity: .75; margin-bottom: 14px; }

/* project cards */
.project-title { font-weight: 700; font-size: 1.1rem; margin: 8px 0 4px; }
.status { font-size: .75rem; padding: 2px 8px; border-radius: 999px; margin-left: 6px; }
.status-completed { background: rgba(34,197,94,.15); color: #22c55e; }
.status-live { background: rgba(100,217,232,.15); color: #64d9e8; }
.status-dev { background: rgba(234,179,8,.15); color: #eab308; }
.badge {
  display: inline-block;
  padding: 2px 10px;
  margin: 0 6px 6px 0;
  border-radius: 999px;
  font-size: .78rem;
  border: 1px solid rgba(255,255,255,.15);
}
.blurb { font-size: .96rem; line-height: 1.55; opacity: .95; }
.footer { opacity: .6; font-size: .85rem; text-align: center; margin-top: 24px; }
</style>
""", unsafe_allow_html=True)

STATUS_CLASS = {
    ProjectStatus.COMPLETED: "status-completed",
    ProjectStatus.LIVE: "status-live",
    ProjectStatus.IN_DEVELOPMENT: "status-dev",
}

HERO_SIZES = {"Wide": (HERO_WIDTH, HERO_HEIGHT), "Compact": (800, 420)}

# -----------------------------
# Session-scoped objects
# -----------------------------
def get_analytics() -> Analytics:
    if "analytics" not in st.session_state:
        tag = gtag_bridge() if GA_MEASUREMENT_ID else None
        st.session_state["analytics"] = Analytics(tag=tag, measurement_id=GA_MEASUREMENT_ID)
    return st.session_state["analytics"]

def get_tracker() -> SectionVisibilityTracker:
    if "tracker" not in st.session_state:
        tracker = SectionVisibilityTracker(threshold=0.5, initial=SECTIONS[0])
        tracker.observe(SECTIONS)
        st.session_state["tracker"] = tracker
    return st.session_state["tracker"]

def get_viewport() -> Viewport:
    if "viewport" not in st.session_state:
        st.session_state["viewport"] = Viewport(HERO_WIDTH, HERO_HEIGHT)
    return st.session_state["viewport"]

# -----------------------------
# Helpers (routing, rerun, scroll)
# -----------------------------
def rerun():
    st.rerun()

def get_view() -> str:
    v = st.session_state.get("view", "home")
    return v if v in {"home", "case"} else "home"

def set_view(v: str):
    st.session_state["view"] = v

def get_case_id() -> Optional[int]:
    return st.session_state.get("case")

def set_case(project_id: Optional[int]):
    if project_id is None:
        st.session_state.pop("case", None)
    else:
        st.session_state["case"] = project_id

def set_pending_jump(anchor_id: str):
    st.session_state["pending_jump"] = anchor_id

def consume_pending_jump() -> Optional[str]:
    return st.session_state.pop("pending_jump", None)

ANCHOR_PREFIX = "sec-"

def anchor(section: str) -> str:
    return f"{ANCHOR_PREFIX}{section}"

def go_to_section(section: str):
    """Scroll target + nav highlight: the section lands fully in view."""
    get_tracker().handle([IntersectionEntry(section, 1.0)])
    get_analytics().track_navigation(section)
    set_view("home"); set_case(None)
    set_pending_jump(anchor(section))

def open_project(project: Project):
    get_analytics().track_project_view(project.title)
    set_view("case"); set_case(project.id)

def follow_project_link(project: Project, link_type: str):
    """Button callback: track the click, open the URL on the next render."""
    get_analytics().track_project_click(project.title, link_type)
    st.session_state["pending_open"] = project.github if link_type == "github" else project.demo

def consume_pending_open() -> Optional[str]:
    return st.session_state.pop("pending_open", None)

def js_open_in_new_tab(url: str):
    st_html(f"<script>window.parent.open({json.dumps(url)}, '_blank', 'noopener');</script>", height=0)

def project_link_buttons(p: Project, key_prefix: str, cols):
    for col, (label, link_type) in zip(cols, [("Code", "github"), ("Live Demo", "demo")]):
        col.button(label, key=f"{key_prefix}_{link_type}_{p.id}", use_container_width=True,
                   on_click=follow_project_link, args=(p, link_type))

def js_scroll_to_anchor(anchor_id: str):
    st_html(
        f"""
<script>
(function(){{
  const root = window.parent.document;
  const targetId = "{anchor_id}";
  function scrollNow() {{
    const el = root.getElementById(targetId);
    if (el) {{
      el.scrollIntoView({{behavior:'smooth', block:'start'}});
      return true;
    }}
    return false;
  }}
  if (!scrollNow()) {{
    const obs = new MutationObserver(() => {{ if (scrollNow()) obs.disconnect(); }});
    obs.observe(root, {{childList:true, subtree:true}});
    setTimeout(() => {{ scrollNow(); obs.disconnect(); }}, 400);
  }}
}})();
</script>
""",
        height=0,
    )

def disable_scroll_restoration():
    st_html("""<script>try { window.parent.history.scrollRestoration = 'manual'; } catch(e) {}</script>""", height=0)

def enforce_case_top():
    st_html(
        """
<script>
(function(){
  const rootWin = window.parent;
  function toTop(){
    try { rootWin.scrollTo({top:0, left:0, behavior:'auto'}); } catch(e){}
    try {
      const scroller = rootWin.document.querySelector('section.main div.block-container');
      if (scroller) scroller.scrollTo({top:0, left:0, behavior:'auto'});
    } catch(e){}
  }
  toTop();
  [60, 200, 500, 900].forEach(t => setTimeout(toTop, t));
})();
</script>
""",
        height=0,
    )

def inject_head_meta():
    """Description / keywords / Open Graph tags; Streamlit only sets <title>."""
    tags = {
        "description": SITE["description"],
        "keywords": ", ".join(SITE["keywords"]),
        "author": SITE["author"],
        "og:title": SITE["title"],
        "og:description": SITE["description"],
        "og:url": SITE["url"],
        "og:site_name": SITE["site_name"],
        "og:image": SITE["url"] + SITE["og_image"],
        "og:locale": SITE["locale"],
        "og:type": "website",
        "twitter:card": "summary_large_image",
        "twitter:creator": SITE["twitter_creator"],
    }
    rows = json.dumps(list(tags.items()))
    st_html(
        f"""
<script>
(function(){{
  const head = window.parent.document.head;
  {rows}.forEach(function(kv){{
    const attr = kv[0].indexOf(':') > -1 ? 'property' : 'name';
    let m = head.querySelector('meta[' + attr + '="' + kv[0] + '"]');
    if (!m) {{ m = window.parent.document.createElement('meta'); m.setAttribute(attr, kv[0]); head.appendChild(m); }}
    m.setAttribute('content', kv[1]);
  }});
}})();
</script>
""",
        height=0,
    )

# -----------------------------
# Viz helpers (radar)
# -----------------------------
def is_dark_theme() -> bool:
    try:
        base = (st.get_option("theme.base") or "light").lower()
    except Exception:
        base = "light"
    return base == "dark"

def radar_chart(title: str, scores: Dict[str, float], size_px: int = 560, dark: bool | None = None, title_y: float = 1.18):
    if dark is None: dark = is_dark_theme()
    labels = list(scores.keys()); values = list(scores.values())
    angles = np.linspace(0, 2*math.pi, len(labels), endpoint=False).tolist()
    angles += angles[:1]; v = values + values[:1]
    dpi = 200
    fig = plt.figure(figsize=(size_px/dpi, size_px/dpi), dpi=dpi); ax = plt.subplot(111, polar=True)
    fig.patch.set_alpha(0.0); ax.set_facecolor("none"); ax.set_theta_offset(math.pi/2); ax.set_theta_direction(-1)
    label_color = "#ffffff" if dark else "#111827"; tick_color = "#e5e7eb" if dark else "#4b5563"; grid_color = "#9ca3af"
    plt.xticks(angles[:-1], labels, fontsize=6, color=label_color)
    ax.tick_params(pad=6, colors=tick_color); ax.set_ylim(0, 100); ax.set_yticks([20,40,60,80,100])
    ax.set_yticklabels([20,40,60,80,100], fontsize=5, color=tick_color)
    ax.yaxis.grid(True, linestyle="dotted", alpha=0.25, color=grid_color)
    ax.xaxis.grid(True, linestyle="dotted", alpha=0.25, color=grid_color)
    line_color = (100/255, 217/255, 232/255, 0.95) if dark else (0.1, 0.4, 0.7, 0.95)
    for lw, a in [(8,0.06),(6,0.08),(4,0.10)]: ax.plot(angles, v, linewidth=lw, color=(line_color[0], line_color[1], line_color[2], a))
    ax.plot(angles, v, linewidth=1.5, color=line_color); ax.fill(angles, v, alpha=0.10, color=line_color)
    ax.set_title(title, y=title_y, fontsize=9, color=line_color)
    st.pyplot(fig, use_container_width=False, transparent=True, bbox_inches="tight")
    plt.close(fig)

def status_badge(status: ProjectStatus) -> str:
    return f"<span class='status {STATUS_CLASS[status]}'>{status.value}</span>"

def tag_badges(tags) -> str:
    return "".join(f"<span class='badge'>{escape(t)}</span>" for t in tags)

def project_image(project: Project, width_px: int = 600, height_px: int = 360):
    path = ASSETS / project.image
    if path.exists():
        st.image(str(path), use_container_width=True)
    else:
        st.image(f"https://picsum.photos/seed/project-{project.id}/{width_px}/{height_px}", use_container_width=True)

@st.cache_data(show_spinner=False)
def _page_jpeg(pdf_path_str: str, page_index: int, dpi: int, quality: int) -> bytes:
    import fitz  # PyMuPDF
    doc = fitz.open(pdf_path_str)
    try:
        mat = fitz.Matrix(dpi/72, dpi/72)
        page = doc.load_page(page_index)
        pix = page.get_pixmap(matrix=mat, colorspace=fitz.csRGB, alpha=False)
        return pix.tobytes("jpeg", jpg_quality=quality)
    finally:
        doc.close()

# -----------------------------
# Sidebar
# -----------------------------
def render_sidebar():
    tracker = get_tracker()
    view = get_view()

    if view == "home":
        with st.sidebar:
            report = scroll_spy(SECTIONS, anchor_prefix=ANCHOR_PREFIX, threshold=tracker.threshold)
        if report:
            tracker.scroll(*report)

    st.sidebar.title("Navigate")
    for section in SECTIONS:
        active = view == "home" and tracker.active == section
        if st.sidebar.button(section.capitalize(), key=f"nav_{section}",
                             type="primary" if active else "secondary", use_container_width=True):
            go_to_section(section); rerun()

    st.sidebar.markdown("---")
    st.sidebar.subheader("Projects")
    for p in PROJECTS:
        if st.sidebar.button(f"• {p.title}", key=f"side_{p.id}"):
            open_project(p); rerun()

    st.sidebar.markdown("---")
    st.sidebar.subheader("Display")
    animate = st.sidebar.toggle("Animate background", value=ANIMATE_HERO, key="animate_hero")
    size = st.sidebar.selectbox("Hero canvas", list(HERO_SIZES), key="hero_size")
    get_viewport().resize(*HERO_SIZES[size])
    return animate

# -----------------------------
# HOME (single page)
# -----------------------------
def resume_download(key: str, label: str = "⬇️  Download Resume"):
    path = ASSETS / PROFILE["resume"]
    if path.exists():
        st.download_button(
            label, data=path.read_bytes(), file_name=PROFILE["resume_download_name"],
            mime="application/pdf", key=key, use_container_width=True,
            on_click=get_analytics().track_navigation, args=("resume_download",),
        )
    else:
        st.error(f"Missing {path.relative_to(ASSETS.parent)}")

def render_home():
    """Render every section; returns the empty hero slot for the particle loop."""
    disable_scroll_restoration()
    jump_id = consume_pending_jump()
    if jump_id: js_scroll_to_anchor(jump_id)

    # Home / hero
    st.markdown(f"<div id='{anchor('home')}' class='section'></div>", unsafe_allow_html=True)
    hero_slot = st.empty()
    st.markdown(f"<span class='hero-badge'>{PROFILE['badge']}</span>", unsafe_allow_html=True)
    st.markdown(f"<div class='hero'>{PROFILE['headline']}</div>", unsafe_allow_html=True)
    st.markdown(f"<div class='hero-sub'>{PROFILE['tagline']}</div>", unsafe_allow_html=True)
    b1, b2, b3, _ = st.columns([1, 1, 1, 2])
    with b1:
        if st.button("View My Work →", type="primary", use_container_width=True):
            go_to_section("projects"); rerun()
    with b2:
        resume_download("hero_resume")
    with b3:
        if st.button("Contact Me", use_container_width=True):
            go_to_section("contact"); rerun()
    st.markdown(" · ".join(f"[{name}]({url})" for name, url in PROFILE["links"].items()))

    # About
    st.markdown("---")
    st.markdown(f"<div id='{anchor('about')}' class='section'></div>", unsafe_allow_html=True)
    st.markdown('<div class="section-title">About Me</div>', unsafe_allow_html=True)
    st.markdown(f'<div class="section-lead">{PROFILE["about_lead"]}</div>', unsafe_allow_html=True)
    col_img, col_txt = st.columns([1, 1.6], vertical_alignment="center")
    with col_img:
        portrait_path = ASSETS / PROFILE["portrait"]
        if portrait_path.exists(): st.image(str(portrait_path), width=320)
        else: st.image("https://picsum.photos/seed/portrait/400/400", width=320)
    with col_txt:
        st.subheader(f"Hi, I'm {PROFILE['first_name']}, a {PROFILE['role']}")
        for para in PROFILE["bio"]:
            st.write(para)
        m1, m2, m3 = st.columns(3)
        m1.metric("Location", PROFILE["location"])
        m2.metric("Experience", PROFILE["experience"])
        m3.metric("Projects", str(len(PROJECTS)))

    # Projects
    st.markdown("---")
    st.markdown(f"<div id='{anchor('projects')}' class='section'></div>", unsafe_allow_html=True)
    st.markdown('<div class="section-title">Featured Projects</div>', unsafe_allow_html=True)
    st.markdown('<div class="section-lead">Explore my blockchain projects spanning DeFi, NFTs, and '
                'decentralized infrastructure</div>', unsafe_allow_html=True)
    tabs = st.tabs([label for _, label in PROJECT_TABS])
    for tab, (value, _) in zip(tabs, PROJECT_TABS):
        with tab:
            shown = filter_projects(PROJECTS, value)
            if not shown:
                st.info("No projects in this category yet.")
            cols = st.columns(2)
            for i, p in enumerate(shown):
                with cols[i % 2]:
                    project_card(p, key_prefix=f"tab_{value}")

    # Skills
    st.markdown("---")
    st.markdown(f"<div id='{anchor('skills')}' class='section'></div>", unsafe_allow_html=True)
    st.markdown('<div class="section-title">Skills & Expertise</div>', unsafe_allow_html=True)
    st.markdown('<div class="section-lead">Technical expertise in blockchain development and related '
                'technologies</div>', unsafe_allow_html=True)
    c_bars, c_radar = st.columns([1.2, 1])
    with c_bars:
        for skill in SKILLS:
            st.markdown(f"{SKILL_ICONS.get(skill.icon, '•')} **{skill.name}** · {skill.level}%")
            st.progress(skill.level)
    with c_radar:
        radar_chart("Skill Radar", {s.name: s.level for s in SKILLS})
        st.subheader("Blockchain Platforms")
        st.markdown(tag_badges(PLATFORMS), unsafe_allow_html=True)
        st.subheader("Development Approach")
        st.markdown("\n".join(f"- {item}" for item in APPROACH))

    # Resume
    st.markdown("---")
    st.markdown(f"<div id='{anchor('resume')}' class='section'></div>", unsafe_allow_html=True)
    st.markdown('<div class="section-title">Resume</div>', unsafe_allow_html=True)
    st.markdown('<div class="section-lead">Download my comprehensive resume to learn more about my '
                'experience and qualifications</div>', unsafe_allow_html=True)
    cL, cR = st.columns([1, 1.4])
    with cL:
        st.write(f"**{PROFILE['first_name']} {PROFILE['last_name']}** — {PROFILE['role']}")
        st.write(f"📧 {PROFILE['email']}")
        st.write(f"📍 {PROFILE['location']}")
        st.write(f"💼 {PROFILE['experience']} Experience")
        resume_download("resume_section")
    with cR:
        pdf_path = ASSETS / PROFILE["resume"]
        if SHOW_RESUME_PREVIEW and pdf_path.exists():
            st.image(_page_jpeg(str(pdf_path), 0, 105, 70), caption="Page 1", use_container_width=True)

    # Contact
    st.markdown("---")
    st.markdown(f"<div id='{anchor('contact')}' class='section'></div>", unsafe_allow_html=True)
    st.markdown('<div class="section-title">Get In Touch</div>', unsafe_allow_html=True)
    cInfo, cForm = st.columns([1, 1.2])
    with cInfo:
        st.subheader("Contact Information")
        st.write("Feel free to reach out through the contact form or via the contact details below. "
                 "I'm always open to discussing new projects and opportunities.")
        st.write(f"**Email:** {PROFILE['email']}")
        st.write(f"**Location:** {PROFILE['location']}")
        st.subheader("Connect with me")
        for name, url in PROFILE["links"].items():
            st.markdown(f"- [{name}]({url})")
    with cForm:
        st.subheader("Send a Message")
        contact_form(CONTACT_ENDPOINT, get_analytics())

    st.markdown(
        f"<div class='footer'>© {PROFILE['first_name']} {PROFILE['last_name']}. All rights reserved.</div>",
        unsafe_allow_html=True,
    )
    return hero_slot

def project_card(p: Project, key_prefix: str):
    with st.container(border=True):
        project_image(p)
        st.markdown(f"<div class='project-title'>{escape(p.title)}{status_badge(p.status)}</div>", unsafe_allow_html=True)
        st.markdown(f"<div class='blurb'>{escape(p.description)}</div>", unsafe_allow_html=True)
        st.markdown(tag_badges(p.tags), unsafe_allow_html=True)
        st.markdown("**Key Features**  \n" + "  \n".join(f"• {f}" for f in p.features))
        l1, l2, l3 = st.columns(3)
        project_link_buttons(p, key_prefix, (l1, l2))
        if l3.button("Details", key=f"{key_prefix}_open_{p.id}", use_container_width=True):
            open_project(p); rerun()

# -----------------------------
# CASE (project detail)
# -----------------------------
def render_case(project_id: int):
    disable_scroll_restoration()
    enforce_case_top()
    item = get_project(project_id)
    if not item:
        logger.warning("unknown project id: %s", project_id)
        st.error("Project not found.")
        if st.button("← Back to Home"):
            set_view("home"); set_case(None); rerun()
        return

    cols = st.columns([1.2, 1])
    with cols[0]:
        st.markdown(f"<h1>{escape(item.title)} {status_badge(item.status)}</h1>", unsafe_allow_html=True)
        st.markdown(f"<div class='blurb'>{escape(item.description)}</div>", unsafe_allow_html=True)
        st.markdown("**Stack**")
        st.markdown(tag_badges(item.tags), unsafe_allow_html=True)
        categories = item.category if isinstance(item.category, tuple) else (item.category,)
        st.caption("Category: " + ", ".join(categories))
    with cols[1]:
        project_image(item, 900, 540)
    st.markdown("---")

    st.subheader("Key Features")
    st.markdown("\n".join(f"- {f}" for f in item.features))
    st.subheader("Links")
    project_link_buttons(item, "case", st.columns([1, 1, 2])[:2])

    st.markdown("---")
    c1, c2 = st.columns([1, 1])
    with c1:
        if st.button("← Back to Home", use_container_width=True):
            go_to_section("projects"); rerun()
    with c2:
        ids = [p.id for p in PROJECTS]
        nxt = get_project(ids[(ids.index(project_id) + 1) % len(ids)])
        if st.button(f"Next: {nxt.title} →", use_container_width=True):
            open_project(nxt); rerun()

# -----------------------------
# Dispatch
# -----------------------------
inject_head_meta()
if GA_MEASUREMENT_ID:
    inject_gtag(GA_MEASUREMENT_ID)
if not st.session_state.get("page_view_tracked"):
    get_analytics().track_page_view("/")
    st.session_state["page_view_tracked"] = True
open_url = consume_pending_open()
if open_url:
    js_open_in_new_tab(open_url)

animate = render_sidebar()

if get_view() == "home":
    hero_slot = render_home()
    # last: the particle loop holds the script until the next rerun
    play_hero(hero_slot, get_viewport(), animate=animate, fps=HERO_FPS)
else:
    render_case(get_case_id() or PROJECTS[0].id)
