"""Streamlit UI for the job search assistant."""
from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path

import streamlit as st

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT))

from jobassist.agent import AssistantContext, build_context
from jobassist.errors import DocumentGenerationError
from jobassist.log import get_logger
from jobassist.models import JobPosting, JobPreferences, JobStatus, RemotePreference, Source

log = get_logger(__name__)

# ── Constants ────────────────────────────────────────────────────────────

SOURCE_COLORS: dict[str, str] = {
    Source.LINKEDIN.value: "#0077B5",
    Source.NAUKRIGULF.value: "#FF7A59",
}

SORT_LABELS: dict[str, str] = {
    "relevance": "Match score",
    "date": "Newest",
    "company": "Company",
}

_GLASS_CSS = """
<style>
[data-testid="stAppViewContainer"] {
    background: linear-gradient(135deg, #e8eaf6 0%, #f3e5f5 40%, #e0f2f1 100%);
}
[data-testid="stMetric"] {
    background: rgba(255,255,255,0.6);
    padding: 0.75rem 1rem;
    border-radius: 12px;
    border: 1px solid rgba(255,255,255,0.4);
    box-shadow: 0 4px 16px rgba(0,0,0,0.06);
}
[data-testid="stExpander"] {
    background: rgba(255,255,255,0.5);
    border-radius: 12px;
}
h1, h2, h3 {
    color: #1a1a2e;
}
</style>
"""

# ── Helpers ──────────────────────────────────────────────────────────────


@st.cache_resource
def _context() -> AssistantContext:
    """One context per server process; the scheduler thread lives here."""
    ctx = build_context()
    ctx.scraper.start(ctx.profile)
    return ctx


def _fmt_time(value) -> str:
    return value.strftime("%d %b %H:%M") if value else "—"


def _score_badge(score: int) -> str:
    if score >= 85:
        return f"🟢 {score}%"
    if score >= 60:
        return f"🟡 {score}%"
    return f"⚪ {score}%"


def _posting_card(ctx: AssistantContext, posting: JobPosting, key_prefix: str) -> None:
    label = f"{_score_badge(posting.match_score)}  **{posting.title}** — {posting.company}"
    with st.expander(label):
        c1, c2, c3 = st.columns(3)
        c1.markdown(f"📍 {posting.location}")
        c2.markdown(f"🏷️ {posting.category}")
        c3.markdown(f"🔗 [{posting.source.value}]({posting.url})")
        st.write(posting.description)
        if posting.requirements:
            st.markdown("**Requirements**")
            for req in posting.requirements:
                st.markdown(f"- {req}")

        st.caption(f"Status: {posting.status.value}")

        if st.button("Find contacts", key=f"{key_prefix}-contacts-{posting.id}"):
            with st.spinner("Looking up contacts…"):
                ctx.open_details(posting.id)
        if posting.contacts:
            st.markdown("**Contacts**")
            for c in posting.contacts:
                st.markdown(f"- [{c.name}]({c.profile_url}) — {c.position}")
        elif posting.status is not JobStatus.NEW:
            st.caption("No contacts found.")

        if posting.status is JobStatus.APPLIED:
            st.success("Applied")
            return
        cover = st.checkbox("Generate cover letter", value=True, key=f"{key_prefix}-cover-{posting.id}")
        if st.button("Apply", type="primary", key=f"{key_prefix}-apply-{posting.id}"):
            with st.spinner("Generating documents…"):
                try:
                    result = ctx.apply(posting.id, generate_cover=cover)
                except DocumentGenerationError as exc:
                    st.error(f"Application failed, please retry: {exc}")
                    return
            st.success(f"Application sent. Resume `{result.resume_id}`")
            st.rerun()


# ── Page: Dashboard ──────────────────────────────────────────────────────


def page_dashboard() -> None:
    ctx = _context()
    st.header("Dashboard")

    status = ctx.scraper.get_status()
    c1, c2, c3 = st.columns(3)
    c1.metric("Scraper", "Running" if status.is_running else "Stopped")
    c2.metric("Last run", _fmt_time(status.last_run_time))
    c3.metric("Next run", _fmt_time(status.next_run_time))

    if st.button("Refresh jobs now", type="primary", use_container_width=True):
        with st.status("Scraping LinkedIn and Naukrigulf…", expanded=False) as sw:
            result = ctx.scraper.scrape_now(ctx.profile)
            sw.update(label=f"Done — {result.new_jobs} new job(s) found", state="complete")

    stats = ctx.board.stats()
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Total jobs", stats.total_jobs)
    c2.metric("New", stats.new_jobs)
    c3.metric("Applied", stats.applied_jobs)
    c4.metric("Interviews", stats.interviews)

    if stats.total_jobs:
        import pandas as pd

        left, right = st.columns(2)
        with left:
            st.subheader("Jobs by source")
            df = pd.DataFrame(
                {"jobs": list(stats.jobs_by_source.values())},
                index=list(stats.jobs_by_source.keys()),
            )
            st.bar_chart(df)
        with right:
            st.subheader("Jobs by category")
            df = pd.DataFrame(
                {"jobs": list(stats.jobs_by_category.values())},
                index=list(stats.jobs_by_category.keys()),
            )
            st.bar_chart(df)

    st.divider()
    st.subheader("Top matches")
    top = [p for p in ctx.board.search(sort_by="relevance") if p.match_score >= 85]
    if not top:
        st.info("No high-scoring matches yet. Refresh to search again.")
    for posting in top[:5]:
        _posting_card(ctx, posting, "top")


# ── Page: Jobs ───────────────────────────────────────────────────────────


def page_jobs() -> None:
    ctx = _context()
    st.header("Job Listings")

    term = st.text_input("Search", placeholder="Title, company or description")
    c1, c2, c3 = st.columns(3)
    with c1:
        categories = st.multiselect("Category", ctx.board.categories())
    with c2:
        sources = st.multiselect("Source", [s.value for s in Source])
    with c3:
        sort_by = st.selectbox("Sort by", list(SORT_LABELS), format_func=SORT_LABELS.get)

    jobs = ctx.board.search(term, categories=categories, sources=sources, sort_by=sort_by)
    if not jobs:
        st.info("We couldn't find any jobs matching your criteria. Try adjusting the filters.")
        return
    st.caption(f"{len(jobs)} job(s)")
    for posting in jobs:
        _posting_card(ctx, posting, "jobs")


# ── Page: Applications ───────────────────────────────────────────────────


def page_applications() -> None:
    ctx = _context()
    st.header("Applications")

    tracked = [p for p in ctx.board.postings() if p.status not in (JobStatus.NEW, JobStatus.VIEWED)]
    if not tracked:
        st.info("No applications yet.")
        return

    import pandas as pd

    df = pd.DataFrame(
        [
            {
                "id": p.id,
                "title": p.title,
                "company": p.company,
                "score": p.match_score,
                "status": p.status.value,
                "url": p.url,
            }
            for p in tracked
        ]
    )
    st.dataframe(
        df,
        use_container_width=True,
        column_config={
            "url": st.column_config.LinkColumn("Link"),
            "score": st.column_config.ProgressColumn("Score", min_value=0, max_value=100, format="%d"),
        },
        hide_index=True,
    )

    st.subheader("Update status")
    with st.form("status_form"):
        posting_id = st.selectbox(
            "Application",
            [p.id for p in tracked],
            format_func=lambda pid: f"{ctx.board.get(pid).title} — {ctx.board.get(pid).company}",
        )
        status = st.selectbox("Status", [s.value for s in JobStatus], index=2)
        if st.form_submit_button("Save", type="primary"):
            ctx.board.update_status(posting_id, status)
            st.success("Status updated")
            st.rerun()


# ── Page: Profile ────────────────────────────────────────────────────────


def _split(text: str) -> list[str]:
    return [item.strip() for item in text.split(",") if item.strip()]


def _save(ctx: AssistantContext, profile, message: str) -> None:
    ctx.save_profile(profile)
    st.success(message)
    st.rerun()


def page_profile() -> None:
    ctx = _context()
    profile = ctx.profile
    st.header("Profile")

    with st.form("details_form"):
        c1, c2 = st.columns(2)
        name = c1.text_input("Name", profile.name)
        email = c2.text_input("Email", profile.email)
        linkedin = c1.text_input("LinkedIn", profile.linkedin_profile)
        resume_url = c2.text_input("Resume URL", profile.resume_url)
        if st.form_submit_button("Save details"):
            _save(
                ctx,
                replace(profile, name=name.strip(), email=email.strip(),
                        linkedin_profile=linkedin.strip(), resume_url=resume_url.strip()),
                "Profile saved",
            )

    st.subheader("Skills")
    st.write(", ".join(profile.skills) or "—")
    c1, c2 = st.columns(2)
    with c1, st.form("skill_form", clear_on_submit=True):
        new_skill = st.text_input("Add skill")
        if st.form_submit_button("Add"):
            if profile.add_skill(new_skill):
                _save(ctx, profile, f"Added {new_skill}")
            else:
                st.warning("Skill is empty or already listed.")
    with c2, st.form("remove_skill_form"):
        doomed = st.multiselect("Remove skills", profile.skills)
        if st.form_submit_button("Remove") and doomed:
            for skill in doomed:
                profile.remove_skill(skill)
            _save(ctx, profile, f"Removed {len(doomed)} skill(s)")

    st.subheader("Experience")
    for exp in profile.experience:
        end = exp.end_date or "present"
        with st.expander(f"{exp.title} — {exp.company} ({exp.start_date} → {end})"):
            st.write(exp.description)
            st.caption(", ".join(exp.skills))

    st.subheader("Education")
    for edu in profile.education:
        st.markdown(f"- **{edu.degree}**, {edu.institution} ({edu.graduation_date})")

    prefs = profile.job_preferences
    st.subheader("Preferences")
    with st.form("preferences_form"):
        roles = st.text_input("Roles (comma-separated)", ", ".join(prefs.roles))
        locations = st.text_input("Locations (comma-separated)", ", ".join(prefs.locations))
        options = [p.value for p in RemotePreference]
        remote = st.selectbox("Remote", options, index=options.index(prefs.remote_preference.value))
        min_salary = st.number_input("Minimum salary", min_value=0, value=prefs.min_salary, step=1000)
        if st.form_submit_button("Save preferences"):
            try:
                new_prefs = JobPreferences(
                    roles=_split(roles),
                    locations=_split(locations),
                    remote_preference=remote,
                    min_salary=int(min_salary),
                )
            except ValueError as exc:
                st.error(str(exc))
            else:
                _save(ctx, replace(profile, job_preferences=new_prefs), "Preferences saved")


# ── Page: Settings ───────────────────────────────────────────────────────


def page_settings() -> None:
    ctx = _context()
    st.header("Settings")

    s = ctx.settings
    st.markdown(f"- Scrape interval: **{s.scrape_interval_hours:g} h** (`SCRAPE_INTERVAL_HOURS`)")
    st.markdown(f"- Contacts per job: **{s.max_contacts}** (`MAX_CONTACTS`)")
    st.markdown(f"- Simulated latency: **{'on' if s.simulate_latency else 'off'}**")
    st.markdown(f"- Google Sheet: `{s.google_sheet_id or 'not set'}`")

    st.divider()
    c1, c2 = st.columns(2)
    if c1.button("Start scraper", use_container_width=True, disabled=ctx.scraper.is_running):
        ctx.scraper.start(ctx.profile)
        st.rerun()
    if c2.button("Stop scraper", use_container_width=True, disabled=not ctx.scraper.is_running):
        ctx.scraper.stop()
        st.rerun()


# ── Main ─────────────────────────────────────────────────────────────────


def _inject_css() -> None:
    st.markdown(_GLASS_CSS, unsafe_allow_html=True)


def _sidebar_status() -> None:
    with st.sidebar:
        st.divider()
        status = _context().scraper.get_status()
        st.markdown("**Scraper**")
        st.markdown(f"{'✅' if status.is_running else '⬜'}  {'running' if status.is_running else 'stopped'}")
        st.caption(f"Last run: {_fmt_time(status.last_run_time)}")


def _wrap(page):
    def run() -> None:
        _inject_css()
        _sidebar_status()
        page()

    run.__name__ = page.__name__
    return run


pages = [
    st.Page(_wrap(page_dashboard), title="Dashboard", icon="🚀", url_path="dashboard", default=True),
    st.Page(_wrap(page_jobs), title="Jobs", icon="💼", url_path="jobs"),
    st.Page(_wrap(page_applications), title="Applications", icon="📋", url_path="applications"),
    st.Page(_wrap(page_profile), title="Profile", icon="👤", url_path="profile"),
    st.Page(_wrap(page_settings), title="Settings", icon="⚙️", url_path="settings"),
]

nav = st.navigation(pages)
nav.run()
