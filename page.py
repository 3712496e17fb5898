"""
HTML rendering for the portfolio page.
"""

import datetime
import pathlib

from jinja2 import Environment

from config import get_output_dir, get_profile, logger

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{{ profile.name }} | Portfolio</title>
  <style>
    body { margin: 0; min-height: 100vh; background: linear-gradient(#0b0f19, #0c1222, #0b0f19); color: #fff; font-family: system-ui, sans-serif; }
    a { color: inherit; }
    nav { position: sticky; top: 0; display: flex; justify-content: space-between; padding: 1rem; border-bottom: 1px solid rgba(255,255,255,.1); background: rgba(0,0,0,.2); }
    section { max-width: 72rem; margin: 0 auto; padding: 4rem 1rem; }
    .grid { display: grid; gap: 1.5rem; grid-template-columns: repeat(auto-fill, minmax(18rem, 1fr)); }
    .card { display: flex; flex-direction: column; justify-content: space-between; border: 1px solid rgba(255,255,255,.1); border-radius: 1rem; padding: 1.25rem; }
    .muted { color: rgba(255,255,255,.7); }
    .error { color: #fb7185; }
    .pill { border: 1px solid rgba(255,255,255,.15); border-radius: 999px; padding: .25rem .75rem; font-size: .75rem; }
    .meta { display: flex; flex-wrap: wrap; gap: .75rem; font-size: .75rem; }
    footer { border-top: 1px solid rgba(255,255,255,.1); padding: 2rem; text-align: center; font-size: .875rem; }
  </style>
</head>
<body>
{%- macro repo_card(repo) %}
    <div class="card">
      <div>
        <a href="{{ repo.url }}" target="_blank" rel="noreferrer"><h3>{{ repo.name }}</h3></a>
        <p class="muted">{{ repo.description or "No description provided." }}</p>
      </div>
      <div class="meta muted">
        <span>&#9733; {{ repo.stars }}</span>
        <span>&#x2442; {{ repo.forks }}</span>
        {%- if repo.language %}
        <span class="pill">{{ repo.language }}</span>
        {%- endif %}
        <span>Updated {{ repo.updated_at | short_date }}</span>
      </div>
    </div>
{%- endmacro %}
  <nav>
    <a href="#home"><strong>{{ profile.name }}</strong></a>
    <div>
      <a href="#projects">Projects</a>
      <a href="#about">About</a>
      <a href="#contact">Contact</a>
    </div>
    <div>
      <a href="{{ profile.github_url }}" target="_blank" rel="noreferrer" aria-label="GitHub">GitHub</a>
      {%- if profile.linkedin_url %}
      <a href="{{ profile.linkedin_url }}" target="_blank" rel="noreferrer" aria-label="LinkedIn">LinkedIn</a>
      {%- endif %}
      {%- if profile.email %}
      <a href="mailto:{{ profile.email }}" aria-label="Email">Email</a>
      {%- endif %}
    </div>
  </nav>

  <section id="home">
    <h1>{{ profile.name }}<br><span>Portfolio</span></h1>
    <p class="muted">{{ profile.tagline }}</p>
    <p>
      <a href="{{ profile.github_url }}" target="_blank" rel="noreferrer">View GitHub</a>
      {%- if profile.resume_url %}
      <a href="{{ profile.resume_url }}">Resume</a>
      {%- endif %}
    </p>
    {%- if profile.photo_url %}
    <img src="{{ profile.photo_url }}" alt="{{ profile.name }}" width="300">
    {%- endif %}
  </section>

  <section id="projects">
    <h2>Featured Projects</h2>
    {%- if state.loading %}
    <p class="muted">Loading projects…</p>
    {%- endif %}
    {%- if state.error %}
    <p class="error">{{ state.error }}</p>
    {%- endif %}
    {%- if ready %}
    <div class="grid">
      {%- if not selection.featured %}
      <div class="card">
        <h3>My featured projects</h3>
        <p class="muted">Update the <code>FEATURED</code> list in config.py with your best repo names to pin them here.</p>
      </div>
      {%- endif %}
      {%- for repo in selection.featured %}{{ repo_card(repo) }}{% endfor %}
    </div>
    {%- endif %}
  </section>

  <section>
    <h2>Top Repositories</h2>
    {%- if ready %}
    <div class="grid">
      {%- for repo in selection.top %}{{ repo_card(repo) }}{% endfor %}
    </div>
    {%- if not selection.top %}
    <p class="muted">No repositories found. Make sure your GitHub username is correct.</p>
    {%- endif %}
    {%- endif %}
  </section>

  <section id="about">
    <h2>About</h2>
    {%- for paragraph in profile.about %}
    <p class="muted">{{ paragraph }}</p>
    {%- endfor %}
    {%- if profile.interests %}
    <p class="muted">Interests: {{ profile.interests | join(", ") }}.</p>
    {%- endif %}
    {%- if profile.highlights %}
    <div class="card">
      <h3>Highlights</h3>
      <ul>
        {%- for item in profile.highlights %}
        <li>{{ item }}</li>
        {%- endfor %}
      </ul>
    </div>
    {%- endif %}
  </section>

  <section id="contact">
    <h2>Contact</h2>
    <a href="{{ profile.github_url }}" target="_blank" rel="noreferrer">github.com/{{ profile.username }}</a>
    {%- if profile.linkedin_url %}
    <a href="{{ profile.linkedin_url }}" target="_blank" rel="noreferrer">LinkedIn</a>
    {%- endif %}
    {%- if profile.email %}
    <a href="mailto:{{ profile.email }}">{{ profile.email }}</a>
    {%- endif %}
  </section>

  <footer class="muted">&copy; {{ year }} {{ profile.name }}.</footer>
</body>
</html>
"""


def short_date(value):
    """Format an ISO-8601 timestamp as M/D/YYYY; empty when it can't be parsed."""
    if not value:
        return ""
    try:
        parsed = datetime.datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return ""
    return f"{parsed.month}/{parsed.day}/{parsed.year}"


_env = Environment(autoescape=True)
_env.filters["short_date"] = short_date
_template = _env.from_string(PAGE_TEMPLATE)


def render_page(state, selection, profile=None, today=None):
    """
    Render the full portfolio page.

    Args:
        state: PortfolioState of the loader (repos, loading, error).
        selection: ProjectSelection with the featured and top grids.
        profile (Profile, optional): Defaults to the configured profile.
        today (datetime.date, optional): Date used for the footer year.

    Returns:
        str: The HTML document.
    """
    profile = profile or get_profile()
    today = today or datetime.date.today()
    return _template.render(
        profile=profile,
        state=state,
        selection=selection,
        ready=not state.loading and not state.error,
        year=today.year,
    )


def write_page(html, output_dir=None):
    """Write the page as index.html under output_dir and return its path."""
    target_dir = pathlib.Path(output_dir) if output_dir else get_output_dir()
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / "index.html"
    with open(path, "w", encoding="utf-8") as f:
        f.write(html)
    logger.info(f"Wrote portfolio page to {path}")
    return path
