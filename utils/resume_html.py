from config.jinja_env import jinja_env
from models.resume_model import ResumeForm
from utils.resume_sections import (
    render_additional_info,
    render_certificates,
    render_education,
    render_experience,
    render_header,
    render_projects,
    render_skills,
    render_summary,
)

# Fixed section order of the exported document
SECTION_RENDERERS = (
    render_header,
    render_summary,
    render_experience,
    render_projects,
    render_education,
    render_skills,
    render_certificates,
    render_additional_info,
)


def build_resume_html(form: ResumeForm, cleaned_summary: str) -> str:
    """
    Assemble the full, self-contained HTML document for a canonical form.
    Empty section fragments are dropped so no heading is left without content.
    """
    fragments = []
    for renderer in SECTION_RENDERERS:
        if renderer is render_summary:
            fragment = renderer(form, cleaned_summary)
        else:
            fragment = renderer(form)
        if fragment:
            fragments.append(fragment)

    title = (form.name or "").strip() or "Resume"
    return jinja_env.get_template("resume/document.html").render(title=title, fragments=fragments)
