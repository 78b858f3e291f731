from career_analysis.analysis.models import AnalysisRequest, Variant
from career_analysis.analysis.prompt_loader import load_prompt_template

TEMPLATE_NAMES: dict[Variant, str] = {
    Variant.RESUME: "resume_prompt",
    Variant.LINKEDIN_PROFILE: "linkedin_profile_prompt",
}


class PromptBuilder:
    """Renders the per-variant analysis prompt.

    Document text and job description are embedded verbatim, without any
    truncation.
    """

    def __init__(self, templates: dict[Variant, str] | None = None) -> None:
        if templates is None:
            templates = {
                variant: load_prompt_template(name)
                for variant, name in TEMPLATE_NAMES.items()
            }
        self._templates = templates

    def build(self, text: str, job_description: str, variant: Variant) -> str:
        template = self._templates.get(variant)
        if template is None:
            raise ValueError(f"No prompt template for variant '{variant.value}'")
        return template.format(document_text=text, job_description=job_description)

    def build_for(self, request: AnalysisRequest) -> str:
        return self.build(request.document_text, request.job_description, request.variant)
