from __future__ import annotations

from dataclasses import dataclass

DATA_PLACEHOLDER = "[INSERT CURRENT DATA TABLE]"

SYSTEM_PROMPT_TEMPLATE = """
You are a professional financial content writer. Create structured listicle content for a financial news website. Always respond with valid JSON containing the following fields: title, introduction, tableOfContents, mainContent, conclusion.

Key requirements:
- Introduction: exactly 100 words
- Conclusion: exactly 50 words
- Table of contents: HTML formatted list with proper heading structure
- Main content: Detailed sections for each point
- Tone: Professional but accessible for {audience} level readers
- SEO optimized headlines and structure
""".strip()

DATA_DRIVEN_TEMPLATE = """
Create a listicle for: "{idea}"
Target audience: {audience}
{context_line}
This article requires current market data. For the main content, create detailed section headers and descriptions, but include placeholder text like "{placeholder}" where specific financial data would go. Focus on the structure and educational content around the data points.
""".strip()

EVERGREEN_TEMPLATE = """
Create a complete listicle for: "{idea}"
Target audience: {audience}
{context_line}
This is evergreen content. Provide complete, detailed content for all sections with actionable advice and insights.
""".strip()


@dataclass(frozen=True)
class PromptPair:
    system: str
    user: str


def _context_line(context: str | None) -> str:
    cleaned = (context or "").strip()
    if not cleaned:
        return ""
    return f"Additional context: {cleaned}\n"


def build_prompts(
    idea: str,
    audience: str,
    context: str | None = None,
    data_driven: bool = False,
) -> PromptPair:
    """Build the system and user prompts for one listicle brief.

    Data-driven briefs ask for placeholders where live market data belongs
    instead of figures; evergreen briefs ask for complete content.
    """
    template = DATA_DRIVEN_TEMPLATE if data_driven else EVERGREEN_TEMPLATE
    user = template.format(
        idea=idea.strip(),
        audience=audience.strip(),
        context_line=_context_line(context),
        placeholder=DATA_PLACEHOLDER,
    )
    return PromptPair(
        system=SYSTEM_PROMPT_TEMPLATE.format(audience=audience.strip()),
        user=user,
    )
