"""English Prompt Templates — mirror of prompts_pl for English-speaking users.

Invariants:
    - Same keys and placeholders as prompts_pl.TEMPLATES
"""

from firmbox.core.domain_types import FunctionName

TEMPLATES: dict[FunctionName, str] = {
    FunctionName.BUSINESS_IDEA: (
        "Write one original and interesting business idea that could be "
        "profitable in Poland in 2025. Give only the name of the idea and a "
        "short rationale (2-3 sentences)."
    ),
    FunctionName.COMPANY_NAME: (
        'Based on the business idea: "{business_idea}", propose a unique and '
        "catchy company name. Only 1 proposal. Your answer must be the company "
        "name only."
    ),
    FunctionName.COMPETITOR_ANALYSIS: (
        'For a business named "{company_name}" working on "{business_idea}", '
        "carry out a competitor analysis of the Polish market. Provide:\n"
        "- a short overview of the industry\n"
        "- the 3-5 largest competitors\n"
        "- competitive advantages that can be achieved\n"
        "- potential niches and gaps in the market\n"
        "- risks\n"
        "- recommendations for the start."
    ),
    FunctionName.BUSINESS_PLAN: (
        "Based on the earlier information, create a preliminary business plan "
        'for the business "{business_idea}" named "{company_name}". Include:\n'
        "- a description of the business\n"
        "- the target audience\n"
        "- startup costs (approximate)\n"
        "- revenue sources\n"
        "- the business model\n"
        "- basic financial assumptions for the first year\n"
        "- competitor analysis {competitor_analysis}"
    ),
    FunctionName.MARKETING_PLAN: (
        'Prepare a marketing plan for the company "{company_name}" operating in '
        'the "{business_idea}" industry. Include:\n'
        "- a customer acquisition strategy\n"
        "- online and offline actions\n"
        "- use of social media\n"
        "- an action plan for the first quarter\n"
        "- business plan {business_plan}\n"
        "- competitor analysis {competitor_analysis}"
    ),
}
