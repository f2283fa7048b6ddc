"""Polish Prompt Templates — the production prompts for the Polish market.

Invariants:
    - Same keys and placeholders as prompts_en.TEMPLATES
    - Placeholders: {business_idea}, {company_name}, {competitor_analysis}, {business_plan}
"""

from firmbox.core.domain_types import FunctionName

TEMPLATES: dict[FunctionName, str] = {
    FunctionName.BUSINESS_IDEA: (
        "Napisz jeden, oryginalny i ciekawy pomysł na biznes, który mógłby być "
        "dochodowy w Polsce w 2025 roku. Podaj tylko nazwę pomysłu i krótkie "
        "uzasadnienie (2-3 zdania)."
    ),
    FunctionName.COMPANY_NAME: (
        'Na podstawie pomysłu na biznes: "{business_idea}", zaproponuj unikalną '
        "i chwytliwą nazwę firmy. Tylko 1 propozycja. Twoja odpowiedź ma być "
        "tylko nazwą firmy."
    ),
    FunctionName.COMPETITOR_ANALYSIS: (
        'Dla biznesu o nazwie "{company_name}" zajmującego się "{business_idea}", '
        "przeprowadź analizę konkurencji na rynku polskim. Podaj:\n"
        "- krótką charakterystykę branży\n"
        "- 3-5 największych konkurentów\n"
        "- przewagi konkurencyjne, które można osiągnąć\n"
        "- potencjalne nisze i luki na rynku\n"
        "- ryzyka\n"
        "- rekomendacje na start."
    ),
    FunctionName.BUSINESS_PLAN: (
        "Na podstawie wcześniejszych informacji stwórz wstępny biznesplan dla "
        'biznesu "{business_idea}" o nazwie "{company_name}". Uwzględnij:\n'
        "- opis działalności\n"
        "- grupę docelową\n"
        "- koszty początkowe (orientacyjne)\n"
        "- źródła przychodów\n"
        "- model biznesowy\n"
        "- podstawowe założenia finansowe na pierwszy rok\n"
        "- analizę konkurencji {competitor_analysis}"
    ),
    FunctionName.MARKETING_PLAN: (
        'Przygotuj plan marketingowy dla firmy "{company_name}" działającej w '
        'branży "{business_idea}". Uwzględnij:\n'
        "- strategię pozyskiwania klientów\n"
        "- działania online i offline\n"
        "- wykorzystanie social mediów\n"
        "- plan działań na pierwszy kwartał\n"
        "- biznesplan {business_plan}\n"
        "- analiza konkurencji {competitor_analysis}"
    ),
}
