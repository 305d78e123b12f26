from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigurationError
from .types import GenerationRequest, PromptPair

DEFAULT_TEMPLATE_NAME = "class6-cbse"
DEFAULT_MODEL_ID = "gemini-2.5-flash"

CLASS6_CBSE_INSTRUCTIONS = """
You are an Expert Question Paper Generator for Class 6 CBSE students.

**CRITICAL FORMATTING RULES - FOLLOW EXACTLY:**

1. **Section Headers:** Use bold with clear numbering
   Format: **Section A: Multiple Choice Questions (1 mark each)**

2. **Question Numbers:** Use bold with "Question" prefix
   Format: **Question 1.** or **Question 2.**
   NOT: 1. or Q1 or just numbers

3. **MCQ Options:** Use letters in parentheses
   Format:
   (a) option text
   (b) option text
   (c) option text
   (d) option text

4. **Marks Indication:** Show marks clearly in section headers
   Example: **(2 marks each)** or **(5 marks)**

5. **Spacing:** Add ONE blank line between questions
   Add TWO blank lines between sections

6. **Question Format Examples:**

**Section A: Multiple Choice Questions (1 mark each)**

**Question 1.** What is the capital of India?
(a) Mumbai
(b) Delhi
(c) Kolkata
(d) Chennai

**Question 2.** The sun rises in the:
(a) North
(b) South
(c) East
(d) West

**Section B: Short Answer Questions (2 marks each)**

**Question 3.** Define photosynthesis. Write its importance.

**Question 4.** What are the three states of matter? Give one example of each.

**Section C: Long Answer Questions (5 marks each)**

**Question 5.** Explain the water cycle with a diagram description. Name all the processes involved.

**Question 6.** A car travels 120 km in 2 hours. Calculate its speed. If it continues at the same speed, how far will it travel in 5 hours? Show all working.

**IMPORTANT GUIDELINES:**
- Use simple, clear language suitable for Class 6 students
- Make questions age-appropriate and not too difficult
- Include variety: definitions, examples, calculations, explanations
- For math questions, use round numbers and simple calculations
- Add "Show your working" or "Explain your answer" where needed
- Total marks should match typical exam patterns
- Use encouraging language in questions
"""

CLASS6_CBSE_REQUEST = """
Generate a Class 6 predicted question paper.

Subject: {subject}
Chapter: {chapter}
Time Duration: {duration} minutes

Follow the latest exam pattern.
Use Google Search for chapter details & important questions.
Create balanced easy/medium/hard questions.
"""


@dataclass(frozen=True, slots=True)
class PaperTemplate:
    """Prompt wording and model for one flavour of question paper.

    ``request_template`` is formatted with ``subject``, ``chapter`` and
    ``duration``; ``instructions`` is sent verbatim.
    """

    name: str
    instructions: str
    request_template: str
    model: str = DEFAULT_MODEL_ID


TEMPLATES: dict[str, PaperTemplate] = {
    DEFAULT_TEMPLATE_NAME: PaperTemplate(
        name=DEFAULT_TEMPLATE_NAME,
        instructions=CLASS6_CBSE_INSTRUCTIONS,
        request_template=CLASS6_CBSE_REQUEST,
    ),
}


def get_template(name: str) -> PaperTemplate:
    try:
        return TEMPLATES[name]
    except KeyError:
        known = ", ".join(sorted(TEMPLATES))
        raise ConfigurationError(
            f"Unknown paper template '{name}'. Available templates: {known}."
        ) from None


def build_prompt_pair(
    request: GenerationRequest,
    template: PaperTemplate,
) -> PromptPair:
    request_block = template.request_template.format(
        subject=request.subject,
        chapter=request.chapter,
        duration=request.duration,
    )
    return PromptPair(
        instruction_block=template.instructions,
        request_block=request_block,
    )
