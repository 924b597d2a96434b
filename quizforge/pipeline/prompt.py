"""Prompt Builder - Renders the quiz generation instruction."""

QUIZ_PROMPT_TEMPLATE = """You are a quiz generation expert. Your task is to create a quiz based *exclusively* on the content provided below.
DO NOT GENERATE QUESTIONS ON ANY OTHER TOPIC.
The output must be a single, valid JSON object with the specified structure.

---
INSTRUCTIONS
1.  Generate exactly {requested_count} questions.
2.  The output must be a single JSON object with a key "questions", which is an array of question objects.
3.  Each question object must have the following keys:
    * "question_type" (string): One of "mcq", "tf", or "fill".
    * "question_text" (string): The quiz question itself.
    * "options" (array of strings): Only for "mcq" questions. Must have exactly 4 options.
    * "correct_answer" (string): The correct answer. For "mcq" it must be one of the options; for "tf" it must be "true" or "false".
    * "difficulty" (string): One of "easy", "medium", or "hard".
    * "explanation" (string): A brief explanation for the correct answer.
4.  Ensure questions are clear, non-repetitive, and directly related to the source content.
5.  Return ONLY the final, valid JSON object. Do not include any other text or markdown outside the JSON.
---
CONTENT
{source_content}
"""


def build_prompt(source_content: str, requested_count: int) -> str:
    """
    Render the generation prompt for the given content.

    The result depends only on the arguments, so the same request always
    produces the same prompt.

    Args:
        source_content: Topic phrase, pasted text or extracted document text
        requested_count: Number of questions the provider must return

    Returns:
        The complete instruction text
    """
    return QUIZ_PROMPT_TEMPLATE.format(
        requested_count=requested_count,
        source_content=source_content,
    )
