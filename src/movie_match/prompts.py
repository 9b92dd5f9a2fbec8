"""
Prompt templates for the generative-text collaborator.
"""
from langchain_core.prompts import ChatPromptTemplate

DESCRIPTION_SYSTEM_PROMPT = """You are a film expert who identifies movies from descriptions.

Rules:
- Suggest between {min_results} and {max_results} movies, most likely first.
- Exclude adult content.
- Respond ONLY with a numbered list, one movie per line, nothing before or after it.
- Every line must use exactly this format:
  <rank>. <official English title> (<release year>) - <confidence>% - <one sentence explanation>

Example:
1. Inception (2010) - 92% - A thief steals corporate secrets by entering people's dreams.
2. Paprika (2006) - 71% - A therapist uses a device to enter her patients' dreams."""

DESCRIPTION_HUMAN_PROMPT = 'Movie description: "{description}"'

DESCRIPTION_PROMPT = ChatPromptTemplate.from_messages(
    [
        ("system", DESCRIPTION_SYSTEM_PROMPT),
        ("human", DESCRIPTION_HUMAN_PROMPT),
    ]
)
