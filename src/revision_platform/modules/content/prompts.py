"""Prompt construction for the conversational agent."""

from revision_platform.shared.models import LearningMode

MODE_INSTRUCTIONS: dict[LearningMode, str] = {
    LearningMode.REVISION: (
        "You are an expert tutor. Generate comprehensive revision notes with key concepts, "
        "definitions, formulas, and important points. Structure the content clearly with "
        "headings and bullet points."
    ),
    LearningMode.ASSESSMENT: (
        "You are an exam preparation expert. Generate practice questions including MCQs, "
        "short answer questions, and problem-solving exercises with varying difficulty levels."
    ),
    LearningMode.CHAT: (
        "You are a helpful educational assistant. Provide clear explanations and be ready "
        "to answer follow-up questions about the topic."
    ),
}

INITIAL_REQUESTS: dict[LearningMode, str] = {
    LearningMode.REVISION: (
        "Generate comprehensive revision notes for {chapter} in {subject}. "
        "Include key concepts, definitions, formulas, and important points."
    ),
    LearningMode.ASSESSMENT: (
        "Generate practice questions and problems for {chapter} in {subject}. "
        "Include MCQs, short answer questions, and problem-solving exercises."
    ),
    LearningMode.CHAT: (
        "I want to learn about {chapter} in {subject}. "
        "Please provide an overview and let me know I can ask questions."
    ),
}

PROMPT_TEMPLATE = """Context:
- Mode: {mode}
- Subject: {subject}
- Chapter: {chapter}

Instructions: {instruction}

Request: {request}

Please provide educational content appropriate for students studying this topic."""

CHAT_CONTEXT_TEMPLATE = "Context: {mode} mode for {subject} - {chapter}\n\nStudent Question: {message}"


def ensure_exhaustive(table: dict[LearningMode, str], name: str) -> None:
    """Fail at import time if a mode-keyed table misses a mode."""
    missing = [mode.value for mode in LearningMode if mode not in table]
    if missing:
        raise RuntimeError(f"{name} has no entry for modes: {', '.join(missing)}")


ensure_exhaustive(MODE_INSTRUCTIONS, "MODE_INSTRUCTIONS")
ensure_exhaustive(INITIAL_REQUESTS, "INITIAL_REQUESTS")


def _mode_value(mode: LearningMode | str) -> str:
    return mode.value if isinstance(mode, LearningMode) else str(mode)


def build_prompt(mode: LearningMode | str, subject: str, chapter: str, request: str) -> str:
    """Build the single text turn sent to the agent for content generation.

    An unknown mode produces a blank instruction line.
    """
    try:
        instruction = MODE_INSTRUCTIONS[LearningMode.parse(mode)]
    except ValueError:
        instruction = ""

    return PROMPT_TEMPLATE.format(
        mode=_mode_value(mode),
        subject=subject,
        chapter=chapter,
        instruction=instruction,
        request=request,
    ).strip()


def build_chat_message(mode: LearningMode | str, subject: str, chapter: str, message: str) -> str:
    """Wrap a student question with the session context."""
    return CHAT_CONTEXT_TEMPLATE.format(
        mode=_mode_value(mode),
        subject=subject,
        chapter=chapter,
        message=message,
    )


def default_request(mode: LearningMode | str, subject: str, chapter: str) -> str:
    """Request text used when a generation call does not supply one."""
    return f"Generate {_mode_value(mode)} content for {chapter} in {subject}"


def initial_request(mode: LearningMode, subject: str, chapter: str) -> str:
    """Opening request the wizard sends when the response screen loads."""
    return INITIAL_REQUESTS[mode].format(subject=subject, chapter=chapter)
