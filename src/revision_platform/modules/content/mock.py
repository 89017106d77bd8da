"""Deterministic mock content used when the agent is unavailable.

Both generators are pure functions of their arguments: the same inputs
always produce the same text.
"""

from dataclasses import dataclass

from revision_platform.modules.content.prompts import ensure_exhaustive
from revision_platform.shared.models import LearningMode

REVISION_TEMPLATE = """# {chapter} - Revision Notes

## Key Concepts

### Introduction
{chapter} is a fundamental topic in {subject} that forms the basis for advanced concepts. Understanding this chapter is crucial for exam preparation.

### Important Definitions
• **Key Term 1**: A fundamental concept that describes the basic principles
• **Key Term 2**: An advanced concept building upon the basics
• **Key Term 3**: A practical application of the theoretical knowledge

### Main Topics

#### Topic 1: Fundamental Principles
The fundamental principles of {chapter} include several key aspects:
- Basic understanding of core concepts
- Relationship between different elements
- Practical applications in real-world scenarios

#### Topic 2: Advanced Concepts
Building upon the basics, we explore:
- Complex interactions and relationships
- Problem-solving techniques
- Common misconceptions to avoid

### Formulas and Equations
1. **Formula 1**: Basic equation for calculations
2. **Formula 2**: Advanced equation for complex problems
3. **Formula 3**: Practical application formula

### Important Points to Remember
✓ Always start with fundamental understanding
✓ Practice problems regularly
✓ Connect concepts to real-world examples
✓ Review formulas and their applications

### Common Exam Questions
This topic frequently appears in exams as:
- Conceptual understanding questions
- Problem-solving exercises
- Application-based scenarios

### Quick Revision Tips
1. Review key definitions daily
2. Practice numerical problems
3. Create concept maps
4. Solve previous year questions"""

ASSESSMENT_TEMPLATE = """# {chapter} - Practice Assessment

## Multiple Choice Questions (MCQs)

**Question 1**: What is the primary concept in {chapter}?
A) Option A - Basic concept
B) Option B - Intermediate concept
C) Option C - Advanced concept
D) Option D - Application concept

**Correct Answer**: B
**Explanation**: The intermediate concept forms the foundation for understanding this topic.

---

**Question 2**: Which of the following is an application of {chapter}?
A) Real-world scenario 1
B) Real-world scenario 2
C) Real-world scenario 3
D) All of the above

**Correct Answer**: D
**Explanation**: All scenarios demonstrate practical applications.

---

**Question 3**: In {subject}, {chapter} is most closely related to:
A) Previous chapter concept
B) Current chapter focus
C) Future chapter preview
D) Unrelated concept

**Correct Answer**: B

---

## Short Answer Questions

**Question 4**: Define the key terms in {chapter} and explain their significance.
**Expected Answer**: Should include 3-4 key definitions with brief explanations and their importance in the subject.

---

**Question 5**: Explain the main principle of {chapter} with an example.
**Expected Answer**: Clear explanation of the principle followed by a relevant real-world or theoretical example.

---

## Problem-Solving Questions

**Question 6**:
Given: [Initial conditions related to {chapter}]
Find: [What needs to be calculated or proven]

**Solution Approach**:
1. Identify the given information
2. Apply relevant formula/concept
3. Calculate step by step
4. Verify the answer

---

**Question 7**: Application Problem
A practical scenario requires understanding of {chapter}. Solve the following:
[Problem statement]

**Hints**:
- Start with basic principles
- Use the formula correctly
- Check units and dimensions
- Verify the final answer

---

## Bonus Challenge Question

**Question 8**: Advanced Application
This question combines concepts from {chapter} with other topics in {subject}.
[Complex problem statement]

**Difficulty Level**: High
**Time Required**: 10-15 minutes
**Skills Tested**: Analytical thinking, concept integration, problem-solving"""

CHAT_TEMPLATE = """Hello! I'm here to help you learn about **{chapter}** in {subject}.

This is an important topic that covers several key concepts. I can help you with:

✓ Understanding fundamental concepts
✓ Clarifying doubts and questions
✓ Explaining difficult topics
✓ Providing examples and applications
✓ Suggesting practice problems

**What would you like to know about {chapter}?**

Some common questions students ask:
• What are the basics I should know?
• Can you explain [specific concept]?
• How does this apply in real life?
• What are common mistakes to avoid?

Feel free to ask me anything related to this topic!"""

MOCK_TEMPLATES: dict[LearningMode, str] = {
    LearningMode.REVISION: REVISION_TEMPLATE,
    LearningMode.ASSESSMENT: ASSESSMENT_TEMPLATE,
    LearningMode.CHAT: CHAT_TEMPLATE,
}

ensure_exhaustive(MOCK_TEMPLATES, "MOCK_TEMPLATES")


def mock_content(mode: LearningMode | str, subject: str, chapter: str) -> str:
    """Canned study document for a mode.

    Unrecognized modes fall back to the revision notes.
    """
    template = MOCK_TEMPLATES[LearningMode.coerce(mode)]
    return template.format(subject=subject, chapter=chapter)


# ===================
# Chat replies
# ===================

FORMULA_REPLY = (
    "Great question about formulas in {chapter}! Here are the key formulas you need to know:\n\n"
    "1. **Basic Formula**: [Formula description and when to use it]\n"
    "2. **Advanced Formula**: [Formula description and applications]\n\n"
    "Would you like me to explain how to apply any of these formulas with an example?"
)

EXAMPLE_REPLY = (
    "Let me explain that concept with a clear example:\n\n"
    "Consider this scenario in {subject}:\n"
    "[Detailed example explanation]\n\n"
    "This demonstrates how the concept works in practice. Does this make sense? "
    "Would you like another example or have any questions?"
)

COMPARISON_REPLY = (
    "Excellent question! Let me clarify the differences:\n\n"
    "**Concept A:**\n• Characteristic 1\n• Characteristic 2\n• Use case\n\n"
    "**Concept B:**\n• Characteristic 1\n• Characteristic 2\n• Use case\n\n"
    "The main distinction is... [explanation]\n\n"
    "Is there a specific aspect you'd like me to elaborate on?"
)

REASONING_REPLY = (
    "That's a thoughtful question! Here's the reasoning:\n\n"
    "{chapter} works this way because:\n"
    "1. [Reason 1 with explanation]\n"
    "2. [Reason 2 with explanation]\n"
    "3. [Reason 3 with explanation]\n\n"
    "This is important in {subject} because it helps us understand [application].\n\n"
    "Does this answer your question, or would you like me to go deeper into any part?"
)

GENERIC_REPLY = (
    "Thank you for your question about {chapter}! Based on what you're asking, "
    "here's what you should know:\n\n"
    "{message} relates to several key concepts in this chapter. The fundamental idea is that "
    "[explanation relevant to the question].\n\n"
    "In {subject}, this is particularly important because [significance].\n\n"
    "Would you like me to:\n"
    "• Provide more details about this concept\n"
    "• Give you a practical example\n"
    "• Explain related topics\n"
    "• Suggest practice problems\n\n"
    "What would be most helpful for you?"
)


@dataclass(frozen=True)
class ReplyRule:
    """A keyword rule: any keyword found in the message selects the template."""

    name: str
    keywords: tuple[str, ...]
    template: str

    def matches(self, lowered_message: str) -> bool:
        return any(keyword in lowered_message for keyword in self.keywords)


# Evaluated in order; first match wins.
CHAT_REPLY_RULES: tuple[ReplyRule, ...] = (
    ReplyRule("formula", ("formula", "equation"), FORMULA_REPLY),
    ReplyRule("example", ("example", "explain"), EXAMPLE_REPLY),
    ReplyRule("comparison", ("difference", "compare"), COMPARISON_REPLY),
    ReplyRule("reasoning", ("why", "how"), REASONING_REPLY),
)


def select_reply_rule(message: str) -> ReplyRule | None:
    """Return the first rule matching the message, or None for the generic reply."""
    lowered = message.lower()
    for rule in CHAT_REPLY_RULES:
        if rule.matches(lowered):
            return rule
    return None


def mock_chat_reply(message: str, subject: str, chapter: str) -> str:
    """Canned chat answer chosen by keyword matching on the message."""
    rule = select_reply_rule(message)
    template = rule.template if rule is not None else GENERIC_REPLY
    return template.format(subject=subject, chapter=chapter, message=message)
