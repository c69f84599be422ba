"""
Input validation for text the user types into forms and the chat box.
"""
import re
from dataclasses import dataclass
from typing import Optional

from loguru import logger


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation check; ``error_message`` is user-facing."""
    is_valid: bool
    error_message: Optional[str] = None

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls(True)

    @classmethod
    def invalid(cls, message: str) -> "ValidationResult":
        return cls(False, message)


GOAL_MIN_LENGTH = 5
GOAL_MAX_LENGTH = 500
CHAT_MESSAGE_MAX_LENGTH = 2000
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
MIN_AGE = 13
MAX_AGE = 120
ANSWER_MAX_LENGTH = 1000

NAME_PATTERN = re.compile(r"^[a-zA-Z\s'-]+$")

# Only clearly harmful phrasing is blocked client-side
HARMFUL_PATTERNS = (
    "kill myself",
    "kill someone",
    "hurt myself",
    "suicide",
    "self harm",
    "make a bomb",
    "build a weapon",
)


def contains_harmful_content(text: str) -> bool:
    lowered = text.lower()
    return any(pattern in lowered for pattern in HARMFUL_PATTERNS)


def validate_goal(text: str) -> ValidationResult:
    """Validate the free-text description of a new goal."""
    trimmed = text.strip()
    if not trimmed:
        return ValidationResult.invalid("Please enter a goal")
    if len(trimmed) < GOAL_MIN_LENGTH:
        return ValidationResult.invalid(f"Goal must be at least {GOAL_MIN_LENGTH} characters")
    if len(trimmed) > GOAL_MAX_LENGTH:
        return ValidationResult.invalid(f"Goal must be less than {GOAL_MAX_LENGTH} characters")
    if contains_harmful_content(trimmed):
        logger.debug("Goal input rejected by content filter")
        return ValidationResult.invalid("Please enter a constructive goal")
    return ValidationResult.valid()


def validate_chat_message(text: str) -> ValidationResult:
    """Validate a chat message before it is handed to the chat session."""
    trimmed = text.strip()
    if not trimmed:
        return ValidationResult.invalid("Please enter a message")
    if len(trimmed) > CHAT_MESSAGE_MAX_LENGTH:
        return ValidationResult.invalid(f"Message must be less than {CHAT_MESSAGE_MAX_LENGTH} characters")
    return ValidationResult.valid()


def validate_name(text: str) -> ValidationResult:
    """Validate a profile name: letters, spaces, hyphens and apostrophes only."""
    trimmed = text.strip()
    if not trimmed:
        return ValidationResult.invalid("Please enter your name")
    if len(trimmed) < NAME_MIN_LENGTH:
        return ValidationResult.invalid(f"Name must be at least {NAME_MIN_LENGTH} characters")
    if len(trimmed) > NAME_MAX_LENGTH:
        return ValidationResult.invalid(f"Name must be less than {NAME_MAX_LENGTH} characters")
    if not NAME_PATTERN.match(trimmed):
        return ValidationResult.invalid("Name can only contain letters, spaces, hyphens, and apostrophes")
    return ValidationResult.valid()


def validate_age(text: str) -> ValidationResult:
    """Validate an optional age. Blank is accepted."""
    trimmed = text.strip()
    if not trimmed:
        return ValidationResult.valid()
    try:
        age = int(trimmed)
    except ValueError:
        return ValidationResult.invalid("Please enter a valid age")
    if age < MIN_AGE:
        return ValidationResult.invalid(f"You must be at least {MIN_AGE} years old")
    if age > MAX_AGE:
        return ValidationResult.invalid("Please enter a valid age")
    return ValidationResult.valid()


def validate_question_answer(text: str) -> ValidationResult:
    """Validate an optional answer to a goal-planning question."""
    trimmed = text.strip()
    if len(trimmed) > ANSWER_MAX_LENGTH:
        return ValidationResult.invalid(f"Answer must be less than {ANSWER_MAX_LENGTH} characters")
    return ValidationResult.valid()
