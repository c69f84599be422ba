# chat_prompts.py
# Description: Fixed product copy used by the coaching chat
#
# Imports
from typing import List, Optional
#
# Local Imports
from ..Models.goal import Goal
#
#######################################################################################################################
#
# Constants:

# Written into the reply when the stream completes without any text
EMPTY_REPLY_FALLBACK = "I'm here to help! Could you tell me more?"

# Replaces the reply when the stream fails at any point
CONNECTION_ERROR_FALLBACK = "I'm having trouble connecting right now. Please try again in a moment! 🐰"

GOAL_QUICK_PROMPTS = [
    "Give me motivation",
    "What should I focus on?",
    "How do I stay consistent?",
    "Tips for this step",
]

GENERAL_QUICK_PROMPTS = [
    "Help me set a goal",
    "Give me motivation",
    "How do I stay consistent?",
    "Tips for productivity",
]

#
# Functions:

def quick_prompts_for(goal: Optional[Goal]) -> List[str]:
    return list(GOAL_QUICK_PROMPTS if goal is not None else GENERAL_QUICK_PROMPTS)


def welcome_message_for(goal: Optional[Goal]) -> str:
    """Opening assistant message, naming the goal when the chat is scoped to one."""
    if goal is not None:
        lines = [
            "Hi! I'm Aclio, your AI goal coach! 🐰",
            "",
            f'I see you\'re working on "{goal.name}". How can I help you today?',
            "",
            "I can:",
            "• Give you motivation and tips",
            "• Help break down your next steps",
            "• Answer questions about your goal",
            "• Suggest resources and strategies",
        ]
    else:
        lines = [
            "Hi! I'm Aclio, your AI goal coach! 🐰",
            "",
            "How can I help you achieve your goals today?",
            "",
            "I can:",
            "• Give you motivation and tips",
            "• Help you plan your next steps",
            "• Answer questions",
            "• Suggest strategies",
        ]
    return "\n".join(lines)

#
# End of chat_prompts.py
#######################################################################################################################
