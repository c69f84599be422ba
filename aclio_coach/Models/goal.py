# goal.py
# Description: Goal and Step data models
#
# Imports
from datetime import datetime
from typing import List, Optional
#
# Third-Party Imports
from pydantic import BaseModel, Field
#
#######################################################################################################################
#
# Classes:


def _default_goal_id() -> int:
    # Millisecond timestamp, matches ids created by the mobile clients
    return int(datetime.now().timestamp() * 1000)


class Step(BaseModel):
    """A single actionable step of a goal."""
    id: int
    title: str
    description: str = ""
    duration: Optional[str] = None


class Goal(BaseModel):
    """
    A user's tracked objective.

    Navigation and chat only ever carry a reference to a goal; its identity
    is the ``id`` field, never the full content.
    """
    id: int = Field(default_factory=_default_goal_id)
    name: str
    category: Optional[str] = None
    icon_key: str = "target"
    due_date: Optional[datetime] = None
    steps: List[Step] = Field(default_factory=list)
    completed_steps: List[int] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def progress(self) -> int:
        """Completion percentage, 0-100."""
        if not self.steps:
            return 0
        return int(len(self.completed_steps) / len(self.steps) * 100)

    @property
    def is_completed(self) -> bool:
        return self.progress == 100

    @property
    def next_step(self) -> Optional[Step]:
        for step in self.steps:
            if step.id not in self.completed_steps:
                return step
        return None

    def is_step_completed(self, step_id: int) -> bool:
        return step_id in self.completed_steps

#
# End of goal.py
#######################################################################################################################
