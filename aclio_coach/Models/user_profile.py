# user_profile.py
# Description: User profile model
#
# Imports
from enum import Enum
from typing import Optional
#
# Third-Party Imports
from pydantic import BaseModel
#
#######################################################################################################################
#
# Classes:

class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class UserProfile(BaseModel):
    """Profile details entered during onboarding."""
    name: str = ""
    age: str = ""
    gender: Optional[Gender] = None

    @property
    def is_empty(self) -> bool:
        return not self.name.strip()

    @property
    def display_name(self) -> str:
        return "Achiever" if self.is_empty else self.name

    @property
    def age_int(self) -> Optional[int]:
        try:
            return int(self.age)
        except ValueError:
            return None

#
# End of user_profile.py
#######################################################################################################################
