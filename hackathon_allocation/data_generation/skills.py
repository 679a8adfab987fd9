# hackathon_allocation/data_generation/skills.py
from typing import List
from ..config import DEFAULT_SKILLS

def get_default_skills() -> List[str]:
    return list(DEFAULT_SKILLS)
