from pydantic import BaseModel
from typing import List, Optional

class CurrentEmployee(BaseModel):
    """Signed-in employee as the dashboard shell sees it"""
    id: int
    name: str
    email: str
    job_title: Optional[str] = None
    avatar: Optional[str] = None
    permissions: List[str] = []
    is_admin: bool = False
    sections: List[str] = []
