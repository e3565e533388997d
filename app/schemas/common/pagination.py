from typing import Generic, List, TypeVar
from pydantic import BaseModel

T = TypeVar("T")

class PaginatedResponse(BaseModel, Generic[T]):
    page_index: int
    page_size: int
    count: int
    total_pages: int = 0
    has_next_page: bool = False
    has_prev_page: bool = False
    data: List[T]
