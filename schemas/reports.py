from pydantic import BaseModel
from typing import Any, List

class TabularReport(BaseModel):
    title: str
    headers: List[str]
    rows: List[List[Any]]

    @property
    def row_count(self) -> int:
        return len(self.rows)
