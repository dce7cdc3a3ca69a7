from pydantic import BaseModel

class TermCreate(BaseModel):
    name: str

class Term(TermCreate):
    id: int

    class Config:
        from_attributes = True
