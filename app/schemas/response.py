from pydantic import BaseModel


class GenerateResponse(BaseModel):
    text: str
    provider: str


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
