from pydantic import BaseModel, Field


class GenerateRequest(BaseModel):
    profile: str
    job: str
    temperature: float | None = None  # None = server default
    max_tokens: int | None = Field(None, alias="maxTokens")
