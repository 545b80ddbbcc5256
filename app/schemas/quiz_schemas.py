from typing import Annotated, Any, List, Optional, Sequence
from pydantic import BaseModel, Field, field_validator

OPTIONS_TOO_SHORT = "Options must be an array with at least 2 items"

# Presence follows JSON truthiness: null, "", 0 and false count as missing,
# an empty list does not.
def _is_blank(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (str, int, float)) and not value:
        return True
    return False

def _field(err: dict) -> Optional[str]:
    loc = err.get("loc", ())
    return loc[1] if len(loc) > 1 and isinstance(loc[1], str) else None

def _is_whole_body(err: dict) -> bool:
    return tuple(err.get("loc", ())) == ("body",)


class QuizCreateIn(BaseModel):
    title: str = Field(..., min_length=1)

    @classmethod
    def error_message(cls, errors: Sequence[dict]) -> str:
        return "Title is required"


class OptionIn(BaseModel):
    id: str = Field(..., min_length=1)
    text: str

class QuestionCreateIn(BaseModel):
    text: str = Field(..., min_length=1)
    options: Annotated[List[OptionIn], Field(min_length=2)]
    correctOptionId: str = Field(..., min_length=1)

    # count is checked before item shape, so [{"id": "a"}] is a short list
    @field_validator("options", mode="before")
    @classmethod
    def _at_least_two_options(cls, v: Any) -> Any:
        if isinstance(v, list) and len(v) < 2:
            raise ValueError(OPTIONS_TOO_SHORT)
        return v

    @field_validator("options")
    @classmethod
    def _unique_option_ids(cls, v: List[OptionIn]) -> List[OptionIn]:
        ids = [o.id for o in v]
        if len(set(ids)) != len(ids):
            raise ValueError("Option ids must be unique")
        return v

    @classmethod
    def error_message(cls, errors: Sequence[dict]) -> str:
        for err in errors:
            name = _field(err)
            if _is_whole_body(err) or name in ("text", "correctOptionId"):
                return "Text, options, and correctOptionId are required"
            if name == "options" and len(err["loc"]) == 2 and (
                err.get("type") == "missing" or _is_blank(err.get("input"))
            ):
                return "Text, options, and correctOptionId are required"
        for err in errors:
            if _field(err) == "options" and len(err["loc"]) == 2:
                if err.get("type") == "value_error":
                    return str(err["ctx"]["error"])
                return OPTIONS_TOO_SHORT
        return "Each option must have an id and text"


class SubmitIn(BaseModel):
    # entries are not validated: malformed ones score 0 in the service
    answers: List[Any]

    @classmethod
    def error_message(cls, errors: Sequence[dict]) -> str:
        return "Answers must be an array"


class OptionOut(BaseModel):
    id: str
    text: str

class QuestionOut(BaseModel):
    id: str
    text: str
    options: List[OptionOut]

class QuizOut(BaseModel):
    id: str
    title: str

class ScoreOut(BaseModel):
    score: int
    total: int

class ErrorOut(BaseModel):
    error: str
