from datetime import date, datetime
from typing import Annotated, Literal, Optional, get_args

from pydantic import AfterValidator, BeforeValidator, Field, StrictInt

from .validators import blank_to_none, parse_date, to_naive_utc

# Literal restricts the accepted values
SkillCategory = Literal["technical", "managerial", "behavioral", "cross-functional"]
SKILL_CATEGORIES = get_args(SkillCategory)

Severity = Literal["critical", "moderate", "low"]

# Ordinal proficiency scale shared by required and evaluated levels
MIN_LEVEL = 1
MAX_LEVEL = 5
# Strict: JSON true or 2.5 is not a level
Level = Annotated[StrictInt, Field(ge=MIN_LEVEL, le=MAX_LEVEL)]

# Optional inputs where forms post "" for "not set"
OptionalText = Annotated[Optional[str], BeforeValidator(blank_to_none)]
OptionalId = Annotated[Optional[int], BeforeValidator(blank_to_none)]
OptionalDate = Annotated[Optional[date], BeforeValidator(parse_date)]
# Stored as naive UTC like every other timestamp
UtcDateTime = Annotated[Optional[datetime], AfterValidator(to_naive_utc)]

