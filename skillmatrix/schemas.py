from datetime import date, datetime
from typing import ClassVar, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator
from pydantic.alias_generators import to_camel

from .services.severity import classify_gap
from .utils.types import Level, OptionalDate, OptionalId, OptionalText, Severity, SkillCategory, UtcDateTime

# JSON uses camelCase; snake_case is accepted on input too
class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

class PartialModel(CamelModel):
    """Base for PUT payloads: every field optional, but columns that are
    NOT NULL in the database may not be explicitly set to null."""

    non_nullable: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_nulls(self):
        for name in self.non_nullable:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} may not be null")
        return self

# ----------------------------
# Skills
# ----------------------------

class SkillIn(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    description: OptionalText = None
    category: SkillCategory

class SkillUpdate(PartialModel):
    non_nullable: ClassVar[Tuple[str, ...]] = ("name", "category")

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: OptionalText = None
    category: Optional[SkillCategory] = None

class SkillOut(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    category: str
    created_at: datetime
    updated_at: datetime

# ----------------------------
# Positions
# ----------------------------

class PositionIn(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    description: OptionalText = None
    department: OptionalText = Field(default=None, max_length=100)
    level: OptionalText = Field(default=None, max_length=50)

class PositionUpdate(PartialModel):
    non_nullable: ClassVar[Tuple[str, ...]] = ("title",)

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: OptionalText = None
    department: OptionalText = Field(default=None, max_length=100)
    level: OptionalText = Field(default=None, max_length=50)

class PositionOut(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    department: Optional[str] = None
    level: Optional[str] = None
    created_at: datetime
    updated_at: datetime

# ----------------------------
# Employees
# ----------------------------

class EmployeeIn(CamelModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: OptionalText = Field(default=None, max_length=255)
    user_id: OptionalText = None
    position_id: OptionalId = None
    department: OptionalText = Field(default=None, max_length=100)
    hire_date: OptionalDate = None
    is_active: bool = True

class EmployeeUpdate(PartialModel):
    non_nullable: ClassVar[Tuple[str, ...]] = ("first_name", "last_name", "is_active")

    first_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: OptionalText = Field(default=None, max_length=255)
    user_id: OptionalText = None
    position_id: OptionalId = None
    department: OptionalText = Field(default=None, max_length=100)
    hire_date: OptionalDate = None
    is_active: Optional[bool] = None

class EmployeeOut(CamelModel):
    id: int
    user_id: Optional[str] = None
    first_name: str
    last_name: str
    email: Optional[str] = None
    position_id: Optional[int] = None
    department: Optional[str] = None
    hire_date: Optional[date] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime

# ----------------------------
# Position skills / employee skills
# ----------------------------

class PositionSkillIn(CamelModel):
    skill_id: int
    required_level: Level

class PositionSkillOut(CamelModel):
    id: int
    position_id: int
    skill_id: int
    required_level: int
    created_at: datetime

class EmployeeSkillIn(CamelModel):
    skill_id: int
    current_level: Level
    evaluation_date: UtcDateTime = None
    notes: OptionalText = None

class EmployeeSkillUpdate(PartialModel):
    non_nullable: ClassVar[Tuple[str, ...]] = ("skill_id", "current_level", "evaluation_date")

    skill_id: Optional[int] = None
    current_level: Optional[Level] = None
    evaluation_date: UtcDateTime = None
    notes: OptionalText = None

class EmployeeSkillOut(CamelModel):
    id: int
    employee_id: int
    skill_id: int
    current_level: int
    evaluated_by: Optional[str] = None
    evaluation_date: datetime
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

# ----------------------------
# Users
# ----------------------------

class UserOut(CamelModel):
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    role: str
    created_at: datetime
    updated_at: datetime

# ----------------------------
# Analytics results
# ----------------------------

class CategoryCount(CamelModel):
    category: str
    count: int

class DashboardStats(CamelModel):
    total_employees: int
    total_skills: int
    total_positions: int
    skill_categories: List[CategoryCount]

class SkillsMatrixRow(CamelModel):
    employee_id: int
    employee_name: str
    position_title: Optional[str] = None
    skill_name: Optional[str] = None
    skill_category: Optional[str] = None
    current_level: Optional[int] = None
    required_level: Optional[int] = None

class SkillGap(CamelModel):
    position_id: int
    position_title: str
    department: Optional[str] = None
    skill_id: int
    skill_name: str
    skill_category: str
    required_level: int
    average_current_level: float
    gap: float

    # Derived on output, never stored or queried
    @computed_field
    @property
    def severity(self) -> Severity:
        return classify_gap(self.gap)

class SkillGapCount(CamelModel):
    skill_name: str
    count: int

class GapSummary(CamelModel):
    total_gaps: int
    critical_gaps: int
    moderate_gaps: int
    low_gaps: int
    average_gap: float
    gaps_by_department: Dict[str, int]
    top_skill_gaps: List[SkillGapCount]
