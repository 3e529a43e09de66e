import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select, delete, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..db import Base
from ..errors import ConflictError, NotFoundError
from ..models import Skill, Position, Employee, PositionSkill, EmployeeSkill
from ..utils.validators import utcnow

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=Base)


class CrudService(Generic[M]):
    """
    List/get/create/update/delete for one entity table.
    - The session is injected by construction, one service per request.
    - Each mutation commits on its own; nothing is cached between calls.
    """

    model: Type[M]
    entity: str = "Record"

    def __init__(self, db: Session):
        self.db = db

    def list(self) -> List[M]:
        stmt = select(self.model).order_by(self.model.created_at.desc(), self.model.id.desc())
        return list(self.db.scalars(stmt))

    def get(self, id: int) -> M:
        row = self.db.get(self.model, id)
        if row is None:
            raise NotFoundError(self.entity, id)
        return row

    def create(self, fields: Dict[str, Any]) -> M:
        self._check_references(fields)
        row = self.model(**fields)
        self.db.add(row)
        self._commit()
        self.db.refresh(row)
        logger.info("Created %s id=%s", self.entity.lower(), row.id)
        return row

    def update(self, id: int, fields: Dict[str, Any]) -> M:
        row = self.get(id)
        self._check_references(fields)
        for key, value in fields.items():
            setattr(row, key, value)
        if hasattr(row, "updated_at"):
            row.updated_at = utcnow()
        self._commit()
        self.db.refresh(row)
        logger.info("Updated %s id=%s fields=%s", self.entity.lower(), id, sorted(fields))
        return row

    def delete(self, id: int) -> None:
        # Absent rows are not an error
        row = self.db.get(self.model, id)
        if row is None:
            return
        self._delete_dependents(row)
        self.db.delete(row)
        self._commit()
        logger.info("Deleted %s id=%s", self.entity.lower(), id)

    # Hooks
    def _check_references(self, fields: Dict[str, Any]) -> None:
        pass

    def _delete_dependents(self, row: M) -> None:
        pass

    def _require(self, model: Type[Base], entity: str, id: Optional[int]) -> None:
        if id is not None and self.db.get(model, id) is None:
            raise NotFoundError(entity, id)

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError(f"{self.entity} conflicts with existing data") from e


class SkillService(CrudService[Skill]):
    model = Skill
    entity = "Skill"

    def _delete_dependents(self, row: Skill) -> None:
        # Requirements and evaluations of a removed skill go with it
        self.db.execute(delete(PositionSkill).where(PositionSkill.skill_id == row.id))
        self.db.execute(delete(EmployeeSkill).where(EmployeeSkill.skill_id == row.id))


class PositionService(CrudService[Position]):
    model = Position
    entity = "Position"

    def _delete_dependents(self, row: Position) -> None:
        # Employees stay, unassigned
        self.db.execute(delete(PositionSkill).where(PositionSkill.position_id == row.id))
        self.db.execute(
            update(Employee).where(Employee.position_id == row.id).values(position_id=None, updated_at=utcnow())
        )


class EmployeeService(CrudService[Employee]):
    model = Employee
    entity = "Employee"

    def _check_references(self, fields: Dict[str, Any]) -> None:
        self._require(Position, "Position", fields.get("position_id"))

    def _delete_dependents(self, row: Employee) -> None:
        self.db.execute(delete(EmployeeSkill).where(EmployeeSkill.employee_id == row.id))


class PositionSkillService(CrudService[PositionSkill]):
    model = PositionSkill
    entity = "Position skill"

    def list_for_position(self, position_id: int) -> List[PositionSkill]:
        self._require(Position, "Position", position_id)
        stmt = select(PositionSkill).where(PositionSkill.position_id == position_id).order_by(PositionSkill.id)
        return list(self.db.scalars(stmt))

    def create_for_position(self, position_id: int, fields: Dict[str, Any]) -> PositionSkill:
        self._require(Position, "Position", position_id)
        existing = self.db.scalar(
            select(PositionSkill.id).where(
                PositionSkill.position_id == position_id,
                PositionSkill.skill_id == fields["skill_id"],
            )
        )
        if existing is not None:
            raise ConflictError(f"Skill {fields['skill_id']} is already required by position {position_id}")
        return self.create({**fields, "position_id": position_id})

    def delete_for_position(self, position_id: int, skill_id: int) -> None:
        self.db.execute(
            delete(PositionSkill).where(
                PositionSkill.position_id == position_id,
                PositionSkill.skill_id == skill_id,
            )
        )
        self._commit()
        logger.info("Removed skill id=%s from position id=%s", skill_id, position_id)

    def _check_references(self, fields: Dict[str, Any]) -> None:
        self._require(Skill, "Skill", fields.get("skill_id"))


class EmployeeSkillService(CrudService[EmployeeSkill]):
    model = EmployeeSkill
    entity = "Employee skill"

    def list_for_employee(self, employee_id: int) -> List[EmployeeSkill]:
        self._require(Employee, "Employee", employee_id)
        stmt = select(EmployeeSkill).where(EmployeeSkill.employee_id == employee_id).order_by(EmployeeSkill.id)
        return list(self.db.scalars(stmt))

    def create_for_employee(self, employee_id: int, fields: Dict[str, Any], evaluated_by: Optional[str]) -> EmployeeSkill:
        self._require(Employee, "Employee", employee_id)
        # An omitted evaluation date falls back to the column default (now)
        values = {k: v for k, v in fields.items() if not (k == "evaluation_date" and v is None)}
        return self.create({**values, "employee_id": employee_id, "evaluated_by": evaluated_by})

    def _check_references(self, fields: Dict[str, Any]) -> None:
        self._require(Skill, "Skill", fields.get("skill_id"))
