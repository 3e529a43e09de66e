from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ..auth import get_current_user
from ..db import get_db
from ..models import User
from ..schemas import EmployeeIn, EmployeeOut, EmployeeUpdate, EmployeeSkillIn, EmployeeSkillOut
from ..services.crud import EmployeeService, EmployeeSkillService

router = APIRouter(prefix="/api/employees", tags=["employees"], dependencies=[Depends(get_current_user)])

@router.get("", response_model=List[EmployeeOut])
def list_employees(db: Session = Depends(get_db)):
    return EmployeeService(db).list()

@router.get("/{employee_id}", response_model=EmployeeOut)
def get_employee(employee_id: int, db: Session = Depends(get_db)):
    return EmployeeService(db).get(employee_id)

@router.post("", response_model=EmployeeOut, status_code=status.HTTP_201_CREATED)
def create_employee(item: EmployeeIn, db: Session = Depends(get_db)):
    return EmployeeService(db).create(item.model_dump())

# Deactivation is an update with isActive=false; the row is kept
@router.put("/{employee_id}", response_model=EmployeeOut)
def update_employee(employee_id: int, item: EmployeeUpdate, db: Session = Depends(get_db)):
    return EmployeeService(db).update(employee_id, item.model_dump(exclude_unset=True))

@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(employee_id: int, db: Session = Depends(get_db)):
    EmployeeService(db).delete(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# Skill evaluations of an employee
@router.get("/{employee_id}/skills", response_model=List[EmployeeSkillOut])
def list_employee_skills(employee_id: int, db: Session = Depends(get_db)):
    return EmployeeSkillService(db).list_for_employee(employee_id)

@router.post("/{employee_id}/skills", response_model=EmployeeSkillOut, status_code=status.HTTP_201_CREATED)
def create_employee_skill(
    employee_id: int,
    item: EmployeeSkillIn,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return EmployeeSkillService(db).create_for_employee(employee_id, item.model_dump(), evaluated_by=user.id)
