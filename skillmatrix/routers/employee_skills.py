from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ..auth import get_current_user
from ..db import get_db
from ..schemas import EmployeeSkillOut, EmployeeSkillUpdate
from ..services.crud import EmployeeSkillService

router = APIRouter(prefix="/api/employee-skills", tags=["employee-skills"], dependencies=[Depends(get_current_user)])

@router.put("/{evaluation_id}", response_model=EmployeeSkillOut)
def update_employee_skill(evaluation_id: int, item: EmployeeSkillUpdate, db: Session = Depends(get_db)):
    return EmployeeSkillService(db).update(evaluation_id, item.model_dump(exclude_unset=True))

@router.delete("/{evaluation_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee_skill(evaluation_id: int, db: Session = Depends(get_db)):
    EmployeeSkillService(db).delete(evaluation_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
