from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ..auth import get_current_user
from ..db import get_db
from ..schemas import PositionIn, PositionOut, PositionUpdate, PositionSkillIn, PositionSkillOut
from ..services.crud import PositionService, PositionSkillService

router = APIRouter(prefix="/api/positions", tags=["positions"], dependencies=[Depends(get_current_user)])

@router.get("", response_model=List[PositionOut])
def list_positions(db: Session = Depends(get_db)):
    return PositionService(db).list()

@router.get("/{position_id}", response_model=PositionOut)
def get_position(position_id: int, db: Session = Depends(get_db)):
    return PositionService(db).get(position_id)

@router.post("", response_model=PositionOut, status_code=status.HTTP_201_CREATED)
def create_position(item: PositionIn, db: Session = Depends(get_db)):
    return PositionService(db).create(item.model_dump())

@router.put("/{position_id}", response_model=PositionOut)
def update_position(position_id: int, item: PositionUpdate, db: Session = Depends(get_db)):
    return PositionService(db).update(position_id, item.model_dump(exclude_unset=True))

# Employees holding the position are kept and left unassigned
@router.delete("/{position_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_position(position_id: int, db: Session = Depends(get_db)):
    PositionService(db).delete(position_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# Required skills of a position
@router.get("/{position_id}/skills", response_model=List[PositionSkillOut])
def list_position_skills(position_id: int, db: Session = Depends(get_db)):
    return PositionSkillService(db).list_for_position(position_id)

@router.post("/{position_id}/skills", response_model=PositionSkillOut, status_code=status.HTTP_201_CREATED)
def create_position_skill(position_id: int, item: PositionSkillIn, db: Session = Depends(get_db)):
    return PositionSkillService(db).create_for_position(position_id, item.model_dump())

@router.delete("/{position_id}/skills/{skill_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_position_skill(position_id: int, skill_id: int, db: Session = Depends(get_db)):
    PositionSkillService(db).delete_for_position(position_id, skill_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
