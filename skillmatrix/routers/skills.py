from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ..auth import get_current_user
from ..db import get_db
from ..schemas import SkillIn, SkillOut, SkillUpdate
from ..services.crud import SkillService

router = APIRouter(prefix="/api/skills", tags=["skills"], dependencies=[Depends(get_current_user)])

@router.get("", response_model=List[SkillOut])
def list_skills(db: Session = Depends(get_db)):
    return SkillService(db).list()

@router.get("/{skill_id}", response_model=SkillOut)
def get_skill(skill_id: int, db: Session = Depends(get_db)):
    return SkillService(db).get(skill_id)

@router.post("", response_model=SkillOut, status_code=status.HTTP_201_CREATED)
def create_skill(item: SkillIn, db: Session = Depends(get_db)):
    return SkillService(db).create(item.model_dump())

@router.put("/{skill_id}", response_model=SkillOut)
def update_skill(skill_id: int, item: SkillUpdate, db: Session = Depends(get_db)):
    return SkillService(db).update(skill_id, item.model_dump(exclude_unset=True))

# Also removes the skill's position requirements and evaluations
@router.delete("/{skill_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_skill(skill_id: int, db: Session = Depends(get_db)):
    SkillService(db).delete(skill_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
