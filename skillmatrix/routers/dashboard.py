from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..auth import get_current_user
from ..db import get_db
from ..schemas import DashboardStats, GapSummary, SkillGap, SkillsMatrixRow
from ..services.analytics import AnalyticsService, summarize_gaps
from ..utils.types import Severity

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"], dependencies=[Depends(get_current_user)])

@router.get("/stats", response_model=DashboardStats)
def dashboard_stats(db: Session = Depends(get_db)):
    return AnalyticsService(db).dashboard_stats()

# Flat joined rows; grouping by employee is left to the client
@router.get("/skills-matrix", response_model=List[SkillsMatrixRow])
def skills_matrix(db: Session = Depends(get_db)):
    return AnalyticsService(db).skills_matrix()

@router.get("/skill-gaps", response_model=List[SkillGap])
def skill_gaps(
    department: Optional[str] = Query(None, description="Only positions of this department"),
    severity: Optional[Severity] = Query(None, description="Keep only gaps of this severity"),
    db: Session = Depends(get_db),
):
    gaps = AnalyticsService(db).skill_gaps(department=department)
    if severity is not None:
        gaps = [g for g in gaps if g.severity == severity]
    return gaps

@router.get("/skill-gaps/summary", response_model=GapSummary)
def skill_gaps_summary(
    department: Optional[str] = Query(None, description="Only positions of this department"),
    db: Session = Depends(get_db),
):
    return summarize_gaps(AnalyticsService(db).skill_gaps(department=department))
