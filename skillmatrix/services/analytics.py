import logging
from collections import Counter
from typing import Iterable, List, Optional

from sqlalchemy import text
from sqlalchemy.orm import Session

from ..schemas import CategoryCount, DashboardStats, GapSummary, SkillGap, SkillGapCount, SkillsMatrixRow
from .severity import classify_gap

logger = logging.getLogger(__name__)

UNASSIGNED_DEPARTMENT = "Unassigned"


class AnalyticsService:
    """
    Read-only views derived from current store state.
    Nothing is memoized; every call runs its SQL again.
    """

    def __init__(self, db: Session):
        self.db = db

    def dashboard_stats(self) -> DashboardStats:
        totals = self.db.execute(text("""
            SELECT
              (SELECT COUNT(*) FROM employees WHERE is_active = :active) AS total_employees,
              (SELECT COUNT(*) FROM skills)                              AS total_skills,
              (SELECT COUNT(*) FROM positions)                           AS total_positions
        """), {"active": True}).mappings().one()

        categories = self.db.execute(text("""
            SELECT category, COUNT(*) AS count
            FROM skills
            GROUP BY category
            ORDER BY category ASC;
        """)).mappings().all()

        return DashboardStats(
            **totals,
            skill_categories=[CategoryCount(**row) for row in categories],
        )

    def skills_matrix(self) -> List[SkillsMatrixRow]:
        # One row per (active employee, evaluated skill); employees without
        # evaluations still appear once with null skill columns.
        rows = self.db.execute(text("""
            SELECT
              e.id                                  AS employee_id,
              e.first_name || ' ' || e.last_name    AS employee_name,
              p.title                               AS position_title,
              s.name                                AS skill_name,
              s.category                            AS skill_category,
              es.current_level                      AS current_level,
              ps.required_level                     AS required_level
            FROM employees e
            LEFT JOIN positions p        ON p.id = e.position_id
            LEFT JOIN employee_skills es ON es.employee_id = e.id
            LEFT JOIN skills s           ON s.id = es.skill_id
            LEFT JOIN position_skills ps ON ps.position_id = p.id AND ps.skill_id = s.id
            WHERE e.is_active = :active
            ORDER BY e.id ASC, s.name ASC;
        """), {"active": True}).mappings().all()
        return [SkillsMatrixRow(**row) for row in rows]

    def skill_gaps(self, department: Optional[str] = None) -> List[SkillGap]:
        # AVG skips employees with no evaluation for the skill; COALESCE only
        # kicks in when nobody contributes (e.g. the position is vacant).
        department_filter = "WHERE p.department = :department" if department is not None else ""
        sql = text(f"""
            SELECT
              p.id                                                   AS position_id,
              p.title                                                AS position_title,
              p.department                                           AS department,
              s.id                                                   AS skill_id,
              s.name                                                 AS skill_name,
              s.category                                             AS skill_category,
              ps.required_level                                      AS required_level,
              COALESCE(AVG(es.current_level), 0)                     AS average_current_level,
              ps.required_level - COALESCE(AVG(es.current_level), 0) AS gap
            FROM positions p
            JOIN position_skills ps      ON ps.position_id = p.id
            JOIN skills s                ON s.id = ps.skill_id
            LEFT JOIN employees e        ON e.position_id = p.id AND e.is_active = :active
            LEFT JOIN employee_skills es ON es.employee_id = e.id AND es.skill_id = s.id
            {department_filter}
            GROUP BY p.id, p.title, p.department, s.id, s.name, s.category, ps.required_level
            HAVING ps.required_level - COALESCE(AVG(es.current_level), 0) > 0
            ORDER BY gap DESC, p.title ASC, s.name ASC;
        """)
        params = {"active": True}
        if department is not None:
            params["department"] = department

        rows = self.db.execute(sql, params).mappings().all()
        logger.debug("Skill gaps: %d rows (department=%s)", len(rows), department)
        return [SkillGap(**row) for row in rows]


def summarize_gaps(gaps: Iterable[SkillGap], top: int = 5) -> GapSummary:
    """Headline figures over already-retrieved gap rows."""
    gaps = list(gaps)
    severities = Counter(classify_gap(g.gap) for g in gaps)
    by_department = Counter(g.department or UNASSIGNED_DEPARTMENT for g in gaps)
    by_skill = Counter(g.skill_name for g in gaps)

    return GapSummary(
        total_gaps=len(gaps),
        critical_gaps=severities["critical"],
        moderate_gaps=severities["moderate"],
        low_gaps=severities["low"],
        average_gap=sum(g.gap for g in gaps) / len(gaps) if gaps else 0.0,
        gaps_by_department=dict(by_department),
        top_skill_gaps=[SkillGapCount(skill_name=name, count=n) for name, n in by_skill.most_common(top)],
    )
