"""Skill persistence helpers."""

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from jobboard.db import Skill, job_skills
from jobboard.repositories.base import (
    LIKE_ESCAPE,
    SQLAlchemyRepository,
    contains_pattern,
)


class SkillRepository(SQLAlchemyRepository[Skill]):
    """Encapsulates skill queries."""

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def find_by_name(self, name: str) -> Optional[Skill]:
        return (
            self.session.query(Skill)
            .filter(func.lower(Skill.name) == name.strip().lower())
            .first()
        )

    def get_or_create(self, name: str) -> Skill:
        skill = self.find_by_name(name)
        if skill is None:
            skill = Skill(name=name.strip())
            self.add(skill)
            self.flush()
        return skill

    def suggest(self, text: str, limit: int) -> Sequence[tuple[Skill, int]]:
        """Skills whose name or category contains ``text``, with their job counts."""
        like = contains_pattern(text)
        usage = func.count(job_skills.c.job_id)
        return (
            self.session.query(Skill, usage)
            .outerjoin(job_skills, job_skills.c.skill_id == Skill.id)
            .filter(
                or_(
                    Skill.name.ilike(like, escape=LIKE_ESCAPE),
                    Skill.category.ilike(like, escape=LIKE_ESCAPE),
                )
            )
            .group_by(Skill.id)
            .order_by(Skill.name.asc())
            .limit(limit)
            .all()
        )
