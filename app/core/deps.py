# app/core/deps.py

from fastapi import Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.repositories.base import CrmRepository
from app.repositories.sql import SqlAlchemyRepository


def get_repository(db: Session = Depends(get_db)) -> CrmRepository:
    return SqlAlchemyRepository(db)
