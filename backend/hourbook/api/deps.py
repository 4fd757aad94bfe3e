from fastapi import Depends
from sqlalchemy.orm import Session

from hourbook.db import get_db
from hourbook.repository import PayRepository, SqlAlchemyPayRepository


def get_repository(db: Session = Depends(get_db)) -> PayRepository:
    return SqlAlchemyPayRepository(db)
