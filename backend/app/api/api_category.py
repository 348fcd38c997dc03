from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from typing import Optional

from .dependencies import get_db
from ..schemas.category import CategoryResponse
from ..crud import crud_category

router = APIRouter()


@router.get("/", response_model=list[CategoryResponse])
def list_categories(response: Response, db: Optional[Session] = Depends(get_db)):
    categories = crud_category.get_categories(db)
    # Cache static category list for one hour
    response.headers["Cache-Control"] = "public, max-age=3600"
    return categories
