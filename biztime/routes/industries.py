from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from biztime.core.db import get_db
from biztime.schemas.industry_schema import (
    CompanyIndustryCreate,
    CompanyIndustryResponse,
    IndustryCreate,
    IndustryListResponse,
    IndustryResponse,
)
from biztime.services import industry_service

router = APIRouter()


@router.get("", response_model=IndustryListResponse)
def list_industries_route(db: Session = Depends(get_db)):
    return {"industries": industry_service.list_industries(db)}


@router.post("", response_model=IndustryResponse, status_code=status.HTTP_201_CREATED)
def create_industry_route(payload: IndustryCreate, db: Session = Depends(get_db)):
    return {"industry": industry_service.create_industry(db, payload)}


@router.post(
    "/{comp_code}",
    response_model=CompanyIndustryResponse,
    status_code=status.HTTP_201_CREATED,
)
def link_company_route(
    comp_code: str, payload: CompanyIndustryCreate, db: Session = Depends(get_db)
):
    return {"companies_industries": industry_service.link_company(db, comp_code, payload)}
