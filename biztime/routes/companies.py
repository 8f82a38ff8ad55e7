from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from biztime.core.db import get_db
from biztime.core.errors import ApiError
from biztime.schemas.common_schema import DeletedResponse
from biztime.schemas.company_schema import (
    CompanyCreate,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyResponse,
    CompanyUpdate,
)
from biztime.services import company_service

router = APIRouter()


@router.get("", response_model=CompanyListResponse)
def list_companies_route(db: Session = Depends(get_db)):
    return {"companies": company_service.list_companies(db)}


@router.get("/{code}", response_model=CompanyDetailResponse)
def get_company_route(code: str, db: Session = Depends(get_db)):
    company = company_service.get_company_detail(db, code)
    if company is None:
        raise ApiError(f"Can't find user with code of {code}", 404)
    return {"company": company}


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
def create_company_route(payload: CompanyCreate, db: Session = Depends(get_db)):
    return {"company": company_service.create_company(db, payload)}


@router.patch("/{code}", response_model=CompanyResponse)
def update_company_route(code: str, payload: CompanyUpdate, db: Session = Depends(get_db)):
    company = company_service.update_company(db, code, payload)
    if company is None:
        raise ApiError(f"Can't update company with code of {code}", 404)
    return {"company": company}


@router.delete("/{code}", response_model=DeletedResponse)
def delete_company_route(code: str, db: Session = Depends(get_db)):
    # Deleting an unknown code still reports success
    company_service.delete_company(db, code)
    return DeletedResponse()
