import logging
from typing import Optional

from sqlalchemy.orm import Session

from biztime.core.slug import slugify_code
from biztime.models.company_model import Company
from biztime.models.industry_model import CompanyIndustry, Industry
from biztime.models.invoice_model import Invoice
from biztime.schemas.company_schema import CompanyCreate, CompanyDetail, CompanyUpdate

logger = logging.getLogger(__name__)


def list_companies(db: Session):
    return db.query(Company).all()


def get_company(db: Session, code: str) -> Optional[Company]:
    return db.query(Company).filter(Company.code == code).first()


def get_company_detail(db: Session, code: str) -> Optional[CompanyDetail]:
    """
    Company row plus the ids of its invoices and the names of its industries.

    Three sequential queries; the industry lookup is an outer join from the
    company so a company without links still resolves to an empty list.
    """
    company = get_company(db, code)
    if company is None:
        return None

    invoice_rows = (
        db.query(Invoice.id)
        .filter(Invoice.comp_code == code)
        .order_by(Invoice.id)
        .all()
    )

    industry_rows = (
        db.query(Industry.industry)
        .select_from(Company)
        .outerjoin(CompanyIndustry, CompanyIndustry.comp_code == Company.code)
        .outerjoin(Industry, Industry.code == CompanyIndustry.ind_code)
        .filter(Company.code == code)
        .all()
    )

    return CompanyDetail(
        code=company.code,
        name=company.name,
        description=company.description,
        invoices=[row.id for row in invoice_rows],
        industries=[row.industry for row in industry_rows if row.industry is not None],
    )


def create_company(db: Session, payload: CompanyCreate):
    company = Company(
        code=slugify_code(payload.code),
        name=payload.name,
        description=payload.description,
    )
    db.add(company)
    db.commit()
    db.refresh(company)
    logger.info("Created company %s", company.code)
    return company


def update_company(db: Session, code: str, payload: CompanyUpdate) -> Optional[Company]:
    company = get_company(db, code)
    if not company:
        return None

    # code is the identity; only name/description are editable
    company.name = payload.name
    company.description = payload.description

    db.commit()
    db.refresh(company)
    logger.info("Updated company %s", code)
    return company


def delete_company(db: Session, code: str) -> int:
    """Delete by code. Returns the number of rows removed (0 is not an error)."""
    deleted = (
        db.query(Company)
        .filter(Company.code == code)
        .delete(synchronize_session=False)
    )
    db.commit()
    logger.info("Deleted company %s (%d row(s))", code, deleted)
    return deleted
