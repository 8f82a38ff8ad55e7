import logging

from sqlalchemy.orm import Session

from biztime.core.slug import slugify_code
from biztime.models.industry_model import CompanyIndustry, Industry
from biztime.schemas.industry_schema import CompanyIndustryCreate, IndustryCreate

logger = logging.getLogger(__name__)


def list_industries(db: Session):
    return db.query(Industry).all()


def create_industry(db: Session, payload: IndustryCreate):
    industry = Industry(code=slugify_code(payload.code), industry=payload.industry)
    db.add(industry)
    db.commit()
    db.refresh(industry)
    logger.info("Created industry %s", industry.code)
    return industry


def link_company(db: Session, comp_code: str, payload: CompanyIndustryCreate):
    """Associate an industry with a company. Neither side is looked up first."""
    link = CompanyIndustry(comp_code=comp_code, ind_code=payload.ind_code)
    db.add(link)
    db.commit()
    db.refresh(link)
    logger.info("Linked company %s to industry %s", comp_code, payload.ind_code)
    return link
