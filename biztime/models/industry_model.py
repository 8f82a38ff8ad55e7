from sqlalchemy import Column, ForeignKey, String
from sqlalchemy.orm import relationship
from biztime.core.db import Base


class Industry(Base):
    __tablename__ = "industries"

    code = Column(String, primary_key=True)
    industry = Column(String, nullable=False, unique=True)

    company_links = relationship(
        "CompanyIndustry", back_populates="industry", passive_deletes=True
    )


class CompanyIndustry(Base):
    """Join row between a company and an industry. The pair is the identity."""

    __tablename__ = "companies_industries"

    comp_code = Column(
        String,
        ForeignKey("companies.code", ondelete="CASCADE"),
        primary_key=True,
    )
    ind_code = Column(
        String,
        ForeignKey("industries.code", ondelete="CASCADE"),
        primary_key=True,
    )

    company = relationship("Company", back_populates="industry_links")
    industry = relationship("Industry", back_populates="company_links")
