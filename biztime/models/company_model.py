from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship
from biztime.core.db import Base


class Company(Base):
    __tablename__ = "companies"

    # Slug code, immutable once created
    code = Column(String, primary_key=True)
    name = Column(String, nullable=False, unique=True)
    description = Column(Text, nullable=True)

    # Relationship: one-to-many (companies → invoices)
    invoices = relationship("Invoice", back_populates="company", passive_deletes=True)

    # Relationship: many-to-many through companies_industries
    industry_links = relationship(
        "CompanyIndustry", back_populates="company", passive_deletes=True
    )
