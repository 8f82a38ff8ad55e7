from pydantic import BaseModel, ConfigDict
from typing import List, Optional


class CompanyCreate(BaseModel):
    code: str
    name: str
    description: Optional[str] = None


class CompanyUpdate(BaseModel):
    name: str
    description: Optional[str] = None


class CompanyOut(BaseModel):
    code: str
    name: str
    description: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class CompanyDetail(CompanyOut):
    # Read-time projections, not stored on the row
    invoices: List[int] = []
    industries: List[str] = []


# ============================================================
# Response envelopes
# ============================================================
class CompanyListResponse(BaseModel):
    companies: List[CompanyOut]


class CompanyResponse(BaseModel):
    company: CompanyOut


class CompanyDetailResponse(BaseModel):
    company: CompanyDetail
