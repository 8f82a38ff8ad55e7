from pydantic import BaseModel, ConfigDict
from typing import List


class IndustryCreate(BaseModel):
    code: str
    industry: str


class IndustryOut(BaseModel):
    code: str
    industry: str

    model_config = ConfigDict(from_attributes=True)


class CompanyIndustryCreate(BaseModel):
    ind_code: str


class CompanyIndustryOut(BaseModel):
    comp_code: str
    ind_code: str

    model_config = ConfigDict(from_attributes=True)


class IndustryListResponse(BaseModel):
    industries: List[IndustryOut]


class IndustryResponse(BaseModel):
    industry: IndustryOut


class CompanyIndustryResponse(BaseModel):
    companies_industries: CompanyIndustryOut
