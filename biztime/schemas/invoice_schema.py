from pydantic import BaseModel, ConfigDict
from typing import List, Optional
from datetime import date


# ============================================================
# Create Schema
# ============================================================
class InvoiceCreate(BaseModel):
    comp_code: str
    amt: float


# ============================================================
# Update Schema
# ============================================================
class InvoiceUpdate(BaseModel):
    amt: float
    paid: bool


# ============================================================
# OUT Schema
# ============================================================
class InvoiceOut(BaseModel):
    id: int
    comp_code: str
    amt: float
    paid: bool
    add_date: date
    paid_date: Optional[date] = None

    model_config = ConfigDict(from_attributes=True)


# ============================================================
# Response envelopes
# ============================================================
class InvoiceListResponse(BaseModel):
    invoices: List[InvoiceOut]


class InvoiceResponse(BaseModel):
    invoice: InvoiceOut
