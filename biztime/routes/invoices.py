from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from biztime.core.db import get_db
from biztime.core.errors import ApiError
from biztime.schemas.common_schema import DeletedResponse
from biztime.schemas.invoice_schema import (
    InvoiceCreate,
    InvoiceListResponse,
    InvoiceResponse,
    InvoiceUpdate,
)
from biztime.services.invoice_service import InvoiceChangedError, invoice_service

router = APIRouter()


@router.get("", response_model=InvoiceListResponse)
def list_invoices(db: Session = Depends(get_db)):
    return {"invoices": invoice_service.get_all_invoices(db)}


@router.get("/{invoice_id}", response_model=InvoiceResponse)
def get_invoice(invoice_id: int, db: Session = Depends(get_db)):
    invoice = invoice_service.get_invoice(db, invoice_id)
    if not invoice:
        raise ApiError(f"Can't find user with id of {invoice_id}", 404)
    return {"invoice": invoice}


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
def create_invoice(payload: InvoiceCreate, db: Session = Depends(get_db)):
    return {"invoice": invoice_service.create_invoice(db, payload)}


@router.patch("/{invoice_id}", response_model=InvoiceResponse)
def update_invoice(invoice_id: int, payload: InvoiceUpdate, db: Session = Depends(get_db)):
    try:
        invoice = invoice_service.update_invoice(db, invoice_id, payload)
    except InvoiceChangedError as exc:
        raise ApiError(str(exc), 409)
    if not invoice:
        raise ApiError(f"Can't update invoice with id of {invoice_id}", 404)
    return {"invoice": invoice}


@router.delete("/{invoice_id}", response_model=DeletedResponse)
def delete_invoice(invoice_id: int, db: Session = Depends(get_db)):
    invoice_service.delete_invoice(db, invoice_id)
    return DeletedResponse()
