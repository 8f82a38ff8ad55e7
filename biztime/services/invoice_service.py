import logging
from datetime import date
from typing import List, Optional

from sqlalchemy import update
from sqlalchemy.orm import Session

from biztime.models.invoice_model import Invoice
from biztime.schemas.invoice_schema import InvoiceCreate, InvoiceUpdate

logger = logging.getLogger(__name__)

# Concurrent PATCHes on one invoice before giving up
MAX_UPDATE_ATTEMPTS = 3


class InvoiceChangedError(Exception):
    """The invoice kept changing underneath an update."""

    def __init__(self, invoice_id: int):
        super().__init__(f"Invoice {invoice_id} changed during update")
        self.invoice_id = invoice_id


def derive_paid_date(
    curr_paid: bool,
    new_paid: bool,
    curr_paid_date: Optional[date],
    today: Optional[date] = None,
) -> Optional[date]:
    """
    paid_date after an update that sets paid to new_paid.

    unpaid -> paid : today
    paid -> unpaid : None
    otherwise      : keep whatever is stored
    """
    if not curr_paid and new_paid:
        return today or date.today()
    if curr_paid and not new_paid:
        return None
    return curr_paid_date


class InvoiceService:
    """
    Data-access layer for invoices.

    Routes decide what a missing row means; the service only reports it
    by returning None.
    """

    # ------------------------------------------------------------
    # Fetch all invoices
    # ------------------------------------------------------------
    def get_all_invoices(self, db: Session) -> List[Invoice]:
        return db.query(Invoice).all()

    # ------------------------------------------------------------
    # Fetch single invoice by ID
    # ------------------------------------------------------------
    def get_invoice(self, db: Session, invoice_id: int) -> Optional[Invoice]:
        return db.query(Invoice).filter(Invoice.id == invoice_id).first()

    # ------------------------------------------------------------
    # Create (paid / add_date defaults come from the model)
    # ------------------------------------------------------------
    def create_invoice(self, db: Session, payload: InvoiceCreate) -> Invoice:
        invoice = Invoice(comp_code=payload.comp_code, amt=payload.amt)
        db.add(invoice)
        db.commit()
        db.refresh(invoice)
        logger.info("Created invoice %s for %s", invoice.id, invoice.comp_code)
        return invoice

    # ------------------------------------------------------------
    # Update amt / paid, deriving paid_date
    # ------------------------------------------------------------
    def update_invoice(
        self,
        db: Session,
        invoice_id: int,
        payload: InvoiceUpdate,
    ) -> Optional[Invoice]:
        """
        Fetch, derive paid_date and write back.

        The read locks the row where the dialect supports FOR UPDATE. The
        write is also conditional on paid and paid_date still holding the
        values that were read, so a PATCH that lands in between (SQLite takes
        no read lock) makes this one re-read and derive again instead of
        writing a paid_date computed from a stale row.
        """
        for _ in range(MAX_UPDATE_ATTEMPTS):
            invoice = (
                db.query(Invoice)
                .filter(Invoice.id == invoice_id)
                .with_for_update()
                .populate_existing()
                .first()
            )
            if invoice is None:
                db.rollback()
                return None

            seen_paid, seen_paid_date = invoice.paid, invoice.paid_date
            paid_date = derive_paid_date(seen_paid, payload.paid, seen_paid_date)
            logger.debug(
                "Invoice %s paid %s -> %s, paid_date %s -> %s",
                invoice_id, seen_paid, payload.paid, seen_paid_date, paid_date,
            )

            result = db.execute(
                update(Invoice)
                .where(
                    Invoice.id == invoice_id,
                    Invoice.paid == seen_paid,
                    Invoice.paid_date == seen_paid_date,
                )
                .values(amt=payload.amt, paid=payload.paid, paid_date=paid_date)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 1:
                db.commit()
                logger.info("Updated invoice %s", invoice_id)
                return self.get_invoice(db, invoice_id)

            logger.info("Invoice %s changed while updating, re-reading", invoice_id)
            db.rollback()

        raise InvoiceChangedError(invoice_id)

    # ------------------------------------------------------------
    # Delete by ID (missing ids are a no-op)
    # ------------------------------------------------------------
    def delete_invoice(self, db: Session, invoice_id: int) -> int:
        deleted = (
            db.query(Invoice)
            .filter(Invoice.id == invoice_id)
            .delete(synchronize_session=False)
        )
        db.commit()
        logger.info("Deleted invoice %s (%d row(s))", invoice_id, deleted)
        return deleted


invoice_service = InvoiceService()
