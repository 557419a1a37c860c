# boekhouding/api/transactions.py
from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool

from boekhouding.api.body import read_json_object
from boekhouding.api.errors import error_response
from boekhouding.config import Settings, get_settings
from boekhouding.logging_setup import get_logger
from boekhouding.models.transaction import TransactionIn
from boekhouding.services.ledger import LedgerWrite, TransactionRepository, get_ledger
from boekhouding.services.summary import calculate_summary

log = get_logger(__name__)

router = APIRouter(prefix="/api/transactions", tags=["transactions"])

WRITE_FAILED = "Could not save transactions"


def _write_failed(result: LedgerWrite, settings: Settings) -> bool:
    """
    A failed ledger write is only logged unless strict_writes is on; the
    client then still gets a success response for data that never hit disk.
    """
    if result.saved:
        return False
    if settings.strict_writes:
        return True
    log.warning("Ledger write failed, answering success anyway (strict_writes is off)")
    return False


@router.get("")
def list_transactions(ledger: TransactionRepository = Depends(get_ledger)):
    items = ledger.load_all()
    return {
        "transactions": [t.to_json() for t in items],
        "summary": calculate_summary(items).to_json(),
    }


@router.post("", status_code=201)
async def create_transaction(
    request: Request,
    ledger: TransactionRepository = Depends(get_ledger),
    settings: Settings = Depends(get_settings),
):
    payload = await read_json_object(request, settings.max_body_bytes)
    tx = TransactionIn.model_validate(payload).to_transaction()

    result = await run_in_threadpool(ledger.append, tx)
    if _write_failed(result, settings):
        return error_response(500, WRITE_FAILED)

    log.info("Transaction %s added: %s %.2f", tx.id, tx.type, tx.amount)
    return {
        "ok": True,
        "transaction": tx.to_json(),
        "summary": calculate_summary(result.transactions).to_json(),
    }


@router.delete("/{tx_id}")
def delete_transaction(
    tx_id: str,
    ledger: TransactionRepository = Depends(get_ledger),
    settings: Settings = Depends(get_settings),
):
    result = ledger.remove_by_id(tx_id)
    if _write_failed(result, settings):
        return error_response(500, WRITE_FAILED)
    return {"ok": True, "summary": calculate_summary(result.transactions).to_json()}
