# customer_api/api/customers.py

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel
from sqlalchemy.orm import Session
from customer_api.api.deps import get_current_user, get_settings
from customer_api.config import Settings
from customer_api.core.customers import (
    create_customer,
    delete_customer,
    list_customers,
    update_customer,
)
from customer_api.core.security import TokenClaims
from customer_api.database import get_db


# Every route here requires a valid bearer token
router = APIRouter(
    prefix="/customers",
    tags=["customers"],
    dependencies=[Depends(get_current_user)],
)


class CustomerRequest(BaseModel):
    """
    Body for creating or replacing a customer.
    Fields are optional here so that missing ones are reported as 400.
    """
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    company: str | None = None


@router.post("", response_class=PlainTextResponse)
def add_customer(
    req: CustomerRequest,
    caller: TokenClaims = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    create_customer(db, caller.user_id, req.name, req.email, req.phone, req.company)
    return "Customer added successfully"


@router.get("")
def get_customers(
    caller: TokenClaims = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return [customer.to_dict() for customer in list_customers(db, caller.user_id)]


@router.put("/{customer_id}", response_class=PlainTextResponse)
def edit_customer(
    customer_id: int,
    req: CustomerRequest,
    caller: TokenClaims = Depends(get_current_user),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    update_customer(
        db,
        caller.user_id,
        customer_id,
        req.name,
        req.email,
        req.phone,
        req.company,
        report_missing=settings.report_missing_customers,
    )
    return "Customer updated successfully"


@router.delete("/{customer_id}", response_class=PlainTextResponse)
def remove_customer(
    customer_id: int,
    caller: TokenClaims = Depends(get_current_user),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    delete_customer(
        db,
        caller.user_id,
        customer_id,
        report_missing=settings.report_missing_customers,
    )
    return "Customer deleted successfully"
