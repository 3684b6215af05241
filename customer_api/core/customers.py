# customer_api/core/customers.py

import logging
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from customer_api.core.errors import Conflict, NotFound, StorageError, ValidationError
from customer_api.models.customer import Customer


logger = logging.getLogger(__name__)


# -------------------------------
# Customer Repository
# -------------------------------
# Every query filters on the owning user id, so a caller can never read or
# modify another user's rows even when it knows their ids.

def _require_fields(name: str | None, email: str | None, phone: str | None):
    if not name or not email or not phone:
        raise ValidationError()


def create_customer(
    db: Session,
    owner_id: int,
    name: str | None,
    email: str | None,
    phone: str | None,
    company: str | None = None,
) -> Customer:
    _require_fields(name, email, phone)

    customer = Customer(name=name, email=email, phone=phone, company=company, user_id=owner_id)
    try:
        db.add(customer)
        db.commit()
        db.refresh(customer)
    except IntegrityError:
        db.rollback()
        raise Conflict("Customer email already exists")
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageError("Error adding customer") from e

    logger.info("User %s added customer %s", owner_id, customer.id)
    return customer


def list_customers(db: Session, owner_id: int) -> list[Customer]:
    try:
        return (
            db.query(Customer)
            .filter(Customer.user_id == owner_id)
            .order_by(Customer.id)
            .all()
        )
    except SQLAlchemyError as e:
        raise StorageError("Error retrieving customers") from e


def update_customer(
    db: Session,
    owner_id: int,
    customer_id: int,
    name: str | None,
    email: str | None,
    phone: str | None,
    company: str | None = None,
    report_missing: bool = False,
) -> int:
    """
    Replaces the contact fields of one of the caller's customers.
    Returns the number of rows changed. Zero is a silent success unless
    report_missing is set, in which case NotFound is raised.
    """
    _require_fields(name, email, phone)

    try:
        count = (
            db.query(Customer)
            .filter(Customer.id == customer_id, Customer.user_id == owner_id)
            .update(
                {
                    Customer.name: name,
                    Customer.email: email,
                    Customer.phone: phone,
                    Customer.company: company,
                },
                synchronize_session=False,
            )
        )
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict("Customer email already exists")
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageError("Error updating customer") from e

    if count == 0:
        logger.warning("User %s updated customer %s: no matching row", owner_id, customer_id)
        if report_missing:
            raise NotFound("Customer not found")
    return count


def delete_customer(
    db: Session,
    owner_id: int,
    customer_id: int,
    report_missing: bool = False,
) -> int:
    try:
        count = (
            db.query(Customer)
            .filter(Customer.id == customer_id, Customer.user_id == owner_id)
            .delete(synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageError("Error deleting customer") from e

    if count == 0:
        logger.warning("User %s deleted customer %s: no matching row", owner_id, customer_id)
        if report_missing:
            raise NotFound("Customer not found")
    return count
