"""Contact CRUD, birthday validation and upcoming-birthday lookup."""
import calendar
import logging
from datetime import date, datetime, timedelta
from typing import Any, Optional

import pytz
from sqlalchemy.orm import Session

from planner.errors import ValidationError
from planner.models.contact import Contact
from planner.models.user import User

logger = logging.getLogger(__name__)

# February allows 29 since the birth year is optional
DAYS_IN_MONTH = [31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

MIN_BIRTHDAY_WINDOW_DAYS = 7
MAX_BIRTHDAY_WINDOW_DAYS = 365


def validate_birthday(
    birth_month: Optional[int],
    birth_day: Optional[int],
    birth_year: Optional[int] = None,
) -> tuple[Optional[int], Optional[int], Optional[int]]:
    """Check a (month, day, year) triple and return it unchanged if valid.

    Month and day must be given together or both omitted. Without them the
    year is dropped.
    """
    if birth_month is None and birth_day is None:
        return None, None, None
    if birth_month is None or birth_day is None:
        raise ValidationError("birth_month and birth_day must both be provided together, or both omitted")

    if not 1 <= birth_month <= 12:
        raise ValidationError("birth_month must be between 1 and 12")
    if not 1 <= birth_day <= 31:
        raise ValidationError("birth_day must be between 1 and 31")
    max_day = DAYS_IN_MONTH[birth_month - 1]
    if birth_day > max_day:
        raise ValidationError(f"Invalid day for month {birth_month}. Maximum days: {max_day}")

    if birth_year is not None:
        current_year = date.today().year
        if not 1900 <= birth_year <= current_year:
            raise ValidationError(f"birth_year must be between 1900 and {current_year}")

    return birth_month, birth_day, birth_year


def create_contact(db: Session, owner: User, **fields: Any) -> Contact:
    month, day, year = validate_birthday(
        fields.pop("birth_month", None), fields.pop("birth_day", None), fields.pop("birth_year", None),
    )
    contact = Contact(user_id=owner.user_id, birth_month=month, birth_day=day, birth_year=year, **fields)
    db.add(contact)
    db.commit()
    db.refresh(contact)
    logger.info("Created contact %s for user %s", contact.contact_id, owner.user_id)
    return contact


def list_contacts(db: Session, owner: User) -> list[Contact]:
    return (
        db.query(Contact)
        .filter(Contact.user_id == owner.user_id)
        .order_by(Contact.last_name, Contact.first_name)
        .all()
    )


def update_contact(db: Session, contact: Contact, updates: dict[str, Any]) -> Contact:
    """Apply a partial update. Birthday fields are merged with stored values and revalidated.

    Sending both ``birth_month`` and ``birth_day`` as null clears the birthday.
    """
    birthday_keys = {"birth_month", "birth_day", "birth_year"}
    birthday_updates = {k: updates.pop(k) for k in list(updates) if k in birthday_keys}

    if birthday_updates:
        clearing = (
            "birth_month" in birthday_updates and birthday_updates["birth_month"] is None
            and "birth_day" in birthday_updates and birthday_updates["birth_day"] is None
        )
        if clearing:
            contact.birth_month = contact.birth_day = contact.birth_year = None
        else:
            month, day, year = validate_birthday(
                birthday_updates.get("birth_month", contact.birth_month),
                birthday_updates.get("birth_day", contact.birth_day),
                birthday_updates.get("birth_year", contact.birth_year),
            )
            contact.birth_month, contact.birth_day, contact.birth_year = month, day, year

    for field, value in updates.items():
        if value is None:
            raise ValidationError(f"{field} cannot be null")
        setattr(contact, field, value)

    db.commit()
    db.refresh(contact)
    logger.info("Updated contact %s", contact.contact_id)
    return contact


def _birthday_in(year: int, month: int, day: int) -> date:
    if month == 2 and day == 29 and not calendar.isleap(year):
        return date(year, 2, 28)
    return date(year, month, day)


def next_birthday(month: int, day: int, today: date) -> date:
    """The next occurrence of month/day on or after ``today``."""
    candidate = _birthday_in(today.year, month, day)
    if candidate < today:
        candidate = _birthday_in(today.year + 1, month, day)
    return candidate


def local_today(user: User) -> date:
    """Today's date in the user's own timezone."""
    tz = pytz.timezone(user.default_timezone or "UTC")
    return datetime.now(pytz.utc).astimezone(tz).date()


def resolve_birthday_window(
    days: Optional[int] = None,
    weeks: Optional[int] = None,
    months: Optional[int] = None,
    years: Optional[int] = None,
) -> int:
    """Turn the first given unit into days (months ≈ 30, years ≈ 365) and bound-check it."""
    if days is not None:
        days_ahead = days
    elif weeks is not None:
        days_ahead = weeks * 7
    elif months is not None:
        days_ahead = months * 30
    elif years is not None:
        days_ahead = years * 365
    else:
        days_ahead = 30

    if days_ahead < MIN_BIRTHDAY_WINDOW_DAYS:
        raise ValidationError(
            f"Range must be at least {MIN_BIRTHDAY_WINDOW_DAYS} days (1 week). Provided: {days_ahead} days"
        )
    if days_ahead > MAX_BIRTHDAY_WINDOW_DAYS:
        raise ValidationError(
            f"Range must be at most {MAX_BIRTHDAY_WINDOW_DAYS} days (1 year). Provided: {days_ahead} days"
        )
    return days_ahead


def upcoming_birthdays(
    db: Session,
    owner: User,
    days_ahead: int,
    today: Optional[date] = None,
) -> list[dict[str, Any]]:
    """Contacts whose next birthday is within ``days_ahead`` days, soonest first."""
    today = today or local_today(owner)
    horizon = today + timedelta(days=days_ahead)

    contacts = (
        db.query(Contact)
        .filter(
            Contact.user_id == owner.user_id,
            Contact.birth_month.isnot(None),
            Contact.birth_day.isnot(None),
        )
        .all()
    )

    upcoming = []
    for contact in contacts:
        upcoming_date = next_birthday(contact.birth_month, contact.birth_day, today)
        if upcoming_date > horizon:
            continue
        upcoming.append({
            "contact": contact,
            "next_birthday": upcoming_date,
            "days_until": (upcoming_date - today).days,
            "turning": upcoming_date.year - contact.birth_year if contact.birth_year else None,
        })

    upcoming.sort(key=lambda item: (item["days_until"], item["contact"].last_name))
    return upcoming
