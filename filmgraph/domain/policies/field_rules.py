# filmgraph/domain/policies/field_rules.py
from __future__ import annotations

import re
from datetime import date
from typing import List, Optional

from email_validator import EmailNotValidError, validate_email

from filmgraph.common.settings import ValidationConfig, get_settings
from filmgraph.domain.entities.film import Film
from filmgraph.domain.entities.user import User
from filmgraph.domain.errors import InvalidArgumentError, Violation


def _rules(rules: Optional[ValidationConfig]) -> ValidationConfig:
    return rules if rules is not None else get_settings().validation


# ---------------- single-field checks (None == ok) ----------------

def check_title(title: Optional[str], rules: Optional[ValidationConfig] = None) -> Optional[str]:
    r = _rules(rules)
    if title is None or not title.strip():
        return "title must not be blank"
    if len(title) > r.title_max_length:
        return f"title must be at most {r.title_max_length} characters"
    return None


def check_description(description: Optional[str], rules: Optional[ValidationConfig] = None) -> Optional[str]:
    r = _rules(rules)
    if description is not None and len(description) > r.description_max_length:
        return f"description must be at most {r.description_max_length} characters"
    return None


def check_release_date(release_date: Optional[date], rules: Optional[ValidationConfig] = None) -> Optional[str]:
    r = _rules(rules)
    if release_date is None:
        return "release date is required"
    if release_date < r.min_release_date:
        return f"release date must not be before {r.min_release_date.isoformat()}"
    return None


def check_duration(duration: Optional[int]) -> Optional[str]:
    if duration is not None and duration <= 0:
        return "duration must be a positive number"
    return None


def check_email(email: Optional[str]) -> Optional[str]:
    if email is None or not email.strip():
        return "email must not be blank"
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError as e:
        return f"invalid email: {e}"
    return None


def check_login(login: Optional[str], rules: Optional[ValidationConfig] = None) -> Optional[str]:
    r = _rules(rules)
    if login is None or not login.strip():
        return "login must not be blank"
    if not (r.login_min_length <= len(login) <= r.login_max_length):
        return f"login must be {r.login_min_length} to {r.login_max_length} characters"
    if not re.fullmatch(r.login_pattern, login):
        return "login may contain only letters, digits and underscore"
    return None


def check_birthday(birthday: Optional[date], today: Optional[date] = None) -> Optional[str]:
    if birthday is not None and birthday > (today or date.today()):
        return "birthday must not be in the future"
    return None


# ---------------- whole-entity checks ----------------

def film_violations(film: Film, rules: Optional[ValidationConfig] = None) -> List[Violation]:
    r = _rules(rules)
    out: List[Violation] = []
    checks = [
        ("title", check_title(film.title, r)),
        ("description", check_description(film.description, r)),
        ("release_date", check_release_date(film.release_date, r)),
        ("duration", check_duration(film.duration)),
    ]
    if r.require_mpa and film.mpa is None:
        checks.append(("mpa", "MPA rating is required"))
    for field, msg in checks:
        if msg:
            out.append(Violation(field, msg))
    return out


def user_violations(user: User, rules: Optional[ValidationConfig] = None, today: Optional[date] = None) -> List[Violation]:
    r = _rules(rules)
    checks = [
        ("email", check_email(user.email)),
        ("login", check_login(user.login, r)),
        ("birthday", check_birthday(user.birthday, today)),
    ]
    return [Violation(field, msg) for field, msg in checks if msg]


def ensure_valid_film(film: Film, rules: Optional[ValidationConfig] = None) -> None:
    violations = film_violations(film, rules)
    if violations:
        raise InvalidArgumentError.from_violations(violations)


def ensure_valid_user(user: User, rules: Optional[ValidationConfig] = None) -> None:
    violations = user_violations(user, rules)
    if violations:
        raise InvalidArgumentError.from_violations(violations)
