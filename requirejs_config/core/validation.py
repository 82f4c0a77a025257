import logging
import re
from typing import Optional

from fastapi import HTTPException


logger = logging.getLogger(__name__)

LOCALE_PATTERN = re.compile(r'^[A-Za-z]{2,3}([_-][A-Za-z0-9]{2,8})*$')
VARIABLE_PATTERN = re.compile(r'^[A-Za-z_$][A-Za-z0-9_$]*$')


def validate_locale(locale: Optional[str]) -> None:
    if locale is not None and not LOCALE_PATTERN.match(locale):
        logger.warning(f"Rejected locale override '{locale}'")
        raise HTTPException(status_code=400, detail="Invalid locale format")


def validate_variable(variable: str) -> None:
    if not VARIABLE_PATTERN.match(variable):
        raise HTTPException(status_code=400, detail="Invalid JavaScript variable name")
