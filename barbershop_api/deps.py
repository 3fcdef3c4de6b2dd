# barbershop_api/deps.py

from fastapi import Depends
from sqlmodel import Session

from barbershop_api.consistency import CrossResourceConsistencyChecker
from barbershop_api.db import get_session
from barbershop_api.ownership import OwnershipScopeResolver, build_resolver


def get_resolver(session: Session = Depends(get_session)) -> OwnershipScopeResolver:
    return build_resolver(session)


def get_checker(
    resolver: OwnershipScopeResolver = Depends(get_resolver),
) -> CrossResourceConsistencyChecker:
    return CrossResourceConsistencyChecker(resolver)
