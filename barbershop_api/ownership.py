# barbershop_api/ownership.py

"""Ownership-scoped lookups and mutations.

Every lookup is a single query: the resource table joined along the
ownership chain up to ``barbershop`` and filtered on ``owner_id``. A
resource that does not exist and a resource that belongs to another owner
give the same answer.

Mutations come in two flavours. ``AdvisoryResolver`` checks first and then
updates or deletes by id, so a concurrent change between the two steps goes
unnoticed. ``AtomicResolver`` repeats the ownership predicate inside the
UPDATE/DELETE and treats zero affected rows as "not reachable".
"""

import logging
import uuid
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import delete, func, update
from sqlalchemy.orm import contains_eager
from sqlmodel import Session, SQLModel, select

from barbershop_api import config
from barbershop_api.errors import Disclosure, EmptyResultError
from barbershop_api.graph import ResourceKind, chain, children_referencing, node, plural
from barbershop_api.models import Barbershop

logger = logging.getLogger(__name__)


class OwnershipScopeResolver:
    strategy = "base"

    def __init__(self, session: Session):
        self.session = session

    # --- queries ---

    def _join_chain(self, statement, kind: ResourceKind, eager: bool):
        current = node(kind).model
        loader = None
        for _, edge in chain(kind):
            parent = node(edge.parent).model
            statement = statement.join(parent, getattr(current, edge.foreign_key) == parent.id)
            if eager:
                relationship = getattr(current, edge.relationship)
                loader = contains_eager(relationship) if loader is None else loader.contains_eager(relationship)
            current = parent
        if loader is not None:
            statement = statement.options(loader)
        return statement

    def scoped(self, kind: ResourceKind, principal_id: uuid.UUID):
        """Every ``kind`` row whose chain ends at ``principal_id``, ancestors loaded."""
        statement = self._join_chain(select(node(kind).model), kind, eager=True)
        return statement.where(Barbershop.owner_id == principal_id)

    def scoped_ids(self, kind: ResourceKind, principal_id: uuid.UUID):
        model = node(kind).model
        statement = self._join_chain(select(model.id), kind, eager=False)
        return statement.where(Barbershop.owner_id == principal_id)

    def resolve(
        self,
        principal_id: uuid.UUID,
        kind: ResourceKind,
        entity_id: uuid.UUID,
        disclosure: Disclosure = Disclosure.HIDDEN,
        message: Optional[str] = None,
    ) -> SQLModel:
        model = node(kind).model
        resource = self.session.exec(
            self.scoped(kind, principal_id).where(model.id == entity_id)
        ).first()

        if resource is None:
            logger.info(
                "%s %s is not reachable for principal %s (%s)",
                kind.value, entity_id, principal_id, disclosure.value,
            )
            raise disclosure.error(message or f"{node(kind).label} not found")
        return resource

    def resolve_all(self, principal_id: uuid.UUID, kind: ResourceKind) -> List[SQLModel]:
        model = node(kind).model
        resources = self.session.exec(
            self.scoped(kind, principal_id).order_by(model.created_at)
        ).all()
        if not resources:
            raise EmptyResultError(f"No {plural(kind)} found")
        return list(resources)

    def count_dependents(self, kind: ResourceKind, resource_id: uuid.UUID, dependent: ResourceKind) -> int:
        model = node(dependent).model
        column = getattr(model, children_referencing(kind, dependent))
        return self.session.exec(
            select(func.count()).select_from(model).where(column == resource_id)
        ).one()

    # --- mutations ---

    def _target(self, statement, kind: ResourceKind, principal_id: uuid.UUID, resource: SQLModel):
        raise NotImplementedError

    def _confirm(self, result, kind: ResourceKind, resource: SQLModel) -> None:
        raise NotImplementedError

    def create(self, resource: SQLModel, *dependents: SQLModel) -> SQLModel:
        self.session.add(resource)
        for dependent in dependents:
            self.session.add(dependent)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(resource)
        logger.info("Created %s %s", type(resource).__name__, resource.id)
        return resource

    def update(
        self,
        principal_id: uuid.UUID,
        kind: ResourceKind,
        resource: SQLModel,
        changes: Dict[str, Any],
    ) -> SQLModel:
        model = node(kind).model
        try:
            if changes:
                statement = self._target(update(model), kind, principal_id, resource)
                result = self.session.exec(
                    statement.values(**changes).execution_options(synchronize_session=False)
                )
                self._confirm(result, kind, resource)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        self.session.refresh(resource)
        logger.info("Updated %s %s (%s)", kind.value, resource.id, ", ".join(sorted(changes)))
        return resource

    def delete(self, principal_id: uuid.UUID, kind: ResourceKind, resource: SQLModel) -> None:
        model = node(kind).model
        resource_id = resource.id
        try:
            self._purge_owned(kind, [resource_id])
            statement = self._target(delete(model), kind, principal_id, resource)
            result = self.session.exec(statement.execution_options(synchronize_session=False))
            self._confirm(result, kind, resource)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        logger.info("Deleted %s %s", kind.value, resource_id)

    def _purge_owned(self, kind: ResourceKind, ids: Iterable[uuid.UUID]) -> None:
        # children that live and die with their parent (employee -> schedule -> breaking times)
        for child_kind in node(kind).owned:
            child = node(child_kind).model
            foreign_key = getattr(child, children_referencing(kind, child_kind))
            child_ids = list(self.session.exec(select(child.id).where(foreign_key.in_(list(ids)))).all())
            if not child_ids:
                continue
            self._purge_owned(child_kind, child_ids)
            self.session.exec(
                delete(child).where(child.id.in_(child_ids)).execution_options(synchronize_session=False)
            )


class AdvisoryResolver(OwnershipScopeResolver):
    """Check, then act by id. Correct only without concurrent writes on the same row."""

    strategy = "advisory"

    def _target(self, statement, kind, principal_id, resource):
        return statement.where(node(kind).model.id == resource.id)

    def _confirm(self, result, kind, resource):
        if result.rowcount == 0:
            logger.warning("%s %s vanished between check and write", kind.value, resource.id)


class AtomicResolver(OwnershipScopeResolver):
    """Act with the ownership predicate in the same statement."""

    strategy = "atomic"

    def _target(self, statement, kind, principal_id, resource):
        model = node(kind).model
        return statement.where(
            model.id == resource.id,
            model.id.in_(self.scoped_ids(kind, principal_id)),
        )

    def _confirm(self, result, kind, resource):
        if result.rowcount == 0:
            raise Disclosure.HIDDEN.error(f"{node(kind).label} not found")


STRATEGIES = {
    AdvisoryResolver.strategy: AdvisoryResolver,
    AtomicResolver.strategy: AtomicResolver,
}


def build_resolver(session: Session, strategy: str = None) -> OwnershipScopeResolver:
    name = strategy or config.RESOLVER_STRATEGY
    try:
        return STRATEGIES[name](session)
    except KeyError:
        raise ValueError(f"Unknown resolver strategy {name!r}") from None
