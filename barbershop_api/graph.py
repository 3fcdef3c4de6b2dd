# barbershop_api/graph.py

"""Static ownership hierarchy.

Every resource kind points at its parent through one foreign key, and the
chain always ends at ``Barbershop.owner_id``:

    Appointment -> Employee -> Barbershop -> User
    BreakingTime -> Schedule -> Employee -> Barbershop -> User
    Service -> Barbershop -> User
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from barbershop_api.models import (
    Appointment,
    Barbershop,
    BreakingTime,
    Employee,
    Schedule,
    Service,
)


class ResourceKind(str, Enum):
    BARBERSHOP = "barbershop"
    EMPLOYEE = "employee"
    SERVICE = "service"
    SCHEDULE = "schedule"
    BREAKING_TIME = "breakingtime"
    APPOINTMENT = "appointment"


@dataclass(frozen=True)
class Edge:
    parent: ResourceKind
    foreign_key: str  # column on the child pointing at the parent
    relationship: str  # ORM attribute on the child loading the parent


@dataclass(frozen=True)
class Node:
    model: type
    label: str
    edge: Optional[Edge] = None
    # removed together with the parent
    owned: Tuple[ResourceKind, ...] = ()
    # must be empty before the parent may be deleted
    blocking: Tuple[ResourceKind, ...] = ()
    plural: str = field(default="")


GRAPH = {
    ResourceKind.BARBERSHOP: Node(
        model=Barbershop,
        label="Barbershop",
        blocking=(ResourceKind.EMPLOYEE, ResourceKind.SERVICE),
    ),
    ResourceKind.EMPLOYEE: Node(
        model=Employee,
        label="Employee",
        edge=Edge(ResourceKind.BARBERSHOP, "barbershop_id", "barbershop"),
        owned=(ResourceKind.SCHEDULE,),
        blocking=(ResourceKind.APPOINTMENT,),
    ),
    ResourceKind.SERVICE: Node(
        model=Service,
        label="Service",
        edge=Edge(ResourceKind.BARBERSHOP, "barbershop_id", "barbershop"),
        blocking=(ResourceKind.APPOINTMENT,),
    ),
    ResourceKind.SCHEDULE: Node(
        model=Schedule,
        label="Schedule",
        edge=Edge(ResourceKind.EMPLOYEE, "employee_id", "employee"),
        owned=(ResourceKind.BREAKING_TIME,),
    ),
    ResourceKind.BREAKING_TIME: Node(
        model=BreakingTime,
        label="Breaking time",
        edge=Edge(ResourceKind.SCHEDULE, "schedule_id", "schedule"),
        plural="breaking times",
    ),
    ResourceKind.APPOINTMENT: Node(
        model=Appointment,
        label="Appointment",
        edge=Edge(ResourceKind.EMPLOYEE, "employee_id", "employee"),
    ),
}


def node(kind: ResourceKind) -> Node:
    return GRAPH[kind]


def chain(kind: ResourceKind) -> List[Tuple[ResourceKind, Edge]]:
    """Edges from ``kind`` up to the barbershop, child first."""
    edges = []
    current = kind
    while GRAPH[current].edge is not None:
        edge = GRAPH[current].edge
        edges.append((current, edge))
        current = edge.parent
    return edges


def plural(kind: ResourceKind) -> str:
    """Human plural used in "No <plural> found" messages."""
    return GRAPH[kind].plural or f"{kind.value}s"


def children_referencing(kind: ResourceKind, child: ResourceKind) -> str:
    """Foreign-key column on ``child`` that points at ``kind``."""
    edge = GRAPH[child].edge
    if edge is not None and edge.parent == kind:
        return edge.foreign_key
    # appointments also reference their service, outside the ownership chain
    if kind == ResourceKind.SERVICE and child == ResourceKind.APPOINTMENT:
        return "service_id"
    raise KeyError(f"{child.value} does not reference {kind.value}")
