"""Allocating students to apartments, by arrival order and by sorted order."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Apartment:
    """An apartment with an identifier and a number of rooms."""

    appt_id: int
    num_rooms: int


@dataclass(frozen=True)
class Student:
    """A student who may or may not be willing to share an apartment."""

    name: str
    wants_to_share: bool = False


def assign_rooms(
    apartments: Iterable[Apartment], students: Iterable[Student]
) -> dict[int, list[str]]:
    """Assign students in arrival order.

    Single-room apartments go to students who do not want to share, taken
    from the end of the apartment list first. Everyone else fills the
    multi-room apartments one after another, each up to its number of rooms.
    A student who wants to share is left out when only single rooms remain.
    Allocation stops once every apartment is full.
    """
    singles: list[int] = []
    capacity: dict[int, int] = {}
    for apartment in apartments:
        if apartment.num_rooms == 1:
            singles.append(apartment.appt_id)
        else:
            capacity[apartment.appt_id] = apartment.num_rooms
    shared_ids = list(capacity)

    assigned: dict[int, list[str]] = {}
    current = 0
    for student in students:
        if current == len(shared_ids) and not singles:
            break
        if not student.wants_to_share and singles:
            assigned.setdefault(singles.pop(), []).append(student.name)
            continue
        while current < len(shared_ids) and len(
            assigned.get(shared_ids[current], ())
        ) >= capacity[shared_ids[current]]:
            current += 1
        if current < len(shared_ids):
            assigned.setdefault(shared_ids[current], []).append(student.name)
    return assigned


def assign_rooms_sorted(
    apartments: Iterable[Apartment], students: Iterable[Student]
) -> dict[int, list[str]]:
    """Assign students after sorting.

    Apartments are taken smallest first and students who do not want to share
    are placed first; each apartment is filled before moving to the next.
    The inputs are left unchanged.
    """
    ordered = sorted(apartments, key=lambda apartment: apartment.num_rooms)
    ids = [apartment.appt_id for apartment in ordered]
    free = [apartment.num_rooms for apartment in ordered]
    queue = sorted(students, key=lambda student: student.wants_to_share)

    assigned: dict[int, list[str]] = {}
    position = 0
    for student in queue:
        while position < len(free) and free[position] <= 0:
            position += 1
        if position == len(free):
            break
        free[position] -= 1
        assigned.setdefault(ids[position], []).append(student.name)
    return assigned