import pytest

from algokit.rooms import Apartment, Student, assign_rooms, assign_rooms_sorted


def test_singles_go_to_non_sharers_from_the_back():
    apartments = [Apartment(1, 1), Apartment(2, 1)]
    students = [Student("a"), Student("b")]
    assert assign_rooms(apartments, students) == {2: ["a"], 1: ["b"]}


def test_sharers_fill_apartments_in_turn():
    apartments = [Apartment(10, 2), Apartment(11, 3)]
    students = [Student(name, True) for name in ("s1", "s2", "s3", "s4")]
    assert assign_rooms(apartments, students) == {10: ["s1", "s2"], 11: ["s3", "s4"]}


def test_stops_when_everything_is_full():
    apartments = [Apartment(1, 1)]
    students = [Student("a"), Student("b"), Student("c")]
    assert assign_rooms(apartments, students) == {1: ["a"]}


def test_sharer_is_not_given_a_single_room():
    apartments = [Apartment(5, 1)]
    students = [Student("x", True), Student("y")]
    assert assign_rooms(apartments, students) == {5: ["y"]}


def test_non_sharer_uses_shared_apartment_when_no_singles():
    apartments = [Apartment(7, 2)]
    students = [Student("a"), Student("b", True)]
    assert assign_rooms(apartments, students) == {7: ["a", "b"]}


def test_shared_apartments_never_overfilled():
    apartments = [Apartment(i, size) for i, size in enumerate([2, 3, 1, 4, 1], start=1)]
    students = [Student(f"p{i}", i % 2 == 0) for i in range(30)]
    result = assign_rooms(apartments, students)
    rooms = {a.appt_id: a.num_rooms for a in apartments}
    for appt_id, names in result.items():
        assert len(names) <= rooms[appt_id]
    placed = [name for names in result.values() for name in names]
    assert len(placed) == len(set(placed))


def test_sorted_assignment_prefers_small_apartments_and_non_sharers():
    apartments = [Apartment(1, 3), Apartment(2, 1)]
    students = [Student("a", True), Student("b"), Student("c", True)]
    assert assign_rooms_sorted(apartments, students) == {2: ["b"], 1: ["a", "c"]}


@pytest.mark.parametrize("people", [0, 3, 6, 10])
def test_sorted_assignment_places_up_to_total_rooms(people):
    apartments = [Apartment(1, 2), Apartment(2, 1), Apartment(3, 3)]
    students = [Student(f"s{i}", i % 2 == 1) for i in range(people)]
    result = assign_rooms_sorted(apartments, students)
    assert sum(len(names) for names in result.values()) == min(people, 6)


def test_sorted_assignment_leaves_inputs_unchanged():
    apartments = [Apartment(3, 2), Apartment(4, 1)]
    students = [Student("a", True), Student("b")]
    apartments_before = list(apartments)
    students_before = list(students)
    assign_rooms_sorted(apartments, students)
    assert apartments == apartments_before
    assert students == students_before


def test_sorted_assignment_with_no_apartments():
    assert assign_rooms_sorted([], [Student("a")]) == {}