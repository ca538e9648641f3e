"""Integration tests for the tree-building use cases.

Uses the in-memory fake repository, no file I/O.
"""

import pytest

from edu_records.application.add_group import AddGroupHandler
from edu_records.application.add_institute import AddInstituteHandler
from edu_records.application.add_student import AddStudentHandler
from edu_records.application.add_subject import AddSubjectHandler
from edu_records.application.delete_institute import DeleteInstituteHandler
from edu_records.application.rename_institute import RenameInstituteHandler
from edu_records.application.show_institutes import ShowInstitutesHandler
from edu_records.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    ValidationError,
)
from edu_records.domain.model.institute import Institute
from tests.fakes import FakeInstituteRepository


def _repo_with_group() -> FakeInstituteRepository:
    repo = FakeInstituteRepository()
    AddInstituteHandler(repo).handle("IT Institute")
    AddGroupHandler(repo).handle("IT Institute", 1, "FI-22")
    return repo


class TestAddInstitute:

    def test_adds_institute(self):
        repo = FakeInstituteRepository()
        institute = AddInstituteHandler(repo).handle("  IT Institute ")
        assert institute.name == "IT Institute"
        assert repo.get_by_name("it institute") is institute

    def test_duplicate_rejected(self):
        repo = FakeInstituteRepository([Institute.create("IT")])
        with pytest.raises(DuplicateEntityError):
            AddInstituteHandler(repo).handle("it")

    def test_blank_rejected(self):
        with pytest.raises(ValidationError):
            AddInstituteHandler(FakeInstituteRepository()).handle(" ")


class TestDeleteInstitute:

    def test_deletes(self):
        repo = FakeInstituteRepository([Institute.create("IT"), Institute.create("Eng")])
        DeleteInstituteHandler(repo).handle("it")
        assert [i.name for i in repo.list_all()] == ["Eng"]

    def test_missing_rejected(self):
        with pytest.raises(EntityNotFoundError):
            DeleteInstituteHandler(FakeInstituteRepository()).handle("IT")


class TestRenameInstitute:

    def test_renames_and_keeps_position(self):
        repo = FakeInstituteRepository([Institute.create("IT"), Institute.create("Eng")])

        new_name = RenameInstituteHandler(repo).handle("it", "  Computing ")

        assert new_name == "Computing"
        assert [i.name for i in repo.list_all()] == ["Computing", "Eng"]
        assert repo.get_by_name("IT") is None

    @pytest.mark.parametrize("new_name", ["", "   "])
    def test_blank_name_rejected(self, new_name):
        repo = FakeInstituteRepository([Institute.create("IT")])
        with pytest.raises(ValidationError, match="name is required"):
            RenameInstituteHandler(repo).handle("IT", new_name)
        assert repo.get_by_name("IT") is not None
        assert repo.saves == 0

    def test_name_in_use_rejected(self):
        repo = FakeInstituteRepository([Institute.create("IT"), Institute.create("Eng")])
        with pytest.raises(DuplicateEntityError, match="Eng"):
            RenameInstituteHandler(repo).handle("IT", "ENG")
        assert [i.name for i in repo.list_all()] == ["IT", "Eng"]

    def test_case_only_change_allowed(self):
        repo = FakeInstituteRepository([Institute.create("it institute")])
        RenameInstituteHandler(repo).handle("IT INSTITUTE", "IT Institute")
        assert [i.name for i in repo.list_all()] == ["IT Institute"]

    def test_missing_rejected(self):
        with pytest.raises(EntityNotFoundError):
            RenameInstituteHandler(FakeInstituteRepository()).handle("IT", "Computing")

    def test_tree_survives_rename(self):
        repo = _repo_with_group()
        RenameInstituteHandler(repo).handle("IT Institute", "Computing")
        assert repo.get_by_name("Computing").get_course(1).get_group("FI-22") is not None


class TestAddSubject:

    def test_adds_once(self):
        repo = FakeInstituteRepository([Institute.create("IT")])
        handler = AddSubjectHandler(repo)

        assert handler.handle("IT", "Math") is True
        assert handler.handle("IT", "Math") is False
        assert repo.get_by_name("IT").subjects == ["Math"]

    def test_unknown_institute(self):
        with pytest.raises(EntityNotFoundError, match="Institute not found"):
            AddSubjectHandler(FakeInstituteRepository()).handle("IT", "Math")


class TestAddGroup:

    def test_creates_course_on_first_group(self):
        repo = FakeInstituteRepository([Institute.create("IT")])
        handler = AddGroupHandler(repo)

        assert handler.handle("IT", 2, "A") is True
        assert handler.handle("IT", 2, "B") is False

        institute = repo.get_by_name("IT")
        assert len(institute.courses) == 1
        assert [g.name for g in institute.courses[0].groups] == ["A", "B"]

    def test_duplicate_group_leaves_no_empty_course(self):
        repo = FakeInstituteRepository([Institute.create("IT")])
        handler = AddGroupHandler(repo)
        handler.handle("IT", 1, "A")

        with pytest.raises(DuplicateEntityError):
            handler.handle("IT", 1, "a")

        with pytest.raises(ValidationError):
            handler.handle("IT", 3, " ")
        assert [c.number for c in repo.get_by_name("IT").courses] == [1]

    def test_invalid_course_number(self):
        repo = FakeInstituteRepository([Institute.create("IT")])
        with pytest.raises(ValidationError, match="between 1 and 6"):
            AddGroupHandler(repo).handle("IT", 7, "A")


class TestAddStudent:

    def test_assigns_sequential_ids(self):
        repo = _repo_with_group()
        handler = AddStudentHandler(repo)

        first = handler.handle("IT Institute", 1, "FI-22", "Ada Lovelace", "ada@edu.org")
        second = handler.handle("IT Institute", 1, "fi-22", "Bob")

        assert (first.id, second.id) == ("S001", "S002")
        assert first.email == "ada@edu.org"
        assert second.email is None
        assert first.balance == "$0.00"
        assert first.excellent is False

    def test_missing_group(self):
        repo = _repo_with_group()
        with pytest.raises(EntityNotFoundError):
            AddStudentHandler(repo).handle("IT Institute", 1, "Nope", "Ada")

    def test_missing_course(self):
        repo = _repo_with_group()
        with pytest.raises(EntityNotFoundError):
            AddStudentHandler(repo).handle("IT Institute", 4, "FI-22", "Ada")


class TestShowInstitutes:

    def test_nested_view(self):
        repo = _repo_with_group()
        AddSubjectHandler(repo).handle("IT Institute", "Math")
        AddStudentHandler(repo).handle("IT Institute", 1, "FI-22", "Ada")
        repo.get_by_name("IT Institute").courses[0].groups[0].students[0].put_mark("Math", 5)

        [view] = ShowInstitutesHandler(repo).handle()

        assert view.name == "IT Institute"
        assert view.subjects == ["Math"]
        assert view.excellent_count == 1
        student = view.courses[0].groups[0].students[0]
        assert student.marks == {"Math": 5}
        assert student.excellent is True

    def test_empty(self):
        assert ShowInstitutesHandler(FakeInstituteRepository()).handle() == []
