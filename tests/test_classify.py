"""Tests for sprintdoc.plan.classify module."""

from sprintdoc.plan.classify import classify_sprint, classify_story, classify_subtask


class TestClassifySprint:
    """Test classify_sprint function."""

    def test_matches_sprint_title(self):
        match = classify_sprint("Sprint 1.1 Kickoff")
        assert match is not None
        assert match.number == "1.1"
        assert match.title == "Sprint 1.1 Kickoff"

    def test_case_insensitive(self):
        match = classify_sprint("sprint 10.2")
        assert match is not None
        assert match.number == "10.2"

    def test_requires_two_part_number(self):
        assert classify_sprint("Sprint 1") is None
        assert classify_sprint("Sprint X.X") is None

    def test_anchored_at_line_start(self):
        assert classify_sprint("Planning for Sprint 1.1") is None

    def test_longer_number_matches_prefix(self):
        match = classify_sprint("Sprint 1.1.1")
        assert match.number == "1.1"


class TestClassifyStory:
    """Test classify_story function."""

    def test_matches_english_marker(self):
        assert classify_story("User Story: Login") is not None

    def test_matches_portuguese_marker(self):
        assert classify_story("História de Usuário 3 - Cadastro") is not None

    def test_matches_bare_word_anywhere(self):
        # Loose substring match, not anchored
        assert classify_story("Backstory notes") is not None
        assert classify_story("Notes about the STORY") is not None

    def test_no_marker(self):
        assert classify_story("Sprint review") is None
        assert classify_story("Tarefa 1.1.1 Design") is None

    def test_title_is_trimmed(self):
        match = classify_story("  User Story: Login  ")
        assert match.title == "User Story: Login"
        assert match.number is None


class TestClassifySubtask:
    """Test classify_subtask function."""

    def test_matches_subtask_title(self):
        match = classify_subtask("Tarefa 1.1.1 Design")
        assert match is not None
        assert match.number == "1.1.1"
        assert match.title == "Tarefa 1.1.1 Design"

    def test_case_insensitive(self):
        assert classify_subtask("TAREFA 2.3.4").number == "2.3.4"

    def test_requires_three_part_number(self):
        assert classify_subtask("Tarefa 1.1") is None

    def test_anchored_at_line_start(self):
        assert classify_subtask("Subtarefa 1.1.1") is None
