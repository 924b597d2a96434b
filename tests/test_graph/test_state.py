"""Tests for generation state management."""

from quizforge.graph.state import create_initial_state
from quizforge.models.quiz import GenerationRequest


class TestCreateInitialState:
    """Test initial state creation."""

    def test_creates_state_with_request(self):
        """Test that initial state contains the request."""
        request = GenerationRequest(source_content="Cells", requested_count=3)
        state = create_initial_state(request)

        assert state["request"] == request

    def test_nothing_generated_yet(self):
        """Test that outputs start empty."""
        state = create_initial_state(
            GenerationRequest(source_content="Cells", requested_count=3)
        )

        assert state["raw_text"] is None
        assert state["provider_used"] is None
        assert state["parsed_questions"] == []
        assert state["final_questions"] == []
        assert state["generated_quiz"] is None

    def test_states_are_independent(self):
        """Test that two runs never share mutable state."""
        state_1 = create_initial_state(GenerationRequest(source_content="A", requested_count=1))
        state_2 = create_initial_state(GenerationRequest(source_content="B", requested_count=2))

        state_1["parsed_questions"].append("x")

        assert state_2["parsed_questions"] == []
        assert state_2["request"].source_content == "B"
