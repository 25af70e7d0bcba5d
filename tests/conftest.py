"""
Pytest configuration and fixtures for council analytics tests.

Conversations are built in the same shape the council pipeline stores
them, so tests exercise the engine against realistic records.
"""

from typing import Any

import pytest

# =============================================================================
# Sample Models and Labels
# =============================================================================

GPT = "openai/gpt-5.2"
GEMINI = "google/gemini-3-pro-preview"
CLAUDE = "anthropic/claude-sonnet-4.5"

SAMPLE_MODELS = [GPT, GEMINI, CLAUDE]

SAMPLE_LABEL_TO_MODEL = {
    "Response A": GPT,
    "Response B": GEMINI,
    "Response C": CLAUDE,
}

FORWARD = ["Response A", "Response B", "Response C"]
REVERSED = ["Response C", "Response B", "Response A"]


# =============================================================================
# Helper Functions
# =============================================================================


def make_council_message(
    rankings: dict[str, list[str]],
    label_to_model: dict[str, str] | None = None,
    responders: list[str] | None = None,
) -> dict[str, Any]:
    """Create a stored council message.

    Args:
        rankings: evaluator model -> ordered labels (best first)
        label_to_model: Anonymization mapping; defaults to SAMPLE_LABEL_TO_MODEL
        responders: Models with a Stage 1 response; defaults to the mapping's models
    """
    if label_to_model is None:
        label_to_model = dict(SAMPLE_LABEL_TO_MODEL)
    if responders is None:
        responders = list(label_to_model.values())
    return {
        "role": "assistant",
        "stage1": [{"model": model, "response": f"Answer from {model}"} for model in responders],
        "stage2": [
            {
                "model": evaluator,
                "ranking": "FINAL RANKING:\n"
                + "\n".join(f"{i}. {label}" for i, label in enumerate(labels, start=1)),
                "parsed_ranking": list(labels),
            }
            for evaluator, labels in rankings.items()
        ],
        "stage3": {"model": GPT, "response": "Synthesized answer"},
        "metadata": {"label_to_model": label_to_model, "aggregate_rankings": []},
    }


def make_session(
    session_id: str,
    *council_messages: dict[str, Any],
    title: str | None = None,
    created_at: str = "2025-01-01T00:00:00",
) -> dict[str, Any]:
    """Create a stored conversation, interleaving a user question before each council turn."""
    messages = []
    for index, message in enumerate(council_messages, start=1):
        messages.append({"role": "user", "content": f"Question {index}"})
        messages.append(message)
    return {
        "id": session_id,
        "title": title or f"Conversation {session_id}",
        "created_at": created_at,
        "messages": messages,
    }


def unanimous_message() -> dict[str, Any]:
    """All three models agree on A > B > C."""
    return make_council_message({model: FORWARD for model in SAMPLE_MODELS})


def split_message() -> dict[str, Any]:
    """GPT and Claude disagree completely; Gemini sides with GPT."""
    return make_council_message({GPT: FORWARD, GEMINI: FORWARD, CLAUDE: REVERSED})


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def label_to_model() -> dict[str, str]:
    """Return the sample anonymization mapping."""
    return dict(SAMPLE_LABEL_TO_MODEL)


@pytest.fixture
def sample_history() -> list[dict[str, Any]]:
    """Three conversations with varying levels of agreement."""
    return [
        make_session("calm", unanimous_message(), created_at="2025-01-01T00:00:00"),
        make_session("split", split_message(), created_at="2025-01-02T00:00:00"),
        make_session(
            "mixed",
            unanimous_message(),
            make_council_message(
                {GPT: FORWARD, CLAUDE: REVERSED},
                # Labels are reassigned every turn
                label_to_model={"Response A": CLAUDE, "Response B": GPT, "Response C": GEMINI},
            ),
            created_at="2025-01-03T00:00:00",
        ),
    ]
