"""
Test doubles shared by the unit and API tests.

StubLLM stands in for LLMService: deterministic SWOT output, one canned
reply per turn, and switches to make either call fail.
"""

from utils.errors import LLMParseError, LLMTransportError
from utils.llm_service import SwotResult

SAMPLE_SWOT = {
    "strengths": ["Deep technical background"],
    "weaknesses": ["No formal product experience"],
    "opportunities": ["Internal PM openings"],
    "threats": ["Competitive PM market"],
}


class StubLLM:
    """Drop-in for LLMService that records its calls."""

    def __init__(self, swot=None, fail_swot=False, fail_on_turn=None):
        self.swot = swot or SAMPLE_SWOT
        self.fail_swot = fail_swot
        self.fail_on_turn = fail_on_turn
        self.swot_calls = []
        self.turn_calls = []

    async def generate_swot(self, question, current_role=None, target_role=None):
        self.swot_calls.append((question, current_role, target_role))
        if self.fail_swot:
            raise LLMParseError("Failed to parse SWOT analysis: No valid JSON found in response")
        return SwotResult.model_validate(self.swot)

    async def generate_turn(self, agent_type, context, prior_messages, focus_section=None):
        self.turn_calls.append({
            "agent_type": agent_type,
            "context": context,
            "prior_count": len(prior_messages),
            "focus_section": focus_section,
        })
        if self.fail_on_turn is not None and len(self.turn_calls) == self.fail_on_turn:
            raise LLMTransportError("Failed to generate vazir turn: connection reset")
        return f"Thoughts on {focus_section}"
