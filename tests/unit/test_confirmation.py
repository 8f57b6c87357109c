"""
Unit tests for the confirmation gate helpers.
"""

import pytest

from breedline.core.enums import Phase
from breedline.lifecycle.confirmation import (
    ConfirmContext,
    ask_gate,
    auto_confirm,
    auto_decline,
    confirmation_context_for,
    requires_confirmation,
)


class TestRequiresConfirmation:

    def test_committed_is_gated_by_default(self):
        assert requires_confirmation(Phase.COMMITTED, ["COMMITTED"])

    def test_other_phases_are_not(self):
        assert not requires_confirmation(Phase.BRED, ["COMMITTED"])

    def test_no_target(self):
        assert not requires_confirmation(None, ["COMMITTED"])

    def test_string_target(self):
        assert requires_confirmation("WEANED", ["WEANED"])


class TestContext:

    def test_commit_prompt(self):
        context = confirmation_context_for(Phase.COMMITTED)
        assert context.title == "Commit to This Breeding Plan?"
        assert "dam and sire" in context.message

    def test_generic_prompt(self):
        context = confirmation_context_for(Phase.WEANED)
        assert context.title == "Advance to Weaned?"
        assert context.cancel_text == "Not Yet"

    def test_to_dict(self):
        data = ConfirmContext(title="t", message="m").to_dict()
        assert data == {"title": "t", "message": "m", "confirm_text": "Confirm", "cancel_text": "Cancel"}


class TestAskGate:

    @pytest.mark.asyncio
    async def test_auto_gates(self):
        context = confirmation_context_for(Phase.COMMITTED)
        assert await ask_gate(auto_confirm, context) is True
        assert await ask_gate(auto_decline, context) is False

    @pytest.mark.asyncio
    async def test_raising_gate(self):
        async def broken(context):
            raise RuntimeError("boom")

        assert await ask_gate(broken, confirmation_context_for(Phase.COMMITTED)) is False
