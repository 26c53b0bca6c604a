"""Tests for the booking assistant prompt."""

from datetime import date

from agent.prompt import get_booking_assistant_prompt


def test_prompt_injects_today():
    assert date.today().isoformat() in get_booking_assistant_prompt()


def test_prompt_names_both_tools():
    prompt = get_booking_assistant_prompt()

    assert "get_restaurants" in prompt
    assert "create_booking" in prompt
