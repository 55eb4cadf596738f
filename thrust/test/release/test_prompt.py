from __future__ import annotations

from thrust.core.result import Ok
from thrust.release.prompt import ScriptedPrompt, TextPrompt


def test_text_prompt_writes_answer_to_file() -> None:
    asked: list[str] = []

    def ask(label: str) -> str:
        asked.append(label)
        return "Fixed push notifications"

    result = TextPrompt(ask).get_user_input("Deploy Notes: ")

    assert isinstance(result, Ok)
    try:
        assert asked == ["Deploy Notes: "]
        assert result.value.read_text(encoding="utf-8") == "Fixed push notifications"
    finally:
        result.value.unlink(missing_ok=True)


def test_scripted_prompt_records_labels() -> None:
    prompt = ScriptedPrompt("hello")
    result = prompt.get_user_input("Deploy Notes: ")

    assert isinstance(result, Ok)
    result.value.unlink(missing_ok=True)
    assert prompt.labels == ["Deploy Notes: "]
