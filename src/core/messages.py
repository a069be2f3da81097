"""
Default message templates for validation issues.

Templates are ``str.format`` strings; ``{label}`` is always available, plus
the bound that failed (``{minimum}``, ``{max_length}``, ...). A field rule can
override any template through ``FieldRule.messages``.
"""

from typing import Any

from src.core.models import FieldRule

MESSAGE_TEMPLATES: dict[str, str] = {
    "required": "{label}は必須です",
    "type": "{label}の形式が不正です",
    "integer": "{label}は整数で入力してください",
    "minimum": "{label}は{minimum}以上で入力してください",
    "maximum": "{label}は{maximum}以下で入力してください",
    "min_length": "{label}は{min_length}文字以上で入力してください",
    "max_length": "{label}は{max_length}文字以内で入力してください",
    "pattern": "{label}の形式が不正です",
    "choice": "{label}が不正です",
}


def render_message(rule: FieldRule, key: str, **params: Any) -> str:
    """
    Render the message for a failed check on ``rule``.

    Args:
        rule: The field rule that failed
        key: Check name (see MESSAGE_TEMPLATES)
        **params: Bound values referenced by the template

    Returns:
        The override from ``rule.messages`` if present, else the default
        template, formatted with the field label and params
    """
    template = rule.messages.get(key) or MESSAGE_TEMPLATES[key]
    return template.format(label=rule.display_label, **params)
