"""
Message template rendering.

Templates carry ``{name}`` placeholders. Substitution is literal: no format
specs, no escaping, and placeholders without a value are left as they are.
"""

from typing import Mapping, Optional


def render_template(template: str, params: Optional[Mapping[str, str]] = None) -> str:
    """
    Replace every ``{key}`` in ``template`` with ``params[key]``.

    Example:
        >>> render_template("Your code is {code}", {"code": "4821"})
        'Your code is 4821'
    """
    message = template
    for key, value in (params or {}).items():
        message = message.replace("{" + key + "}", value)
    return message
