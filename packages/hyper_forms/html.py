"""HTML escaping and attribute helpers for form markup.

Fields and groups assemble their markup from these functions so that
escaping rules live in one place.
"""

from collections.abc import Mapping

from markupsafe import Markup, escape

__all__ = [
    'Markup',
    'escape',
    'render_attr',
    'render_class',
    'spread_attrs',
    'add_class',
    'merge_attrs',
    'tag',
]


def render_attr(name: str, value) -> str:
    """Render a single HTML attribute.

    Handles boolean attributes and dynamic values:
    - True: renders just the attribute name (e.g., "required")
    - False/None: renders nothing
    - Other values: renders name="escaped_value"

    Example:
        >>> render_attr("required", True)
        ' required'
        >>> render_attr("required", False)
        ''
        >>> render_attr("name", "email")
        ' name="email"'
    """
    if value is True:
        return f' {name}'
    if value is False or value is None:
        return ''
    return f' {name}="{escape(value)}"'


def render_class(*values) -> str:
    """Render a class attribute value from various inputs.

    Accepts strings, lists/tuples (nested allowed) and dicts whose keys are
    kept when their values are truthy. Duplicate classes are dropped while
    preserving first-seen order.

    Example:
        >>> render_class("control-group", ["error", "required"])
        'control-group error required'
        >>> render_class("btn", {"active": True, "disabled": False}, "btn")
        'btn active'
    """
    classes = []
    queue = list(values)

    while queue:
        value = queue.pop(0)
        if not value:
            continue
        if isinstance(value, str):
            for name in value.split():
                if name not in classes:
                    classes.append(name)
        elif isinstance(value, dict):
            queue[0:0] = [k for k, v in value.items() if v]
        elif isinstance(value, (list, tuple)):
            queue[0:0] = list(value)

    return ' '.join(classes)


def spread_attrs(attrs: Mapping | None) -> str:
    """Spread a mapping as HTML attributes.

    Example:
        >>> spread_attrs({"class": "btn", "id": "submit", "disabled": True})
        ' class="btn" id="submit" disabled'
        >>> spread_attrs({})
        ''
    """
    if not attrs:
        return ''
    return ''.join(render_attr(k, v) for k, v in attrs.items())


def add_class(attrs: Mapping | None, *classes) -> dict:
    """Return a copy of ``attrs`` with ``classes`` merged into its class list.

    The input mapping is never mutated.

    Example:
        >>> add_class({"class": "control-group"}, "error")
        {'class': 'control-group error'}
        >>> add_class({}, None)
        {}
    """
    merged = dict(attrs or {})
    value = render_class(merged.get('class'), *classes)
    if value:
        merged['class'] = value
    return merged


def merge_attrs(base: Mapping | None, extra: Mapping | None) -> dict:
    """Merge two attribute mappings, concatenating their classes."""
    merged = dict(base or {})
    for key, value in (extra or {}).items():
        if key == 'class':
            merged = add_class(merged, value)
        else:
            merged[key] = value
    return merged


def tag(name: str, content='', attrs: Mapping | None = None) -> Markup:
    """Render ``<name attrs>content</name>``.

    Content is escaped unless it is already markup.
    """
    return Markup(f'<{name}{spread_attrs(attrs)}>{escape(content)}</{name}>')
