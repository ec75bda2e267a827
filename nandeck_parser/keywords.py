"""Centralized directive registry for the nanDeck script parser.

Each directive is declared once with the names of its payload fields, the
number of trailing fields that may be omitted, and its roles.  The
frozenset and dict views below (_DIRECTIVES, _RAW_PAYLOAD, ...) are derived
from the registry so the parser never repeats this table.
"""

# Roles:
#   raw_payload  – the whole trimmed payload is one field, no comma split
#   no_payload   – the payload may be absent and is ignored

_DIRECTIVE_REGISTRY = {
    'LINKMULTI': {
        'fields': ('key',),
        'roles': {'raw_payload'},
    },
    'LINK': {
        'fields': ('link',),
        'roles': {'raw_payload'},
    },
    'UNIT': {
        'fields': ('unit',),
        'roles': {'raw_payload'},
    },
    'PAGE': {
        'fields': ('width', 'height', 'orientation'),
    },
    'BORDER': {
        'fields': ('type', 'color', 'size'),
    },
    'VISUAL': {
        # Leading slot is positional but unused.
        'fields': ('reserved', 'horizontal_step', 'vertical_step'),
    },
    'IMAGE': {
        'fields': ('source_path', 'field_name', 'left', 'top', 'width', 'height'),
    },
    'TEXTFONT': {
        'fields': ('source_path', 'field_name', 'left', 'top', 'width', 'height',
                   'horizontal_align', 'vertical_align', 'rotation', 'alpha',
                   'font_name', 'font_size', 'effect', 'color'),
        'optional': 1,
    },
    'ENDVISUAL': {
        # Payload is never split, so no arity check applies.
        'fields': (),
        'roles': {'no_payload'},
    },
}


def _with_role(role):
    return frozenset(
        name for name, entry in _DIRECTIVE_REGISTRY.items()
        if role in entry.get('roles', ())
    )


_DIRECTIVES = frozenset(_DIRECTIVE_REGISTRY)
_RAW_PAYLOAD = _with_role('raw_payload')
_NO_PAYLOAD = _with_role('no_payload')

# directive -> (required, maximum) field counts
_FIELD_COUNTS = {
    name: (len(entry['fields']) - entry.get('optional', 0), len(entry['fields']))
    for name, entry in _DIRECTIVE_REGISTRY.items()
}
