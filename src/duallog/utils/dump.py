"""
============================================================
 File: dump.py
 Author: Internal Systems Automation Team
 Created: 2026-10-17
 Last Updated: 2026-10-18

 Description:
     Dump diagnostico di valori arbitrari, con strutture
     annidate completamente espanse. Usato da Logger.debug.
     Gli oggetti "semplici" (senza repr proprio) vengono
     mostrati con i loro attributi.
============================================================
"""

from rich.pretty import pretty_repr


def _is_plain_object(value):
    return (
        hasattr(value, "__dict__")
        and not isinstance(value, type)
        and not hasattr(value, "__rich_repr__")
        and type(value).__repr__ is object.__repr__
    )


def _expand(value, seen):
    """Sostituisce gli oggetti semplici con il dict dei loro attributi"""
    if id(value) in seen:
        return ...

    if _is_plain_object(value):
        seen = seen | {id(value)}
        return {name: _expand(attr, seen) for name, attr in vars(value).items()}
    if type(value) is dict:
        seen = seen | {id(value)}
        return {key: _expand(item, seen) for key, item in value.items()}
    if type(value) in (list, tuple):
        seen = seen | {id(value)}
        return type(value)(_expand(item, seen) for item in value)
    return value


def dump(*values):
    """Restituisce un blocco di testo per ogni valore, preceduto dal tipo"""
    blocks = []
    for value in values:
        rendered = pretty_repr(_expand(value, frozenset()), expand_all=True)
        blocks.append(f"({type(value).__name__}) {rendered}")
    return "\n".join(blocks) + "\n"
