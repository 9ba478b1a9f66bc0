"""ParseResult serialization: JSON round-trip for scan results.

Converts ParseResult to/from JSON-compatible dicts. Useful for:
- Handing scan results to a build orchestrator in another process
- Caching scan results on disk between builds
- Debugging and inspection (``python -m hscan``)

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from hscan import scan
    from hscan.serialization import to_json, from_json

    result = scan('hscpp_require_lib("user32.lib")')
    json_str = to_json(result)
    assert from_json(json_str) == result

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from typing import Any

from hscan.result import ParseResult, Require, RequireKind

# Serialized kind names, lowercase enum member names
_KIND_NAMES: dict[RequireKind, str] = {kind: kind.name.lower() for kind in RequireKind}
_KINDS_BY_NAME: dict[str, RequireKind] = {name: kind for kind, name in _KIND_NAMES.items()}


def to_dict(result: ParseResult) -> dict[str, Any]:
    """Convert a ParseResult to a JSON-compatible dict.

    Args:
        result: Scan result.

    Returns:
        Dict with ``requires`` (list of ``{"kind", "paths"}``) and
        ``preprocessor_definitions``.

    """
    return {
        "requires": [
            {"kind": _KIND_NAMES[req.kind], "paths": list(req.paths)}
            for req in result.requires
        ],
        "preprocessor_definitions": list(result.preprocessor_definitions),
    }


def from_dict(data: dict[str, Any]) -> ParseResult:
    """Reconstruct a ParseResult from a dict.

    Args:
        data: Dict as produced by to_dict.

    Returns:
        ParseResult (frozen dataclass).

    Raises:
        ValueError: If a required key is missing, a kind is unknown, or a
            require has no paths.

    """
    try:
        raw_requires = data["requires"]
        definitions = data["preprocessor_definitions"]
    except KeyError as e:
        msg = f"Missing {e.args[0]!r} field in serialized ParseResult"
        raise ValueError(msg) from e

    requires = []
    for raw in raw_requires:
        if not isinstance(raw, dict):
            msg = f"Expected a require object, got {type(raw).__name__}"
            raise ValueError(msg)
        kind = _KINDS_BY_NAME.get(raw.get("kind"))
        if kind is None:
            msg = f"Unknown require kind: {raw.get('kind')!r}"
            raise ValueError(msg)
        paths = tuple(raw.get("paths", ()))
        if not paths:
            msg = f"Require of kind {_KIND_NAMES[kind]!r} has no paths"
            raise ValueError(msg)
        requires.append(Require(kind=kind, paths=paths))

    return ParseResult(
        requires=tuple(requires),
        preprocessor_definitions=tuple(definitions),
    )


def to_json(result: ParseResult, *, indent: int | None = None) -> str:
    """Serialize a ParseResult to a JSON string.

    Args:
        result: Scan result to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(result), sort_keys=True, indent=indent)


def from_json(data: str) -> ParseResult:
    """Deserialize a ParseResult from a JSON string.

    Raises:
        ValueError: If the JSON is invalid or doesn't describe a ParseResult.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object, got {type(raw).__name__}"
        raise ValueError(msg)
    return from_dict(raw)
