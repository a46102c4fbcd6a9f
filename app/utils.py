from typing import Any, Optional

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}

def parse_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    s = str(value if value is not None else "").strip().lower()
    if s in TRUE_VALUES:
        return True
    if s in FALSE_VALUES:
        return False
    return None

def payload_value(name: str = "value") -> Any:
    """Read one field from a JSON body or, failing that, the submitted form."""
    from flask import request
    data = request.get_json(silent=True)
    if isinstance(data, dict) and name in data:
        return data[name]
    return request.form.get(name)
