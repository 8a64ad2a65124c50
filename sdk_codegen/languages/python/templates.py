"""In-memory Jinja templates for Python output."""

MODELS_PROLOGUE = """\
{{ i0 }}# NOTE: Do not edit this file generated by {{ product }} SDK Codegen for API {{ api_version }}
{{ i0 }}from __future__ import annotations

{{ i0 }}import datetime
{{ i0 }}import enum
{{ i0 }}from typing import Any, Mapping, MutableMapping, Optional, Sequence

{{ i0 }}from {{ package }}.rtl import model
"""

METHODS_PROLOGUE = """\
{{ i0 }}# NOTE: Do not edit this file generated by {{ product }} SDK Codegen for API {{ api_version }}
{{ i0 }}from __future__ import annotations

{{ i0 }}import datetime
{{ i0 }}from typing import Any, MutableMapping, Optional, Sequence

{{ i0 }}from {{ package }}.rtl import api_methods
{% if type_names %}
{{ i0 }}from .models import (
{% for type_name in type_names %}
{{ i1 }}{{ type_name }},
{% endfor %}
{{ i0 }})
{% endif %}


{{ i0 }}class {{ sdk_class }}(api_methods.APIMethods):
{{ summary }}"""

GET_SET = """\
{{ i0 }}@property
{{ i0 }}def {{ name }}(self) -> Optional[{{ native }}]:
{% if doc %}
{{ i1 }}{{ doc }}
{% endif %}
{{ i1 }}if not self.{{ flag }} and {{ key }} in {{ map_var }}:
{{ i2 }}{{ assignment }}
{{ i2 }}self.{{ flag }} = True
{{ i1 }}return self.{{ field }}

{{ i0 }}@{{ name }}.setter
{{ i0 }}def {{ name }}(self, v: Optional[{{ native }}]):
{{ i1 }}self.{{ field }} = v
{{ i1 }}self.{{ flag }} = True
"""

ENUM_MAPPER = """\
{{ i0 }}class {{ name }}Mapper:
{{ i1 }}@staticmethod
{{ i1 }}def to_string_value(e: Optional[{{ name }}]) -> Optional[str]:
{% for value in values %}
{{ i2 }}if e is {{ name }}.{{ value.identifier }}:
{{ i3 }}return {{ value.literal }}
{% endfor %}
{{ i2 }}return None

{{ i1 }}@staticmethod
{{ i1 }}def from_string_value(s: Optional[str]) -> Optional[{{ name }}]:
{% for value in values %}
{{ i2 }}if s == {{ value.literal }}:
{{ i3 }}return {{ name }}.{{ value.identifier }}
{% endfor %}
{{ i2 }}return None
"""

TO_JSON = """\
{{ i0 }}def to_json(self) -> MutableMapping[str, Any]:
{{ i1 }}json: MutableMapping[str, Any] = {{ initial }}
{% for prop in properties %}
{{ i1 }}if self.{{ prop.flag }} or {{ prop.key }} in self._api_map_response:
{{ i2 }}json[{{ prop.key }}] = {{ prop.value }}
{% endfor %}
{{ i1 }}return json
"""

FROM_RESPONSE = """\
{{ i0 }}@classmethod
{{ i0 }}def from_response(
{{ i1 }}cls, api_raw_response: Any, api_response_content_type: Optional[str] = None
{{ i0 }}) -> {{ name }}:
{{ i1 }}instance = cls()
{{ i1 }}instance._api_raw_response = api_raw_response
{{ i1 }}instance._api_map_response = {}
{{ i1 }}if isinstance(api_raw_response, Mapping):
{{ i2 }}instance._api_map_response = dict(api_raw_response)
{{ i1 }}instance._api_response_content_type = api_response_content_type or ""
{{ i1 }}return instance
"""

METHOD = """\
{{ signature }}
{{ doc }}{{ i1 }}return self.{{ verb }}(
{{ i2 }}path={{ path }},
{{ i2 }}structure={{ structure }},
{% if query %}
{{ i2 }}query_params={
{% for item in query %}
{{ i3 }}{{ item.key }}: {{ item.name }},
{% endfor %}
{{ i2 }}},
{% endif %}
{% if body %}
{{ i2 }}body={{ body }},
{% endif %}
{{ i1 }})
"""

PYTHON_TEMPLATES = {
    "models_prologue": MODELS_PROLOGUE,
    "methods_prologue": METHODS_PROLOGUE,
    "get_set": GET_SET,
    "enum_mapper": ENUM_MAPPER,
    "to_json": TO_JSON,
    "from_response": FROM_RESPONSE,
    "method": METHOD,
}
